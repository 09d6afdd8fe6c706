"""Go code lowering for extracted metric schemas."""

from .golang import GoLowering, lower
from .naming import go_type, json_tag, lower_first, to_upper_camel

__all__ = ["GoLowering", "go_type", "json_tag", "lower", "lower_first", "to_upper_camel"]
