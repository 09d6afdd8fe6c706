"""Schema extraction and linking."""

from .extractor import SchemaExtractor, extract
from .linker import LINK_DEPTH, link

__all__ = ["LINK_DEPTH", "SchemaExtractor", "extract", "link"]
