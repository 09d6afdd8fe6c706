"""Generate Go Prometheus boilerplate from annotated Rust metric structs."""

__version__ = "0.1.0"
