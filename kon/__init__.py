"""Small building blocks: number parsing, buffer views, optional values, splitting and message rings."""

__version__ = "0.1.0"
__all__ = ["base16", "conv", "dbuf", "file_helper", "string_helper", "maybe", "vlm_ring"]