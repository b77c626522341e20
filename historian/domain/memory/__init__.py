"""User memories posted to the campus backend."""

from historian.domain.memory.model import Memory, encode_image, format_timestamp

__all__ = ["Memory", "encode_image", "format_timestamp"]
