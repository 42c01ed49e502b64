"""Text processing helpers for language model replies."""

from .json_reply import find_json_object, parse_json_object

__all__ = ["find_json_object", "parse_json_object"]
