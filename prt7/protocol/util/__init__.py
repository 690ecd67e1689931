from .TextUtil import firstField, parseLenientInt  # noqa: F401

__all__ = ["firstField", "parseLenientInt"]
