from .ParseFailure import ParseFailure  # noqa: F401

__all__ = ["ParseFailure"]
