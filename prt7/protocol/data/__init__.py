"""Long-lived decoder state: the cipher wheel and the message accumulator."""

from .Rotor import Rotor  # noqa: F401
from .Payload import Payload  # noqa: F401

__all__ = [
    "Rotor",
    "Payload",
]
