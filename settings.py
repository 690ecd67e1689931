from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, field_validator


logger = logging.getLogger(__name__)


CONFIG_ENV = "PRT7_CONFIG"


class DecoderSettings(BaseModel):
    source: Optional[str] = None
    mode: Literal["auto", "sim", "serial"] = "auto"
    baudrate: int = 9600
    log_level: str = "INFO"
    log_file: Optional[str] = None
    show_rotor: bool = True

    @field_validator("baudrate")
    @classmethod
    def _positive_baudrate(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("baudrate must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(path: Union[str, os.PathLike, None] = None) -> DecoderSettings:
    """Load settings from a JSON file.

    Falls back to the file named by ``PRT7_CONFIG`` and then to the defaults.
    A missing or invalid file raises; an unset path does not.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV) or None
    if path is None:
        return DecoderSettings()
    text = Path(path).read_text(encoding="utf-8")
    settings = DecoderSettings.model_validate_json(text)
    logger.debug("Loaded settings from %s: %r", path, settings)
    return settings
