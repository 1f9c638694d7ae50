"""Configuration management via environment variables."""

import codecs
import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        number = float(value)
    except ValueError:
        number = math.nan
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return number


def _env_encoding(name: str, default: str) -> str:
    value = os.getenv(name) or default
    try:
        codecs.lookup(value)
    except LookupError:
        raise ValueError(f"{name} is not a known encoding, got {value!r}") from None
    return value


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class Config:
    """Application configuration loaded from environment.

    The style fields are written into every JSON document produced from
    SRT/ASS input, since those formats carry no such metadata.
    """

    encoding: str = "utf-8"
    font_size: float = 0.4
    font_color: str = "#FFFFFF"
    background_alpha: float = 0.5
    background_color: str = "#9C27B0"
    stroke: str = "none"
    location: int = 2

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        load_dotenv()
        return cls(
            encoding=_env_encoding("SUBCONVERT_ENCODING", "utf-8"),
            font_size=_env_float("SUBCONVERT_FONT_SIZE", 0.4),
            font_color=os.getenv("SUBCONVERT_FONT_COLOR", "#FFFFFF"),
            background_alpha=_env_float("SUBCONVERT_BACKGROUND_ALPHA", 0.5),
            background_color=os.getenv("SUBCONVERT_BACKGROUND_COLOR", "#9C27B0"),
            stroke=os.getenv("SUBCONVERT_STROKE", "none"),
            location=_env_int("SUBCONVERT_LOCATION", 2),
        )
