"""Data models for subconvert."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import Config


class _JsonModel(BaseModel):
    """Base for models mapped onto the JSON subtitle schema."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null behaves like a missing key and falls back to the zero value
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class TimedTextEvent(_JsonModel):
    """A single cue in the JSON body."""

    start: float = Field(0.0, alias="from")  # seconds
    end: float = Field(0.0, alias="to")  # seconds
    location: int = 0
    content: str = ""

    @classmethod
    def create(
        cls, start: float, end: float, location: int = 0, content: str = ""
    ) -> "TimedTextEvent":
        """Build an event from Python values."""
        return cls.model_validate(
            {"from": start, "to": end, "location": location, "content": content}
        )


class SubtitleDocument(_JsonModel):
    """JSON subtitle document: styling attributes plus the ordered body."""

    font_size: float = 0.0
    font_color: str = ""
    background_alpha: float = 0.0
    background_color: str = ""
    stroke: str = Field("", alias="Stroke")
    body: list[TimedTextEvent] = Field(default_factory=list)

    @classmethod
    def with_default_style(
        cls, body: list[TimedTextEvent], config: Config
    ) -> "SubtitleDocument":
        """Build a document carrying the configured default styling."""
        return cls.model_validate(
            {
                "font_size": config.font_size,
                "font_color": config.font_color,
                "background_alpha": config.background_alpha,
                "background_color": config.background_color,
                "Stroke": config.stroke,
                "body": body,
            }
        )


class SubtitleCue(BaseModel):
    """A single SRT entry with timing and display lines."""

    index: int
    start: float  # seconds
    end: float  # seconds
    lines: list[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Display lines joined with newlines."""
        return "\n".join(self.lines)

    @staticmethod
    def format_timestamp(seconds: float) -> str:
        """Format seconds as SRT timestamp (HH:MM:SS,mmm)."""
        millis = max(0, int(round(seconds * 1000)))
        secs, millis = divmod(millis, 1000)
        minutes, secs = divmod(secs, 60)
        hours, minutes = divmod(minutes, 60)
        return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"

    def to_srt_block(self) -> str:
        """Convert to SRT format block."""
        start_ts = self.format_timestamp(self.start)
        end_ts = self.format_timestamp(self.end)
        return f"{self.index}\n{start_ts} --> {end_ts}\n{self.text}\n"
