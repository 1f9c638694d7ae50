"""Conversion between JSON subtitle documents and SRT/ASS files."""

import re
from enum import Enum
from pathlib import Path
from typing import Callable

from .config import Config
from .errors import UnsupportedFormatError
from .jsonsub import read_json, write_json
from .models import SubtitleCue, SubtitleDocument, TimedTextEvent
from .srt import read_cues, write_srt

LINE_BREAK = re.compile(r"\r\n|\r|\n")


class SubtitleFormat(Enum):
    """Supported subtitle file formats, keyed by extension."""

    JSON = ".json"
    SRT = ".srt"
    ASS = ".ass"

    @classmethod
    def from_path(cls, path: str | Path) -> "SubtitleFormat":
        """Resolve the format from a file extension, ignoring case."""
        extension = Path(path).suffix.lower()
        try:
            return cls(extension)
        except ValueError:
            raise UnsupportedFormatError(extension) from None


def json_to_srt(
    input_path: str | Path, output_path: str | Path, config: Config | None = None
) -> int:
    """Convert a JSON subtitle document to SRT.

    Styling attributes are dropped. Newlines embedded in an entry's content
    become separate SRT display lines.

    Returns:
        Number of cues written
    """
    config = config or Config()
    document = read_json(input_path)

    cues = [
        SubtitleCue(
            index=i,
            start=event.start,
            end=event.end,
            lines=LINE_BREAK.split(event.content),
        )
        for i, event in enumerate(document.body, start=1)
    ]

    write_srt(cues, output_path, encoding=config.encoding)
    return len(cues)


def srt_to_json(
    input_path: str | Path, output_path: str | Path, config: Config | None = None
) -> int:
    """Convert an SRT or ASS file to a JSON subtitle document.

    The document gets the configured default styling and every entry gets
    the configured location, since neither format carries them.

    Returns:
        Number of cues written
    """
    config = config or Config()
    cues = read_cues(input_path, encoding=config.encoding)

    body = [
        TimedTextEvent.create(
            start=cue.start,
            end=cue.end,
            location=config.location,
            content=cue.text,
        )
        for cue in cues
    ]

    write_json(SubtitleDocument.with_default_style(body, config), output_path)
    return len(body)


Converter = Callable[[str | Path, str | Path, Config | None], int]

# Source format -> (only accepted target format, converter)
CONVERSIONS: dict[SubtitleFormat, tuple[SubtitleFormat, Converter]] = {
    SubtitleFormat.JSON: (SubtitleFormat.SRT, json_to_srt),
    SubtitleFormat.SRT: (SubtitleFormat.JSON, srt_to_json),
    SubtitleFormat.ASS: (SubtitleFormat.JSON, srt_to_json),
}


def convert(
    input_path: str | Path, output_path: str | Path, config: Config | None = None
) -> int:
    """Convert input_path to output_path, choosing direction by extension.

    Both extensions are checked before anything is read or written.

    Returns:
        Number of cues written
    """
    source = SubtitleFormat.from_path(input_path)
    target, converter = CONVERSIONS[source]

    output_extension = Path(output_path).suffix.lower()
    if output_extension != target.value:
        raise UnsupportedFormatError(output_extension)

    return converter(input_path, output_path, config)
