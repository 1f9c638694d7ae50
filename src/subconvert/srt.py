"""SRT/ASS subtitle file parsing and SRT generation."""

import re
from pathlib import Path

import pysubs2
from pysubs2.exceptions import Pysubs2Error

from .errors import ParseError, ReadError, WriteError
from .models import SubtitleCue

# pysubs2 format identifiers by file extension
FORMAT_IDS = {
    ".srt": "srt",
    ".ass": "ass",
}

# Stands in for backslashes in SRT text while pysubs2 parses it, so that
# literal "\N" or "\h" is not taken for an ASS escape
BACKSLASH_PLACEHOLDER = "\ue000"

# Override tags pysubs2 writes in place of SRT <i>, <b>, <u> and <s>
SRT_MARKUP_TAG = re.compile(r"\{\\[ibus][01]\}")


def _srt_lines(text: str) -> list[str]:
    """Split pysubs2 text loaded from SRT back into its display lines."""
    text = SRT_MARKUP_TAG.sub("", text)
    return [
        line.replace(BACKSLASH_PLACEHOLDER, "\\") for line in text.split(r"\N")
    ]


def parse_subtitles(content: str, format_id: str = "srt") -> list[SubtitleCue]:
    """Parse SRT or ASS content into SubtitleCue objects.

    Comment events are skipped and markup is stripped, so each cue holds
    only the visible text, one entry per display line. SRT text is
    otherwise kept as written; ASS escapes and override blocks are resolved.

    Args:
        content: Raw subtitle file content
        format_id: pysubs2 format identifier ("srt" or "ass")

    Returns:
        List of SubtitleCue objects, indexed from 1 in file order
    """
    is_srt = format_id == "srt"
    if is_srt:
        content = content.replace("\\", BACKSLASH_PLACEHOLDER)

    try:
        subs = pysubs2.SSAFile.from_string(content, format_=format_id)
    except (Pysubs2Error, ValueError) as e:
        raise ParseError(f"Invalid {format_id.upper()} subtitles: {e}") from e

    if is_srt and not subs.events and content.strip():
        raise ParseError("Invalid SRT subtitles: no timestamp lines found")

    cues = []
    for event in subs:
        if event.is_comment:
            continue
        lines = _srt_lines(event.text) if is_srt else event.plaintext.split("\n")
        cues.append(
            SubtitleCue(
                index=len(cues) + 1,
                start=event.start / 1000,
                end=event.end / 1000,
                lines=lines,
            )
        )
    return cues


def read_cues(path: str | Path, encoding: str = "utf-8") -> list[SubtitleCue]:
    """Read and parse an SRT or ASS file.

    Args:
        path: Path to the subtitle file
        encoding: Text encoding of the file

    Returns:
        List of SubtitleCue objects
    """
    path = Path(path)
    format_id = FORMAT_IDS.get(path.suffix.lower(), "srt")
    try:
        content = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid {encoding} text: {e}") from e
    except LookupError as e:
        raise ReadError(f"Cannot read {path}: {e}") from e
    except OSError as e:
        raise ReadError(f"Cannot read {path}: {e.strerror or e}") from e
    return parse_subtitles(content, format_id)


def subtitles_to_srt(cues: list[SubtitleCue]) -> str:
    """Convert cues to SRT format string.

    Every block, including the last, is followed by a blank line.
    """
    return "".join(f"{cue.to_srt_block()}\n" for cue in cues)


def write_srt(cues: list[SubtitleCue], path: str | Path, encoding: str = "utf-8") -> None:
    """Write cues to an SRT file, replacing any existing content.

    Args:
        cues: List of SubtitleCue objects
        path: Output file path
        encoding: Text encoding for the output
    """
    path = Path(path)
    content = subtitles_to_srt(cues)
    try:
        path.write_text(content, encoding=encoding)
    except (LookupError, UnicodeEncodeError) as e:
        raise WriteError(f"Cannot write {path}: {e}") from e
    except OSError as e:
        raise WriteError(f"Cannot write {path}: {e.strerror or e}") from e
