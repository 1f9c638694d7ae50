"""Error types raised while converting subtitle files."""


class ConversionError(Exception):
    """Base class for all conversion failures."""


class ReadError(ConversionError):
    """Input file is missing or unreadable."""


class ParseError(ConversionError):
    """Input file content is malformed JSON or malformed subtitle text."""


class UnsupportedFormatError(ConversionError):
    """Input/output extension is unknown or the pairing is not supported."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f'"{extension}" file type is not supported')


class WriteError(ConversionError):
    """Output file cannot be created or written."""
