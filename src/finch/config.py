"""Form configuration.

FormConfig is a frozen dataclass: immutable after creation, shared by
the control extractor and the body parser.
"""

import codecs
from dataclasses import dataclass

from finch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Extraction and parsing options. Immutable after creation.

    All fields have defaults matching browser behaviour::

        config = FormConfig(charset="latin-1")
    """

    # MIME type for empty file inputs and file parts without Content-Type
    default_file_type: str = "application/octet-stream"

    # Rewrite lone LF / CR in textarea values to CRLF
    normalize_newlines: bool = True

    # Text decoding for submitted bodies
    charset: str = "utf-8"

    def __post_init__(self) -> None:
        if not self.default_file_type:
            msg = "default_file_type must be a non-empty MIME type"
            raise ConfigurationError(msg)
        try:
            codecs.lookup(self.charset)
        except LookupError:
            msg = f"Unknown charset: {self.charset!r}"
            raise ConfigurationError(msg) from None
