"""Populate form data from a traversal of form controls.

Applies the browser's "construct the entry list" rules to ``Control``
descriptors, in traversal order:

- **unnamed / disabled**: skipped
- **submit / button**: skipped
- **file**: one entry per selected file, or a single empty
  ``application/octet-stream`` file when none is selected
- **select-one / select-multiple**: one entry per selected, enabled option
- **checkbox / radio**: the control value, only when checked
- **textarea**: the value with newlines normalized to CRLF
- **anything else**: the raw value

Malformed controls never raise. Skipped controls are logged at DEBUG
on the ``finch.extraction`` logger.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from finch.blob import File
from finch.config import FormConfig
from finch.controls import Control, ControlKind
from finch.entries import RawEntry

if TYPE_CHECKING:
    from finch.store import FormData

logger = logging.getLogger("finch.extraction")

_NEWLINE = re.compile(r"\r\n?|\n")


def normalize_newlines(text: str) -> str:
    """Rewrite lone ``\\n`` and lone ``\\r`` to ``\\r\\n``.

    Existing ``\\r\\n`` pairs are kept as they are::

        normalize_newlines("a\\nb\\rc\\r\\nd")  # "a\\r\\nb\\r\\nc\\r\\nd"
    """
    return _NEWLINE.sub("\r\n", text)


def extract_entries(
    controls: Iterable[Control],
    config: FormConfig | None = None,
) -> Iterator[RawEntry]:
    """Yield the entries *controls* contribute, in traversal order.

    Pure: controls are only read, never modified.

    Args:
        controls: Form controls in document order.
        config: Extraction options. Defaults to ``FormConfig()``.

    Yields:
        One ``RawEntry`` per submitted value.
    """
    cfg = config or FormConfig()

    for control in controls:
        name = control.name
        if not name or control.disabled:
            logger.debug("Skipping unnamed or disabled control: %r", control)
            continue

        match control.kind:
            case ControlKind.SUBMIT | ControlKind.BUTTON:
                continue

            case ControlKind.FILE:
                if control.files:
                    for file in control.files:
                        yield RawEntry(name, file, file.name)
                else:
                    yield RawEntry(name, File(b"", cfg.default_file_type, ""), "")

            case ControlKind.SELECT_ONE | ControlKind.SELECT_MULTIPLE:
                for option in control.options:
                    if option.selected and not option.disabled:
                        yield RawEntry(name, option.value)

            case ControlKind.CHECKBOX | ControlKind.RADIO:
                if control.checked:
                    yield RawEntry(name, control.value)

            case ControlKind.TEXTAREA if cfg.normalize_newlines:
                yield RawEntry(name, normalize_newlines(control.value))

            case _:
                yield RawEntry(name, control.value)


def form_data_from(
    controls: Iterable[Control],
    config: FormConfig | None = None,
) -> "FormData":
    """Build a new ``FormData`` from *controls*.

    Equivalent to ``FormData(controls, config=config)``.
    """
    from finch.store import FormData

    return FormData(controls, config=config)
