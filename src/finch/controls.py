"""Form control descriptors consumed by the extractor.

A read-only, document-free description of a form's controls. Build
them from whatever document model you have (an HTML parser, a test
fixture) and hand them to ``FormData(controls)``.

``kind`` accepts any string. ``ControlKind.OTHER`` and any string that
is not a ``ControlKind`` value (``"email"``, ``"hidden"``, ...) are
text-like inputs submitted with their raw value.
"""

from dataclasses import dataclass
from enum import StrEnum

from finch.blob import File


class ControlKind(StrEnum):
    """Control types the extractor distinguishes.

    Values match the DOM ``type`` property of the element. ``OTHER``
    stands for every text-like type without a member of its own.
    """

    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT_ONE = "select-one"
    SELECT_MULTIPLE = "select-multiple"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    FILE = "file"
    SUBMIT = "submit"
    BUTTON = "button"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Option:
    """An ``<option>`` of a select control."""

    value: str
    selected: bool = False
    disabled: bool = False


@dataclass(frozen=True, slots=True)
class Control:
    """A single form control.

    Only the fields relevant to ``kind`` are read: ``checked`` for
    checkboxes and radios, ``options`` for selects, ``files`` for
    file inputs.

    Usage::

        Control("tags", ControlKind.SELECT_MULTIPLE, options=(
            Option("python", selected=True),
            Option("rust"),
        ))
    """

    name: str = ""
    kind: str = ControlKind.TEXT
    value: str = ""
    disabled: bool = False
    checked: bool = False
    options: tuple[Option, ...] = ()
    files: tuple[File, ...] = ()
