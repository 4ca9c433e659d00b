"""Stored entries and their read-time projection.

A ``RawEntry`` is what the store keeps. ``normalize_entry`` turns its
value into what callers see: text unchanged, binary wrapped as a
``File``. Storage is never touched by a read.
"""

from dataclasses import dataclass

from finch._internal.types import EntryValue, RawValue
from finch.blob import Blob, File


@dataclass(frozen=True, slots=True)
class RawEntry:
    """One ``(name, value, filename)`` record.

    ``filename`` only matters when ``value`` is a ``Blob``.
    """

    name: str
    value: RawValue
    filename: str | None = None


def normalize_entry(value: RawValue, filename: str | None = None) -> EntryValue:
    """Project a stored value to its externally visible form.

    Binary values become a ``File`` sharing the same payload object,
    named *filename* or ``""`` when none was stored.
    """
    if isinstance(value, Blob):
        return File.from_blob(value, filename or "")
    return value
