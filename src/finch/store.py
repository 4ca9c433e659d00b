"""Ordered, multi-valued form data.

``FormData`` follows the web platform's FormData contract: entries keep
their insertion order, names may repeat and are case-sensitive, and
binary values read back as ``File`` objects.

Entries live in an arena keyed by monotonic ids. ``_entries`` (a dict,
so insertion-ordered) is the entry sequence; ``_table`` maps each name
to the ids of its entries in insertion order. Deleting an entry drops
its id from both and never renumbers anything else.
"""

import types
from collections.abc import Iterable, Iterator

from finch._internal.types import EntryValue, RawValue, Visitor
from finch.blob import Blob
from finch.config import FormConfig
from finch.controls import Control
from finch.entries import RawEntry, normalize_entry
from finch.extraction import extract_entries


class FormData:
    """Mutable ordered collection of ``(name, value)`` entries.

    Iterating yields ``(name, value)`` pairs, one per entry, so duplicate
    names appear once per value. ``keys()`` yields each distinct name once.

    Usage::

        form = FormData()
        form.append("tag", "python")
        form.append("tag", "web")
        form.append("avatar", Blob(b"...", "image/png"), "me.png")

        form.get("tag")       # "python"
        form.get_all("tag")   # ["python", "web"]
        form.get("avatar")    # File('me.png', 'image/png', 3 bytes)

    Pass form controls to pre-populate it::

        form = FormData([Control("q", value="finch")])
    """

    __slots__ = ("_entries", "_next_id", "_table")

    def __init__(
        self,
        controls: Iterable[Control] | None = None,
        *,
        config: FormConfig | None = None,
    ) -> None:
        self._entries: dict[int, RawEntry] = {}
        self._table: dict[str, list[int]] = {}
        self._next_id = 0

        if controls is not None:
            for entry in extract_entries(controls, config):
                self._add(entry)

    # -- Mutation --

    def append(self, name: str, value: RawValue, filename: str | None = None) -> None:
        """Add an entry at the end. Existing entries for *name* are kept.

        Names, and values that are not a ``Blob``, are converted with
        ``str()``. Lookups convert names the same way.
        *filename* is only used for ``Blob`` values.
        """
        if not isinstance(value, Blob):
            value = str(value)
        self._add(RawEntry(str(name), value, filename))

    def delete(self, name: str) -> None:
        """Remove every entry for *name*. Does nothing if there is none."""
        ids = self._table.pop(str(name), None)
        if ids is None:
            return
        for entry_id in reversed(ids):
            del self._entries[entry_id]

    def set(self, name: str, value: RawValue, filename: str | None = None) -> None:
        """Replace all entries for *name* with a single entry at the end."""
        self.delete(name)
        self.append(name, value, filename)

    def _add(self, entry: RawEntry) -> None:
        entry_id = self._next_id
        self._next_id += 1
        self._entries[entry_id] = entry
        self._table.setdefault(entry.name, []).append(entry_id)

    # -- Lookup --

    def get(self, name: str) -> EntryValue | None:
        """Return the first value for *name*, or ``None`` if missing."""
        ids = self._table.get(str(name))
        if not ids:
            return None
        entry = self._entries[ids[0]]
        return normalize_entry(entry.value, entry.filename)

    def get_all(self, name: str) -> list[EntryValue]:
        """Return every value for *name* in insertion order."""
        return [
            normalize_entry(entry.value, entry.filename)
            for entry in (self._entries[i] for i in self._table.get(str(name), ()))
        ]

    def has(self, name: str) -> bool:
        """Return True if at least one entry is named *name*."""
        return bool(self._table.get(str(name)))

    # -- Iteration --

    def for_each(self, callback: Visitor, this_arg: object = None) -> None:
        """Call ``callback(value, name, self)`` for every entry, in order.

        When *this_arg* is given, *callback* is bound to it first, so it
        receives *this_arg* as its leading argument.
        """
        if this_arg is not None:
            callback = types.MethodType(callback, this_arg)
        for name, value in self:
            callback(value, name, self)

    def entries(self) -> Iterator[tuple[str, EntryValue]]:
        """Iterate ``(name, value)`` pairs, one per entry."""
        return iter(self)

    def keys(self) -> Iterator[str]:
        """Iterate distinct names in first-insertion order."""
        yield from tuple(self._table)

    def values(self) -> Iterator[EntryValue]:
        """Iterate values, one per entry."""
        for _, value in self:
            yield value

    def __iter__(self) -> Iterator[tuple[str, EntryValue]]:
        for entry in tuple(self._entries.values()):
            yield entry.name, normalize_entry(entry.value, entry.filename)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return self.has(name)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        items = ", ".join(f"({name!r}, {value!r})" for name, value in self)
        return f"FormData([{items}])"
