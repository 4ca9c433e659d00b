"""Shared type aliases used across finch modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

from finch.blob import Blob, File

# What callers may store: text, or a binary payload
RawValue: TypeAlias = str | Blob

# What reads return: text, or a named file wrapping the stored payload
EntryValue: TypeAlias = str | File

# for_each callback — receives (value, name, store)
Visitor: TypeAlias = Callable[..., Any]
