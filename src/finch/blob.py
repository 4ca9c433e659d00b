"""Binary values stored in form data.

``Blob`` is an immutable byte payload with a MIME type. ``File`` adds a
name and a modification time. Both hold a reference to the payload
object they were created with; slicing and wrapping never copy bytes.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path

Payload = bytes | bytearray | memoryview


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class Blob:
    """An opaque byte payload with a MIME type.

    Usage::

        blob = Blob(b"hello", "text/plain")
        blob.size  # 5
    """

    content: Payload = b""
    content_type: str = ""

    @property
    def size(self) -> int:
        """Payload length in bytes."""
        return memoryview(self.content).nbytes

    def slice(self, start: int = 0, end: int | None = None, content_type: str = "") -> "Blob":
        """Return a Blob viewing ``content[start:end]`` without copying.

        Negative offsets count from the end, as with sequence slicing.
        """
        return Blob(memoryview(self.content)[start:end], content_type)

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the payload, replacing undecodable bytes."""
        return bytes(self.content).decode(encoding, errors="replace")

    async def read(self) -> bytes:
        """Return the payload as bytes."""
        return bytes(self.content)

    async def save(self, path: Path) -> None:
        """Write the payload to disk.

        Args:
            path: Destination file path. Parent directories must exist.
        """
        path.write_bytes(self.content)

    def __repr__(self) -> str:
        return f"Blob({self.content_type!r}, {self.size} bytes)"


@dataclass(frozen=True, slots=True)
class File(Blob):
    """A named Blob, as produced by file inputs and uploads."""

    name: str = ""
    last_modified: int = field(default_factory=_now_ms, compare=False)

    @classmethod
    def from_blob(cls, blob: Blob, name: str) -> "File":
        """Wrap *blob*'s payload and MIME type under *name*."""
        return cls(blob.content, blob.content_type, name)

    def __repr__(self) -> str:
        return f"File({self.name!r}, {self.content_type!r}, {self.size} bytes)"
