"""Tests for finch.blob — Blob and File payloads."""

import pytest

from finch.blob import Blob, File


class TestBlob:
    def test_defaults(self) -> None:
        blob = Blob()
        assert blob.size == 0
        assert blob.content_type == ""

    def test_size(self) -> None:
        assert Blob(b"hello", "text/plain").size == 5

    def test_text(self) -> None:
        assert Blob("héllo".encode(), "text/plain").text() == "héllo"

    def test_slice_shares_payload(self) -> None:
        payload = bytearray(b"hello world")
        part = Blob(payload, "text/plain").slice(6)
        assert bytes(part.content) == b"world"
        payload[6:11] = b"WORLD"
        assert bytes(part.content) == b"WORLD"

    def test_slice_negative(self) -> None:
        assert Blob(b"hello").slice(-3, -1).text() == "ll"

    def test_slice_content_type(self) -> None:
        part = Blob(b"hello", "text/plain").slice(0, 2, "application/x-test")
        assert part.content_type == "application/x-test"

    def test_frozen(self) -> None:
        blob = Blob(b"x")
        with pytest.raises(AttributeError):
            blob.content_type = "text/plain"  # type: ignore[misc]

    async def test_read(self) -> None:
        assert await Blob(b"hello").read() == b"hello"

    async def test_save(self, tmp_path) -> None:
        dest = tmp_path / "output.bin"
        await Blob(b"hello").save(dest)
        assert dest.read_bytes() == b"hello"

    def test_repr(self) -> None:
        assert "5 bytes" in repr(Blob(b"hello", "text/plain"))


class TestFile:
    def test_is_blob(self) -> None:
        assert isinstance(File(b"x", "text/plain", "a.txt"), Blob)

    def test_from_blob_shares_payload(self) -> None:
        payload = b"data"
        blob = Blob(payload, "text/plain")
        file = File.from_blob(blob, "a.txt")
        assert file.content is payload
        assert file.content_type == "text/plain"
        assert file.name == "a.txt"

    def test_last_modified_ignored_in_equality(self) -> None:
        a = File(b"x", "text/plain", "a.txt", last_modified=1)
        b = File(b"x", "text/plain", "a.txt", last_modified=2)
        assert a == b

    def test_last_modified_default(self) -> None:
        assert File(b"x").last_modified > 0

    def test_repr(self) -> None:
        f = File(b"x" * 1024, "image/jpeg", "photo.jpg")
        assert "photo.jpg" in repr(f)
        assert "1024" in repr(f)
