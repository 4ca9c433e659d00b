"""Form body parsing — URL-encoded and multipart.

Turns a submitted request body back into ``FormData``, keeping entry
order and repeated names. File parts become ``File`` entries.

``python-multipart`` is an optional dependency (``pip install finch[multipart]``).
URL-encoded bodies use stdlib ``urllib.parse`` — no extra dependency.
"""

import logging
from typing import Any

from finch.blob import File
from finch.config import FormConfig
from finch.errors import ConfigurationError, FormParseError
from finch.store import FormData

logger = logging.getLogger("finch.parsing")


async def parse_form_data(
    body: bytes,
    content_type: str,
    *,
    config: FormConfig | None = None,
) -> FormData:
    """Parse a form body into FormData.

    Supports:
    - ``application/x-www-form-urlencoded`` (stdlib, no extra dependency)
    - ``multipart/form-data`` (requires ``python-multipart``)

    Args:
        body: Raw request body bytes.
        content_type: The Content-Type header value.
        config: Decoding options. Defaults to ``FormConfig()``.

    Returns:
        A new FormData holding the submitted entries in body order.

    Raises:
        ConfigurationError: If multipart parsing is needed but
            ``python-multipart`` is not installed.
        FormParseError: If the content type is not a form encoding or
            the body is malformed.
    """
    cfg = config or FormConfig()
    ct_lower = content_type.lower().split(";")[0].strip()

    if ct_lower == "application/x-www-form-urlencoded":
        return _parse_urlencoded(body, cfg)

    if ct_lower == "multipart/form-data":
        return await _parse_multipart(body, content_type, cfg)

    msg = f"Unsupported form content type: {content_type!r}"
    raise FormParseError(msg)


def _parse_urlencoded(body: bytes, cfg: FormConfig) -> FormData:
    """Parse URL-encoded form data using stdlib."""
    from urllib.parse import parse_qsl

    try:
        text = body.decode(cfg.charset)
    except UnicodeDecodeError as e:
        msg = f"Form body is not valid {cfg.charset}"
        raise FormParseError(msg) from e

    form = FormData()
    for name, value in parse_qsl(text, keep_blank_values=True, encoding=cfg.charset):
        form.append(name, value)

    logger.debug("Parsed %d url-encoded entries", len(form))
    return form


async def _parse_multipart(body: bytes, content_type: str, cfg: FormConfig) -> FormData:
    """Parse multipart form data using python-multipart.

    Raises ``ConfigurationError`` if ``python-multipart`` is not installed.
    """
    try:
        from python_multipart.exceptions import MultipartParseError
        from python_multipart.multipart import MultipartParser, parse_options_header
    except ImportError:
        msg = (
            "Multipart form parsing requires the 'python-multipart' package. "
            "Install it with: pip install finch[multipart]"
        )
        raise ConfigurationError(msg) from None

    _, options = parse_options_header(content_type.encode("latin-1"))
    boundary = options.get(b"boundary")
    if not boundary:
        msg = "Multipart form data missing boundary parameter"
        raise FormParseError(msg)

    form = FormData()

    # Current part state
    headers: dict[str, str] = {}
    header_field = bytearray()
    header_value = bytearray()
    part_data = bytearray()

    def on_part_begin() -> None:
        nonlocal part_data
        headers.clear()
        part_data = bytearray()

    def on_header_field(data: bytes, start: int, end: int) -> None:
        header_field.extend(data[start:end])

    def on_header_value(data: bytes, start: int, end: int) -> None:
        header_value.extend(data[start:end])

    def on_header_end() -> None:
        headers[header_field.decode("latin-1").lower()] = header_value.decode("latin-1")
        header_field.clear()
        header_value.clear()

    def on_part_data(data: bytes, start: int, end: int) -> None:
        part_data.extend(data[start:end])

    def on_part_end() -> None:
        _, params = parse_options_header(headers.get("content-disposition", ""))
        raw_name = params.get(b"name")
        if raw_name is None:
            logger.debug("Skipping multipart part without a name")
            return

        name = raw_name.decode(cfg.charset, errors="replace")
        raw_filename = params.get(b"filename")

        if raw_filename is not None:
            filename = raw_filename.decode(cfg.charset, errors="replace")
            file_type = headers.get("content-type", "").strip() or cfg.default_file_type
            form.append(name, File(bytes(part_data), file_type, filename), filename)
        else:
            form.append(name, part_data.decode(cfg.charset, errors="replace"))

    callbacks: dict[str, Any] = {
        "on_part_begin": on_part_begin,
        "on_part_data": on_part_data,
        "on_part_end": on_part_end,
        "on_header_field": on_header_field,
        "on_header_value": on_header_value,
        "on_header_end": on_header_end,
    }

    parser = MultipartParser(boundary, callbacks)
    try:
        parser.write(body)
        parser.finalize()
    except MultipartParseError as e:
        msg = f"Malformed multipart body: {e}"
        raise FormParseError(msg) from e

    logger.debug("Parsed %d multipart entries", len(form))
    return form
