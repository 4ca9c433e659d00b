"""Finch — ordered, multi-valued form data for Python.

Reproduces the web platform's FormData: repeated names, insertion
order, and binary values that read back as files.

Basic usage::

    from finch import Blob, FormData

    form = FormData()
    form.append("tag", "python")
    form.append("tag", "web")
    form.append("avatar", Blob(b"...", "image/png"), "me.png")

    form.get_all("tag")  # ["python", "web"]

From form controls::

    from finch import Control, ControlKind, FormData

    form = FormData([
        Control("q", value="finch"),
        Control("notes", ControlKind.TEXTAREA, value="a\\nb"),
    ])

Parsing a submitted body (``pip install finch[multipart]`` for multipart)::

    from finch import parse_form_data
    form = await parse_form_data(body, content_type)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Blob",
    "ConfigurationError",
    "Control",
    "ControlKind",
    "File",
    "FinchError",
    "FormConfig",
    "FormData",
    "FormParseError",
    "Option",
    "form_data_from",
    "normalize_newlines",
    "parse_form_data",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Blob": "finch.blob",
    "File": "finch.blob",
    "FormConfig": "finch.config",
    "Control": "finch.controls",
    "ControlKind": "finch.controls",
    "Option": "finch.controls",
    "ConfigurationError": "finch.errors",
    "FinchError": "finch.errors",
    "FormParseError": "finch.errors",
    "form_data_from": "finch.extraction",
    "normalize_newlines": "finch.extraction",
    "parse_form_data": "finch.parsing",
    "FormData": "finch.store",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import finch`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
