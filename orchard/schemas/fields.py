"""Shared field types for request schemas."""

from typing import Annotated, Any

from pydantic import BeforeValidator


def coerce_checkbox(value: Any) -> bool:
    """Coerce an HTML checkbox submission to a boolean.

    A real ``True`` passes through and the literal string ``"on"`` (what
    browsers send for a ticked box) maps to ``True``. Anything else,
    including ``False``, ``None`` and strings such as ``"off"`` or
    ``"true"``, maps to ``False``.
    """
    if value is True:
        return True
    return isinstance(value, str) and value == "on"


Checkbox = Annotated[bool, BeforeValidator(coerce_checkbox)]
OptionalCheckbox = Annotated[bool | None, BeforeValidator(coerce_checkbox)]
