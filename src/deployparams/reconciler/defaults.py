"""Extract display text for compiled default values."""

from __future__ import annotations

from collections.abc import Mapping

from deployparams.constants import EXPRESSION_CLOSE, EXPRESSION_OPEN
from deployparams.reconciler.schemas import CompiledDefaultEntry


def strip_expression_brackets(raw: str) -> str:
    """Remove one leading ``[`` and one trailing ``]`` if present.

    Only called when the declaration already says the default is an
    expression; the wrapping alone never decides that.
    """
    text = raw
    if text.startswith(EXPRESSION_OPEN):
        text = text[len(EXPRESSION_OPEN):]
    if text.endswith(EXPRESSION_CLOSE):
        text = text[: -len(EXPRESSION_CLOSE)]
    return text


def compiled_default_text(
    compiled_defaults: Mapping[str, CompiledDefaultEntry],
    name: str,
    *,
    is_expression: bool,
) -> str | None:
    """Return the display text of ``name``'s compiled default, or None.

    None means the compiler produced no usable default for the name.
    """
    entry = compiled_defaults.get(name)
    if entry is None or entry.raw_default_value is None:
        return None
    if is_expression:
        return strip_expression_brackets(entry.raw_default_value)
    return entry.raw_default_value
