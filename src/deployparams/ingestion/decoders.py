"""Decode compiled template text and parameters files into core inputs."""

from __future__ import annotations

import json
from typing import Any

from deployparams.constants import (
    PARAMETERS_ENVELOPE_MARKERS,
    TEMPLATE_DEFAULT_VALUE_KEY,
    TEMPLATE_PARAMETERS_KEY,
)
from deployparams.reconciler.schemas import CompiledDefaultEntry
from deployparams.resilience.errors import (
    TemplateDecodeError,
    ValuesFileDecodeError,
)


def decode_compiled_defaults(
    template_text: str,
) -> dict[str, CompiledDefaultEntry]:
    """Read each parameter's ``defaultValue`` from a compiled template.

    Parameters without a ``defaultValue`` key are omitted. Strings pass
    through unchanged; other JSON values are rendered as compact JSON
    text; ``null`` becomes an entry with no value.

    Raises :class:`TemplateDecodeError` when the text is not a JSON
    object or its ``parameters`` section is not an object.
    """
    try:
        template = json.loads(template_text)
    except json.JSONDecodeError as exc:
        msg = f"Compiled template is not valid JSON: {exc}"
        raise TemplateDecodeError(msg) from exc

    if not isinstance(template, dict):
        msg = "Compiled template must be a JSON object"
        raise TemplateDecodeError(msg)

    section = template.get(TEMPLATE_PARAMETERS_KEY)
    if section is None:
        return {}
    if not isinstance(section, dict):
        msg = (
            f"Compiled template '{TEMPLATE_PARAMETERS_KEY}' "
            "section must be an object"
        )
        raise TemplateDecodeError(msg)

    entries: dict[str, CompiledDefaultEntry] = {}
    for name, definition in section.items():
        if not isinstance(definition, dict):
            continue
        if TEMPLATE_DEFAULT_VALUE_KEY not in definition:
            continue
        entries[name] = CompiledDefaultEntry(
            name=name,
            raw_default_value=_render_value(
                definition[TEMPLATE_DEFAULT_VALUE_KEY]
            ),
        )
    return entries


def decode_provided_values(
    text: str, *, path: str = "<parameters file>"
) -> frozenset[str]:
    """Return the parameter names a parameters file supplies.

    Accepts the standard deployment parameters envelope (``$schema`` /
    ``contentVersion`` with a ``parameters`` object) or a flat mapping
    of name to value. Only the names matter; values are not inspected.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValuesFileDecodeError(path, str(exc)) from exc

    if not isinstance(document, dict):
        raise ValuesFileDecodeError(path, "expected a JSON object")

    if _is_envelope(document):
        section = document.get(TEMPLATE_PARAMETERS_KEY, {})
        if not isinstance(section, dict):
            raise ValuesFileDecodeError(
                path,
                f"'{TEMPLATE_PARAMETERS_KEY}' must be an object",
            )
        return frozenset(section)
    return frozenset(document)


def _is_envelope(document: dict[str, Any]) -> bool:
    return any(key in document for key in PARAMETERS_ENVELOPE_MARKERS)


def _render_value(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
