"""Tests for error classification."""

from __future__ import annotations

import json

from deployparams.resilience.errors import (
    CompiledDefaultsGapError,
    DeploymentParametersError,
    ErrorClass,
    SourceReadError,
    TemplateDecodeError,
    ValuesFileDecodeError,
    ValuesFileReadError,
    classify_error,
    exit_code_for,
)

# ── classify_error ───────────────────────────────────────────


def test_template_decode_is_input_malformed() -> None:
    assert classify_error(TemplateDecodeError("bad")) == (
        ErrorClass.INPUT_MALFORMED
    )


def test_values_decode_is_input_malformed() -> None:
    err = ValuesFileDecodeError("p.json", "expected a JSON object")
    assert classify_error(err) == ErrorClass.INPUT_MALFORMED
    assert "p.json" in str(err)


def test_values_read_is_file_unreadable() -> None:
    err = ValuesFileReadError("p.json", "No such file")
    assert classify_error(err) == ErrorClass.FILE_UNREADABLE
    assert err.path == "p.json"


def test_source_read_is_file_unreadable() -> None:
    err = SourceReadError("main.bicep", "invalid start byte")
    assert classify_error(err) == ErrorClass.FILE_UNREADABLE
    assert exit_code_for(err) == 3
    assert str(err).startswith("Unable to read main.bicep")


def test_gap_is_internal_consistency() -> None:
    err = CompiledDefaultsGapError("location")
    assert classify_error(err) == ErrorClass.INTERNAL_CONSISTENCY
    assert "'location'" in str(err)


def test_base_error_is_unknown() -> None:
    assert classify_error(DeploymentParametersError("x")) == (
        ErrorClass.UNKNOWN
    )


def test_builtin_fallbacks() -> None:
    try:
        json.loads("{")
    except json.JSONDecodeError as exc:
        assert classify_error(exc) == ErrorClass.INPUT_MALFORMED
    assert classify_error(FileNotFoundError("x")) == (
        ErrorClass.FILE_UNREADABLE
    )
    assert classify_error(RuntimeError("x")) == ErrorClass.UNKNOWN


# ── exit_code_for ────────────────────────────────────────────


def test_exit_codes_are_distinct() -> None:
    codes = {
        exit_code_for(TemplateDecodeError("x")),
        exit_code_for(ValuesFileReadError("p", "x")),
        exit_code_for(CompiledDefaultsGapError("n")),
        exit_code_for(RuntimeError("x")),
    }
    assert codes == {1, 2, 3, 4}
