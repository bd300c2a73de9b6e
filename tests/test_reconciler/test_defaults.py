"""Tests for compiled default extraction and kind mapping."""

from __future__ import annotations

import pytest

from deployparams.constants import ParameterKind
from deployparams.reconciler import (
    CompiledDefaultEntry,
    ExpressionDefault,
    LiteralDefault,
    ParameterDeclaration,
)
from deployparams.reconciler.defaults import (
    compiled_default_text,
    strip_expression_brackets,
)
from deployparams.reconciler.kinds import is_composite, resolve_kind


class TestStripExpressionBrackets:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("[resourceGroup().location]", "resourceGroup().location"),
            ("[[x]]", "[x]"),
            ("plain", "plain"),
            ("[open", "open"),
            ("close]", "close"),
            ("[]", ""),
        ],
    )
    def test_strip(self, raw: str, expected: str) -> None:
        assert strip_expression_brackets(raw) == expected


class TestCompiledDefaultText:
    def test_absent_entry(self) -> None:
        assert compiled_default_text({}, "x", is_expression=False) is None

    def test_entry_without_value(self) -> None:
        defaults = {"x": CompiledDefaultEntry("x", None)}
        assert compiled_default_text(defaults, "x", is_expression=True) is None

    def test_literal_not_stripped(self) -> None:
        defaults = {"x": CompiledDefaultEntry("x", "[a]")}
        assert compiled_default_text(defaults, "x", is_expression=False) == "[a]"

    def test_expression_stripped(self) -> None:
        defaults = {"x": CompiledDefaultEntry("x", "[a]")}
        assert compiled_default_text(defaults, "x", is_expression=True) == "a"


class TestKinds:
    @pytest.mark.parametrize(
        ("keyword", "kind"),
        [
            ("array", ParameterKind.ARRAY),
            ("bool", ParameterKind.BOOL),
            ("int", ParameterKind.INT),
            ("object", ParameterKind.OBJECT),
            ("string", ParameterKind.STRING),
            ("String", ParameterKind.UNKNOWN),
            ("securestring", ParameterKind.UNKNOWN),
            (None, ParameterKind.UNKNOWN),
        ],
    )
    def test_resolve_kind(
        self, keyword: str | None, kind: ParameterKind
    ) -> None:
        assert resolve_kind(keyword) == kind

    def test_composites(self) -> None:
        assert is_composite(ParameterKind.ARRAY)
        assert is_composite(ParameterKind.OBJECT)
        assert not is_composite(ParameterKind.STRING)
        assert not is_composite(ParameterKind.UNKNOWN)

    def test_kind_values_are_wire_names(self) -> None:
        assert ParameterKind.STRING == "String"
        assert ParameterKind.BOOL.value == "Bool"


class TestParameterDeclaration:
    def test_required(self) -> None:
        decl = ParameterDeclaration("a", "int")
        assert decl.has_default is False
        assert decl.default_is_non_literal_expression is False
        assert decl.kind == ParameterKind.INT

    def test_literal_default(self) -> None:
        decl = ParameterDeclaration("a", "string", LiteralDefault("'x'"))
        assert decl.has_default is True
        assert decl.default_is_non_literal_expression is False

    def test_expression_default(self) -> None:
        decl = ParameterDeclaration("a", "string", ExpressionDefault("f()"))
        assert decl.has_default is True
        assert decl.default_is_non_literal_expression is True
