"""In-memory fakes for testing.

Dict-backed implementations of the FileSystem and DeclarationSource
protocols. No disk access, instant operations for unit tests.
"""

from __future__ import annotations

from deployparams.reconciler.schemas import ParameterDeclaration


class FakeFileSystem:
    """Dict-backed FileSystem for testing."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self._files: dict[str, str] = dict(files or {})
        self.reads: list[str] = []

    def add(self, path: str, text: str) -> None:
        self._files[path] = text

    def exists(self, path: str) -> bool:
        return path in self._files

    def read_text(self, path: str) -> str:
        self.reads.append(path)
        try:
            return self._files[path]
        except KeyError:
            msg = f"No such file: {path!r}"
            raise FileNotFoundError(msg) from None


class FakeDeclarationSource:
    """Returns canned declarations per document path."""

    def __init__(
        self,
        declarations: dict[str, list[ParameterDeclaration]] | None = None,
    ) -> None:
        self._declarations = dict(declarations or {})
        self.calls: list[str] = []

    def used_parameters(
        self, document_path: str
    ) -> list[ParameterDeclaration]:
        self.calls.append(document_path)
        return list(self._declarations.get(document_path, []))
