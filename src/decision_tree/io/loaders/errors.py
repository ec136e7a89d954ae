from __future__ import annotations

"""Shared loader error utilities."""

import os
from typing import Iterable, Optional

from pydantic import ValidationError


class LoaderError(RuntimeError):
    """A profile file failed to load; carries the file and, when known, the profile."""

    def __init__(
        self,
        file_path: str,
        message: str,
        *,
        cause: Exception | None = None,
        profile: Optional[str] = None,
    ):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        self.profile = profile
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        where = self._relative_path(self.file_path)
        if self.profile:
            where = f"{where}, profile '{self.profile}'"
        base = f"{self.message} ({where})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {self._format_validation_errors(self.cause.errors())}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    @staticmethod
    def _relative_path(path: str) -> str:
        try:
            return os.path.relpath(path)
        except ValueError:  # pragma: no cover - different drive on Windows
            return path

    @staticmethod
    def _format_validation_errors(errors: Iterable[dict]) -> str:
        # Only the first few problems; YAML typos tend to cascade
        error_list = list(errors)
        snippets = [
            f"{'.'.join(str(p) for p in err.get('loc', ())) or '<root>'}: {err.get('msg') or 'validation error'}"
            for err in error_list[:3]
        ]
        if len(error_list) > len(snippets):
            snippets.append(f"... ({len(error_list) - len(snippets)} more)")
        return "; ".join(snippets)

    def __str__(self) -> str:
        return self._build_message()
