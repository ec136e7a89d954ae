from __future__ import annotations

"""Utilities for resolving default input locations."""

from pathlib import Path


def profiles_path(path: str | None) -> str:
    return path or str(Path.cwd() / "profiles")


__all__ = ["profiles_path"]
