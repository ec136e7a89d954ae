from __future__ import annotations
import glob
import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from decision_tree.io.loaders.errors import LoaderError
from decision_tree.samples.file_spec import ProfileFileSpec
from decision_tree.samples.vacation import VacationPreferences
from decision_tree.utils.logging import log_calls


def _read_yaml_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    if not isinstance(data, dict):
        raise LoaderError(path, "Expected a mapping at the top level")
    return data


def _failing_profile(data: Dict[str, Any], exc: ValidationError) -> Optional[str]:
    """Name of the first profile entry a validation error points at, if it has one."""
    entries = data.get("profiles")
    for err in exc.errors():
        loc = err.get("loc", ())
        if len(loc) >= 2 and loc[0] == "profiles" and isinstance(loc[1], int) and isinstance(entries, list):
            entry = entries[loc[1]] if loc[1] < len(entries) else None
            if isinstance(entry, dict) and isinstance(entry.get("name"), str):
                return entry["name"]
    return None


def _profile_files(path: str) -> List[str]:
    if os.path.isfile(path):
        return [path]
    return sorted(glob.glob(os.path.join(path, "**", "*.yaml"), recursive=True))


@log_calls()
def load_profiles(path: str) -> List[VacationPreferences]:
    """Load vacation profiles from a YAML file or a directory tree of them.

    Expected format:
    profiles:
      - name: alex
        budget: 1000
        prefers_beach: true
    """
    if not os.path.exists(path):
        return []
    profiles: List[VacationPreferences] = []
    seen: Dict[str, str] = {}
    for fp in _profile_files(path):
        data = _read_yaml_file(fp)
        try:
            spec = ProfileFileSpec.model_validate(data)
        except ValidationError as exc:
            raise LoaderError(
                fp, "Invalid profile definition", cause=exc, profile=_failing_profile(data, exc)
            ) from exc
        for entry in spec.profiles:
            if entry.name in seen:
                raise LoaderError(
                    fp, f"Duplicate profile (first defined in {seen[entry.name]})", profile=entry.name
                )
            seen[entry.name] = fp
            profiles.append(entry.build())
    return profiles


__all__ = ["load_profiles"]
