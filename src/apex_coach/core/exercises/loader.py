"""
YAML → ExerciseMetadata loader.

Loads the static exercise table from the bundled
``src/apex_coach/exercises.yaml``.  Each top-level key is an exercise name
whose value holds ``reasoning``, ``alternatives`` and an optional
``previous_session`` mapping.

User overrides: a file with the same layout at
``$APEX_COACH_HOME/exercises.yaml`` (default ``~/.apex-coach/``) is
deep-merged over the bundled table, so only changed keys need to be
listed.  A user entry whose name is not in the bundled table is added.

Usage (internal, called by registry.py):
    from .loader import load_exercise_table
    table = load_exercise_table()   # dict or None on failure
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path

import yaml
from loguru import logger

from ..config import DATA_DIR_ENV, DEFAULT_DATA_DIR_NAME
from .base import ExerciseMetadata

_REQUIRED_FIELDS: frozenset[str] = frozenset({"reasoning", "alternatives"})


def metadata_from_dict(name: str, d: dict) -> ExerciseMetadata:
    """Convert a raw dict (from YAML) to ExerciseMetadata.

    Raises ValueError if a required field is absent or malformed.
    """
    missing = _REQUIRED_FIELDS - set(d)
    if missing:
        raise ValueError(f"ExerciseMetadata missing fields: {sorted(missing)}")

    alternatives = d["alternatives"] or []
    if not isinstance(alternatives, list):
        raise ValueError(f"alternatives must be a list, got {type(alternatives).__name__}")

    previous = d.get("previous_session") or {}
    if previous and not {"weight", "reps"} <= set(previous):
        raise ValueError("previous_session needs both 'weight' and 'reps'")

    return ExerciseMetadata(
        name=str(name),
        reasoning=str(d["reasoning"]).strip(),
        alternatives=tuple(str(a) for a in alternatives),
        previous_weight=float(previous["weight"]) if previous else None,
        previous_reps=int(previous["reps"]) if previous else None,
    )


def _load_yaml_file(path: Path) -> dict:
    """Load a YAML file; return {} on a parse or read error."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"apex-coach: could not read {path} ({exc})", stacklevel=2)
        return {}
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def get_bundled_table_path() -> Path:
    """Return the path of the bundled exercises.yaml."""
    # loader.py lives at src/apex_coach/core/exercises/loader.py
    return Path(__file__).parent.parent.parent / "exercises.yaml"


def get_user_table_path() -> Path | None:
    """Return the user override table if it exists, else None."""
    home = os.environ.get(DATA_DIR_ENV)
    base = Path(home) if home else Path.home() / DEFAULT_DATA_DIR_NAME
    p = base.expanduser() / "exercises.yaml"
    return p if p.is_file() else None


def load_exercise_table(
    bundled_path: Path | None = None,
    user_path: Path | None = None,
) -> dict[str, ExerciseMetadata] | None:
    """Return {exercise_name: ExerciseMetadata} from the YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/apex_coach/exercises.yaml
    2. User override table, when present

    Malformed entries are skipped with a warning.  Returns None when
    nothing could be loaded so the registry can report the failure.
    """
    bundled_path = bundled_path or get_bundled_table_path()
    if user_path is None:
        user_path = get_user_table_path()

    raw = _load_yaml_file(bundled_path) if bundled_path.is_file() else {}
    if user_path is not None:
        user_raw = _load_yaml_file(user_path)
        if user_raw:
            logger.debug("Merging user exercise table from {}", user_path)
            raw = _deep_merge(raw, user_raw)

    table: dict[str, ExerciseMetadata] = {}
    for name, entry in raw.items():
        if not isinstance(entry, dict):
            warnings.warn(f"apex-coach: skipping exercise '{name}' (not a mapping)", stacklevel=2)
            continue
        try:
            table[str(name)] = metadata_from_dict(name, entry)
        except (ValueError, TypeError) as exc:
            warnings.warn(f"apex-coach: skipping exercise '{name}' ({exc})", stacklevel=2)

    logger.debug("Loaded {} exercises into the metadata table", len(table))
    return table or None
