"""Collection config: which document list and noise-word file to index.

A collection is a JSON object:

    {"name": "sample", "documents": "docs.txt", "noise_words": "noisewords.txt"}

Relative paths resolve against the directory holding the collection file.
"""

from __future__ import annotations

import json
from pathlib import Path

REQUIRED_FIELDS = ("name", "documents", "noise_words")


# ── Syntactic Validation ────────────────────────────────────────────

def validate_collection(config: dict) -> list[str]:
    """Check required fields and types.  Returns list of error strings."""
    if not isinstance(config, dict):
        return ["Collection must be a JSON object."]

    errors: list[str] = []
    for field in REQUIRED_FIELDS:
        value = config.get(field)
        if not isinstance(value, str) or not value:
            errors.append(f"'{field}' is required and must be a non-empty string.")
    return errors


# ── Loading ─────────────────────────────────────────────────────────

def load_collection(collection_path: str) -> tuple[dict | None, list[str]]:
    """Load, validate and resolve a collection file.

    Returns (config, errors).  On success the 'documents' and
    'noise_words' entries are absolute paths; on failure config is None.
    """
    path = Path(collection_path)
    try:
        config = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return None, [f"Invalid JSON: {e}"]
    except FileNotFoundError:
        return None, [f"Collection file not found: {collection_path}"]
    except (OSError, UnicodeDecodeError) as e:
        return None, [f"Cannot read collection file {collection_path}: {e}"]

    errors = validate_collection(config)
    if errors:
        return None, errors

    base = path.resolve().parent
    resolved = dict(config)
    for field in ("documents", "noise_words"):
        target = base / config[field]
        if not target.is_file():
            errors.append(f"'{field}' points to a missing file: {target}")
        resolved[field] = str(target)

    if errors:
        return None, errors
    return resolved, []
