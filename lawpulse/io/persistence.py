"""JSON file utilities for LawPulse.

Loads dataset files and serialises view dataclasses for the CLI.
No business logic — file I/O and encoding only.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class _DataclassEncoder(json.JSONEncoder):
    """JSON encoder that handles dataclasses, dates and Path objects."""

    def default(self, obj: Any) -> Any:
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        if isinstance(obj, date):
            return obj.isoformat()
        if isinstance(obj, Path):
            return str(obj)
        return super().default(obj)


def dumps_json(data: Any, indent: int = 2) -> str:
    """Serialize views (dataclasses, dicts, lists) to a JSON string.

    Infinite percentage changes are written as the JSON5 token ``Infinity``,
    which ``json.loads`` reads back as ``math.inf``.

    Args:
        data: Data to serialize.
        indent: JSON indentation level (default: 2).

    Returns:
        JSON text with non-ASCII characters preserved.
    """
    return json.dumps(data, indent=indent, ensure_ascii=False, cls=_DataclassEncoder)


def load_json(path: str | Path) -> Optional[Any]:
    """Load and parse a JSON file.

    Returns None if the file does not exist or cannot be parsed.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed Python object, or None on error.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("JSON file not found: %s", path)
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to load JSON from %s: %s", path, exc)
        return None
