from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

_LOADED = False


def _candidates() -> list[Path]:
    project_root = Path(__file__).resolve().parents[2]
    return [
        project_root / ".env",
        Path.cwd() / ".env",
    ]


def load_env() -> Path | None:
    """Load the first ``.env`` found; variables already set in the process win."""
    global _LOADED
    if _LOADED:
        return None
    _LOADED = True

    for path in _candidates():
        if not path.exists():
            continue
        load_dotenv(dotenv_path=path, override=False)
        if os.getenv("IFIRMA_DEBUG") == "1":
            print(f"DEBUG: Environment loaded from {path}")
        return path
    return None
