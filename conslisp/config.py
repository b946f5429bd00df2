from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Resolve installation dir (conslisp package directory)
_CONSLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _CONSLISP_DIR / 'prelude'
_DEFAULT_DIVISION_PRECISION = 28
# Each interpreted call costs several host frames
_DEFAULT_RECURSION_LIMIT = 10000


def _int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_prelude_root() -> Path:
    raw = os.environ.get('CONSLISP_PRELUDE_PATH')
    p = Path(raw.strip()) if raw and raw.strip() else _DEFAULT_PRELUDE_DIR
    # treat as single directory; if a file path is set, return its parent
    return p if p.is_dir() else p.parent


def get_division_precision() -> int:
    """Significant digits kept by `/`; the other arithmetic builtins are exact."""
    value = _int_from_env('CONSLISP_DIVISION_PRECISION')
    return _DEFAULT_DIVISION_PRECISION if value is None else value


def get_recursion_limit() -> int:
    value = _int_from_env('CONSLISP_RECURSION_LIMIT')
    return _DEFAULT_RECURSION_LIMIT if value is None else value
