from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from conslisp.config import get_prelude_root

logger = logging.getLogger(__name__)

PRELUDE_FILES = ('std.lisp',)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_paths() -> list[Path]:
    root = get_prelude_root()
    return [root / name for name in PRELUDE_FILES]


# Prelude convenience loader (std.lisp from the configured prelude root)

def load_prelude(itp: _HasEvalPrelude) -> None:
    found = False
    for path in prelude_paths():
        if not path.is_file():
            continue
        logger.debug("Loading prelude %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
        found = True
    if not found:
        raise FileNotFoundError(f"No prelude found under {get_prelude_root()}")
