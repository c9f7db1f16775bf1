"""Caller introspection: find the first stack frame outside this library."""
from __future__ import annotations

import dataclasses
import os
import sys
from types import FrameType

MAX_CALLER_DEPTH = 25

# stdlib ``logging`` frames are skipped too so records bridged through
# FieldlogHandler report the application call site.
_ALSO_SKIPPED = frozenset({"logging"})

_own_package: str | None = None


@dataclasses.dataclass(frozen=True)
class CallerFrame:
    """Where a log call came from."""

    function: str
    file: str
    line: int
    module: str = ""

    @property
    def qualified_function(self) -> str:
        return f"{self.module}.{self.function}" if self.module else self.function

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"

    @property
    def short_file(self) -> str:
        return os.path.basename(self.file)


def package_name(module: str) -> str:
    """Reduce a dotted module name to its top-level package."""
    return module.partition(".")[0]


def _resolve_own_package() -> str:
    global _own_package
    # benign race: every thread computes the same value
    if _own_package is None:
        _own_package = package_name(__name__)
    return _own_package


def _is_internal(module: str, own: str) -> bool:
    pkg = package_name(module)
    return pkg == own or pkg in _ALSO_SKIPPED


def get_caller(skip: int = 1) -> CallerFrame | None:
    """Return the first frame outside the library, or ``None``.

    At most :data:`MAX_CALLER_DEPTH` frames are examined.
    """
    own = _resolve_own_package()
    try:
        frame: FrameType | None = sys._getframe(skip)
    except ValueError:
        return None
    depth = 0
    while frame is not None and depth < MAX_CALLER_DEPTH:
        module = frame.f_globals.get("__name__", "")
        if not _is_internal(module, own):
            code = frame.f_code
            return CallerFrame(
                function=code.co_qualname,
                file=code.co_filename,
                line=frame.f_lineno,
                module=module,
            )
        frame = frame.f_back
        depth += 1
    return None


__all__ = ["MAX_CALLER_DEPTH", "CallerFrame", "get_caller", "package_name"]
