"""How a record's source path is rendered: as given, absolute, or relative."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class PathOptions:
    absolute: bool = False
    relative_to: Optional[Path] = None

    def __post_init__(self):
        if self.absolute and self.relative_to is not None:
            raise ValueError("absolute and relative_to are mutually exclusive")


def format_path(path, options: Optional[PathOptions] = None) -> str:
    """Render ``path`` according to ``options``.

    A relative path that cannot be computed (e.g. another drive on Windows)
    leaves the path unchanged.
    """
    text = os.fspath(path)
    if options is None:
        return text
    abs_path = os.path.abspath(text)
    if options.absolute:
        return abs_path
    if options.relative_to is not None:
        try:
            return os.path.relpath(abs_path, os.path.abspath(options.relative_to))
        except ValueError:
            return text
    return text
