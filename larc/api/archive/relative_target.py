"""Express a path as a link target."""

import os
from pathlib import Path


def relative_target(path: Path, base_dir: Path) -> str:
    """Path of ``path`` relative to ``base_dir``, in POSIX form."""
    return Path(os.path.relpath(Path(path).expanduser().resolve(), Path(base_dir).resolve())).as_posix()
