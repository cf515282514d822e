"""Filesystem writes for scaffolding.

Both operations run the blocking call in a worker thread.  Nothing written
here is ever rolled back.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from setmystack.utils import print_error


async def create_directory(path: str | Path) -> bool:
    """Create *path* and any missing ancestors.

    Existing directories are left alone.  Failures (the path exists as a
    file, permission or quota errors) are printed to stderr and reported by
    returning ``False``.
    """
    try:
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        print_error(f"Error creating directory: {exc}")
        return False
    return True


async def write_file(path: str | Path, content: str) -> Path:
    """Create or overwrite *path* with *content* as UTF-8 text.

    Raises:
        OSError: If the parent directory is missing or not writable.
    """
    out = Path(path)
    await asyncio.to_thread(out.write_text, content, encoding="utf-8")
    return out
