"""
File helpers for CFG, exchange and report files.

Writes go to a temporary sibling file that is renamed over the target, so a
failed write never leaves a half-written config behind.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable

from ..exceptions import ConfigNotFoundError, FileWriteError
from ..models.config_store import ConfigStore

logger = logging.getLogger(__name__)


def clean_path_argument(value: str) -> str:
    """Strip whitespace and the quotes shells and drag-and-drop leave around paths."""
    return value.strip().strip('"').strip("'")


def has_extension(path: Path, extensions: Iterable[str]) -> bool:
    suffix = path.suffix.lower()
    return any(suffix == ext.lower() for ext in extensions)


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file (BOM tolerated)."""
    if not path.exists():
        raise ConfigNotFoundError(path=str(path))
    return path.read_text(encoding="utf-8-sig")


def load_config_file(path: Path) -> ConfigStore:
    """
    Load a CFG file into a ConfigStore.

    Raises:
        ConfigNotFoundError: If ``path`` does not exist
        ConfigParseError: If the file is not UTF-8
    """
    if not path.is_file():
        raise ConfigNotFoundError("Config file not found", path=str(path))

    store = ConfigStore.load(path.read_bytes())
    logger.info("Loaded %d config entries from %s", len(store), path)
    return store


def _current_umask() -> int:
    # os.umask only reports the mask by setting it
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_text_file(path: Path, content: str) -> None:
    """
    Atomically write ``content`` to ``path`` as UTF-8.

    An existing target keeps its permission bits; a new file gets the usual
    ``0o666 & ~umask`` instead of the temp file's owner-only mode.

    Raises:
        FileWriteError: If the file cannot be written
    """
    directory = path.parent
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=directory,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        if path.exists():
            shutil.copymode(path, tmp_name)
        else:
            os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FileWriteError(str(e), path=str(path)) from e


def save_config_file(store: ConfigStore, path: Path) -> None:
    """Serialize ``store`` to ``path``."""
    write_text_file(path, store.serialize())
    logger.info("Wrote %d config entries to %s", len(store), path)


def write_lines(path: Path, lines: Iterable[str]) -> None:
    """Write report lines, one per line."""
    write_text_file(path, "".join(f"{line}\n" for line in lines))
