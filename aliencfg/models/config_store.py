"""
In-memory model of a flat ``key:value`` CFG file.

Keys are case-insensitive and unique; the first occurrence in a loaded file
wins. Entry order follows first appearance so serialization is stable. The
key set is fixed once loaded: ``set`` only overwrites existing keys.
"""

import logging
import re
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..exceptions import ConfigParseError

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def _fold(key: str) -> str:
    return key.casefold()


class ConfigStore:
    """Ordered, case-insensitive mapping of config keys to raw string values."""

    def __init__(self) -> None:
        # folded key -> (key as first written, value)
        self._entries: Dict[str, Tuple[str, str]] = {}

    @classmethod
    def load(cls, content: Union[str, bytes]) -> "ConfigStore":
        """
        Parse CFG text into a new store.

        Lines that are blank, have no colon, or have an empty key are
        skipped. Only the first colon splits key from value.

        Raises:
            ConfigParseError: If ``content`` is bytes that are not UTF-8
        """
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ConfigParseError("Config is not valid UTF-8", position=e.start) from e

        store = cls()
        skipped = 0
        duplicates = 0

        for line in _LINE_BREAK_RE.split(content):
            if not line.strip():
                continue

            key, sep, value = line.partition(":")
            key = key.strip()
            if not sep or not key:
                skipped += 1
                continue

            folded = _fold(key)
            if folded in store._entries:
                duplicates += 1
                continue
            store._entries[folded] = (key, value.strip())

        logger.debug(
            "Loaded %d config entries (%d malformed lines, %d duplicate keys skipped)",
            len(store._entries),
            skipped,
            duplicates,
        )
        return store

    def serialize(self) -> str:
        """Render the store back to CFG text, one ``key:value`` line per entry."""
        return "".join(f"{key}:{value}\n" for key, value in self._entries.values())

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        entry = self._entries.get(_fold(key))
        return entry[1] if entry else default

    def set(self, key: str, value: str) -> bool:
        """
        Overwrite the value of an existing key.

        Returns:
            True if the key existed and was updated, False if it is absent
            (the store is left unchanged)
        """
        folded = _fold(key)
        entry = self._entries.get(folded)
        if entry is None:
            return False
        self._entries[folded] = (entry[0], value)
        return True

    def items(self) -> List[Tuple[str, str]]:
        """Entries as ``(key, value)`` pairs in store order."""
        return list(self._entries.values())

    def keys(self) -> List[str]:
        return [key for key, _ in self._entries.values()]

    def copy(self) -> "ConfigStore":
        clone = ConfigStore()
        clone._entries = dict(self._entries)
        return clone

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _fold(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigStore):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"ConfigStore({len(self)} entries)"
