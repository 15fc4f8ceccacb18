"""In-memory implementation of KeyValueStorage.

Nothing survives the process. An optional byte quota mirrors the size limit
of a browser's local storage.
"""

from __future__ import annotations

from progress_todo.exceptions import StorageQuotaExceededError
from progress_todo.repositories import KeyValueStorage


class InMemoryKeyValueStorage(KeyValueStorage):
    """Dict-backed key-value storage."""

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        quota_bytes: int | None = None,
    ):
        self._items: dict[str, str] = dict(initial or {})
        self.quota_bytes = quota_bytes

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = self._used_bytes(exclude=key)
            needed = len(key.encode("utf-8")) + len(value.encode("utf-8"))
            if used + needed > self.quota_bytes:
                raise StorageQuotaExceededError(
                    f"Writing '{key}' needs {needed} bytes, "
                    f"{self.quota_bytes - used} of {self.quota_bytes} available"
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)

    def _used_bytes(self, exclude: str | None = None) -> int:
        return sum(
            len(k.encode("utf-8")) + len(v.encode("utf-8"))
            for k, v in self._items.items()
            if k != exclude
        )
