"""Immutable permission map with default-deny reads."""

from collections.abc import Iterable, Iterator, Mapping


class PermissionMap(Mapping[str, bool]):
    """Mapping of permission (or section) key to granted flag.

    Reading a key that has no explicit entry yields ``False``. Iteration,
    ``len`` and ``in`` only see explicit entries, so an empty map means
    "nothing granted, nothing denied explicitly".
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, bool] | Iterable[tuple[str, bool]] = ()) -> None:
        self._entries: dict[str, bool] = {k: bool(v) for k, v in dict(entries).items()}

    def __getitem__(self, key: str) -> bool:
        return self._entries.get(key, False)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PermissionMap):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self._entries == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"PermissionMap({self._entries!r})"

    def is_granted(self, key: str) -> bool:
        """True only for an explicit ``True`` entry."""
        return self._entries.get(key) is True

    def union_most_permissive(self, other: Mapping[str, bool]) -> "PermissionMap":
        """Combine with another map: any True wins, False only fills gaps."""
        merged = dict(self._entries)
        for key, value in other.items():
            if value is True:
                merged[key] = True
            elif key not in merged:
                merged[key] = False
        return PermissionMap(merged)

    def with_overrides(self, values: Mapping[str, bool]) -> "PermissionMap":
        """Return a copy where every given value replaces the existing entry."""
        merged = dict(self._entries)
        merged.update({k: v is True for k, v in values.items()})
        return PermissionMap(merged)

    def to_dict(self) -> dict[str, bool]:
        return dict(self._entries)


EMPTY_PERMISSIONS = PermissionMap()
