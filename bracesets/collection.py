"""A collection of sets named like spreadsheet columns: A, B, ..., Z, AA, AB."""

from typing import Dict, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from bracesets.structured import StructuredSet

_T = TypeVar('_T')


def next_name(name: str) -> str:
    if not name:
        return 'A'
    if not (name.isascii() and name.isalpha() and name.isupper()):
        raise ValueError(f'{name!r} is not a set name')
    letters = list(name)
    i = len(letters) - 1
    while i >= 0:
        if letters[i] != 'Z':
            letters[i] = chr(ord(letters[i]) + 1)
            return ''.join(letters)
        letters[i] = 'A'
        i -= 1
    return 'A' + ''.join(letters)


class SetCollection(Generic[_T]):
    def __init__(self, sets: Iterable[StructuredSet[_T]] = ()) -> None:
        self._sets: Dict[str, StructuredSet[_T]] = {}
        self._last_name = ''
        for s in sets:
            self.add(s)

    def add(self, s: StructuredSet[_T]) -> str:
        """Add s under the next free name and return that name."""
        if s is None:
            raise ValueError('None cannot be added to a SetCollection')
        self._last_name = next_name(self._last_name)
        self._sets[self._last_name] = s
        return self._last_name

    def __getitem__(self, name: str) -> StructuredSet[_T]:
        return self._sets[name]

    def find(self, name: str) -> Optional[StructuredSet[_T]]:
        return self._sets.get(name)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._sets
        return any(s == item for s in self._sets.values())

    def remove(self, name: str) -> StructuredSet[_T]:
        return self._sets.pop(name)

    def reset_names(self) -> None:
        """Rename the remaining sets A, B, ... in the order they were added."""
        sets = list(self._sets.values())
        self.clear()
        for s in sets:
            self.add(s)

    def clear(self) -> None:
        self._sets = {}
        self._last_name = ''

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[Tuple[str, StructuredSet[_T]]]:
        return iter(list(self._sets.items()))
