"""The tree that represents one parsed set.

A SetTree holds the leaf elements of one nesting level and the SetTrees of
the subsets nested directly inside it. Both are kept in OrderedSets, so
iteration is always in canonical order regardless of input order.
"""

import dataclasses
from typing import Any, Generic, Iterable, Iterator, TypeVar

from bracesets.config import ExtractionConfiguration
from bracesets.orderedset import OrderedSet
from bracesets.render import render

_T = TypeVar('_T')


@dataclasses.dataclass(frozen=True)
class TreeInfo:
    is_empty_tree: bool
    has_null_elements: bool
    null_element_count: int


def _compare(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class SetTree(Generic[_T]):
    """One level of a parsed set.

    elements and subsets are owned by the tree and are only to be read:
    changing a subset in place would break the ordering of subsets. The
    accessors that hand out subsets return copies."""

    def __init__(
        self,
        config: ExtractionConfiguration[_T],
        elements: Iterable[_T] = (),
        subsets: Iterable['SetTree[_T]'] = (),
    ) -> None:
        if config is None:
            raise ValueError('A SetTree needs an extraction configuration')
        self.config = config
        self.elements: OrderedSet[_T] = OrderedSet(elements)
        self.subsets: OrderedSet[SetTree[_T]] = OrderedSet()
        self._null_element_count = 0
        self.add_subsets(subsets)

    @property
    def info(self) -> TreeInfo:
        return TreeInfo(
            is_empty_tree=self.is_empty,
            has_null_elements=self._null_element_count > 0,
            null_element_count=self._null_element_count,
        )

    @property
    def is_empty(self) -> bool:
        return not self.elements and not self.subsets

    def record_null_elements(self, count: int) -> None:
        """Note that count empty records were dropped while parsing."""
        if count < 0:
            raise ValueError(f'Negative null element count {count}')
        self._null_element_count += count

    @property
    def count_elements(self) -> int:
        return len(self.elements)

    @property
    def count_subsets(self) -> int:
        return len(self.subsets)

    def __len__(self) -> int:
        return len(self.elements) + len(self.subsets)

    def __iter__(self) -> Iterator[object]:
        yield from self.elements
        yield from self.iter_subsets()

    def __contains__(self, item: object) -> bool:
        if isinstance(item, SetTree):
            return item in self.subsets
        try:
            return item in self.elements
        except TypeError:
            # not comparable with the elements
            return False

    def add_element(self, element: _T) -> None:
        self.elements.add(element)

    def add_elements(self, elements: Iterable[_T]) -> None:
        for element in elements:
            self.elements.add(element)

    def add_subset(self, subset: 'SetTree[_T]') -> None:
        """Add a copy of subset.

        A tree never shares a subtree with another tree, so later changes to
        subset do not affect this tree."""
        if subset is None:
            raise ValueError('None cannot be added as a subset')
        self.subsets.add(subset.copy())

    def add_subsets(self, subsets: Iterable['SetTree[_T]']) -> None:
        for subset in subsets:
            self.add_subset(subset)

    def adopt_subset(self, subset: 'SetTree[_T]') -> None:
        """Add subset without copying it; the caller gives up ownership."""
        if subset is None:
            raise ValueError('None cannot be added as a subset')
        self.subsets.add(subset)

    def remove_element(self, element: _T) -> bool:
        return self.elements.pop_value(element) is not None

    def remove_subset(self, subset: 'SetTree[_T]') -> bool:
        return self.subsets.pop_value(subset) is not None

    def index_of_element(self, element: _T) -> int:
        return self.elements.index(element)

    def index_of_subset(self, subset: 'SetTree[_T]') -> int:
        # Subsets come after the elements when the set is read left to right.
        index = self.subsets.index(subset)
        if index == -1:
            return -1
        return len(self.elements) + index

    def element_at(self, index: int) -> _T:
        return self.elements[index]

    def subset_at(self, index: int) -> 'SetTree[_T]':
        return self.subsets[index].copy()

    def iter_elements(self) -> OrderedSet[_T]:
        return self.elements

    def iter_subsets(self) -> Iterator['SetTree[_T]']:
        for subset in self.subsets:
            yield subset.copy()

    def clear(self) -> None:
        self.elements.clear()
        self.subsets.clear()
        self._null_element_count = 0

    @property
    def shows_empty_marker(self) -> bool:
        """Whether the empty records of this tree are written out as {}."""
        if self.config.ignore_empty_sets or not self._null_element_count:
            return False
        if self.is_empty:
            return False
        # Empty subsets sort first, and one would already be written as {}.
        return not (self.subsets and self.subsets[0].is_empty)

    def _member_count(self) -> int:
        return len(self) + (1 if self.shows_empty_marker else 0)

    def _canonical_subsets(self) -> Iterator['SetTree[_T]']:
        if self.shows_empty_marker:
            yield SetTree(self.config)
        yield from self.subsets

    def copy(self) -> 'SetTree[_T]':
        tree = SetTree(self.config, self.elements)
        for subset in self.subsets:
            tree.subsets.add(subset.copy())
        tree._null_element_count = self._null_element_count
        return tree

    def compare(self, other: 'SetTree[_T]') -> int:
        """Three-way comparison of the structure of two trees.

        Smaller sets come first, then sets with fewer leaf elements. Sets of
        the same shape are compared element by element and then subset by
        subset.

        An empty marker that is written out as {} counts as the empty subset
        it reads back as."""
        result = _compare(self._member_count(), other._member_count())
        if result:
            return result
        result = _compare(len(self.elements), len(other.elements))
        if result:
            return result
        for mine, theirs in zip(self.elements, other.elements):
            result = _compare(mine, theirs)
            if result:
                return result
        for my_subset, their_subset in zip(
            self._canonical_subsets(), other._canonical_subsets()
        ):
            result = my_subset.compare(their_subset)
            if result:
                return result
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetTree):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: 'SetTree[_T]') -> bool:
        if not isinstance(other, SetTree):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: 'SetTree[_T]') -> bool:
        if not isinstance(other, SetTree):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: 'SetTree[_T]') -> bool:
        if not isinstance(other, SetTree):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: 'SetTree[_T]') -> bool:
        if not isinstance(other, SetTree):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((tuple(self.elements), tuple(self._canonical_subsets())))

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f'{type(self).__qualname__}({str(self)!r})'
