from typing import Callable, Generic, Iterator, Optional, TypeVar, Union

from typing_extensions import Self

from bracesets.config import Converter, ExtractionConfiguration
from bracesets.parse import parse
from bracesets.render import EMPTY_SET, render
from bracesets.settree import SetTree

_T = TypeVar('_T')


class StructuredSet(Generic[_T]):
    """A set parsed from a brace expression.

    All element-level operations are delegated to the underlying SetTree,
    which this object owns exclusively."""

    def __init__(
        self, tree: SetTree[_T], expression: Optional[str] = None
    ) -> None:
        if tree is None:
            raise ValueError('A StructuredSet needs a SetTree')
        self._tree = tree
        self._expression = expression

    @classmethod
    def parse(
        cls,
        expression: str,
        config: Optional[ExtractionConfiguration[_T]] = None,
    ) -> Self:
        return cls(parse(expression, config), expression)

    @classmethod
    def empty(
        cls, config: Optional[ExtractionConfiguration[_T]] = None
    ) -> Self:
        return cls(SetTree(config or ExtractionConfiguration()))

    @property
    def tree(self) -> SetTree[_T]:
        """The underlying tree, for reading.

        Edit the set through the StructuredSet methods; a subset changed in
        place through tree.subsets would be out of order."""
        return self._tree

    @property
    def config(self) -> ExtractionConfiguration[_T]:
        return self._tree.config

    @property
    def original_expression(self) -> Optional[str]:
        return self._expression

    @property
    def cardinality(self) -> int:
        return len(self._tree)

    def __len__(self) -> int:
        return len(self._tree)

    def is_empty(self) -> bool:
        return self._tree.is_empty

    def add_element(self, element: _T) -> None:
        self._tree.add_element(element)

    def add_subset(
        self, subset: Union['StructuredSet[_T]', SetTree[_T]]
    ) -> None:
        if isinstance(subset, StructuredSet):
            subset = subset.tree
        self._tree.add_subset(subset)

    def add_subset_expression(self, expression: str) -> None:
        self._tree.adopt_subset(parse(expression, self.config))

    def remove_element(self, element: _T) -> bool:
        return self._tree.remove_element(element)

    def remove_subset(
        self, subset: Union['StructuredSet[_T]', SetTree[_T]]
    ) -> bool:
        if isinstance(subset, StructuredSet):
            subset = subset.tree
        return self._tree.remove_subset(subset)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, StructuredSet):
            item = item.tree
        return item in self._tree

    contains = __contains__

    def is_element_of(self, other: 'StructuredSet[_T]') -> bool:
        """Whether this whole set appears as a subset inside other."""
        return self._tree in other.tree.subsets

    def iter_elements(self) -> Iterator[_T]:
        return iter(self._tree.elements)

    def iter_subsets(self) -> Iterator['StructuredSet[_T]']:
        for subset in self._tree.subsets:
            yield StructuredSet(subset.copy())

    def clear(self) -> None:
        self._tree.clear()

    def copy(self) -> 'StructuredSet[_T]':
        return StructuredSet(self._tree.copy(), self._expression)

    def build_string_representation(self, empty: str = EMPTY_SET) -> str:
        return render(self._tree, empty)

    def __str__(self) -> str:
        return self.build_string_representation()

    def __repr__(self) -> str:
        return f'{type(self).__qualname__}.parse({str(self)!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredSet):
            return NotImplemented
        return self._tree == other._tree

    def __hash__(self) -> int:
        return hash(self._tree)


def typed_set(
    expression: str,
    element_type: Callable[[str], _T] = int,  # type: ignore[assignment]
    row_terminator: str = ',',
    *,
    ignore_empty_sets: bool = True,
    add_braces: bool = False,
) -> StructuredSet[_T]:
    """Parse a set of numbers or other values built from a single string."""
    config = ExtractionConfiguration.for_type(
        element_type,
        row_terminator,
        ignore_empty_sets=ignore_empty_sets,
        add_braces=add_braces,
    )
    return StructuredSet.parse(expression, config)


def string_set(
    expression: str,
    row_terminator: str = ',',
    *,
    ignore_empty_sets: bool = True,
    add_braces: bool = False,
) -> StructuredSet[str]:
    return typed_set(
        expression,
        str,
        row_terminator,
        ignore_empty_sets=ignore_empty_sets,
        add_braces=add_braces,
    )


def custom_set(
    expression: str,
    converter: Converter[_T],
    field_terminator: str = '\t',
    row_terminator: str = ',',
    *,
    ignore_empty_sets: bool = True,
    add_braces: bool = False,
    formatter: Optional[Callable[[_T], str]] = None,
) -> StructuredSet[_T]:
    config = ExtractionConfiguration.for_converter(
        converter,
        field_terminator,
        row_terminator,
        ignore_empty_sets=ignore_empty_sets,
        add_braces=add_braces,
        formatter=formatter,
    )
    return StructuredSet.parse(expression, config)
