"""Algebra over structured sets.

None of these functions modify their arguments. The ones that build sets
return new StructuredSets that share no subtrees with the operands.

Membership is decided with the ordering of the elements and subsets, the
same ordering that deduplicates them, so elements only need to be
comparable, not hashable.
"""

import dataclasses
import enum
import functools
from typing import Any, Callable, Iterator, TypeVar

from bracesets.errors import SetsOperationError
from bracesets.logging import get_logger
from bracesets.parse import parse
from bracesets.render import render
from bracesets.settree import SetTree
from bracesets.structured import StructuredSet

_T = TypeVar('_T')
_F = TypeVar('_F', bound=Callable[..., Any])

_logger = get_logger(__name__)


def _operation(function: _F) -> _F:
    """Check that the operands are structured sets, and report any failure
    other than a broken precondition as a SetsOperationError."""

    @functools.wraps(function)
    def wrapper(*operands: object) -> Any:
        for operand in operands:
            if not isinstance(operand, StructuredSet):
                raise TypeError(
                    f'{function.__name__} expects structured sets, '
                    f'got {type(operand).__qualname__}'
                )
        _logger.debug('{}{!r}', function.__name__, operands)
        try:
            return function(*operands)
        except SetsOperationError:
            raise
        except Exception as e:
            _logger.error('{} failed', function.__name__, exc_info=True)
            raise SetsOperationError(
                f'The {function.__name__.replace('_', ' ')} operation failed',
                str(e),
            ) from e

    return wrapper  # type: ignore[return-value]


@_operation
def without(a: StructuredSet[_T], b: StructuredSet[_T]) -> StructuredSet[_T]:
    """The members of a that are not members of b."""
    result: SetTree[_T] = SetTree(a.config)
    excluded_elements = b.tree.elements
    excluded_subsets = b.tree.subsets
    for element in a.tree.elements:
        if element not in excluded_elements:
            result.add_element(element)
    for subset in a.tree.subsets:
        if subset not in excluded_subsets:
            result.adopt_subset(subset.copy())
    return StructuredSet(result)


@_operation
def merge_with(
    a: StructuredSet[_T], b: StructuredSet[_T]
) -> StructuredSet[_T]:
    """Join the canonical text of both sets and parse it again.

    Parsing sorts and deduplicates the members of the union."""
    if b.is_empty():
        return a.copy()
    if a.is_empty():
        return b.copy()
    row_terminator = a.config.row_terminator
    if b.config.row_terminator != row_terminator:
        raise SetsOperationError(
            'Cannot merge sets that use different row terminators',
            f'{row_terminator!r} and {b.config.row_terminator!r}',
        )
    a_body = render(a.tree)[1:-1]
    b_body = render(b.tree)[1:-1]
    expression = '{' + a_body + row_terminator + b_body + '}'
    return StructuredSet(parse(expression, a.config), expression)


union = merge_with


@_operation
def intersection(
    a: StructuredSet[_T], b: StructuredSet[_T]
) -> StructuredSet[_T]:
    result: SetTree[_T] = SetTree(a.config)
    for element in a.tree.elements:
        if element in b.tree.elements:
            result.add_element(element)
    for subset in a.tree.subsets:
        if subset in b.tree.subsets:
            result.adopt_subset(subset.copy())
    return StructuredSet(result)


difference = without


@_operation
def symmetric_difference(
    a: StructuredSet[_T], b: StructuredSet[_T]
) -> StructuredSet[_T]:
    return union(without(a, b), without(b, a))


@_operation
def complement(
    a: StructuredSet[_T], universal: StructuredSet[_T]
) -> StructuredSet[_T]:
    """The members of universal that are not members of a."""
    if len(a) > len(universal):
        raise SetsOperationError(
            'A set cannot have more members than the universal set',
            f'The set has {len(a)} members but the universal set has {len(universal)}',
        )
    if a.is_empty():
        return universal.copy()
    return without(universal, a)


class SetRelation(enum.Enum):
    NOT_A_SUBSET = 'not a subset'
    SAME_SET = 'same set'
    PROPER_SUBSET = 'proper subset'


@dataclasses.dataclass(frozen=True)
class SubsetResult:
    """The outcome of is_subset_of; truthy when it is a subset."""

    relation: SetRelation

    def __bool__(self) -> bool:
        return self.relation is not SetRelation.NOT_A_SUBSET


@_operation
def is_subset_of(a: StructuredSet[_T], b: StructuredSet[_T]) -> SubsetResult:
    if len(a) > len(b):
        return SubsetResult(SetRelation.NOT_A_SUBSET)
    if a.tree == b.tree:
        return SubsetResult(SetRelation.SAME_SET)
    if all(element in b.tree.elements for element in a.tree.elements) and all(
        subset in b.tree.subsets for subset in a.tree.subsets
    ):
        return SubsetResult(SetRelation.PROPER_SUBSET)
    return SubsetResult(SetRelation.NOT_A_SUBSET)


@_operation
def is_disjoint(a: StructuredSet[_T], b: StructuredSet[_T]) -> bool:
    # Two empty sets are not treated as disjoint.
    if a.is_empty() and b.is_empty():
        return False
    larger, smaller = (a, b) if len(a) >= len(b) else (b, a)
    return without(larger, smaller).tree == larger.tree


class PairKind(enum.Enum):
    ELEMENT_ELEMENT = 'element, element'
    ELEMENT_SET = 'element, set'
    SET_ELEMENT = 'set, element'
    SET_SET = 'set, set'


@dataclasses.dataclass(frozen=True)
class CartesianPair:
    first: Any
    second: Any
    kind: PairKind

    def __str__(self) -> str:
        return f'({self.first}, {self.second})'


@_operation
def cartesian_product(
    a: StructuredSet[_T], b: StructuredSet[_T]
) -> Iterator[CartesianPair]:
    """Lazily pair every member of a with every member of b.

    The members of a are taken elements first, then subsets, and each is
    paired with b's elements and then b's subsets. The returned iterator
    can only be consumed once."""
    return _pairs(a.copy(), b.copy())


def _pairs(
    a: StructuredSet[_T], b: StructuredSet[_T]
) -> Iterator[CartesianPair]:
    b_subsets = list(b.iter_subsets())
    for element in a.iter_elements():
        for other in b.iter_elements():
            yield CartesianPair(element, other, PairKind.ELEMENT_ELEMENT)
        for other_set in b_subsets:
            yield CartesianPair(element, other_set, PairKind.ELEMENT_SET)
    for subset in a.iter_subsets():
        for other in b.iter_elements():
            yield CartesianPair(subset, other, PairKind.SET_ELEMENT)
        for other_set in b_subsets:
            yield CartesianPair(subset, other_set, PairKind.SET_SET)


@_operation
def set_structures_equal(a: StructuredSet[_T], b: StructuredSet[_T]) -> bool:
    if a.is_empty() and b.is_empty():
        return True
    return render(a.tree) == render(b.tree)
