"""The set expression parser.

The parser uses parsy, a parser combinator library. The grammar depends on
the row terminator, so it is built for each configuration and cached.

    set = '{', item, { ROW, item }, '}' ;
    item = [ BLANK ], set, [ BLANK ] | record ;
    record = { any character except '{', '}' or the start of ROW } ;

Records are then split into fields on the field terminator and converted
into elements. A record made only of blank fields is an empty marker: it is
counted but does not become an element. A terminator that only separates a
subset from the edge of its enclosing set does not produce an empty marker,
and neither does a set whose body is blank.
"""

import dataclasses
import functools
import re
from typing import (
    Any,
    Generator,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

import parsy

from bracesets.braces import check_braces
from bracesets.config import ExtractionConfiguration
from bracesets.errors import ElementConversionError, ExpressionSyntaxError
from bracesets.logging import get_logger
from bracesets.settree import SetTree

_T = TypeVar('_T')

_logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Record:
    offset: int
    text: str

    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclasses.dataclass(frozen=True)
class SetNode:
    """A brace-delimited set before its records are converted."""

    offset: int
    items: Tuple[Union[Record, 'SetNode'], ...]

    def records(self) -> List[Record]:
        items = list(self.items)
        if len(items) == 1 and isinstance(items[0], Record):
            return [] if items[0].is_blank() else [items[0]]
        dropped = set()
        if (
            len(items) > 1
            and isinstance(items[0], Record)
            and items[0].is_blank()
            and isinstance(items[1], SetNode)
        ):
            dropped.add(0)
        if (
            len(items) > 1
            and isinstance(items[-1], Record)
            and items[-1].is_blank()
            and isinstance(items[-2], SetNode)
        ):
            dropped.add(len(items) - 1)
        return [
            item
            for i, item in enumerate(items)
            if isinstance(item, Record) and i not in dropped
        ]

    def subsets(self) -> List['SetNode']:
        return [item for item in self.items if isinstance(item, SetNode)]


@functools.lru_cache(maxsize=32)
def grammar(row_terminator: str) -> parsy.Parser:
    row = re.escape(row_terminator)
    separator = parsy.string(row_terminator).desc(
        f'row terminator {row_terminator!r}'
    )
    blank = parsy.regex(rf'(?:(?!{row})\s)*')
    record = parsy.seq(
        parsy.index, parsy.regex(rf'(?:(?!{row})[^{{}}])*')
    ).combine(Record)

    @parsy.generate
    def set_parser() -> Generator[parsy.Parser, Any, SetNode]:
        offset = yield parsy.index
        yield parsy.string('{')
        items = yield item.sep_by(separator)
        yield parsy.string('}')
        return SetNode(offset, tuple(items))

    subset = blank >> set_parser << blank
    item = subset | record

    return set_parser


def parse_structure(expression: str, row_terminator: str = ',') -> SetNode:
    try:
        return grammar(row_terminator).parse(expression)
    except parsy.ParseError as e:
        raise ExpressionSyntaxError(
            f'Expected {_describe_expected(e)}',
            expression,
            e.index,
        ) from e


def _describe_expected(error: parsy.ParseError) -> str:
    expected = sorted(error.expected)
    if len(expected) == 1:
        return expected[0]
    return 'one of ' + ', '.join(expected)


def prepare_expression(expression: str, config: ExtractionConfiguration) -> str:
    if expression is None:
        raise ValueError('The expression cannot be None')
    expression = expression.strip()
    if config.add_braces:
        if not (expression.startswith('{') and expression.endswith('}')):
            expression = '{' + expression + '}'
    elif not expression:
        raise ValueError('The expression cannot be empty')
    return expression


def parse(
    expression: str, config: Optional[ExtractionConfiguration[_T]] = None
) -> SetTree[_T]:
    """Parse expression into a SetTree.

    Raises ExpressionSyntaxError (MissingBraceError for unbalanced braces)
    if the text is not a set expression, and ElementConversionError if a
    record cannot be converted into an element.
    """
    if config is None:
        config = ExtractionConfiguration()
    expression = prepare_expression(expression, config)
    _logger.debug('parsing {!r}', expression)
    check_braces(expression)
    structure = parse_structure(expression, config.row_terminator)
    tree = build_tree(structure, config, expression)
    _logger.debug(
        'parsed {!r} into {} elements and {} subsets',
        expression,
        tree.count_elements,
        tree.count_subsets,
    )
    return tree


def build_tree(
    node: SetNode, config: ExtractionConfiguration[_T], expression: str
) -> SetTree[_T]:
    tree: SetTree[_T] = SetTree(config)
    try:
        elements, null_count = convert_records(node.records(), config)
    except ElementConversionError as e:
        e.expression = expression
        _logger.debug(
            'could not convert {!r} at {} in {!r}', e.text, e.offset, expression
        )
        raise
    tree.add_elements(elements)
    tree.record_null_elements(null_count)
    for subset in node.subsets():
        tree.adopt_subset(build_tree(subset, config, expression))
    return tree


def convert_records(
    records: Iterable[Record], config: ExtractionConfiguration[_T]
) -> Tuple[List[_T], int]:
    """Convert records into elements, in order.

    Returns the elements and the number of records that were empty markers.
    A conversion failure is raised with the offset of the failing record."""
    elements: List[_T] = []
    null_count = 0
    for record in records:
        fields = config.split_fields(record.text)
        if all(field is None for field in fields):
            null_count += 1
            continue
        try:
            elements.append(config.convert(record.text, fields))
        except ElementConversionError as e:
            e.offset = record.offset
            raise
    return elements, null_count


def parse_elements(
    text: str, config: ExtractionConfiguration[_T]
) -> Tuple[List[_T], int]:
    """Convert the records of a set body that has no nested sets.

    Returns the converted elements in input order and the number of empty
    markers."""
    if text is None:
        raise ValueError('The text cannot be None')
    for offset, character in enumerate(text):
        if character in '{}':
            raise ExpressionSyntaxError(
                'Braces are not allowed in a flat list of elements',
                text,
                offset,
            )
    if not text.strip():
        return [], 0
    records = []
    offset = 0
    for piece in text.split(config.row_terminator):
        records.append(Record(offset, piece))
        offset += len(piece) + len(config.row_terminator)
    try:
        return convert_records(records, config)
    except ElementConversionError as e:
        e.expression = text
        raise
