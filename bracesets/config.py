import dataclasses
from typing import Callable, Generic, Optional, Sequence, TypeVar

from bracesets.errors import ElementConversionError, SetsConfigurationError

_T = TypeVar('_T')

RESERVED_CHARACTERS = '{}'

type Fields = Sequence[Optional[str]]
type Converter[T] = Callable[[Fields], T]


@dataclasses.dataclass(frozen=True)
class ExtractionConfiguration(Generic[_T]):
    """How the text between braces is split into elements.

    row_terminator separates the records of one nesting level.
    field_terminator splits a record into fields; it only matters when a
    converter builds each element out of several fields. Blank fields are
    passed to the converter as None.

    Without a converter, a record is trimmed and handed to element_type,
    which is usually a type like int or decimal.Decimal.

    formatter writes an element back out as record text. By default elements
    are written with str, except that tuples built by a converter have their
    fields joined with field_terminator so that the text parses again.
    """

    row_terminator: str = ','
    field_terminator: str = '\t'
    ignore_empty_sets: bool = True
    add_braces: bool = False
    element_type: Callable[[str], _T] = str  # type: ignore[assignment]
    converter: Optional[Converter[_T]] = None
    formatter: Optional[Callable[[_T], str]] = None

    def __post_init__(self) -> None:
        _validate_terminators(self.field_terminator, self.row_terminator)
        if self.converter is not None and not callable(self.converter):
            raise SetsConfigurationError(
                'The converter must be callable',
                f'Got {self.converter!r}',
            )
        if not callable(self.element_type):
            raise SetsConfigurationError(
                'The element type must be callable',
                f'Got {self.element_type!r}',
            )
        if self.formatter is not None and not callable(self.formatter):
            raise SetsConfigurationError(
                'The formatter must be callable',
                f'Got {self.formatter!r}',
            )

    @classmethod
    def for_type(
        cls,
        element_type: Callable[[str], _T],
        row_terminator: str = ',',
        *,
        ignore_empty_sets: bool = True,
        add_braces: bool = False,
    ) -> 'ExtractionConfiguration[_T]':
        return cls(
            row_terminator=row_terminator,
            ignore_empty_sets=ignore_empty_sets,
            add_braces=add_braces,
            element_type=element_type,
        )

    @classmethod
    def for_converter(
        cls,
        converter: Converter[_T],
        field_terminator: str,
        row_terminator: str,
        *,
        ignore_empty_sets: bool = True,
        add_braces: bool = False,
        formatter: Optional[Callable[[_T], str]] = None,
    ) -> 'ExtractionConfiguration[_T]':
        return cls(
            row_terminator=row_terminator,
            field_terminator=field_terminator,
            ignore_empty_sets=ignore_empty_sets,
            add_braces=add_braces,
            converter=converter,
            formatter=formatter,
        )

    @property
    def target_type(self) -> object:
        if self.converter is not None:
            return self.converter
        return self.element_type

    def split_fields(self, record: str) -> list[Optional[str]]:
        """Split a record into trimmed fields, with blank fields as None."""
        fields: list[Optional[str]] = []
        for field in record.split(self.field_terminator):
            field = field.strip()
            fields.append(field if field else None)
        return fields

    def format_element(self, element: _T) -> str:
        if self.formatter is not None:
            return self.formatter(element)
        if self.converter is not None and isinstance(element, tuple):
            return self.field_terminator.join(
                '' if field is None else str(field) for field in element
            )
        return str(element)

    def convert(self, record: str, fields: Optional[Fields] = None) -> _T:
        if fields is None:
            fields = self.split_fields(record)
        try:
            if self.converter is not None:
                return self.converter(fields)
            return self.element_type(record.strip())
        except ElementConversionError:
            raise
        except Exception as e:
            raise ElementConversionError(
                record.strip(), self.target_type
            ) from e


def _validate_terminators(field_terminator: object, row_terminator: object) -> None:
    for name, terminator in (
        ('field_terminator', field_terminator),
        ('row_terminator', row_terminator),
    ):
        if terminator is None:
            raise SetsConfigurationError(f'The {name} cannot be None')
        if not isinstance(terminator, str):
            raise SetsConfigurationError(
                f'The {name} must be a string', f'Got {terminator!r}'
            )
        if not terminator:
            raise SetsConfigurationError(f'The {name} cannot be empty')
    if field_terminator == row_terminator:
        raise SetsConfigurationError(
            'Terminators cannot be the same.',
            f'Both terminators are {row_terminator!r}',
        )
    details = []
    for name, terminator in (
        ('field_terminator', field_terminator),
        ('row_terminator', row_terminator),
    ):
        assert isinstance(terminator, str)
        for character in RESERVED_CHARACTERS:
            index = terminator.find(character)
            if index != -1:
                details.append(
                    f'The {name} contains a reserved character at index {index}.'
                )
    if details:
        raise SetsConfigurationError(
            'Cannot use reserved characters.',
            f'The characters {RESERVED_CHARACTERS} cannot be used in any of the terminators.\n'
            + '\n'.join(details),
        )
