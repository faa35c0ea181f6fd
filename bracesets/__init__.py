"""Nested sets written as brace expressions, like {1,2,{3,4}}.

Expressions are parsed into SetTrees whose elements and subsets are kept in
canonical order, so that equal sets print identically and can be combined
with the functions in bracesets.operations.
"""

from bracesets.config import ExtractionConfiguration
from bracesets.errors import (
    ElementConversionError,
    ExpressionSyntaxError,
    MissingBrace,
    MissingBraceError,
    SetsConfigurationError,
    SetsError,
    SetsOperationError,
)
from bracesets.orderedset import OrderedSet
from bracesets.parse import parse
from bracesets.render import render
from bracesets.settree import SetTree, TreeInfo
from bracesets.structured import (
    StructuredSet,
    custom_set,
    string_set,
    typed_set,
)

version = '0.1.0'

__all__ = [
    'ElementConversionError',
    'ExpressionSyntaxError',
    'ExtractionConfiguration',
    'MissingBrace',
    'MissingBraceError',
    'OrderedSet',
    'SetTree',
    'SetsConfigurationError',
    'SetsError',
    'SetsOperationError',
    'StructuredSet',
    'TreeInfo',
    'custom_set',
    'parse',
    'render',
    'string_set',
    'typed_set',
    'version',
]
