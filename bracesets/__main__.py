"""Canonicalize and combine brace set expressions from the command line."""

import argparse
import decimal
import fractions
import logging
import sys
from typing import Callable, Dict, List, Optional

import bracesets.logging
import bracesets.operations as operations
from bracesets.config import ExtractionConfiguration
from bracesets.error_reporting import create_error_message
from bracesets.errors import SetsError
from bracesets.structured import StructuredSet

ELEMENT_TYPES: Dict[str, Callable[[str], object]] = {
    'str': str,
    'int': int,
    'float': float,
    'decimal': decimal.Decimal,
    'fraction': fractions.Fraction,
}

BINARY_OPERATIONS: Dict[str, Callable[..., StructuredSet]] = {
    'union': operations.union,
    'intersection': operations.intersection,
    'difference': operations.difference,
    'symmetric-difference': operations.symmetric_difference,
    'complement': operations.complement,
}

PREDICATES: Dict[str, Callable[..., object]] = {
    'subset': operations.is_subset_of,
    'disjoint': operations.is_disjoint,
    'equal': operations.set_structures_equal,
}

OPERATIONS = ['canonical', *BINARY_OPERATIONS, *PREDICATES, 'product']

arg_parser = argparse.ArgumentParser(
    prog='bracesets',
    description='Canonicalize and combine brace set expressions.',
)
arg_parser.add_argument('operation', choices=OPERATIONS, help='what to do')
arg_parser.add_argument(
    'sets',
    nargs='+',
    metavar='SET',
    help=(
        'set expressions; complement takes the universal set second, and '
        'canonical takes a single set'
    ),
)
arg_parser.add_argument(
    '--row-terminator',
    default=',',
    help='separator between the members of a set (default: ,)',
)
arg_parser.add_argument(
    '--field-terminator',
    default='\t',
    help='separator between the fields of a record (default: tab)',
)
arg_parser.add_argument(
    '--type',
    choices=ELEMENT_TYPES,
    default='str',
    dest='element_type',
    help='type of the elements (default: str)',
)
arg_parser.add_argument(
    '--keep-empty',
    action='store_true',
    default=False,
    help='write {} for empty records instead of dropping them',
)
arg_parser.add_argument(
    '--add-braces',
    action='store_true',
    default=False,
    help='accept expressions without their outer braces',
)
arg_parser.add_argument(
    '--empty-marker',
    default='{}',
    help='text printed for an empty result set (default: {})',
)
arg_parser.add_argument(
    '--verbose',
    action='store_true',
    default=False,
    help='print internal logs and errors',
)
arg_parser.add_argument(
    '--json-logs',
    action='store_true',
    default=False,
    help='print logs as JSON objects, one per line',
)


def _arity(operation: str) -> int:
    return 1 if operation == 'canonical' else 2


def run(args: argparse.Namespace) -> int:
    config = ExtractionConfiguration(
        row_terminator=args.row_terminator,
        field_terminator=args.field_terminator,
        ignore_empty_sets=not args.keep_empty,
        add_braces=args.add_braces,
        element_type=ELEMENT_TYPES[args.element_type],
    )
    sets = [StructuredSet.parse(text, config) for text in args.sets]
    operation = args.operation
    if operation == 'canonical':
        print(sets[0].build_string_representation(args.empty_marker))
    elif operation in BINARY_OPERATIONS:
        result = BINARY_OPERATIONS[operation](*sets)
        print(result.build_string_representation(args.empty_marker))
    elif operation in PREDICATES:
        outcome = PREDICATES[operation](*sets)
        if isinstance(outcome, operations.SubsetResult):
            print(outcome.relation.value)
        else:
            print(str(bool(outcome)).lower())
        return 0 if outcome else 1
    else:
        for pair in operations.cartesian_product(*sets):
            print(pair)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = arg_parser.parse_args(argv)
    if len(args.sets) != _arity(args.operation):
        arg_parser.error(
            f'{args.operation} takes {_arity(args.operation)} set(s), '
            f'got {len(args.sets)}'
        )
    if args.verbose or args.json_logs:
        bracesets.logging.configure(
            logging.DEBUG if args.verbose else logging.WARNING,
            json_format=args.json_logs,
        )
    try:
        return run(args)
    except SetsError as e:
        expression = _failing_expression(e, args.sets)
        print(f'{type(e).__name__}:', file=sys.stderr)
        print(create_error_message(e, expression), file=sys.stderr)
        if args.verbose:
            raise
        return 2
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        if args.verbose:
            raise
        return 2


def _failing_expression(error: SetsError, expressions: List[str]) -> Optional[str]:
    candidate = getattr(error, 'expression', None)
    if candidate is not None:
        return candidate
    return expressions[0] if len(expressions) == 1 else None


if __name__ == '__main__':
    sys.exit(main())
