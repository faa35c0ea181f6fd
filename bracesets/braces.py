"""Check that the braces of a set expression balance.

This runs before any parsing so that brace mistakes are reported with the
position of the brace at fault rather than as a generic parse failure.
"""

from bracesets.errors import (
    ExpressionSyntaxError,
    MissingBrace,
    MissingBraceError,
)


def check_braces(expression: str) -> None:
    if expression is None:
        raise ValueError('The expression cannot be None')
    starts = expression.startswith('{')
    ends = expression.endswith('}')
    if not starts and not ends:
        raise MissingBraceError(
            MissingBrace.BOTH,
            expression,
            0,
            'A set expression must be enclosed in braces',
        )
    if not starts:
        raise MissingBraceError(
            MissingBrace.OPENING,
            expression,
            0,
            'A set expression must start with an opening brace',
        )
    if not ends:
        raise MissingBraceError(
            MissingBrace.CLOSING,
            expression,
            len(expression),
            'A set expression must end with a closing brace',
        )

    open_braces: list[int] = []
    outer_set_end = None
    for offset, character in enumerate(expression):
        if character == '{':
            open_braces.append(offset)
        elif character == '}':
            if not open_braces:
                raise MissingBraceError(
                    MissingBrace.OPENING,
                    expression,
                    offset,
                    'Encountered a closing brace without an opening brace',
                )
            open_braces.pop()
            if not open_braces and outer_set_end is None:
                outer_set_end = offset
    if open_braces:
        raise MissingBraceError(
            MissingBrace.CLOSING,
            expression,
            open_braces[0],
            f'Encountered {len(open_braces)} opening brace(s) without '
            f'corresponding closing braces at {', '.join(map(str, open_braces))}',
        )
    if outer_set_end is not None and outer_set_end != len(expression) - 1:
        raise ExpressionSyntaxError(
            'The set is closed before the end of the expression',
            expression,
            outer_set_end + 1,
        )


def are_braces_correct(expression: str) -> bool:
    try:
        check_braces(expression)
    except ExpressionSyntaxError:
        return False
    return True
