from bracesets.errors import (
    ElementConversionError,
    ExpressionSyntaxError,
    SetsConfigurationError,
    SetsError,
)


def _caret_line(offset: int) -> str:
    return ' ' * offset + '^'


def create_syntax_error_message(error: ExpressionSyntaxError) -> str:
    expression = error.expression
    message = (
        f'{error.message} at column {error.offset + 1}:\n'
        f'{expression}\n'
        f'{_caret_line(error.offset)}'
    )
    if error.details:
        message += f'\n{error.details}'
    return message


def create_conversion_error_message(
    error: ElementConversionError, expression: str | None = None
) -> str:
    message = f'{error.message}: {error.details}'
    if expression is not None and error.offset is not None:
        message += f'\n{expression}\n{_caret_line(error.offset)}'
    return message


def create_configuration_error_message(error: SetsConfigurationError) -> str:
    message = f'Invalid configuration: {error.message}'
    if error.details:
        message += '\n' + error.details
    return message


def create_error_message(error: SetsError, expression: str | None = None) -> str:
    if isinstance(error, ExpressionSyntaxError):
        return create_syntax_error_message(error)
    if isinstance(error, ElementConversionError):
        return create_conversion_error_message(error, expression)
    if isinstance(error, SetsConfigurationError):
        return create_configuration_error_message(error)
    return str(error)
