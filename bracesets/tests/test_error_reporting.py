from bracesets.config import ExtractionConfiguration
from bracesets.error_reporting import (
    create_configuration_error_message,
    create_conversion_error_message,
    create_error_message,
    create_syntax_error_message,
)
from bracesets.errors import (
    ElementConversionError,
    ExpressionSyntaxError,
    SetsConfigurationError,
    SetsOperationError,
)
from bracesets.parse import parse
from bracesets.tests.strategies import int_config
import textwrap
import unittest


class TestMessages(unittest.TestCase):
    def test_syntax_error_points_at_offset(self) -> None:
        try:
            parse('{1,{2}3}', int_config)
        except ExpressionSyntaxError as e:
            message = create_syntax_error_message(e)
        else:
            self.fail('expected a syntax error')
        lines = message.splitlines()
        self.assertIn('at column 7', lines[0])
        self.assertEqual('{1,{2}3}', lines[1])
        self.assertEqual('      ^', lines[2])

    def test_missing_brace_message_has_details(self) -> None:
        try:
            parse('{1,{2}', int_config)
        except ExpressionSyntaxError as e:
            message = create_error_message(e)
        self.assertEqual(
            textwrap.dedent(
                '''\
                Missing closing brace at column 1:
                {1,{2}
                ^
                Encountered 1 opening brace(s) without corresponding closing braces at 0'''
            ),
            message,
        )

    def test_conversion_error(self) -> None:
        try:
            parse('{1,zz}', int_config)
        except ElementConversionError as e:
            message = create_conversion_error_message(e, e.expression)
        self.assertEqual(
            "Conversion failed due to invalid format: Failed to convert the string 'zz' to type of 'int'\n{1,zz}\n   ^",
            message,
        )

    def test_conversion_error_without_position(self) -> None:
        message = create_conversion_error_message(
            ElementConversionError('zz', int)
        )
        self.assertNotIn('^', message)

    def test_configuration_error(self) -> None:
        try:
            ExtractionConfiguration(row_terminator='{')
        except SetsConfigurationError as e:
            message = create_configuration_error_message(e)
        self.assertTrue(
            message.startswith(
                'Invalid configuration: Cannot use reserved characters.'
            )
        )
        self.assertIn('index 0', message)

    def test_other_errors(self) -> None:
        error = SetsOperationError('Nope', 'really')
        self.assertEqual('Nope - Details: really', create_error_message(error))
