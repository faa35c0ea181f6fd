from bracesets.braces import are_braces_correct, check_braces
from bracesets.errors import (
    ExpressionSyntaxError,
    MissingBrace,
    MissingBraceError,
)
import unittest


class TestCheckBraces(unittest.TestCase):
    def test_balanced(self) -> None:
        for expression in ['{}', '{1,2}', '{{}}', '{1,{2,{3}},{4}}']:
            with self.subTest(expression=expression):
                check_braces(expression)
                self.assertTrue(are_braces_correct(expression))

    def test_missing_braces(self) -> None:
        cases = [
            ('', MissingBrace.BOTH, 0),
            ('1,2', MissingBrace.BOTH, 0),
            ('1,2}', MissingBrace.OPENING, 0),
            ('{1,2', MissingBrace.CLOSING, 4),
            ('{1,2}}', MissingBrace.OPENING, 5),
            ('{1,{2}', MissingBrace.CLOSING, 0),
            ('{1,{2,{3}', MissingBrace.CLOSING, 0),
            ('{}1}', MissingBrace.OPENING, 3),
        ]
        for expression, missing, offset in cases:
            with self.subTest(expression=expression):
                with self.assertRaises(MissingBraceError) as cm:
                    check_braces(expression)
                self.assertEqual(missing, cm.exception.missing)
                self.assertEqual(offset, cm.exception.offset)
                self.assertFalse(are_braces_correct(expression))

    def test_unclosed_braces_are_listed(self) -> None:
        with self.assertRaises(MissingBraceError) as cm:
            check_braces('{{{1}')
        self.assertIn('2 opening brace(s)', cm.exception.details)
        self.assertIn('0, 1', cm.exception.details)

    def test_two_sets_side_by_side(self) -> None:
        with self.assertRaises(ExpressionSyntaxError) as cm:
            check_braces('{1},{2}')
        self.assertNotIsInstance(cm.exception, MissingBraceError)
        self.assertEqual(3, cm.exception.offset)

    def test_none(self) -> None:
        with self.assertRaises(ValueError):
            check_braces(None)  # type: ignore[arg-type]
