from bracesets.config import ExtractionConfiguration
from bracesets.errors import ElementConversionError
from bracesets.structured import (
    StructuredSet,
    custom_set,
    string_set,
    typed_set,
)
import decimal
import fractions
import unittest


class TestStructuredSet(unittest.TestCase):
    def test_keeps_original_expression(self) -> None:
        s = typed_set('{3,1,1}')
        self.assertEqual('{3,1,1}', s.original_expression)
        self.assertEqual('{1,3}', s.build_string_representation())
        self.assertEqual(2, s.cardinality)
        self.assertEqual(2, len(s))

    def test_empty(self) -> None:
        s = StructuredSet.empty(ExtractionConfiguration.for_type(int))
        self.assertTrue(s.is_empty())
        self.assertEqual('∅', s.build_string_representation('∅'))
        self.assertIsNone(s.original_expression)

    def test_editing(self) -> None:
        s = typed_set('{1}')
        s.add_element(2)
        s.add_subset(typed_set('{4,3}'))
        s.add_subset_expression('{5}')
        self.assertEqual('{1,2,{5},{3,4}}', str(s))
        self.assertTrue(s.remove_element(1))
        self.assertTrue(s.remove_subset(typed_set('{3,4}')))
        self.assertFalse(s.remove_subset(typed_set('{3,4}')))
        self.assertEqual('{2,{5}}', str(s))

    def test_contains(self) -> None:
        s = typed_set('{1,{2}}')
        self.assertIn(1, s)
        self.assertIn(typed_set('{2}'), s)
        self.assertIn(typed_set('{2}').tree, s)
        self.assertTrue(s.contains(1))
        self.assertNotIn(typed_set('{1}'), s)

    def test_is_element_of(self) -> None:
        self.assertTrue(typed_set('{2}').is_element_of(typed_set('{1,{2}}')))
        self.assertFalse(typed_set('{1}').is_element_of(typed_set('{1,{2}}')))

    def test_iteration_yields_independent_subsets(self) -> None:
        s = typed_set('{2,1,{3}}')
        self.assertListEqual([1, 2], list(s.iter_elements()))
        (subset,) = s.iter_subsets()
        subset.add_element(4)
        self.assertEqual('{1,2,{3}}', str(s))

    def test_copy_and_clear(self) -> None:
        s = typed_set('{1,{2}}')
        copy = s.copy()
        s.clear()
        self.assertTrue(s.is_empty())
        self.assertEqual('{1,{2}}', str(copy))
        self.assertEqual(copy, typed_set('{ 1 , { 2 } }'))


class TestConstructors(unittest.TestCase):
    def test_typed_set(self) -> None:
        s = typed_set('{1.10;2.5}', decimal.Decimal, ';')
        self.assertListEqual(
            [decimal.Decimal('1.10'), decimal.Decimal('2.5')],
            list(s.iter_elements()),
        )
        self.assertEqual('{1.10;2.5}', str(s))

    def test_typed_set_conversion_failure(self) -> None:
        with self.assertRaises(ElementConversionError):
            typed_set('{1,two}')

    def test_string_set(self) -> None:
        s = string_set('{b, a ,c,a}', ignore_empty_sets=False)
        self.assertEqual('{a,b,c}', str(s))

    def test_custom_set(self) -> None:
        s = custom_set(
            '{x:1|y:2|x:1}', lambda fields: (fields[0], fields[1]), ':', '|'
        )
        self.assertListEqual(
            [('x', '1'), ('y', '2')], list(s.iter_elements())
        )
        self.assertEqual('{x:1|y:2}', str(s))

    def test_custom_set_text_parses_again(self) -> None:
        people = custom_set(
            '{Alan;41,Ada;36}', lambda f: (f[0], int(f[1])), ';'
        )
        self.assertEqual('{Ada;36,Alan;41}', str(people))
        self.assertEqual(people, StructuredSet.parse(str(people), people.config))

    def test_custom_set_formatter(self) -> None:
        s = custom_set(
            '{3;4,1;2}',
            lambda f: fractions.Fraction(int(f[0]), int(f[1])),
            ';',
            formatter=lambda q: f'{q.numerator};{q.denominator}',
        )
        self.assertEqual(2, len(s))
        self.assertEqual('{1;2,3;4}', str(s))

    def test_add_braces(self) -> None:
        self.assertEqual('{1,2}', str(typed_set('2,1', add_braces=True)))
