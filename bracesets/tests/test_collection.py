from bracesets.collection import SetCollection, next_name
from bracesets.structured import typed_set
import unittest


class TestNextName(unittest.TestCase):
    def test_sequence(self) -> None:
        cases = [
            ('', 'A'),
            ('A', 'B'),
            ('Y', 'Z'),
            ('Z', 'AA'),
            ('AZ', 'BA'),
            ('ZZ', 'AAA'),
            ('ABZ', 'ACA'),
        ]
        for name, expected in cases:
            with self.subTest(name=name):
                self.assertEqual(expected, next_name(name))

    def test_invalid_names(self) -> None:
        for name in ['a', 'A1', 'Ä']:
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    next_name(name)


class TestSetCollection(unittest.TestCase):
    def test_names_are_assigned_in_order(self) -> None:
        collection = SetCollection([typed_set('{1}'), typed_set('{2}')])
        self.assertEqual('C', collection.add(typed_set('{3}')))
        self.assertListEqual(
            ['A', 'B', 'C'], [name for name, _ in collection]
        )
        self.assertEqual('{2}', str(collection['B']))
        self.assertEqual(3, len(collection))

    def test_twenty_seventh_set_is_named_aa(self) -> None:
        collection = SetCollection(typed_set(f'{{{i}}}') for i in range(27))
        self.assertEqual('{26}', str(collection['AA']))

    def test_find_and_contains(self) -> None:
        s = typed_set('{1,{2}}')
        collection = SetCollection([s])
        self.assertIs(s, collection.find('A'))
        self.assertIsNone(collection.find('B'))
        self.assertIn('A', collection)
        self.assertIn(typed_set('{{2},1}'), collection)
        self.assertNotIn(typed_set('{1}'), collection)

    def test_remove_and_reset_names(self) -> None:
        collection = SetCollection(
            [typed_set('{1}'), typed_set('{2}'), typed_set('{3}')]
        )
        self.assertEqual('{1}', str(collection.remove('A')))
        with self.assertRaises(KeyError):
            collection['A']
        # names are not reused until they are reset
        self.assertEqual('D', collection.add(typed_set('{4}')))
        collection.reset_names()
        self.assertListEqual(
            [('A', '{2}'), ('B', '{3}'), ('C', '{4}')],
            [(name, str(s)) for name, s in collection],
        )

    def test_clear(self) -> None:
        collection = SetCollection([typed_set('{1}')])
        collection.clear()
        self.assertEqual(0, len(collection))
        self.assertEqual('A', collection.add(typed_set('{2}')))

    def test_none_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SetCollection().add(None)  # type: ignore[arg-type]
