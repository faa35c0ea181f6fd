from bracesets.config import ExtractionConfiguration
from bracesets.parse import parse
from bracesets.render import render, render_elements
from bracesets.settree import SetTree
from bracesets.tests.strategies import int_config, int_trees
from hypothesis import given
import unittest


class TestRender(unittest.TestCase):
    def test_empty_set(self) -> None:
        self.assertEqual('{}', render(SetTree(int_config)))

    def test_empty_marker_is_configurable(self) -> None:
        self.assertEqual('∅', render(SetTree(int_config), empty='∅'))

    def test_nested_empty_sets_use_braces(self) -> None:
        tree = parse('{1,{}}', int_config)
        self.assertEqual('{1,{}}', render(tree, empty='∅'))

    def test_elements_then_subsets(self) -> None:
        tree = parse('{{9},{1,2},3,{0}}', int_config)
        self.assertEqual('{3,{0},{9},{1,2}}', render(tree))

    def test_uses_row_terminator(self) -> None:
        config = ExtractionConfiguration.for_type(int, '; ')
        tree = parse('{2; 1; {4; 3}}', config)
        self.assertEqual('{1; 2; {3; 4}}', render(tree))

    def test_placeholder_appears_once(self) -> None:
        config = ExtractionConfiguration.for_type(int, ignore_empty_sets=False)
        tree = parse('{,1,,2,,{3,,}}', config)
        self.assertEqual('{1,2,{},{3,{}}}', render(tree))

    def test_placeholder_needs_a_member(self) -> None:
        config = ExtractionConfiguration.for_type(int, ignore_empty_sets=False)
        self.assertEqual('{}', render(parse('{,,}', config)))

    def test_render_elements(self) -> None:
        tree = parse('{3,1,{2}}', int_config)
        self.assertEqual('1,3', render_elements(tree))

    def test_none(self) -> None:
        with self.assertRaises(ValueError):
            render(None)  # type: ignore[arg-type]

    @given(int_trees)
    def test_equal_trees_render_equally(self, tree: SetTree[int]) -> None:
        self.assertEqual(render(tree), render(tree.copy()))
        self.assertEqual(str(tree), render(tree))
