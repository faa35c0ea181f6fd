"""Write a SetTree back out as a brace expression.

The output lists the elements in ascending order, then a single {} standing
in for any empty records that were dropped (unless the configuration says to
ignore them, or an empty subset is already written as {}), then the subsets in
ascending order. Equal trees always render to the same text, and rendering
the parse of a rendering gives the same text again.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bracesets.settree import SetTree

EMPTY_SET = '{}'


def render(tree: 'SetTree', empty: str = EMPTY_SET) -> str:
    """Render tree; an empty tree renders as empty."""
    if tree is None:
        raise ValueError('Cannot render None')
    if tree.is_empty:
        return empty
    row_terminator = tree.config.row_terminator
    parts = [tree.config.format_element(element) for element in tree.elements]
    if tree.shows_empty_marker:
        parts.append(EMPTY_SET)
    # Nested empty sets are always written as {} so that the text reparses.
    parts.extend(render(subset) for subset in tree.subsets)
    return '{' + row_terminator.join(parts) + '}'


def render_elements(tree: 'SetTree') -> str:
    return tree.config.row_terminator.join(
        tree.config.format_element(element) for element in tree.elements
    )
