"""A mutable set that keeps its elements sorted.

The elements live in a red-black tree. Every node also records the size of
the subtree below it, so finding the element at a position, or the position
of an element, walks a single root-to-leaf path.
"""

from typing import (
    Any,
    Iterable,
    Iterator,
    MutableSet,
    Optional,
    TypeVar,
)

_T = TypeVar('_T')


class _Node:
    __slots__ = ('value', 'red', 'left', 'right', 'parent', 'size')

    def __init__(self, value: Any, nil: '_Node') -> None:
        self.value = value
        self.red = True
        self.left = nil
        self.right = nil
        self.parent = nil
        self.size = 1

    @classmethod
    def sentinel(cls) -> '_Node':
        nil = cls.__new__(cls)
        nil.value = None
        nil.red = False
        nil.left = nil.right = nil.parent = nil
        nil.size = 0
        return nil


def _compare(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def _reject_none(value: object) -> None:
    if value is None:
        raise ValueError('None cannot be stored in an OrderedSet')


class OrderedSet(MutableSet[_T]):
    """A set of mutually comparable elements iterated in ascending order.

    Two elements are duplicates when neither is less than the other. Adding
    a duplicate leaves the set unchanged.
    """

    def __init__(self, elements: Iterable[_T] = ()) -> None:
        super().__init__()
        self._nil = _Node.sentinel()
        self._root = self._nil
        for element in elements:
            self.add(element)

    def __contains__(self, element: object) -> bool:
        if element is None:
            return False
        return self._find(element) is not self._nil

    def __iter__(self) -> Iterator[_T]:
        stack = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __reversed__(self) -> Iterator[_T]:
        stack = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node.value
            node = node.left

    def __len__(self) -> int:
        return self._root.size

    def __getitem__(self, index: int) -> _T:
        return self._node_at(index).value

    def __repr__(self) -> str:
        return f'{type(self).__qualname__}({list(self)!r})'

    def add(self, value: _T) -> None:
        _reject_none(value)
        parent = self._nil
        node = self._root
        comparison = 0
        while node is not self._nil:
            comparison = _compare(value, node.value)
            if comparison == 0:
                return
            parent = node
            node = node.left if comparison < 0 else node.right
        new = _Node(value, self._nil)
        new.parent = parent
        if parent is self._nil:
            self._root = new
        elif comparison < 0:
            parent.left = new
        else:
            parent.right = new
        while parent is not self._nil:
            parent.size += 1
            parent = parent.parent
        self._insert_fixup(new)

    def discard(self, value: _T) -> None:
        self.pop_value(value)

    def remove(self, value: _T) -> None:
        _reject_none(value)
        node = self._find(value)
        if node is self._nil:
            raise KeyError(value)
        self._delete(node)

    def pop_value(self, value: _T) -> Optional[_T]:
        """Remove value and return the equal element that was stored.

        None is returned when no element equal to value is present."""
        _reject_none(value)
        node = self._find(value)
        if node is self._nil:
            return None
        stored = node.value
        self._delete(node)
        return stored

    def remove_at(self, index: int) -> _T:
        node = self._node_at(index)
        value = node.value
        self._delete(node)
        return value

    def index(self, value: _T) -> int:
        """Return the position of value in iteration order, or -1."""
        _reject_none(value)
        node = self._root
        rank = 0
        while node is not self._nil:
            comparison = _compare(value, node.value)
            if comparison < 0:
                node = node.left
            elif comparison > 0:
                rank += node.left.size + 1
                node = node.right
            else:
                return rank + node.left.size
        return -1

    def get(self, value: _T) -> Optional[_T]:
        _reject_none(value)
        node = self._find(value)
        return None if node is self._nil else node.value

    def min(self) -> _T:
        if self._root is self._nil:
            raise ValueError('Empty OrderedSet has no min')
        return self._minimum(self._root).value

    def max(self) -> _T:
        if self._root is self._nil:
            raise ValueError('Empty OrderedSet has no max')
        node = self._root
        while node.right is not self._nil:
            node = node.right
        return node.value

    def clear(self) -> None:
        self._root = self._nil

    def check_invariants(self) -> None:
        """Raise AssertionError if the tree is not a valid red-black tree."""
        assert not self._root.red, 'the root is red'
        assert self._root.parent is self._nil, 'the root has a parent'
        self._black_height(self._root)
        values = list(self)
        for a, b in zip(values, values[1:]):
            assert a < b, f'{a!r} is not less than {b!r}'

    def _black_height(self, node: _Node) -> int:
        if node is self._nil:
            return 1
        for child in (node.left, node.right):
            if child is not self._nil:
                assert child.parent is node, 'broken parent link'
                assert not (
                    node.red and child.red
                ), f'red node {child.value!r} has a red parent'
        assert (
            node.size == node.left.size + node.right.size + 1
        ), f'wrong subtree size at {node.value!r}'
        left = self._black_height(node.left)
        right = self._black_height(node.right)
        assert left == right, f'unequal black heights at {node.value!r}'
        return left + (0 if node.red else 1)

    def _find(self, value: Any) -> _Node:
        node = self._root
        while node is not self._nil:
            comparison = _compare(value, node.value)
            if comparison == 0:
                return node
            node = node.left if comparison < 0 else node.right
        return node

    def _node_at(self, index: int) -> _Node:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError('OrderedSet index out of range')
        node = self._root
        while True:
            left_size = node.left.size
            if index < left_size:
                node = node.left
            elif index == left_size:
                return node
            else:
                index -= left_size + 1
                node = node.right

    def _minimum(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y
        y.size = x.size
        x.size = x.left.size + x.right.size + 1

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y
        y.size = x.size
        x.size = x.left.size + x.right.size + 1

    def _insert_fixup(self, node: _Node) -> None:
        while node.parent.red:
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle.red:
                    parent.red = uncle.red = False
                    grandparent.red = True
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                parent.red = False
                grandparent.red = True
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle.red:
                    parent.red = uncle.red = False
                    grandparent.red = True
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                parent.red = False
                grandparent.red = True
                self._rotate_left(grandparent)
        self._root.red = False

    def _delete(self, node: _Node) -> None:
        # A node with two children takes its successor's value, and the
        # successor, which has no left child, is spliced out instead.
        if node.left is not self._nil and node.right is not self._nil:
            successor = self._minimum(node.right)
            node.value = successor.value
            node = successor
        child = node.left if node.left is not self._nil else node.right
        ancestor = node.parent
        while ancestor is not self._nil:
            ancestor.size -= 1
            ancestor = ancestor.parent
        # child may be the sentinel; its parent link is what the fixup
        # walks up from.
        child.parent = node.parent
        if node.parent is self._nil:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child
        if not node.red:
            self._delete_fixup(child)
        self._nil.parent = self._nil

    def _delete_fixup(self, node: _Node) -> None:
        while node is not self._root and not node.red:
            parent = node.parent
            if node is parent.left:
                sibling = parent.right
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    sibling = parent.right
                if not sibling.left.red and not sibling.right.red:
                    sibling.red = True
                    node = parent
                    continue
                if not sibling.right.red:
                    sibling.left.red = False
                    sibling.red = True
                    self._rotate_right(sibling)
                    sibling = parent.right
                sibling.red = parent.red
                parent.red = False
                sibling.right.red = False
                self._rotate_left(parent)
                node = self._root
            else:
                sibling = parent.left
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    sibling = parent.left
                if not sibling.left.red and not sibling.right.red:
                    sibling.red = True
                    node = parent
                    continue
                if not sibling.left.red:
                    sibling.right.red = False
                    sibling.red = True
                    self._rotate_left(sibling)
                    sibling = parent.left
                sibling.red = parent.red
                parent.red = False
                sibling.left.red = False
                self._rotate_right(parent)
                node = self._root
        node.red = False
