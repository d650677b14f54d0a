from lca_rmq import help_functions
from lca_rmq.combiners import get_combiner


class Node:
    __slots__ = ['lo', 'hi', 'mid', 'value']
    def __init__(self, lo, hi, value=None):
        self.lo = lo
        self.hi = hi
        self.mid = (lo + hi) // 2
        self.value = value

    def is_leaf(self):
        return self.lo == self.hi


def construct_tree(tree, leafs, fn, pos, lo, hi):
    """
        Builds the node at tree[pos] covering leafs[lo..hi] (inclusive) and
        everything below it. Children of tree[pos] live at 2*pos and 2*pos + 1
        and cover [lo, mid] and [mid+1, hi].
    """
    node = Node(lo, hi)
    tree[pos] = node
    if lo == hi:
        node.value = leafs[lo]
        return node.value

    left_value = construct_tree(tree, leafs, fn, 2*pos, lo, node.mid)
    right_value = construct_tree(tree, leafs, fn, 2*pos + 1, node.mid + 1, hi)
    node.value = fn(left_value, right_value)
    return node.value


def range_query(tree, fn, l, r, pos=1):
    node = tree[pos]
    if l == node.lo and r == node.hi:
        return node.value # cached, no recomputation
    if r <= node.mid:
        return range_query(tree, fn, l, r, 2*pos)
    if l > node.mid:
        return range_query(tree, fn, l, r, 2*pos + 1)

    left_ans = range_query(tree, fn, l, node.mid, 2*pos)
    right_ans = range_query(tree, fn, node.mid + 1, r, 2*pos + 1)
    return fn(left_ans, right_ans)


def find_leaf(tree, idx):
    pos = 1 # root position
    while not tree[pos].is_leaf():
        if idx <= tree[pos].mid:
            pos = 2*pos
        else:
            pos = 2*pos + 1
    return pos


def update(tree, fn, idx, value):
    pos = find_leaf(tree, idx)
    tree[pos].value = value
    while pos > 1:
        # move up one level at a time and recombine the two children
        pos >>= 1
        tree[pos].value = fn(tree[2*pos].value, tree[2*pos + 1].value)


class SegmentTree(object):
    "Segment tree with range queries and point updates over a fixed-length sequence."

    def __init__(self, items, fn, verbose=False):
        """Build a SegmentTree over a non-empty sequence of items.

        fn -- function taking two items and returning their combination,
        for example "min" to query the range-minimum. It must be
        associative, it does not have to be commutative. One of the names
        'min', 'max', 'sum' or 'prod' is also accepted.

        """
        items = list(items)
        if not items:
            raise ValueError('Cannot build a segment tree over an empty sequence.')
        self._fn = get_combiner(fn)
        self._n = n = len(items)
        # 4n slots is enough for any n with children at 2*pos, 2*pos + 1
        self._tree = [None] * (4 * n)
        construct_tree(self._tree, items, self._fn, 1, 0, n - 1)
        if verbose:
            nr_nodes = sum(1 for node in self._tree if node is not None)
            help_functions.eprint('Built segment tree over {0} items ({1} nodes).'.format(n, nr_nodes))

    def __len__(self):
        return self._n

    def __getitem__(self, idx):
        help_functions.check_index(idx, self._n)
        return self._tree[find_leaf(self._tree, idx)].value

    def range_query(self, lo, hi):
        "Return the combination of items[lo..hi], both ends inclusive."
        help_functions.check_range(lo, hi, self._n)
        return range_query(self._tree, self._fn, lo, hi)

    def update(self, idx, value):
        help_functions.check_index(idx, self._n)
        update(self._tree, self._fn, idx, value)

    def total(self):
        return self._tree[1].value

    def values(self):
        leafs = sorted((node for node in self._tree if node is not None and node.is_leaf()), key=lambda x: x.lo)
        return [node.value for node in leafs]
