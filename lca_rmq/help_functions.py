import sys


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


def check_index(idx, n):
    if not 0 <= idx < n:
        raise IndexError('Index {0} out of range for sequence of length {1}.'.format(idx, n))


def check_range(lo, hi, n):
    if lo > hi:
        raise ValueError('Empty query range [{0}, {1}], need lo <= hi.'.format(lo, hi))
    check_index(lo, n)
    check_index(hi, n)


def check_node_id(node):
    # node ids double as table indices
    if isinstance(node, bool) or not isinstance(node, int) or node < 0:
        raise ValueError('Node ids must be non-negative integers, got {0!r}.'.format(node))
