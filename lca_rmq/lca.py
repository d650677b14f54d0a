"""
    Lowest common ancestor queries on a static rooted tree, answered by a
    range-minimum query over an Euler tour of the tree.

    Between the first occurrences of u and v in the tour, the traversal only
    visits the subtree of lca(u, v) and returns to lca(u, v) itself at least
    once (or starts there), so the shallowest (depth, node) pair in that
    window is an occurrence of lca(u, v).
"""

import collections.abc

import networkx as nx

from lca_rmq import help_functions
from lca_rmq.rmq import RangeMinQuery


def children_table(neighbors):
    """
        Normalises a dict {node: children} or a list indexed by node into a
        dict of child lists, checking node ids on the way.
    """
    if isinstance(neighbors, collections.abc.Mapping):
        items = neighbors.items()
    else:
        items = enumerate(neighbors)

    children = {}
    for node, node_children in items:
        help_functions.check_node_id(node)
        children[node] = list(node_children)
        for child in children[node]:
            help_functions.check_node_id(child)
    return children


def euler_tour(root, children, undirected=False):
    """
        Depth-first traversal from root (depth 0) that appends (depth, node)
        when entering a node and appends the parent's pair again after each
        child returns. Returns the tour, the position where each node was
        first entered and the depth of each node.

        With undirected=True the child lists may contain the parent, which is
        skipped.
    """
    tour = [(0, root)]
    first_seen = {root: 0}
    depths = {root: 0}
    # explicit stack of (node, parent, child iterator), deep trees must not hit the recursion limit
    stack = [(root, None, iter(children.get(root, ())))]
    while stack:
        node, parent, child_iter = stack[-1]
        child = next(child_iter, None)
        if child is None:
            stack.pop()
            if stack:
                tour.append((depths[parent], parent))
            continue
        if undirected and child == parent:
            continue
        if child in depths:
            raise ValueError('Node {0} is reached twice from root {1}, the input is not a tree.'.format(child, root))

        depth = depths[node] + 1
        depths[child] = depth
        first_seen[child] = len(tour)
        tour.append((depth, child))
        stack.append((child, node, iter(children.get(child, ()))))

    return tour, first_seen, depths


def check_reachable(children, depths, root):
    declared = set(node for node, node_children in children.items() if node_children)
    for node_children in children.values():
        declared.update(node_children)
    unreachable = sorted(declared.difference(depths))
    if unreachable:
        raise ValueError('Nodes not reachable from root {0}: {1}'.format(root, unreachable[:10]))


class LCA(object):
    "Lowest common ancestor structure over a static rooted tree."

    def __init__(self, root, neighbors, undirected=False, verbose=False):
        """Build the structure for the tree hanging from root.

        neighbors -- dict or list mapping a node id to the ordered sequence
        of its children. Node ids are non-negative integers and index the
        lookup tables directly.

        """
        help_functions.check_node_id(root)
        children = children_table(neighbors)
        tour, first_seen, depths = euler_tour(root, children, undirected)
        check_reachable(children, depths, root)
        assert len(tour) == 2 * (len(depths) - 1) + 1

        size = max(depths) + 1
        self.root = root
        self.euler_tour = tour
        self.node_to_index = [None] * size
        self.depths = [None] * size
        for node, pos in first_seen.items():
            self.node_to_index[node] = pos
            self.depths[node] = depths[node]
        self._nr_nodes = len(depths)
        self.rmq = RangeMinQuery(tour, verbose=verbose)

        if verbose:
            help_functions.eprint('LCA: {0} nodes, Euler tour of length {1}, max depth {2}.'.format(self._nr_nodes, len(tour), max(depths.values())))

    @classmethod
    def from_graph(cls, graph, root=None, verbose=False):
        """Build from a networkx tree.

        A DiGraph must be directed parent -> child and root defaults to its
        only node without predecessors. An undirected Graph needs a root.
        Children are visited in sorted order.

        """
        if len(graph) == 0 or not nx.is_tree(graph):
            raise ValueError('Graph is not a tree.')

        if graph.is_directed():
            if not nx.is_arborescence(graph):
                raise ValueError('Directed graph is not an arborescence (edges must point from parent to child).')
            if root is None:
                root = next(node for node, in_degree in graph.in_degree if in_degree == 0)
            neighbors = {node: sorted(graph.successors(node)) for node in graph}
            undirected = False
        else:
            if root is None:
                raise ValueError('An undirected graph needs an explicit root.')
            neighbors = {node: sorted(graph.neighbors(node)) for node in graph}
            undirected = True

        if root not in graph:
            raise ValueError('Root {0} is not a node of the graph.'.format(root))
        return cls(root, neighbors, undirected=undirected, verbose=verbose)

    def __len__(self):
        return self._nr_nodes

    def __contains__(self, node):
        return isinstance(node, int) and not isinstance(node, bool) and 0 <= node < len(self.node_to_index) and self.node_to_index[node] is not None

    def _index_of(self, node):
        if node not in self:
            raise ValueError('Node {0!r} is not in the tree rooted at {1}.'.format(node, self.root))
        return self.node_to_index[node]

    def lca_query(self, u, v):
        i = self._index_of(u)
        j = self._index_of(v)
        if i > j:
            i, j = j, i
        depth, node = self.rmq.range_query(i, j)
        return node

    def depth(self, node):
        self._index_of(node)
        return self.depths[node]

    def distance(self, u, v):
        "Number of edges on the path between u and v."
        return self.depth(u) + self.depth(v) - 2 * self.depths[self.lca_query(u, v)]
