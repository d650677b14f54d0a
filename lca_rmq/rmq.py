from lca_rmq import combiners
from lca_rmq.segment_tree import SegmentTree


class RangeMinQuery(object):
    """Range-minimum queries with point updates.

    A SegmentTree with the minimum combiner. Each leaf holds the pair
    (item, index) so that a query can also report where its minimum sits;
    equal items resolve to the leftmost index. Items must be totally
    ordered.
    """

    def __init__(self, items, verbose=False):
        self._st = SegmentTree([(item, i) for i, item in enumerate(items)], combiners.minimum, verbose=verbose)

    def __len__(self):
        return len(self._st)

    def __getitem__(self, idx):
        return self._st[idx][0]

    def range_query(self, lo, hi):
        "Return min(items[lo..hi]), both ends inclusive."
        return self._st.range_query(lo, hi)[0]

    def argmin(self, lo, hi):
        "Return the leftmost index in [lo, hi] holding min(items[lo..hi])."
        return self._st.range_query(lo, hi)[1]

    def update(self, idx, value):
        self._st.update(idx, (value, idx))

    def values(self):
        return [item for item, _ in self._st.values()]
