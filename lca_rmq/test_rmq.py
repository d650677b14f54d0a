import random
import unittest

from lca_rmq.rmq import RangeMinQuery


class TestRangeMinQuery(unittest.TestCase):
    def test_range_min(self):
        random.seed(3)
        n = 200
        items = [random.randrange(n) for _ in range(n)]
        rmq = RangeMinQuery(items)
        for _ in range(n):
            lo, hi = sorted(random.sample(range(n), 2))
            self.assertEqual(rmq.range_query(lo, hi), min(items[lo:hi + 1]))

    def test_argmin_is_leftmost(self):
        items = [4, 1, 3, 1, 0, 2, 0]
        rmq = RangeMinQuery(items)
        self.assertEqual(rmq.argmin(0, 3), 1)
        self.assertEqual(rmq.argmin(2, 3), 3)
        self.assertEqual(rmq.argmin(0, 6), 4)
        self.assertEqual(rmq.argmin(5, 6), 6)

    def test_update(self):
        items = [(3*i + 2) % 10 for i in range(10)]
        rmq = RangeMinQuery(items)
        self.assertEqual(rmq.range_query(3, 5), 1)
        rmq.update(3, 9)
        self.assertEqual(rmq.range_query(3, 5), 4)
        self.assertEqual(rmq.argmin(3, 5), 4)
        self.assertEqual(rmq[3], 9)
        items[3] = 9
        self.assertEqual(rmq.values(), items)
        self.assertEqual(len(rmq), 10)

    def test_tuples(self):
        pairs = [(1, 'b'), (0, 'z'), (0, 'a'), (2, 'a')]
        rmq = RangeMinQuery(pairs)
        self.assertEqual(rmq.range_query(0, 3), (0, 'a'))
        self.assertEqual(rmq.range_query(0, 1), (0, 'z'))

    def test_invalid_input(self):
        with self.assertRaises(ValueError):
            RangeMinQuery([])
        rmq = RangeMinQuery([1, 2, 3])
        with self.assertRaises(ValueError):
            rmq.range_query(2, 1)
        with self.assertRaises(IndexError):
            rmq.argmin(0, 3)
        with self.assertRaises(IndexError):
            rmq.update(-1, 0)


if __name__ == '__main__':
    unittest.main()
