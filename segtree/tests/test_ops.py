from segtree.ops import AND, CONCAT, FIRST, GCD, LAST, MAX, MIN, OR, PRODUCT, SUM, XOR, Monoid, concat
from segtree.segment_tree import SegmentTree
from segtree.test import MyTestCase, parametrize, parametrize_product


class OpsTest(MyTestCase):
    @parametrize_product(
        (SUM, PRODUCT, MIN, MAX, GCD, OR, AND, XOR),
        (0, 1, 7, 12, 255),
    )
    def test_identity(self, monoid, x):
        self.assertEqual(x, monoid.combine(monoid.identity, x))
        self.assertEqual(x, monoid.combine(x, monoid.identity))

    @parametrize(
        ((1,), (2, 3)),
        ((), (4,)),
    )
    def test_concat(self, a, b):
        self.assertEqual(a + b, CONCAT.combine(a, b))
        self.assertEqual(a, concat(a, CONCAT.identity))

    def test_monoid_unpack(self):
        combine, identity = Monoid(max, 0)
        self.assertIs(max, combine)
        self.assertEqual(0, identity)


class OpsTreeTest(MyTestCase):
    @parametrize(
        (GCD, [12, 18, 24, 9], (0, 2), 6),
        (GCD, [12, 18, 24, 9], (0, 3), 3),
        (OR, [1, 2, 4, 8, 16], (1, 3), 14),
        (XOR, [5, 3, 6], (0, 2), 0),
        (AND, [7, 6, 12], (0, 1), 6),
        (PRODUCT, [2, 3, 4, 5], (1, 3), 60),
        (FIRST, [None, 3, None, 5], (0, 3), 3),
        (FIRST, [None, None, None, 5], (0, 2), None),
        (LAST, [None, 3, None, 5], (0, 3), 5),
        (LAST, [None, 3, None, 5], (0, 2), 3),
    )
    def test_range_sum(self, monoid, values, args, truth):
        st = SegmentTree.from_iterable(values, *monoid)
        result = st.range_sum(*args)
        self.assertEqual(truth, result)
        self.assertTreeValid(st)


if __name__ == "__main__":
    import unittest

    unittest.main()
