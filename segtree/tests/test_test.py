from segtree.test import MyTestCase


class MyTestCaseTest(MyTestCase):
    def test_iter_equal(self):
        self.assertIterEqual([1, 2, 3], (x for x in [1, 2, 3]))

    def test_iter_equal_message(self):
        with self.assertRaises(AssertionError) as cm:
            self.assertIterEqual([1, 2, 3], [1, 2, 4])
        self.assertTrue(str(cm.exception).endswith("in iteration index 2"))
        self.assertNotIn("None", str(cm.exception))

        with self.assertRaises(AssertionError) as cm:
            self.assertIterEqual([1, 2, 3], [1, 5, 4], "values")
        self.assertTrue(str(cm.exception).endswith("in iteration index 1: values"))


if __name__ == "__main__":
    import unittest

    unittest.main()
