import unittest

from optionpy import NONE, some, option


VALUES = [0, 1, -7, "", "abc", (1, 2), False]
OPTIONS = [NONE] + [some(v) for v in VALUES]


def f(x):
    return (x, "f")


def g(x):
    return [x]


def k(x):
    return option(x if x else None)


class TestFunctorLaws(unittest.TestCase):
    def test_identity(self):
        for v in VALUES:
            self.assertEqual(some(v).map(lambda x: x), some(v))
        self.assertIs(NONE.map(f), NONE)

    def test_composition(self):
        for o in OPTIONS:
            self.assertEqual(o.map(f).map(g), o.map(lambda x: g(f(x))))


class TestMonadLaws(unittest.TestCase):
    def test_left_identity(self):
        for v in VALUES:
            self.assertEqual(some(v).flat_map(k), k(v))

    def test_right_identity(self):
        for o in OPTIONS:
            self.assertEqual(o.flat_map(some), o)

    def test_associativity(self):
        h = lambda x: some(len(x)) if isinstance(x, (str, tuple)) else NONE
        for o in OPTIONS:
            self.assertEqual(o.flat_map(k).flat_map(h), o.flat_map(lambda x: k(x).flat_map(h)))


class TestQueries(unittest.TestCase):
    def test_defined_and_empty_disagree(self):
        for o in OPTIONS:
            self.assertNotEqual(o.is_defined, o.is_empty)
            self.assertEqual(o.non_empty, o.is_defined)


if __name__ == "__main__":
    unittest.main()
