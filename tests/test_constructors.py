import copy
import pickle
import unittest
from datetime import datetime

from optionpy import Some, NONE, some, option
from optionpy.option import _None


class TestOptionConstructor(unittest.TestCase):
    def test_none_gives_empty(self):
        self.assertIs(option(None), NONE)
        self.assertIs(option(), NONE)

    def test_values_give_some(self):
        self.assertTrue(isinstance(option(1), Some))
        self.assertTrue(isinstance(option("foo"), Some))
        self.assertTrue(isinstance(option(datetime.now()), Some))

    def test_falsy_values_are_present(self):
        for v in (0, "", False, []):
            o = option(v)
            self.assertTrue(o.is_defined)
            self.assertIs(o.get, v)


class TestSomeConstructor(unittest.TestCase):
    def test_always_wraps(self):
        self.assertTrue(isinstance(some(None), Some))
        self.assertIsNone(some(None).get)
        self.assertTrue(isinstance(some(1), Some))
        self.assertTrue(isinstance(some("bar"), Some))


class TestSingleton(unittest.TestCase):
    def test_new_instance_is_canonical(self):
        self.assertIs(_None(), NONE)

    def test_copy_and_pickle_keep_identity(self):
        self.assertIs(copy.copy(NONE), NONE)
        self.assertIs(copy.deepcopy(NONE), NONE)
        self.assertIs(pickle.loads(pickle.dumps(NONE)), NONE)

    def test_some_pickles_structurally(self):
        self.assertEqual(pickle.loads(pickle.dumps(some([1, 2]))), some([1, 2]))


if __name__ == "__main__":
    unittest.main()
