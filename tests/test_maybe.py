import copy
import pickle
import unittest

from monadic import Maybe, Just, NOTHING, just, from_nullable
from monadic.demo import half_maybe


class TestMaybeFunctor(unittest.TestCase):
    def test_map_just_and_nothing(self):
        self.assertEqual(Just(3).map(lambda i: i + 2), Just(5))
        calls = []
        r = NOTHING.map(lambda i: calls.append(i))
        self.assertIs(r, NOTHING)
        self.assertEqual(calls, [])

    def test_identity_and_composition(self):
        f = lambda x: x + 1
        g = lambda x: x * 10
        for m in (Just(4), NOTHING):
            self.assertEqual(m.map(lambda x: x), m)
            self.assertEqual(m.map(f).map(g), m.map(lambda x: g(f(x))))

    def test_nothing_survives_copy_and_pickle(self):
        self.assertIs(copy.copy(NOTHING), NOTHING)
        self.assertIs(copy.deepcopy(Just(NOTHING)).value, NOTHING)
        self.assertIs(pickle.loads(pickle.dumps(NOTHING)), NOTHING)
        self.assertEqual(pickle.loads(pickle.dumps(Just(NOTHING))), Just(NOTHING))

    def test_repr(self):
        self.assertEqual(repr(Just(5)), "Just(value=5)")
        self.assertEqual(repr(NOTHING), "Nothing")


class TestMaybeApplicative(unittest.TestCase):
    def test_apply(self):
        self.assertEqual(Just(2).apply(Just(lambda i: i + 3)), Just(5))
        self.assertIs(Just(2).apply(NOTHING), NOTHING)
        self.assertIs(NOTHING.apply(Just(lambda i: i + 3)), NOTHING)


class TestMaybeMonad(unittest.TestCase):
    def test_flat_map(self):
        self.assertIs(Just(3).flat_map(half_maybe), NOTHING)
        self.assertEqual(Just(4).flat_map(half_maybe), Just(2))
        self.assertEqual(Just(8) >> half_maybe >> half_maybe, Just(2))

    def test_halving_chain_from_twenty_ends_in_nothing(self):
        # 20 -> 10 -> 5 -> odd
        self.assertIs(Just(20) >> half_maybe >> half_maybe >> half_maybe, NOTHING)

    def test_short_circuit_never_calls_f(self):
        calls = []

        def spy(x):
            calls.append(x)
            return Just(x)

        r = Just(5).flat_map(half_maybe).flat_map(spy).flat_map(spy)
        self.assertIs(r, NOTHING)
        self.assertEqual(calls, [])

    def test_helpers(self):
        self.assertTrue(isinstance(just(1), Maybe))
        self.assertTrue(NOTHING.is_nothing())
        self.assertTrue(Just(1).is_just())
        self.assertEqual(from_nullable(None).get_or_else(5), 5)
        self.assertEqual(from_nullable(0), Just(0))
        self.assertEqual(Just(7).get_or_else(5), 7)
