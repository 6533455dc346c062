import unittest

from monadic import Chunk


class TestChunk(unittest.TestCase):
    def test_apply_is_function_major(self):
        c = Chunk.of(1, 2, 3).apply([lambda i: i + 3, lambda i: i * 2])
        self.assertEqual(c.to_list(), [4, 5, 6, 2, 4, 6])

    def test_apply_empty(self):
        self.assertEqual(len(Chunk.of(1, 2).apply([])), 0)
        self.assertEqual(Chunk.of().apply([str]).to_list(), [])

    def test_map_flat_map(self):
        c = Chunk.from_iterable(range(3)).map(lambda x: x + 1)
        self.assertEqual(list(c), [1, 2, 3])
        self.assertEqual(c.flat_map(lambda x: Chunk.of(x, -x)).to_list(), [1, -1, 2, -2, 3, -3])
        self.assertEqual(c.map(lambda x: x), c)

    def test_map_composition(self):
        f = lambda x: x + 1
        g = lambda x: x * 10
        for c in (Chunk.of(1, 2, 3), Chunk.of()):
            self.assertEqual(c.map(f).map(g), c.map(lambda x: g(f(x))))
