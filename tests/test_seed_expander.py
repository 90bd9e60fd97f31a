from __future__ import annotations

import unittest

import numpy as np

from dualrng.core.seed_expander import expand_seed, expand_seed_into, expand_seeds
from dualrng.core.state import GeneratorState


class SeedExpanderTest(unittest.TestCase):
    def test_seed_one_reference_state(self) -> None:
        state = expand_seed(1)
        self.assertEqual(state.as_tuple(), (0x06B5233E, 0x92FD57BE, 0xB86DF9A0, 0x36A5E8E4))

    def test_other_pinned_states(self) -> None:
        self.assertEqual(expand_seed(12345).as_tuple(), (0xAFF5BEF1, 0xC92D48B2, 0x1178884A, 0x78D981B1))
        self.assertEqual(expand_seed(0xFFFFFFFF).as_tuple(), (0x035DC067, 0x25232587, 0x5091A980, 0x0CF8A385))

    def test_seed_is_reduced_modulo_2_32(self) -> None:
        self.assertEqual(expand_seed(-1).as_tuple(), expand_seed(0xFFFFFFFF).as_tuple())
        self.assertEqual(expand_seed(1 + (1 << 32)).as_tuple(), expand_seed(1).as_tuple())

    def test_expand_into_resets_existing_state(self) -> None:
        state = GeneratorState([9, 9, 9, 9])
        words = state.words
        expand_seed_into(state, 42)
        self.assertIs(state.words, words)
        self.assertEqual(state.as_tuple(), (0x46D6488F, 0x9A36D27E, 0xB0E6FDF9, 0x6C289E11))

    def test_vectorised_expansion_matches_scalar(self) -> None:
        seeds = [1, 42, 12345, 0xDEADBEEF, 0xFFFFFFFF]
        lanes = expand_seeds(np.array(seeds, dtype=np.uint32))
        self.assertEqual(lanes.dtype, np.uint32)
        self.assertEqual(lanes.shape, (5, 4))
        for row, seed in zip(lanes, seeds):
            self.assertEqual(tuple(int(word) for word in row), expand_seed(seed).as_tuple())

    def test_distinct_seeds_give_distinct_states(self) -> None:
        lanes = expand_seeds(np.arange(1, 4097, dtype=np.int64))
        unique_rows = np.unique(lanes, axis=0)
        self.assertEqual(unique_rows.shape[0], 4096)
        self.assertFalse(np.any(~lanes.any(axis=1)))


if __name__ == "__main__":
    unittest.main()
