from __future__ import annotations

import threading
import unittest

from dualrng.generator import MODE_DETERMINISTIC, MODE_NATIVE, DualModeRNG
from dualrng.sources.fixed import SequenceSource
from dualrng.sources.native import OSEntropySource

SEED_12345_PREFIX = (0x7AE3A926, 0x9B13CC03, 0x24852372)


class DualModeRNGTest(unittest.TestCase):
    def test_starts_native_and_reseeds_source_once(self) -> None:
        source = SequenceSource([10, 20, 30])
        rng = DualModeRNG(source=source)
        self.assertEqual(rng.mode, MODE_NATIVE)
        self.assertEqual(source.reseed_count, 1)
        self.assertEqual([rng.next_uint32() for _ in range(3)], [10, 20, 30])

    def test_nonzero_seed_selects_deterministic_mode(self) -> None:
        source = SequenceSource([10, 20, 30])
        rng = DualModeRNG(source=source)
        rng.set_seed(12345)
        self.assertEqual(rng.mode, MODE_DETERMINISTIC)
        self.assertTrue(rng.deterministic)
        self.assertEqual(tuple(rng.next_uint32() for _ in range(3)), SEED_12345_PREFIX)
        # The native source is not consulted in deterministic mode.
        self.assertEqual(source.position, 0)
        self.assertEqual(source.reseed_count, 1)

    def test_zero_seed_switches_back_and_reseeds_native(self) -> None:
        source = SequenceSource([10, 20, 30])
        rng = DualModeRNG(source=source, seed=7)
        rng.next_uint32()
        rng.set_seed(0)
        self.assertEqual(rng.mode, MODE_NATIVE)
        self.assertEqual(source.reseed_count, 2)
        self.assertEqual(rng.next_uint32(), 10)

    def test_determinism_over_ten_thousand_outputs(self) -> None:
        first = DualModeRNG(source=SequenceSource([1]), seed=987654321)
        second = DualModeRNG(source=SequenceSource([2]), seed=987654321)
        self.assertEqual(first.fill(10_000).tolist(), second.fill(10_000).tolist())

    def test_mode_switch_matches_fresh_instance(self) -> None:
        switched = DualModeRNG(source=SequenceSource([5, 6]))
        switched.next_uint32()
        switched.set_seed(0)
        switched.next_uint32()
        switched.set_seed(12345)
        fresh = DualModeRNG(source=SequenceSource([5, 6]), seed=12345)
        self.assertEqual(switched.state, fresh.state)
        self.assertEqual(switched.fill(100).tolist(), fresh.fill(100).tolist())

    def test_reseeding_same_value_restarts_stream(self) -> None:
        rng = DualModeRNG(source=SequenceSource([1]), seed=12345)
        rng.fill(17)
        rng.set_seed(12345)
        self.assertEqual(tuple(rng.fill(3).tolist()), SEED_12345_PREFIX)

    def test_seed_wraps_to_32_bits(self) -> None:
        wrapped = DualModeRNG(source=SequenceSource([1]), seed=12345 + (1 << 32))
        self.assertEqual(tuple(wrapped.fill(3).tolist()), SEED_12345_PREFIX)
        native = DualModeRNG(source=SequenceSource([1]), seed=1 << 32)
        self.assertEqual(native.mode, MODE_NATIVE)

    def test_non_integer_seed_rejected(self) -> None:
        rng = DualModeRNG(source=SequenceSource([1]))
        with self.assertRaises(TypeError):
            rng.set_seed(1.5)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            rng.set_seed("12345")  # type: ignore[arg-type]

    def test_native_output_masked_to_32_bits(self) -> None:
        class WideSource:
            name = "wide"

            def reseed(self) -> None:
                pass

            def next_uint32(self) -> int:
                return (1 << 40) | 0xABCD

        rng = DualModeRNG(source=WideSource())
        self.assertEqual(rng.next_uint32(), 0xABCD)

    def test_native_fill_uses_source(self) -> None:
        rng = DualModeRNG(source=SequenceSource([3, 4]))
        self.assertEqual(rng.fill(5).tolist(), [3, 4, 3, 4, 3])
        with self.assertRaises(ValueError):
            rng.fill(-1)

    def test_native_mode_is_not_reproducible(self) -> None:
        first = DualModeRNG(source=OSEntropySource(), seed=12345)
        first.set_seed(0)
        native_prefix = tuple(first.fill(4).tolist())
        second = DualModeRNG(source=OSEntropySource(), seed=0)
        self.assertNotEqual(native_prefix[:3], SEED_12345_PREFIX)
        self.assertNotEqual(native_prefix, tuple(second.fill(4).tolist()))

    def test_randbelow_rejects_biased_tail(self) -> None:
        rng = DualModeRNG(source=SequenceSource([0xFFFFFFFF, 7]))
        self.assertEqual(rng.randbelow(3), 1)
        with self.assertRaises(ValueError):
            rng.randbelow(0)
        with self.assertRaises(ValueError):
            rng.randbelow((1 << 32) + 1)

    def test_randbelow_full_range_is_identity(self) -> None:
        rng = DualModeRNG(source=SequenceSource([0xFFFFFFFF]))
        self.assertEqual(rng.randbelow(1 << 32), 0xFFFFFFFF)

    def test_random_float_bounds(self) -> None:
        self.assertEqual(DualModeRNG(source=SequenceSource([0])).random(), 0.0)
        top = DualModeRNG(source=SequenceSource([0xFFFFFFFF])).random()
        self.assertLess(top, 1.0)
        self.assertGreater(top, 0.999999)
        seeded = DualModeRNG(source=SequenceSource([0]), seed=42)
        values = [seeded.random() for _ in range(1000)]
        self.assertTrue(all(0.0 <= value < 1.0 for value in values))

    def test_concurrent_draws_consume_each_output_once(self) -> None:
        shared = DualModeRNG(source=SequenceSource([1]), seed=2024)
        expected = DualModeRNG(source=SequenceSource([1]), seed=2024).fill(4000).tolist()
        results: list[list[int]] = [[] for _ in range(4)]

        def worker(index: int) -> None:
            for _ in range(1000):
                results[index].append(shared.next_uint32())

        threads = [threading.Thread(target=worker, args=(index,)) for index in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        drawn = sorted(value for chunk in results for value in chunk)
        self.assertEqual(drawn, sorted(expected))


if __name__ == "__main__":
    unittest.main()
