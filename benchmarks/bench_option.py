"""Benchmarks for Option type and combinators.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

import asyncio

from klaw_option import Nothing, Some, of_obj, ops, sequence
from klaw_option.async_ import ops as aops


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_of_obj_value(self, benchmark):
        """Benchmark of_obj on a present value."""
        benchmark(of_obj, 'value')

    def test_of_obj_none(self, benchmark):
        """Benchmark of_obj on None."""
        benchmark(of_obj, None)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_bind(self, benchmark):
        some = Some(5)
        benchmark(some.bind, lambda x: Some(x * 2))

    def test_some_default_value(self, benchmark):
        some = Some(5)
        benchmark(some.default_value, 0)

    def test_nothing_default_value(self, benchmark):
        benchmark(Nothing.default_value, 0)


# =============================================================================
# Free function benchmarks
# =============================================================================


class TestOpsFunctions:
    """Benchmark the free-function forms against methods."""

    def test_ops_omap(self, benchmark):
        some = Some(5)
        benchmark(ops.omap, some, lambda x: x * 2)

    def test_ops_map2(self, benchmark):
        benchmark(ops.map2, Some(1), Some(2), lambda a, b: a + b)

    def test_sequence_100(self, benchmark):
        options = [Some(i) for i in range(100)]
        benchmark(sequence, options)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        """Benchmark 3-step chain on Some."""

        def chain():
            return Some(5).map(lambda x: x + 1).map(lambda x: x * 2).bind(lambda x: Some(x - 1))

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (should short-circuit)."""

        def chain():
            return Nothing.map(lambda x: x + 1).map(lambda x: x * 2).bind(lambda x: Some(x - 1))

        benchmark(chain)


# =============================================================================
# Async benchmarks
# =============================================================================


class TestAsyncOps:
    """Benchmark async combinators driven by a single event loop."""

    def test_async_omap_plain_option(self, benchmark):
        """Benchmark async omap with no awaitable inputs."""
        loop = asyncio.new_event_loop()
        try:
            benchmark(lambda: loop.run_until_complete(aops.omap(Some(5), lambda x: x * 2)))
        finally:
            loop.close()


# =============================================================================
# Memory benchmarks
# =============================================================================


class TestOptionMemory:
    """Rough memory comparison."""

    def test_create_1000_some(self, benchmark):
        """Create 1000 Some objects."""

        def create():
            return [Some(i) for i in range(1000)]

        benchmark(create)
