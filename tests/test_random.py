"""
Named random streams.
"""

import pytest

from bouncer.utils.random import rng, seed_all


class TestStreams:

    def teardown_method(self):
        seed_all(None)

    def test_same_seed_same_draws(self):
        seed_all(3)
        first = rng("launch").random(5).tolist()
        seed_all(3)
        assert rng("launch").random(5).tolist() == first

    def test_pointer_draws_do_not_shift_launch_draws(self):
        seed_all(3)
        expected = rng("launch").random(5).tolist()
        seed_all(3)
        rng("pointer").normal(size=100)
        assert rng("launch").random(5).tolist() == expected

    def test_streams_differ(self):
        seed_all(3)
        assert rng("launch").random(5).tolist() != rng("pointer").random(5).tolist()

    def test_stream_is_cached_until_reseeded(self):
        seed_all(3)
        assert rng("launch") is rng("launch")
        gen = rng("launch")
        seed_all(3)
        assert rng("launch") is not gen

    def test_unknown_stream(self):
        with pytest.raises(ValueError):
            rng("audio")
