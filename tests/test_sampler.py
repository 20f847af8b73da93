"""Tests for Sampler seeding and scalar sampling."""

from __future__ import annotations

import math

import pytest
from numpy.random import PCG64DXSM, Generator

from vecrand.core.rng import SeedPair
from vecrand.core.sampler import Sampler


def _draw_mixed(s: Sampler) -> list[object]:
    """One call of every sampling method, in a fixed order."""
    return [
        s.uniform_float(),
        s.normal_float(),
        s.bounded_int(1000),
        s.raw_uint64(),
        s.uniform_range(-5.0, 5.0),
        s.uniform3(),
        s.unit_vector3(),
        s.in_disc(2.0),
        s.in_disc_angle(2.0),
    ]


class TestConstruction:
    def test_create_is_index_zero(self) -> None:
        assert Sampler.create(42).seed_pair == SeedPair(0, 42)
        assert Sampler.create(42).uniform3() == Sampler.create_indexed(0, 42).uniform3()

    def test_create_indexed_seed_pair(self) -> None:
        assert Sampler.create_indexed(5, 42).seed_pair == SeedPair(5, 42)

    def test_same_seed_same_sequence(self) -> None:
        a = Sampler.create_indexed(3, 1234)
        b = Sampler.create_indexed(3, 1234)
        for _ in range(20):
            assert _draw_mixed(a) == _draw_mixed(b)

    def test_different_index_different_sequence(self) -> None:
        a = Sampler.create_indexed(0, 42)
        b = Sampler.create_indexed(1, 42)
        assert a.uniform3() != b.uniform3()

    def test_zero_seed_not_reproducible(self) -> None:
        a = Sampler.create(0)
        b = Sampler.create(0)
        assert a.seed_pair != b.seed_pair
        assert a.uniform3() != b.uniform3()

    def test_zero_seed_with_injected_entropy(self, fixed_entropy) -> None:  # type: ignore[no-untyped-def]
        a = Sampler.create_indexed(9, 0, entropy=fixed_entropy([11, 22]))
        assert a.seed_pair == SeedPair(11, 22)
        b = Sampler.from_seed_pair(SeedPair(11, 22))
        assert a.uniform3() == b.uniform3()

    def test_replay_from_recorded_pair(self, random_sampler: Sampler) -> None:
        replay = Sampler.from_seed_pair(random_sampler.seed_pair)
        assert _draw_mixed(random_sampler) == _draw_mixed(replay)

    def test_alias_shares_stream(self) -> None:
        a = Sampler.create(42)
        alias = a
        first = alias.uniform_float()
        assert a.uniform_float() != first
        assert Sampler.create(42).uniform_float() == first

    def test_generator_shares_stream(self) -> None:
        a = Sampler.create(42)
        b = Sampler.create(42)
        assert isinstance(a.generator, Generator)
        a.generator.random()
        b.uniform_float()
        assert a.uniform_float() == b.uniform_float()

    def test_repr_shows_seed_pair(self) -> None:
        assert repr(Sampler.create_indexed(2, 7)) == "Sampler(seed_pair=(2, 7))"


class TestGolden:
    def test_uniform3_seed_42(self, sampler: Sampler) -> None:
        """Regression fixture: Create(42) + Uniform3 on the PCG64DXSM core."""
        assert sampler.uniform3() == (0.6684007764691958, 0.006805009518349059, 0.6579981066789486)

    def test_raw_uint64_seed_42(self, sampler: Sampler) -> None:
        values = [sampler.raw_uint64() for _ in range(3)]
        assert values == [12329818062196000797, 125530269004142706, 12137922674892001441]

    def test_seed_42_is_plain_pcg64dxsm(self, sampler: Sampler) -> None:
        """Worker 0 with seed 42 follows numpy's own PCG64DXSM(42) stream."""
        expected = Generator(PCG64DXSM(42)).random(3)
        assert sampler.uniform3() == (expected[0], expected[1], expected[2])

    def test_uniform3_order_x_y_z(self) -> None:
        a = Sampler.create(42)
        b = Sampler.create(42)
        x, y, z = a.uniform3()
        assert (x, y, z) == (b.uniform_float(), b.uniform_float(), b.uniform_float())

    def test_uniform3_advances_three_draws(self) -> None:
        a = Sampler.create(42)
        b = Sampler.create(42)
        a.uniform3()
        for _ in range(3):
            b.uniform_float()
        assert a.uniform_float() == b.uniform_float()


class TestPrimitives:
    def test_uniform_float_in_unit_interval(self, random_sampler: Sampler) -> None:
        for _ in range(1000):
            v = random_sampler.uniform_float()
            assert 0.0 <= v < 1.0

    def test_uniform3_components_in_unit_interval(self, random_sampler: Sampler) -> None:
        seen = set()
        for _ in range(10):
            v = random_sampler.uniform3()
            assert all(0.0 <= c < 1.0 for c in v)
            seen.add(v)
        assert len(seen) == 10

    @pytest.mark.parametrize(("start", "end"), [(0.0, 1.0), (-3.0, 2.5), (10.0, 10.5), (1e6, 2e6)])
    def test_uniform_range_bounds(self, random_sampler: Sampler, start: float, end: float) -> None:
        for _ in range(2000):
            v = random_sampler.uniform_range(start, end)
            assert start <= v < end

    def test_uniform_range_empty(self, sampler: Sampler) -> None:
        assert sampler.uniform_range(3.0, 3.0) == 3.0

    def test_uniform_range_reversed_is_not_checked(self, sampler: Sampler) -> None:
        """A reversed range is a caller error; it yields a value between the two ends."""
        for _ in range(100):
            v = sampler.uniform_range(5.0, 1.0)
            assert 1.0 < v <= 5.0

    def test_bounded_int_hits_every_value(self, random_sampler: Sampler) -> None:
        seen = {random_sampler.bounded_int(10) for _ in range(1000)}
        assert seen == set(range(10))

    def test_bounded_int_returns_int(self, sampler: Sampler) -> None:
        assert type(sampler.bounded_int(5)) is int

    def test_bounded_int_zero_raises(self, sampler: Sampler) -> None:
        with pytest.raises(ValueError):
            sampler.bounded_int(0)

    def test_raw_uint64_distinct(self, random_sampler: Sampler) -> None:
        values = [random_sampler.raw_uint64() for _ in range(100)]
        assert len(set(values)) == 100
        assert all(0 <= v < 2**64 for v in values)

    def test_raw_uint64_is_bit_generator_output(self) -> None:
        expected = PCG64DXSM(42).random_raw(3)
        s = Sampler.create(42)
        assert [s.raw_uint64() for _ in range(3)] == [int(v) for v in expected]

    def test_normal_float_moments(self, sampler: Sampler) -> None:
        values = [sampler.normal_float() for _ in range(20_000)]
        mean = sum(values) / len(values)
        var = sum((v - mean) ** 2 for v in values) / len(values)
        assert abs(mean) < 0.05
        assert abs(var - 1.0) < 0.05


class TestUnitVector:
    def test_unit_length(self, random_sampler: Sampler) -> None:
        for _ in range(100):
            x, y, z = random_sampler.unit_vector3()
            assert abs(math.sqrt(x * x + y * y + z * z) - 1.0) <= 1e-9

    def test_normalizes_gaussian_triple(self) -> None:
        g = Generator(PCG64DXSM(42))
        x, y, z = g.standard_normal(3)
        r = math.sqrt(x * x + y * y + z * z)
        assert Sampler.create(42).unit_vector3() == (x / r, y / r, z / r)

    def test_redraws_degenerate_triple(self) -> None:
        """A triple at the origin is rejected and all three components redrawn."""

        class StubGenerator:
            def __init__(self) -> None:
                self.values = iter([0.0, 0.0, 0.0, 3.0, 0.0, 4.0])

            def standard_normal(self) -> float:
                return next(self.values)

        s = Sampler(StubGenerator(), SeedPair(0, 1))  # type: ignore[arg-type]
        assert s.unit_vector3() == (0.6, 0.0, 0.8)


class TestDisc:
    def test_in_disc_within_radius(self, random_sampler: Sampler) -> None:
        r = 2.5
        for _ in range(1000):
            x, y = random_sampler.in_disc(r)
            assert math.hypot(x, y) <= r * (1 + 1e-12)

    def test_in_disc_angle_within_radius(self, random_sampler: Sampler) -> None:
        r = 3.0
        for _ in range(1000):
            x, y = random_sampler.in_disc_angle(r)
            assert math.hypot(x, y) <= r * (1 + 1e-12)

    def test_both_methods_unit_disc(self, random_sampler: Sampler) -> None:
        for _ in range(100):
            x1, y1 = random_sampler.in_disc(1.0)
            x2, y2 = random_sampler.in_disc_angle(1.0)
            assert math.hypot(x1, y1) <= 1.0 + 1e-12
            assert math.hypot(x2, y2) <= 1.0 + 1e-12

    def test_zero_radius(self, sampler: Sampler) -> None:
        assert sampler.in_disc(0.0) == (0.0, 0.0)
        x, y = sampler.in_disc_angle(0.0)
        assert x == 0.0 and y == 0.0

    def test_in_disc_angle_uses_two_draws(self) -> None:
        a = Sampler.create(42)
        b = Sampler.create(42)
        a.in_disc_angle(1.0)
        b.uniform_float()
        b.uniform_float()
        assert a.uniform_float() == b.uniform_float()

    def test_in_disc_angle_sqrt_radius(self) -> None:
        g = Generator(PCG64DXSM(42))
        u_theta, u_radius = g.random(2)
        theta = 2.0 * math.pi * u_theta
        radius = 2.0 * math.sqrt(u_radius)
        x, y = Sampler.create(42).in_disc_angle(2.0)
        assert x == pytest.approx(radius * math.cos(theta), abs=1e-15)
        assert y == pytest.approx(radius * math.sin(theta), abs=1e-15)

    def test_in_disc_rejects_outside_square_corners(self) -> None:
        """Candidates outside the unit circle are discarded."""

        class StubGenerator:
            def __init__(self) -> None:
                # (0.95, 0.95) -> (0.9, 0.9) rejected; (0.75, 0.5) -> (0.5, 0.0) accepted
                self.values = iter([0.95, 0.95, 0.75, 0.5])

            def random(self) -> float:
                return next(self.values)

        s = Sampler(StubGenerator(), SeedPair(0, 1))  # type: ignore[arg-type]
        assert s.in_disc(2.0) == pytest.approx((1.0, 0.0))
