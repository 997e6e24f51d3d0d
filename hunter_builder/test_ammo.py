"""
Unit tests for core/ammo.py - Ammo Up capacity bonuses.
"""
import pytest

from hunter_builder.core.ammo import apply_ammo_up, build_ammo_capacities, get_ammo_up_bonus
from hunter_builder.core.constants import AmmoKind
from hunter_builder.core.models import AmmoCapacitiesModel, StatsModel


def make_ammo(**overrides) -> AmmoCapacitiesModel:
    return AmmoCapacitiesModel(**overrides)


class TestAmmoUpBonus:
    """Tests for get_ammo_up_bonus."""

    def test_standard_ammo(self):
        """+2 at 5 or more, +1 below, nothing for empty slots."""
        assert get_ammo_up_bonus(5) == 2
        assert get_ammo_up_bonus(8) == 2
        assert get_ammo_up_bonus(3) == 1
        assert get_ammo_up_bonus(1) == 1
        assert get_ammo_up_bonus(0) == 0

    def test_capped_ammo(self):
        assert get_ammo_up_bonus(2, cap=3) == 1
        assert get_ammo_up_bonus(3, cap=3) == 0
        assert get_ammo_up_bonus(0, cap=3) == 0


class TestClone:
    """Tests for the deep copy invariant."""

    def test_ammo_up_zero_equal_not_same(self):
        base = make_ammo(normal=[6, 4, 0], flaming=3)
        adjusted = apply_ammo_up(base, 0)
        assert adjusted == base
        assert adjusted is not base
        assert adjusted.normal is not base.normal

    def test_mutating_clone_leaves_base(self):
        base = make_ammo(normal=[6, 4, 0])
        adjusted = apply_ammo_up(base, 0)
        adjusted.normal[0] = 99
        assert base.normal == [6, 4, 0]

    def test_base_untouched_by_ammo_up(self):
        base = make_ammo(normal=[5, 5, 5], sticky=[2, 1, 0], dragon=1)
        apply_ammo_up(base, 3)
        assert base == make_ammo(normal=[5, 5, 5], sticky=[2, 1, 0], dragon=1)


class TestApplyAmmoUp:
    """Tests for the per-level Ammo Up table."""

    def test_standard_capacities(self):
        """5 → 7, 3 → 4, 0 stays 0."""
        adjusted = apply_ammo_up(make_ammo(normal=[5, 3, 0]), 3)
        assert adjusted.normal == [7, 4, 0]

    def test_level_one_only_boosts_first_level(self):
        adjusted = apply_ammo_up(make_ammo(normal=[5, 5, 5], piercing=[3, 3, 3], spread=[1, 1, 1]), 1)
        assert adjusted.normal == [7, 5, 5]
        assert adjusted.piercing == [4, 3, 3]
        assert adjusted.spread == [2, 1, 1]

    def test_level_two(self):
        adjusted = apply_ammo_up(make_ammo(normal=[5, 5, 5], recover=[5, 2, 0]), 2)
        assert adjusted.normal == [7, 7, 5]
        assert adjusted.recover == [7, 2, 0]

    def test_status_ammo_second_level_at_three(self):
        adjusted = apply_ammo_up(make_ammo(poison=[2, 2, 0], paralysis=[5, 5, 0], sleep=[1, 0, 0],
                                           exhaust=[3, 6, 0]), 3)
        assert adjusted.poison == [3, 3, 0]
        assert adjusted.paralysis == [7, 7, 0]
        assert adjusted.sleep == [2, 0, 0]
        assert adjusted.exhaust == [4, 8, 0]

    def test_sticky_capped_at_three(self):
        assert apply_ammo_up(make_ammo(sticky=[2, 0, 0]), 1).sticky == [3, 0, 0]
        assert apply_ammo_up(make_ammo(sticky=[3, 0, 0]), 1).sticky == [3, 0, 0]
        assert apply_ammo_up(make_ammo(cluster=[1, 0, 0]), 3).cluster == [2, 0, 0]

    def test_sticky_second_level_capped_at_two(self):
        assert apply_ammo_up(make_ammo(sticky=[2, 1, 1]), 2).sticky == [3, 2, 1]
        assert apply_ammo_up(make_ammo(cluster=[3, 2, 1]), 3).cluster == [3, 2, 1]

    def test_single_level_ammo_needs_level_three(self):
        base = make_ammo(flaming=5, water=3, freeze=0, thunder=1, demon=2, armor=5, tranq=1)
        assert apply_ammo_up(base, 2) == base
        adjusted = apply_ammo_up(base, 3)
        assert adjusted.flaming == 7
        assert adjusted.water == 4
        assert adjusted.freeze == 0
        assert adjusted.thunder == 2
        assert adjusted.demon == 3
        assert adjusted.armor == 7
        assert adjusted.tranq == 2

    def test_dragon_and_slicing_capped(self):
        adjusted = apply_ammo_up(make_ammo(dragon=2, slicing=3), 3)
        assert adjusted.dragon == 3
        assert adjusted.slicing == 3

    @pytest.mark.parametrize('ammo_up', [0, 1, 2, 3])
    def test_empty_slots_never_grow(self, ammo_up):
        adjusted = apply_ammo_up(make_ammo(), ammo_up)
        for kind, value in adjusted.items():
            assert value == ([0, 0, 0] if isinstance(value, list) else 0), kind


class TestBuildAmmoCapacities:
    def test_no_table(self):
        assert build_ammo_capacities(StatsModel()) is None

    def test_uses_stats_ammo_up(self):
        stats = StatsModel(ammo_capacities=make_ammo(normal=[5, 0, 0]), ammo_up=1)
        adjusted = build_ammo_capacities(stats)
        assert adjusted.get(AmmoKind.NORMAL, 0) == 7
        assert stats.ammo_capacities.normal == [5, 0, 0]
