"""
Unit tests for core/calculation.py - calculation pass and batch publishing.
"""
import pytest

from hunter_builder.core.calculation import CalculationResults, CalculationService, calculate_all
from hunter_builder.core.models import AmmoCapacitiesModel, ExtraDataModel, OtherDataModel, StatsModel


def full_stats(**overrides) -> StatsModel:
    values = dict(
        attack=1000,
        passive_attack=10,
        affinity=20,
        sharpness_levels_bar=(5, 5, 5, 5, 5, 5),
        passive_sharpness=20,
        ammo_capacities=AmmoCapacitiesModel(normal=[5, 3, 0]),
        ammo_up=1,
        defense=100,
        extra_data=ExtraDataModel(other_data=(OtherDataModel('Weapon', 'Great Sword'),)),
    )
    values.update(overrides)
    return StatsModel(**values)


class TestCalculateAll:
    """Tests for the pure calculation pass."""

    def test_all_sections(self):
        results = calculate_all(full_stats())
        assert isinstance(results, CalculationResults)
        assert results.attack_calcs[0].name == 'Attack'
        assert results.defense_calcs[0].name == 'Defense'
        assert results.ammo_capacities_up.normal == [7, 3, 0]
        assert results.sharpness_bar.empty == 3
        assert results.extra_data.other_data[0].value == 'Great Sword'

    def test_raw_averages_after_attack_rows(self):
        names = [row.name for row in calculate_all(full_stats()).attack_calcs]
        assert names[-2:] == ['Raw Attack Average', 'Raw Attack Average Potential']

    def test_missing_sections_are_none(self):
        results = calculate_all(StatsModel())
        assert results.ammo_capacities_up is None
        assert results.sharpness_bar is None
        assert results.extra_data is None

    def test_results_are_fresh(self):
        stats = full_stats()
        first = calculate_all(stats)
        second = calculate_all(stats)
        assert first == second
        assert first.ammo_capacities_up is not second.ammo_capacities_up

    def test_stats_not_mutated(self):
        stats = full_stats()
        calculate_all(stats)
        assert stats == full_stats()


class TestCalculationService:
    """Tests for publishing results to subscribers."""

    def test_publishes_whole_batch(self):
        service = CalculationService()
        received = []
        service.subscribe(received.append)

        results = service.update_calcs(full_stats())

        assert received == [results]
        assert service.last_results is results

    def test_every_subscriber_gets_same_batch(self):
        service = CalculationService()
        first, second = [], []
        service.subscribe(first.append)
        service.subscribe(second.append)
        service.update_calcs(full_stats())
        assert first[0] is second[0]

    def test_unchanged_stats_not_republished(self):
        service = CalculationService()
        received = []
        service.subscribe(received.append)
        service.update_calcs(full_stats())
        service.update_calcs(full_stats())
        assert len(received) == 1

    def test_changed_stats_republished(self):
        service = CalculationService()
        received = []
        service.subscribe(received.append)
        service.update_calcs(full_stats())
        service.update_calcs(full_stats(attack=1200))
        assert len(received) == 2
        assert received[1].attack_calcs[0].value == 1210

    def test_unsubscribe(self):
        service = CalculationService()
        received = []
        unsubscribe = service.subscribe(received.append)
        unsubscribe()
        service.update_calcs(full_stats())
        assert received == []

    def test_reentrant_update_rejected(self):
        service = CalculationService()
        errors = []

        def recalculate(results):
            with pytest.raises(RuntimeError):
                service.update_calcs(full_stats(attack=1))
            errors.append(True)

        service.subscribe(recalculate)
        service.update_calcs(full_stats())
        assert errors == [True]

    def test_service_usable_after_subscriber_error(self):
        service = CalculationService()

        def broken(results):
            raise ValueError("boom")

        unsubscribe = service.subscribe(broken)
        with pytest.raises(ValueError):
            service.update_calcs(full_stats())
        unsubscribe()
        assert service.update_calcs(full_stats(attack=5)).attack_calcs[0].value == 15

    def test_failing_subscriber_does_not_starve_later_ones(self):
        """Subscribers after a failing one still get the pass, exactly once."""
        service = CalculationService()
        received = []

        def broken(results):
            raise ValueError("boom")

        unsubscribe = service.subscribe(broken)
        service.subscribe(received.append)

        with pytest.raises(ValueError):
            service.update_calcs(StatsModel(attack=100))
        assert len(received) == 1

        unsubscribe()
        service.update_calcs(StatsModel(attack=100))
        assert len(received) == 1
        assert received[0] is service.last_results
