"""
Hunter Builder - Calculation Service
====================================
Runs one calculation pass over a StatsModel and hands the five panel
results to subscribers as a single batch.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .ammo import build_ammo_capacities
from .attack import calculate_attack_calcs
from .averages import calculate_raw_average_calcs
from .defense import calculate_defense_calcs
from .models import (
    AmmoCapacitiesModel,
    ExtraDataModel,
    SharpnessBarModel,
    StatDetailModel,
    StatsModel,
)
from .sharpness import build_sharpness_bar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResults:
    """Everything the stat panels show for one snapshot."""
    attack_calcs: Tuple[StatDetailModel, ...]
    defense_calcs: Tuple[StatDetailModel, ...]
    ammo_capacities_up: Optional[AmmoCapacitiesModel]
    sharpness_bar: Optional[SharpnessBarModel]
    extra_data: Optional[ExtraDataModel]


Subscriber = Callable[[CalculationResults], None]


def calculate_all(stats: StatsModel) -> CalculationResults:
    """
    Pure calculation pass.

    The raw averages are appended after the attack rows; sections the
    weapon has no data for (sharpness, ammo) come back as None.
    """
    attack_calcs = calculate_attack_calcs(stats)
    attack_calcs.extend(calculate_raw_average_calcs(stats))
    sharpness_bar = build_sharpness_bar(stats)
    ammo_capacities_up = build_ammo_capacities(stats)
    defense_calcs = calculate_defense_calcs(stats)

    return CalculationResults(
        attack_calcs=tuple(attack_calcs),
        defense_calcs=tuple(defense_calcs),
        ammo_capacities_up=ammo_capacities_up,
        sharpness_bar=sharpness_bar,
        extra_data=stats.extra_data,
    )


class CalculationService:
    """
    Recalculates the stat panels whenever the equipment changes.

    Subscribers always receive all five results of a pass in one call, so
    no panel can show data from a different pass than the others. A pass
    whose results equal the previous one isn't published again.
    """

    def __init__(self):
        self._subscribers: List[Subscriber] = []
        self._last_results: Optional[CalculationResults] = None
        self._updating = False

    @property
    def last_results(self) -> Optional[CalculationResults]:
        return self._last_results

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for every published pass.

        Returns:
            Callable that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def update_calcs(self, stats: StatsModel) -> CalculationResults:
        """
        Run a pass and publish it.

        Every subscriber receives the pass even when an earlier one raises;
        the first subscriber error is re-raised once all have been called.

        Raises:
            RuntimeError: If called from a subscriber while a pass is being
                published
        """
        if self._updating:
            raise RuntimeError("update_calcs can't run while a previous pass is being published")

        self._updating = True
        try:
            results = calculate_all(stats)
            if results == self._last_results:
                logger.debug("Stats unchanged, skipping publish")
                return results

            logger.debug("Publishing %d attack rows and %d defense rows to %d subscribers",
                         len(results.attack_calcs), len(results.defense_calcs), len(self._subscribers))
            errors = []
            for callback in list(self._subscribers):
                try:
                    callback(results)
                except Exception as e:
                    logger.exception("Subscriber %r failed on a calculation pass", callback)
                    errors.append(e)

            # Only cached once every subscriber has been handed the pass
            self._last_results = results
            if errors:
                raise errors[0]
            return results
        finally:
            self._updating = False
