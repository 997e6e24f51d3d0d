"""
Hunter Builder - Ammo Capacity Adjuster
=======================================
Applies the Ammo Up skill to a bowgun's base capacity table.
"""

import logging
from typing import Optional

from .constants import AMMO_UP_DOUBLE_THRESHOLD, AMMO_UP_RULES
from .models import AmmoCapacitiesModel, StatsModel

logger = logging.getLogger(__name__)


def get_ammo_up_bonus(capacity: int, cap: Optional[int] = None) -> int:
    """
    Extra shots Ammo Up gives to one ammo slot.

    Args:
        capacity: Current capacity of the slot (0 = ammo not usable)
        cap: Maximum capacity for ammo that can't go past it (sticky,
            cluster, dragon, slicing); None for standard ammo

    Returns:
        0 for empty slots; capped ammo gains 1 while below its cap;
        standard ammo gains 2 at 5 or more, 1 otherwise
    """
    if capacity <= 0:
        return 0
    if cap is not None:
        return 1 if capacity < cap else 0
    return 2 if capacity >= AMMO_UP_DOUBLE_THRESHOLD else 1


def apply_ammo_up(ammo_capacities: AmmoCapacitiesModel, ammo_up: int) -> AmmoCapacitiesModel:
    """
    Return a new table with Ammo Up applied; the input table is untouched.

    Each Ammo Up level unlocks its own set of slots, see AMMO_UP_RULES.
    """
    adjusted = ammo_capacities.clone()
    for min_level, kind, level, cap in AMMO_UP_RULES:
        if ammo_up >= min_level:
            adjusted.add(kind, level, get_ammo_up_bonus(adjusted.get(kind, level), cap))
    return adjusted


def build_ammo_capacities(stats: StatsModel) -> Optional[AmmoCapacitiesModel]:
    """Adjusted ammo table for the pass, or None for weapons without ammo."""
    if stats.ammo_capacities is None:
        logger.debug("No ammo capacities, skipping ammo table")
        return None
    return apply_ammo_up(stats.ammo_capacities, stats.ammo_up)
