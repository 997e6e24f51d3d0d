"""
Hunter Builder - Core Formulas
==============================
Single source of truth for the attack, affinity and per-hit average formulas.

The attack calculator and the raw average estimator both derive their
totals through these functions so the two panels can never disagree.
"""

import math
from typing import Union

from .constants import (
    AFFINITY_CAP,
    AILMENT_AVERAGE_DIVISOR,
    BASE_CRITICAL_BOOST,
    BASE_CRITICAL_MULTIPLIER,
    ELEMENT_AVERAGE_DIVISOR,
)
from .models import StatsModel

Number = Union[int, float]


# =============================================================================
# ROUNDING
# =============================================================================

def round_half_up(value: float) -> Number:
    """
    Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Non-finite values are returned unchanged so callers can detect them.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def is_whole(value: Number) -> bool:
    if isinstance(value, int):
        return True
    return math.isfinite(value) and float(value).is_integer()


# =============================================================================
# ATTACK
# =============================================================================

def calculate_elementless_multiplier(stats: StatsModel) -> float:
    """Multiplier applied to base attack by the elementless boost."""
    return 1 + stats.elementless_boost_percent / 100


def calculate_total_attack(stats: StatsModel) -> Number:
    """
    Formula:
        attack [× elementless] + passive_attack × weapon_modifier
    """
    attack = stats.attack
    if stats.elementless:
        attack *= calculate_elementless_multiplier(stats)
    return round_half_up(attack + stats.passive_attack * stats.weapon_attack_modifier)


def elementless_applies_to_potential(stats: StatsModel) -> bool:
    """The elementless boost only works when no ailment or element damage is dealt."""
    return (stats.elementless_boost_percent > 0
            and calculate_total_ailment_attack(stats) == 0
            and calculate_total_element_attack(stats) == 0)


def calculate_total_attack_potential(stats: StatsModel) -> Number:
    """
    Formula:
        attack [× elementless] × sharpness + (passive + active) × weapon_modifier
    """
    attack = stats.attack
    if elementless_applies_to_potential(stats):
        attack *= calculate_elementless_multiplier(stats)
    attack *= stats.effective_physical_sharpness_modifier
    bonus = (stats.passive_attack + stats.active_attack) * stats.weapon_attack_modifier
    return round_half_up(attack + bonus)


# =============================================================================
# AILMENT & ELEMENT
# =============================================================================

def _special_attack_total(base: float, passive: float, hidden: bool, multiplier: float) -> Number:
    """
    The cap is shown next to the total but never applied to it; the
    capped flag from the aggregation layer carries the warning.
    """
    if not hidden:
        return base + passive
    # Once the base is fully suppressed the passive bonus is suppressed too
    if multiplier:
        return round_half_up(base * multiplier + passive)
    return round_half_up((base + passive) * multiplier)


def calculate_total_ailment_attack(stats: StatsModel) -> Number:
    return _special_attack_total(
        stats.base_ailment_attack,
        stats.effective_passive_ailment_attack,
        stats.ailment_hidden,
        stats.element_attack_multiplier,
    )


def calculate_total_element_attack(stats: StatsModel) -> Number:
    return _special_attack_total(
        stats.base_element_attack,
        stats.effective_passive_element_attack,
        stats.element_hidden,
        stats.element_attack_multiplier,
    )


# =============================================================================
# AFFINITY & CRITICAL
# =============================================================================

def calculate_total_affinity(stats: StatsModel) -> float:
    return stats.affinity + stats.passive_affinity


def calculate_total_affinity_potential(stats: StatsModel) -> float:
    return calculate_total_affinity(stats) + stats.weak_point_affinity + stats.active_affinity


def calculate_critical_boost(stats: StatsModel) -> float:
    """Critical boost % (base 125 plus skills)."""
    return BASE_CRITICAL_BOOST + stats.passive_critical_boost_percent


# =============================================================================
# PER-HIT AVERAGES
# =============================================================================

def calculate_average_hit(
    attack: float,
    affinity: float,
    critical_boost_percent: float,
    divisor: float,
    multiplier: float = 1,
) -> Number:
    """
    Expected damage of one hit, rounded half up.

    Formula:
        a = min(affinity, 100) / 100
        crit = (critical_boost_percent + 125) / 100 if a > 0 else 1.25
        round((attack × a × crit + attack × (1 - a)) × multiplier / divisor)

    Args:
        attack: Total attack feeding the hit
        affinity: Total affinity %, anything above 100 counts as 100
        critical_boost_percent: Critical boost from skills (on top of 125)
        divisor: Weapon modifier for raw, 30 for ailment, 10 for element
        multiplier: Sharpness modifier for ailment/element

    Raises:
        ZeroDivisionError: If divisor is 0
    """
    capped = min(affinity, AFFINITY_CAP) / 100
    if capped > 0:
        crit = (critical_boost_percent + BASE_CRITICAL_BOOST) / 100
    else:
        crit = BASE_CRITICAL_MULTIPLIER
    expected = attack * capped * crit + attack * (1 - capped)
    return round_half_up(expected * multiplier / divisor)


def calculate_raw_average(attack: float, affinity: float, critical_boost_percent: float,
                          weapon_attack_modifier: float) -> Number:
    return calculate_average_hit(attack, affinity, critical_boost_percent, weapon_attack_modifier)


def calculate_ailment_average(attack: float, affinity: float, critical_boost_percent: float,
                              sharpness_modifier: float) -> Number:
    return calculate_average_hit(attack, affinity, critical_boost_percent,
                                 AILMENT_AVERAGE_DIVISOR, sharpness_modifier)


def calculate_element_average(attack: float, affinity: float, critical_boost_percent: float,
                              sharpness_modifier: float) -> Number:
    return calculate_average_hit(attack, affinity, critical_boost_percent,
                                 ELEMENT_AVERAGE_DIVISOR, sharpness_modifier)
