"""
Hunter Builder - Defense & Resistance Calculator
================================================
"""

from typing import List

from .constants import BASE_HEALTH, BASE_STAMINA, RESISTANCES
from .models import StatDetailModel, StatsModel
from .templates import format_number


def calculate_defense_calcs(stats: StatsModel) -> List[StatDetailModel]:
    """
    Build the defense panel rows.

    Defense shows current ➝ max ➟ augmented, each including passive
    defense. Health and stamina only show up when a skill raises them.
    """
    passive = stats.passive_defense
    defense = (f'{format_number(stats.defense + passive)}'
               f' ➝ {format_number(stats.max_defense + passive)}'
               f' ➟ {format_number(stats.augmented_defense + passive)}')
    calcs = [StatDetailModel(name='Defense', value=defense)]

    if stats.passive_health:
        calcs.append(StatDetailModel(name='Health', value=BASE_HEALTH + stats.passive_health))

    if stats.passive_stamina:
        calcs.append(StatDetailModel(name='Stamina', value=BASE_STAMINA + stats.passive_stamina))

    for element, name in RESISTANCES:
        base = getattr(stats, f'{element}_resist')
        bonus = getattr(stats, f'passive_{element}_resist')
        calcs.append(StatDetailModel(name=name, value=base + bonus))

    return calcs
