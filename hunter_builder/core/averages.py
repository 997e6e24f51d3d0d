"""
Hunter Builder - Raw Average Estimator
======================================
Expected damage per hit for the attack panel.

Two rows are built: the plain average and the potential average (every
buff, weak point affinity and sharpness applied). Each row also carries the
ailment and element averages for the weapon in extra1/extra2.
"""

from typing import List, Optional

from .constants import AFFINITY_CAP, ColorClass
from .formulas import (
    Number,
    calculate_ailment_average,
    calculate_critical_boost,
    calculate_element_average,
    calculate_raw_average,
    calculate_total_affinity,
    calculate_total_affinity_potential,
    calculate_total_ailment_attack,
    calculate_total_attack,
    calculate_total_attack_potential,
    calculate_total_element_attack,
    is_whole,
)
from .models import CalculationVariableModel, StatDetailModel, StatsModel
from .templates import (
    CalculationLine,
    Literal,
    add,
    div,
    format_number,
    format_percent,
    group,
    mul,
    sub,
)


def calculate_raw_average_calcs(stats: StatsModel) -> List[StatDetailModel]:
    """Build the 'Raw Attack Average' and 'Raw Attack Average Potential' rows."""
    return [get_raw_attack_average(stats), get_raw_attack_average_potential(stats)]


def get_raw_attack_average(stats: StatsModel) -> StatDetailModel:
    ailment_attack = calculate_total_ailment_attack(stats)
    element_attack = calculate_total_element_attack(stats)

    return _build_average_calc(
        stats,
        name='Raw Attack Average',
        attack_variable=('totalAttack', 'Total Attack'),
        affinity_variable=('totalAffinity', 'Total Affinity'),
        attack=calculate_total_attack(stats),
        affinity=min(calculate_total_affinity(stats), AFFINITY_CAP),
        extra1=calculate_ailment_average(ailment_attack, 0, 0, 1) if ailment_attack else None,
        extra2=calculate_element_average(element_attack, 0, 0, 1) if element_attack else None,
    )


def get_raw_attack_average_potential(stats: StatsModel) -> StatDetailModel:
    ailment_attack = calculate_total_ailment_attack(stats)
    element_attack = calculate_total_element_attack(stats)
    affinity = min(calculate_total_affinity_potential(stats), AFFINITY_CAP)
    crit = stats.passive_critical_boost_percent
    sharpness = stats.effective_elemental_sharpness_modifier

    # Ailment/element only crit with the matching skill
    extra1 = None
    if ailment_attack:
        ailment_affinity = max(affinity if stats.critical_status else 0, 0)
        extra1 = calculate_ailment_average(ailment_attack, ailment_affinity, crit, sharpness)

    extra2 = None
    if element_attack:
        element_affinity = max(affinity if stats.critical_element else 0, 0)
        extra2 = calculate_element_average(element_attack, element_affinity, crit, sharpness)

    return _build_average_calc(
        stats,
        name='Raw Attack Average Potential',
        attack_variable=('totalAttackPotential', 'Total Attack Potential'),
        affinity_variable=('totalAffinityPotential', 'Total Affinity Potential'),
        attack=calculate_total_attack_potential(stats),
        affinity=affinity,
        extra1=extra1,
        extra2=extra2,
    )


def _build_average_calc(
    stats: StatsModel,
    name: str,
    attack_variable: tuple,
    affinity_variable: tuple,
    attack: Number,
    affinity: float,
    extra1: Optional[Number],
    extra2: Optional[Number],
) -> StatDetailModel:
    """
    Shared row builder for both average rows.

    Draw and sliding affinity add alternate averages after the main one;
    the value, the template results and the affinity variable all become
    pipe-delimited lists.
    """
    attack_name, attack_label = attack_variable
    affinity_name, affinity_label = affinity_variable
    crit = stats.passive_critical_boost_percent
    modifier = stats.weapon_attack_modifier

    average = calculate_raw_average(attack, affinity, crit, modifier)
    if not is_whole(average):
        average = 0

    results = [format_number(average)]
    affinities = [format_number(affinity)]
    for bonus in (stats.draw_affinity, stats.sliding_affinity):
        if bonus > 0:
            results.append(format_number(calculate_raw_average(attack, affinity + bonus, crit, modifier)))
            affinities.append(format_number(affinity + bonus))

    affinity_value = '|'.join(affinities)
    if len(affinities) > 1:
        affinity_value = f'[{affinity_value}]'

    expression = div(
        group(add(
            mul(attack_name, affinity_name, 'criticalBoost'),
            mul(attack_name, group(sub(Literal('100%'), affinity_name))),
        )),
        'weaponModifier',
    )

    return StatDetailModel(
        name=name,
        value=average if len(results) == 1 else ' | '.join(results),
        calculation=(CalculationLine(expression, tuple(results), bracketed=True, wrapped=True),),
        calculation_variables=(
            CalculationVariableModel(attack_name, attack_label, attack, ColorClass.GREEN),
            CalculationVariableModel(affinity_name, affinity_label, format_percent(affinity_value), ColorClass.BLUE),
            CalculationVariableModel('criticalBoost', 'Total Critical Boost',
                                     format_percent(calculate_critical_boost(stats)), ColorClass.KAKHI),
            CalculationVariableModel('weaponModifier', 'Weapon Modifier', modifier, ColorClass.PURPLE),
        ),
        extra1=extra1,
        class1=stats.ailment if extra1 is not None else None,
        extra2=extra2,
        class2=stats.element if extra2 is not None else None,
    )
