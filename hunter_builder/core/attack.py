"""
Hunter Builder - Attack & Affinity Calculator
=============================================
Builds the attack panel rows: attack, affinity, critical boost, ailment,
element, elderseal and heal on hit, each annotated with its calculation.
"""

from typing import List, Optional, Tuple

from .constants import BASE_CRITICAL_BOOST, ColorClass
from .formulas import (
    calculate_critical_boost,
    calculate_elementless_multiplier,
    calculate_total_affinity,
    calculate_total_affinity_potential,
    calculate_total_ailment_attack,
    calculate_total_attack,
    calculate_total_attack_potential,
    calculate_total_element_attack,
    elementless_applies_to_potential,
)
from .models import CalculationVariableModel, StatDetailModel, StatsModel
from .templates import (
    APPROX,
    CalculationLine,
    add,
    format_number,
    format_percent,
    group,
    mul,
)


def calculate_attack_calcs(stats: StatsModel) -> List[StatDetailModel]:
    """
    Build the attack panel rows in display order.

    Optional rows (potentials, ailment, element, elderseal, heal on hit) are
    only emitted when the snapshot has something to show for them.
    """
    calcs = [get_attack(stats)]
    if stats.active_attack or stats.effective_physical_sharpness_modifier:
        calcs.append(get_attack_potential(stats))

    calcs.append(get_affinity(stats))
    if stats.active_affinity or stats.weak_point_affinity or stats.draw_affinity or stats.sliding_affinity:
        calcs.append(get_affinity_potential(stats))

    calcs.append(get_critical_boost(stats))

    if stats.ailment:
        ailment_calc = get_ailment(stats)
        calcs.append(ailment_calc)
        calcs.append(get_ailment_attack(stats, ailment_calc))

    if stats.element:
        element_calc = get_element(stats)
        calcs.append(element_calc)
        calcs.append(get_element_attack(stats, element_calc))

    if stats.elderseal:
        calcs.append(StatDetailModel(name='Elderseal', value=stats.elderseal))

    if stats.heal_on_hit_percent:
        calcs.append(StatDetailModel(name='Heal on Hit', value=stats.heal_on_hit_percent))

    return calcs


# =============================================================================
# ATTACK
# =============================================================================

def _elementless_variable(stats: StatsModel) -> CalculationVariableModel:
    return CalculationVariableModel(
        name='elementlessBoostPercent',
        display_name='Elementless Boost Modifier',
        value=calculate_elementless_multiplier(stats),
        color_class=ColorClass.KAKHI,
    )


def get_attack(stats: StatsModel) -> StatDetailModel:
    total = calculate_total_attack(stats)
    variables = [
        CalculationVariableModel('attack', 'Base Weapon Attack', stats.attack, ColorClass.GREEN),
        CalculationVariableModel('passiveAttack', 'Passive Attack', stats.passive_attack, ColorClass.ORANGE),
        CalculationVariableModel('weaponModifier', 'Weapon Modifier', stats.weapon_attack_modifier, ColorClass.PURPLE),
    ]

    if stats.elementless:
        variables.append(_elementless_variable(stats))
        base = mul('attack', 'elementlessBoostPercent')
    else:
        base = 'attack'

    expression = add(base, mul('passiveAttack', 'weaponModifier'))
    return StatDetailModel(
        name='Attack',
        value=total,
        calculation=(CalculationLine(expression, (format_number(total),), APPROX),),
        calculation_variables=tuple(variables),
    )


def get_attack_potential(stats: StatsModel) -> StatDetailModel:
    total = calculate_total_attack_potential(stats)
    variables = [
        CalculationVariableModel('attack', 'Base Weapon Attack', stats.attack, ColorClass.GREEN),
        CalculationVariableModel('sharpnessModifier', 'Physical Sharpness Modifier',
                                 stats.effective_physical_sharpness_modifier, ColorClass.BLUE),
        CalculationVariableModel('passiveAttack', 'Passive Attack', stats.passive_attack, ColorClass.ORANGE),
        CalculationVariableModel('activeAttack', 'Active Attack', stats.active_attack, ColorClass.RED),
        CalculationVariableModel('weaponModifier', 'Weapon Modifier', stats.weapon_attack_modifier, ColorClass.PURPLE),
    ]

    if elementless_applies_to_potential(stats):
        variables.append(_elementless_variable(stats))
        base = mul('attack', 'elementlessBoostPercent', 'sharpnessModifier')
    else:
        base = mul('attack', 'sharpnessModifier')

    expression = add(base, mul(group(add('passiveAttack', 'activeAttack')), 'weaponModifier'))
    return StatDetailModel(
        name='Attack Potential',
        value=total,
        calculation=(CalculationLine(expression, (format_number(total),), APPROX),),
        calculation_variables=tuple(variables),
    )


# =============================================================================
# AFFINITY & CRITICAL BOOST
# =============================================================================

def get_affinity(stats: StatsModel) -> StatDetailModel:
    value = format_percent(calculate_total_affinity(stats))
    return StatDetailModel(
        name='Affinity',
        value=value,
        calculation=(CalculationLine(add('affinity', 'passiveAffinity'), (value,)),),
        calculation_variables=(
            CalculationVariableModel('affinity', 'Weapon Base Affinity', stats.affinity, ColorClass.GREEN),
            CalculationVariableModel('passiveAffinity', 'Passive Affinity', stats.passive_affinity, ColorClass.BLUE),
        ),
    )


def get_affinity_potential(stats: StatsModel) -> StatDetailModel:
    """
    Affinity with every conditional bonus applied.

    Draw and sliding attacks get their own totals shown next to the main
    one, e.g. "45% | 75%", each with its own calculation line.
    """
    total = calculate_total_affinity_potential(stats)
    terms = ['base', 'passive', 'weakPoint', 'active']
    values = [format_percent(total)]
    lines = [CalculationLine(add(*terms), (values[0],), label='Base')]
    variables = [
        CalculationVariableModel('base', 'Weapon Base Affinity', stats.affinity, ColorClass.GREEN),
        CalculationVariableModel('passive', 'Passive Affinity', stats.passive_affinity, ColorClass.YELLOW),
        CalculationVariableModel('weakPoint', 'Weak Point Affinity', stats.weak_point_affinity, ColorClass.BLUE),
        CalculationVariableModel('active', 'Active Affinity', stats.active_affinity, ColorClass.ORANGE),
    ]

    situational = [
        ('draw', 'Draw', 'Draw Attack Affinity', stats.draw_affinity),
        ('sliding', 'Slide', 'Sliding Attack Affinity', stats.sliding_affinity),
    ]
    for name, label, display_name, bonus in situational:
        if bonus > 0:
            variables.append(CalculationVariableModel(name, display_name, bonus, ColorClass.KAKHI))
            alternate = format_percent(total + bonus)
            values.append(alternate)
            lines.append(CalculationLine(add(*terms, name), (alternate,), label=label))

    return StatDetailModel(
        name='Affinity Potential',
        value=' | '.join(values),
        calculation=tuple(lines),
        calculation_variables=tuple(variables),
    )


def get_critical_boost(stats: StatsModel) -> StatDetailModel:
    value = format_percent(calculate_critical_boost(stats))
    return StatDetailModel(
        name='Critical Boost',
        value=value,
        calculation=(CalculationLine(add('base', 'passive'), (value,)),),
        calculation_variables=(
            CalculationVariableModel('base', 'Base Critical Boost', str(BASE_CRITICAL_BOOST), ColorClass.GREEN),
            CalculationVariableModel('passive', 'Passive Critical Boost',
                                     stats.passive_critical_boost_percent, ColorClass.BLUE),
        ),
    )


# =============================================================================
# AILMENT & ELEMENT
# =============================================================================

def _special_warnings(kind: str, capped: bool, hidden: bool,
                      multiplier: float) -> Tuple[Tuple[str, ...], Optional[ColorClass]]:
    info = []
    color = None

    if capped:
        info.append(f'{kind.capitalize()} attack is capped.')
        color = ColorClass.YELLOW

    if hidden and multiplier < 1:
        info.append(f'Effectiveness reduced due to hidden {kind}.')
        color = ColorClass.RED if not multiplier else ColorClass.YELLOW

    return tuple(info), color


def _special_attack_calc(name: str, kind: str, summary: StatDetailModel, total, base: float,
                         passive: float, cap: float, hidden: bool, multiplier: float) -> StatDetailModel:
    label = kind.capitalize()
    variables = [
        CalculationVariableModel('base', f'Weapon Base {label} Attack', base, ColorClass.GREEN),
        CalculationVariableModel('passive', f'Passive {label} Attack', passive, ColorClass.YELLOW),
        CalculationVariableModel('cap', f'{label} Attack Cap', cap, ColorClass.ORANGE),
    ]
    result = (format_number(total),)

    if hidden:
        variables.append(CalculationVariableModel('multiplier', f'Hidden {label} Multiplier',
                                                  multiplier, ColorClass.BLUE))
        if multiplier:
            line = CalculationLine(add(mul('base', 'multiplier'), 'passive'), result, APPROX)
        else:
            line = CalculationLine(mul(group(add('base', 'passive')), 'multiplier'), result, APPROX)
    else:
        line = CalculationLine(add('base', 'passive'), result)

    return StatDetailModel(
        name=name,
        value=total,
        calculation=(line,),
        calculation_variables=tuple(variables),
        info=tuple(summary.info),
        color=summary.color,
    )


def get_ailment(stats: StatsModel) -> StatDetailModel:
    info, color = _special_warnings('ailment', stats.ailment_capped, stats.ailment_hidden,
                                    stats.element_attack_multiplier)
    return StatDetailModel(name='Ailment', value=stats.ailment, info=info, color=color)


def get_ailment_attack(stats: StatsModel, ailment_calc: StatDetailModel) -> StatDetailModel:
    return _special_attack_calc(
        'Ailment Attack', 'ailment', ailment_calc,
        calculate_total_ailment_attack(stats),
        stats.base_ailment_attack,
        stats.effective_passive_ailment_attack,
        stats.ailment_cap,
        stats.ailment_hidden,
        stats.element_attack_multiplier,
    )


def get_element(stats: StatsModel) -> StatDetailModel:
    info, color = _special_warnings('element', stats.element_capped, stats.element_hidden,
                                    stats.element_attack_multiplier)
    return StatDetailModel(name='Element', value=stats.element, info=info, color=color)


def get_element_attack(stats: StatsModel, element_calc: StatDetailModel) -> StatDetailModel:
    return _special_attack_calc(
        'Element Attack', 'element', element_calc,
        calculate_total_element_attack(stats),
        stats.base_element_attack,
        stats.effective_passive_element_attack,
        stats.element_cap,
        stats.element_hidden,
        stats.element_attack_multiplier,
    )
