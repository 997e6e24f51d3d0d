"""
Hunter Builder - Core Stats Engine
==================================
Single source of truth for every stat panel calculation.

All other modules should import from here rather than implementing their own formulas.
"""

from .constants import (
    # Enums
    ColorClass,
    AmmoKind,
    # Attack
    BASE_CRITICAL_BOOST,
    AFFINITY_CAP,
    # Sharpness
    SHARPNESS_DISPLAY_CAP,
    HANDICRAFT_MAX_LEVELS,
    # Ammo
    AMMO_UP_RULES,
)

from .models import (
    StatsModel,
    StatDetailModel,
    CalculationVariableModel,
    SharpnessModel,
    SharpnessBarModel,
    AmmoCapacitiesModel,
    ExtraDataModel,
    OtherDataModel,
)

from .templates import (
    CalculationLine,
    format_calculation,
    substitute_template,
    format_number,
)

from .formulas import (
    round_half_up,
    calculate_total_attack,
    calculate_total_attack_potential,
    calculate_total_ailment_attack,
    calculate_total_element_attack,
    calculate_average_hit,
    calculate_raw_average,
    calculate_ailment_average,
    calculate_element_average,
)

from .attack import calculate_attack_calcs
from .averages import calculate_raw_average_calcs
from .sharpness import build_sharpness_bar
from .ammo import apply_ammo_up, build_ammo_capacities, get_ammo_up_bonus
from .defense import calculate_defense_calcs
from .calculation import CalculationResults, CalculationService, calculate_all

from .skills import (
    EquippedSkillModel,
    EquippedSetBonusModel,
    sort_equipped_skills,
    get_skill_count_color,
    get_set_bonus_color,
)

__all__ = [
    # Constants
    'ColorClass',
    'AmmoKind',
    'BASE_CRITICAL_BOOST',
    'AFFINITY_CAP',
    'SHARPNESS_DISPLAY_CAP',
    'HANDICRAFT_MAX_LEVELS',
    'AMMO_UP_RULES',
    # Models
    'StatsModel',
    'StatDetailModel',
    'CalculationVariableModel',
    'SharpnessModel',
    'SharpnessBarModel',
    'AmmoCapacitiesModel',
    'ExtraDataModel',
    'OtherDataModel',
    # Templates
    'CalculationLine',
    'format_calculation',
    'substitute_template',
    'format_number',
    # Formulas
    'round_half_up',
    'calculate_total_attack',
    'calculate_total_attack_potential',
    'calculate_total_ailment_attack',
    'calculate_total_element_attack',
    'calculate_average_hit',
    'calculate_raw_average',
    'calculate_ailment_average',
    'calculate_element_average',
    # Calculators
    'calculate_attack_calcs',
    'calculate_raw_average_calcs',
    'build_sharpness_bar',
    'apply_ammo_up',
    'build_ammo_capacities',
    'get_ammo_up_bonus',
    'calculate_defense_calcs',
    # Orchestration
    'CalculationResults',
    'CalculationService',
    'calculate_all',
    # Skills
    'EquippedSkillModel',
    'EquippedSetBonusModel',
    'sort_equipped_skills',
    'get_skill_count_color',
    'get_set_bonus_color',
]
