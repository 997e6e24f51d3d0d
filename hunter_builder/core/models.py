"""
Hunter Builder - Data Models
============================
Input snapshot and output value types for the stats calculation engine.

StatsModel is produced by the equipment/skill aggregation layer and is never
mutated here. Every output type is a frozen dataclass built fresh on each
calculation pass.
"""

import logging
import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .constants import AMMO_LEVELS, MULTI_LEVEL_AMMO, AmmoKind, ColorClass
from .templates import CalculationLine, format_calculation

logger = logging.getLogger(__name__)

StatValue = Union[int, float, str, None]


# =============================================================================
# AMMO CAPACITIES
# =============================================================================

@dataclass
class AmmoCapacitiesModel:
    """
    Ammo capacity table for bowguns.

    Multi-level ammo holds one capacity per level (three levels), the rest
    hold a single capacity. A capacity of 0 means the ammo can't be loaded.
    """
    normal: List[int] = field(default_factory=lambda: [0, 0, 0])
    piercing: List[int] = field(default_factory=lambda: [0, 0, 0])
    spread: List[int] = field(default_factory=lambda: [0, 0, 0])
    sticky: List[int] = field(default_factory=lambda: [0, 0, 0])
    cluster: List[int] = field(default_factory=lambda: [0, 0, 0])
    recover: List[int] = field(default_factory=lambda: [0, 0, 0])
    poison: List[int] = field(default_factory=lambda: [0, 0, 0])
    paralysis: List[int] = field(default_factory=lambda: [0, 0, 0])
    sleep: List[int] = field(default_factory=lambda: [0, 0, 0])
    exhaust: List[int] = field(default_factory=lambda: [0, 0, 0])
    flaming: int = 0
    water: int = 0
    freeze: int = 0
    thunder: int = 0
    dragon: int = 0
    slicing: int = 0
    demon: int = 0
    armor: int = 0
    tranq: int = 0

    def __post_init__(self):
        for kind in MULTI_LEVEL_AMMO:
            assert len(getattr(self, kind.value)) == AMMO_LEVELS, \
                f"{kind.value} needs {AMMO_LEVELS} levels"

    def clone(self) -> 'AmmoCapacitiesModel':
        """Deep copy; the clone shares no lists with this table."""
        values = {}
        for kind in AmmoKind:
            value = getattr(self, kind.value)
            values[kind.value] = list(value) if kind in MULTI_LEVEL_AMMO else value
        return AmmoCapacitiesModel(**values)

    def get(self, kind: AmmoKind, level: Optional[int] = None) -> int:
        """Capacity of an ammo kind; level is required for multi-level ammo."""
        value = getattr(self, kind.value)
        if kind in MULTI_LEVEL_AMMO:
            return value[level]
        return value

    def add(self, kind: AmmoKind, level: Optional[int], amount: int) -> None:
        if kind in MULTI_LEVEL_AMMO:
            getattr(self, kind.value)[level] += amount
        else:
            setattr(self, kind.value, getattr(self, kind.value) + amount)

    def items(self) -> Iterator[Tuple[AmmoKind, Union[int, List[int]]]]:
        for kind in AmmoKind:
            yield kind, getattr(self, kind.value)

    def to_dict(self) -> Dict[str, Union[int, List[int]]]:
        return {kind.value: (list(value) if isinstance(value, list) else value)
                for kind, value in self.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AmmoCapacitiesModel':
        """
        Build a table from a kind -> capacity mapping.

        Raises:
            ValueError: If a multi-level entry isn't a list of three
                capacities or a single-level entry is a list
        """
        values = {}
        for kind in AmmoKind:
            if kind.value not in data:
                continue
            value = data[kind.value]
            if kind in MULTI_LEVEL_AMMO:
                if not isinstance(value, (list, tuple)) or len(value) != AMMO_LEVELS:
                    raise ValueError(f"Ammo '{kind.value}' needs {AMMO_LEVELS} capacities, got {value!r}")
                values[kind.value] = [int(v) for v in value]
            else:
                if isinstance(value, (list, tuple)):
                    raise ValueError(f"Ammo '{kind.value}' has a single capacity, got {value!r}")
                values[kind.value] = int(value)
        return cls(**values)


# =============================================================================
# EXTRA DATA
# =============================================================================

@dataclass(frozen=True)
class OtherDataModel:
    """Named value forwarded from the aggregation layer."""
    name: str
    value: StatValue = None


@dataclass(frozen=True)
class ExtraDataModel:
    """Pass-through data shown next to the stat panels."""
    other_data: Tuple[OtherDataModel, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExtraDataModel':
        entries = data.get('otherData', data.get('other_data', []))
        return cls(other_data=tuple(
            OtherDataModel(name=entry.get('name', ''), value=entry.get('value'))
            for entry in entries
        ))


# =============================================================================
# STATS SNAPSHOT (INPUT)
# =============================================================================

@dataclass(frozen=True)
class StatsModel:
    """Aggregated stats snapshot consumed by one calculation pass."""

    # Attack
    attack: float = 0
    passive_attack: float = 0
    active_attack: float = 0
    weapon_attack_modifier: float = 1
    elementless: bool = False
    elementless_boost_percent: float = 0
    effective_physical_sharpness_modifier: float = 0
    effective_elemental_sharpness_modifier: float = 0

    # Affinity & critical
    affinity: float = 0
    passive_affinity: float = 0
    active_affinity: float = 0
    weak_point_affinity: float = 0
    draw_affinity: float = 0
    sliding_affinity: float = 0
    passive_critical_boost_percent: float = 0
    critical_status: bool = False
    critical_element: bool = False

    # Ailment
    ailment: Optional[str] = None
    ailment_capped: bool = False
    ailment_hidden: bool = False
    base_ailment_attack: float = 0
    effective_passive_ailment_attack: float = 0
    ailment_cap: float = 0

    # Element
    element: Optional[str] = None
    element_capped: bool = False
    element_hidden: bool = False
    base_element_attack: float = 0
    effective_passive_element_attack: float = 0
    element_cap: float = 0
    element_attack_multiplier: float = 1

    # Misc
    elderseal: Optional[str] = None
    heal_on_hit_percent: float = 0

    # Defense
    defense: float = 0
    max_defense: float = 0
    augmented_defense: float = 0
    passive_defense: float = 0
    passive_health: float = 0
    passive_stamina: float = 0

    # Resistances
    fire_resist: float = 0
    water_resist: float = 0
    thunder_resist: float = 0
    ice_resist: float = 0
    dragon_resist: float = 0
    passive_fire_resist: float = 0
    passive_water_resist: float = 0
    passive_thunder_resist: float = 0
    passive_ice_resist: float = 0
    passive_dragon_resist: float = 0

    # Sharpness (levels of 10 hits, index 0 = red)
    sharpness_levels_bar: Optional[Sequence[float]] = None
    passive_sharpness: float = 0
    sharpness_data_needed: bool = False

    # Bowguns
    ammo_capacities: Optional[AmmoCapacitiesModel] = None
    ammo_up: int = 0

    extra_data: Optional[ExtraDataModel] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StatsModel':
        """
        Build a snapshot from the aggregation layer's camelCase mapping.

        snake_case keys are accepted too. Keys with no matching field (for
        instance totals the engine derives itself) are skipped.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}

        for key, value in data.items():
            name = FIELD_ALIASES.get(key, _snake_case(key))
            if name not in known:
                logger.debug("Skipping unknown stats field '%s'", key)
                continue
            kwargs[name] = value

        ammo = kwargs.get('ammo_capacities')
        if isinstance(ammo, dict):
            kwargs['ammo_capacities'] = AmmoCapacitiesModel.from_dict(ammo)

        sharpness = kwargs.get('sharpness_levels_bar')
        if sharpness is not None:
            kwargs['sharpness_levels_bar'] = tuple(sharpness)

        extra = kwargs.get('extra_data')
        if isinstance(extra, dict):
            kwargs['extra_data'] = ExtraDataModel.from_dict(extra)

        return cls(**kwargs)


# Names used by the aggregation layer that don't map by case conversion alone
FIELD_ALIASES: Dict[str, str] = {
    'crititalStatus': 'critical_status',
    'crititalElement': 'critical_element',
}


def _snake_case(name: str) -> str:
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


# =============================================================================
# STAT ROWS (OUTPUT)
# =============================================================================

@dataclass(frozen=True)
class CalculationVariableModel:
    """Named, labelled operand shown in a calculation."""
    name: str
    display_name: str
    value: StatValue
    color_class: ColorClass


@dataclass(frozen=True)
class StatDetailModel:
    """
    One display row of a stat panel.

    calculation holds the structured formula; calculation_template renders
    it with {name} tokens that resolve against calculation_variables.
    """
    name: str
    value: StatValue = None
    calculation: Tuple[CalculationLine, ...] = ()
    calculation_variables: Tuple[CalculationVariableModel, ...] = ()
    info: Tuple[str, ...] = ()
    color: Optional[ColorClass] = None
    extra1: Optional[int] = None
    extra2: Optional[int] = None
    class1: Optional[str] = None
    class2: Optional[str] = None

    def __post_init__(self):
        available = {variable.name for variable in self.calculation_variables}
        for line in self.calculation:
            missing = set(line.names()) - available
            assert not missing, f"{self.name}: template references unknown variables {sorted(missing)}"

    @property
    def calculation_template(self) -> Optional[str]:
        if not self.calculation:
            return None
        return format_calculation(self.calculation)

    def variable(self, name: str) -> CalculationVariableModel:
        for variable in self.calculation_variables:
            if variable.name == name:
                return variable
        raise KeyError(name)

    def variable_values(self) -> Dict[str, StatValue]:
        return {variable.name: variable.value for variable in self.calculation_variables}


# =============================================================================
# SHARPNESS
# =============================================================================

@dataclass(frozen=True)
class SharpnessModel:
    """One coloured segment of the sharpness bar."""
    color_index: int
    level: float
    active: bool
    first: bool = False
    last: bool = False


@dataclass(frozen=True)
class SharpnessBarModel:
    """Sharpness bar ready for display, segments ordered lowest colour first."""
    sharps: Tuple[SharpnessModel, ...]
    levels: Tuple[float, ...]
    empty: float
    width_modifier: float
    levels_missing: int
    tooltip_template: str
    sharpness_data_needed: bool
    color: ColorClass
