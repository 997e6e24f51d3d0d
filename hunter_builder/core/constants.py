"""
Hunter Builder - Core Constants
===============================
Single source of truth for game constants, colour classes and the ammo-up
rule table used by the stats calculation engine.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class ColorClass(Enum):
    """Colour classes attached to calculation variables and stat rows."""
    GREEN = "green"
    ORANGE = "orange"
    PURPLE = "purple"
    BLUE = "blue"
    RED = "red"
    KAKHI = "kakhi"
    YELLOW = "yellow"
    WHITE = "white"


class AmmoKind(Enum):
    """Every ammo kind tracked by the capacity table."""
    NORMAL = "normal"
    PIERCING = "piercing"
    SPREAD = "spread"
    STICKY = "sticky"
    CLUSTER = "cluster"
    RECOVER = "recover"
    POISON = "poison"
    PARALYSIS = "paralysis"
    SLEEP = "sleep"
    EXHAUST = "exhaust"
    FLAMING = "flaming"
    WATER = "water"
    FREEZE = "freeze"
    THUNDER = "thunder"
    DRAGON = "dragon"
    SLICING = "slicing"
    DEMON = "demon"
    ARMOR = "armor"
    TRANQ = "tranq"


# Ammo kinds stored as a three-level list, everything else is a single int
MULTI_LEVEL_AMMO: List[AmmoKind] = [
    AmmoKind.NORMAL,
    AmmoKind.PIERCING,
    AmmoKind.SPREAD,
    AmmoKind.STICKY,
    AmmoKind.CLUSTER,
    AmmoKind.RECOVER,
    AmmoKind.POISON,
    AmmoKind.PARALYSIS,
    AmmoKind.SLEEP,
    AmmoKind.EXHAUST,
]

AMMO_LEVELS = 3

AMMO_DISPLAY_NAMES: Dict[AmmoKind, str] = {
    AmmoKind.NORMAL: "Normal",
    AmmoKind.PIERCING: "Piercing",
    AmmoKind.SPREAD: "Spread",
    AmmoKind.STICKY: "Sticky",
    AmmoKind.CLUSTER: "Cluster",
    AmmoKind.RECOVER: "Recover",
    AmmoKind.POISON: "Poison",
    AmmoKind.PARALYSIS: "Paralysis",
    AmmoKind.SLEEP: "Sleep",
    AmmoKind.EXHAUST: "Exhaust",
    AmmoKind.FLAMING: "Flaming",
    AmmoKind.WATER: "Water",
    AmmoKind.FREEZE: "Freeze",
    AmmoKind.THUNDER: "Thunder",
    AmmoKind.DRAGON: "Dragon",
    AmmoKind.SLICING: "Slicing",
    AmmoKind.DEMON: "Demon",
    AmmoKind.ARMOR: "Armor",
    AmmoKind.TRANQ: "Tranq",
}


# =============================================================================
# ATTACK CONSTANTS
# =============================================================================

# Base critical multiplier % for this ruleset
BASE_CRITICAL_BOOST = 125

# Damage multiplier applied on a crit when no affinity is rolled
BASE_CRITICAL_MULTIPLIER = 1.25

# Affinity can never go past 100% for average damage purposes
AFFINITY_CAP = 100.0

# Divisors that turn ailment/element attack into per-hit damage
AILMENT_AVERAGE_DIVISOR = 30
ELEMENT_AVERAGE_DIVISOR = 10


# =============================================================================
# SHARPNESS CONSTANTS
# =============================================================================
# Sharpness is tracked in levels of 10 hits; handicraft adds up to 5 levels
# on top of a 40 level display cap.

SHARPNESS_DISPLAY_CAP = 40
HANDICRAFT_MAX_LEVELS = 5
SHARPNESS_COLORS = 6
SHARPNESS_WIDTH_MODIFIER = 3.5

# Colour index used for the total in the sharpness tooltip
SHARPNESS_TOTAL_COLOR_INDEX = 8

SHARPNESS_COLOR_NAMES: Dict[int, str] = {
    0: "Red",
    1: "Orange",
    2: "Yellow",
    3: "Green",
    4: "Blue",
    5: "White",
}

SHARPNESS_HEX_COLORS: Dict[int, str] = {
    0: "#d92c2c",
    1: "#d9662c",
    2: "#d9d12c",
    3: "#70d92c",
    4: "#2c86d9",
    5: "#ffffff",
}


# =============================================================================
# DEFENSE CONSTANTS
# =============================================================================

BASE_HEALTH = 100
BASE_STAMINA = 100

RESISTANCES: List[Tuple[str, str]] = [
    ("fire", "Fire Resist"),
    ("water", "Water Resist"),
    ("thunder", "Thunder Resist"),
    ("ice", "Ice Resist"),
    ("dragon", "Dragon Resist"),
]


# =============================================================================
# AMMO UP RULES
# =============================================================================
# Each rule: (min ammo_up level, ammo kind, level index or None for single
# level ammo, cap or None). Capped ammo gains +1 while below the cap; every
# other ammo gains +2 at 5 or more and +1 otherwise. Empty slots never grow.

AmmoUpRule = Tuple[int, AmmoKind, Optional[int], Optional[int]]

AMMO_UP_RULES: List[AmmoUpRule] = [
    # Ammo Up 1
    (1, AmmoKind.NORMAL, 0, None),
    (1, AmmoKind.PIERCING, 0, None),
    (1, AmmoKind.SPREAD, 0, None),
    (1, AmmoKind.STICKY, 0, 3),
    (1, AmmoKind.CLUSTER, 0, 3),

    # Ammo Up 2
    (2, AmmoKind.NORMAL, 1, None),
    (2, AmmoKind.PIERCING, 1, None),
    (2, AmmoKind.SPREAD, 1, None),
    (2, AmmoKind.STICKY, 1, 2),
    (2, AmmoKind.CLUSTER, 1, 2),
    (2, AmmoKind.RECOVER, 0, None),
    (2, AmmoKind.POISON, 0, None),
    (2, AmmoKind.PARALYSIS, 0, None),
    (2, AmmoKind.SLEEP, 0, None),
    (2, AmmoKind.EXHAUST, 0, None),

    # Ammo Up 3
    (3, AmmoKind.NORMAL, 2, None),
    (3, AmmoKind.PIERCING, 2, None),
    (3, AmmoKind.SPREAD, 2, None),
    (3, AmmoKind.RECOVER, 1, None),
    (3, AmmoKind.POISON, 1, None),
    (3, AmmoKind.PARALYSIS, 1, None),
    (3, AmmoKind.SLEEP, 1, None),
    (3, AmmoKind.EXHAUST, 1, None),
    (3, AmmoKind.FLAMING, None, None),
    (3, AmmoKind.WATER, None, None),
    (3, AmmoKind.FREEZE, None, None),
    (3, AmmoKind.THUNDER, None, None),
    (3, AmmoKind.DRAGON, None, 3),
    (3, AmmoKind.SLICING, None, 3),
    (3, AmmoKind.DEMON, None, None),
    (3, AmmoKind.ARMOR, None, None),
    (3, AmmoKind.TRANQ, None, None),
]

# Capacity at which standard ammo gains two shots instead of one
AMMO_UP_DOUBLE_THRESHOLD = 5

MAX_AMMO_UP = 3
