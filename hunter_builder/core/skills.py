"""
Hunter Builder - Equipped Skills
================================
Ordering and colour helpers for the equipped skill list.
"""

from dataclasses import dataclass
from typing import Iterable, List


# Count colours for the skill list
SET_BONUS_COLOR = "#F0E68C"
OVER_MAX_COLOR = "#ffa07a"
AT_MAX_COLOR = "#87cefa"
REACHABLE_WITH_TOOL_COLOR = "#86ff86"
DEFAULT_COUNT_COLOR = "white"
SET_BONUS_INACTIVE_COLOR = "rgba(200,200,200,0.5)"


@dataclass(frozen=True)
class EquippedSkillModel:
    """Skill levels granted by the current loadout."""
    name: str
    equipped_count: int = 0
    total_level_count: int = 0
    equipped_tool1_count: int = 0
    equipped_tool2_count: int = 0
    is_set_bonus: bool = False


@dataclass(frozen=True)
class EquippedSetBonusModel:
    name: str
    equipped_count: int = 0
    required_count: int = 0


def sort_equipped_skills(skills: Iterable[EquippedSkillModel]) -> List[EquippedSkillModel]:
    """
    Order skills for display.

    Regular skills first, set bonus skills last. Within each group: most
    equipped levels, then highest max level, then name.
    """
    return sorted(skills, key=lambda skill: (
        skill.is_set_bonus,
        -skill.equipped_count,
        -skill.total_level_count,
        skill.name.casefold(),
    ))


def get_skill_count_color(skill: EquippedSkillModel) -> str:
    """Colour of the 'equipped / max' counter for a skill."""
    if skill.is_set_bonus:
        return SET_BONUS_COLOR
    if skill.equipped_count > skill.total_level_count:
        return OVER_MAX_COLOR
    if skill.equipped_count == skill.total_level_count:
        return AT_MAX_COLOR
    best_tool = max(skill.equipped_tool1_count, skill.equipped_tool2_count)
    if skill.equipped_count + best_tool >= skill.total_level_count:
        return REACHABLE_WITH_TOOL_COLOR
    return DEFAULT_COUNT_COLOR


def get_set_bonus_color(equipped_count: int, required_count: int) -> str:
    if equipped_count > required_count:
        return OVER_MAX_COLOR
    if equipped_count == required_count:
        return AT_MAX_COLOR
    return SET_BONUS_INACTIVE_COLOR
