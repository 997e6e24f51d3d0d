"""
Hunter Builder - Sharpness Bar Builder
======================================
Turns a weapon's sharpness pool into the coloured segments of the
sharpness bar.

Sharpness is counted in levels of 10 hits per colour. Handicraft (passive
sharpness) can extend the bar by up to 5 levels above the 40 level display
cap. Levels handicraft has not unlocked yet are trimmed from the top and
reported as ``empty``; unlocked ones are drawn as "active" segments.
"""

import logging
import numbers
from typing import List, Optional, Sequence

from .constants import (
    HANDICRAFT_MAX_LEVELS,
    SHARPNESS_COLORS,
    SHARPNESS_DISPLAY_CAP,
    SHARPNESS_TOTAL_COLOR_INDEX,
    SHARPNESS_WIDTH_MODIFIER,
    ColorClass,
)
from .models import SharpnessBarModel, SharpnessModel, StatsModel
from .templates import format_number

logger = logging.getLogger(__name__)


def has_sharpness_data(levels: Optional[Sequence[float]]) -> bool:
    """Only melee weapons carry a sharpness pool."""
    if not levels:
        return False
    first = levels[0]
    return isinstance(first, numbers.Real) and not isinstance(first, bool) and first == first


def _whole(value: float):
    # Keeps 3.0 displayed as 3
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _tooltip_entry(color_index: int, level: float) -> str:
    return f'| <span class="sharp-{color_index}">{format_number(level * 10)}</span> '


def build_sharpness_bar(stats: StatsModel) -> Optional[SharpnessBarModel]:
    """
    Build the sharpness bar for the equipped weapon.

    Colours are walked from the highest down: unlocked handicraft levels are
    removed first, then promoted levels are split into an active segment
    and whatever is left into an inactive one. Pools above 40 are trimmed
    from the top as well.

    Returns:
        SharpnessBarModel, or None when the weapon has no sharpness data
    """
    if not has_sharpness_data(stats.sharpness_levels_bar):
        logger.debug("No sharpness data, skipping sharpness bar")
        return None

    levels: List[float] = list(stats.sharpness_levels_bar)
    total = sum(levels)
    max_handicraft_levels = SHARPNESS_DISPLAY_CAP + HANDICRAFT_MAX_LEVELS - total

    handicraft_levels = stats.passive_sharpness / 10
    levels_to_subtract = _whole(min(HANDICRAFT_MAX_LEVELS - handicraft_levels, max_handicraft_levels))
    levels_to_add = _whole(min(handicraft_levels, max_handicraft_levels))
    empty = levels_to_subtract

    sharps: List[SharpnessModel] = []
    tooltip = ''
    last = True

    for i in range(len(levels) - 1, -1, -1):
        if levels_to_subtract > 0:
            removed = min(levels[i], levels_to_subtract)
            levels[i] -= removed
            levels_to_subtract -= removed

        promoted = min(levels[i], levels_to_add)

        if levels_to_add > 0:
            sharps.append(SharpnessModel(
                color_index=i,
                level=promoted,
                active=True,
                first=levels_to_add - promoted == 0,
                last=last,
            ))
            last = False

        if levels_to_add < levels[i]:
            sharps.append(SharpnessModel(color_index=i, level=levels[i] - levels_to_add, active=False))

        levels_to_add -= promoted

        # Pools above the display cap lose their top levels
        if total > SHARPNESS_DISPLAY_CAP and levels[i] > 0:
            excess = min(levels[i], total - SHARPNESS_DISPLAY_CAP)
            levels[i] -= excess
            total -= excess

        tooltip = _tooltip_entry(i, levels[i]) + tooltip

    tooltip += f' | = <span class="sharp-{SHARPNESS_TOTAL_COLOR_INDEX}">{format_number((total - empty) * 10)}</span>'

    sharps.reverse()
    return SharpnessBarModel(
        sharps=tuple(sharps),
        levels=tuple(levels),
        empty=empty,
        width_modifier=SHARPNESS_WIDTH_MODIFIER,
        levels_missing=SHARPNESS_COLORS - len(levels),
        tooltip_template=tooltip,
        sharpness_data_needed=stats.sharpness_data_needed,
        color=ColorClass.RED if stats.sharpness_data_needed else ColorClass.WHITE,
    )
