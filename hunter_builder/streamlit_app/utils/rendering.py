"""
Stat panel rendering helpers.

Turns calculation results into HTML snippets, pandas tables and Plotly
figures for the Streamlit page. No stat arithmetic happens here: every
number comes from the core engine already computed.
"""

import html
from typing import Dict, List, Optional

import pandas as pd
import plotly.graph_objects as go

from hunter_builder.core.constants import (
    AMMO_DISPLAY_NAMES,
    AMMO_LEVELS,
    SHARPNESS_COLOR_NAMES,
    SHARPNESS_HEX_COLORS,
    ColorClass,
)
from hunter_builder.core.models import AmmoCapacitiesModel, SharpnessBarModel, StatDetailModel
from hunter_builder.core.templates import LINE_BREAK, format_number, substitute_template

COLOR_CLASS_HEX: Dict[ColorClass, str] = {
    ColorClass.GREEN: "#86ff86",
    ColorClass.ORANGE: "#ffa07a",
    ColorClass.PURPLE: "#cc77ff",
    ColorClass.BLUE: "#87cefa",
    ColorClass.RED: "#ff6666",
    ColorClass.KAKHI: "#F0E68C",
    ColorClass.YELLOW: "#ffcc00",
    ColorClass.WHITE: "#ffffff",
}

LOCKED_SHARPNESS_COLOR = "rgba(128, 128, 128, 0.35)"


def get_color_hex(color: Optional[ColorClass], default: str = "#ffffff") -> str:
    """Get hex colour for a colour class."""
    if color is None:
        return default
    return COLOR_CLASS_HEX.get(color, default)


def render_calculation(row: StatDetailModel) -> Optional[str]:
    """
    Render a row's calculation as HTML.

    Each {name} token becomes a coloured span holding the variable's value,
    with its display name as the hover title.

    Returns:
        HTML string, or None for rows without a calculation
    """
    template = row.calculation_template
    if template is None:
        return None

    variables = {variable.name: variable for variable in row.calculation_variables}

    def styled(name, value):
        variable = variables[name]
        return (f'<span style="color: {get_color_hex(variable.color_class)}" '
                f'title="{html.escape(variable.display_name)}">{html.escape(format_number(value))}</span>')

    return substitute_template(template, row.variable_values(), formatter=styled)


def render_plain_calculation(row: StatDetailModel) -> Optional[str]:
    """Calculation with values substituted and no markup, one line per entry."""
    template = row.calculation_template
    if template is None:
        return None
    return substitute_template(template, row.variable_values()).replace(LINE_BREAK, "\n")


def stat_rows_dataframe(rows: List[StatDetailModel]) -> pd.DataFrame:
    """Table of stat rows with their calculations and advisory notes."""
    records = []
    for row in rows:
        extras = [format_number(extra) for extra in (row.extra1, row.extra2) if extra is not None]
        records.append({
            "Stat": row.name,
            "Value": format_number(row.value),
            "Ailment/Element": " / ".join(extras),
            "Calculation": render_plain_calculation(row) or "",
            "Notes": " ".join(row.info),
        })
    return pd.DataFrame(records, columns=["Stat", "Value", "Ailment/Element", "Calculation", "Notes"])


def _total_shots(value) -> int:
    return sum(value) if isinstance(value, list) else value


def ammo_dataframe(ammo: AmmoCapacitiesModel, base: Optional[AmmoCapacitiesModel] = None) -> pd.DataFrame:
    """
    Ammo table with one row per ammo kind and one column per level.

    Single level ammo only fills 'Lv1'. When the base table is given, a
    'Bonus' column shows how many shots Ammo Up added in total.
    """
    columns = ["Ammo"] + [f"Lv{level + 1}" for level in range(AMMO_LEVELS)]
    records = []
    for kind, value in ammo.items():
        levels = list(value) if isinstance(value, list) else [value] + [None] * (AMMO_LEVELS - 1)
        record = {"Ammo": AMMO_DISPLAY_NAMES[kind]}
        for level, capacity in enumerate(levels):
            record[f"Lv{level + 1}"] = capacity
        if base is not None:
            record["Bonus"] = _total_shots(value) - _total_shots(getattr(base, kind.value))
        records.append(record)

    if base is not None:
        columns.append("Bonus")
    return pd.DataFrame(records, columns=columns)


def create_sharpness_figure(bar: SharpnessBarModel, height: int = 90) -> go.Figure:
    """
    Horizontal stacked bar showing the sharpness segments.

    Segments unlocked by handicraft are drawn translucent; levels handicraft
    hasn't unlocked yet are appended in grey.

    Returns:
        Plotly Figure object ready for display with st.plotly_chart()
    """
    fig = go.Figure()

    for segment in bar.sharps:
        if segment.level <= 0:
            continue
        color_name = SHARPNESS_COLOR_NAMES.get(segment.color_index, str(segment.color_index))
        suffix = " (handicraft)" if segment.active else ""
        fig.add_trace(go.Bar(
            x=[segment.level * bar.width_modifier],
            y=["Sharpness"],
            orientation='h',
            marker=dict(color=SHARPNESS_HEX_COLORS.get(segment.color_index, "#888888")),
            opacity=0.55 if segment.active else 1.0,
            hovertemplate=f"{color_name}{suffix}: {format_number(segment.level * 10)}<extra></extra>",
            showlegend=False,
        ))

    if bar.empty > 0:
        fig.add_trace(go.Bar(
            x=[bar.empty * bar.width_modifier],
            y=["Sharpness"],
            orientation='h',
            marker=dict(color=LOCKED_SHARPNESS_COLOR),
            hovertemplate=f"Locked: {format_number(bar.empty * 10)}<extra></extra>",
            showlegend=False,
        ))

    border = get_color_hex(bar.color)
    fig.update_layout(
        barmode='stack',
        height=height,
        margin=dict(l=10, r=10, t=10, b=10),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        shapes=[dict(type='rect', xref='paper', yref='paper', x0=0, y0=0, x1=1, y1=1,
                     line=dict(color=border, width=1))],
    )
    return fig
