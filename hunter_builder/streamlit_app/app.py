"""
Hunter Builder - Streamlit Stats Panel
Shows the attack, defense, sharpness and ammo panels for a stats snapshot.

Run with: streamlit run hunter_builder/streamlit_app/app.py
"""
import logging
import os

import streamlit as st

from hunter_builder.core import CalculationResults, CalculationService, StatsModel
from hunter_builder.streamlit_app.utils.rendering import (
    ammo_dataframe,
    create_sharpness_figure,
    get_color_hex,
    render_calculation,
)
from hunter_builder.streamlit_app.utils.snapshot import load_snapshot_json
from hunter_builder.core.templates import format_number

# Set HUNTER_BUILDER_LOG_LEVEL=DEBUG to trace every calculation pass
LOG_LEVEL = os.environ.get("HUNTER_BUILDER_LOG_LEVEL", "WARNING").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.WARNING))

# Snapshot used until the user uploads their own
SAMPLE_STATS = {
    "attack": 1100,
    "passiveAttack": 21,
    "activeAttack": 15,
    "weaponAttackModifier": 4.8,
    "effectivePhysicalSharpnessModifier": 1.32,
    "effectiveElementalSharpnessModifier": 1.15,
    "affinity": 10,
    "passiveAffinity": 20,
    "weakPointAffinity": 30,
    "drawAffinity": 0,
    "passiveCriticalBoostPercent": 15,
    "element": "fire",
    "baseElementAttack": 240,
    "effectivePassiveElementAttack": 90,
    "elementCap": 360,
    "elementAttackMultiplier": 1,
    "defense": 304,
    "maxDefense": 598,
    "augmentedDefense": 658,
    "passiveDefense": 20,
    "fireResist": 3,
    "waterResist": -1,
    "thunderResist": 2,
    "iceResist": 1,
    "dragonResist": -2,
    "sharpnessLevelsBar": [9, 7, 8, 6, 5, 5],
    "passiveSharpness": 30,
}

st.set_page_config(page_title="Hunter Builder", page_icon="🗡️", layout="wide")

st.markdown("""
<style>
    .stat-row {
        display: flex;
        justify-content: space-between;
        padding: 4px 8px;
        border-bottom: 1px solid #333;
    }
    .stat-name { color: #aaa; }
    .stat-value { font-weight: bold; }
    .stat-calc { color: #888; font-size: 12px; padding: 2px 8px 6px 16px; }
    .stat-info { color: #ffcc00; font-size: 12px; padding: 0 8px 4px 16px; }
    .sharp-0 { color: #d92c2c; }
    .sharp-1 { color: #d9662c; }
    .sharp-2 { color: #d9d12c; }
    .sharp-3 { color: #70d92c; }
    .sharp-4 { color: #2c86d9; }
    .sharp-5 { color: #ffffff; }
    .sharp-8 { color: #ffd700; }
</style>
""", unsafe_allow_html=True)


def init_session_state():
    """Initialize session state variables."""
    if 'calculation_service' not in st.session_state:
        service = CalculationService()
        service.subscribe(store_results)
        st.session_state.calculation_service = service
    if 'results' not in st.session_state:
        st.session_state.results = None


def store_results(results: CalculationResults):
    st.session_state.results = results


def load_snapshot() -> StatsModel:
    """Snapshot from the uploaded JSON file, or the sample build."""
    uploaded = st.sidebar.file_uploader("Stats snapshot (JSON)", type=["json"])
    data = dict(SAMPLE_STATS)
    if uploaded is not None:
        try:
            data = load_snapshot_json(uploaded)
        except ValueError as e:
            st.sidebar.error(str(e))

    st.sidebar.markdown("### Adjust")
    data["passiveSharpness"] = st.sidebar.slider(
        "Handicraft (passive sharpness)", 0, 50, int(data.get("passiveSharpness", 0)), step=10)
    data["ammoUp"] = st.sidebar.slider("Ammo Up", 0, 3, int(data.get("ammoUp", 0)))
    data["drawAffinity"] = st.sidebar.number_input("Draw affinity", value=float(data.get("drawAffinity", 0)))
    data["slidingAffinity"] = st.sidebar.number_input("Sliding affinity", value=float(data.get("slidingAffinity", 0)))

    try:
        return StatsModel.from_dict(data)
    except ValueError as e:
        st.sidebar.error(str(e))
        return StatsModel.from_dict(SAMPLE_STATS)


def render_rows(rows):
    for row in rows:
        color = get_color_hex(row.color)
        value = format_number(row.value)
        extras = [f'<span title="{cls}">{format_number(extra)}</span>'
                  for extra, cls in ((row.extra1, row.class1), (row.extra2, row.class2)) if extra is not None]
        if extras:
            value += ' (' + ' / '.join(extras) + ')'
        st.markdown(
            f'<div class="stat-row"><span class="stat-name">{row.name}</span>'
            f'<span class="stat-value" style="color: {color}">{value}</span></div>',
            unsafe_allow_html=True,
        )
        calculation = render_calculation(row)
        if calculation:
            st.markdown(f'<div class="stat-calc">{calculation}</div>', unsafe_allow_html=True)
        for note in row.info:
            st.markdown(f'<div class="stat-info">{note}</div>', unsafe_allow_html=True)


def main():
    """Main entry point."""
    init_session_state()
    stats = load_snapshot()
    st.session_state.calculation_service.update_calcs(stats)
    results = st.session_state.results

    st.title("🗡️ Hunter Builder")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Attack")
        render_rows(results.attack_calcs)

    with col2:
        st.subheader("Defense")
        render_rows(results.defense_calcs)

        if results.sharpness_bar is not None:
            st.subheader("Sharpness")
            st.plotly_chart(create_sharpness_figure(results.sharpness_bar), use_container_width=True)
            st.markdown(results.sharpness_bar.tooltip_template, unsafe_allow_html=True)
            if results.sharpness_bar.sharpness_data_needed:
                st.warning("Sharpness data for this weapon is incomplete.")

    if results.ammo_capacities_up is not None:
        st.subheader("Ammo")
        st.dataframe(ammo_dataframe(results.ammo_capacities_up, base=stats.ammo_capacities),
                     width='stretch', hide_index=True)

    if results.extra_data is not None and results.extra_data.other_data:
        st.subheader("Other")
        for entry in results.extra_data.other_data:
            st.metric(entry.name, format_number(entry.value))


if __name__ == "__main__":
    main()
