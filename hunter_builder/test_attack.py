"""
Unit tests for core/attack.py - attack panel rows, potentials, ailment and element.
"""
import pytest

from hunter_builder.core.attack import (
    calculate_attack_calcs,
    get_affinity,
    get_affinity_potential,
    get_attack,
    get_attack_potential,
    get_critical_boost,
    get_element,
    get_element_attack,
    get_ailment,
    get_ailment_attack,
)
from hunter_builder.core.constants import ColorClass
from hunter_builder.core.formulas import (
    calculate_total_element_attack,
    elementless_applies_to_potential,
)
from hunter_builder.core.models import StatsModel


def row_names(rows):
    return [row.name for row in rows]


class TestAttackCalcsOrder:
    """Tests for which rows are emitted and in what order."""

    def test_minimal_rows(self):
        """A bare snapshot only shows attack, affinity and critical boost."""
        rows = calculate_attack_calcs(StatsModel())
        assert row_names(rows) == ['Attack', 'Affinity', 'Critical Boost']

    def test_all_rows(self):
        """Every optional row appears in its fixed position."""
        stats = StatsModel(
            active_attack=10,
            effective_physical_sharpness_modifier=1.2,
            weak_point_affinity=30,
            ailment='poison',
            base_ailment_attack=200,
            element='fire',
            base_element_attack=300,
            elderseal='average',
            heal_on_hit_percent=5,
        )
        rows = calculate_attack_calcs(stats)
        assert row_names(rows) == [
            'Attack',
            'Attack Potential',
            'Affinity',
            'Affinity Potential',
            'Critical Boost',
            'Ailment',
            'Ailment Attack',
            'Element',
            'Element Attack',
            'Elderseal',
            'Heal on Hit',
        ]

    def test_sharpness_alone_triggers_attack_potential(self):
        rows = calculate_attack_calcs(StatsModel(effective_physical_sharpness_modifier=1.05))
        assert 'Attack Potential' in row_names(rows)

    @pytest.mark.parametrize('field', ['active_affinity', 'weak_point_affinity', 'draw_affinity', 'sliding_affinity'])
    def test_affinity_potential_triggers(self, field):
        """Any conditional affinity source shows the potential row."""
        rows = calculate_attack_calcs(StatsModel(**{field: 10}))
        assert 'Affinity Potential' in row_names(rows)


class TestAttack:
    """Tests for the Attack row."""

    def test_plain_attack(self):
        """200 + 10 × 4.8 = 248"""
        row = get_attack(StatsModel(attack=200, passive_attack=10, weapon_attack_modifier=4.8))
        assert row.value == 248
        assert row.calculation_template == '{attack} + {passiveAttack} × {weaponModifier} ≈ 248'

    def test_elementless_attack(self):
        """200 × 1.1 + 10 × 4.8 = 268"""
        stats = StatsModel(attack=200, passive_attack=10, weapon_attack_modifier=4.8,
                           elementless=True, elementless_boost_percent=10)
        row = get_attack(stats)
        assert row.value == 268
        assert row.calculation_template == \
            '{attack} × {elementlessBoostPercent} + {passiveAttack} × {weaponModifier} ≈ 268'
        assert row.variable('elementlessBoostPercent').value == pytest.approx(1.1)

    def test_variables_are_coloured(self):
        row = get_attack(StatsModel(attack=200))
        assert row.variable('attack').color_class == ColorClass.GREEN
        assert row.variable('passiveAttack').color_class == ColorClass.ORANGE
        assert row.variable('weaponModifier').color_class == ColorClass.PURPLE


class TestAttackPotential:
    """Tests for the Attack Potential row and elementless exclusivity."""

    def test_potential_formula(self):
        """200 × 1.2 + (10 + 15) × 1 = 265"""
        stats = StatsModel(attack=200, passive_attack=10, active_attack=15,
                           effective_physical_sharpness_modifier=1.2)
        row = get_attack_potential(stats)
        assert row.value == 265
        assert row.calculation_template == \
            '{attack} × {sharpnessModifier} + ({passiveAttack} + {activeAttack}) × {weaponModifier} ≈ 265'

    def test_elementless_applies_without_element(self):
        """200 × 1.1 × 1.2 + 10 = 274"""
        stats = StatsModel(attack=200, active_attack=10, effective_physical_sharpness_modifier=1.2,
                           elementless_boost_percent=10)
        row = get_attack_potential(stats)
        assert row.value == 274
        assert '{elementlessBoostPercent}' in row.calculation_template

    def test_elementless_ignored_with_element(self):
        """Element damage disables the elementless boost even if the flag is set."""
        stats = StatsModel(attack=200, active_attack=10, effective_physical_sharpness_modifier=1.2,
                           elementless=True, elementless_boost_percent=10,
                           element='water', base_element_attack=100)
        row = get_attack_potential(stats)
        assert row.value == 250
        assert '{elementlessBoostPercent}' not in row.calculation_template
        assert not elementless_applies_to_potential(stats)

    def test_elementless_ignored_with_ailment(self):
        stats = StatsModel(attack=200, active_attack=10, effective_physical_sharpness_modifier=1.2,
                           elementless_boost_percent=10, ailment='sleep', base_ailment_attack=50)
        assert get_attack_potential(stats).value == 250

    def test_elementless_needs_positive_boost(self):
        """The elementless flag alone doesn't boost the potential."""
        stats = StatsModel(attack=200, active_attack=10, effective_physical_sharpness_modifier=1.0,
                           elementless=True, elementless_boost_percent=0)
        assert get_attack_potential(stats).value == 210


class TestAffinity:
    """Tests for Affinity, Affinity Potential and Critical Boost."""

    def test_affinity(self):
        row = get_affinity(StatsModel(affinity=10, passive_affinity=20))
        assert row.value == '30%'
        assert row.calculation_template == '{affinity} + {passiveAffinity} = 30%'

    def test_negative_affinity(self):
        assert get_affinity(StatsModel(affinity=-20, passive_affinity=5)).value == '-15%'

    def test_affinity_potential(self):
        stats = StatsModel(affinity=10, passive_affinity=20, weak_point_affinity=30, active_affinity=5)
        row = get_affinity_potential(stats)
        assert row.value == '65%'
        assert row.calculation_template == 'Base: {base} + {passive} + {weakPoint} + {active} = 65%'

    def test_draw_affinity_adds_alternate(self):
        """Draw affinity shows next to the main total, never replacing it."""
        stats = StatsModel(affinity=10, passive_affinity=20, weak_point_affinity=30, draw_affinity=30)
        row = get_affinity_potential(stats)
        assert row.value == '60% | 90%'
        lines = row.calculation_template.split('<br>')
        assert lines[0] == 'Base: {base} + {passive} + {weakPoint} + {active} = 60%'
        assert lines[1] == 'Draw: {base} + {passive} + {weakPoint} + {active} + {draw} = 90%'

    def test_draw_and_sliding(self):
        stats = StatsModel(affinity=10, draw_affinity=30, sliding_affinity=50)
        row = get_affinity_potential(stats)
        assert row.value == '10% | 40% | 60%'
        assert row.calculation_template.split('<br>')[2].startswith('Slide: ')
        assert row.variable('sliding').color_class == ColorClass.KAKHI

    def test_critical_boost(self):
        row = get_critical_boost(StatsModel(passive_critical_boost_percent=15))
        assert row.value == '140%'
        assert row.variable('base').value == '125'

    def test_critical_boost_base(self):
        assert get_critical_boost(StatsModel()).value == '125%'


class TestAilment:
    """Tests for the Ailment and Ailment Attack rows."""

    def test_plain_ailment(self):
        stats = StatsModel(ailment='poison', base_ailment_attack=300, effective_passive_ailment_attack=60)
        summary = get_ailment(stats)
        row = get_ailment_attack(stats, summary)
        assert summary.info == ()
        assert summary.color is None
        assert row.value == 360
        assert row.calculation_template == '{base} + {passive} = 360'

    def test_capped_ailment(self):
        """The cap is shown as a variable; the formula still adds up."""
        stats = StatsModel(ailment='poison', ailment_capped=True, base_ailment_attack=300,
                           effective_passive_ailment_attack=200, ailment_cap=450)
        summary = get_ailment(stats)
        row = get_ailment_attack(stats, summary)
        assert summary.info == ('Ailment attack is capped.',)
        assert summary.color == ColorClass.YELLOW
        assert row.value == 500
        assert row.calculation_template == '{base} + {passive} = 500'
        assert row.variable('cap').value == 450
        assert row.info == summary.info
        assert row.color == ColorClass.YELLOW

    def test_hidden_ailment_zero_multiplier(self):
        """A zero multiplier suppresses the passive ailment bonus along with the base."""
        stats = StatsModel(ailment='sleep', ailment_hidden=True, element_attack_multiplier=0,
                           base_ailment_attack=250, effective_passive_ailment_attack=60)
        summary = get_ailment(stats)
        row = get_ailment_attack(stats, summary)
        assert row.calculation_template == '({base} + {passive}) × {multiplier} ≈ 0'
        assert row.value == 0
        assert summary.color == ColorClass.RED
        assert row.color == ColorClass.RED
        assert summary.info == ('Effectiveness reduced due to hidden ailment.',)

    def test_hidden_ailment_uses_element_multiplier(self):
        stats = StatsModel(ailment='paralysis', ailment_hidden=True, element_attack_multiplier=0.5,
                           base_ailment_attack=200, effective_passive_ailment_attack=30)
        summary = get_ailment(stats)
        row = get_ailment_attack(stats, summary)
        assert summary.info == ('Effectiveness reduced due to hidden ailment.',)
        assert summary.color == ColorClass.YELLOW
        assert row.value == 130
        assert row.calculation_template == '{base} × {multiplier} + {passive} ≈ 130'


class TestElement:
    """Tests for the Element and Element Attack rows, including hidden elements."""

    def test_hidden_element_zero_multiplier(self):
        """A zero multiplier suppresses the passive bonus along with the base."""
        stats = StatsModel(element='fire', element_hidden=True, element_attack_multiplier=0,
                           base_element_attack=300, effective_passive_element_attack=90)
        summary = get_element(stats)
        row = get_element_attack(stats, summary)
        assert row.calculation_template == '({base} + {passive}) × {multiplier} ≈ 0'
        assert row.value == 0
        assert summary.color == ColorClass.RED
        assert summary.info == ('Effectiveness reduced due to hidden element.',)

    def test_hidden_element_zero_multiplier_any_magnitude(self):
        stats = StatsModel(element='ice', element_hidden=True, element_attack_multiplier=0,
                           base_element_attack=9999, effective_passive_element_attack=480)
        assert calculate_total_element_attack(stats) == 0

    def test_hidden_element_partial_multiplier(self):
        """300 × 0.5 + 90 = 240"""
        stats = StatsModel(element='fire', element_hidden=True, element_attack_multiplier=0.5,
                           base_element_attack=300, effective_passive_element_attack=90)
        row = get_element_attack(stats, get_element(stats))
        assert row.value == 240
        assert row.calculation_template == '{base} × {multiplier} + {passive} ≈ 240'
        assert row.color == ColorClass.YELLOW

    def test_hidden_element_revealed(self):
        """A multiplier of 1 adds no warning but keeps the hidden formula."""
        stats = StatsModel(element='fire', element_hidden=True, element_attack_multiplier=1,
                           base_element_attack=300, effective_passive_element_attack=90)
        summary = get_element(stats)
        row = get_element_attack(stats, summary)
        assert summary.info == ()
        assert row.value == 390
        assert row.variable('multiplier').value == 1

    def test_capped_and_hidden(self):
        """Both notes are shown; the hidden severity decides the colour."""
        stats = StatsModel(element='dragon', element_capped=True, element_hidden=True,
                           element_attack_multiplier=0)
        summary = get_element(stats)
        assert len(summary.info) == 2
        assert summary.color == ColorClass.RED

    def test_element_cap_display_only(self):
        """A total above the cap is shown as computed, next to the cap."""
        stats = StatsModel(element='thunder', base_element_attack=300, effective_passive_element_attack=90,
                           element_cap=360)
        row = get_element_attack(stats, get_element(stats))
        assert row.value == 390
        assert row.calculation_template == '{base} + {passive} = 390'
        assert row.variable('cap').value == 360

    def test_element_rows_not_aliased(self):
        stats = StatsModel(element='water', element_capped=True)
        summary = get_element(stats)
        row = get_element_attack(stats, summary)
        assert row.info == summary.info
        assert isinstance(row.info, tuple)
