"""
Hunter Builder - Calculation Templates
======================================
Structured calculation expressions and the ``{name}`` template mini-language.

A stat row describes its formula as a small expression tree (variables,
literals, binary operators and parenthesised groups) together with the
already computed result. The rendering layer turns the tree into a template
string such as::

    {attack} + {passiveAttack} × {weaponModifier} ≈ 620

and resolves every ``{name}`` token against the row's calculation variables.
No arithmetic happens at render time.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple, Union


# =============================================================================
# OPERATORS
# =============================================================================

PLUS = '+'
MINUS = '-'
TIMES = '×'
DIVIDE = '÷'

EQUALS = '='
APPROX = '≈'

LINE_BREAK = '<br>'
RESULT_SEPARATOR = ' | '

TOKEN_PATTERN = re.compile(r'\{(\w+)\}')


# =============================================================================
# EXPRESSION NODES
# =============================================================================

@dataclass(frozen=True)
class Var:
    """Reference to a calculation variable by name."""
    name: str

    def render(self) -> str:
        return '{' + self.name + '}'

    def names(self) -> Tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True)
class Literal:
    """Text shown as-is, e.g. ``100%``."""
    text: str

    def render(self) -> str:
        return self.text

    def names(self) -> Tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class BinaryOp:
    """``left <operator> right`` with no implicit parentheses."""
    operator: str
    left: 'Expression'
    right: 'Expression'

    def render(self) -> str:
        return f'{self.left.render()} {self.operator} {self.right.render()}'

    def names(self) -> Tuple[str, ...]:
        return self.left.names() + self.right.names()


@dataclass(frozen=True)
class Group:
    """Parenthesised sub-expression."""
    inner: 'Expression'

    def render(self) -> str:
        return f'({self.inner.render()})'

    def names(self) -> Tuple[str, ...]:
        return self.inner.names()


Expression = Union[Var, Literal, BinaryOp, Group]
Term = Union[Expression, str]


def _as_expression(term: Term) -> Expression:
    # Bare strings are variable names
    if isinstance(term, str):
        return Var(term)
    return term


def _chain(operator: str, terms: Sequence[Term]) -> Expression:
    if not terms:
        raise ValueError(f"'{operator}' needs at least one term")
    expression = _as_expression(terms[0])
    for term in terms[1:]:
        expression = BinaryOp(operator, expression, _as_expression(term))
    return expression


def add(*terms: Term) -> Expression:
    """Left-associative sum of the terms."""
    return _chain(PLUS, terms)


def sub(*terms: Term) -> Expression:
    return _chain(MINUS, terms)


def mul(*terms: Term) -> Expression:
    """Left-associative product of the terms."""
    return _chain(TIMES, terms)


def div(*terms: Term) -> Expression:
    return _chain(DIVIDE, terms)


def group(term: Term) -> Group:
    return Group(_as_expression(term))


# =============================================================================
# CALCULATION LINES
# =============================================================================

@dataclass(frozen=True)
class CalculationLine:
    """
    One rendered line of a stat row's calculation.

    Attributes:
        expression: Formula over the row's variables
        results: Literal result(s); alternates are pipe-delimited
        relation: '=' for exact results, '≈' for rounded ones
        label: Optional prefix such as 'Draw'
        bracketed: Wrap the results in [ ]
        wrapped: Break before the outermost operator and around the
            relation, for formulas too long for one line
    """
    expression: Expression
    results: Tuple[str, ...]
    relation: str = EQUALS
    label: Optional[str] = None
    bracketed: bool = False
    wrapped: bool = False

    def _render_expression(self) -> str:
        expression = self.expression
        if self.wrapped and isinstance(expression, BinaryOp):
            return f'{expression.left.render()} {LINE_BREAK}{expression.operator} {expression.right.render()}'
        return expression.render()

    def render(self) -> str:
        result = RESULT_SEPARATOR.join(self.results)
        if self.bracketed:
            result = f'[{result}]'
        if self.wrapped:
            text = f'{self._render_expression()} {LINE_BREAK}{self.relation}{LINE_BREAK} {result}'
        else:
            text = f'{self._render_expression()} {self.relation} {result}'
        if self.label:
            text = f'{self.label}: {text}'
        return text

    def names(self) -> Tuple[str, ...]:
        return self.expression.names()


def format_calculation(lines: Iterable[CalculationLine], line_break: str = LINE_BREAK) -> str:
    """Join the rendered lines into one template string."""
    return line_break.join(line.render() for line in lines)


def substitute_template(
    template: str,
    values: dict,
    formatter: Optional[Callable[[str, object], str]] = None,
) -> str:
    """
    Resolve ``{name}`` tokens against a name -> value mapping.

    Args:
        template: Template produced by format_calculation
        values: Mapping of variable name to display value
        formatter: Optional callable(name, value) returning the replacement
            text, used to wrap values in styling

    Returns:
        Template with every known token replaced; unknown tokens are kept
    """
    def replace(match):
        name = match.group(1)
        if name not in values:
            return match.group(0)
        value = values[name]
        if formatter is not None:
            return formatter(name, value)
        return format_number(value)

    return TOKEN_PATTERN.sub(replace, template)


# =============================================================================
# NUMBER FORMATTING
# =============================================================================

def format_number(value) -> str:
    """
    Format a display value the way the stat panels show it.

    Whole floats drop their decimal part, other floats keep at most two
    decimals, strings pass through unchanged.
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f'{value:.2f}'.rstrip('0').rstrip('.')
    return str(value)


def format_percent(value) -> str:
    return f'{format_number(value)}%'
