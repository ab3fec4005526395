"""A small incremental simplex solver for linear constraints with strengths.

Constraints are linear relations between variables. Required constraints
must hold; weaker ones are satisfied as well as possible, with stronger
constraints taking precedence over weaker ones.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

REQUIRED = 1_001_001_000.0
STRONG = 1_000_000.0
MEDIUM = 1_000.0
WEAK = 1.0

_EPSILON = 1.0e-8

Number = Union[int, float]


def _near_zero(value: float) -> bool:
    return abs(value) < _EPSILON


class UnsatisfiableConstraint(Exception):
    """Raised when a required constraint cannot be satisfied."""

    def __init__(self, constraint: "LinearConstraint") -> None:
        super().__init__(f"unsatisfiable constraint: {constraint!r}")
        self.constraint = constraint


class Variable:
    """An unknown whose value the solver computes."""

    __slots__ = ("name",)

    def __init__(self, name: str = "") -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Variable({self.name!r})" if self.name else f"Variable(<{id(self):#x}>)"

    def __add__(self, other: "Operand") -> "Expression":
        return _as_expression(self) + other

    def __radd__(self, other: "Operand") -> "Expression":
        return _as_expression(other) + self

    def __sub__(self, other: "Operand") -> "Expression":
        return _as_expression(self) - other

    def __rsub__(self, other: "Operand") -> "Expression":
        return _as_expression(other) - self

    def __mul__(self, factor: Number) -> "Expression":
        return _as_expression(self) * factor

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> "Expression":
        return _as_expression(self) / divisor

    def __neg__(self) -> "Expression":
        return -_as_expression(self)


class Expression:
    """A linear combination of variables plus a constant."""

    __slots__ = ("terms", "constant")

    def __init__(
        self,
        terms: Optional[dict[Variable, float]] = None,
        constant: Number = 0.0,
    ) -> None:
        self.terms: dict[Variable, float] = dict(terms or {})
        self.constant = float(constant)

    def __repr__(self) -> str:
        return f"Expression({self.terms!r}, {self.constant!r})"

    def __add__(self, other: "Operand") -> "Expression":
        rhs = _as_expression(other)
        terms = dict(self.terms)
        for variable, coefficient in rhs.terms.items():
            terms[variable] = terms.get(variable, 0.0) + coefficient
        return Expression(terms, self.constant + rhs.constant)

    __radd__ = __add__

    def __neg__(self) -> "Expression":
        return self * -1.0

    def __sub__(self, other: "Operand") -> "Expression":
        return self + (-_as_expression(other))

    def __rsub__(self, other: "Operand") -> "Expression":
        return _as_expression(other) - self

    def __mul__(self, factor: Number) -> "Expression":
        if isinstance(factor, (Variable, Expression)) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Expression(
            {variable: coefficient * factor for variable, coefficient in self.terms.items()},
            self.constant * factor,
        )

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> "Expression":
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return self * (1.0 / divisor)


Operand = Union[Variable, Expression, int, float]


def _as_expression(value: Operand) -> Expression:
    if isinstance(value, Expression):
        return value
    if isinstance(value, Variable):
        return Expression({value: 1.0})
    if isinstance(value, (int, float)):
        return Expression({}, value)
    raise TypeError(f"cannot use {type(value).__name__} in a linear expression")


class Relation(enum.Enum):
    """How the two sides of a constraint compare."""

    LE = "<="
    EQ = "=="
    GE = ">="


@dataclass(frozen=True, eq=False)
class LinearConstraint:
    """``lhs <relation> rhs`` holding with the given strength."""

    lhs: Operand
    relation: Relation
    rhs: Operand = 0.0
    strength: float = REQUIRED

    def __post_init__(self) -> None:
        if self.strength < 0:
            raise ValueError(f"strength must not be negative, got {self.strength}")
        object.__setattr__(self, "strength", min(float(self.strength), REQUIRED))

    @property
    def expression(self) -> Expression:
        """The constraint as ``expression <relation> 0``."""
        return _as_expression(self.lhs) - self.rhs


class _Kind(enum.Enum):
    EXTERNAL = enum.auto()
    SLACK = enum.auto()
    ERROR = enum.auto()
    DUMMY = enum.auto()


@dataclass(eq=False)
class _Symbol:
    kind: _Kind


@dataclass
class _Tag:
    marker: _Symbol
    other: Optional[_Symbol] = None


@dataclass
class _Row:
    constant: float = 0.0
    cells: dict[_Symbol, float] = field(default_factory=dict)

    def copy(self) -> "_Row":
        return _Row(self.constant, dict(self.cells))

    def coefficient_for(self, symbol: _Symbol) -> float:
        return self.cells.get(symbol, 0.0)

    def insert_symbol(self, symbol: _Symbol, coefficient: float = 1.0) -> None:
        value = self.cells.get(symbol, 0.0) + coefficient
        if _near_zero(value):
            self.cells.pop(symbol, None)
        else:
            self.cells[symbol] = value

    def insert_row(self, other: "_Row", coefficient: float = 1.0) -> None:
        self.constant += other.constant * coefficient
        for symbol, value in other.cells.items():
            self.insert_symbol(symbol, value * coefficient)

    def remove(self, symbol: _Symbol) -> None:
        self.cells.pop(symbol, None)

    def reverse_sign(self) -> None:
        self.constant = -self.constant
        self.cells = {symbol: -value for symbol, value in self.cells.items()}

    def solve_for(self, symbol: _Symbol) -> None:
        factor = -1.0 / self.cells.pop(symbol)
        self.constant *= factor
        self.cells = {s: value * factor for s, value in self.cells.items()}

    def solve_for_symbols(self, lhs: _Symbol, rhs: _Symbol) -> None:
        self.insert_symbol(lhs, -1.0)
        self.solve_for(rhs)

    def substitute(self, symbol: _Symbol, row: "_Row") -> None:
        coefficient = self.cells.pop(symbol, None)
        if coefficient is not None:
            self.insert_row(row, coefficient)

    def all_dummies(self) -> bool:
        return all(symbol.kind is _Kind.DUMMY for symbol in self.cells)


class Solver:
    """Accumulates constraints and keeps an optimal solution up to date."""

    def __init__(self) -> None:
        self._rows: dict[_Symbol, _Row] = {}
        self._vars: dict[Variable, _Symbol] = {}
        self._constraints: dict[LinearConstraint, _Tag] = {}
        self._objective = _Row()
        self._artificial: Optional[_Row] = None

    def add_constraints(self, constraints: Iterable[LinearConstraint]) -> None:
        """Add each constraint in turn."""
        for constraint in constraints:
            self.add_constraint(constraint)

    def add_constraint(self, constraint: LinearConstraint) -> None:
        """Add a constraint and re-optimize.

        Raises UnsatisfiableConstraint if a required constraint conflicts
        with those already added, and ValueError if it was added before.
        """
        if constraint in self._constraints:
            raise ValueError(f"duplicate constraint: {constraint!r}")
        row, tag = self._create_row(constraint)
        subject = self._choose_subject(row, tag)
        if subject is None and row.all_dummies():
            if not _near_zero(row.constant):
                raise UnsatisfiableConstraint(constraint)
            subject = tag.marker
        if subject is None:
            if not self._add_with_artificial_variable(row):
                raise UnsatisfiableConstraint(constraint)
        else:
            row.solve_for(subject)
            self._substitute(subject, row)
            self._rows[subject] = row
        self._constraints[constraint] = tag
        self._optimize(self._objective)

    def value(self, variable: Variable) -> float:
        """Return the current value of a variable; unknown ones are zero."""
        symbol = self._vars.get(variable)
        if symbol is None:
            return 0.0
        row = self._rows.get(symbol)
        return row.constant if row is not None else 0.0

    def _var_symbol(self, variable: Variable) -> _Symbol:
        symbol = self._vars.get(variable)
        if symbol is None:
            symbol = _Symbol(_Kind.EXTERNAL)
            self._vars[variable] = symbol
        return symbol

    def _create_row(self, constraint: LinearConstraint) -> tuple[_Row, _Tag]:
        expression = constraint.expression
        row = _Row(expression.constant)
        for variable, coefficient in expression.terms.items():
            if _near_zero(coefficient):
                continue
            symbol = self._var_symbol(variable)
            basic = self._rows.get(symbol)
            if basic is not None:
                row.insert_row(basic, coefficient)
            else:
                row.insert_symbol(symbol, coefficient)

        strength = constraint.strength
        if constraint.relation in (Relation.LE, Relation.GE):
            sign = 1.0 if constraint.relation is Relation.LE else -1.0
            slack = _Symbol(_Kind.SLACK)
            tag = _Tag(slack)
            row.insert_symbol(slack, sign)
            if strength < REQUIRED:
                error = _Symbol(_Kind.ERROR)
                tag.other = error
                row.insert_symbol(error, -sign)
                self._objective.insert_symbol(error, strength)
        elif strength < REQUIRED:
            plus = _Symbol(_Kind.ERROR)
            minus = _Symbol(_Kind.ERROR)
            tag = _Tag(plus, minus)
            row.insert_symbol(plus, -1.0)
            row.insert_symbol(minus, 1.0)
            self._objective.insert_symbol(plus, strength)
            self._objective.insert_symbol(minus, strength)
        else:
            dummy = _Symbol(_Kind.DUMMY)
            tag = _Tag(dummy)
            row.insert_symbol(dummy)

        if row.constant < 0.0:
            row.reverse_sign()
        return row, tag

    @staticmethod
    def _choose_subject(row: _Row, tag: _Tag) -> Optional[_Symbol]:
        for symbol in row.cells:
            if symbol.kind is _Kind.EXTERNAL:
                return symbol
        for candidate in (tag.marker, tag.other):
            if (
                candidate is not None
                and candidate.kind in (_Kind.SLACK, _Kind.ERROR)
                and row.coefficient_for(candidate) < 0.0
            ):
                return candidate
        return None

    def _add_with_artificial_variable(self, row: _Row) -> bool:
        art = _Symbol(_Kind.SLACK)
        self._rows[art] = row.copy()
        self._artificial = row.copy()
        self._optimize(self._artificial)
        success = _near_zero(self._artificial.constant)
        self._artificial = None

        basic = self._rows.pop(art, None)
        if basic is not None:
            if not basic.cells:
                return success
            entering = next(
                (s for s in basic.cells if s.kind in (_Kind.SLACK, _Kind.ERROR)),
                None,
            )
            if entering is None:
                return False
            basic.solve_for_symbols(art, entering)
            self._substitute(entering, basic)
            self._rows[entering] = basic

        for other in self._rows.values():
            other.remove(art)
        self._objective.remove(art)
        return success

    def _substitute(self, symbol: _Symbol, row: _Row) -> None:
        for other in self._rows.values():
            other.substitute(symbol, row)
        self._objective.substitute(symbol, row)
        if self._artificial is not None:
            self._artificial.substitute(symbol, row)

    def _optimize(self, objective: _Row) -> None:
        while True:
            entering = next(
                (
                    symbol
                    for symbol, coefficient in objective.cells.items()
                    if symbol.kind is not _Kind.DUMMY and coefficient < 0.0
                ),
                None,
            )
            if entering is None:
                return
            leaving = self._leaving_row(entering)
            if leaving is None:
                raise RuntimeError("the objective function is unbounded")
            row = self._rows.pop(leaving)
            row.solve_for_symbols(leaving, entering)
            self._substitute(entering, row)
            self._rows[entering] = row

    def _leaving_row(self, entering: _Symbol) -> Optional[_Symbol]:
        best_ratio = float("inf")
        found = None
        for symbol, row in self._rows.items():
            if symbol.kind is _Kind.EXTERNAL:
                continue
            coefficient = row.coefficient_for(entering)
            if coefficient < 0.0:
                ratio = -row.constant / coefficient
                if ratio < best_ratio:
                    best_ratio = ratio
                    found = symbol
        return found