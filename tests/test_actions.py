from __future__ import annotations

import pytest

from mouseycat.grammar import actions
from mouseycat.grammar.ast import (
    Cat, Clockwise, Direction, Heading, Hole, IntegerLiteral, Mouse, Move, Program,
    Repeat, Sequence, VariableName,
)
from mouseycat.grammar.rules import RULES
from mouseycat.lalr.table import TableError

LEAF_TERMINALS = {"INTEGER", "VARIABLE", "NORTH", "SOUTH", "EAST", "WEST"}

HOLE = Hole(IntegerLiteral(1), IntegerLiteral(1))
TOM = VariableName("tom")
EAST = Direction(Heading.E)

# 규칙별 AST 스택 입력(RHS 순서)과 기대 결과
CASES = {
    1: ([IntegerLiteral(4), IntegerLiteral(3), HOLE],
        Program(IntegerLiteral(4), IntegerLiteral(3), HOLE)),
    2: ([HOLE], HOLE),
    3: ([HOLE, Clockwise(TOM)], Sequence(HOLE, Clockwise(TOM))),
    4: ([TOM, IntegerLiteral(0), IntegerLiteral(1), EAST],
        Cat(TOM, IntegerLiteral(0), IntegerLiteral(1), EAST)),
    5: ([TOM, IntegerLiteral(0), IntegerLiteral(1), EAST],
        Mouse(TOM, IntegerLiteral(0), IntegerLiteral(1), EAST)),
    6: ([IntegerLiteral(2), IntegerLiteral(5)], Hole(IntegerLiteral(2), IntegerLiteral(5))),
    7: ([TOM], Move(TOM, IntegerLiteral(1))),
    8: ([TOM, IntegerLiteral(5)], Move(TOM, IntegerLiteral(5))),
    9: ([TOM], Clockwise(TOM)),
    10: ([IntegerLiteral(3), HOLE], Repeat(IntegerLiteral(3), HOLE)),
    11: ([Direction(Heading.N)], Direction(Heading.N)),
    12: ([Direction(Heading.S)], Direction(Heading.S)),
    13: ([EAST], EAST),
    14: ([Direction(Heading.W)], Direction(Heading.W)),
}


def test_every_rule_has_a_handler():
    assert set(actions.HANDLERS) == set(RULES) == set(CASES)


@pytest.mark.parametrize("rule", sorted(RULES))
def test_arity_matches_value_carrying_rhs_slots(rule):
    rhs = RULES[rule].text.split(" -> ")[1].split()
    carrying = [s for s in rhs if s in LEAF_TERMINALS or s.startswith("_")]
    assert actions.VALUE_ARITY[rule] == len(carrying)
    assert actions.VALUE_ARITY[rule] <= RULES[rule].rhs_len


@pytest.mark.parametrize("rule", sorted(CASES))
def test_stack_depth_before_and_after(rule):
    inputs, expected = CASES[rule]
    sentinel = VariableName("bottom")
    stack = [sentinel] + list(inputs)
    before = len(stack)

    actions.apply(rule, stack)

    assert len(stack) == before - actions.VALUE_ARITY[rule] + 1
    assert stack[0] is sentinel
    assert stack[-1] == expected


def test_move_without_distance_defaults_to_one():
    stack = [VariableName("jerry", line=7)]
    actions.apply(7, stack)
    (move,) = stack
    assert move.distance.value == 1
    assert move.distance.line == 7


def test_unknown_rule():
    with pytest.raises(TableError, match="rule 15"):
        actions.apply(15, [HOLE])


def test_underflow_is_reported():
    with pytest.raises(TableError, match="underflow"):
        actions.apply(4, [TOM])


def test_wrong_fragment_kind_is_reported():
    with pytest.raises(TableError, match="IntegerLiteral"):
        actions.apply(6, [TOM, IntegerLiteral(1)])
