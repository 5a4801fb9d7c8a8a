# mouseycat/grammar/actions.py
"""리덕션 의미 동작(semantic action) 디스패치.

`apply(rule, stack)`은 AST 스택 꼭대기에서 규칙이 소비하는 조각들을 pop 하고
새 노드 하나를 push 한다. 키워드/구두점 토큰은 시프트 때 AST 스택에 올라가지
않으므로, 핸들러가 pop 하는 개수(`VALUE_ARITY`)는 규칙의 RHS 길이보다 작을 수 있다.

    규칙                                           RHS   pop
    1  _PROGRAM   -> SIZE INT INT BEGIN _LIST HALT   6     3
    3  _LIST      -> _LIST _STATEMENT SEMICOLON      3     2
    4  _STATEMENT -> CAT VAR INT INT _DIRECTION      5     4
    7  _STATEMENT -> MOVE VAR                        2     1  (distance=1 보충)
    ...
"""

from __future__ import annotations
from typing import Callable, Dict, List, Tuple

from .ast import (
    Node, Program, Sequence, Cat, Mouse, Hole, Move, Clockwise, Repeat,
    IntegerLiteral, VariableName, Direction,
)
from ..lalr.table import TableError

Stack = List[Node]

DEFAULT_DISTANCE = 1


def _pop(stack: Stack, n: int) -> List[Node]:
    """꼭대기 n개를 RHS 순서(왼쪽→오른쪽)로 꺼낸다."""
    if len(stack) < n:
        raise TableError(f"AST stack underflow: need {n}, have {len(stack)}")
    out = stack[-n:]
    del stack[-n:]
    return out


def _expect(node: Node, kind: type) -> Node:
    if not isinstance(node, kind):
        raise TableError(f"expected {kind.__name__} on AST stack, found {type(node).__name__}")
    return node


def _program(w: Node, h: Node, body: Node) -> Node:
    return Program(_expect(w, IntegerLiteral), _expect(h, IntegerLiteral), body)


def _sequence(left: Node, right: Node) -> Node:
    return Sequence(left, right)


def _cat(v: Node, x: Node, y: Node, d: Node) -> Node:
    return Cat(_expect(v, VariableName), _expect(x, IntegerLiteral),
               _expect(y, IntegerLiteral), _expect(d, Direction))


def _mouse(v: Node, x: Node, y: Node, d: Node) -> Node:
    return Mouse(_expect(v, VariableName), _expect(x, IntegerLiteral),
                 _expect(y, IntegerLiteral), _expect(d, Direction))


def _hole(x: Node, y: Node) -> Node:
    return Hole(_expect(x, IntegerLiteral), _expect(y, IntegerLiteral))


def _move_default(v: Node) -> Node:
    name = _expect(v, VariableName)
    return Move(name, IntegerLiteral(DEFAULT_DISTANCE, name.line))


def _move(v: Node, dist: Node) -> Node:
    return Move(_expect(v, VariableName), _expect(dist, IntegerLiteral))


def _clockwise(v: Node) -> Node:
    return Clockwise(_expect(v, VariableName))


def _repeat(count: Node, body: Node) -> Node:
    return Repeat(_expect(count, IntegerLiteral), body)


def _passthrough(node: Node) -> Node:
    return node


# 규칙 번호 -> (pop 개수, 핸들러)
HANDLERS: Dict[int, Tuple[int, Callable[..., Node]]] = {
    1: (3, _program),
    2: (1, _passthrough),
    3: (2, _sequence),
    4: (4, _cat),
    5: (4, _mouse),
    6: (2, _hole),
    7: (1, _move_default),
    8: (2, _move),
    9: (1, _clockwise),
    10: (2, _repeat),
    11: (1, _passthrough),
    12: (1, _passthrough),
    13: (1, _passthrough),
    14: (1, _passthrough),
}

VALUE_ARITY: Dict[int, int] = {rule: arity for rule, (arity, _) in HANDLERS.items()}


def apply(rule: int, stack: Stack) -> None:
    """규칙 `rule`의 의미 동작을 실행해 stack을 제자리에서 갱신한다."""
    try:
        arity, handler = HANDLERS[rule]
    except KeyError:
        raise TableError(f"no semantic action for rule {rule}") from None
    stack.append(handler(*_pop(stack, arity)))
