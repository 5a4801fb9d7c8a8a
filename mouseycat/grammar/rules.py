# mouseycat/grammar/rules.py
"""MouseyCat 문법의 프로덕션(규칙) 테이블과 심볼 이름.

규칙 번호는 파싱 테이블의 `r<N>` 셀과 1:1로 대응한다(0번은 비어 있음).
`rhs_len`은 심볼 스택에서 pop 할 (심볼, 상태) 쌍의 개수이고,
`text`는 유도 과정 출력(디버그)용 문자열이다.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from ..lex import TokenType

P = "_PROGRAM"
L = "_LIST"
S = "_STATEMENT"
D = "_DIRECTION"

NUM_STATES = 38

TERMINALS: Tuple[str, ...] = tuple(t.name for t in TokenType)
NONTERMINALS: Tuple[str, ...] = (P, L, S, D)
EOF = TokenType.EOF.name


@dataclass(frozen=True)
class Rule:
    rhs_len: int
    lhs: str
    text: str


def _rule(text: str) -> Rule:
    lhs, _, rhs = text.partition(" -> ")
    return Rule(rhs_len=len(rhs.split()), lhs=lhs, text=text)


RULES: Dict[int, Rule] = {
    1: _rule("_PROGRAM -> SIZE INTEGER INTEGER BEGIN _LIST HALT"),
    2: _rule("_LIST -> _STATEMENT SEMICOLON"),
    3: _rule("_LIST -> _LIST _STATEMENT SEMICOLON"),
    4: _rule("_STATEMENT -> CAT VARIABLE INTEGER INTEGER _DIRECTION"),
    5: _rule("_STATEMENT -> MOUSE VARIABLE INTEGER INTEGER _DIRECTION"),
    6: _rule("_STATEMENT -> HOLE INTEGER INTEGER"),
    7: _rule("_STATEMENT -> MOVE VARIABLE"),
    8: _rule("_STATEMENT -> MOVE VARIABLE INTEGER"),
    9: _rule("_STATEMENT -> CLOCKWISE VARIABLE"),
    10: _rule("_STATEMENT -> REPEAT INTEGER _LIST END"),
    11: _rule("_DIRECTION -> NORTH"),
    12: _rule("_DIRECTION -> SOUTH"),
    13: _rule("_DIRECTION -> EAST"),
    14: _rule("_DIRECTION -> WEST"),
}
