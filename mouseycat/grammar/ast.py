# mouseycat/grammar/ast.py
"""MouseyCat AST
- 잎(leaf): IntegerLiteral / VariableName / Direction — 스캔된 토큰 값을 감싼다
- 문장: Cat / Mouse / Hole / Move / Clockwise / Repeat
- 목록: Sequence(left, right) — 왼쪽 재귀 체인
- 루트: Program(width, height, body)

모든 노드는 불변(frozen)이며 리덕션 때 자식으로부터 새로 만들어진다.
잎의 `line`은 진단용이라 구조적 동등성 비교에서 제외한다.
"""

from __future__     import annotations
import re
from dataclasses    import dataclass, field, fields
from enum           import Enum
from typing         import List

from ..lex import Token, TokenType


class Node:
    """모든 AST 노드의 공통 기반."""

    def children(self) -> List["Node"]:
        return [getattr(self, f.name) for f in fields(self) if isinstance(getattr(self, f.name), Node)]

    def pretty(self, indent: int = 0) -> str:
        """들여쓰기된 트리 문자열(CLI 출력용)."""
        pad = "  " * indent
        kids = self.children()
        if not kids:
            return pad + self.label()
        return "\n".join([pad + self.label()] + [k.pretty(indent + 1) for k in kids])

    def label(self) -> str:
        return type(self).__name__


class Heading(Enum):
    N = "north"
    S = "south"
    E = "east"
    W = "west"


_RE_DECIMAL = re.compile(r"[0-9]+")

_HEADING_OF = {
    TokenType.NORTH: Heading.N,
    TokenType.SOUTH: Heading.S,
    TokenType.EAST: Heading.E,
    TokenType.WEST: Heading.W,
}

# ====== 잎(leaf) 노드

@dataclass(frozen=True)
class IntegerLiteral(Node):
    value: int
    line: int = field(default=0, compare=False, repr=False)

    @classmethod
    def from_token(cls, tok: Token) -> "IntegerLiteral":
        if not _RE_DECIMAL.fullmatch(tok.text):
            raise ValueError(f"malformed integer literal {tok.text!r}")
        return cls(int(tok.text), tok.line)

    def label(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VariableName(Node):
    text: str
    line: int = field(default=0, compare=False, repr=False)

    @classmethod
    def from_token(cls, tok: Token) -> "VariableName":
        return cls(tok.text, tok.line)

    def label(self) -> str:
        return self.text


@dataclass(frozen=True)
class Direction(Node):
    heading: Heading
    line: int = field(default=0, compare=False, repr=False)

    @classmethod
    def from_token(cls, tok: Token) -> "Direction":
        return cls(_HEADING_OF[tok.type], tok.line)

    def label(self) -> str:
        return self.heading.value


def leaf_from_token(tok: Token) -> Node:
    """의미값을 가지는 토큰을 잎 노드로 바꾼다. 그 외 토큰은 ValueError."""
    if tok.type is TokenType.INTEGER:
        return IntegerLiteral.from_token(tok)
    if tok.type is TokenType.VARIABLE:
        return VariableName.from_token(tok)
    if tok.type in _HEADING_OF:
        return Direction.from_token(tok)
    raise ValueError(f"token {tok} carries no semantic value")

# ====== 문장 노드

@dataclass(frozen=True)
class Sequence(Node):
    """문장 목록. left는 앞선 목록(또는 단일 문장), right는 마지막 문장."""
    left: Node
    right: Node


def flatten(body: Node) -> List[Node]:
    """Sequence 체인을 실행 순서의 문장 리스트로 편다."""
    out: List[Node] = []
    stack = [body]
    while stack:
        n = stack.pop()
        if isinstance(n, Sequence):
            stack.append(n.right)
            stack.append(n.left)
        else:
            out.append(n)
    return out


@dataclass(frozen=True)
class Cat(Node):
    name: VariableName
    x: IntegerLiteral
    y: IntegerLiteral
    facing: Direction


@dataclass(frozen=True)
class Mouse(Node):
    name: VariableName
    x: IntegerLiteral
    y: IntegerLiteral
    facing: Direction


@dataclass(frozen=True)
class Hole(Node):
    x: IntegerLiteral
    y: IntegerLiteral


@dataclass(frozen=True)
class Move(Node):
    name: VariableName
    distance: IntegerLiteral


@dataclass(frozen=True)
class Clockwise(Node):
    name: VariableName


@dataclass(frozen=True)
class Repeat(Node):
    count: IntegerLiteral
    body: Node

    @property
    def statements(self) -> List[Node]:
        return flatten(self.body)


@dataclass(frozen=True)
class Program(Node):
    width: IntegerLiteral
    height: IntegerLiteral
    body: Node

    @property
    def statements(self) -> List[Node]:
        return flatten(self.body)

