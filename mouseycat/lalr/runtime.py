# mouseycat/lalr/runtime.py
"""LR 파서 런타임(스택 머신).

- `GrammarTables`(ACTION/GOTO/규칙)를 받아 토큰 스트림을 MouseyCat AST로 바꿉니다.
- 리덕션마다 `grammar.actions.apply`로 의미 동작을 실행합니다.
- 에러 시, 해당 상태에서 가능한 단말(expected set)을 제시하는
  `ParseError` 를 던집니다. 부분 트리는 반환하지 않습니다.
"""

from __future__ import annotations
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO

from .table import GrammarTables, TableError, SHIFT, REDUCE, ACCEPT, default_tables
from ..grammar import actions
from ..grammar.ast import Node, leaf_from_token
from ..lex import Token, TokenType, LEAF_TYPES


class ParseError(SyntaxError):
    """토큰 열이 MouseyCat 문법의 문장이 아닐 때."""

    def __init__(self, message: str, token: Optional[Token] = None,
                 state: Optional[int] = None, expected: Optional[List[str]] = None):
        SyntaxError.__init__(self, message)
        self.token = token
        self.state = state
        self.expected = list(expected or [])


@dataclass
class ParseResult:
    """파싱 결과: AST 루트와 적용된 규칙 번호(적용 순서)."""
    root: Node
    rules: List[int] = field(default_factory=list)
    tables: Optional[GrammarTables] = None

    def derivation(self) -> List[str]:
        """적용 역순의 프로덕션 문자열 = 최우단 유도(rightmost derivation)."""
        if self.tables is None:
            return [str(r) for r in reversed(self.rules)]
        return [self.tables.rule(r).text for r in reversed(self.rules)]


class Parser:
    """
    Parser
    ======
    테이블 구동 shift-reduce 파서. 테이블은 읽기 전용으로만 참조하고,
    심볼/AST 스택은 `parse` 호출마다 새로 만든다(인스턴스 재사용·공유 가능).
    """

    def __init__(self, tables: Optional[GrammarTables] = None, *, stream: Optional[TextIO] = None):
        self.tables = tables if tables is not None else default_tables()
        self._stream = stream

    def parse(self, tokens: Iterable[Token], debug: bool = False) -> Node:
        """토큰 열을 파싱해 AST 루트를 반환합니다. 실패 시 `ParseError`."""
        return self.derive(tokens, debug=debug).root

    def derive(self, tokens: Iterable[Token], debug: bool = False) -> ParseResult:
        """
        `parse`와 같지만 적용된 규칙 번호 목록까지 함께 돌려줍니다.

        Parameters
        ----------
        tokens : Iterable[Token]
            EOF 토큰으로 끝나는 토큰 스트림(지연 이터레이터 가능).
            EOF 전에 소진되면 그 지점을 EOF로 간주합니다.
        debug : bool
            True면 단계마다 심볼 스택 내용을 stderr(또는 `stream`)로 출력합니다.
        """
        tbl = self.tables
        it = iter(tokens)
        last_line = 1

        # 심볼 스택: 상태와 문법 심볼이 번갈아 쌓이고 항상 상태로 끝난다
        symbol_stack: List[object] = [tbl.start_state]
        ast_stack: List[Node] = []
        applied: List[int] = []

        def pull() -> Token:
            nonlocal last_line
            tok = next(it, None)
            if tok is None:
                tok = Token(TokenType.EOF, "", last_line)
            last_line = tok.line
            if tok.type in LEAF_TYPES:
                try:
                    ast_stack.append(leaf_from_token(tok))
                except ValueError as e:
                    raise ParseError(f"invalid program: {e} at {tok.line}:{tok.col}", token=tok) from None
            return tok

        if debug:
            self._dump(symbol_stack)

        look = pull()
        state = tbl.start_state
        act = tbl.action_of(state, look.type.name)

        while act.kind != ACCEPT:
            if act.kind == SHIFT:
                symbol_stack.append(look.type.name)
                state = act.arg
                symbol_stack.append(state)
                look = pull()
                if debug:
                    self._dump(symbol_stack)

            elif act.kind == REDUCE:
                rule_no = act.arg
                rule = tbl.rule(rule_no)
                actions.apply(rule_no, ast_stack)
                applied.append(rule_no)

                del symbol_stack[max(0, len(symbol_stack) - 2 * rule.rhs_len):]
                if not symbol_stack:
                    raise TableError(f"symbol stack underflow reducing rule {rule_no}")
                exposed = symbol_stack[-1]
                symbol_stack.append(rule.lhs)
                target = tbl.goto_of(exposed, rule.lhs)
                if target is None:
                    # 구조적 오류(테이블 일관성 문제)
                    raise TableError(f"GOTO missing for state={exposed}, lhs={rule.lhs}")
                state = target
                symbol_stack.append(state)
                if debug:
                    self._eprint(f"REDUCE OP {rule_no} APPLIED")
                    self._dump(symbol_stack)

            else:
                if debug:
                    self._dump(symbol_stack)
                raise self._error(look, state)

            act = tbl.action_of(state, look.type.name)

        if look.type is not TokenType.EOF:
            raise self._error(look, state)
        if len(ast_stack) != 1:
            raise TableError(f"expected one AST fragment at accept, found {len(ast_stack)}")

        return ParseResult(root=ast_stack.pop(), rules=applied, tables=tbl)

    # ---- helpers ----
    def _error(self, look: Token, state: int) -> ParseError:
        expected = self.tables.expected(state)
        where = "at end of input" if look.type is TokenType.EOF else f"at {look.line}:{look.col}"
        return ParseError(
            f"invalid program: unexpected {look} {where}, "
            f"expected one of {{{', '.join(expected)}}}",
            token=look, state=state, expected=expected,
        )

    def _eprint(self, *args) -> None:
        print(*args, file=self._stream or sys.stderr)

    def _dump(self, stack: List[object]) -> None:
        self._eprint(" ".join(str(e) for e in stack))

