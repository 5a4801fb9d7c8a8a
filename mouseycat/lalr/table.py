# mouseycat/lalr/table.py
"""
파싱 테이블 로더
================
데이터 파일(`&` 구분)에서 ACTION/GOTO 테이블을 읽어 불변 `GrammarTables`로 만든다.

파일 형식
---------
    STATE&SIZE&INTEGER&...&EOF          ← 단말 헤더
    0&s2&&...                           ← 상태별 ACTION 행 (NUM_STATES 줄)
    ...
    STATE&_PROGRAM&_LIST&...            ← 비단말 헤더
    0&1&&&                              ← 상태별 GOTO 행 (NUM_STATES 줄)
    ...

- ACTION 셀: `s<N>`(shift), `r<N>`(reduce), `acc`(accept), 빈 칸/`err`(error)
- GOTO 셀  : 다음 상태 번호, 또는 빈 칸

셀 문자열은 **로드 시점에 한 번만** 해석해 `Action` 값으로 바꾼다.
형식 위반은 모두 `TableError`(시작 시점의 치명적 오류)로 보고한다.
"""
from __future__ import annotations
import re
from functools import lru_cache
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .symbols import SymbolTable
from ..grammar.rules import NONTERMINALS, NUM_STATES, RULES, TERMINALS, EOF, Rule

SHIFT, REDUCE, ACCEPT, ERROR = "s", "r", "acc", "err"

DEFAULT_TABLE_PATH = Path(__file__).resolve().parent.parent / "data" / "parsedata.txt"

_RE_ACTION = re.compile(r"(?:(?P<kind>[sr])(?P<arg>\d+)|(?P<acc>acc)|(?P<err>err)?)")
_RE_GOTO = re.compile(r"(?P<state>\d+)?")


class TableError(RuntimeError):
    """파싱 테이블/규칙 테이블의 구조적 오류(형식 위반, 일관성 문제)."""


@dataclass(frozen=True)
class Action:
    """ACTION 셀 하나. kind ∈ {SHIFT, REDUCE, ACCEPT, ERROR}, arg는 상태/규칙 번호."""
    kind: str
    arg: int = 0

    def __str__(self) -> str:
        if self.kind in (SHIFT, REDUCE):
            return f"{self.kind}{self.arg}"
        return self.kind


ERROR_ACTION = Action(ERROR)
ACCEPT_ACTION = Action(ACCEPT)


def decode_action(cell: str) -> Action:
    """ACTION 셀 문자열을 `Action`으로 해석합니다. 해석 불가면 TableError."""
    m = _RE_ACTION.fullmatch(cell.strip())
    if m is None:
        raise TableError(f"unparsable action cell {cell!r}")
    if m.group("kind"):
        return Action(m.group("kind"), int(m.group("arg")))
    if m.group("acc"):
        return ACCEPT_ACTION
    return ERROR_ACTION


def decode_goto(cell: str) -> Optional[int]:
    m = _RE_GOTO.fullmatch(cell.strip())
    if m is None:
        raise TableError(f"unparsable goto cell {cell!r}")
    return int(m.group("state")) if m.group("state") else None


@dataclass(frozen=True)
class GrammarTables:
    """
    GrammarTables
    =============
    한 번 로드된 뒤 읽기 전용으로만 쓰이는 파서 테이블 묶음.
    여러 `Parser` 인스턴스(스레드)가 잠금 없이 공유할 수 있다.

    필드
    ----
    - action: (state, term_id) -> Action   (error 셀은 저장하지 않음)
    - goto  : (state, nonterm_id) -> next_state
    - symbols: 이름 ↔ 열 번호
    - rules : 규칙 번호 -> Rule
    - n_states / start_state
    """
    action: Mapping[Tuple[int, int], Action]
    goto: Mapping[Tuple[int, int], int]
    symbols: SymbolTable
    rules: Mapping[int, Rule]
    n_states: int
    start_state: int = 0

    def action_of(self, state: int, symbol: str) -> Action:
        return self.action.get((state, self.symbols.id_of(symbol)), ERROR_ACTION)

    def goto_of(self, state: int, lhs: str) -> Optional[int]:
        return self.goto.get((state, self.symbols.id_of(lhs)))

    def rule(self, number: int) -> Rule:
        try:
            return self.rules[number]
        except KeyError:
            raise TableError(f"no rule numbered {number}") from None

    def expected(self, state: int) -> List[str]:
        """state에서 error가 아닌 ACTION을 가지는 단말 이름들(열 순서)."""
        return [
            self.symbols.name_of(tid)
            for tid in range(self.symbols.term_count)
            if (state, tid) in self.action
        ]

    def describe(self) -> str:
        counts = {SHIFT: 0, REDUCE: 0, ACCEPT: 0}
        for act in self.action.values():
            counts[act.kind] += 1
        lines = [
            f"States: {self.n_states}",
            f"Terminals: {', '.join(self.symbols.terms)}",
            f"Nonterminals: {', '.join(self.symbols.nonterms)}",
            f"Rules: {len(self.rules)}",
            f"Actions: shift={counts[SHIFT]} reduce={counts[REDUCE]} accept={counts[ACCEPT]}",
            f"Gotos: {len(self.goto)}",
        ]
        return "\n".join(lines)


# ------------------------------
# 로더
# ------------------------------

def _split_row(line: str, width: int, lineno: int) -> List[str]:
    cells = line.split("&")
    if len(cells) != width + 1:
        raise TableError(f"line {lineno}: expected {width + 1} fields, got {len(cells)}")
    return cells


def _read_header(line: str, expected: Sequence[str], lineno: int) -> List[str]:
    names = [c.strip() for c in line.split("&")[1:]]
    if sorted(names) != sorted(expected):
        raise TableError(
            f"line {lineno}: header {names} does not match symbols {list(expected)}"
        )
    return names


def _check_row_label(label: str, state: int, lineno: int) -> None:
    if label.strip() != str(state):
        raise TableError(f"line {lineno}: expected row for state {state}, got {label!r}")


def loads(
    text: str,
    rules: Mapping[int, Rule] = RULES,
    *,
    terminals: Sequence[str] = TERMINALS,
    nonterminals: Sequence[str] = NONTERMINALS,
    n_states: int = NUM_STATES,
    eof: str = EOF,
) -> GrammarTables:
    """데이터 파일 내용(문자열)으로부터 `GrammarTables`를 만듭니다."""
    lines = [ln for ln in text.replace("\r\n", "\n").split("\n") if ln.strip()]
    expected_lines = 2 * (n_states + 1)
    if len(lines) != expected_lines:
        raise TableError(f"expected {expected_lines} non-empty lines, got {len(lines)}")

    term_names = _read_header(lines[0], terminals, 1)
    nonterm_names = _read_header(lines[n_states + 1], nonterminals, n_states + 2)

    sym = SymbolTable()
    try:
        sym.freeze(term_names, nonterm_names, eof=eof)
    except ValueError as e:
        raise TableError(str(e)) from None

    action: Dict[Tuple[int, int], Action] = {}
    for state in range(n_states):
        lineno = state + 2
        cells = _split_row(lines[state + 1], len(term_names), lineno)
        _check_row_label(cells[0], state, lineno)
        for col, cell in enumerate(cells[1:]):
            try:
                act = decode_action(cell)
            except TableError as e:
                raise TableError(f"line {lineno}, column {term_names[col]}: {e}") from None
            if act.kind == ERROR:
                continue
            if act.kind == SHIFT and not 0 <= act.arg < n_states:
                raise TableError(f"line {lineno}: shift target {act.arg} out of range")
            if act.kind == REDUCE and act.arg not in rules:
                raise TableError(f"line {lineno}: reduce by unknown rule {act.arg}")
            action[(state, sym.id_of(term_names[col]))] = act

    goto: Dict[Tuple[int, int], int] = {}
    for state in range(n_states):
        lineno = n_states + state + 3
        cells = _split_row(lines[n_states + state + 2], len(nonterm_names), lineno)
        _check_row_label(cells[0], state, lineno)
        for col, cell in enumerate(cells[1:]):
            try:
                target = decode_goto(cell)
            except TableError as e:
                raise TableError(f"line {lineno}, column {nonterm_names[col]}: {e}") from None
            if target is None:
                continue
            if not 0 <= target < n_states:
                raise TableError(f"line {lineno}: goto target {target} out of range")
            goto[(state, sym.id_of(nonterm_names[col]))] = target

    for number, rule in rules.items():
        if rule.lhs not in nonterm_names:
            raise TableError(f"rule {number}: unknown left-hand side {rule.lhs!r}")

    return GrammarTables(
        action=MappingProxyType(action),
        goto=MappingProxyType(goto),
        symbols=sym,
        rules=MappingProxyType(dict(rules)),
        n_states=n_states,
    )


def load(path: Union[str, Path, None] = None, rules: Mapping[int, Rule] = RULES, **kw) -> GrammarTables:
    """
    파싱 테이블 파일을 읽어 `GrammarTables`를 반환합니다.

    Parameters
    ----------
    path : str | Path | None
        데이터 파일 경로. None이면 패키지에 포함된 기본 테이블.
    rules : Mapping[int, Rule]
        규칙 테이블(기본: MouseyCat 문법).

    Raises
    ------
    TableError
        파일이 없거나 형식이 잘못된 경우.
    """
    p = Path(path) if path is not None else DEFAULT_TABLE_PATH
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise TableError(f"cannot read parse table {str(p)!r}: {e}") from e
    return loads(text, rules, **kw)


@lru_cache(maxsize=None)
def default_tables() -> GrammarTables:
    """패키지 내장 테이블. 프로세스당 한 번만 읽고 이후에는 같은 객체를 돌려준다."""
    return load()
