# mouseycat/lex/__init__.py
"""MouseyCat 토크나이저 — 파서가 소비하는 토큰 스트림을 만드는 참조 스캐너.

특징
----
- 산출 토큰의 `type`은 `TokenType` 멤버이며, 그 이름은 파싱 테이블의
  단말 열 헤더(예: "SIZE", "INTEGER", "EOF")와 **정확히 일치**
- 키워드는 소문자 고정, 식별자 경계 검사(유니코드 XID_Continue)
- 스트림의 마지막에는 항상 `EOF` 토큰이 하나 붙는다


매칭 순서:
  1) 공백과 `#` 주석을 가능한 만큼 스킵
  2) `;`
  3) 키워드 — 단어 경계 검사
  4) 정수 리터럴 / 변수 이름 — **최장일치**
  5) 모두 불일치 → ScanError


API
---
- `Token(type: TokenType, text: str, line: int, col: int)` — 토큰 단위
- `Scanner(text)` — 이터레이터. `peek()` / `next()` 지원
- `tokenize(text) -> Iterator[Token]`
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import regex


class TokenType(Enum):
    """단말 종류. 선언 순서 = 파싱 테이블 단말 열 순서."""
    SIZE = "size"
    INTEGER = "<integer>"
    BEGIN = "begin"
    HALT = "halt"
    SEMICOLON = ";"
    CAT = "cat"
    VARIABLE = "<variable>"
    MOUSE = "mouse"
    HOLE = "hole"
    MOVE = "move"
    CLOCKWISE = "clockwise"
    REPEAT = "repeat"
    END = "end"
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    EOF = "<eof>"


# 의미값을 가지는 단말(파서가 AST 스택에 잎 노드로 push)
DIRECTION_TYPES = frozenset({TokenType.NORTH, TokenType.SOUTH, TokenType.EAST, TokenType.WEST})
LEAF_TYPES = frozenset({TokenType.INTEGER, TokenType.VARIABLE}) | DIRECTION_TYPES

KEYWORDS = {t.value: t for t in TokenType if t.value.isalpha()}


_RE_IGNORE = regex.compile(r"(?:[ \t\r\n\f]+|\#[^\n]*)+")
_RE_INTEGER = regex.compile(r"[0-9]+")
_RE_WORD = regex.compile(r"[\p{XID_Start}_]\p{XID_Continue}*")
_RE_XID_CONT = regex.compile(r"\p{XID_Continue}")


def _is_ident_continue(ch: str) -> bool:
    """유니코드 식별자 이어붙임 문자(XID_Continue) 판정."""
    return bool(_RE_XID_CONT.fullmatch(ch))


# --------- Public datatypes ---------

@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str   # 원문 lexeme (EOF는 빈 문자열)
    line: int   # 1-based
    col: int = 1

    def __str__(self) -> str:
        if self.type is TokenType.EOF:
            return "end of input"
        return f"{self.type.name} {self.text!r}"


class ScanError(SyntaxError):
    """스캔 단계의 입력 오류."""

    def __init__(self, message: str, line: int, col: int):
        super().__init__(message)
        self.line = line
        self.col = col


def _line_bounds(src: str, pos: int) -> Tuple[int, int]:
    start = src.rfind("\n", 0, pos)
    start = 0 if start < 0 else start + 1
    end = src.find("\n", pos)
    end = len(src) if end < 0 else end
    return start, end


def caret_snippet(src: str, pos: int) -> str:
    """해당 절대 오프셋 pos에 캐럿(^)을 찍은 스니펫을 생성."""
    start, end = _line_bounds(src, pos)
    line = src[start:end]
    col = (pos - start) + 1
    caret = " " * (col - 1) + "^"
    return f"{line}\n{caret}"


# --------- Core implementation ---------

class Scanner:
    """
    Scanner
    =======
    MouseyCat 소스 문자열을 `Token` 스트림으로 바꾸는 단방향 이터레이터.
    파서는 한 번에 토큰 하나만 당겨 간다(`next(it)`).
    """

    def __init__(self, text: str = "", *, line: int = 1, col: int = 1):
        self.reset(text, line=line, col=col)

    # ---- Input binding ----
    def reset(self, text: str, *, line: int = 1, col: int = 1) -> None:
        self._text = text
        self._i = 0
        self._line = line
        self._col = col
        self._peek_cache: Optional[Token] = None
        self._done = False

    # ---- Public API ----
    def peek(self) -> Optional[Token]:
        """다음 토큰을 소비하지 않고 돌려준다. EOF 이후에는 None."""
        if self._peek_cache is None and not self._done:
            self._peek_cache = self._next_token()
        return self._peek_cache

    def next(self) -> Optional[Token]:
        t = self.peek()
        self._peek_cache = None
        if t is not None and t.type is TokenType.EOF:
            self._done = True
        return t

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        t = self.next()
        if t is None:
            raise StopIteration
        return t

    # ---- Internals ----
    def _advance_text(self, consumed: str) -> None:
        """소비된 텍스트 길이만큼 내부 포인터/행렬을 갱신."""
        n = len(consumed)
        seg = consumed
        while True:
            j = seg.find("\n")
            if j == -1:
                break
            self._line += 1
            self._col = 1
            seg = seg[j+1:]
        self._col += len(seg)
        self._i += n

    def _skip_ignores(self) -> None:
        m = _RE_IGNORE.match(self._text, self._i)
        if m and m.end() > self._i:
            self._advance_text(m.group(0))

    def _make(self, kind: TokenType, text: str) -> Token:
        tok = Token(type=kind, text=text, line=self._line, col=self._col)
        self._advance_text(text)
        return tok

    def _next_token(self) -> Token:
        self._skip_ignores()
        if self._i >= len(self._text):
            return Token(type=TokenType.EOF, text="", line=self._line, col=self._col)

        s = self._text
        i = self._i

        if s[i] == ";":
            return self._make(TokenType.SEMICOLON, ";")

        # 숫자 바로 뒤에 식별자 문자가 오면(예: "12ab") 단어가 아니라 오류
        m = _RE_INTEGER.match(s, i)
        if m:
            j = m.end()
            if j < len(s) and _is_ident_continue(s[j]):
                raise ScanError(
                    f"Lexing error: malformed integer at {self._line}:{self._col}\n"
                    + caret_snippet(s, j),
                    self._line, self._col,
                )
            return self._make(TokenType.INTEGER, m.group(0))

        m = _RE_WORD.match(s, i)
        if m:
            word = m.group(0)
            kind = KEYWORDS.get(word, TokenType.VARIABLE)
            return self._make(kind, word)

        ch = s[i]
        raise ScanError(
            f"Lexing error: unexpected character {ch!r} at {self._line}:{self._col}\n"
            + caret_snippet(s, i),
            self._line, self._col,
        )


# Convenience
def tokenize(text: str) -> Iterator[Token]:
    """지연(lazy) 토큰 스트림. 마지막 토큰은 항상 EOF."""
    return Scanner(text)


def tokenize_all(text: str) -> List[Token]:
    return list(Scanner(text))
