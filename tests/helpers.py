from __future__ import annotations

from typing import List, Tuple

from mouseycat.lex import Token, TokenType, tokenize_all
from mouseycat.lalr.table import DEFAULT_TABLE_PATH, GrammarTables, loads

MINIMAL = "size 2 2 begin hole 0 0 ; halt"


def toks(src: str) -> List[Token]:
    return tokenize_all(src)


def tok(kind: TokenType, text: str = "", line: int = 1) -> Token:
    return Token(kind, text or kind.value, line)


def table_lines() -> List[str]:
    return DEFAULT_TABLE_PATH.read_text(encoding="utf-8").splitlines()


def patched_tables(*patches: Tuple[int, int, str]) -> GrammarTables:
    """기본 테이블의 (줄, 필드) 셀을 바꿔 로드한다. 줄 0은 단말 헤더, 필드 0은 상태 번호."""
    lines = table_lines()
    for row, column, value in patches:
        cells = lines[row].split("&")
        cells[column] = value
        lines[row] = "&".join(cells)
    return loads("\n".join(lines))
