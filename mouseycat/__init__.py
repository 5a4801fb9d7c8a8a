"""mouseycat — MouseyCat 격자 이동 언어의 테이블 구동 LR 파서.

사용 예)
    >>> from mouseycat import Parser, tokenize
    >>> tree = Parser().parse(tokenize("size 2 2 begin hole 0 0 ; halt"))
    >>> tree.statements
    [Hole(x=IntegerLiteral(value=0), y=IntegerLiteral(value=0))]
"""

from typing import Optional

from .lex import Token, TokenType, Scanner, ScanError, tokenize
from .lalr.table import GrammarTables, TableError, default_tables, load
from .lalr.runtime import Parser, ParseError, ParseResult


def parse(text: str, tables: Optional[GrammarTables] = None):
    """소스 문자열을 스캔·파싱해 AST 루트(Program)를 반환합니다.
    tables를 생략하면 한 번만 로드되는 내장 테이블(`default_tables()`)을 쓴다."""
    return Parser(tables).parse(tokenize(text))
