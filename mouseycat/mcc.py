# mouseycat/mcc.py
"""mcc – mouseycat CLI

사용 예)
    $ python -m mouseycat.mcc parse examples/chase.mc --rules
    $ python -m mouseycat.mcc parse --text "size 2 2 begin hole 0 0 ; halt" -D
    $ python -m mouseycat.mcc lex --text "cat tom 1 1 north ;"
    $ python -m mouseycat.mcc check --table mouseycat/data/parsedata.txt -D

기능
----
- parse : 프로그램을 스캔·파싱해 AST를 출력(--rules 면 최우단 유도도 출력)
- lex   : 토큰 열을 한 줄에 하나씩 출력
- check : 파싱 테이블을 읽어 검증하고 요약 출력

디버그 모드(-D/--debug)를 켜면 단계별 심볼 스택과 테이블 요약을 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import sys
from typing import Optional

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _read_input(args) -> str:
    if args.text is not None:
        return args.text
    from .grammar.loader import load_source
    return load_source(args.input)


def _load_tables(args):
    from .lalr.table import default_tables, load
    tbl = default_tables() if args.table is None else load(args.table)
    if args.debug: _eprint("[DEBUG] tables loaded | states=%d rules=%d" %
                           (tbl.n_states, len(tbl.rules)))
    return tbl

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_parse(args) -> int:
    from .lex import Scanner, ScanError
    from .lalr.runtime import Parser, ParseError
    from .lalr.table import TableError

    try:
        src = _read_input(args)
        tbl = _load_tables(args)
        result = Parser(tbl).derive(Scanner(src), debug=args.debug)
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    except ScanError as e:
        _eprint("[LEX ERROR]", str(e))
        return 2
    except ParseError as e:
        _eprint("[PARSE ERROR]")
        _eprint(str(e))
        return 2
    except TableError as e:
        _eprint("[TABLE ERROR]", str(e))
        return 2

    if args.rules:
        for line in result.derivation():
            print(line)
    print("Parsed successfully!")
    if not args.quiet:
        print(result.root.pretty())
    return 0


def cmd_lex(args) -> int:
    """입력을 토크나이즈해 결과를 표준출력으로 보여줍니다."""
    from .lex import Scanner, ScanError
    try:
        src = _read_input(args)
        for i, tok in enumerate(Scanner(src)):
            print(f"{i:03d}: {tok.type.name:<12} {tok.text!r}  @{tok.line}:{tok.col}")
        return 0
    except ScanError as e:
        _eprint("[LEX ERROR]", str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2


def cmd_check(args) -> int:
    from .lalr.table import TableError
    try:
        tbl = _load_tables(args)
    except TableError as e:
        _eprint("[TABLE ERROR]", str(e))
        return 2

    if args.debug:
        _eprint("\n[Parsing Tables]")
        _eprint(tbl.describe())
        _eprint("\n[Rules]")
        for n in sorted(tbl.rules):
            _eprint(f"  {n:>2}: {tbl.rules[n].text}")

    print(f"[CHECK OK] states={tbl.n_states} rules={len(tbl.rules)} "
          f"actions={len(tbl.action)} gotos={len(tbl.goto)}")
    return 0

# ------------------------------
# 엔트리포인트
# ------------------------------

def _add_source(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("input", nargs="?", help="MouseyCat 소스 파일")
    src_group.add_argument("--text", help="직접 입력 텍스트")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="mcc", description="MouseyCat LR parser CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_parse = sub.add_parser("parse", help="프로그램을 파싱해 AST를 출력합니다")
    _add_source(p_parse)
    p_parse.add_argument("--table", help="파싱 테이블 파일(미지정시 내장 테이블)")
    p_parse.add_argument("--rules", action="store_true", help="최우단 유도(프로덕션 목록) 출력")
    p_parse.add_argument("-q", "--quiet", action="store_true", help="AST 출력 생략")
    p_parse.add_argument("-D", "--debug", action="store_true", help="단계별 심볼 스택 출력")
    p_parse.set_defaults(func=cmd_parse)

    p_lex = sub.add_parser("lex", help="입력 텍스트를 토크나이즈합니다")
    _add_source(p_lex)
    p_lex.set_defaults(func=cmd_lex)

    p_check = sub.add_parser("check", help="파싱 테이블을 검사하고 요약을 출력합니다")
    p_check.add_argument("--table", help="파싱 테이블 파일(미지정시 내장 테이블)")
    p_check.add_argument("-D", "--debug", action="store_true", help="테이블/규칙 상세 출력")
    p_check.set_defaults(func=cmd_check)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
