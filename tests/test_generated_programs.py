from __future__ import annotations

import random
from typing import List, Tuple

import pytest

from mouseycat.grammar.ast import (
    Cat, Clockwise, Direction, Heading, Hole, IntegerLiteral, Mouse, Move, Node, Program,
    Repeat, Sequence, VariableName,
)
from mouseycat.lalr.runtime import ParseError
from mouseycat.lex import TokenType
from tests.helpers import toks

SEEDS = range(40)
NAMES = ["tom", "jerry", "c1", "m_2", "spike"]


def _int(rng: random.Random) -> Tuple[str, IntegerLiteral]:
    n = rng.randint(0, 99)
    return str(n), IntegerLiteral(n)


def _statement(rng: random.Random, depth: int) -> Tuple[str, Node]:
    kinds = ["cat", "mouse", "hole", "move", "move_n", "clockwise"]
    if depth < 2:
        kinds.append("repeat")
    kind = rng.choice(kinds)
    name = rng.choice(NAMES)
    var = VariableName(name)
    if kind in ("cat", "mouse"):
        (xs, x), (ys, y) = _int(rng), _int(rng)
        heading = rng.choice(list(Heading))
        node_cls = Cat if kind == "cat" else Mouse
        return f"{kind} {name} {xs} {ys} {heading.value}", node_cls(var, x, y, Direction(heading))
    if kind == "hole":
        (xs, x), (ys, y) = _int(rng), _int(rng)
        return f"hole {xs} {ys}", Hole(x, y)
    if kind == "move":
        return f"move {name}", Move(var, IntegerLiteral(1))
    if kind == "move_n":
        ds, d = _int(rng)
        return f"move {name} {ds}", Move(var, d)
    if kind == "clockwise":
        return f"clockwise {name}", Clockwise(var)
    cs, c = _int(rng)
    body_src, body = _statement_list(rng, depth + 1)
    return f"repeat {cs} {body_src} end", Repeat(c, body)


def _statement_list(rng: random.Random, depth: int = 0) -> Tuple[str, Node]:
    parts: List[str] = []
    body = None
    for _ in range(rng.randint(1, 4)):
        src, node = _statement(rng, depth)
        parts.append(f"{src} ;")
        body = node if body is None else Sequence(body, node)
    return " ".join(parts), body


def _program(seed: int) -> Tuple[str, Program]:
    rng = random.Random(seed)
    (ws, w), (hs, h) = _int(rng), _int(rng)
    body_src, body = _statement_list(rng)
    return f"size {ws} {hs} begin {body_src} halt", Program(w, h, body)


@pytest.mark.parametrize("seed", SEEDS)
def test_generated_program_parses_to_expected_tree(parser, seed):
    src, expected = _program(seed)
    assert parser.parse(toks(src)) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_every_strict_prefix_is_rejected(parser, seed):
    # halt occurs only as the last token, so no strict prefix is a program
    src, _ = _program(seed)
    tokens = [t for t in toks(src) if t.type is not TokenType.EOF]
    cut = random.Random(seed).randrange(len(tokens))
    with pytest.raises(ParseError):
        parser.parse(tokens[:cut])


@pytest.mark.parametrize("seed", SEEDS)
def test_doubled_semicolon_is_rejected_at_the_second_one(parser, seed):
    src, _ = _program(seed)
    tokens = toks(src)
    semis = [i for i, t in enumerate(tokens) if t.type is TokenType.SEMICOLON]
    at = random.Random(seed).choice(semis)
    broken = tokens[:at + 1] + [tokens[at]] + tokens[at + 1:]
    with pytest.raises(ParseError) as ei:
        parser.parse(broken)
    assert ei.value.token.type is TokenType.SEMICOLON
