from __future__ import annotations

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parent.parent

if str(BASE_DIR) not in sys.path:
    sys.path.append(str(BASE_DIR))

from mouseycat.lalr.table import GrammarTables, default_tables
from mouseycat.lalr.runtime import Parser


@pytest.fixture(scope="session")
def tables() -> GrammarTables:
    return default_tables()


@pytest.fixture
def parser(tables: GrammarTables) -> Parser:
    return Parser(tables)
