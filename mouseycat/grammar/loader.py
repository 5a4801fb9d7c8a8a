"""MouseyCat 소스 파일 로더"""

from __future__ import annotations
from pathlib    import Path
from typing     import Union


def load_source(path: Union[str, Path]) -> str:
    """
    Load program text (UTF-8), newlines normalized to '\\n'.
    """
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")
