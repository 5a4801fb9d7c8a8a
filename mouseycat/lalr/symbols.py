"""심볼 이름을 파싱 테이블의 열(column) 번호로 매핑합니다."""
from __future__     import annotations
from dataclasses    import dataclass, field
from typing         import Dict, List, Sequence

@dataclass
class SymbolTable:
    """
    SymbolTable
    ===========
    단말/비단말 **이름 ↔ 열 번호 매핑**을 관리하는 테이블입니다.
    테이블 로더가 데이터 파일의 두 헤더 줄을 읽어 이 테이블을 '고정(freeze)'하고,
    이후 런타임은 이 번호로만 ACTION/GOTO 를 조회합니다.

    설계 원칙
    --------
    - 단말(terminal)과 비단말(nonterminal)의 ID 영역을 **분리**합니다.
      - 단말 ID: 0 .. T-1 (데이터 파일의 단말 블록 순서 그대로)
      - 비단말 ID: T .. T+N-1 (goto 블록 순서 그대로)
    - freeze() 이후에는 이름↔ID 매핑이 **불변**입니다.
    - 비단말 이름은 밑줄로 시작합니다(예: "_PROGRAM", "_LIST").
    """

    _name_to_id: Dict[str, int] = field(default_factory=dict)
    _id_to_name: List[str] = field(default_factory=list)
    _term_count: int = 0
    _nonterm_count: int = 0
    _frozen: bool = False

    def freeze(self, terms: Sequence[str], nonterms: Sequence[str], eof: str = "EOF") -> None:
        """
        단말/비단말 목록(열 순서)으로 심볼 테이블을 '고정'합니다.
        중복된 이름이나 EOF 단말 누락은 ValueError.
        """
        if self._frozen:
            return

        names = list(terms) + list(nonterms)
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate symbol names in {names}")
        if eof not in terms:
            raise ValueError(f"end-of-input terminal {eof!r} missing from {list(terms)}")

        for i, nm in enumerate(names):
            self._name_to_id[nm] = i
            self._id_to_name.append(nm)
        self._term_count = len(terms)
        self._nonterm_count = len(nonterms)
        self._frozen = True

    # ----- 조회 / 유틸 -----
    def id_of(self, name: str) -> int:
        """심볼 이름을 ID로 변환합니다. 존재하지 않으면 KeyError."""
        return self._name_to_id[name]

    def name_of(self, id_: int) -> str:
        """심볼 ID를 이름으로 변환합니다. 범위를 벗어나면 IndexError."""
        return self._id_to_name[id_]

    @property
    def term_count(self) -> int:
        return self._term_count

    @property
    def nonterm_count(self) -> int:
        return self._nonterm_count

    @property
    def terms(self) -> List[str]:
        return self._id_to_name[:self._term_count]

    @property
    def nonterms(self) -> List[str]:
        return self._id_to_name[self._term_count:]

    def __repr__(self) -> str:
        return f"SymbolTable(terms={self.terms}, nonterms={self.nonterms})"
