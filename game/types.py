from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .io_utils import validate_words

Word = str

GROUP_SIZE = 4
GROUPS_PER_BOARD = 4

class WordGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    words: Tuple[Word, ...] = Field(..., description="Exactly 4 distinct words sharing the connection.")
    connection: str = Field(..., min_length=1, description="Label describing what the words have in common.")

    @field_validator("words")
    @classmethod
    def check_words(cls, v: Tuple[Word, ...]) -> Tuple[Word, ...]:
        ok, msg = validate_words(v, GROUP_SIZE)
        if not ok:
            raise ValueError(msg)
        return v

    def matches(self, selection: Iterable[Word]) -> bool:
        return set(self.words) == set(selection)

class Board(BaseModel):
    """
    One puzzle: four groups of four words. The 16 words are pairwise distinct
    across the board, so at most one group can match a 4-word selection.
    """
    model_config = ConfigDict(frozen=True)

    groups: Tuple[WordGroup, ...]

    @field_validator("groups")
    @classmethod
    def check_groups(cls, v: Tuple[WordGroup, ...]) -> Tuple[WordGroup, ...]:
        if len(v) != GROUPS_PER_BOARD:
            raise ValueError(f"Expected {GROUPS_PER_BOARD} groups, got {len(v)}.")

        ok, msg = validate_words([w for g in v for w in g.words], GROUP_SIZE * GROUPS_PER_BOARD)
        if not ok:
            raise ValueError(msg)
        return v

    @classmethod
    def from_dict(cls, rows: List[Dict[str, Any]]) -> "Board":
        return cls(groups=tuple(WordGroup(words=tuple(r["words"]), connection=r["connection"]) for r in rows))

    def words(self) -> List[Word]:
        return [w for g in self.groups for w in g.words]

    def group_for(self, selection: Iterable[Word]) -> Optional[WordGroup]:
        picked = set(selection)
        for g in self.groups:
            if g.matches(picked):
                return g
        return None
