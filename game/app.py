from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from .catalog import DEFAULT_CATALOG, PuzzleCatalog
from .io_utils import parse_entries, resolve_entry
from .session import GameSession

SUBMIT_COMMANDS = {"submit", "s"}
NEW_GAME_COMMANDS = {"new", "n"}
CLEAR_COMMANDS = {"clear", "c"}

@dataclass
class GameParams:
    seed: Optional[int] = None
    board: Optional[int] = None
    json: bool = False
    debug: bool = False

class GroupView(BaseModel):
    words: List[str]
    connection: str

class SessionView(BaseModel):
    word_pool: List[str]
    selection: List[str]
    found_groups: List[GroupView]
    lives: int
    is_over: bool
    outcome: str = Field(..., description="One of 'playing', 'won', 'lost'.")
    answers: Optional[List[GroupView]] = Field(None, description="Every group of the board, only once the game is lost.")

def new_session(params: GameParams, catalog: PuzzleCatalog = DEFAULT_CATALOG) -> GameSession:
    session = GameSession(catalog, random.Random(params.seed))
    if params.board is not None:
        session.start_new_game(params.board)
    return session

def session_view(session: GameSession) -> SessionView:
    if session.is_won:
        outcome = "won"
    elif session.is_lost:
        outcome = "lost"
    else:
        outcome = "playing"

    answers = None
    if outcome == "lost":
        answers = [GroupView(words=list(g.words), connection=g.connection) for g in session.active_board.groups]

    return SessionView(
        word_pool=list(session.word_pool),
        selection=list(session.selection),
        found_groups=[GroupView(words=list(g.words), connection=g.connection) for g in session.found_groups],
        lives=session.lives,
        is_over=session.is_over,
        outcome=outcome,
        answers=answers,
    )

def apply_command(session: GameSession, text: str) -> Dict[str, Any]:
    # Single entrypoint for every front end: one line of player input in, result dict out
    cmd = " ".join(text.split()).lower()

    if not cmd:
        return {"ok": False, "error": "Empty command."}

    if cmd in NEW_GAME_COMMANDS:
        session.start_new_game()
        return {"ok": True, "message": "New game started.", "state": session_view(session)}

    if session.is_over:
        return {"ok": False, "error": "The game is over. Type 'new' to play again."}

    if cmd in CLEAR_COMMANDS:
        session.deselect_all()
        return {"ok": True, "message": "Selection cleared.", "state": session_view(session)}

    if cmd in SUBMIT_COMMANDS:
        found_before = len(session.found_groups)
        result = session.submit_selection()
        if result is None:
            return {"ok": False, "error": f"Select exactly 4 words before submitting ({len(session.selection)} selected)."}
        if result:
            group = session.found_groups[found_before]
            message = f"Correct! {group.connection}: {', '.join(group.words)}"
        else:
            message = f"Not a group. Lives left: {session.lives}"
        return {"ok": True, "message": message, "state": session_view(session)}

    # Anything else is a list of words (or pool positions) to toggle
    pool = session.word_pool
    resolved = []
    unknown = []
    for entry in parse_entries(text):
        w = resolve_entry(entry, pool)
        if w is None:
            unknown.append(entry)
        else:
            resolved.append(w)

    if unknown:
        return {"ok": False, "error": f"Not on the board: {unknown}"}

    ignored = [w for w in resolved if not session.toggle_word(w)]
    message = f"Selected {len(session.selection)}/4."
    if ignored:
        message += f" Ignored (selection is full): {ignored}"
    return {"ok": True, "message": message, "state": session_view(session)}
