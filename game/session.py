from __future__ import annotations
import random
from typing import List, Optional, Tuple
from .catalog import DEFAULT_CATALOG, PuzzleCatalog
from .types import GROUP_SIZE, GROUPS_PER_BOARD, Board, Word, WordGroup

MAX_LIVES = 4

class GameSession:
    """
    Mutable state of one play-through, from start_new_game to the next one.

    Every action is a plain method. Actions that make no sense in the current
    state (game over, unknown word, wrong selection size) are ignored and
    leave the session untouched.
    """

    def __init__(self, catalog: PuzzleCatalog = DEFAULT_CATALOG, rng: Optional[random.Random] = None) -> None:
        self.catalog = catalog
        self.rng = rng if rng is not None else random.Random()
        self._board_index = 0
        self._board: Board = catalog.get(0)
        self._pool: List[Word] = []
        self._selection: List[Word] = []
        self._found: List[WordGroup] = []
        self._lives = MAX_LIVES
        self._over = False
        self.start_new_game()

    def start_new_game(self, board_index: Optional[int] = None) -> None:
        if board_index is None:
            board_index = self.rng.randrange(self.catalog.count())
        board = self.catalog.get(board_index)

        pool = board.words()
        self.rng.shuffle(pool)

        self._board_index = board_index
        self._board = board
        self._pool = pool
        self._selection = []
        self._found = []
        self._lives = MAX_LIVES
        self._over = False

    def toggle_word(self, word: Word) -> bool:
        """
        Select or deselect a word. Returns True if the selection changed.
        Selection is capped at 4; a fifth word is silently ignored.
        """
        if self._over or word not in self._pool:
            return False

        if word in self._selection:
            self._selection.remove(word)
            return True
        if len(self._selection) < GROUP_SIZE:
            self._selection.append(word)
            return True
        return False

    def deselect_all(self) -> bool:
        if self._over or not self._selection:
            return False
        self._selection = []
        return True

    def submit_selection(self) -> Optional[bool]:
        """
        Check the current 4-word selection against the board.

        Returns True for a correct guess, False for a wrong one and None
        when the submission was ignored (game over or not exactly 4 selected).
        """
        if self._over or len(self._selection) != GROUP_SIZE:
            return None

        group = None
        for g in self.remaining_groups():
            if g.matches(self._selection):
                group = g
                break

        self._selection = []

        if group is not None:
            self._found.append(group)
            self._pool = [w for w in self._pool if w not in group.words]
            if len(self._found) == GROUPS_PER_BOARD:
                self._over = True
            return True

        self._lives -= 1
        if self._lives == 0:
            self._over = True
        return False

    def remaining_groups(self) -> List[WordGroup]:
        return [g for g in self._board.groups if g not in self._found]

    @property
    def active_board(self) -> Board:
        return self._board

    @property
    def board_index(self) -> int:
        return self._board_index

    @property
    def word_pool(self) -> Tuple[Word, ...]:
        return tuple(self._pool)

    @property
    def selection(self) -> Tuple[Word, ...]:
        return tuple(self._selection)

    @property
    def found_groups(self) -> Tuple[WordGroup, ...]:
        return tuple(self._found)

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def is_over(self) -> bool:
        return self._over

    @property
    def is_won(self) -> bool:
        return len(self._found) == GROUPS_PER_BOARD

    @property
    def is_lost(self) -> bool:
        return self._lives == 0
