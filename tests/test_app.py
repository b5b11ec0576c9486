"""Tests for the command entrypoint and the observable state."""

import json

import pytest

from game.app import GameParams, apply_command, new_session, session_view
from game.catalog import CatalogIndexError
from game.io_utils import normalize_entry, parse_entries, resolve_entry, validate_words


class TestIoUtils:
    """Entry parsing and matching."""

    def test_parse_commas(self):
        assert parse_entries(" mela ,  torre   di pisa,, 3 ") == ["mela", "torre di pisa", "3"]

    def test_parse_newlines_win_over_commas(self):
        assert parse_entries("Alfa Romeo\n\nMela, Pera") == ["Alfa Romeo", "Mela, Pera"]

    def test_normalize(self):
        assert normalize_entry("  Torre  di PISA ") == "torre di pisa"

    def test_resolve(self):
        pool = ("Mela", "Torre di Pisa", "Cane")
        assert resolve_entry("torre di pisa", pool) == "Torre di Pisa"
        assert resolve_entry("3", pool) == "Cane"
        assert resolve_entry("0", pool) is None
        assert resolve_entry("4", pool) is None
        assert resolve_entry("Gatto", pool) is None

    def test_validate_words(self):
        assert validate_words(["a", "b"], 2) == (True, "")
        ok, msg = validate_words(["a"], 2)
        assert not ok and "Expected 2" in msg
        ok, msg = validate_words(["a", "A"], 2)
        assert not ok and "Duplicate" in msg


class TestApplyCommand:
    """Commands on a seeded session of the first board."""

    def setup_method(self):
        """Setup for each test."""
        self.session = new_session(GameParams(seed=42, board=0))

    def test_new_session_params(self):
        assert self.session.board_index == 0
        other = new_session(GameParams(seed=42, board=0))
        assert other.word_pool == self.session.word_pool

    def test_new_session_bad_board(self):
        with pytest.raises(CatalogIndexError):
            new_session(GameParams(board=7))

    def test_toggle_by_name_any_case(self):
        result = apply_command(self.session, "mela, PERA")
        assert result["ok"]
        assert result["state"].selection == ["Mela", "Pera"]

    def test_toggle_by_position(self):
        first = self.session.word_pool[0]
        result = apply_command(self.session, "1")
        assert result["ok"]
        assert self.session.selection == (first,)

    def test_unknown_entry_changes_nothing(self):
        result = apply_command(self.session, "Mela, Roma")
        assert result["ok"] is False
        assert "Roma" in result["error"]
        assert self.session.selection == ()

    def test_overflow_reported(self):
        result = apply_command(self.session, "Mela, Pera, Banana, Arancia, Cane")
        assert result["ok"]
        assert "Cane" in result["message"]
        assert len(self.session.selection) == 4

    def test_submit_correct(self):
        apply_command(self.session, "Mela, Pera, Banana, Arancia")
        result = apply_command(self.session, "submit")
        assert result["ok"]
        assert result["message"].startswith("Correct! Frutta")
        assert [g.connection for g in result["state"].found_groups] == ["Frutta"]

    def test_submit_wrong(self):
        apply_command(self.session, "Cane, Rosso, Pizza, Pasta")
        result = apply_command(self.session, "s")
        assert result["ok"]
        assert result["state"].lives == 3

    def test_submit_too_few(self):
        apply_command(self.session, "Mela")
        result = apply_command(self.session, "submit")
        assert result["ok"] is False
        assert self.session.lives == 4

    def test_clear(self):
        apply_command(self.session, "Mela, Cane")
        result = apply_command(self.session, "clear")
        assert result["ok"]
        assert result["state"].selection == []

    def test_empty_command(self):
        assert apply_command(self.session, "   ")["ok"] is False

    def test_game_over_then_new(self):
        for _ in range(4):
            apply_command(self.session, "Cane, Rosso, Pizza, Pasta")
            apply_command(self.session, "submit")
        assert self.session.is_over
        result = apply_command(self.session, "Mela")
        assert result["ok"] is False
        result = apply_command(self.session, "new")
        assert result["ok"]
        assert result["state"].outcome == "playing"


class TestSessionView:
    """Snapshot exposed to front ends."""

    def setup_method(self):
        """Setup for each test."""
        self.session = new_session(GameParams(seed=1, board=0))

    def test_playing(self):
        view = session_view(self.session)
        assert view.outcome == "playing"
        assert view.answers is None
        assert len(view.word_pool) == 16
        assert view.lives == 4

    def test_lost_reveals_answers(self):
        for _ in range(4):
            apply_command(self.session, "Cane, Rosso, Pizza, Pasta")
            apply_command(self.session, "s")
        view = session_view(self.session)
        assert view.outcome == "lost"
        assert view.is_over
        assert [g.connection for g in view.answers] == ["Frutta", "Animali", "Colori", "Piatti italiani"]

    def test_won_hides_answers(self):
        for words in ("Mela, Pera, Banana, Arancia", "Cane, Gatto, Topo, Cavallo",
                      "Rosso, Blu, Verde, Giallo", "Pizza, Pasta, Risotto, Lasagna"):
            apply_command(self.session, words)
            apply_command(self.session, "s")
        view = session_view(self.session)
        assert view.outcome == "won"
        assert view.answers is None
        assert view.word_pool == []

    def test_json_dump(self):
        data = json.loads(session_view(self.session).model_dump_json())
        assert set(data) == {"word_pool", "selection", "found_groups", "lives", "is_over", "outcome", "answers"}
