from __future__ import annotations
import argparse
from typing import Callable, Iterable, List, Optional
from game.app import GameParams, SessionView, apply_command, new_session, session_view
from game.catalog import DEFAULT_CATALOG, CatalogIndexError
from game.session import GameSession

COLUMNS = 4

HELP = (
    "Commands: words or positions to (de)select, comma-separated (e.g. 'Mela, Pera' or '1,5'); "
    "'submit' (s), 'clear' (c), 'new' (n), 'quit' (q)."
)

def render(view: SessionView) -> str:
    lines: List[str] = []
    lines.append(f"\nLives: {view.lives}")

    selected = set(view.selection)
    width = max((len(w) for w in view.word_pool), default=0) + 6
    row: List[str] = []
    for i, w in enumerate(view.word_pool, start=1):
        mark = "*" if w in selected else " "
        row.append(f"{i:>2}{mark}{w}".ljust(width))
        if len(row) == COLUMNS:
            lines.append("".join(row).rstrip())
            row = []
    if row:
        lines.append("".join(row).rstrip())

    if view.found_groups:
        lines.append("\nFound sets:")
        for g in view.found_groups:
            lines.append(f"  {g.connection}: {', '.join(g.words)}")

    if view.outcome == "won":
        lines.append("\nCongratulations! You won!")
    elif view.outcome == "lost":
        lines.append("\nGame Over")
        lines.append("Correct answers:")
        for g in view.answers or []:
            lines.append(f"  {g.connection}: {', '.join(g.words)}")
    return "\n".join(lines)

def list_boards() -> None:
    for i, board in enumerate(DEFAULT_CATALOG.boards()):
        print(f"{i}. {' / '.join(g.connection for g in board.groups)}")

def play(session: GameSession, commands: Iterable[str], params: GameParams, out: Callable[[str], None] = print) -> None:
    out(render(session_view(session)))
    out(HELP)

    for text in commands:
        if text.strip().lower() in {"quit", "q"}:
            return

        result = apply_command(session, text)
        if not result["ok"]:
            out(f"Input error: {result['error']}")
            continue

        out(result["message"])
        if params.json:
            out(result["state"].model_dump_json(indent=2))
        else:
            out(render(result["state"]))

        if params.debug:
            out(f"[debug] board={session.board_index} pool={len(session.word_pool)} selection={list(session.selection)}")

def read_commands() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return

def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Italian Connections (terminal)")
    parser.add_argument("--seed", type=int, help="Seed for board choice and word order.")
    parser.add_argument("--board", type=int, help="Play a specific board (0-based index) instead of a random one.")
    parser.add_argument("--json", action="store_true", help="Print the game state as JSON after each command.")
    parser.add_argument("--debug", action="store_true", help="Print debug diagnostics.")
    parser.add_argument("--list", action="store_true", help="List the available boards and exit.")

    args = parser.parse_args(argv)

    if args.list:
        list_boards()
        return

    params = GameParams(seed=args.seed, board=args.board, json=args.json, debug=args.debug)

    try:
        session = new_session(params)
    except CatalogIndexError as e:
        print(f"Input error: {e}")
        print(f"Tip: use --list to see the {DEFAULT_CATALOG.count()} boards.")
        return

    if params.debug:
        print(f"Seed: {params.seed} Board: {session.board_index} Words: {len(session.word_pool)}")

    play(session, read_commands(), params)

if __name__ == "__main__":
    main()
