from __future__ import annotations
from typing import Any, Dict, Iterable, List, Tuple
from .types import Board

GAME_BOARDS: List[List[Dict[str, Any]]] = [
    [
        {"words": ["Mela", "Pera", "Banana", "Arancia"], "connection": "Frutta"},
        {"words": ["Cane", "Gatto", "Topo", "Cavallo"], "connection": "Animali"},
        {"words": ["Rosso", "Blu", "Verde", "Giallo"], "connection": "Colori"},
        {"words": ["Pizza", "Pasta", "Risotto", "Lasagna"], "connection": "Piatti italiani"},
    ],
    [
        {"words": ["Roma", "Parigi", "Londra", "Berlino"], "connection": "Capitali europee"},
        {"words": ["Violino", "Pianoforte", "Flauto", "Chitarra"], "connection": "Strumenti musicali"},
        {"words": ["Calcio", "Tennis", "Nuoto", "Pallacanestro"], "connection": "Sport"},
        {"words": ["Primavera", "Estate", "Autunno", "Inverno"], "connection": "Stagioni"},
    ],
    [
        {"words": ["Dante", "Petrarca", "Boccaccio", "Ariosto"], "connection": "Poeti italiani"},
        {"words": ["Leonardo", "Michelangelo", "Raffaello", "Donatello"], "connection": "Artisti del Rinascimento"},
        {"words": ["Vesuvio", "Etna", "Stromboli", "Vulcano"], "connection": "Vulcani italiani"},
        {"words": ["Venezia", "Firenze", "Napoli", "Milano"], "connection": "Città italiane"},
    ],
    [
        {"words": ["Cappuccino", "Espresso", "Macchiato", "Latte"], "connection": "Tipi di caffè"},
        {"words": ["Colosseo", "Torre di Pisa", "Duomo di Milano", "Ponte di Rialto"], "connection": "Monumenti italiani"},
        {"words": ["Ferrari", "Lamborghini", "Maserati", "Alfa Romeo"], "connection": "Marche di auto italiane"},
        {"words": ["Parmigiano", "Mozzarella", "Gorgonzola", "Pecorino"], "connection": "Formaggi italiani"},
    ],
    [
        {"words": ["Verdi", "Puccini", "Rossini", "Bellini"], "connection": "Compositori d'opera"},
        {"words": ["Margherita", "Marinara", "Quattro Formaggi", "Capricciosa"], "connection": "Tipi di pizza"},
        {"words": ["Chianti", "Barolo", "Prosecco", "Amarone"], "connection": "Vini italiani"},
        {"words": ["Pinocchio", "Geppetto", "Fata Turchina", "Lucignolo"], "connection": "Personaggi di Pinocchio"},
    ],
]

class CatalogIndexError(IndexError):
    pass

class PuzzleCatalog:
    """
    Fixed, read-only sequence of boards.
    """

    def __init__(self, boards: Iterable[Board]) -> None:
        self._boards: Tuple[Board, ...] = tuple(boards)
        if not self._boards:
            raise ValueError("Catalog needs at least one board.")

    def count(self) -> int:
        return len(self._boards)

    def get(self, index: int) -> Board:
        # No negative indexing: -1 is out of range like any other bad index
        if not 0 <= index < len(self._boards):
            raise CatalogIndexError(f"Board index {index} out of range [0, {len(self._boards)}).")
        return self._boards[index]

    def boards(self) -> Tuple[Board, ...]:
        return self._boards

DEFAULT_CATALOG = PuzzleCatalog(Board.from_dict(rows) for rows in GAME_BOARDS)
