from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

def parse_entries(text: str) -> List[str]:
    """
    Parse player entries from raw text
    Rules:
    - Prefer newline-separated entries
    - If there are no newlines, allow comma-separated entries
    - Preserve internal spaces in phrases ("Torre di Pisa")
    - Normalize by stripping and collapsing multiple spaces, case is kept
    """
    raw = text.strip()

    if "\n" in raw:
        parts = [line.strip() for line in raw.splitlines()]
    else:
        parts = [p.strip() for p in raw.split(",")]

    entries: List[str] = []
    for p in parts:
        if not p:
            continue
        entries.append(" ".join(p.split()))
    return entries

def normalize_entry(w: str) -> str:
    return " ".join(w.split()).casefold()

def resolve_entry(entry: str, pool: Sequence[str]) -> Optional[str]:
    # Position in the pool (1-based) or the word itself, any case
    if entry.isdecimal():
        pos = int(entry)
        if 1 <= pos <= len(pool):
            return pool[pos - 1]
        return None

    key = normalize_entry(entry)
    for w in pool:
        if normalize_entry(w) == key:
            return w
    return None

def validate_words(words: Sequence[str], expected: int) -> Tuple[bool, str]:
    if len(words) != expected:
        return False, f"Expected {expected} entries, got {len(words)}."

    if any(not w.strip() for w in words):
        return False, "Blank entries are not allowed."

    seen = set()
    dups = []
    for w in words:
        key = normalize_entry(w)
        if key in seen:
            dups.append(w)
        seen.add(key)

    if dups:
        return False, f"Duplicate entries found: {sorted(set(dups))}"
    return True, ""
