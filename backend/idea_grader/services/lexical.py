"""Lexical primitives for the idea scoring engine.

Rules
-----
- NO API calls
- NO LLMs
- Case-insensitive substring matching only
- Pure deterministic math
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Sequence

from ..constants import SCORE_MAX, SCORE_MIN

Predicate = Callable[[str], bool]

# ASCII so \b and \d behave the same for every input alphabet.
_NUMBER_RE = re.compile(r"\b(\$?\d+[\d,]*\.?\d*)\b", re.ASCII)
_WORD_RE = re.compile(r"\S+")


def clamp(value: float, lo: float = SCORE_MIN, hi: float = SCORE_MAX) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


def presence_score(text: str, terms: Sequence[str], weight: float = 1.0) -> float:
    """Score 0-10 proportional to the share of *terms* found in *text*.

    Both sides are lowercased, so ``"SaaS"`` matches ``"saas"``. Terms match
    anywhere, including inside longer words.
    """
    lc = text.lower()
    hits = sum(1 for term in terms if term.lower() in lc)
    ratio = hits / max(len(terms), 1)
    return clamp(10 * ratio * weight)


def penalty_if(text: str, predicates: Iterable[Predicate], penalty: float = 3.0) -> float:
    """Return *penalty* if any predicate holds on the lowercased text, else 0.

    Flat: several firing predicates still cost a single *penalty*.
    """
    lc = text.lower()
    return penalty if any(predicate(lc) for predicate in predicates) else 0.0


def contains(term: str) -> Predicate:
    """Build a case-insensitive substring predicate for :func:`penalty_if`."""
    needle = term.lower()

    def _predicate(lc: str) -> bool:
        return needle in lc

    _predicate.__name__ = f"contains_{needle.replace(' ', '_')}"
    return _predicate


def count_numbers(text: str) -> int:
    """Count numeric tokens such as ``40``, ``$1,200`` or ``3.5``."""
    return len(_NUMBER_RE.findall(text))


def word_count(text: str) -> int:
    """Count maximal runs of non-whitespace characters."""
    return len(_WORD_RE.findall(text))
