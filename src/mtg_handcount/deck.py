from __future__ import annotations

import math
import time
from fractions import Fraction
from typing import Callable, List, Sequence

from .card import Card
from .hand import Hand

HandPredicate = Callable[[Hand], bool]


class DeckError(RuntimeError):
    """Raised when a deck or deck configuration is inconsistent."""


def ncr(n: int, r: int) -> int:
    """Number of ways to choose ``r`` of ``n`` copies.

    Zero copies or an empty pick count as zero ways here, not one. Hand
    enumeration only ever asks for runs of at least one card, so the
    distinction never shows up in hand counts.
    """

    if n <= 0 or r <= 0 or r > n:
        return 0
    if n == r:
        return 1
    small = min(r, n - r)
    numerator = 1
    for factor in range(n - small + 1, n + 1):
        numerator *= factor
    return numerator // math.factorial(small)


def _always(_hand: Hand) -> bool:
    return True


class Deck:
    """Distinct card types with the number of copies of each.

    Hands are counted by the multiset of card types they contain, so a
    playset of four identical cards is enumerated once per run length and
    weighted by how many physical selections that run stands for.
    """

    def __init__(self) -> None:
        self.cards: List[Card] = []
        self.copies: List[int] = []

    def add(self, card: Card, count: int) -> "Deck":
        if count < 0:
            raise DeckError(f"Cannot add {count} copies of {card.name!r}")
        self.cards.append(card)
        self.copies.append(count)
        return self

    def num_cards(self) -> int:
        return sum(self.copies)

    def check_size(self, expected: int) -> None:
        actual = self.num_cards()
        if actual != expected:
            raise DeckError(f"Deck holds {actual} cards, expected {expected}")

    def deal_hand(self, indices: Sequence[int]) -> Hand:
        return Hand(tuple(self.cards[idx] for idx in indices))

    def count_sequence(self, indices: Sequence[int]) -> int:
        """Physical selections represented by a sorted run of card indices."""

        total = 1
        idx = 0
        while idx < len(indices):
            card_idx = indices[idx]
            run = 1
            while idx + run < len(indices) and indices[idx + run] == card_idx:
                run += 1
            total *= ncr(self.copies[card_idx], run)
            idx += run
        return total

    def count_hands(self, hand_size: int) -> int:
        return self.count_hands_if(hand_size, _always)

    def count_hands_if(
        self,
        hand_size: int,
        predicate: HandPredicate | None = None,
        progress: Callable[[int, int], None] | None = None,
    ) -> int:
        """Count the ``hand_size`` card hands for which ``predicate`` holds.

        ``progress`` receives ``(done, total)`` where ``total`` is the number
        of card types; a type is done once every hand whose lowest card is
        that type has been visited.
        """

        accept = predicate or _always
        dealt: List[int] = [0] * hand_size
        type_count = len(self.cards)
        last_report = time.monotonic()

        def report(done: int, force: bool = False) -> None:
            nonlocal last_report
            if progress is None:
                return
            now = time.monotonic()
            if force or now - last_report >= 1:
                progress(done, type_count)
                last_report = now

        def deal(filled: int, start: int) -> int:
            if filled == hand_size:
                if not accept(self.deal_hand(dealt)):
                    return 0
                return self.count_sequence(dealt)

            total = 0
            for card_idx in range(start, type_count):
                available = self.copies[card_idx]
                for run in range(1, min(available, hand_size - filled) + 1):
                    for offset in range(run):
                        dealt[filled + offset] = card_idx
                    total += deal(filled + run, card_idx + 1)
                if filled == 0:
                    report(card_idx + 1)
            return total

        report(0, force=True)
        total = deal(0, 0)
        report(type_count, force=True)
        return total

    def share_of_hands(self, count: int, hand_size: int) -> Fraction:
        """``count`` hands as a fraction of every ``hand_size`` card hand."""

        possible = ncr(self.num_cards(), hand_size)
        if possible == 0:
            return Fraction(0)
        return Fraction(count, possible)

    def hand_probability(self, hand_size: int, predicate: HandPredicate | None = None) -> Fraction:
        return self.share_of_hands(self.count_hands_if(hand_size, predicate), hand_size)
