from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple, Union

from .card import Card
from .mana import ManaCost, ManaSet

CardRequirements = Union[Mapping[str, int], Iterable[Tuple[str, int]]]


@dataclass(frozen=True)
class Hand:
    """A drawn hand. Card order only matters to the mana search order."""

    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cards", tuple(self.cards))

    def __str__(self) -> str:
        return ", ".join(card.name for card in self.cards)

    def count(self, name: str) -> int:
        return sum(1 for card in self.cards if card.is_named(name))

    def has_cards(self, requirements: CardRequirements) -> bool:
        """Return True when every ``(name, minimum)`` pair is met."""

        pairs = requirements.items() if isinstance(requirements, Mapping) else requirements
        for name, minimum in pairs:
            if self.count(name) < minimum:
                return False
        return True

    def can_produce(self, cost: ManaCost) -> bool:
        """Decide whether some of the hand's mana sources can pay ``cost``.

        Every card may be used at most once and contributes one of its mana
        alternatives. Only a single slow source (a land) may be used, while
        fast sources are unrestricted. Cards are tried in hand order and any
        card may be skipped.
        """

        start = ManaSet.empty()
        if start.covers(cost):
            return True
        return any(
            self._can_produce_from(cost, start, idx, True) for idx in range(len(self.cards))
        )

    def _can_produce_from(
        self, goal: ManaCost, current: ManaSet, idx: int, land_available: bool
    ) -> bool:
        card = self.cards[idx]
        for options, uses_land in ((card.slow_mana, True), (card.fast_mana, False)):
            if not options:
                continue
            if uses_land and not land_available:
                continue
            still_available = False if uses_land else land_available
            for produced in options:
                total = current + produced
                if total.covers(goal):
                    return True
                for next_idx in range(idx + 1, len(self.cards)):
                    if self._can_produce_from(goal, total, next_idx, still_available):
                        return True
        return False
