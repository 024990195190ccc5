from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple

from .mana import ManaSet


class Production(Enum):
    """How a card makes mana, if it does at all."""

    SLOW = "slow"
    FAST = "fast"
    NONE = "none"


@dataclass(frozen=True)
class Card:
    """Catalog entry describing what a card contributes to an opening hand.

    Attributes:
        name: Display name, also used to match cards in a hand.
        production: ``SLOW`` for land-like sources (only one of them may be
            used while evaluating a hand), ``FAST`` for sources such as
            Moxen that carry no such limit, ``NONE`` for everything else.
        mana: Alternative mana sets the card can add. Exactly one of them
            is picked when the card is used. Empty for ``NONE`` cards.
    """

    name: str
    production: Production = Production.NONE
    mana: Tuple[ManaSet, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mana", tuple(self.mana))
        if self.production is Production.NONE and self.mana:
            raise ValueError(f"{self.name!r} produces no mana but lists mana options")
        if self.production is not Production.NONE and not self.mana:
            raise ValueError(f"{self.name!r} is a mana source without mana options")

    @property
    def slow_mana(self) -> Tuple[ManaSet, ...]:
        return self.mana if self.production is Production.SLOW else tuple()

    @property
    def fast_mana(self) -> Tuple[ManaSet, ...]:
        return self.mana if self.production is Production.FAST else tuple()

    def is_named(self, name: str) -> bool:
        return self.name == name

    def __str__(self) -> str:
        return self.name


def land(name: str, mana: Iterable[ManaSet]) -> Card:
    return Card(name=name, production=Production.SLOW, mana=tuple(mana))


def mox(name: str, mana: Iterable[ManaSet]) -> Card:
    return Card(name=name, production=Production.FAST, mana=tuple(mana))


def non_mana(name: str) -> Card:
    return Card(name=name)
