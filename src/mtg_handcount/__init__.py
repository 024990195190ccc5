"""Exact opening-hand counts for MTG decks."""

from .card import Card, Production, land, mox, non_mana
from .deck import Deck, DeckError, ncr
from .hand import Hand
from .mana import ManaCost, ManaSet, ManaType

__all__ = [
    "Card",
    "Production",
    "land",
    "mox",
    "non_mana",
    "Deck",
    "DeckError",
    "ncr",
    "Hand",
    "ManaCost",
    "ManaSet",
    "ManaType",
]
