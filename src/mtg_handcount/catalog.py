"""Card catalog and the Berserk deck used by the command line report."""

from __future__ import annotations

from typing import Dict

from .card import Card, land, mox, non_mana
from .deck import Deck
from .hand import Hand
from .mana import ManaCost, ManaSet, ManaType

W, U, B, R, G = ManaType.W, ManaType.U, ManaType.B, ManaType.R, ManaType.G
FIVE_COLORS = (W, U, B, R, G)

BLACK_LOTUS = mox("Black Lotus", [ManaSet.single(color, 3) for color in FIVE_COLORS])
CITY_OF_BRASS = land("City of Brass", [ManaSet.single(color) for color in FIVE_COLORS])
TAIGA = land("Taiga", [ManaSet.single(R), ManaSet.single(G)])
MOUNTAIN = land("Mountain", [ManaSet.single(R)])
FOREST = land("Forest", [ManaSet.single(G)])
MOX_PEARL = mox("Mox Pearl", [ManaSet.single(W)])
MOX_SAPPHIRE = mox("Mox Sapphire", [ManaSet.single(U)])
MOX_JET = mox("Mox Jet", [ManaSet.single(B)])
MOX_RUBY = mox("Mox Ruby", [ManaSet.single(R)])
MOX_EMERALD = mox("Mox Emerald", [ManaSet.single(G)])
BALL_LIGHTNING = non_mana("Ball Lightning")
BERSERK = non_mana("Berserk")
BLOODLUST = non_mana("Bloodlust")
DUD = non_mana("Dud")

CATALOG: Dict[str, Card] = {
    card.name: card
    for card in (
        BLACK_LOTUS,
        CITY_OF_BRASS,
        TAIGA,
        MOUNTAIN,
        FOREST,
        MOX_PEARL,
        MOX_SAPPHIRE,
        MOX_JET,
        MOX_RUBY,
        MOX_EMERALD,
        BALL_LIGHTNING,
        BERSERK,
        BLOODLUST,
        DUD,
    )
}

EXAMPLE_DECK_SIZE = 60
OPENING_HAND_SIZE = 7

DOUBLE_BERSERK_COST = ManaCost.parse("RRRGG")
BLOODLUST_BERSERK_COST = ManaCost.parse("1RRRRG")


def example_deck() -> Deck:
    deck = Deck()
    deck.add(BLACK_LOTUS, 1)
    deck.add(BALL_LIGHTNING, 4)
    deck.add(BERSERK, 4)
    deck.add(TAIGA, 4)
    deck.add(CITY_OF_BRASS, 4)
    deck.add(MOX_RUBY, 1)
    deck.add(MOX_EMERALD, 1)
    deck.add(MOX_PEARL, 1)
    deck.add(MOX_SAPPHIRE, 1)
    deck.add(MOX_JET, 1)
    deck.add(MOUNTAIN, 4)
    deck.add(FOREST, 4)
    deck.add(BLOODLUST, 4)
    deck.add(DUD, 26)
    return deck


def is_double_berserk(hand: Hand) -> bool:
    """Ball Lightning with two Berserks and the mana to cast all three."""

    if not hand.has_cards([(BALL_LIGHTNING.name, 1), (BERSERK.name, 2)]):
        return False
    return hand.can_produce(DOUBLE_BERSERK_COST)


def is_bloodlust_berserk(hand: Hand) -> bool:
    if not hand.has_cards([(BALL_LIGHTNING.name, 1), (BERSERK.name, 1), (BLOODLUST.name, 1)]):
        return False
    return hand.can_produce(BLOODLUST_BERSERK_COST)


EXAMPLE_QUERIES = (
    ("Double Berserk", is_double_berserk),
    ("Bloodlust + Berserk", is_bloodlust_berserk),
)
