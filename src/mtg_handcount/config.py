from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from .card import Card, Production
from .catalog import CATALOG, EXAMPLE_DECK_SIZE, OPENING_HAND_SIZE
from .deck import Deck, DeckError, HandPredicate
from .hand import Hand
from .mana import ManaCost, ManaSet


@dataclass
class HandQuery:
    """A named hand condition: required cards and, optionally, mana."""

    label: str
    cards: Dict[str, int] = field(default_factory=dict)
    mana: ManaCost | None = None

    def __call__(self, hand: Hand) -> bool:
        if self.cards and not hand.has_cards(self.cards):
            return False
        if self.mana is not None and not hand.can_produce(self.mana):
            return False
        return True


@dataclass
class HandConfig:
    deck: Deck
    deck_size: int = EXAMPLE_DECK_SIZE
    hand_size: int = OPENING_HAND_SIZE
    queries: List[Tuple[str, HandPredicate]] = field(default_factory=list)


def load_config(path: Path) -> Dict[str, Any]:
    with path.open() as f:
        return json.load(f)


def _parse_mana(text: str, context: str) -> ManaSet:
    try:
        return ManaSet.parse(text)
    except ValueError as exc:
        raise DeckError(f"Invalid mana {text!r} for {context}: {exc}") from exc


def card_from_entry(entry: Mapping[str, Any], catalog: Mapping[str, Card] = CATALOG) -> Card:
    """Resolve a config card entry to a catalog card or a new definition."""

    if not isinstance(entry, Mapping):
        raise DeckError(f"Card entries must be objects, got {entry!r}")
    name = entry.get("name")
    if not name:
        raise DeckError(f"Card entry without a name: {dict(entry)!r}")
    if "production" not in entry:
        try:
            return catalog[name]
        except KeyError:
            raise DeckError(
                f"Unknown card {name!r}; add a 'production' and 'mana' to define it"
            ) from None

    try:
        production = Production(str(entry["production"]).lower())
    except ValueError:
        valid = ", ".join(p.value for p in Production)
        raise DeckError(
            f"Unknown production {entry['production']!r} for {name!r} (expected one of {valid})"
        ) from None
    mana = tuple(_parse_mana(text, name) for text in entry.get("mana", []))
    try:
        return Card(name=name, production=production, mana=mana)
    except ValueError as exc:
        raise DeckError(str(exc)) from exc


def query_from_entry(entry: Mapping[str, Any]) -> HandQuery:
    if not isinstance(entry, Mapping):
        raise DeckError(f"Query entries must be objects, got {entry!r}")
    label = entry.get("label")
    if not label:
        raise DeckError(f"Query without a label: {dict(entry)!r}")
    mana_text = entry.get("mana")
    mana = None
    if mana_text:
        try:
            mana = ManaCost.parse(mana_text)
        except ValueError as exc:
            raise DeckError(f"Invalid mana {mana_text!r} for query {label!r}: {exc}") from exc
    return HandQuery(label=label, cards=dict(entry.get("cards", {})), mana=mana)


def build_config(data: Mapping[str, Any], catalog: Mapping[str, Card] = CATALOG) -> HandConfig:
    deck = Deck()
    for entry in data.get("cards", []):
        deck.add(card_from_entry(entry, catalog), int(entry.get("count", 0)))

    queries: List[Tuple[str, HandPredicate]] = []
    for entry in data.get("queries", []):
        query = query_from_entry(entry)
        queries.append((query.label, query))

    return HandConfig(
        deck=deck,
        deck_size=data.get("deck_size", deck.num_cards()),
        hand_size=data.get("hand_size", OPENING_HAND_SIZE),
        queries=queries,
    )
