from __future__ import annotations

import argparse
import sys
from fractions import Fraction
from pathlib import Path

from .catalog import EXAMPLE_DECK_SIZE, EXAMPLE_QUERIES, OPENING_HAND_SIZE, example_deck
from .config import HandConfig, build_config, load_config
from .deck import DeckError


def progress_printer(stage: str):
    def _printer(done: int, total: int) -> None:
        if total:
            pct = done / total * 100
            print(f"[{stage}] {done}/{total} ({pct:.1f}%)", file=sys.stderr)
        else:
            print(f"[{stage}] {done} completed", file=sys.stderr)

    return _printer


def format_count(label: str, count: int, probability: Fraction | None = None) -> str:
    if probability is None:
        return f"{label}: {count}"
    return f"{label}: {count} ({float(probability) * 100:.4f}%)"


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Count opening hands that hold the right cards and mana"
    )
    parser.add_argument("--config", type=Path, help="Path to a JSON deck and query file")
    parser.add_argument(
        "--hand-size",
        type=int,
        default=None,
        help=f"Cards in the opening hand (default: {OPENING_HAND_SIZE} or config value)",
    )
    parser.add_argument(
        "--deck-size",
        type=int,
        default=None,
        help=f"Expected deck size (default: {EXAMPLE_DECK_SIZE} or config value)",
    )
    parser.add_argument(
        "--probability",
        action="store_true",
        help="Also print each count as a share of all possible hands",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Report enumeration progress on stderr"
    )
    args = parser.parse_args()

    if args.config:
        try:
            config = build_config(load_config(args.config))
        except OSError as exc:  # pragma: no cover - CLI concerns
            raise SystemExit(f"Failed to read config: {exc}") from exc
        except (DeckError, ValueError) as exc:
            raise SystemExit(str(exc)) from exc
    else:
        config = HandConfig(deck=example_deck(), queries=list(EXAMPLE_QUERIES))

    deck_size = args.deck_size if args.deck_size is not None else config.deck_size
    hand_size = args.hand_size if args.hand_size is not None else config.hand_size
    if hand_size < 0:
        raise SystemExit(f"Hand size cannot be negative: {hand_size}")
    try:
        config.deck.check_size(deck_size)
    except DeckError as exc:
        raise SystemExit(str(exc)) from exc

    if not config.queries:
        raise SystemExit("No hand queries to evaluate")

    for label, predicate in config.queries:
        progress = progress_printer(label) if args.progress else None
        count = config.deck.count_hands_if(hand_size, predicate, progress=progress)
        probability = None
        if args.probability:
            probability = config.deck.share_of_hands(count, hand_size)
        print(format_count(label, count, probability))


if __name__ == "__main__":
    main()
