from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class ManaType(Enum):
    """The five colors plus the generic/colorless slot, in vector order."""

    W = 0
    U = 1
    B = 2
    R = 3
    G = 4
    C = 5

    @property
    def index(self) -> int:
        return self.value


MANA_SLOTS = len(ManaType)
GENERIC = ManaType.C


def _vector(amounts: Iterable[int]) -> Tuple[int, ...]:
    values = tuple(int(a) for a in amounts)
    if len(values) != MANA_SLOTS:
        raise ValueError(f"Mana vectors have {MANA_SLOTS} slots, got {len(values)}")
    if any(a < 0 for a in values):
        raise ValueError(f"Mana amounts cannot be negative: {values}")
    return values


def _keyword_vector(amounts: dict[str, int]) -> Tuple[int, ...]:
    values = [0] * MANA_SLOTS
    for symbol, amount in amounts.items():
        try:
            values[ManaType[symbol].index] = amount
        except KeyError:
            raise ValueError(f"Unknown mana symbol: {symbol!r}") from None
    return _vector(values)


def parse_mana_symbols(text: str) -> Tuple[int, ...]:
    """Turn a cost string such as ``"{2}{R}{G}"`` or ``"2RG"`` into a vector.

    Braces are optional. Digit runs are generic mana and land in the ``C``
    slot, as does an explicit ``C``.
    """

    values = [0] * MANA_SLOTS
    digits = ""
    for ch in text.replace("{", "").replace("}", "").replace(" ", "").upper():
        if ch.isdigit():
            digits += ch
            continue
        if digits:
            values[GENERIC.index] += int(digits)
            digits = ""
        if ch not in ManaType.__members__:
            raise ValueError(f"Unknown mana symbol {ch!r} in {text!r}")
        values[ManaType[ch].index] += 1
    if digits:
        values[GENERIC.index] += int(digits)
    return tuple(values)


@dataclass(frozen=True)
class ManaCost:
    """A mana requirement: at least this much of each color and in total."""

    amounts: Tuple[int, ...] = (0,) * MANA_SLOTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "amounts", _vector(self.amounts))

    @classmethod
    def of(cls, **amounts: int) -> "ManaCost":
        return cls(_keyword_vector(amounts))

    @classmethod
    def parse(cls, text: str) -> "ManaCost":
        return cls(parse_mana_symbols(text))

    @property
    def total(self) -> int:
        return sum(self.amounts)

    def __getitem__(self, color: ManaType) -> int:
        return self.amounts[color.index]

    def __str__(self) -> str:
        return "[" + " ".join(str(a) for a in self.amounts) + "]"


@dataclass(frozen=True)
class ManaSet:
    """Mana available to pay with. Sets combine with ``+``."""

    amounts: Tuple[int, ...] = (0,) * MANA_SLOTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "amounts", _vector(self.amounts))

    @classmethod
    def empty(cls) -> "ManaSet":
        return cls()

    @classmethod
    def single(cls, color: ManaType, amount: int = 1) -> "ManaSet":
        values = [0] * MANA_SLOTS
        values[color.index] = amount
        return cls(tuple(values))

    @classmethod
    def of(cls, **amounts: int) -> "ManaSet":
        return cls(_keyword_vector(amounts))

    @classmethod
    def parse(cls, text: str) -> "ManaSet":
        return cls(parse_mana_symbols(text))

    @property
    def total(self) -> int:
        return sum(self.amounts)

    def __getitem__(self, color: ManaType) -> int:
        return self.amounts[color.index]

    def __add__(self, other: "ManaSet") -> "ManaSet":
        if not isinstance(other, ManaSet):
            return NotImplemented
        return ManaSet(tuple(a + b for a, b in zip(self.amounts, other.amounts)))

    def covers(self, cost: ManaCost) -> bool:
        """True when this mana can pay ``cost``.

        Each color must be matched exactly; the generic slot only has to be
        made up by the overall total, so leftover colored mana pays for it.
        """

        for color in ManaType:
            if color is GENERIC:
                continue
            if self[color] < cost[color]:
                return False
        return self.total >= cost.total

    def __str__(self) -> str:
        return "[" + " ".join(str(a) for a in self.amounts) + "]"
