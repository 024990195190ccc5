from mtg_handcount.catalog import (
    BALL_LIGHTNING,
    BLACK_LOTUS,
    CITY_OF_BRASS,
    DUD,
    MOX_EMERALD,
    MOX_RUBY,
    TAIGA,
)
from mtg_handcount.card import Card, Production, land
from mtg_handcount.hand import Hand
from mtg_handcount.mana import ManaCost, ManaSet, ManaType


def cost(w=0, u=0, b=0, r=0, g=0, c=0):
    return ManaCost((w, u, b, r, g, c))


def test_lotus_makes_three_of_one_color():
    hand = Hand((BLACK_LOTUS,))

    assert hand.can_produce(cost(w=2))
    assert hand.can_produce(cost(u=3))
    assert hand.can_produce(cost(b=1))
    assert hand.can_produce(cost(r=2, c=1))
    assert not hand.can_produce(cost(w=1, u=1))  # one alternative at a time
    assert not hand.can_produce(cost(w=1, c=3))


def test_lotus_and_city_of_brass():
    hand = Hand((BLACK_LOTUS, CITY_OF_BRASS))

    assert hand.can_produce(cost(w=4))
    assert hand.can_produce(cost(w=1, r=3))
    assert hand.can_produce(cost(u=1, r=1, c=2))
    assert not hand.can_produce(cost(w=1, g=1, c=3))
    assert not hand.can_produce(cost(c=5))
    assert not hand.can_produce(cost(w=1, u=1, b=1))


def test_only_one_land_is_used():
    hand = Hand((TAIGA, TAIGA, TAIGA))

    assert hand.can_produce(cost(r=1))
    assert not hand.can_produce(cost(r=2))
    assert not hand.can_produce(cost(r=3))


def test_fast_sources_stack():
    hand = Hand((MOX_RUBY, MOX_RUBY, MOX_RUBY))

    assert hand.can_produce(cost(r=3))
    assert not hand.can_produce(cost(r=4))


def test_fast_sources_combine_with_a_land():
    hand = Hand((BLACK_LOTUS, MOX_EMERALD, TAIGA))

    assert hand.can_produce(cost(r=3, g=2))
    assert not hand.can_produce(cost(r=3, g=3))


def test_cards_without_mana_are_skipped():
    hand = Hand((BALL_LIGHTNING, DUD, TAIGA))

    assert hand.can_produce(cost(g=1))
    assert not Hand((BALL_LIGHTNING, DUD)).can_produce(cost(r=1))


def test_first_land_need_not_be_used():
    hand = Hand((TAIGA, CITY_OF_BRASS))

    assert hand.can_produce(cost(w=1))


def test_zero_cost_is_always_payable():
    assert Hand(()).can_produce(ManaCost())
    assert Hand((DUD,)).can_produce(ManaCost())


def test_cards_defined_outside_the_catalog():
    savannah = land("Savannah", [ManaSet.single(ManaType.W), ManaSet.single(ManaType.G)])
    spare_lotus = Card("Lotus Bloom", Production.FAST, (ManaSet.single(ManaType.W, 3),))

    assert Hand((savannah, spare_lotus)).can_produce(cost(w=4))


def test_has_cards():
    hand = Hand((BLACK_LOTUS, CITY_OF_BRASS))

    assert hand.has_cards([("Black Lotus", 1), ("City of Brass", 1)])
    assert hand.has_cards([("City of Brass", 1)])
    assert not hand.has_cards([("Black Lotus", 2), ("City of Brass", 1)])
    assert not hand.has_cards([("Mountain", 1)])
    assert hand.has_cards([])
    assert hand.has_cards({"Black Lotus": 1})


def test_hand_counts_copies_by_name():
    hand = Hand((TAIGA, DUD, TAIGA))

    assert hand.count("Taiga") == 2
    assert str(hand) == "Taiga, Dud, Taiga"
