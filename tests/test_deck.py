"""Tests for deck operations."""

import random

import pytest

from bisca.errors import DeckStateError, EmptyDeckError
from bisca.models.card import Card, Rank, Suit
from bisca.models.deck import Deck, create_deck


@pytest.fixture
def built_deck():
    deck = Deck()
    deck.build()
    return deck


@pytest.fixture
def shuffled_deck(built_deck):
    built_deck.shuffle(random.Random(3))
    return built_deck


class TestShuffle:
    """Tests for Deck.shuffle."""

    def test_shuffle_is_permutation(self, built_deck):
        """Test shuffled deck holds the same cards."""
        before = sorted(built_deck.cards, key=lambda c: (c.rank, c.suit))
        built_deck.shuffle(random.Random(7))
        after = sorted(built_deck.cards, key=lambda c: (c.rank, c.suit))

        assert before == after
        assert built_deck.remaining() == 40

    def test_shuffle_reproducible(self):
        """Test same seed gives same order."""
        deck1 = Deck()
        deck1.build()
        deck1.shuffle(random.Random(42))

        deck2 = Deck()
        deck2.build()
        deck2.shuffle(random.Random(42))

        assert deck1.cards == deck2.cards

    def test_shuffle_changes_order(self, built_deck):
        """Test a seeded shuffle moves cards around."""
        original = built_deck.cards
        built_deck.shuffle(random.Random(42))
        assert built_deck.cards != original

    def test_identity_shuffle(self, built_deck, first_index_rng):
        """Test picking index 0 every time keeps build order."""
        original = built_deck.cards
        built_deck.shuffle(first_index_rng)
        assert built_deck.cards == original


class TestTrump:
    """Tests for trump designation."""

    def test_trump_is_bottom_card(self, built_deck):
        """Test trump is the last card after shuffling."""
        built_deck.shuffle(random.Random(3))
        bottom = built_deck.cards[-1]

        trump = built_deck.designate_trump()

        assert trump == bottom
        assert built_deck.trump == bottom

    def test_trump_does_not_reduce_remaining(self, built_deck):
        """Test the trump card stays in the deck."""
        built_deck.shuffle(random.Random(3))
        built_deck.designate_trump()
        assert built_deck.remaining() == 40

    def test_trump_only_once(self, shuffled_deck):
        """Test designating trump twice fails."""
        shuffled_deck.designate_trump()
        with pytest.raises(DeckStateError):
            shuffled_deck.designate_trump()

    def test_trump_before_draw(self, shuffled_deck):
        """Test designating trump after a draw fails."""
        shuffled_deck.draw()
        with pytest.raises(DeckStateError):
            shuffled_deck.designate_trump()

    def test_trump_requires_shuffle(self, built_deck):
        """Test designating trump on an unshuffled deck fails."""
        with pytest.raises(DeckStateError):
            built_deck.designate_trump()
        assert built_deck.trump is None

    def test_rebuild_requires_shuffle(self, shuffled_deck):
        """Test a rebuilt deck must be shuffled again before trump."""
        shuffled_deck.build()
        with pytest.raises(DeckStateError):
            shuffled_deck.designate_trump()

    def test_no_shuffle_after_trump(self, shuffled_deck):
        """Test the pinned trump stays the bottom card."""
        trump = shuffled_deck.designate_trump()
        order = shuffled_deck.cards

        with pytest.raises(DeckStateError):
            shuffled_deck.shuffle(random.Random(1))

        assert shuffled_deck.cards == order
        assert shuffled_deck.cards[-1] == trump

    def test_no_build_after_trump(self, shuffled_deck):
        """Test rebuilding cannot wipe the pinned trump."""
        trump = shuffled_deck.designate_trump()

        with pytest.raises(DeckStateError):
            shuffled_deck.build()

        assert shuffled_deck.trump == trump
        assert shuffled_deck.remaining() == 40

    def test_trump_drawn_last(self, first_index_rng):
        """Test the trump card is drawn normally when its turn comes."""
        deck = create_deck(first_index_rng)
        trump = deck.trump
        cards = [deck.draw() for _ in range(40)]

        assert cards[-1] == trump
        assert deck.trump == trump


class TestDraw:
    """Tests for Deck.draw."""

    def test_draw_from_top(self, built_deck):
        """Test draw removes index 0."""
        card = built_deck.draw()
        assert card == Card(rank=Rank.TWO, suit=Suit.COPAS)
        assert built_deck.remaining() == 39

    def test_draw_empty(self):
        """Test drawing from an empty deck fails."""
        deck = Deck()
        with pytest.raises(EmptyDeckError):
            deck.draw()

    def test_draw_all(self, built_deck):
        """Test every card can be drawn exactly once."""
        drawn = [built_deck.draw() for _ in range(40)]
        assert len(set(drawn)) == 40
        assert built_deck.remaining() == 0
        with pytest.raises(EmptyDeckError):
            built_deck.draw()


class TestCreateDeck:
    """Tests for create_deck."""

    def test_create_deck_ready(self, seeded_rng):
        """Test created deck is full with trump pinned."""
        deck = create_deck(seeded_rng)
        assert deck.remaining() == 40
        assert deck.trump == deck.cards[-1]
