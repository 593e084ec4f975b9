"""Tests for Hand evaluation and round resolution."""

import pytest

from core.cards import Card, Rank, Suit, make_deck
from core.hand import Hand, RoundOutcome, evaluate_hands, hand_total, resolve

from helpers import cards, hand


class TestHandTotal:
    """Tests for hand_total."""

    def test_empty_hand(self):
        """Test an empty hand scores zero."""
        assert hand_total(()) == 0

    @pytest.mark.parametrize(
        "codes, expected",
        [
            (("AS", "AH"), 12),
            (("AS", "KH"), 21),
            (("KS", "QH", "5D"), 25),
            (("AS", "AH", "AD"), 13),
            (("AS", "AH", "AD", "AC"), 14),
            (("AS", "9H", "AD"), 21),
            (("AS", "6H"), 17),
            (("AS", "6H", "10D"), 17),
            (("AS", "AH", "KD", "KC"), 22),
            (("10S", "6H"), 16),
            (("2S", "3H", "4D", "5C", "6S"), 20),
        ],
    )
    def test_known_totals(self, codes, expected):
        """Test soft and hard totals."""
        assert hand_total(cards(*codes)) == expected

    def test_no_aces_is_plain_sum(self):
        """Test hands without aces score their face-value sum."""
        no_aces = [c for c in make_deck() if not c.is_ace]
        for i in range(0, len(no_aces) - 3, 3):
            trio = no_aces[i:i + 3]
            expected = sum(min(c.rank.value, 10) for c in trio)
            assert hand_total(trio) == expected

    def test_never_above_all_aces_high(self):
        """Test the adjustment only lowers a sum, and never a sum of 21 or less."""
        deck = make_deck()
        for size in range(1, 6):
            for start in range(0, 52, 7):
                subset = [deck[(start + k * 13) % 52] for k in range(size)]
                raw = sum(c.value for c in subset)
                total = hand_total(subset)
                assert total <= raw
                if raw <= 21:
                    assert total == raw

    def test_only_needed_aces_drop(self):
        """Test each ace drops from 11 to 1 only as needed."""
        ace = Card(Rank.ACE, Suit.SPADES)
        five = Card(Rank.FIVE, Suit.HEARTS)
        assert hand_total([ace, five]) == 16
        assert hand_total([ace, five, five]) == 21
        assert hand_total([ace, five, five, five]) == 16


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_soft
        assert not empty_hand.is_blackjack
        assert not empty_hand.is_busted

    def test_with_card_prepends(self, empty_hand):
        """Test adding a card returns a new hand with the card first."""
        ten = Card(Rank.TEN, Suit.SPADES)
        two = Card(Rank.TWO, Suit.HEARTS)
        one = empty_hand.with_card(ten)
        both = one.with_card(two)
        assert len(empty_hand) == 0
        assert one.cards == (ten,)
        assert both.cards == (two, ten)
        assert both.value == 12

    def test_hand_is_immutable(self, hard_16_hand):
        """Test hands cannot be modified in place."""
        with pytest.raises(AttributeError):
            hard_16_hand.cards = ()

    def test_hard_hand_value(self, hard_16_hand):
        """Test hard hand value calculation."""
        assert hard_16_hand.value == 16
        assert not hard_16_hand.is_soft

    def test_soft_hand_value(self, soft_17_hand):
        """Test soft hand value calculation."""
        assert soft_17_hand.value == 17
        assert soft_17_hand.is_soft

    def test_soft_becomes_hard(self, soft_17_hand):
        """Test a soft hand turns hard when the ace must count as 1."""
        hard = soft_17_hand.with_card(Card(Rank.TEN, Suit.CLUBS))
        assert hard.value == 17
        assert not hard.is_soft

    def test_blackjack(self, blackjack_hand):
        """Test blackjack detection."""
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.value == 21
        assert blackjack_hand.is_soft

    def test_not_blackjack_three_cards(self):
        """Test that 21 with 3+ cards is not blackjack."""
        sevens = hand("7S", "7H", "7C")
        assert sevens.value == 21
        assert not sevens.is_blackjack

    def test_busted(self):
        """Test bust detection."""
        assert hand("KS", "QH", "5D").is_busted
        assert not hand("KS", "AH").is_busted

    def test_str(self):
        """Test hand string markers."""
        assert "(soft 17)" in str(hand("AS", "6H"))
        assert "(BUST)" in str(hand("KS", "QH", "5D"))
        assert "(16)" in str(hand("10S", "6H"))


class TestResolve:
    """Tests for round resolution."""

    @pytest.mark.parametrize(
        "player, dealer, expected",
        [
            (20, 19, RoundOutcome.PLAYER_WIN),
            (15, 22, RoundOutcome.PLAYER_WIN),
            (21, 26, RoundOutcome.PLAYER_WIN),
            (18, 18, RoundOutcome.DRAW),
            (21, 21, RoundOutcome.DRAW),
            (17, 20, RoundOutcome.DEALER_WIN),
            (22, 18, RoundOutcome.DEALER_WIN),
            (25, 23, RoundOutcome.DEALER_WIN),
            (23, 25, RoundOutcome.DEALER_WIN),
        ],
    )
    def test_outcomes(self, player, dealer, expected):
        """Test each branch of the resolver."""
        assert resolve(player, dealer) == expected

    def test_double_bust_tie_is_dealer_win(self):
        """Test a player bust loses even when the dealer busts on the same total."""
        assert resolve(22, 22) == RoundOutcome.DEALER_WIN

    def test_evaluate_hands(self):
        """Test comparing finished hands."""
        player = hand("KS", "QH")
        dealer = hand("5D", "4C", "JH")
        assert evaluate_hands(player, dealer) == RoundOutcome.PLAYER_WIN
        assert evaluate_hands(dealer, player) == RoundOutcome.DEALER_WIN
        assert evaluate_hands(player, Hand(player.cards)) == RoundOutcome.DRAW
