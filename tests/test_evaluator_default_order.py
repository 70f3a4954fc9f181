"""
Evaluator tests under the empty configuration, which must reproduce classical poker
ordering.
"""

import pytest

from handrank.category_config import CategoryConfig
from handrank.engine.hand import Hand
from handrank.engine.hand_category import HandCategory
from handrank.errors import UnrecognizedToken
from handrank.scoring.evaluator import candidates, evaluate, evaluate_string
from handrank.scoring.hand_score import HandScore

CONFIG = CategoryConfig()


def score_of(text):
	return evaluate(Hand.from_string(text), CONFIG).score


@pytest.mark.parametrize(
	"left,right",
	[
		pytest.param("A♠,K♠,Q♠,J♠,10♠", "9♠,8♠,7♠,6♠,5♠", id="royal-flush>straight-flush"),
		pytest.param("9♣,8♣,7♣,6♣,5♣", "K♦,K♣,K♥,K♠,2♣", id="straight-flush>four-of-a-kind"),
		pytest.param("K♦,K♣,K♥,K♠,2♣", "A♦,A♣,A♥,K♠,K♣", id="four-of-a-kind>full-house"),
		pytest.param("A♦,A♣,A♥,K♠,K♣", "A♣,J♣,9♣,5♣,3♣", id="full-house>flush"),
		pytest.param("A♣,J♣,9♣,5♣,3♣", "A♦,K♣,Q♥,J♠,10♣", id="flush>straight"),
		pytest.param("7♦,6♣,5♥,4♠,3♣", "K♣,J♦,9♥,6♠,2♣", id="straight>high-card"),
		pytest.param("Q♦,Q♣,Q♥,A♠,K♣", "J♦,J♣,J♥,A♠,K♣", id="trips-q>trips-j"),
		pytest.param("K♦,K♣,Q♥,Q♠,A♣", "K♥,K♠,J♦,J♣,A♦", id="two-pair-kq>two-pair-kj"),
		pytest.param("A♦,A♣,K♥,Q♠,J♣", "A♥,A♠,K♦,Q♣,10♦", id="pair-kicker-j>pair-kicker-10"),
	],
)
def test_compare_between_and_within_categories(left, right):
	assert score_of(left) > score_of(right)


@pytest.mark.parametrize(
	"text,category",
	[
		("A♦,A♦,A♦,A♦,A♦", HandCategory.FiveOfAKind),
		("A♠,K♠,Q♠,J♠,10♠", HandCategory.RoyalFlush),
		("9♠,8♠,7♠,6♠,5♠", HandCategory.StraightFlush),
		("A♥,2♥,3♥,4♥,5♥", HandCategory.StraightFlush),
		("9♦,9♣,9♥,9♠,K♣", HandCategory.FourOfAKind),
		("A♦,A♣,A♥,2♠,2♣", HandCategory.FullHouse),
		("A♣,J♣,9♣,7♣,5♣", HandCategory.Flush),
		("A♦,2♣,3♥,4♠,5♣", HandCategory.Straight),
		("7♣,7♦,7♥,A♠,K♣", HandCategory.ThreeOfAKind),
		("K♣,K♦,Q♣,Q♦,A♠", HandCategory.TwoPair),
		("A♣,A♦,K♣,Q♦,J♠", HandCategory.OnePair),
		("A♣,K♦,9♥,5♠,3♣", HandCategory.HighCard),
	],
)
def test_classification(text, category):
	assert evaluate_string(text).category == category


def test_four_of_a_kind_kicker_decides():
	assert score_of("9♦,9♣,9♥,9♠,K♣") < score_of("9♦,9♣,9♥,9♠,A♣")


def test_full_house_trip_rank_before_pair_rank():
	assert score_of("A♦,A♣,A♥,2♠,2♣") > score_of("K♦,K♣,K♥,Q♠,Q♣")


def test_flush_compares_kickers_lexicographically():
	assert score_of("A♣,J♣,9♣,5♣,3♣") > score_of("A♦,J♦,9♦,5♦,2♦")


def test_wheel_is_lowest_straight():
	wheel = score_of("A♦,2♣,3♥,4♠,5♣")
	six_high = score_of("6♦,5♣,4♥,3♠,2♣")
	assert wheel < six_high
	assert evaluate_string("A♦,2♣,3♥,4♠,5♣").category == HandCategory.Straight


def test_straight_same_high_is_tie():
	assert score_of("A♣,K♦,Q♥,J♠,10♣") == score_of("A♦,K♣,Q♠,J♦,10♥")


def test_trips_kickers_compare_descending():
	assert score_of("7♣,7♦,7♥,A♠,K♣") > score_of("7♣,7♦,7♥,A♠,Q♣")
	assert score_of("7♣,7♦,7♥,Q♠,A♣") > score_of("7♣,7♦,7♥,K♠,Q♣")


def test_two_pair_tie_on_pairs_uses_kicker():
	assert score_of("K♣,K♦,Q♣,Q♦,A♠") > score_of("K♠,K♥,Q♥,Q♠,J♣")


def test_one_pair_all_three_kickers_matter():
	assert score_of("A♣,A♦,K♣,Q♦,J♠") > score_of("A♠,A♥,K♦,Q♣,10♠")


def test_high_card_exact_tie():
	assert score_of("A♣,K♦,9♥,5♠,3♣") == score_of("A♦,K♣,9♠,5♥,3♦")


def test_hand_order_does_not_matter():
	assert score_of("A♣,K♦,Q♥,J♠,10♣") == score_of("10♣,J♠,Q♥,K♦,A♣")


def test_straight_flush_beats_four_of_a_kind_borderline():
	assert score_of("6♥,5♥,4♥,3♥,2♥") > score_of("A♦,A♣,A♥,A♠,K♣")


def test_full_house_beats_flush():
	assert score_of("Q♦,Q♣,Q♥,2♠,2♣") > score_of("A♣,J♣,9♣,7♣,5♣")


def test_royal_flush_beats_straight_flush_borderline():
	assert score_of("A♦,K♦,Q♦,J♦,10♦") > score_of("6♥,5♥,4♥,3♥,2♥")


def test_five_of_a_kind_beats_royal_flush_borderline():
	assert score_of("A♦,A♦,A♦,A♦,A♦") > score_of("A♦,K♦,Q♦,J♦,10♦")


def test_invalid_rank_raises():
	with pytest.raises(UnrecognizedToken):
		score_of("1♣,K♦,Q♥,J♠,9♣")


def test_exact_composite_values():
	assert score_of("A♠,K♠,Q♠,J♠,10♠") == (9 << 20) | 0xEDCBA
	assert score_of("9♠,8♠,7♠,6♠,5♠") == (8 << 20) | 0x90000
	assert score_of("9♦,9♣,9♥,9♠,K♣") == (7 << 20) | 0x9D000
	assert score_of("A♣,K♦,9♥,5♠,3♣") == 0xED953


def test_none_config_means_default():
	h = Hand.from_string("K♦,K♣,Q♥,Q♠,A♣")
	assert evaluate(h) == evaluate(h, CategoryConfig())
	assert evaluate(h, None).category == HandCategory.TwoPair


def test_evaluate_is_max_of_candidates():
	h = Hand.from_string("A♦,K♦,Q♦,J♦,10♦")
	cands = candidates(h)
	assert [c.category for c in cands] == [
		HandCategory.HighCard,
		HandCategory.Straight,
		HandCategory.Flush,
		HandCategory.StraightFlush,
		HandCategory.RoyalFlush,
	]
	best = evaluate(h)
	assert best.score == max(c.score for c in cands)
	assert best.category == HandCategory.RoyalFlush


def test_hand_score_positional_fields_are_category_then_score():
	s = HandScore(HandCategory.Flush, 42)
	assert s.category == HandCategory.Flush
	assert s.score == 42


def test_hand_score_orders_by_score_only():
	a = HandScore(score=10, category=HandCategory.Flush)
	b = HandScore(score=10, category=HandCategory.Straight)
	c = HandScore(score=11, category=HandCategory.HighCard)
	assert a == b
	assert c > a
	assert max([a, c, b]) is c
	assert str(c) == "High Card (11)"


def test_hand_score_splits_weight_and_tiebreak():
	s = evaluate_string("9♦,9♣,9♥,9♠,K♣")
	assert s.weight == 7
	assert s.tiebreak == 0x9D000
