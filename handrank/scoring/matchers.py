"""
I implement one matcher per hand category. A matcher looks at a hand and either
returns None (the hand is not of that shape) or the tuple of rank values that breaks
ties inside the category, highest priority first. Packing those values into an
integer is left to scoring.packing.

Key symbols: CategoryMatcher, a frozen pairing of a HandCategory with its match
function; MATCHERS, the closed set of all eleven, in HandCategory order;
MATCHER_BY_CATEGORY for read-only lookup; match(category, hand) as a shortcut.

Invariants: matchers are independent and not mutually exclusive. A royal flush also
matches Flush, Straight, StraightFlush and HighCard; a full house also matches
ThreeOfAKind and OnePair. Choosing the winner is the evaluator's job and does not
depend on the order of MATCHERS. Every tiebreak tuple has at most five values, each in
2..14.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Optional, Tuple

from handrank.engine.hand_category import HandCategory
from handrank.scoring.hand_features import (
	is_flush,
	kickers_excluding,
	rank_counts,
	ranks_with_count,
	sorted_ranks_desc,
	straight_high,
)

TieBreak = Tuple[int, ...]

ROYAL_TIEBREAK: TieBreak = (14, 13, 12, 11, 10)


def match_royal_flush(hand) -> Optional[TieBreak]:
	if not is_flush(hand):
		return None
	if straight_high(hand) != 14:
		return None
	return ROYAL_TIEBREAK


def match_straight_flush(hand) -> Optional[TieBreak]:
	if not is_flush(hand):
		return None
	high = straight_high(hand)
	if high is None:
		return None
	return (high,)


def match_five_of_a_kind(hand) -> Optional[TieBreak]:
	fives = ranks_with_count(rank_counts(hand), 5)
	if not fives:
		return None
	return (fives[0],)


def match_four_of_a_kind(hand) -> Optional[TieBreak]:
	quads = ranks_with_count(rank_counts(hand), 4)
	if not quads:
		return None
	quad = quads[0]
	kicker = kickers_excluding(hand, [quad])[0]
	return (quad, kicker)


def match_full_house(hand) -> Optional[TieBreak]:
	counts = rank_counts(hand)
	trips = ranks_with_count(counts, 3)
	pairs = ranks_with_count(counts, 2)
	if not trips or not pairs:
		return None
	return (trips[0], pairs[0])


def match_flush(hand) -> Optional[TieBreak]:
	if not is_flush(hand):
		return None
	return tuple(sorted_ranks_desc(hand))


def match_straight(hand) -> Optional[TieBreak]:
	high = straight_high(hand)
	if high is None:
		return None
	return (high,)


def match_three_of_a_kind(hand) -> Optional[TieBreak]:
	trips = ranks_with_count(rank_counts(hand), 3)
	if not trips:
		return None
	three = trips[0]
	kickers = kickers_excluding(hand, [three])
	return (three, kickers[0], kickers[1])


def match_two_pair(hand) -> Optional[TieBreak]:
	counts = rank_counts(hand)
	pairs = ranks_with_count(counts, 2)
	if len(pairs) != 2:
		return None
	singles = ranks_with_count(counts, 1)
	return (pairs[0], pairs[1], singles[0])


def match_one_pair(hand) -> Optional[TieBreak]:
	pairs = ranks_with_count(rank_counts(hand), 2)
	if not pairs:
		return None
	pair = pairs[0]
	kickers = kickers_excluding(hand, [pair])
	return (pair, kickers[0], kickers[1], kickers[2])


def match_high_card(hand) -> Optional[TieBreak]:
	return tuple(sorted_ranks_desc(hand))


@dataclass(frozen=True)
class CategoryMatcher:
	category: HandCategory
	fn: Callable[..., Optional[TieBreak]]

	def matches(self, hand) -> Optional[TieBreak]:
		return self.fn(hand)


MATCHERS: Tuple[CategoryMatcher, ...] = (
	CategoryMatcher(HandCategory.HighCard, match_high_card),
	CategoryMatcher(HandCategory.OnePair, match_one_pair),
	CategoryMatcher(HandCategory.TwoPair, match_two_pair),
	CategoryMatcher(HandCategory.ThreeOfAKind, match_three_of_a_kind),
	CategoryMatcher(HandCategory.Straight, match_straight),
	CategoryMatcher(HandCategory.Flush, match_flush),
	CategoryMatcher(HandCategory.FullHouse, match_full_house),
	CategoryMatcher(HandCategory.FourOfAKind, match_four_of_a_kind),
	CategoryMatcher(HandCategory.StraightFlush, match_straight_flush),
	CategoryMatcher(HandCategory.RoyalFlush, match_royal_flush),
	CategoryMatcher(HandCategory.FiveOfAKind, match_five_of_a_kind),
)

MATCHER_BY_CATEGORY = MappingProxyType({m.category: m for m in MATCHERS})


def match(category: HandCategory, hand) -> Optional[TieBreak]:
	return MATCHER_BY_CATEGORY[category].matches(hand)
