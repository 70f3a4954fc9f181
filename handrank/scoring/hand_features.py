"""
Shape features of a five-card hand that the category matchers share. All functions
are pure and read only rank values and suits.
"""

from collections import Counter
from typing import Dict, List, Optional

WHEEL = [14, 5, 4, 3, 2]
WHEEL_HIGH = 5


def sorted_ranks_desc(hand) -> List[int]:
	return sorted((c.value for c in hand.cards), reverse=True)


def is_flush(hand) -> bool:
	first = hand.cards[0].suit
	return all(c.suit == first for c in hand.cards)


def straight_high(hand) -> Optional[int]:
	"""High rank of a straight, or None. The wheel A-2-3-4-5 reports 5, not 14."""
	u = sorted({c.value for c in hand.cards}, reverse=True)
	if len(u) != 5:
		return None
	if u == WHEEL:
		return WHEEL_HIGH
	i = 0
	while i < 4:
		if (u[i] - u[i + 1]) != 1:
			return None
		i += 1
	return u[0]


def rank_counts(hand) -> Dict[int, int]:
	return dict(Counter(c.value for c in hand.cards))


def ranks_with_count(counts: Dict[int, int], n: int) -> List[int]:
	return sorted((r for r, k in counts.items() if k == n), reverse=True)


def kickers_excluding(hand, excluded) -> List[int]:
	ex = set(excluded)
	return [r for r in sorted_ranks_desc(hand) if r not in ex]
