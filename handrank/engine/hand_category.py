"""
I define the eleven hand categories. Each member's value is its default strength
weight, so the enum order is the classical poker order and an empty CategoryConfig
reproduces it exactly.

Key class: HandCategory; label gives a display name, from_name accepts "FullHouse",
"full_house" or "Full House".
"""

from enum import IntEnum


class HandCategory(IntEnum):
	HighCard = 0
	OnePair = 1
	TwoPair = 2
	ThreeOfAKind = 3
	Straight = 4
	Flush = 5
	FullHouse = 6
	FourOfAKind = 7
	StraightFlush = 8
	RoyalFlush = 9
	FiveOfAKind = 10

	@property
	def default_weight(self) -> int:
		return int(self.value)

	def label(self) -> str:
		return _LABELS[self]

	@staticmethod
	def from_name(name) -> "HandCategory":
		if isinstance(name, HandCategory):
			return name
		key = _normalize(str(name))
		for c in HandCategory:
			if key == _normalize(c.name):
				return c
		raise KeyError(name)


def _normalize(s: str) -> str:
	return "".join(ch for ch in s.lower() if ch.isalnum())


_LABELS = {
	HandCategory.HighCard: "High Card",
	HandCategory.OnePair: "One Pair",
	HandCategory.TwoPair: "Two Pair",
	HandCategory.ThreeOfAKind: "Three of a Kind",
	HandCategory.Straight: "Straight",
	HandCategory.Flush: "Flush",
	HandCategory.FullHouse: "Full House",
	HandCategory.FourOfAKind: "Four of a Kind",
	HandCategory.StraightFlush: "Straight Flush",
	HandCategory.RoyalFlush: "Royal Flush",
	HandCategory.FiveOfAKind: "Five of a Kind",
}
