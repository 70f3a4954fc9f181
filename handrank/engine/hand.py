"""
I hold exactly five cards as an immutable tuple. I keep the cards in the order they
were given so str(hand) echoes the input, but equality and hashing ignore that order:
two hands are equal when they hold the same multiset of cards.

Key class: Hand (frozen dataclass). Key methods: from_string parses "A♠,K♠,Q♠,J♠,10♠";
sorted_cards returns the cards in ascending Card order.

Invariants: len(cards) == 5 and every item is a Card, checked at construction;
MalformedHand is raised otherwise. Duplicate cards are allowed (five-of-a-kind hands
repeat the same card).
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from handrank.constants import HAND_SIZE
from handrank.engine.card import Card
from handrank.errors import MalformedHand


@dataclass(frozen=True, eq=False)
class Hand:
	cards: Tuple[Card, ...]

	def __post_init__(self):
		cards = tuple(self.cards)
		if len(cards) != HAND_SIZE:
			raise MalformedHand(
			 cards, f"expected {HAND_SIZE} cards, got {len(cards)}", parts=len(cards)
			)
		for c in cards:
			if not isinstance(c, Card):
				raise MalformedHand(cards, f"not a card: {c!r}")
		object.__setattr__(self, "cards", cards)

	@staticmethod
	def of(*cards: Card) -> "Hand":
		return Hand(tuple(cards))

	@staticmethod
	def from_string(text: str) -> "Hand":
		if not isinstance(text, str):
			raise MalformedHand(text, "hand token must be a string")
		parts = text.split(",")
		if len(parts) != HAND_SIZE:
			raise MalformedHand(
			 text, f"expected {HAND_SIZE} comma-separated cards, got {len(parts)}", parts=len(parts)
			)
		return Hand(tuple(Card.from_string(p) for p in parts))

	@staticmethod
	def from_cards(cards: Iterable[Card]) -> "Hand":
		return Hand(tuple(cards))

	def sorted_cards(self) -> Tuple[Card, ...]:
		return tuple(sorted(self.cards))

	def __iter__(self):
		return iter(self.cards)

	def __len__(self) -> int:
		return len(self.cards)

	def __eq__(self, other):
		if not isinstance(other, Hand):
			return NotImplemented
		return self.sorted_cards() == other.sorted_cards()

	def __hash__(self) -> int:
		return hash(self.sorted_cards())

	def __str__(self) -> str:
		return ",".join(str(c) for c in self.cards)
