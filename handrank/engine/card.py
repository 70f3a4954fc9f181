"""
I implement a typed Card with rank and suit enums and two helpers: str for the compact
token and from_string to parse external tokens. Instances are frozen and hashable so
they can be used in sets and maps.

Key class: Card (dataclass frozen, ordered). Ordering compares rank first and suit as a
tiebreak, so 10♣ > 9♠ and A♠ > A♣.

Inputs: Rank and Suit enums or tokens such as "10♠", "A♦", "2♣". Outputs: Card objects
or tokens. Invariants: a token is a rank literal immediately followed by exactly one
suit glyph; anything else raises UnrecognizedToken. Performance: constant time.
"""

from dataclasses import dataclass

from handrank.engine.rank import Rank
from handrank.engine.suit import Suit
from handrank.errors import UnrecognizedToken


@dataclass(frozen=True, order=True)
class Card:
	rank: Rank
	suit: Suit

	@property
	def value(self) -> int:
		return int(self.rank)

	def __str__(self) -> str:
		return f"{self.rank.symbol()}{self.suit.symbol()}"

	@staticmethod
	def from_string(code: str) -> "Card":
		if not isinstance(code, str):
			raise UnrecognizedToken(code, "card token must be a string")
		code = code.strip()
		if len(code) < 2:
			raise UnrecognizedToken(code, "too short to hold a rank and a suit")
		s = Suit.from_symbol(code[-1])
		r = Rank.from_symbol(code[:-1])
		return Card(r, s)
