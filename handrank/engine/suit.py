"""
I define Suit as an IntEnum with four values and glyph helpers. I use the ♣ ♦ ♥ ♠
glyphs that card tokens carry. The numeric order (Club < Diamond < Heart < Spade) only
breaks ties between equal-rank cards; hand scoring never reads it.

Key class: Suit; methods symbol (suit to glyph) and from_symbol (glyph to suit).
"""

from enum import IntEnum

from handrank.errors import UnrecognizedToken


class Suit(IntEnum):
	Club = 0
	Diamond = 1
	Heart = 2
	Spade = 3

	def symbol(self) -> str:
		return _SYMBOLS[self]

	@staticmethod
	def from_symbol(text: str) -> "Suit":
		if text not in _BY_SYMBOL:
			raise UnrecognizedToken(text, "unknown suit symbol")
		return _BY_SYMBOL[text]


_SYMBOLS = {
	Suit.Club: "♣",
	Suit.Diamond: "♦",
	Suit.Heart: "♥",
	Suit.Spade: "♠",
}

_BY_SYMBOL = {v: k for k, v in _SYMBOLS.items()}
