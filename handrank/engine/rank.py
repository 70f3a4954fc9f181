"""
I define Rank as an IntEnum whose values are the scoring strengths 2..14 (Two low, Ace
high). The integer value is the only thing the matchers consume.

Key class: Rank with values Two..Ace; symbol maps to 2..10,J,Q,K,A and from_symbol
parses those exact literals back.

Invariants: mapping is total and fixed; Ten renders as "10", never "T".
"""

from enum import IntEnum

from handrank.errors import UnrecognizedToken


class Rank(IntEnum):
	Two = 2
	Three = 3
	Four = 4
	Five = 5
	Six = 6
	Seven = 7
	Eight = 8
	Nine = 9
	Ten = 10
	Jack = 11
	Queen = 12
	King = 13
	Ace = 14

	def symbol(self) -> str:
		m = {
			2: "2",
			3: "3",
			4: "4",
			5: "5",
			6: "6",
			7: "7",
			8: "8",
			9: "9",
			10: "10",
			11: "J",
			12: "Q",
			13: "K",
			14: "A",
		}

		return m[int(self)]

	@staticmethod
	def from_symbol(text: str) -> "Rank":
		for r in Rank:
			if r.symbol() == text:
				return r
		raise UnrecognizedToken(text, "unknown rank")
