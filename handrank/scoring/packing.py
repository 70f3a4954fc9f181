"""
I turn a matcher's tiebreak values into one 20-bit integer and combine it with a
category weight into the composite score.

pack places each value (low 4 bits) into five nibble slots from most to least
significant, in call order; slots after the supplied values are zero. So pack(14, 13)
is 0xED000 and pack(5) is 0x50000. Ranks are 2..14 and always fit a nibble.

composite_score(config, category, tiebreak) is
(config.weight(category) << 20) | (tiebreak & 0xFFFFF). The weight always dominates,
so two hands compare by category weight first and by tiebreak only on equal weights.
"""

from typing import Tuple

from handrank.constants import (
	NIBBLE_BITS,
	NIBBLE_MASK,
	NIBBLE_SLOTS,
	TIEBREAK_BITS,
	TIEBREAK_MASK,
)


def pack(*values: int) -> int:
	if len(values) > NIBBLE_SLOTS:
		raise ValueError(f"at most {NIBBLE_SLOTS} tiebreak values, got {len(values)}")

	res = 0
	for i in range(NIBBLE_SLOTS):
		v = int(values[i]) if i < len(values) else 0
		res = (res << NIBBLE_BITS) | (v & NIBBLE_MASK)
	return res


def unpack(raw: int) -> Tuple[int, ...]:
	out = []
	for i in range(NIBBLE_SLOTS):
		shift = NIBBLE_BITS * (NIBBLE_SLOTS - 1 - i)
		out.append((int(raw) >> shift) & NIBBLE_MASK)
	return tuple(out)


def compose(weight: int, tiebreak: int) -> int:
	return (int(weight) << TIEBREAK_BITS) | (int(tiebreak) & TIEBREAK_MASK)


def composite_score(config, category, tiebreak: int) -> int:
	return compose(config.weight(category), tiebreak)


def split_score(score: int) -> Tuple[int, int]:
	score = int(score)
	return score >> TIEBREAK_BITS, score & TIEBREAK_MASK
