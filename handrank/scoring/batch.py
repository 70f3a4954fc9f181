"""
I score many hands at once into NumPy arrays for ranking. Each hand is evaluated on
its own, so the work can be split across threads or processes with no coordination.

Scores are uint64, the width MAX_WEIGHT is derived from, so no configured weight can
overflow an array slot.
"""

from typing import Iterable, Optional

import numpy as np

from handrank.category_config import CategoryConfig
from handrank.engine.hand import Hand
from handrank.scoring.evaluator import evaluate


def _as_hand(h) -> Hand:
	if isinstance(h, Hand):
		return h
	return Hand.from_string(h)


def score_array(hands: Iterable, config: Optional[CategoryConfig] = None) -> np.ndarray:
	scores = [evaluate(_as_hand(h), config).score for h in hands]
	return np.asarray(scores, dtype=np.uint64)


def rank_hands(hands: Iterable, config: Optional[CategoryConfig] = None) -> np.ndarray:
	"""Indices of hands from best to worst; equal scores keep their input order."""
	scores = score_array(hands, config)
	if scores.size == 0:
		return np.zeros(0, dtype=np.int64)
	# stable ascending sort on the negated order key keeps ties in input order
	order = np.argsort(np.uint64(np.iinfo(np.uint64).max) - scores, kind="stable")
	return order.astype(np.int64)


def compare_hands(a, b, config: Optional[CategoryConfig] = None) -> int:
	sa = evaluate(_as_hand(a), config).score
	sb = evaluate(_as_hand(b), config).score
	return (sa > sb) - (sa < sb)
