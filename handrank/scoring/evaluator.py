"""
I pick the best-scoring category for a five-card hand under a CategoryConfig.

evaluate runs every matcher in MATCHERS, scores each match with the configured weight
and keeps the strict maximum, starting from the HighCard score since HighCard always
matches. Matcher order does not matter; only the maximum is kept, and equal maxima are
interchangeable for ranking, so the first one found is returned. Because the weight
sits above the 20 tiebreak bits, raising a category's weight above every other weight
makes it win whenever it matches, even against a royal flush.

Key functions: evaluate(hand, config) -> HandScore; evaluate_string(text, config);
candidates(hand, config) -> all matching HandScores.

Invariants: no caches or module state, so concurrent calls over shared hands and
configs need no locking.
"""

from typing import List, Optional

from handrank.category_config import CategoryConfig
from handrank.engine.hand import Hand
from handrank.engine.hand_category import HandCategory
from handrank.scoring.hand_score import HandScore
from handrank.scoring.matchers import MATCHERS, match
from handrank.scoring.packing import composite_score, pack
from handrank.utils.log_setup import get_logger

logger = get_logger(__name__)

_EMPTY = CategoryConfig()


def _config_or_default(config: Optional[CategoryConfig]) -> CategoryConfig:
	if config is None:
		return _EMPTY
	return config


def candidates(hand: Hand, config: Optional[CategoryConfig] = None) -> List[HandScore]:
	cfg = _config_or_default(config)
	out = []
	for m in MATCHERS:
		tb = m.matches(hand)
		if tb is None:
			continue
		out.append(
		 HandScore(category=m.category, score=composite_score(cfg, m.category, pack(*tb)))
		)
	return out


def evaluate(hand: Hand, config: Optional[CategoryConfig] = None) -> HandScore:
	cfg = _config_or_default(config)

	base = match(HandCategory.HighCard, hand)
	best = HandScore(
	 category=HandCategory.HighCard,
	 score=composite_score(cfg, HandCategory.HighCard, pack(*base)),
	)

	for m in MATCHERS:
		tb = m.matches(hand)
		if tb is None:
			continue
		value = composite_score(cfg, m.category, pack(*tb))
		logger.debug("%s matches %s -> %d", hand, m.category.name, value)
		if value > best.score:
			best = HandScore(category=m.category, score=value)

	logger.debug("%s evaluated as %s", hand, best)
	return best


def evaluate_string(text: str, config: Optional[CategoryConfig] = None) -> HandScore:
	return evaluate(Hand.from_string(text), config)
