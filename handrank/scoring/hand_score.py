from dataclasses import dataclass, field

from handrank.engine.hand_category import HandCategory
from handrank.scoring.packing import split_score


@dataclass(frozen=True, order=True)
class HandScore:
	"""Winning category and composite score. Ordering and equality use the score only."""

	category: HandCategory = field(compare=False)
	score: int

	@property
	def weight(self) -> int:
		return split_score(self.score)[0]

	@property
	def tiebreak(self) -> int:
		return split_score(self.score)[1]

	def __str__(self) -> str:
		return f"{self.category.label()} ({self.score})"
