"""
I hold the category strength weights that the composite score puts in its high-order
bits. I expose CategoryConfig, an immutable mapping from HandCategory to an unsigned
weight with the category's classical index as the fallback, plus helpers that build
one from loosely typed input (files, env, CLI flags).

Key class: CategoryConfig, frozen; weight(category) returns the override if present,
else the category's default. from_mapping coerces names and values; from_env layers an
optional weights file named by HANDRANK_CONFIG and explicit overrides.

Invariants: every stored weight is an int in [0, MAX_WEIGHT], so (weight << 20) never
leaves a 64-bit score and never touches the 20 tiebreak bits. Out-of-range, negative
or non-integral weights raise ConfigurationHazard instead of being clamped. An empty
config reproduces classical poker order exactly.

Edge cases: two categories that end up with the same effective weight are legal; the
raw tiebreak then decides between them. I report such collisions through hazards() and
a logged warning, not an exception.
"""

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from handrank.constants import CONFIG_ENV_VAR, MAX_WEIGHT
from handrank.engine.hand_category import HandCategory
from handrank.errors import ConfigurationHazard
from handrank.utils.log_setup import get_logger

logger = get_logger(__name__)


def _coerce_weight(category: HandCategory, x: Any) -> int:
	if isinstance(x, bool):
		raise ConfigurationHazard(category.name, x, "weight must be an integer, not a bool")

	if isinstance(x, int):
		v = int(x)
	elif isinstance(x, float):
		if not x.is_integer():
			raise ConfigurationHazard(category.name, x, "weight must be integral")
		v = int(x)
	elif isinstance(x, str):
		s = x.strip()
		sign_ok = (s.startswith("-") and s[1:].isdecimal()) or s.isdecimal()
		if not sign_ok:
			raise ConfigurationHazard(category.name, x, "weight must be an integer")
		try:
			v = int(s)
		except ValueError:
			raise ConfigurationHazard(category.name, x, "weight must be an integer") from None
	elif hasattr(x, "__index__"):
		v = int(x.__index__())
	else:
		raise ConfigurationHazard(category.name, x, "weight must be an integer")

	if v < 0:
		raise ConfigurationHazard(category.name, v, "weight must be unsigned")
	if v > MAX_WEIGHT:
		raise ConfigurationHazard(
		 category.name, v, f"weight exceeds the safe ceiling {MAX_WEIGHT}"
		)
	return v


def _coerce_category(key: Any) -> HandCategory:
	try:
		return HandCategory.from_name(key)
	except KeyError:
		raise ConfigurationHazard(key, None, "unknown hand category") from None


@dataclass(frozen=True)
class CategoryConfig:
	weights: Mapping[HandCategory, int] = field(default_factory=dict)

	def __post_init__(self):
		clean: Dict[HandCategory, int] = {}
		for k, v in dict(self.weights).items():
			cat = _coerce_category(k)
			clean[cat] = _coerce_weight(cat, v)
		object.__setattr__(self, "weights", MappingProxyType(clean))

		for msg in self.hazards():
			logger.warning("category weights: %s", msg)

	def __hash__(self) -> int:
		return hash(frozenset(self.weights.items()))

	@staticmethod
	def default() -> "CategoryConfig":
		return CategoryConfig()

	@staticmethod
	def from_mapping(mapping: Optional[Mapping[Any, Any]]) -> "CategoryConfig":
		if mapping is None:
			return CategoryConfig()
		if not isinstance(mapping, Mapping):
			raise ConfigurationHazard("<config>", mapping, "weights must be a mapping")
		return CategoryConfig(dict(mapping))

	@staticmethod
	def from_env(
	 overrides: Optional[Mapping[Any, Any]] = None
	) -> "CategoryConfig":
		merged: Dict[HandCategory, Any] = {}

		path = os.getenv(CONFIG_ENV_VAR, "").strip()
		if path:
			from handrank.config_io import load_weights

			logger.info("loading category weights from %s", path)
			for k, v in load_weights(path).items():
				merged[_coerce_category(k)] = v

		if overrides:
			for k, v in overrides.items():
				merged[_coerce_category(k)] = v

		return CategoryConfig(merged)

	def weight(self, category: HandCategory) -> int:
		if category in self.weights:
			return self.weights[category]
		return int(category.value)

	def effective_weights(self) -> Dict[HandCategory, int]:
		return {c: self.weight(c) for c in HandCategory}

	def as_dict(self) -> Dict[str, int]:
		return {c.name: int(w) for c, w in sorted(self.weights.items())}

	def with_overrides(self, overrides: Mapping[Any, Any]) -> "CategoryConfig":
		merged: Dict[HandCategory, Any] = dict(self.weights)
		for k, v in overrides.items():
			merged[_coerce_category(k)] = v
		return CategoryConfig(merged)

	def hazards(self) -> List[str]:
		by_weight: Dict[int, List[HandCategory]] = {}
		for c, w in self.effective_weights().items():
			by_weight.setdefault(w, []).append(c)

		out = []
		for w in sorted(by_weight):
			cats = by_weight[w]
			if len(cats) > 1:
				names = ", ".join(c.name for c in cats)
				out.append(f"{names} share weight {w}; raw tiebreak decides between them")
		return out
