"""
Command-line wrapper around evaluate: score one or more hands under the default or a
configured category ordering.

    handrank-score "A♠,K♠,Q♠,J♠,10♠" "9♠,8♠,7♠,6♠,5♠" --weight HighCard=1000 --rank
"""

import argparse
import json
import sys
from typing import Dict, List, Optional

from handrank.category_config import CategoryConfig
from handrank.config_io import load_category_config
from handrank.engine.hand import Hand
from handrank.errors import HandRankError
from handrank.scoring.batch import rank_hands
from handrank.scoring.evaluator import evaluate
from handrank.utils.log_setup import configure_logging, get_logger

logger = get_logger(__name__)


def _parse_weight_flags(items: List[str]) -> Dict[str, str]:
	out: Dict[str, str] = {}
	for item in items or []:
		if "=" not in item:
			raise argparse.ArgumentTypeError(f"expected CATEGORY=WEIGHT, got {item!r}")
		k, v = item.split("=", 1)
		out[k.strip()] = v.strip()
	return out


def _build_config(args) -> CategoryConfig:
	if args.config:
		cfg = load_category_config(args.config)
	else:
		cfg = CategoryConfig.from_env()

	overrides = _parse_weight_flags(args.weight)
	if overrides:
		cfg = cfg.with_overrides(overrides)
	return cfg


def _record(hand: Hand, result, position: Optional[int] = None) -> dict:
	rec = {
	 "hand": str(hand),
	 "category": result.category.name,
	 "label": result.category.label(),
	 "score": int(result.score),
	}
	if position is not None:
		rec["rank"] = int(position)
	return rec


def _emit(rec: dict, as_json: bool, out) -> None:
	if as_json:
		print(json.dumps(rec, ensure_ascii=False, sort_keys=True), file=out)
		return
	prefix = f"{rec['rank']}. " if "rank" in rec else ""
	print(f"{prefix}{rec['hand']}\t{rec['label']}\t{rec['score']}", file=out)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
	 prog="handrank-score",
	 add_help=True,
	 description="Classify and score five-card poker hands.",
	)
	parser.add_argument("hands", nargs="+", help='hand such as "A♠,K♠,Q♠,J♠,10♠"')
	parser.add_argument("--config", type=str, default="", help="YAML or JSON weights file")
	parser.add_argument(
	 "--weight",
	 action="append",
	 default=[],
	 metavar="CATEGORY=N",
	 help="override one category weight; repeatable",
	)
	parser.add_argument("--rank", action="store_true", help="print hands best first")
	parser.add_argument("--json", action="store_true", help="print JSON records")
	parser.add_argument("-v", "--verbose", action="count", default=0)
	return parser


def run_score_cli(argv: Optional[list] = None, out=None, err=None) -> int:
	out = out if out is not None else sys.stdout
	err = err if err is not None else sys.stderr

	args = build_parser().parse_args(argv)
	configure_logging(args.verbose, stream=err)

	try:
		cfg = _build_config(args)
		hands = [Hand.from_string(h) for h in args.hands]
	except (HandRankError, argparse.ArgumentTypeError, OSError) as e:
		print(f"error: {e}", file=err)
		return 2

	logger.info("scoring %d hand(s) with weights %s", len(hands), cfg.as_dict())

	results = [evaluate(h, cfg) for h in hands]

	if args.rank:
		order = rank_hands(hands, cfg)
		for pos, idx in enumerate(order, start=1):
			_emit(_record(hands[int(idx)], results[int(idx)], pos), args.json, out)
	else:
		for h, r in zip(hands, results):
			_emit(_record(h, r), args.json, out)

	return 0


def main() -> None:
	sys.exit(run_score_cli())


if __name__ == "__main__":
	main()
