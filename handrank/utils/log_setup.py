"""
I hand out package loggers under the "handrank" namespace and let entry points pick a
verbosity. Library modules only call get_logger; configure_logging is for CLIs and
tests and is safe to call more than once.
"""

import logging

ROOT_LOGGER = "handrank"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
	if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
		return logging.getLogger(name)
	return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def level_for_verbosity(verbosity: int) -> int:
	if verbosity >= 2:
		return logging.DEBUG
	if verbosity == 1:
		return logging.INFO
	return logging.WARNING


def configure_logging(verbosity: int = 0, stream=None) -> logging.Logger:
	root = logging.getLogger(ROOT_LOGGER)
	root.setLevel(level_for_verbosity(int(verbosity)))

	for h in list(root.handlers):
		if getattr(h, "_handrank_cli", False):
			root.removeHandler(h)

	handler = logging.StreamHandler(stream)
	handler.setFormatter(logging.Formatter(_FORMAT))
	handler._handrank_cli = True
	root.addHandler(handler)
	return root
