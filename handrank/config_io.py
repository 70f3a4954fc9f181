import json
import os

import yaml

from handrank.category_config import CategoryConfig
from handrank.errors import ConfigurationHazard


def _is_yaml_path(path) -> bool:
	ext = os.path.splitext(str(path))[1].lower()
	return ext in (".yml", ".yaml")


def save_config(config, path):
	if isinstance(config, CategoryConfig):
		data = {"weights": config.as_dict()}
	elif isinstance(config, dict):
		data = dict(config)
	else:
		data = {}

	dirn = os.path.dirname(str(path))
	if dirn:
		if not os.path.isdir(dirn):
			os.makedirs(dirn, exist_ok=True)

	if _is_yaml_path(path):
		with open(path, "w", encoding="utf-8") as f:
			yaml.safe_dump(data, f, sort_keys=True)
	else:
		with open(path, "w", encoding="utf-8") as f:
			json.dump(data, f, indent=2, sort_keys=True)

	return path


def load_config(path):
	if _is_yaml_path(path):
		with open(path, "r", encoding="utf-8") as f:
			try:
				out = yaml.safe_load(f)
			except (yaml.YAMLError, UnicodeDecodeError) as e:
				raise ConfigurationHazard(str(path), None, f"cannot parse weights file: {e}") from e
		if out:
			return out
		else:
			return {}

	with open(path, "r", encoding="utf-8") as f:
		try:
			return json.load(f)
		except ValueError as e:
			raise ConfigurationHazard(str(path), None, f"cannot parse weights file: {e}") from e


def load_weights(path):
	data = load_config(path)

	if not isinstance(data, dict):
		raise ConfigurationHazard(str(path), data, "weights file must hold a mapping")

	if "weights" in data:
		data = data["weights"]
		if data is None:
			return {}
		if not isinstance(data, dict):
			raise ConfigurationHazard(str(path), data, "'weights' must be a mapping")

	return dict(data)


def load_category_config(path) -> CategoryConfig:
	return CategoryConfig.from_mapping(load_weights(path))
