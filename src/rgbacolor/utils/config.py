"""Configuration management for rgbacolor"""

import os
import json
from dataclasses import dataclass
from typing import Optional

from rgbacolor.constants import CONFIG_ENV_VAR, CONFIG_FILE, DEFAULT_HEX_PARSER
from rgbacolor.errors import ErrorReason, InvalidArgumentError
from rgbacolor.utils.logger import loggerRaise, set_debug_mode


@dataclass(frozen=True)
class Settings:
	"""User settings read from the config file"""
	hex_parser: str = DEFAULT_HEX_PARSER
	debug: Optional[bool] = None


_settings = None


def get_config_path():
	"""Config file location, honouring the RGBACOLOR_CONFIG override"""
	return os.environ.get(CONFIG_ENV_VAR) or CONFIG_FILE


def load_settings(path=None):
	"""Load settings from a JSON config file

	Args:
		path: Config file path (defaults to get_config_path())

	Returns:
		Settings with defaults for any missing key
	"""
	path = path or get_config_path()
	if not os.path.exists(path):
		return Settings()

	try:
		with open(path, 'r', encoding='utf-8') as f:
			config = json.load(f)
	except (OSError, ValueError) as e:
		loggerRaise(InvalidArgumentError(
			f"Error loading config '{path}': {e}",
			ErrorReason.INVALID_CONFIG, 'config', path))

	if not isinstance(config, dict):
		loggerRaise(InvalidArgumentError(
			"Config file must contain a JSON object",
			ErrorReason.WRONG_TYPE, 'config', config))

	hex_parser = config.get('hex_parser', DEFAULT_HEX_PARSER)
	if not isinstance(hex_parser, str):
		loggerRaise(InvalidArgumentError(
			"Config 'hex_parser' must be a string",
			ErrorReason.WRONG_TYPE, 'hex_parser', hex_parser))

	# Imported here to keep the parser package free of config imports
	from rgbacolor.services.hex_parsers import AVAILABLE_PARSERS
	if hex_parser not in AVAILABLE_PARSERS:
		loggerRaise(InvalidArgumentError(
			f"Unknown hex parser '{hex_parser}' in config; expected one of {sorted(AVAILABLE_PARSERS)}",
			ErrorReason.UNKNOWN_PARSER, 'hex_parser', hex_parser))

	debug = config.get('debug')
	if debug is not None and not isinstance(debug, bool):
		loggerRaise(InvalidArgumentError(
			"Config 'debug' must be true or false",
			ErrorReason.WRONG_TYPE, 'debug', debug))

	return Settings(hex_parser=hex_parser, debug=debug)


def get_settings():
	"""Cached settings; loads the config file on first use"""
	global _settings
	if _settings is None:
		_settings = load_settings()
		if _settings.debug is not None:
			set_debug_mode(_settings.debug)
	return _settings


def reset_settings():
	"""Drop cached settings so the next get_settings() re-reads the file"""
	global _settings
	_settings = None
