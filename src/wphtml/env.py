import os
from typing import Literal, cast

HTMLMode = Literal["dev", "ci", "prod"]

ENV_WPHTML_MODE = "WPHTML_MODE"

_MODES: set[str] = {"dev", "ci", "prod"}


def current_mode() -> HTMLMode:
	"""Resolve the mode from the environment. Unknown values fall back to dev."""
	mode = os.environ.get(ENV_WPHTML_MODE, "dev").strip().lower()
	if mode not in _MODES:
		mode = "dev"
	return cast(HTMLMode, mode)


def is_debug() -> bool:
	return current_mode() != "prod"


__all__ = ["ENV_WPHTML_MODE", "HTMLMode", "current_mode", "is_debug"]
