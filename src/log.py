#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################


from __future__ import annotations

import logging


# CLASSES #############################################################################################################


class ColoredHandler(logging.StreamHandler):
	"""A stream handler colouring the records according to their level.

	Attributes
	----------
	colors : dict[int, str]
		The ANSI escape sequence of each logging level.
	"""

	colors: dict[int, str] = {
		logging.DEBUG: "\033[36m",
		logging.INFO: "\033[32m",
		logging.WARNING: "\033[33m",
		logging.ERROR: "\033[31m",
		logging.CRITICAL: "\033[1;31m",
	}
	reset = "\033[0m"

	def __init__(self: ColoredHandler, verbose: bool = False) -> None:
		super().__init__()
		self.setLevel(logging.DEBUG if verbose else logging.INFO)
		self.setFormatter(logging.Formatter("%(levelname)s\t%(message)s"))

	def format(self: ColoredHandler, record: logging.LogRecord) -> str:
		"""Formats a record and wraps it into the color of its level.

		Parameters
		----------
		record : LogRecord
			A log record.

		Returns
		-------
		str
			The colored message.
		"""

		return self.colors.get(record.levelno, "") + super().format(record) + self.reset


# FUNCTIONS ###########################################################################################################


def setup_logging(verbose: bool = False) -> ColoredHandler:
	"""Installs a `ColoredHandler` on the root logger, reusing the one already installed if any.

	Parameters
	----------
	verbose : bool, optional
		Toggles the debug messages (default: False).

	Returns
	-------
	ColoredHandler
		The handler attached to the root logger.
	"""

	root = logging.getLogger()
	handler = next((h for h in root.handlers if isinstance(h, ColoredHandler)), None)

	if handler is None:
		handler = ColoredHandler(verbose)
		root.addHandler(handler)
	else:
		handler.setLevel(logging.DEBUG if verbose else logging.INFO)

	root.setLevel(handler.level)

	return handler
