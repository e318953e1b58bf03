#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################

from __future__ import annotations

import logging
from json import load
from pathlib import Path
from random import Random
from typing import NamedTuple, Optional

from log import ColoredHandler, setup_logging


# CLASSES AND TYPE ALIASES ############################################################################################


class Parameters(NamedTuple):
	"""Holds the parameters of the task algorithms.

	Attributes
	----------
	seed : Optional[int]
		The seed of the random generator used for sampling, `None` meaning a seed drawn from the OS.
	verbose : bool
		Toggles the debug messages.
	"""

	seed: Optional[int]
	verbose: bool

	def rng(self: Parameters) -> Random:
		"""Creates a random generator from the seed.

		Parameters
		----------
		self : Parameters
			The instance of `Parameters`.

		Returns
		-------
		Random
			A new generator, seeded with `self.seed`.
		"""

		return Random(self.seed)

	def install_logging(self: Parameters) -> ColoredHandler:
		"""Installs the colored handler on the root logger, with the debug messages toggled by `self.verbose`.

		Parameters
		----------
		self : Parameters
			The instance of `Parameters`.

		Returns
		-------
		ColoredHandler
			The handler attached to the root logger.
		"""

		return setup_logging(self.verbose)

	def pformat(self: Parameters, level: int = 0) -> str:
		"""A complete description of the parameters.

		Parameters
		----------
		self : Parameters
			The instance of `Parameters`.
		level : int, optional
			The indentation level (default: 0).

		Returns
		-------
		str
			The complete description.
		"""

		i = "\n" + ("\t" * level)

		return (f"{i}params {{{i}"
			f"\tseed : {self.seed}{i}"
			f"\tverbose : {self.verbose};{i}}}")


# FUNCTIONS ###########################################################################################################


def _read_config(filepath: Path) -> dict:
	"""Reads a JSON configuration file.

	Parameters
	----------
	filepath : Path
		A `Path` to a JSON file.

	Returns
	-------
	dict
		The configuration, empty if the file does not exist.

	Raises
	------
	ValueError
		If the file does not hold a JSON object.
	"""

	if not filepath.is_file():
		logging.warning(f"No configuration file found at '{filepath}', using the defaults.")
		return {}

	with open(filepath) as config_file:
		config = load(config_file)

	if not isinstance(config, dict):
		raise ValueError(f"The configuration in '{filepath}' should be a JSON object, got {type(config).__name__}.")

	return config


def load_parameters(
	filepath: Path = Path("config.json"),
	seed: Optional[int] = None,
	verbose: Optional[bool] = None,
) -> Parameters:
	"""Creates the parameters from the arguments and the configuration file.
	The arguments have priority over the configuration file.

	Parameters
	----------
	filepath : Path, optional
		A `Path` to a JSON configuration file (default: `config.json`).
	seed : Optional[int], optional
		The seed of the random generator (default: None).
	verbose : Optional[bool], optional
		Toggles the debug messages (default: None).

	Returns
	-------
	params : Parameters
		The parameters.
	"""

	config = _read_config(filepath)

	_or = lambda base, backup: base if base is not None else backup
	or_in = lambda d, k, backup: d[k] if k in d else backup

	params = Parameters(
		_or(seed, or_in(config, "seed", None)),
		bool(_or(verbose, or_in(config, "verbose", False))),
	)

	logging.debug("Loaded parameters:" + params.pformat(1))

	return params
