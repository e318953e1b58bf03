#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################


import logging
from functools import wraps
from time import process_time
from typing import Any, Callable, TypeVar


# FUNCTIONS ###########################################################################################################


F = TypeVar('F', bound=Callable[..., Any])


def timed_callable(message: str) -> Callable[[F], F]:
	"""Decorates a callable so that its start and duration are logged.

	Parameters
	----------
	message : str
		A message logged when the callable starts.

	Returns
	-------
	Callable[[F], F]
		The decorator.
	"""

	def decorator(function: F) -> F:
		@wraps(function)
		def wrapper(*args: Any, **kwargs: Any) -> Any:
			logging.debug(message)
			start = process_time()
			result = function(*args, **kwargs)
			logging.debug(f"{function.__name__} done in {process_time() - start}s.")

			return result

		return wrapper  # type: ignore

	return decorator
