#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# CLASSES #############################################################################################################


class TaskAlgorithmError(RuntimeError):
	"""Base class of the errors raised by the task algorithms."""


class OutOfRangeError(TaskAlgorithmError, IndexError):
	"""An index or a count lies outside of the range of a collection."""


class DegenerateAggregateError(TaskAlgorithmError, ArithmeticError):
	"""An aggregate has been requested over zero elements."""
