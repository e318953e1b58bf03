#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################

from __future__ import annotations

import logging
from random import Random
from typing import Optional, Sequence

from errors import DegenerateAggregateError, OutOfRangeError

from task_model import Task

from timed import timed_callable


# FUNCTIONS ###########################################################################################################


def sample_indices(population: int, k: int, rng: Random) -> list[int]:
	"""Draws `k` distinct indices out of `range(population)`, uniformly and without replacement.
	Partial Fisher-Yates shuffle: exactly `k` draws are made.

	Parameters
	----------
	population : int
		The number of indices to choose from.
	k : int
		The number of indices to draw.
	rng : Random
		A random generator.

	Returns
	-------
	list[int]
		The sampled indices, in drawing order.

	Raises
	------
	OutOfRangeError
		If `k` is not within `[0; population]`.
	"""

	if not 0 <= k <= population:
		raise OutOfRangeError(f"Cannot sample {k} index(es) out of {population}.")

	indices = list(range(population))

	for i in range(k):
		j = rng.randrange(i, population)
		indices[i], indices[j] = indices[j], indices[i]

	return indices[:k]


@timed_callable("Estimating the workload...")
def estimate_workload(tasks: Sequence[Task], person: str, rng: Optional[Random] = None) -> float:
	"""Estimates the share of the tasks assigned to a person from a random sample of half of the tasks.

	The sample size is `len(tasks) // 2`, rounded down. The estimation is the fraction of sampled tasks that have
	`person` among their assignees, and may differ from the true share.

	Parameters
	----------
	tasks : Sequence[Task]
		A collection of tasks.
	person : str
		An assignee.
	rng : Optional[Random], optional
		A random generator (default: a new generator seeded by the OS).

	Returns
	-------
	float
		The estimated workload, within `[0; 1]`.

	Raises
	------
	DegenerateAggregateError
		If the sample would be empty, i.e. there are less than two tasks.
	"""

	k = len(tasks) // 2

	if k == 0:
		raise DegenerateAggregateError(f"Cannot estimate a workload from {len(tasks)} task(s): the sample is empty.")

	if rng is None:
		rng = Random()

	count = sum(1 for i in sample_indices(len(tasks), k, rng) if person in tasks[i].assignees)

	logging.debug(f"{person} is assigned to {count} out of {k} sampled task(s).")

	return count / k
