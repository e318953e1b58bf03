#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################

from __future__ import annotations

from collections.abc import MutableSequence
from itertools import accumulate, groupby
from math import fsum
from typing import Iterable, Iterator, TypeVar

from errors import DegenerateAggregateError

from task_model import Task

from timed import timed_callable


# FUNCTIONS ###########################################################################################################


def total_cost(tasks: Iterable[Task]) -> float:
	"""Sums the costs of all the tasks, `0.0` if there is none."""

	return fsum(task.cost for task in tasks)


def total_cost_of(tasks: Iterable[Task], person: str) -> float:
	"""Sums the costs of the tasks assigned to a person.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.
	person : str
		An assignee.

	Returns
	-------
	float
		The total cost of the tasks of `person`.
	"""

	return fsum(task.cost for task in tasks if person in task.assignees)


def average_cost_of_priority(tasks: Iterable[Task], priority: int) -> float:
	"""Computes the average cost of the tasks of a given priority.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.
	priority : int
		The priority of the tasks to average.

	Returns
	-------
	float
		The mean cost of the matching tasks.

	Raises
	------
	DegenerateAggregateError
		If no task has the priority `priority`.
	"""

	costs = [task.cost for task in tasks if task.priority == priority]

	if not costs:
		raise DegenerateAggregateError(f"Cannot average the costs of priority {priority}: no such task.")

	return fsum(costs) / len(costs)


def cheapest_and_most_expensive(tasks: Iterable[Task]) -> tuple[Task, Task]:
	"""Finds the least and the most expensive tasks.
	When several tasks share an extreme cost, the first one encountered is chosen.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.

	Returns
	-------
	tuple[Task, Task]
		Copies of the cheapest and of the most expensive tasks.

	Raises
	------
	DegenerateAggregateError
		If the collection is empty.
	"""

	iterator = iter(tasks)
	cheapest = most_expensive = next(iterator, None)

	if cheapest is None:
		raise DegenerateAggregateError("Cannot find the extreme costs of an empty collection.")

	for task in iterator:
		if task.cost < cheapest.cost:
			cheapest = task
		elif most_expensive.cost < task.cost:
			most_expensive = task

	return cheapest.copy(), most_expensive.copy()


def iter_cost_burndown(tasks: Iterable[Task]) -> Iterator[float]:
	"""Yields the cumulative cost of the tasks, one point per distinct deadline, by ascending deadline.
	The tasks sharing a deadline contribute the sum of their costs to a single point.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks, not reordered.

	Returns
	-------
	Iterator[float]
		The cumulative costs.
	"""

	_key = lambda task: task.deadline

	return accumulate(fsum(task.cost for task in group) for _deadline, group in groupby(sorted(tasks, key=_key), key=_key))


Output = TypeVar('Output', bound=MutableSequence[float])


@timed_callable("Computing the cost burndown...")
def cost_burndown(tasks: Iterable[Task], output: Output) -> Output:
	"""Appends the cost burndown of the tasks to `output`.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.
	output : MutableSequence[float]
		The container receiving the cumulative costs.

	Returns
	-------
	output : MutableSequence[float]
		`output`, extended with one point per distinct deadline.
	"""

	output.extend(iter_cost_burndown(tasks))

	return output
