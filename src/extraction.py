#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from datetime import datetime
from typing import Iterable, Optional, Protocol

from task_model import Task


# CLASSES AND TYPE ALIASES ############################################################################################


class Appendable(Protocol):
	"""A destination accepting tasks one by one, like a `list`."""

	def append(self: Appendable, task: Task) -> None:
		...


# FUNCTIONS ###########################################################################################################


def get_tasks_with_priority(tasks: Iterable[Task], priority: int) -> list[Task]:
	"""Copies the tasks of a given priority.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.
	priority : int
		The priority of the tasks to copy.

	Returns
	-------
	list[Task]
		Independent copies of the matching tasks, in their original order.
	"""

	return [task.copy() for task in tasks if task.priority == priority]


def extract_tasks_with_deadline_before(tasks: MutableSequence[Task], destination: Appendable, deadline: datetime) -> int:
	"""Moves the tasks with a deadline strictly before `deadline` out of the collection.

	Both the moved tasks and the kept ones preserve their relative order. The kept tasks are compacted at the front of
	`tasks`; the slots from the returned index onward are left as they were and must not be read.

	Parameters
	----------
	tasks : MutableSequence[Task]
		A collection of tasks, reordered in place.
	destination : Appendable
		The container receiving the extracted tasks.
	deadline : datetime
		The exclusive threshold.

	Returns
	-------
	end : int
		The new end of the kept tasks within `tasks`.
	"""

	end = 0

	for i in range(len(tasks)):
		task = tasks[i]

		if task.deadline < deadline:
			destination.append(task)
		else:
			if end != i:
				tasks[end] = task
			end += 1

	logging.debug(f"Extracted {len(tasks) - end} task(s) due before {deadline.isoformat()}.")

	return end


def partition_by_deadline(tasks: MutableSequence[Task], deadline: datetime) -> int:
	"""Reorders the tasks so that those with a deadline strictly before `deadline` come first.
	The order within each group is unspecified.

	Parameters
	----------
	tasks : MutableSequence[Task]
		A collection of tasks, reordered in place.
	deadline : datetime
		The exclusive threshold.

	Returns
	-------
	int
		The index of the first task of the second group, which is also the size of the first group.
	"""

	first, last = 0, len(tasks) - 1

	while True:
		while first <= last and tasks[first].deadline < deadline:
			first += 1

		while first <= last and not tasks[last].deadline < deadline:
			last -= 1

		if last < first:
			return first

		tasks[first], tasks[last] = tasks[last], tasks[first]
		first += 1
		last -= 1


def separate_by_deadline(tasks: MutableSequence[Task], deadline: datetime) -> Optional[int]:
	"""Reorders the tasks so that those with a deadline strictly before `deadline` come first.

	Parameters
	----------
	tasks : MutableSequence[Task]
		A collection of tasks, reordered in place.
	deadline : datetime
		The exclusive threshold.

	Returns
	-------
	Optional[int]
		The index of the last task due before `deadline`, or `None` if there is no such task.
	"""

	boundary = partition_by_deadline(tasks, deadline)

	return boundary - 1 if boundary else None
