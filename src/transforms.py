#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################

import logging
from collections.abc import MutableSequence
from datetime import datetime, timedelta
from typing import Iterable, Optional

from task_model import Task


# FUNCTIONS ###########################################################################################################


def remove_assignee_from_all(tasks: Iterable[Task], person: str) -> None:
	"""Removes a person from the assignees of all the tasks, in place.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.
	person : str
		The person to unassign.
	"""

	for task in tasks:
		task.assignees.discard(person)


def extend_deadlines(tasks: Iterable[Task], priority: int, extension: timedelta) -> None:
	"""Shifts the deadlines of the tasks of a given priority, in place.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.
	priority : int
		The priority of the tasks to alter.
	extension : timedelta
		The duration added to the deadlines, may be negative.
	"""

	for task in filter(lambda task: task.priority == priority, tasks):
		task.deadline += extension


def add_assignee_to_task(tasks: Iterable[Task], id: int, person: str) -> bool:
	"""Assigns a person to the first task with a given id.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.
	id : int
		The id of the task.
	person : str
		The person to assign.

	Returns
	-------
	bool
		Returns `False` if no task has this id or if the person is already assigned to it, or `True` otherwise.
	"""

	task = next((task for task in tasks if task.id == id), None)

	if task is None or person in task.assignees:
		return False

	task.assignees.add(person)

	return True


def remove_all_finished(tasks: MutableSequence[Task], now: Optional[datetime] = None) -> int:
	"""Removes, in place, the tasks whose deadline is on or before `now`.
	The remaining tasks keep their relative order.

	Parameters
	----------
	tasks : MutableSequence[Task]
		A collection of tasks, truncated by the operation.
	now : Optional[datetime], optional
		The reference time point (default: `datetime.now()`).

	Returns
	-------
	int
		The number of removed tasks.
	"""

	if now is None:
		now = datetime.now()

	end = 0

	for task in tasks:
		if now < task.deadline:
			tasks[end] = task
			end += 1

	removed = len(tasks) - end
	del tasks[end:]

	logging.debug(f"Removed {removed} finished task(s).")

	return removed
