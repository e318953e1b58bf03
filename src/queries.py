#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################

from datetime import datetime
from typing import Iterable

from task_model import Task


# FUNCTIONS ###########################################################################################################


def has_all_assigned(tasks: Iterable[Task]) -> bool:
	"""Checks if every task has at least one assignee.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.

	Returns
	-------
	bool
		Returns `True` if no task is left unassigned (including when there is no task), or `False` otherwise.
	"""

	return all(task.assignees for task in tasks)


def has_task_with_deadline_after(tasks: Iterable[Task], deadline: datetime) -> bool:
	"""Checks if any task has a deadline strictly after `deadline`."""

	return any(task.deadline > deadline for task in tasks)


def count_with_deadline_before(tasks: Iterable[Task], deadline: datetime) -> int:
	"""Counts the tasks with a deadline strictly before `deadline`."""

	return sum(1 for task in tasks if task.deadline < deadline)
