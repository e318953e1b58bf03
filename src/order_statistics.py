#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Iterable, Sequence

from errors import OutOfRangeError

from sortedcontainers import SortedKeyList  # type: ignore

from task_model import IdPriority, Task, completion_key

from timed import timed_callable


# FUNCTIONS ###########################################################################################################


def _median_of_three(tasks: Sequence[Task], low: int, high: int) -> int:
	"""Chooses a pivot among the first, middle and last tasks of a range.

	Parameters
	----------
	tasks : Sequence[Task]
		A collection of tasks.
	low : int
		The first index of the range.
	high : int
		The last index of the range, inclusive.

	Returns
	-------
	int
		The index of the task whose completion key is the median of the three candidates.
	"""

	mid = (low + high) // 2
	candidates = sorted((low, mid, high), key=lambda i: completion_key(tasks[i]))

	return candidates[1]


def _partition(tasks: MutableSequence[Task], low: int, high: int) -> tuple[int, int]:
	"""Three-way partition of `tasks[low:high + 1]` around a median-of-three pivot.
	The tasks completing before the pivot come first, then the ones tied with it, then the ones completing after it.

	Returns
	-------
	tuple[int, int]
		The bounds `[lt; gt)` of the tasks tied with the pivot.
	"""

	pivot = completion_key(tasks[_median_of_three(tasks, low, high)])
	lt, i, gt = low, low, high + 1

	while i < gt:
		key = completion_key(tasks[i])

		if key < pivot:
			tasks[lt], tasks[i] = tasks[i], tasks[lt]
			lt += 1
			i += 1
		elif pivot < key:
			gt -= 1
			tasks[gt], tasks[i] = tasks[i], tasks[gt]
		else:
			i += 1

	return lt, gt


def list_sorted_by_priority(tasks: Iterable[Task]) -> list[IdPriority]:
	"""Lists the id and priority of all the tasks, by ascending priority then id.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.

	Returns
	-------
	list[IdPriority]
		The sorted pairs.
	"""

	return sorted((IdPriority(task.id, task.priority) for task in tasks), key=lambda p: (p.priority, p.id))


def get_nth_to_complete(tasks: MutableSequence[Task], n: int) -> Task:
	"""Selects the nth task to complete, ordering by deadline then priority.

	The tasks are partially reordered in place: afterwards `tasks[n]` is the selected task, no task before it completes
	later and no task after it completes earlier. The returned task is the element of `tasks` itself, not a copy; it
	only remains the nth task to complete as long as the collection is not modified.

	Parameters
	----------
	tasks : MutableSequence[Task]
		A collection of tasks, reordered in place.
	n : int
		The 0-based rank in completion order.

	Returns
	-------
	Task
		The nth task to complete.

	Raises
	------
	OutOfRangeError
		If `n` is not within `[0; len(tasks))`.
	"""

	if not 0 <= n < len(tasks):
		raise OutOfRangeError(f"Cannot select the task of rank {n} among {len(tasks)} task(s).")

	low, high = 0, len(tasks) - 1

	while low < high:
		lt, gt = _partition(tasks, low, high)

		if n < lt:
			high = lt - 1
		elif gt <= n:
			low = gt
		else:
			break

	return tasks[n]


@timed_callable("Selecting the first tasks to complete...")
def get_first_n_to_complete(tasks: Iterable[Task], n: int) -> list[Task]:
	"""Copies the first n tasks to complete, sorted by deadline then priority.
	The collection itself is left untouched.

	Parameters
	----------
	tasks : Iterable[Task]
		A collection of tasks.
	n : int
		The number of tasks to copy.

	Returns
	-------
	list[Task]
		Copies of the `n` first tasks in completion order.

	Raises
	------
	OutOfRangeError
		If `n` is negative or greater than the number of tasks.
	"""

	if n < 0:
		raise OutOfRangeError(f"Cannot select {n} task(s).")

	first: SortedKeyList = SortedKeyList(key=completion_key)
	count = 0

	for task in tasks:
		count += 1
		first.add(task)

		if n < len(first):
			first.pop()

	if count < n:
		raise OutOfRangeError(f"Cannot select {n} task(s) among {count}.")

	return [task.copy() for task in first]
