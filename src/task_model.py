#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################


from __future__ import annotations


from dataclasses import dataclass, field
from datetime import datetime
from typing import NamedTuple


# CLASSES #############################################################################################################


class IdPriority(NamedTuple):
	"""Holds the identifier and the priority of a task.

	Attributes
	----------
	id : int
		The task id.
	priority : int
		The task priority.
	"""

	id: int
	priority: int


@dataclass
class Task:
	"""Represents a task.

	Attributes
	----------
	id : int
		The task id, unique within a collection by convention only.
	deadline : datetime
		The deadline of the task.
	priority : int
		The priority of the task, a lower value being more urgent.
	cost : float
		The non-negative cost of the task.
	assignees : set[str]
		The names of the persons assigned to the task.
	"""

	id: int
	deadline: datetime
	priority: int
	cost: float
	assignees: set[str] = field(default_factory=set)

	def copy(self: Task) -> Task:
		"""Creates an independent copy of the task.

		Parameters
		----------
		self : Task
			The instance of `Task`.

		Returns
		-------
		Task
			A copy of the task, whose assignees do not alias the ones of `self`.
		"""

		return Task(self.id, self.deadline, self.priority, self.cost, set(self.assignees))

	def short(self: Task) -> str:
		"""A short description of a task.

		Parameters
		----------
		self : Task
			The instance of `Task`.

		Returns
		-------
		str
			The short description.
		"""

		return f"{self.id} [{self.deadline.isoformat()} / {self.priority}]"

	def pformat(self: Task, level: int = 0) -> str:
		"""A complete description of a task.

		Parameters
		----------
		self : Task
			The instance of `Task`.
		level : int, optional
			The indentation level (default: 0).

		Returns
		-------
		str
			The complete description.
		"""

		i = "\n" + ("\t" * level)
		ii = i + "\t"

		return (i + "task {" + ii
			+ f"id : {self.id};{ii}"
			f"deadline : {self.deadline.isoformat()};{ii}"
			f"priority : {self.priority};{ii}"
			f"cost : {self.cost};{ii}"
			f"assignees : {', '.join(sorted(self.assignees))};{i}}}")


# FUNCTIONS ###########################################################################################################


def completion_key(task: Task) -> tuple[datetime, int]:
	"""The sort key of the completion order: deadline first, ties resolved by priority.

	Parameters
	----------
	task : Task
		A `Task`.

	Returns
	-------
	tuple[datetime, int]
		The pair `(deadline, priority)` of the task.
	"""

	return (task.deadline, task.priority)
