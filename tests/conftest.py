#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# IMPORTS #############################################################################################################

from datetime import datetime, timedelta
from typing import Callable, Iterable

import pytest

from task_model import Task


# FIXTURES ############################################################################################################

TaskFactory = Callable[..., Task]


@pytest.fixture()
def base() -> datetime:
	"""A fixed time point, all the deadlines of the tests are expressed relatively to it."""

	return datetime(2018, 10, 12, 9, 0)


@pytest.fixture()
def day(base: datetime) -> Callable[[int], datetime]:
	return lambda offset: base + timedelta(days=offset)


@pytest.fixture()
def make_task(day: Callable[[int], datetime]) -> TaskFactory:
	"""Builds a task whose deadline is `days` after the base time point."""

	def factory(id: int, days: int = 0, priority: int = 0, cost: float = 0.0, assignees: Iterable[str] = ()) -> Task:
		return Task(id, day(days), priority, cost, set(assignees))

	return factory


@pytest.fixture()
def tasks(make_task: TaskFactory) -> list[Task]:
	"""A small collection with shared deadlines, priorities and assignees."""

	return [
		make_task(1, days=4, priority=2, cost=43.0, assignees={"ann", "bob"}),
		make_task(2, days=2, priority=1, cost=11.0, assignees={"bob"}),
		make_task(3, days=3, priority=3, cost=7.0, assignees={"ann"}),
		make_task(4, days=1, priority=1, cost=23.0, assignees={"cid"}),
		make_task(5, days=3, priority=1, cost=19.0, assignees={"ann", "cid"}),
	]
