#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from collections import Counter
from random import Random

import pytest

from errors import DegenerateAggregateError, OutOfRangeError

from estimator import estimate_workload, sample_indices


@pytest.fixture()
def zack_tasks(make_task):
	"""Eight tasks, zack being assigned to the tasks 2, 3 and 6."""

	return [make_task(i, assignees={"zack"} if i in (2, 3, 6) else {"amy"}) for i in range(8)]


def test_estimate_workload_is_a_sampled_fraction(zack_tasks):
	for seed in range(50):
		assert estimate_workload(zack_tasks, "zack", Random(seed)) in {0.0, 0.25, 0.5, 0.75}


def test_estimate_workload_is_reproducible(zack_tasks):
	estimates = [estimate_workload(zack_tasks, "zack", Random(1234)) for _ in range(5)]

	assert len(set(estimates)) == 1


def test_estimate_workload_without_rng(zack_tasks):
	assert 0.0 <= estimate_workload(zack_tasks, "zack") <= 0.75


def test_estimate_workload_rounds_sample_down(make_task):
	tasks = [make_task(i, assignees={"zack"}) for i in range(3)]

	assert estimate_workload(tasks, "zack", Random(0)) == 1.0
	assert estimate_workload(tasks, "amy", Random(0)) == 0.0


@pytest.mark.parametrize("size", [0, 1])
def test_estimate_workload_empty_sample(make_task, size):
	with pytest.raises(DegenerateAggregateError):
		estimate_workload([make_task(i) for i in range(size)], "zack", Random(0))


def test_sample_indices_are_distinct():
	rng = Random(7)

	for k in range(11):
		sample = sample_indices(10, k, rng)

		assert len(sample) == len(set(sample)) == k
		assert all(0 <= i < 10 for i in sample)


def test_sample_indices_is_roughly_uniform():
	rng = Random(2018)
	counts = Counter(i for _ in range(6000) for i in sample_indices(6, 2, rng))

	assert all(1700 < counts[i] < 2300 for i in range(6))


@pytest.mark.parametrize("k", [-1, 4])
def test_sample_indices_out_of_range(k):
	with pytest.raises(OutOfRangeError):
		sample_indices(3, k, Random(0))
