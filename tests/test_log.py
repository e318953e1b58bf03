#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging

import pytest

from log import ColoredHandler, setup_logging

from timed import timed_callable


@pytest.fixture()
def root_logger():
	root = logging.getLogger()
	handlers, level = list(root.handlers), root.level

	yield root

	root.handlers[:] = handlers
	root.setLevel(level)


def test_colored_handler_levels():
	assert ColoredHandler().level == logging.INFO
	assert ColoredHandler(verbose=True).level == logging.DEBUG


def test_colored_handler_format():
	record = logging.LogRecord("test", logging.ERROR, __file__, 1, "broken", None, None)
	text = ColoredHandler().format(record)

	assert text.startswith(ColoredHandler.colors[logging.ERROR])
	assert text.endswith(ColoredHandler.reset)
	assert "ERROR\tbroken" in text


def test_setup_logging_is_idempotent(root_logger):
	handler = setup_logging()

	assert setup_logging(verbose=True) is handler
	assert handler.level == logging.DEBUG
	assert root_logger.level == logging.DEBUG
	assert sum(isinstance(h, ColoredHandler) for h in root_logger.handlers) == 1


def test_timed_callable(caplog):
	@timed_callable("Adding...")
	def add(a, b):
		return a + b

	with caplog.at_level(logging.DEBUG):
		assert add(1, b=2) == 3

	assert add.__name__ == "add"
	assert "Adding..." in caplog.text
	assert "add done in" in caplog.text


def test_timed_callable_stays_quiet_at_info(caplog):
	@timed_callable("Counting...")
	def count(items):
		return len(items)

	with caplog.at_level(logging.INFO):
		assert count([1, 2]) == 2

	assert caplog.records == []
