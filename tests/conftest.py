"""Shared pytest fixtures."""

import itertools

import pytest


@pytest.fixture
def ticking_clock():
    """A clock that advances half a second every time it is read."""
    ticks = itertools.count(0, 0.5)
    return lambda: next(ticks)


@pytest.fixture
def updates():
    """Collects every WikiState the navigator publishes."""
    return []
