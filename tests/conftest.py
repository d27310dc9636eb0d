"""Shared fixtures for the transform animator tests."""

import pytest

from pose import PoseStore


@pytest.fixture
def triangle():
    """The start-up triangle."""
    return [(0.0, 100.0), (-86.6, -50.0), (86.6, -50.0)]


@pytest.fixture
def square():
    return [(10.0, 10.0), (-10.0, 10.0), (-10.0, -10.0), (10.0, -10.0)]


@pytest.fixture
def poses(triangle):
    return PoseStore(triangle)
