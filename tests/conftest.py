"""Shared fixtures for the test suite."""

from mp_fieldlog.testing.fixtures import fake_clock, null_logger  # noqa: F401
