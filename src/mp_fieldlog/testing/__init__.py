"""Testing support – capture hooks, null loggers and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_fieldlog.testing.fixtures"]
"""

from mp_fieldlog.sinks import NullSink
from mp_fieldlog.testing.capture import CaptureHook, new_global, new_local, new_null_logger

__all__ = ["CaptureHook", "NullSink", "new_global", "new_local", "new_null_logger"]
