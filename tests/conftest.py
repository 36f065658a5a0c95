# tests/conftest.py
import logging

import pytest

from slicekit import Slice
from slicekit.config import SliceSettings


@pytest.fixture
def ints():
    return Slice.of(3, 1, 2)


@pytest.fixture
def empty():
    return Slice.empty()


@pytest.fixture
def tracing(monkeypatch, caplog):
    """Enable combinator tracing and capture DEBUG records from slicekit."""
    import slicekit._utils as utils

    monkeypatch.setattr(
        utils, "settings", SliceSettings(TRACE_COMBINATORS=True)
    )
    caplog.set_level(logging.DEBUG, logger="slicekit")
    return caplog


class CallRecorder:
    """Wraps a function and records every call's arguments in order."""

    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.func(*args)


@pytest.fixture
def recorder():
    return CallRecorder
