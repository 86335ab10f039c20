"""
Logging tests - verbosity gating of LOG() and the default trace sink
"""

import pytest
from loguru import logger

from jadeite.lib.log import LOG, state_connectToLogger, trace_toLog
from jadeite.models import ProgramState


@pytest.fixture
def messages():
    """Collect logged messages; disconnect the state afterwards"""
    collected = []
    handler = logger.add(collected.append, format="{message}")
    yield collected
    logger.remove(handler)
    state_connectToLogger(None)


class TestLOG:
    """LOG() only writes when a connected state allows it"""

    def test_silent_without_state(self, messages):
        """Library use with no connected state logs nothing"""
        state_connectToLogger(None)
        LOG("hidden", level=1)
        assert messages == []

    def test_level_gating(self, messages):
        """Messages above the state's verbosity are dropped"""
        state_connectToLogger(ProgramState(verbosity=2))
        LOG("summary", level=1)
        LOG("progress", level=2)
        LOG("trace", level=3)
        assert [m.strip() for m in messages] == ["summary", "progress"]

    def test_trace_sink_needs_level_three(self, messages):
        """trace_toLog writes only at -vv"""
        state_connectToLogger(ProgramState(verbosity=2))
        trace_toLog("lex <Tag(p): 0..1>")
        assert messages == []

        state_connectToLogger(ProgramState(verbosity=3))
        trace_toLog("lex <Tag(p): 0..1>")
        assert [m.strip() for m in messages] == ["lex <Tag(p): 0..1>"]
