"""
Verbosity-gated logging for the jadeite CLI

LOG() writes to stderr through loguru, but only when a ProgramState has been
connected with state_connectToLogger() and its verbosity reaches the
message level. The CLI connects its state once before running the pipeline;
library callers (Compiler, tests) that never connect one get no output.

Lexer and Parser report through a TraceSink, a callable taking one string.
trace_toLog is the default sink and forwards each event to LOG() at level 3
(-vv on the command line).

Example:
    state_connectToLogger(ProgramState(verbosity=2))
    LOG("Parsed 3 top-level nodes", level=2)    # shown
    trace_toLog("lex <Tag(p): 0..1>")           # hidden below -vv
"""

from loguru import logger
from typing import Any, Callable, Optional
from contextvars import ContextVar
import sys

# State whose verbosity gates LOG(); None means silent
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Signature of a trace sink accepted by Lexer and Parser
TraceSink = Callable[[str], None]

# One stderr handler; gating happens in LOG(), not in loguru levels
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Make state's verbosity govern LOG() in the current context

    Args:
        state: Anything with an integer verbosity attribute (ProgramState)
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message when the connected state's verbosity is at least level

    Args:
        message: Text to log
        level: 1 for summaries and skipped constructs, 2 for stage
               progress (-v), 3 for lexer/parser traces (-vv)
        **kwargs: Passed through to loguru
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)


def trace_toLog(message: str) -> None:
    """Default trace sink: lexer/parser events at level 3"""
    LOG(message, level=3)
