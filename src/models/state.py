"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from argparse import Namespace
from typing import Optional, Type, TypeVar, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

# Forward reference for type hint - avoid circular import
if TYPE_CHECKING:
    from .results import CompileResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the compilation pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the compilation progresses.

    Pipeline stages and their state additions:
        - Initial: inputFile, verbosity, showTokens, highlight, strict
        - source_read: source
        - html_compile: compileResult
        - output_write: exitCode

    Attributes:
        inputFile: Path of the template to compile
        verbosity: Logging verbosity level (1-3)
        showTokens: Print the token stream instead of HTML
        highlight: Print highlighted template source instead of HTML
        strict: Treat lexical stops and parse diagnostics as failures
        source: Normalized template source
        compileResult: Tokens, nodes, diagnostics and HTML from the Compiler
        exitCode: Process exit status
    """

    # CLI arguments
    inputFile: str = field(default="")
    verbosity: int = field(default=1)
    showTokens: bool = field(default=False)
    highlight: bool = field(default=False)
    strict: bool = field(default=False)

    # Pipeline state
    source: str = field(default="")
    compileResult: Optional["CompileResult"] = field(default=None)
    exitCode: int = field(default=0)

    @classmethod
    def state_createFromNamespace(cls: Type["ProgramState"], options: Namespace) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Options without a matching ProgramState field are ignored.

        Args:
            options: Parsed CLI arguments (inputFile, verbosity, etc.)

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        filtered_options = {
            k: v for k, v in options_dict.items() if k in valid_fields and v is not None
        }
        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            source_read,
            html_compile,
            output_write
        )

    This is equivalent to:
        output_write(html_compile(source_read(initial_state)))

    But reads left-to-right instead of inside-out.
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
