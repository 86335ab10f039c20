#!/usr/bin/env python3
"""
jadeite - indentation-based template compiler

Compiles a simplified Pug/Jade markup file into HTML and writes the result
to standard output.

Pipeline:
    source_read → html_compile → output_write

Usage:
    jadeite page.jade > page.html

Examples:
    # Basic compilation
    jadeite page.jade

    # Show the token stream instead of HTML
    jadeite page.jade --tokens

    # Show the template with syntax highlighting
    jadeite page.jade --highlight

    # Fail on any lexical stop or skipped construct
    jadeite page.jade --strict

    # Trace lexer and parser decisions on stderr
    jadeite page.jade -vv
"""

import sys
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .lib import Lexer, Compiler, LexError, ParseError, __version__, LOG, state_connectToLogger
from .lib.source import source_read as file_read
from .lib.highlight import source_highlight
from .lib.log import trace_toLog
from .config import appsettings
from .models import ProgramState, pipeline


# Define CLI arguments
parser = ArgumentParser(
    prog="jadeite",
    description="jadeite - compile indentation-based templates to HTML",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "inputFile", nargs="?", default=None, type=str, help="Template file to compile"
)

parser.add_argument(
    "--tokens",
    dest="showTokens",
    action="store_true",
    help="Print the token stream instead of HTML",
)

parser.add_argument(
    "--highlight",
    action="store_true",
    help="Print the template with syntax highlighting instead of HTML",
)

parser.add_argument(
    "--strict",
    action="store_true",
    default=None,
    help="Exit with an error on any lexical stop or skipped construct",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the template file into normalized source text.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added field:
            - source: LF-normalized template text

    Exits:
        1 if the file is missing, unreadable, or not valid UTF-8
    """
    state = inputstate.copy()

    LOG(f"Reading {state.inputFile}...", level=2)
    try:
        state.source = file_read(state.inputFile)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Read {len(state.source)} characters", level=2)
    return state


def html_compile(inputstate: ProgramState) -> ProgramState:
    """
    Compile the source to HTML.

    Runs the Compiler (lexer, parser, renderer) over the source. In lenient
    mode a lexical stop or skipped construct is logged and the partial
    tree is still rendered.

    Returns:
        ProgramState with added field:
            - compileResult: CompileResult (html, tokens, nodes, lex_error,
              diagnostics)

    Exits:
        1 in strict mode on a lexical stop or skipped construct
    """
    state = inputstate.copy()

    LOG("Compiling source to HTML...", level=2)
    compiler = Compiler(state.source, strict=state.strict, trace=trace_toLog)
    try:
        state.compileResult = compiler.compile()
    except LexError as e:
        print(f"Lex error: {e}", file=sys.stderr)
        sys.exit(1)
    except ParseError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def output_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the requested output to stdout.

    Prints the HTML by default, the token dump with --tokens, or the
    highlighted source with --highlight.

    Returns:
        ProgramState with added field:
            - exitCode: 0
    """
    state = inputstate.copy()
    result = state.compileResult

    if state.showTokens:
        lexer = Lexer(state.source)
        for token in result.tokens:
            print(f"{token}\t{lexer.token_source(token)}")
    elif state.highlight:
        print(source_highlight(state.source), end="")
    else:
        print(result.html)

    state.exitCode = 0
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - compile one template file to HTML on stdout.

    With no input file the program exits immediately with no output.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    options: Namespace = parser.parse_args(argv)
    if not options.inputFile:
        return 0

    state: ProgramState = ProgramState.state_createFromNamespace(options)
    if options.strict is None:
        state.strict = appsettings.strict_mode

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    final = pipeline(state, source_read, html_compile, output_write)
    return final.exitCode


if __name__ == "__main__":
    sys.exit(main())
