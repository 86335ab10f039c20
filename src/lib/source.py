"""
Template source reading

Loads a template from disk as one LF-separated string, ready for the Lexer.
"""

from pathlib import Path
from typing import Union


def source_normalize(text: str) -> str:
    """
    Normalize line endings to LF

    Lines are split on LF and a trailing CR is dropped from each, so CRLF
    and LF files give the same result. A final line terminator does not
    produce an extra empty line.

    Example:
        >>> source_normalize("html\\r\\n  body\\r\\n")
        'html\\n  body'
    """
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return "\n".join(line[:-1] if line.endswith("\r") else line for line in lines)


def source_read(path: Union[str, Path]) -> str:
    """
    Read a UTF-8 template file

    Args:
        path: Template file path

    Returns:
        Normalized source text

    Raises:
        FileNotFoundError: If the file does not exist
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    data = Path(path).read_bytes()
    return source_normalize(data.decode("utf-8"))
