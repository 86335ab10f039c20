"""
CLI tests - argument handling, output and exit codes
"""

import pytest

from jadeite.__main__ import main, html_compile
from jadeite.models import ProgramState, CompileResult


@pytest.fixture
def template(tmp_path):
    """Write a template into tmp_path and return its path"""
    def write(text, name="page.jade"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


class TestArguments:
    """Argument handling without compiling"""

    def test_no_arguments_is_silent(self, capsys):
        """No input file exits 0 with no output"""
        assert main([]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_version(self, capsys):
        """-V prints the program name and exits 0"""
        with pytest.raises(SystemExit) as exc:
            main(["-V"])
        assert exc.value.code == 0
        assert "jadeite" in capsys.readouterr().out


class TestOutput:
    """What a successful run prints"""

    def test_html_on_stdout(self, template, capsys):
        """HTML is printed followed by one line break"""
        path = template("html\n  body\n    p hello\n")
        assert main([path]) == 0
        assert capsys.readouterr().out == (
            "<html>\n"
            "  <body>\n"
            "    <p>\n"
            "      hello\n"
            "    </p>\n"
            "  </body>\n"
            "</html>\n"
            "\n"
        )

    def test_crlf_input(self, template, capsys):
        """CRLF templates compile like LF ones"""
        path = template("p\r\n  | hi\r\n")
        assert main([path]) == 0
        assert capsys.readouterr().out == "<p>\n  hi\n</p>\n\n"

    def test_token_dump(self, template, capsys):
        """--tokens prints one token and its lexeme per line"""
        path = template("html\n  body")
        assert main([path, "--tokens"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "<Tag(html): 0..4>\thtml"
        assert lines[1] == "<NewLine: 4..5>\t<LF>"

    def test_highlight(self, template, capsys):
        """--highlight prints the template, not HTML"""
        path = template("html\n  body")
        assert main([path, "--highlight"]) == 0
        out = capsys.readouterr().out
        assert "html" in out
        assert "<html>" not in out

    def test_compile_stage_keeps_result(self):
        """html_compile stores the full compile result on the state"""
        state = html_compile(ProgramState(source="p hi"))
        assert isinstance(state.compileResult, CompileResult)
        assert state.compileResult.html == "<p>\n  hi\n</p>\n"
        assert state.compileResult.ok

    def test_token_dump_after_lex_stop(self, template, capsys):
        """Without --strict the dump shows the tokens before the stop"""
        path = template("a\n  <")
        assert main([path, "--tokens"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[0] for line in lines] == [
            "<Tag(a): 0..1>",
            "<NewLine: 1..2>",
            "<Indent(2): 2..4>",
        ]


class TestFailures:
    """Error messages and exit codes"""

    def test_missing_file(self, tmp_path, capsys):
        """An unreadable file exits 1 with a message"""
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.jade")])
        assert exc.value.code == 1
        assert "Error reading input file" in capsys.readouterr().err

    def test_invalid_utf8(self, tmp_path):
        """Invalid UTF-8 exits 1"""
        path = tmp_path / "bad.jade"
        path.write_bytes(b"p \xff")
        with pytest.raises(SystemExit) as exc:
            main([str(path)])
        assert exc.value.code == 1

    def test_lenient_lex_stop_still_renders(self, template, capsys):
        """Without --strict a lexical stop still prints the partial tree"""
        path = template('p(title="x')
        assert main([path]) == 0
        assert capsys.readouterr().out == "<p></p>\n\n"

    def test_strict_lex_stop(self, template, capsys):
        """--strict reports the lexical stop and exits 1"""
        path = template('p(title="x')
        with pytest.raises(SystemExit) as exc:
            main([path, "--strict"])
        assert exc.value.code == 1
        assert "unterminated quoted attribute value" in capsys.readouterr().err

    def test_strict_parse_error(self, template, capsys):
        """--strict reports a skipped construct and exits 1"""
        path = template(": p")
        with pytest.raises(SystemExit) as exc:
            main([path, "--strict"])
        assert exc.value.code == 1
        assert "Parse error" in capsys.readouterr().err
