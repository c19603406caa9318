"""Test token and line index dumps."""

from io import StringIO

from dslscan.debug import dump_lines, dump_tokens, lines_to_json, tokens_to_json
from dslscan.lexer import Lexer


class TestTextDump:
    def test_tokens(self):
        buf = StringIO()
        dump_tokens(Lexer("x = 'a'\n  y").tokens, file=buf)
        assert buf.getvalue() == (
            "1:0 IDENTIFIER 'x'\n"
            "1:2 OPERATOR '='\n"
            "1:4 STRING \"'a'\"\n"
            "2:2 IDENTIFIER 'y'\n"
        )

    def test_lines(self):
        buf = StringIO()
        dump_lines(Lexer("a\nbc").lines, file=buf)
        assert buf.getvalue() == "1 @0 | a\n2 @2 | bc\n"

    def test_defaults_to_stderr(self, capsys):
        dump_tokens(Lexer("z").tokens)
        assert capsys.readouterr().err == "1:0 IDENTIFIER 'z'\n"


class TestJson:
    def test_tokens(self):
        assert tokens_to_json(Lexer("a 1.5").tokens) == [
            {"kind": "IDENTIFIER", "text": "a", "line": 0, "column": 0, "start": 0, "end": 1},
            {"kind": "NUMBER", "text": "1.5", "line": 0, "column": 2, "start": 2, "end": 5},
        ]

    def test_lines(self):
        assert lines_to_json(Lexer("a\nb").lines) == [
            {"text": "a", "start": 0},
            {"text": "b", "start": 2},
        ]
