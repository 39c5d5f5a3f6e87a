from pytini.ini.parser import (
    parse_line,
    Empty,
    SectionHeader,
    KeyValue,
    Malformed,
)
import pytest


class TestParseLine:

    @pytest.mark.parametrize(
        "line", ["", "   ", ";------", "  ; comment only", "\t"]
    )
    def test_empty(self, line):
        assert parse_line(line) == Empty()

    @pytest.mark.parametrize(
        "line, name",
        [
            ("[section]", "section"),
            ("  [ spaced ]  ; comment", "spaced"),
            ("[]", ""),
            ("[[double]]", "double"),
            ("[with = sign]", "with = sign"),
        ],
    )
    def test_section(self, line, name):
        assert parse_line(line) == SectionHeader(name)

    @pytest.mark.parametrize(
        "line, key, value",
        [
            ("name1 = 100 ; comment", "name1", "100"),
            ("_.,:(){}-#@&*| = 100", "_.,:(){}-#@&*|", "100"),
            ("text_name = hello world!", "text_name", "hello world!"),
            ("url=a=b=c", "url", "a=b=c"),
            ("empty =", "empty", ""),
            ("  padded   =   value  ", "padded", "value"),
        ],
    )
    def test_key_value(self, line, key, value):
        assert parse_line(line) == KeyValue(key, value)

    @pytest.mark.parametrize(
        "line, message",
        [
            ("[section = 1, 2 = value", "incorrect section syntax"),
            ("[unterminated", "incorrect section syntax"),
            ("= value", "empty key"),
            ("   =", "empty key"),
            ("badline", "incorrect syntax"),
            ("key ; = value", "incorrect syntax"),
        ],
    )
    def test_malformed(self, line, message):
        assert parse_line(line) == Malformed(message)

    def test_trailing_newline_is_ignored(self):
        assert parse_line("k = v\n") == KeyValue("k", "v")
        assert parse_line("[s]\r\n") == SectionHeader("s")
