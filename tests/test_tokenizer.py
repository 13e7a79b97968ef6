# tests/test_tokenizer.py

from __future__ import annotations

from roster_parser.parsers.tokenizer import split_lines, tokenize_line


def test_tokenize_simple_line() -> None:
    assert tokenize_line("a,b,c") == ["a", "b", "c"]


def test_fields_are_trimmed() -> None:
    assert tokenize_line(" a , b ,c ") == ["a", "b", "c"]


def test_comma_inside_quotes_is_kept() -> None:
    assert tokenize_line('"Acme, Inc",acme.com') == ["Acme, Inc", "acme.com"]


def test_doubled_quote_is_literal_quote() -> None:
    assert tokenize_line('"say ""hi""",x') == ['say "hi"', "x"]


def test_trailing_comma_yields_empty_field() -> None:
    assert tokenize_line("a,") == ["a", ""]


def test_split_lines_drops_blank_lines() -> None:
    text = "\nh1,h2\r\n\n   \nv1,v2\n"
    lines = split_lines(text)
    assert len(lines) == 2
    assert tokenize_line(lines[0]) == ["h1", "h2"]
