"""Tests for quote-aware CSV line splitting."""

import pytest

from product_sorting.processors.record_parser import format_line, parse_line


def test_plain_fields():
    assert parse_line("Widget A,10.99,100") == ["Widget A", "10.99", "100"]


def test_quoted_comma_is_literal():
    assert parse_line('"Widget, Large",10.00,5') == ["Widget, Large", "10.00", "5"]


def test_doubled_quote_inside_quotes():
    assert parse_line('"The ""Best"" Widget",1,2') == ['The "Best" Widget', "1", "2"]


def test_trailing_empty_field_is_emitted():
    assert parse_line("a,b,") == ["a", "b", ""]


def test_empty_line_is_one_empty_field():
    assert parse_line("") == [""]


def test_unbalanced_quote_reads_to_end_of_line():
    assert parse_line('"Widget, Large,10.00,5') == ["Widget, Large,10.00,5"]


def test_quotes_mid_field_toggle_state():
    assert parse_line('ab"c,d"e,f') == ["abc,de", "f"]


@pytest.mark.parametrize(
    "fields",
    [
        ["Widget, Large", "10.00", "5"],
        ['Say "hi"', "", "1"],
        [" padded ", "x", "y"],
    ],
)
def test_format_line_is_read_back_unchanged(fields):
    assert parse_line(format_line(fields)) == fields


def test_format_line_leaves_plain_fields_unquoted():
    assert format_line(["Widget", "A", "10.99", "100"]) == "Widget,A,10.99,100"
