from __future__ import annotations

import pytest

from scan.call_sites import find_call_sites, iter_call_sites, strip_newline


def _sites(line: str) -> list[tuple[str, bool]]:
    return [
        (site.call_text, site.has_argument_list)
        for site in find_call_sites("a.c", 1, line)
    ]


def test_find_call_site_returns_text_from_paren() -> None:
    assert _sites('\tif (strncmp(a, "b", 1) == 0)\n') == [('(a, "b", 1) == 0)', True)]


def test_find_call_site_skips_whitespace_before_paren() -> None:
    assert _sites("x = strncmp \t(a, b, n);") == [("(a, b, n);", True)]


def test_find_call_site_qualified_name() -> None:
    assert _sites("return std::strncmp(s, t, 2);") == [("(s, t, 2);", True)]


def test_find_call_sites_multiple_on_one_line() -> None:
    sites = _sites('strncmp(a, "x", 1) || strncmp(b, "yz", 2)')

    assert [text for text, _ in sites] == [
        '(a, "x", 1) || strncmp(b, "yz", 2)',
        '(b, "yz", 2)',
    ]


@pytest.mark.parametrize(
    "line",
    [
        '// strncmp("a", b, 9)',
        'foo(); // strncmp("a", b, 9)',
        "my_strncmp(a, b, 1);",
        "strncmpx(a, b, 1);",
        "int x = 0;",
    ],
)
def test_find_call_sites_ignores(line: str) -> None:
    assert _sites(line) == []


def test_find_call_sites_stops_at_comment() -> None:
    sites = _sites('strncmp(a, "b", 1); // strncmp(c, "d", 9)')

    assert len(sites) == 1


def test_find_call_sites_does_not_recognize_block_comments() -> None:
    assert _sites('/* strncmp("a", b, 9) */') == [('("a", b, 9) */', True)]


def test_find_call_sites_double_slash_in_literal_suppresses() -> None:
    assert _sites('puts("http://x"); strncmp("a", b, 9);') == []


def test_find_call_sites_name_without_paren() -> None:
    assert _sites("#define CMP strncmp\n") == [("", False)]
    assert _sites("cmp = strncmp; strncmp(a, b, 1);") == [("; strncmp(a, b, 1);", False)]


@pytest.mark.parametrize(
    ("line", "expected"),
    [("abc\n", "abc"), ("abc\r\n", "abc"), ("abc", "abc"), ("abc\n\n", "abc\n")],
)
def test_strip_newline(line: str, expected: str) -> None:
    assert strip_newline(line) == expected


def test_iter_call_sites_numbers_lines_from_one() -> None:
    lines = ["int a;\n", 'strncmp(a, "b", 1);\n', "\n", "strncmp(x, y, n);\n"]

    sites = list(iter_call_sites("src/a.c", lines))

    assert [(site.path, site.line_number) for site in sites] == [
        ("src/a.c", 2),
        ("src/a.c", 4),
    ]
