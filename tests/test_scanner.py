"""
Tests for the signature scanner.
"""

import logging

import pytest

from itanium_mangler import MangleError, Token, scan

K = Token.Kind


def kinds(symbol: str) -> list[Token.Kind]:
    return [tok.kind for tok in scan(symbol)]


def test_kinds():
    assert kinds("foo") == [K.NAME, K.END]
    assert kinds("foo()") == [K.NAME, K.PARAMS, K.END]
    assert kinds("NS::Cls::get() const") == [
        K.NAME,
        K.SCOPE,
        K.NAME,
        K.SCOPE,
        K.NAME,
        K.PARAMS,
        K.CONST,
        K.END,
    ]
    assert kinds("vec<int>::at(int)") == [
        K.NAME,
        K.TEMPLATE_ARGS,
        K.SCOPE,
        K.NAME,
        K.PARAMS,
        K.END,
    ]
    assert kinds("") == [K.END]


def test_contents():
    tokens = scan("NS::map<int, char>::find(const char*, int)")

    assert [str(tok) for tok in tokens] == [
        "NS",
        "::",
        "map",
        "<int, char>",
        "::",
        "find",
        "(const char*, int)",
        "",
    ]
    assert tokens[3].items == ("int", " char")
    assert tokens[6].items == ("const char*", " int")


def test_params_run_to_last_paren():
    tokens = scan("f(decltype(nullptr))")

    assert tokens[1].is_params()
    assert tokens[1].content == "decltype(nullptr)"


def test_commas_split_at_any_depth():
    """
    Commas inside nested brackets split the list as well.
    """
    tokens = scan("f(pair<int,int>)")
    assert tokens[1].items == ("pair<int", "int>")


def test_ignored_characters():
    assert [str(tok) for tok in scan("~Foo&")] == ["Foo", ""]


def test_whitespace_inside_name(caplog):
    caplog.set_level(logging.WARNING)

    tokens = scan("unsigned  int")

    assert tokens[0].content == "unsigned int"
    # One warning per space.
    assert len(caplog.records) == 2


def test_errors():
    with pytest.raises(MangleError) as excinfo:
        scan("a:b")
    assert excinfo.value.kind == MangleError.Kind.MALFORMED_SCOPE
    assert excinfo.value.char == "b"

    with pytest.raises(MangleError) as excinfo:
        scan("f(int")
    assert excinfo.value.kind == MangleError.Kind.UNMATCHED_PAREN

    with pytest.raises(MangleError) as excinfo:
        scan("A::f() const;")
    assert excinfo.value.kind == MangleError.Kind.UNEXPECTED_TRAILING
    assert excinfo.value.char == ";"


def test_ident_chars():
    assert Token.is_ident_char("a")
    assert Token.is_ident_char("Z")
    assert Token.is_ident_char("0")
    assert Token.is_ident_char("_")
    assert not Token.is_ident_char(":")
    assert not Token.is_ident_char(" ")
    assert not Token.is_ident_char("")
