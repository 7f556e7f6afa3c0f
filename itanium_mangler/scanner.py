"""
Scanner which splits a declaration signature into tokens.
"""

import logging
from io import TextIOBase
from typing import Iterator

from itanium_mangler.errors import MangleError
from itanium_mangler.io_util import (
    as_stringio,
    bytes_left,
    lookahead_for,
    lookahead_for_last,
    peek,
    read_exact,
    skip_whitespace,
)
from itanium_mangler.token import Token

logger = logging.getLogger(__name__)


class SignatureScanner:
    """
    Single left-to-right pass over a declaration signature.

    The grammar accepted is `[scope::]*name[<args>][(params)][ const]`.
    """

    def __init__(self, symbol: str):
        self.symbol = symbol
        self._name: str = ""
        self._scoped: bool = False

    def scan(self) -> list[Token]:
        """
        Scan the whole signature and return its tokens, always ending with `END`.
        """
        self._name = ""
        self._scoped = False

        with as_stringio(self.symbol) as buf:
            return list(self._scan(buf))

    def _error(self, kind: MangleError.Kind, char: str) -> MangleError:
        return MangleError(kind, char, self.symbol)

    def _flush_name(self) -> Iterator[Token]:
        if self._name:
            yield Token.name(self._name)
            self._name = ""

    def _scan(self, src: TextIOBase) -> Iterator[Token]:
        while True:
            char = peek(src)

            if not char:
                yield from self._flush_name()
                yield Token(kind=Token.Kind.END)
                return

            elif char == " ":
                read_exact(src, 1)
                self._scan_whitespace(src)

            elif char == ":":
                yield from self._flush_name()
                yield self._scan_scope(src)

            elif char == "<":
                yield from self._scan_template_args(src)

            elif char == "(":
                yield from self._flush_name()
                yield from self._scan_params(src)
                yield Token(kind=Token.Kind.END)
                return

            elif Token.is_ident_char(char):
                self._name += read_exact(src, 1)

            else:
                # Anything else (`&`, `~`, stray brackets...) has no encoding.
                read_exact(src, 1)

    def _scan_whitespace(self, src: TextIOBase):
        """
        Whitespace never belongs in a name, but a single space between two words
        is kept so that e.g. `unsigned int` survives as one name.
        """
        logger.warning("unexpected whitespace in symbol '%s'", self.symbol)

        if self._name and Token.is_ident_char(peek(src)):
            self._name += " "

    def _scan_scope(self, src: TextIOBase) -> Token:
        read_exact(src, 1)
        char = peek(src)
        if char != ":":
            raise self._error(MangleError.Kind.MALFORMED_SCOPE, char)

        read_exact(src, 1)
        self._scoped = True
        return Token(kind=Token.Kind.SCOPE)

    def _scan_template_args(self, src: TextIOBase) -> Iterator[Token]:
        """
        The argument list ends at the first `>`, so nested templates are not
        supported.
        """
        if not self._name:
            raise self._error(MangleError.Kind.MISSING_TEMPLATE_NAME, "<")

        yield from self._flush_name()

        # Consume the `<`.
        read_exact(src, 1)

        end = lookahead_for(src, ">")
        if end is None:
            raise self._error(MangleError.Kind.UNTERMINATED_TEMPLATE, "")

        content = read_exact(src, end)
        # Consume the `>`.
        read_exact(src, 1)

        yield Token.bracketed(Token.Kind.TEMPLATE_ARGS, content)

    def _scan_params(self, src: TextIOBase) -> Iterator[Token]:
        """
        The parameter list runs up to the last `)` of the signature, and
        everything after it is checked by `_scan_trailing`.
        """
        # Consume the `(`.
        read_exact(src, 1)

        end = lookahead_for_last(src, ")")
        if end is None:
            raise self._error(MangleError.Kind.UNMATCHED_PAREN, "(")

        content = read_exact(src, end)
        # Consume the `)`.
        read_exact(src, 1)

        yield Token.bracketed(Token.Kind.PARAMS, content)
        yield from self._scan_trailing(src)

    def _scan_trailing(self, src: TextIOBase) -> Iterator[Token]:
        """
        Only whitespace may follow the parameter list, or `const` for members.
        """
        skip_whitespace(src)
        if not bytes_left(src):
            return

        if self._scoped and peek(src, len("const")) == "const":
            read_exact(src, len("const"))
            skip_whitespace(src)
            if bytes_left(src):
                raise self._error(MangleError.Kind.UNEXPECTED_TRAILING, peek(src))
            yield Token(kind=Token.Kind.CONST)
            return

        raise self._error(MangleError.Kind.UNEXPECTED_TRAILING, peek(src))


def scan(symbol: str) -> list[Token]:
    return SignatureScanner(symbol).scan()
