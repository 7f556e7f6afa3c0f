"""
Module implementing the variant type for tokens of a declaration signature.

The scanner turns a signature such as `NS::Cls::get<int>(const char*) const` into
a flat sequence of these tokens, which the mangler then assembles.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


@dataclass(frozen=True)
class Token:
    """
    Variant type for one token of a declaration signature.

    - `NAME` tokens hold the identifier in `content`.
    - `TEMPLATE_ARGS` and `PARAMS` tokens hold the raw bracketed text in
      `content` and the comma-separated pieces in `items`.
    - `SCOPE`, `CONST` and `END` tokens carry no data.
    """

    class Kind(StrEnum):
        NAME = "name"
        SCOPE = "::"
        TEMPLATE_ARGS = "<>"
        PARAMS = "()"
        CONST = "const"
        END = "end"

    _IDENT_EXTRA: ClassVar[frozenset[str]] = frozenset("_")

    kind: Kind
    content: str = ""
    items: tuple[str, ...] = field(default=())

    def is_name(self) -> bool:
        return self.kind == Token.Kind.NAME

    def is_scope(self) -> bool:
        return self.kind == Token.Kind.SCOPE

    def is_template_args(self) -> bool:
        return self.kind == Token.Kind.TEMPLATE_ARGS

    def is_params(self) -> bool:
        return self.kind == Token.Kind.PARAMS

    def is_const(self) -> bool:
        return self.kind == Token.Kind.CONST

    def is_end(self) -> bool:
        return self.kind == Token.Kind.END

    @staticmethod
    def is_ident_char(char: str) -> bool:
        """
        Determine if `char` may appear in an identifier.
        """
        return bool(char) and (char.isalnum() or char in Token._IDENT_EXTRA)

    @staticmethod
    def name(content: str) -> "Token":
        return Token(kind=Token.Kind.NAME, content=content)

    @staticmethod
    def bracketed(kind: Kind, content: str) -> "Token":
        """
        Construct a `TEMPLATE_ARGS` or `PARAMS` token, splitting `content` on every
        comma. Commas nested inside other brackets are split as well.
        """
        assert kind in [Token.Kind.TEMPLATE_ARGS, Token.Kind.PARAMS]
        return Token(kind=kind, content=content, items=tuple(content.split(",")))

    def __str__(self) -> str:
        if self.kind == Token.Kind.NAME:
            return self.content
        elif self.kind == Token.Kind.TEMPLATE_ARGS:
            return f"<{self.content}>"
        elif self.kind == Token.Kind.PARAMS:
            return f"({self.content})"
        elif self.kind == Token.Kind.END:
            return ""
        return str(self.kind)
