"""
Errors raised while mangling declaration signatures.
"""

from enum import StrEnum


class MangleError(ValueError):
    """
    Raised when a declaration signature is malformed.

    `char` holds the offending character (empty when the problem is the end of
    the input) and `symbol` holds the complete original input.
    """

    class Kind(StrEnum):
        MALFORMED_SCOPE = "malformed_scope"
        UNMATCHED_PAREN = "unmatched_paren"
        UNEXPECTED_TRAILING = "unexpected_trailing"
        UNTERMINATED_TEMPLATE = "unterminated_template"
        MISSING_TEMPLATE_NAME = "missing_template_name"

    def __init__(self, kind: Kind, char: str, symbol: str):
        self.kind = kind
        self.char = char
        self.symbol = symbol

        if char:
            message = f"unexpected character '{char}' in symbol '{symbol}'"
        else:
            message = f"unexpected end of symbol '{symbol}'"
        super().__init__(message)
