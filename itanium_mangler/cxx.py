"""
Module implementing C++ type spellings and their Itanium encodings.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Optional


class CxxQualifier(StrEnum):
    """
    Qualifier codes which may wrap a base type in a parameter encoding.
    """

    CONST = "K"
    VOLATILE = "V"
    POINTER = "P"

    def is_cv_quali(self) -> bool:
        return self in [CxxQualifier.CONST, CxxQualifier.VOLATILE]


class CxxBuiltin(StrEnum):
    """
    Builtin (fundamental) types, valued by their Itanium type code.
    """

    VOID = "v"
    SHORT = "s"
    INT = "i"
    LONG = "l"
    LONG_LONG = "x"
    UNSIGNED_SHORT = "t"
    UNSIGNED_INT = "j"
    UNSIGNED_LONG = "m"
    UNSIGNED_LONG_LONG = "y"
    FLOAT = "f"
    DOUBLE = "d"
    LONG_DOUBLE = "e"
    BOOL = "b"
    CHAR = "c"
    SIGNED_CHAR = "a"
    UNSIGNED_CHAR = "h"
    WIDE_CHAR = "w"
    CHAR16 = "Ds"
    CHAR32 = "Di"
    NULLPTR = "Dn"
    INT128 = "n"
    UNSIGNED_INT128 = "o"
    FLOAT128 = "g"
    ELLIPSIS = "z"

    @staticmethod
    def from_spelling(spelling: str) -> Optional["CxxBuiltin"]:
        """
        Look up the builtin type with the exact canonical `spelling`.
        Returns `None` if the spelling does not name a builtin.
        """
        return _BUILTIN_SPELLINGS.get(spelling)


_BUILTIN_SPELLINGS: dict[str, CxxBuiltin] = {
    "void": CxxBuiltin.VOID,
    "short": CxxBuiltin.SHORT,
    "int": CxxBuiltin.INT,
    "long": CxxBuiltin.LONG,
    "long long": CxxBuiltin.LONG_LONG,
    "unsigned short": CxxBuiltin.UNSIGNED_SHORT,
    "unsigned int": CxxBuiltin.UNSIGNED_INT,
    "unsigned long": CxxBuiltin.UNSIGNED_LONG,
    "unsigned long long": CxxBuiltin.UNSIGNED_LONG_LONG,
    "float": CxxBuiltin.FLOAT,
    "double": CxxBuiltin.DOUBLE,
    "long double": CxxBuiltin.LONG_DOUBLE,
    "bool": CxxBuiltin.BOOL,
    "char": CxxBuiltin.CHAR,
    "signed char": CxxBuiltin.SIGNED_CHAR,
    "unsigned char": CxxBuiltin.UNSIGNED_CHAR,
    "wchar_t": CxxBuiltin.WIDE_CHAR,
    "char16_t": CxxBuiltin.CHAR16,
    "char32_t": CxxBuiltin.CHAR32,
    "std::nullptr_t": CxxBuiltin.NULLPTR,
    "decltype(nullptr)": CxxBuiltin.NULLPTR,
    "__int128": CxxBuiltin.INT128,
    "unsigned __int128": CxxBuiltin.UNSIGNED_INT128,
    "__float128": CxxBuiltin.FLOAT128,
    "...": CxxBuiltin.ELLIPSIS,
}


def encode_source_name(name: str) -> str:
    """
    Encode an identifier as a length-prefixed source name, e.g. `3foo`.
    """
    return f"{len(name)}{name}"


def encode_nested_name(names: list[str]) -> str:
    """
    Encode a sequence of scope segments as a nested name, e.g. `N2NS3ClsE`.
    """
    return "N" + "".join(encode_source_name(n) for n in names) + "E"


def encode_prefix(names: list[str]) -> str:
    """
    Encode the scope prefix made of `names` the way it is remembered as a
    substitution: a lone name as a source name, deeper prefixes as nested names.
    """
    if len(names) == 1:
        return encode_source_name(names[0])
    return encode_nested_name(names)


def encode_type(spelling: str) -> str:
    """
    Encode a type spelling that carries no qualifiers.

    Builtins map to their type code, anything else becomes a source name.
    The empty spelling encodes to the empty string.
    """
    if not spelling:
        return ""

    builtin = CxxBuiltin.from_spelling(spelling)
    if builtin:
        return str(builtin)

    return encode_source_name(spelling)


@dataclass(frozen=True)
class CxxParam:
    """
    One function parameter, split into its canonical base type spelling and the
    run of qualifiers wrapping it.

    The qualifier run is stored outer-to-inner, so `const char *` has
    `qualifiers == "PK"` and `base == "char"`.
    """

    _CONST: ClassVar[str] = "const"

    spelling: str
    base: str
    qualifiers: str

    def is_builtin(self) -> bool:
        """
        Determine if the base type is a builtin type.
        """
        return CxxBuiltin.from_spelling(self.base) is not None

    def is_empty(self) -> bool:
        """
        Determine if there is no base type left to encode (e.g. `f(int,)`).
        """
        return not self.base

    def scope_names(self) -> list[str]:
        """
        Split the base spelling into its `::`-separated names.
        """
        return [name for name in self.base.split("::") if name]

    def is_scoped(self) -> bool:
        """
        Determine if the base type is a scoped name such as `NS::Cls`.
        """
        return not self.is_builtin() and len(self.scope_names()) > 1

    def encode_base(self) -> str:
        """
        Encode the base type. Scoped spellings that aren't builtins are encoded
        as nested names so that they can match registered scope prefixes.
        """
        if self.is_scoped():
            return encode_nested_name(self.scope_names())

        return encode_type(self.base)

    def encode(self) -> str:
        """
        Encode the parameter in full, without any substitutions.
        """
        return self.qualifiers + self.encode_base()

    @staticmethod
    def _strip_base(spelling: str) -> str:
        base = spelling
        while CxxParam._CONST in base:
            base = base.replace(CxxParam._CONST, "")
        base = base.replace("*", "")
        while "  " in base:
            base = base.replace("  ", " ")
        return base.strip(" ")

    @staticmethod
    def _read_qualifiers(remnant: str) -> str:
        qualifiers = ""
        for char in reversed(remnant):
            if char == "c":
                # First letter of a removed `const`.
                qualifiers += CxxQualifier.CONST
            elif char == "*":
                qualifiers += CxxQualifier.POINTER

        # Top-level cv-qualifiers (outermost, read first) are not part of the
        # parameter type, e.g. `char* const` is just `char*`.
        while qualifiers and CxxQualifier(qualifiers[0]).is_cv_quali():
            qualifiers = qualifiers[1:]
        return qualifiers

    @staticmethod
    def from_spelling(spelling: str) -> "CxxParam":
        """
        Normalize a raw parameter spelling such as `const char*`.
        """
        base = CxxParam._strip_base(spelling)

        remnant = spelling
        if base:
            while base in remnant:
                remnant = remnant.replace(base, "")

        return CxxParam(
            spelling=spelling,
            base=base,
            qualifiers=CxxParam._read_qualifiers(remnant),
        )

    def __str__(self) -> str:
        return self.spelling
