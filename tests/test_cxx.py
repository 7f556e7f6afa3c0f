"""
Tests for type encodings and parameter normalization.
"""

from dataclasses import dataclass

from itanium_mangler.cxx import (
    CxxBuiltin,
    CxxParam,
    CxxQualifier,
    encode_nested_name,
    encode_source_name,
    encode_type,
)


@dataclass
class ParamCase:
    input: str
    base: str
    qualifiers: str

    def test(self):
        param = CxxParam.from_spelling(self.input)
        assert (param.base, param.qualifiers) == (self.base, self.qualifiers), (
            "\n" f"Input:    {self.input!r}\n" f"Expected: {(self.base, self.qualifiers)}\n"
            f"Actual:   {(param.base, param.qualifiers)}\n"
        )


def test_builtin_spellings():
    assert CxxBuiltin.from_spelling("int") == CxxBuiltin.INT
    assert CxxBuiltin.from_spelling("unsigned long long") == CxxBuiltin.UNSIGNED_LONG_LONG
    assert CxxBuiltin.from_spelling("decltype(nullptr)") == CxxBuiltin.NULLPTR
    assert CxxBuiltin.from_spelling("std::nullptr_t") == CxxBuiltin.NULLPTR
    assert CxxBuiltin.from_spelling("...") == CxxBuiltin.ELLIPSIS
    assert CxxBuiltin.from_spelling("string") is None
    # Spellings must be canonical.
    assert CxxBuiltin.from_spelling("int unsigned") is None
    assert CxxBuiltin.from_spelling(" int") is None


def test_encode_type():
    assert encode_type("void") == "v"
    assert encode_type("char16_t") == "Ds"
    assert encode_type("long double") == "e"
    assert encode_type("Widget") == "6Widget"
    assert encode_type("") == ""


def test_encode_names():
    assert encode_source_name("foo") == "3foo"
    assert encode_source_name("a_very_long_identifier") == "22a_very_long_identifier"
    assert encode_nested_name(["NS", "Cls"]) == "N2NS3ClsE"


def test_normalize_params():
    """
    Verify that parameters are split into a base type and a qualifier run.
    """
    test_data = [
        ParamCase(input="int", base="int", qualifiers=""),
        ParamCase(input=" int ", base="int", qualifiers=""),
        ParamCase(input="char*", base="char", qualifiers="P"),
        ParamCase(input="char**", base="char", qualifiers="PP"),
        ParamCase(input="const char*", base="char", qualifiers="PK"),
        ParamCase(input="char const *", base="char", qualifiers="PK"),
        ParamCase(input="const char* const*", base="char", qualifiers="PKPK"),
        ParamCase(input="unsigned int *", base="unsigned int", qualifiers="P"),
        ParamCase(input="const  unsigned  long", base="unsigned long", qualifiers=""),
        ParamCase(input="NS::Cls*", base="NS::Cls", qualifiers="P"),
        ParamCase(input="char* const", base="char", qualifiers="P"),
        ParamCase(input="const Foo* const", base="Foo", qualifiers="PK"),
        # Top-level const is not part of the parameter type.
        ParamCase(input="const int", base="int", qualifiers=""),
        ParamCase(input="", base="", qualifiers=""),
    ]

    for test in test_data:
        test.test()


def test_param_encoding():
    assert CxxParam.from_spelling("const char*").encode() == "PKc"
    assert CxxParam.from_spelling("NS::Cls*").encode() == "PN2NS3ClsE"
    assert CxxParam.from_spelling("std::nullptr_t").encode() == "Dn"
    assert CxxParam.from_spelling("Widget").encode() == "6Widget"

    assert CxxParam.from_spelling("int*").is_builtin()
    assert not CxxParam.from_spelling("Widget*").is_builtin()
    assert CxxParam.from_spelling(" ").is_empty()

    assert CxxParam.from_spelling("NS::Cls*").is_scoped()
    assert not CxxParam.from_spelling("std::nullptr_t").is_scoped()
    assert CxxParam.from_spelling("NS::A::B").scope_names() == ["NS", "A", "B"]


def test_qualifiers():
    assert CxxQualifier.CONST.is_cv_quali()
    assert CxxQualifier.VOLATILE.is_cv_quali()
    assert not CxxQualifier.POINTER.is_cv_quali()
