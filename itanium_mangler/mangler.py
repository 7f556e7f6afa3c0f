"""
Mangler for Itanium C++ ABI symbols.

Turns a declaration signature such as `NS::Cls::method(const char*) const` into
the symbol a compiler would emit for it (`_ZNK2NS3Cls6methodEPKc`).
Only a small subset of the C++ declaration grammar is understood; see
`SignatureScanner` for what is accepted.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from itanium_mangler.cxx import CxxBuiltin, CxxParam, encode_source_name, encode_type
from itanium_mangler.errors import MangleError
from itanium_mangler.scanner import SignatureScanner
from itanium_mangler.substitution import SubstitutionTable
from itanium_mangler.token import Token

logger = logging.getLogger(__name__)

PREFIX = "_Z"


@dataclass
class MangleContext:
    """
    State for mangling a single symbol.
    """

    symbol: str
    # Whether the signature ends with a member `const` qualifier.
    is_const: bool = False
    is_member: bool = False
    out: list[str] = field(default_factory=lambda: [PREFIX])
    substitutions: SubstitutionTable = field(default_factory=SubstitutionTable)
    # Encoded name (and template arguments) not yet written to `out`.
    component: str = ""
    # Encoded scopes written so far, outermost first.
    scopes: list[str] = field(default_factory=list)

    def emit(self, *fragments: str):
        self.out.extend(fragments)

    def result(self) -> str:
        return "".join(self.out)

    def open_nested(self):
        """
        Start a nested name. Only the first scope of the symbol opens one.
        """
        if self.is_member:
            return

        self.is_member = True
        if self.out == [PREFIX]:
            self.emit("N")
            if self.is_const:
                self.emit("K")

    def flush_component(self) -> str:
        component = self.component
        self.emit(component)
        self.component = ""
        return component

    def add_scope(self, component: str):
        """
        Remember a finished scope so later parameters can refer back to it.
        """
        self.scopes.append(component)
        if len(self.scopes) == 1:
            self.substitutions.add(component)
        else:
            self.substitutions.add("N" + "".join(self.scopes) + "E")


@dataclass(frozen=True)
class MangleResult:
    """
    Outcome of `try_mangle`: either `symbol` or `error` is set.
    """

    signature: str
    symbol: Optional[str] = None
    error: Optional[MangleError] = None

    def __bool__(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """
        Return the mangled symbol, or raise the error that prevented mangling.
        """
        if self.error is not None:
            raise self.error
        assert self.symbol is not None
        return self.symbol


class ItaniumMangler:
    """
    Mangler object.
    """

    def mangle(self, symbol: str) -> str:
        tokens = SignatureScanner(symbol).scan()
        ctx = MangleContext(
            symbol=symbol,
            is_const=any(tok.is_const() for tok in tokens),
        )

        result = self._assemble(ctx, tokens)
        logger.debug("mangled '%s' as '%s'", symbol, result)
        return result

    def _assemble(self, ctx: MangleContext, tokens: list[Token]) -> str:
        for tok in tokens:
            if tok.is_name():
                ctx.component += encode_source_name(tok.content)

            elif tok.is_template_args():
                ctx.component += self._encode_template_args(tok)

            elif tok.is_scope():
                ctx.open_nested()
                component = ctx.flush_component()
                if component:
                    ctx.add_scope(component)

            elif tok.is_params():
                ctx.flush_component()
                if ctx.is_member:
                    ctx.emit("E")
                self._encode_params(ctx, tok)
                return ctx.result()

            elif tok.is_end():
                ctx.flush_component()
                if not ctx.is_member:
                    # Plain names are not mangled.
                    return ctx.symbol
                ctx.emit("E")
                return ctx.result()

        raise AssertionError("Token stream did not end with END")

    def _encode_template_args(self, tok: Token) -> str:
        """
        Arguments go through the builtin type table only; qualifiers on template
        arguments are not understood.
        """
        args = [encode_type(arg.strip()) for arg in tok.items]
        return "I" + "".join(args) + "E"

    def _encode_params(self, ctx: MangleContext, tok: Token):
        if not tok.content.strip():
            ctx.emit(str(CxxBuiltin.VOID))
            return

        for spelling in tok.items:
            param = CxxParam.from_spelling(spelling)
            if param.is_empty():
                logger.warning("empty parameter in symbol '%s'", ctx.symbol)
                continue

            ctx.emit(ctx.substitutions.encode(param))


def mangle(signature: str) -> str:
    """
    Mangle a declaration signature. Raises `MangleError` on malformed input.
    """
    m = ItaniumMangler()
    return m.mangle(signature)


def try_mangle(signature: str) -> MangleResult:
    """
    Mangle a declaration signature, reporting malformed input in the result
    instead of raising.
    """
    try:
        return MangleResult(signature=signature, symbol=mangle(signature))
    except MangleError as e:
        return MangleResult(signature=signature, error=e)
