"""
Python package which implements an Itanium C++ ABI mangler for declaration signatures.
"""

from itanium_mangler.cxx import CxxBuiltin, CxxParam, CxxQualifier
from itanium_mangler.demangler import NO_TYPE, demangle
from itanium_mangler.errors import MangleError
from itanium_mangler.mangler import ItaniumMangler, MangleContext, MangleResult, mangle, try_mangle
from itanium_mangler.scanner import SignatureScanner, scan
from itanium_mangler.substitution import SubstitutionTable
from itanium_mangler.token import Token

__all__ = [
    "mangle",
    "try_mangle",
    "demangle",
    "NO_TYPE",
    "ItaniumMangler",
    "MangleContext",
    "MangleError",
    "MangleResult",
    "SignatureScanner",
    "scan",
    "SubstitutionTable",
    "Token",
    "CxxBuiltin",
    "CxxParam",
    "CxxQualifier",
]
