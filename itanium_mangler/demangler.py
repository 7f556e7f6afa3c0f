"""
Demangler for Itanium C++ ABI symbols.

Demangling is left to the C++ runtime's `__cxa_demangle`, reached through
`cxxfilt`.
"""

import logging

import cxxfilt

logger = logging.getLogger(__name__)

NO_TYPE = "<no type>"


def demangle(mangled: str) -> str:
    """
    Demangle `mangled` into a human readable name.

    Returns `NO_TYPE` if the runtime cannot demangle it; this never raises.
    """
    try:
        return cxxfilt.demangle(mangled, external_only=False)
    except (cxxfilt.Error, UnicodeError, ValueError) as e:
        logger.debug("unable to demangle '%s': %s", mangled, e)
        return NO_TYPE
