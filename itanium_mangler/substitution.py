"""
Substitution table used to compress repeated components into back references.
"""

from dataclasses import dataclass, field
from typing import Optional

from itanium_mangler.cxx import CxxParam, encode_prefix, encode_source_name


def backref(index: int) -> str:
    """
    Spell a back reference to the substitution at `index`: `S_`, `S0_`, `S1_`, ...
    """
    if index == 0:
        return "S_"
    return f"S{index - 1}_"


@dataclass
class SubstitutionTable:
    """
    Append-only list of previously emitted encodings, referenced by index.

    Entries are always stored uncompressed, so `N2NS1BE` is remembered as such
    even when it was emitted as `NS_1BE`.
    """

    entries: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, encoding: str) -> int:
        """
        Remember an encoding and get its index.
        """
        self.entries.append(encoding)
        return len(self.entries) - 1

    def lookup(self, encoding: str) -> Optional[int]:
        """
        Get the index of an exact entry, or `None` if it was never remembered.
        """
        try:
            return self.entries.index(encoding)
        except ValueError:
            return None

    def find(self, qualifiers: str, base: str) -> Optional[tuple[int, int]]:
        """
        Search for an entry matching a suffix of `qualifiers + base`.

        Entries are tried in insertion order, and for each entry the split point
        in `qualifiers` moves from the front to the back, so a full match wins
        over a partial one for the same entry.
        Returns `(index, split)` where `qualifiers[:split]` is left unmatched, or
        `None` if there is no match.
        """
        for index, entry in enumerate(self.entries):
            for split in range(len(qualifiers) + 1):
                if entry == qualifiers[split:] + base:
                    return (index, split)

        return None

    def _encode_scoped(self, names: list[str]) -> str:
        """
        Encode a nested name whose full spelling is not remembered yet.

        The longest remembered prefix is replaced by its back reference, and
        every longer prefix (the full name included) is remembered.
        """
        start = 0
        head = ""
        for depth in range(len(names) - 1, 0, -1):
            index = self.lookup(encode_prefix(names[:depth]))
            if index is not None:
                start = depth
                head = backref(index)
                break

        for depth in range(start + 1, len(names) + 1):
            self.add(encode_prefix(names[:depth]))

        return "N" + head + "".join(encode_source_name(n) for n in names[start:]) + "E"

    def encode(self, param: CxxParam) -> str:
        """
        Encode a parameter, using a back reference when a matching substitution
        exists and remembering the new substitution candidates when it does not.
        """
        base = param.encode_base()
        qualifiers = param.qualifiers

        if param.is_builtin() and not qualifiers:
            # Bare builtin types are never substitution candidates.
            return base

        match = self.find(qualifiers, base)
        if match:
            index, split = match
            return qualifiers[:split] + backref(index)

        emitted = base
        if param.is_scoped():
            emitted = self._encode_scoped(param.scope_names())
        elif not param.is_builtin():
            self.add(base)

        encoding = base
        for quali in reversed(qualifiers):
            encoding = quali + encoding
            self.add(encoding)

        return qualifiers + emitted
