# planetgen/core/naming.py
"""
Names and identities.

Names are drawn from the body's own stream (after every physical stage,
so a name hint never shifts physical draws). Ids are UUID5 values of
(kind, seed, stream position), so a replayed body gets the same id.
"""

from __future__ import annotations

import uuid

from planetgen.core.archetypes import BodyKind
from planetgen.core.rng import RandomStream

_NAMESPACE = uuid.UUID("5b0c6f3e-8a51-4d5e-9c57-1f0e2f1a9d42")

_PREFIXES = [
    "Kel", "Vor", "Thal", "Nex", "Zar", "Ori", "Ven", "Kra", "Sol", "Axi",
    "Eld", "Myr", "Cae", "Dra", "Pha", "Lum", "Gal", "Ter", "Nov", "Arc",
    "Xen", "Pyr", "Cor", "Val", "Syl", "Ash", "Bel", "Cyr", "Dyn", "Eth",
]

_SUFFIXES = [
    "ara", "ion", "ius", "oth", "enn", "ari", "ux", "on", "is", "ax",
    "heim", "mir", "thon", "dar", "kel", "van", "nor", "tal", "rin",
    "wen", "dor", "lis", "mar", "sel", "tis", "vex", "zen", "gor", "pax",
]

_ROMAN = ["I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII"]


def generate_name(kind: BodyKind, rng: RandomStream) -> str:
    """
    planet   : prefix + suffix                     (2 draws)
    moon     : prefix + suffix + roman numeral     (3 draws)
    asteroid : "(number) Prefixsuffix"             (3 draws)
    """
    base = rng.choice(_PREFIXES) + rng.choice(_SUFFIXES)
    if kind is BodyKind.MOON:
        return f"{base} {rng.choice(_ROMAN)}"
    if kind is BodyKind.ASTEROID:
        return f"({rng.int_range(1000, 999999)}) {base}"
    return base


def body_id(kind: BodyKind, seed: int, stream_position: int) -> str:
    return str(uuid.uuid5(_NAMESPACE, f"{kind.value}:{seed}:{stream_position}"))


__all__ = ["generate_name", "body_id"]
