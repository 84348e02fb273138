"""Countries known to the catalogue and safe integer-to-enum conversion."""

from enum import IntEnum


class Pays(IntEnum):
    """Country of origin of a film, or of a user."""

    Bresil = 0
    Canada = 1
    Chine = 2
    EtatsUnis = 3
    France = 4
    Japon = 5
    RoyaumeUni = 6
    Russie = 7
    Mexique = 8


def to_enum(enum_cls, value):
    """Convert an integer to a member of ``enum_cls``, rejecting out-of-range values."""
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(
            f"{value!r} is not a valid value for {enum_cls.__name__}"
        ) from None