"""Coordinates, rotation directions and simple matrix element types."""

import re
from dataclasses import dataclass
from enum import IntEnum

_ENTIER = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Coordonnees:
    """A point given by column ``x`` and row ``y``."""

    x: int
    y: int


class Direction(IntEnum):
    """Direction of a quarter-turn rotation."""

    Right = 0
    Left = 1


@dataclass(eq=False)
class Couleur:
    """A colour held by its name."""

    couleur: str = "Noir"

    @classmethod
    def parse(cls, text):
        """Read the first word of ``text``; raise ValueError if there is none."""
        mots = text.split()
        if not mots:
            raise ValueError(f"no colour in {text!r}")
        return cls(mots[0])

    def __eq__(self, other):
        if isinstance(other, str):
            return self.couleur == other
        if isinstance(other, Couleur):
            return self.couleur == other.couleur
        return NotImplemented

    def __str__(self):
        return f"{self.couleur:>10}"


@dataclass(eq=False)
class Entier:
    """A wrapped integer."""

    nombre: int = 26

    @classmethod
    def parse(cls, text):
        """Read the leading integer of ``text``; raise ValueError if there is none."""
        correspondance = _ENTIER.match(text)
        if correspondance is None:
            raise ValueError(f"no integer in {text!r}")
        return cls(int(correspondance.group(1)))

    def __eq__(self, other):
        if isinstance(other, Entier):
            return self.nombre == other.nombre
        if isinstance(other, int):
            return self.nombre == other
        return NotImplemented

    def __str__(self):
        return str(self.nombre)