"""A generic fixed-capacity matrix whose cells hold values of one element type."""

import copy
import re

_ENTIER = re.compile(r"\s*([+-]?\d+)")


def _lire_valeur(element_type, texte):
    """Build an ``element_type`` value from the start of ``texte``."""
    if element_type is int:
        correspondance = _ENTIER.match(texte)
        if correspondance is None:
            raise ValueError(f"no integer in {texte!r}")
        return int(correspondance.group(1))
    parse = getattr(element_type, "parse", None)
    if parse is not None:
        return parse(texte)
    mots = texte.split()
    if not mots:
        raise ValueError(f"no value in {texte!r}")
    return element_type(mots[0])


class Matrice:
    """A grid of ``CAPACITE`` by ``CAPACITE`` cells with a logical height and width.

    Every cell starts as ``element_type()``. Values are copied on the way in and
    on the way out, so cells never share state with the caller.
    """

    CAPACITE = 100

    def __init__(self, element_type=int):
        self.element_type = element_type
        self.height = 0
        self.width = 0
        self._elements = [
            [element_type() for _ in range(self.CAPACITE)] for _ in range(self.CAPACITE)
        ]

    def _verifier_capacite(self, pos_y, pos_x):
        if not (0 <= pos_y < self.CAPACITE and 0 <= pos_x < self.CAPACITE):
            raise IndexError(
                f"position ({pos_y}, {pos_x}) is outside the capacity of {self.CAPACITE}"
            )

    def element(self, pos_y, pos_x):
        """Return the value at (``pos_y``, ``pos_x``).

        A position beyond the height or width, or a negative one, yields a
        default ``element_type()`` value.
        """
        if pos_y < 0 or pos_x < 0 or pos_y > self.height or pos_x > self.width:
            return self.element_type()
        self._verifier_capacite(pos_y, pos_x)
        return copy.copy(self._elements[pos_x][pos_y])

    def ajouter_element(self, element, pos_y, pos_x):
        """Store ``element`` at (``pos_y``, ``pos_x``).

        Raises IndexError when the position lies outside the matrix.
        """
        self._verifier_capacite(pos_y, pos_x)
        if pos_y > self.height and pos_x > self.width:
            raise IndexError(
                f"position ({pos_y}, {pos_x}) is outside a "
                f"{self.height}x{self.width} matrix"
            )
        self._elements[pos_x][pos_y] = copy.copy(element)

    def lire_element(self, texte, pos_y, pos_x):
        """Parse ``texte`` as an element and store it at (``pos_y``, ``pos_x``).

        Raises ValueError when the text holds no element.
        """
        self.ajouter_element(_lire_valeur(self.element_type, texte), pos_y, pos_x)

    def charger_depuis_fichier(self, chemin):
        """Fill the matrix from ``chemin``.

        A line holding only ``L`` starts a new row; every other line holds one
        element of the current row. Raises FileNotFoundError if the file is
        missing and ValueError on a line that cannot be placed or parsed.
        """
        with open(chemin, encoding="utf-8") as fichier:
            self.height = 0
            for numero, ligne in enumerate(fichier, start=1):
                ligne = ligne.rstrip("\n")
                if ligne == "L":
                    self.width = 0
                    self.height += 1
                    continue
                try:
                    self.lire_element(ligne, self.height - 1, self.width)
                except (ValueError, IndexError) as erreur:
                    raise ValueError(
                        f"invalid element on line {numero}: {ligne!r}"
                    ) from erreur
                self.width += 1

    def clone(self):
        """A new matrix with the same dimensions and values."""
        copie = type(self).__new__(type(self))
        copie.element_type = self.element_type
        copie.height = self.height
        copie.width = self.width
        copie._elements = [list(rangee) for rangee in self._elements]
        return copie