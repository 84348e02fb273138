"""An image backed by a matrix, which can be enlarged and rotated."""

from mediakit.agrandir_matrice import AgrandirMatrice
from mediakit.pivoter_matrice import PivoterMatrice


class Image:
    """Wraps a matrix and transforms it in place."""

    def __init__(self, matrice):
        self.matrice = matrice
        self._agrandissement = AgrandirMatrice(matrice)
        self._pivotement = PivoterMatrice(matrice)

    def redimensionner_image(self, rapport):
        """Enlarge the image by ``rapport``."""
        self._agrandissement.redimensionner_image(rapport)

    def pivoter_matrice(self, direction):
        """Turn the image a quarter turn towards ``direction``."""
        self._pivotement.pivoter_matrice(direction)

    def __str__(self):
        lignes = []
        for i in range(self.matrice.height):
            cellules = [str(self.matrice.element(i, j)) for j in range(self.matrice.width)]
            lignes.append(" | ".join(cellules) + " |" if cellules else "")
        return "".join(f"{ligne}\n" for ligne in lignes)