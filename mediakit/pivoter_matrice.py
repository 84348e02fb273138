"""Quarter-turn rotation of a matrix about its centre."""

from mediakit.definitions import Coordonnees, Direction


class PivoterMatrice:
    """Rotates the matrix it is given, in place."""

    def __init__(self, matrice=None):
        self.matrice = matrice

    def _matrice(self):
        if self.matrice is None:
            raise ValueError("no matrix to rotate")
        return self.matrice

    def _changer_coordonnees_centre(self, coords):
        demi = self._matrice().height // 2
        return Coordonnees(coords.x - demi, coords.y - demi)

    def _recuperer_coordonnees(self, coords):
        demi = self._matrice().height // 2
        return Coordonnees(coords.x + demi, coords.y + demi)

    def pivoter_matrice(self, direction):
        """Turn the matrix a quarter turn towards ``direction``."""
        matrice = self._matrice()
        copie = matrice.clone()
        for i in range(copie.height):
            for j in range(copie.width):
                centre = self._changer_coordonnees_centre(Coordonnees(j, i))
                if direction == Direction.Left:
                    rotation = Coordonnees(centre.y, -centre.x)
                else:
                    rotation = Coordonnees(-centre.y, centre.x)
                rotation = self._recuperer_coordonnees(rotation)
                matrice.ajouter_element(copie.element(rotation.x, rotation.y), j, i)