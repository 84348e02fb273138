"""Nearest-neighbour enlargement of a matrix."""

from mediakit.definitions import Coordonnees


class AgrandirMatrice:
    """Enlarges the matrix it is given, in place."""

    def __init__(self, matrice=None):
        self.matrice = matrice

    def _matrice(self):
        if self.matrice is None:
            raise ValueError("no matrix to enlarge")
        return self.matrice

    def trouver_le_plus_proche_voisin(self, rapport, pos_y, pos_x):
        """The point of the original matrix closest to (``pos_y``, ``pos_x``) once enlarged."""
        return Coordonnees(pos_x // rapport, pos_y // rapport)

    def redimensionner_image(self, rapport):
        """Multiply both dimensions by ``rapport``, repeating each element.

        Raises ValueError if the result would exceed the matrix capacity.
        """
        matrice = self._matrice()
        hauteur = matrice.height * rapport
        largeur = matrice.width * rapport
        if hauteur > matrice.CAPACITE or largeur > matrice.CAPACITE:
            raise ValueError(
                f"a {hauteur}x{largeur} matrix exceeds the capacity of {matrice.CAPACITE}"
            )
        copie = matrice.clone()
        matrice.height = hauteur
        matrice.width = largeur
        for i in range(hauteur):
            for j in range(largeur):
                voisin = self.trouver_le_plus_proche_voisin(rapport, i, j)
                matrice.ajouter_element(copie.element(voisin.x, voisin.y), j, i)