"""Film authors."""

from dataclasses import dataclass


@dataclass(eq=False)
class Auteur:
    """An author, with the number of films attributed to them."""

    nom: str = ""
    annee_de_naissance: int = 0
    nb_films: int = 0

    def __eq__(self, other):
        """An author equals a string holding the same name."""
        if isinstance(other, str):
            return self.nom == other
        return NotImplemented

    __hash__ = object.__hash__

    def __str__(self):
        return (
            f"Nom: {self.nom} | Date de naissance: {self.annee_de_naissance}"
            f" | Nombre de films: {self.nb_films}"
        )