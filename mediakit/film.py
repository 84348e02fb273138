"""Films and their genres."""

from dataclasses import dataclass, field
from enum import IntEnum

from mediakit.auteur import Auteur
from mediakit.pays import Pays


class Genre(IntEnum):
    """Genre of a film."""

    Action = 0
    Aventure = 1
    Comedie = 2
    Horreur = 3
    Romance = 4


@dataclass(eq=False)
class Film:
    """A film, with the countries in which it may not be shown."""

    nom: str
    annee_de_sortie: int
    genre: Genre
    pays: Pays
    est_restreint_par_age: bool
    auteur: Auteur
    pays_restreints: list = field(default_factory=list)

    def ajouter_pays_restreint(self, pays):
        """Forbid the film in ``pays``."""
        self.pays_restreints.append(pays)

    def supprimer_pays_restreints(self):
        """Lift every country restriction."""
        self.pays_restreints.clear()

    def est_restreint_dans_pays(self, pays):
        """Whether the film may not be shown in ``pays``."""
        return pays in self.pays_restreints

    def copy(self):
        """A new film with the same data, sharing the same author."""
        return Film(
            self.nom,
            self.annee_de_sortie,
            self.genre,
            self.pays,
            self.est_restreint_par_age,
            self.auteur,
            list(self.pays_restreints),
        )

    def __str__(self):
        lines = [
            self.nom,
            f"\tDate de sortie: {self.annee_de_sortie}",
            f"\tGenre: {Genre(self.genre).name}",
            f"\tAuteur: {self.auteur.nom}",
            f"\tPays: {Pays(self.pays).name}",
        ]
        if self.pays_restreints:
            lines.append("\tPays restreints:")
            lines.extend(f"\t\t{Pays(p).name}" for p in self.pays_restreints)
        else:
            lines.append("\tAucun pays restreint.")
        return "\n".join(lines) + "\n"