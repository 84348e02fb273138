"""Users who watch films."""

from dataclasses import dataclass, field
from typing import ClassVar

from mediakit.pays import Pays


@dataclass
class Utilisateur:
    """A viewer; non-premium viewers may watch a limited number of films."""

    NB_FILMS_GRATUITS: ClassVar[int] = 3
    AGE_MINIMUM_POUR_FILMS_RESTREINTS: ClassVar[int] = 16

    nom: str
    age: int
    est_premium: bool
    pays: Pays
    nb_films_vus: int = field(default=0, init=False)

    def film_est_disponible(self, film):
        """Whether the film may be shown to this user, by age and country."""
        if self.age < self.AGE_MINIMUM_POUR_FILMS_RESTREINTS and film.est_restreint_par_age:
            return False
        return not film.est_restreint_dans_pays(self.pays)

    def nb_limite_films_atteint(self):
        """Whether a non-premium user has used up the free films."""
        return not self.est_premium and self.nb_films_vus >= self.NB_FILMS_GRATUITS

    def regarder_film(self, film):
        """Watch the film if allowed; return whether it was watched."""
        if not self.nb_limite_films_atteint() and self.film_est_disponible(film):
            self.nb_films_vus += 1
            return True
        return False