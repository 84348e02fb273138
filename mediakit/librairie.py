"""A library of films, loadable from text files."""

import re

from mediakit.film import Film, Genre
from mediakit.gestionnaire_auteurs import _extraire_chaine_citee
from mediakit.pays import Pays, to_enum

_ENTIER_SIGNE = re.compile(r"\s*([+-]?\d+)")
_ENTIER_NON_SIGNE = re.compile(r"\s*\+?(\d+)")


def _decouper_ligne_film(ligne):
    """Split a film line into its fields, or return None if it is malformed."""
    lu = _extraire_chaine_citee(ligne, 0)
    if lu is None:
        return None
    nom, pos = lu
    valeurs = []
    for motif in (_ENTIER_NON_SIGNE, _ENTIER_SIGNE, _ENTIER_SIGNE, _ENTIER_SIGNE):
        correspondance = motif.match(ligne, pos)
        if correspondance is None:
            return None
        valeurs.append(int(correspondance.group(1)))
        pos = correspondance.end()
    annee, genre, pays, restreint = valeurs
    if restreint not in (0, 1):
        return None
    lu = _extraire_chaine_citee(ligne, pos)
    if lu is None:
        return None
    return nom, annee, genre, pays, bool(restreint), lu[0]


class Librairie:
    """An ordered collection of films that keeps its authors' film counts."""

    def __init__(self):
        self._films = []

    def ajouter(self, film):
        """Add a film and count it for its author; ``None`` is ignored."""
        if film is None:
            return
        film.auteur.nb_films += 1
        self._films.append(film)

    def retirer(self, nom_film):
        """Remove the first film named ``nom_film``; do nothing if there is none.

        The last film takes the place of the removed one.
        """
        index = self._trouver_index_film(nom_film)
        if index is None:
            return
        self._films[index].auteur.nb_films -= 1
        self._films[index] = self._films[-1]
        self._films.pop()

    def __iadd__(self, film):
        self.ajouter(film)
        return self

    def __isub__(self, nom_film):
        self.retirer(nom_film)
        return self

    def chercher_film(self, nom_film):
        """Return the first film named ``nom_film``, or None."""
        index = self._trouver_index_film(nom_film)
        return None if index is None else self._films[index]

    def charger_films_depuis_fichier(self, chemin, gestionnaire_auteurs):
        """Replace the films with those listed in ``chemin``.

        Each line holds a quoted name, the release year, the genre and country
        as integers, 0 or 1 for the age restriction, and the quoted author name,
        who must be known to ``gestionnaire_auteurs``.
        Raises FileNotFoundError if the file is missing and ValueError on a bad line.
        """
        with open(chemin, encoding="utf-8") as fichier:
            self.vider()
            for numero, ligne in enumerate(fichier, start=1):
                self._lire_ligne_film(ligne.rstrip("\n"), numero, gestionnaire_auteurs)

    def charger_restrictions_depuis_fichier(self, chemin):
        """Replace every film's country restrictions with those listed in ``chemin``.

        Each line holds a quoted film name followed by country numbers.
        Raises FileNotFoundError if the file is missing and ValueError on a bad line.
        """
        with open(chemin, encoding="utf-8") as fichier:
            for film in self._films:
                film.supprimer_pays_restreints()
            for numero, ligne in enumerate(fichier, start=1):
                self._lire_ligne_restrictions(ligne.rstrip("\n"), numero)

    def vider(self):
        """Remove every film, resetting the film count of their authors to zero."""
        for film in self._films:
            film.auteur.nb_films = 0
        self._films.clear()

    def copy(self):
        """A new library holding copies of these films."""
        copie = Librairie()
        copie._films = [film.copy() for film in self._films]
        return copie

    def _lire_ligne_film(self, ligne, numero, gestionnaire_auteurs):
        champs = _decouper_ligne_film(ligne)
        if champs is None:
            raise ValueError(f"invalid film on line {numero}: {ligne!r}")
        nom, annee, genre, pays, restreint, nom_auteur = champs
        auteur = gestionnaire_auteurs.chercher_auteur(nom_auteur)
        if auteur is None:
            raise ValueError(f"unknown author {nom_auteur!r} on line {numero}")
        film = Film(
            nom,
            annee,
            to_enum(Genre, genre),
            to_enum(Pays, pays),
            restreint,
            auteur,
        )
        self.ajouter(film)

    def _lire_ligne_restrictions(self, ligne, numero):
        lu = _extraire_chaine_citee(ligne, 0)
        if lu is None:
            raise ValueError(f"invalid restrictions on line {numero}: {ligne!r}")
        nom, pos = lu
        film = self.chercher_film(nom)
        if film is None:
            raise ValueError(f"unknown film {nom!r} on line {numero}")
        while (correspondance := _ENTIER_SIGNE.match(ligne, pos)) is not None:
            film.ajouter_pays_restreint(to_enum(Pays, int(correspondance.group(1))))
            pos = correspondance.end()

    def _trouver_index_film(self, nom_film):
        return next(
            (i for i, film in enumerate(self._films) if film.nom == nom_film),
            None,
        )

    def __len__(self):
        return len(self._films)

    def __iter__(self):
        return iter(self._films)

    def __str__(self):
        return "".join(f"{film}\n" for film in self._films)