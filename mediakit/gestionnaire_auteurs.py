"""A bounded collection of authors, loadable from a text file."""

import re

from mediakit.auteur import Auteur

_ENTIER = re.compile(r"\s*\+?(\d+)")


def _extraire_chaine_citee(texte, pos):
    """Read a possibly quoted word starting at ``pos``; return (value, new_pos) or None."""
    longueur = len(texte)
    while pos < longueur and texte[pos].isspace():
        pos += 1
    if pos >= longueur:
        return None
    if texte[pos] != '"':
        debut = pos
        while pos < longueur and not texte[pos].isspace():
            pos += 1
        return texte[debut:pos], pos
    pos += 1
    caracteres = []
    while pos < longueur:
        c = texte[pos]
        if c == "\\" and pos + 1 < longueur:
            caracteres.append(texte[pos + 1])
            pos += 2
            continue
        if c == '"':
            return "".join(caracteres), pos + 1
        caracteres.append(c)
        pos += 1
    return "".join(caracteres), pos


class GestionnaireAuteurs:
    """Holds at most ``NB_AUTEURS_MAX`` authors."""

    NB_AUTEURS_MAX = 16

    def __init__(self):
        self._auteurs = [Auteur() for _ in range(self.NB_AUTEURS_MAX)]

    def ajouter(self, auteur):
        """Add an author; raise ValueError when the collection is full."""
        if len(self._auteurs) >= self.NB_AUTEURS_MAX:
            raise ValueError(
                f"cannot hold more than {self.NB_AUTEURS_MAX} authors"
            )
        self._auteurs.append(auteur)

    def chercher_auteur(self, nom_auteur):
        """Return the first author named ``nom_auteur``, or None."""
        return next((a for a in self._auteurs if a.nom == nom_auteur), None)

    def charger_depuis_fichier(self, chemin):
        """Replace the authors with those listed in ``chemin``.

        Each line holds a quoted name followed by a birth year.
        Raises FileNotFoundError if the file is missing and ValueError on a bad line.
        """
        with open(chemin, encoding="utf-8") as fichier:
            self._auteurs.clear()
            for numero, ligne in enumerate(fichier, start=1):
                self._lire_ligne_auteur(ligne.rstrip("\n"), numero)

    def _lire_ligne_auteur(self, ligne, numero):
        lu = _extraire_chaine_citee(ligne, 0)
        if lu is not None:
            nom, pos = lu
            correspondance = _ENTIER.match(ligne, pos)
            if correspondance is not None:
                self.ajouter(Auteur(nom, int(correspondance.group(1))))
                return
        raise ValueError(f"invalid author on line {numero}: {ligne!r}")

    def __len__(self):
        return len(self._auteurs)

    def __iter__(self):
        return iter(self._auteurs)

    def __str__(self):
        return "".join(f"{auteur}\n" for auteur in self._auteurs)