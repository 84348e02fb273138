"""RGB pixels whose channels are clamped to 0-255."""

import re

_ENTIER = re.compile(r"\s*([+-]?\d+)")


def _borner(valeur):
    return max(0, min(255, int(valeur)))


class Pixel:
    """A red, green and blue triple; each channel is kept within 0-255."""

    __slots__ = ("_rouge", "_vert", "_bleu")

    def __init__(self, rouge=0, vert=0, bleu=0):
        self.rouge = rouge
        self.vert = vert
        self.bleu = bleu

    @property
    def rouge(self):
        return self._rouge

    @rouge.setter
    def rouge(self, valeur):
        self._rouge = _borner(valeur)

    @property
    def vert(self):
        return self._vert

    @vert.setter
    def vert(self, valeur):
        self._vert = _borner(valeur)

    @property
    def bleu(self):
        return self._bleu

    @bleu.setter
    def bleu(self, valeur):
        self._bleu = _borner(valeur)

    @classmethod
    def parse(cls, text):
        """Read three integers from ``text``; raise ValueError if one is missing."""
        valeurs = []
        pos = 0
        for _ in range(3):
            correspondance = _ENTIER.match(text, pos)
            if correspondance is None:
                raise ValueError(f"expected three integers in {text!r}")
            valeurs.append(int(correspondance.group(1)))
            pos = correspondance.end()
        return cls(*valeurs)

    def __eq__(self, other):
        if not isinstance(other, Pixel):
            return NotImplemented
        return (self.rouge, self.vert, self.bleu) == (other.rouge, other.vert, other.bleu)

    __hash__ = None

    def __repr__(self):
        return f"Pixel({self.rouge}, {self.vert}, {self.bleu})"

    def __str__(self):
        return f"#{self.rouge:02X} {self.vert:02X} {self.bleu:02X}"