import pytest

from mediakit.pixel import Pixel


def test_setters_bornent_les_valeurs():
    pixel = Pixel()
    pixel.rouge = 255
    pixel.vert = 1998
    pixel.bleu = -522
    assert (pixel.rouge, pixel.vert, pixel.bleu) == (255, 255, 0)


def test_constructeur():
    pixel = Pixel(1, 200, 111)
    assert (pixel.rouge, pixel.vert, pixel.bleu) == (1, 200, 111)


def test_affichage_hexadecimal():
    assert str(Pixel(1, 200, 111)) == "#01 C8 6F"


def test_parse_borne_les_valeurs():
    pixel = Pixel.parse("152 35 425")
    assert (pixel.rouge, pixel.vert, pixel.bleu) == (152, 35, 255)


def test_pixel_par_defaut_noir():
    assert Pixel() == Pixel(0, 0, 0)


def test_constructeur_borne_aussi():
    assert Pixel(-10, 300, 128) == Pixel(0, 255, 128)


def test_parse_valeur_manquante():
    with pytest.raises(ValueError):
        Pixel.parse("12 34")


def test_parse_texte_invalide():
    with pytest.raises(ValueError):
        Pixel.parse("rouge vert bleu")


def test_egalite_par_canaux():
    assert Pixel(1, 2, 3) == Pixel.parse("1 2 3")
    assert not (Pixel(1, 2, 3) == Pixel(3, 2, 1))


def test_affichage_des_bornes():
    assert str(Pixel(255, 0, 255)) == "#FF 00 FF"