from mediakit.agrandir_matrice import AgrandirMatrice
from mediakit.definitions import Couleur, Direction
from mediakit.image import Image
from mediakit.matrice import Matrice
from mediakit.pivoter_matrice import PivoterMatrice


def _matrice(valeurs):
    m = Matrice(int)
    m.height = len(valeurs)
    m.width = len(valeurs[0])
    for y, rangee in enumerate(valeurs):
        for x, valeur in enumerate(rangee):
            m.ajouter_element(valeur, y, x)
    return m


def _grille(m):
    return [[m.element(y, x) for x in range(m.width)] for y in range(m.height)]


def test_image_holds_given_matrix():
    m = _matrice([[1, 2], [3, 4]])
    assert Image(m).matrice is m


def test_str_lists_rows_with_separators():
    image = Image(_matrice([[1, 2], [3, 4]]))
    assert str(image) == "1 | 2 |\n3 | 4 |\n"


def test_str_pads_colours():
    m = Matrice(Couleur)
    m.height = 1
    m.width = 1
    assert str(Image(m)) == "      Noir |\n"


def test_str_of_rows_without_columns():
    m = Matrice(int)
    m.height = 2
    assert str(Image(m)) == "\n\n"


def test_resize_matches_enlarger():
    attendue = _matrice([[1, 2], [3, 4]])
    AgrandirMatrice(attendue).redimensionner_image(3)
    image = Image(_matrice([[1, 2], [3, 4]]))
    image.redimensionner_image(3)
    assert (image.matrice.height, image.matrice.width) == (6, 6)
    assert _grille(image.matrice) == _grille(attendue)


def test_rotation_matches_rotator():
    valeurs = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    attendue = _matrice(valeurs)
    PivoterMatrice(attendue).pivoter_matrice(Direction.Left)
    image = Image(_matrice(valeurs))
    image.pivoter_matrice(Direction.Left)
    assert _grille(image.matrice) == _grille(attendue)


def test_rotation_then_inverse_restores_image_text():
    image = Image(_matrice([[1, 2, 3], [4, 5, 6], [7, 8, 9]]))
    avant = str(image)
    image.pivoter_matrice(Direction.Right)
    image.pivoter_matrice(Direction.Left)
    assert str(image) == avant