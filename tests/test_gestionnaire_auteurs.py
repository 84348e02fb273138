import pytest

from mediakit.auteur import Auteur
from mediakit.gestionnaire_auteurs import GestionnaireAuteurs


@pytest.fixture
def fichier_auteurs(tmp_path):
    chemin = tmp_path / "auteurs.txt"
    chemin.write_text(
        '"George Lucas" 1944\n"John Ronald Reuel Tolkien" 1892\n', encoding="utf-8"
    )
    return chemin


@pytest.fixture
def gestionnaire(fichier_auteurs):
    g = GestionnaireAuteurs()
    g.charger_depuis_fichier(fichier_auteurs)
    return g


def test_starts_full():
    g = GestionnaireAuteurs()
    assert len(g) == GestionnaireAuteurs.NB_AUTEURS_MAX
    with pytest.raises(ValueError):
        g.ajouter(Auteur("x", 1))


def test_load_twice_gives_same_content(fichier_auteurs):
    g = GestionnaireAuteurs()
    g.charger_depuis_fichier(fichier_auteurs)
    g.charger_depuis_fichier(fichier_auteurs)
    assert len(g) == 2
    assert [a.nom for a in g] == ["George Lucas", "John Ronald Reuel Tolkien"]


def test_str_after_load(gestionnaire):
    compact = "".join(str(gestionnaire).split())
    assert compact == (
        "Nom:GeorgeLucas|Datedenaissance:1944|Nombredefilms:0Nom:"
        "JohnRonaldReuelTolkien|Datedenaissance:1892|Nombredefilms:0"
    )
    assert str(gestionnaire).count("\n") == len(gestionnaire)


def test_fill_to_capacity_then_reject(gestionnaire):
    while len(gestionnaire) < GestionnaireAuteurs.NB_AUTEURS_MAX:
        gestionnaire.ajouter(Auteur("", 0))
    assert len(gestionnaire) == GestionnaireAuteurs.NB_AUTEURS_MAX
    with pytest.raises(ValueError):
        gestionnaire.ajouter(Auteur("", 0))
    assert len(gestionnaire) == GestionnaireAuteurs.NB_AUTEURS_MAX


def test_search(gestionnaire):
    trouve = gestionnaire.chercher_auteur("George Lucas")
    assert trouve is not None and trouve.annee_de_naissance == 1944
    assert gestionnaire.chercher_auteur("qwerty") is None


def test_search_returns_shared_instance(gestionnaire):
    a = gestionnaire.chercher_auteur("George Lucas")
    a.nb_films = 6
    assert gestionnaire.chercher_auteur("George Lucas").nb_films == 6


def test_missing_file_raises(tmp_path):
    g = GestionnaireAuteurs()
    with pytest.raises(FileNotFoundError):
        g.charger_depuis_fichier(tmp_path / "absent.txt")
    assert len(g) == GestionnaireAuteurs.NB_AUTEURS_MAX


@pytest.mark.parametrize("ligne", ['"Sans annee"', "", '"Mauvaise annee" abc'])
def test_bad_line_raises(tmp_path, ligne):
    chemin = tmp_path / "auteurs.txt"
    chemin.write_text(f'"Valide" 1900\n{ligne}\n', encoding="utf-8")
    g = GestionnaireAuteurs()
    with pytest.raises(ValueError):
        g.charger_depuis_fichier(chemin)
    assert [a.nom for a in g] == ["Valide"]


def test_unquoted_and_escaped_names(tmp_path):
    chemin = tmp_path / "auteurs.txt"
    chemin.write_text('Solo 1990\n"Dit \\"le Grand\\"" 1800\n', encoding="utf-8")
    g = GestionnaireAuteurs()
    g.charger_depuis_fichier(chemin)
    assert [a.nom for a in g] == ["Solo", 'Dit "le Grand"']
    assert g.chercher_auteur("Solo").annee_de_naissance == 1990