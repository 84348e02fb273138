# mediakit

mediakit holds two small toolkits in one package:

- A **film library**. It tracks authors, films, the countries where each film is restricted, and the users who watch the films.
- **Generic matrix images**. A matrix can hold integers, pixels, colour names or wrapped integers. An image built on a matrix can be enlarged with nearest-neighbour sampling and rotated by a quarter turn.

The package needs Python 3.10 or later and has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Film library

### Authors

An `Auteur` (`mediakit.auteur`) has a `nom`, an `annee_de_naissance` and an `nb_films` count. An author compares equal to a string that holds the same name, so `Auteur("Test", 23) == "Test"` is true. Printed, an author reads:

```
Nom: Test | Date de naissance: 23 | Nombre de films: 0
```

`GestionnaireAuteurs` (`mediakit.gestionnaire_auteurs`) holds at most `NB_AUTEURS_MAX` (16) authors. A new manager starts full, with 16 blank authors. Loading a file replaces them:

```python
from mediakit.gestionnaire_auteurs import GestionnaireAuteurs

auteurs = GestionnaireAuteurs()
auteurs.charger_depuis_fichier("auteurs.txt")
print(len(auteurs))
print(auteurs)
lucas = auteurs.chercher_auteur("George Lucas")  # None if there is no such author
```

Each line of the author file gives a quoted name and a year of birth:

```
"George Lucas" 1944
```

`ajouter(auteur)` raises `ValueError` once the manager is full. `charger_depuis_fichier` raises `FileNotFoundError` for a missing file. It raises `ValueError` for a malformed line, and also when the file lists more than 16 authors.

### Films and the library

A `Film` (`mediakit.film`) has these fields:

- `nom`
- `annee_de_sortie`
- `genre`, a `Genre`
- `pays`, a `Pays`
- `est_restreint_par_age`
- `auteur`
- `pays_restreints`

Its methods are `ajouter_pays_restreint`, `supprimer_pays_restreints`, `est_restreint_dans_pays` and `copy`.

A `Librairie` (`mediakit.librairie`) owns its films. Each line of the film file gives, in order:

1. the quoted title,
2. the release year,
3. the genre number,
4. the country number,
5. the age-restriction flag (`0` or `1`),
6. the quoted author name, which must be known to the author manager.

```
"A New Hope" 1977 0 3 0 "George Lucas"
```

Each line of the restrictions file gives a quoted title followed by country numbers:

```
"Raiders of the Lost Ark" 0 1 2
```

```python
from mediakit.librairie import Librairie

librairie = Librairie()
librairie.charger_films_depuis_fichier("films.txt", auteurs)
librairie.charger_restrictions_depuis_fichier("restrictionsPays.txt")

film = librairie.chercher_film("A New Hope")   # None if absent
librairie -= "A New Hope"                       # same as librairie.retirer(...)
librairie += film                               # same as librairie.ajouter(...)
copie = librairie.copy()
print(librairie)
```

The film count of an author changes as follows:

- Adding a film raises its author's `nb_films`. Adding `None` does nothing.
- Removing a film lowers that count. The last film then takes the removed film's place. Removing an unknown title does nothing.
- `vider()` empties the library and resets the `nb_films` of its films' authors to zero. Loading a film file does the same before it reads the file.
- `copy()` gives a new library of copied films. Those films share the same authors, and their counts do not change.

Loading the restrictions first clears the restrictions of every film. Both loaders raise `FileNotFoundError` for a missing file. They raise `ValueError` for any of these:

- a malformed line,
- an unknown author or film,
- a genre or country number out of range.

### Genres and countries

| Number | `Genre`  | `Pays`     |
|--------|----------|------------|
| 0      | Action   | Bresil     |
| 1      | Aventure | Canada     |
| 2      | Comedie  | Chine      |
| 3      | Horreur  | EtatsUnis  |
| 4      | Romance  | France     |
| 5      |          | Japon      |
| 6      |          | RoyaumeUni |
| 7      |          | Russie     |
| 8      |          | Mexique    |

`mediakit.pays.to_enum(Pays, 3)` returns `Pays.EtatsUnis`. It raises `ValueError` for a value outside the range.

### Users

```python
from mediakit.utilisateur import Utilisateur
from mediakit.pays import Pays

jean = Utilisateur("Jean", 20, False, Pays.Japon)
jean.regarder_film(film)   # True if the film was watched
print(jean.nb_films_vus)
```

The rules for watching a film are:

- A user who is not premium may watch at most `NB_FILMS_GRATUITS` (3) films.
- A user under 16 cannot watch age-restricted films.
- No user can watch a film that is restricted in their own country.

`film_est_disponible(film)` and `nb_limite_films_atteint()` check these rules without counting a viewing.

## Matrix images

### Element types

`mediakit.definitions` provides these types:

- `Coordonnees(x, y)`.
- `Direction`, with the members `Right` and `Left`.
- `Couleur`, a colour name. It defaults to `"Noir"` and prints right-aligned on 10 characters.
- `Entier`, a wrapped integer. It defaults to `26`.

Each element type has a `parse(text)` class method that raises `ValueError` when the text holds no value.

A `Pixel` (`mediakit.pixel`) keeps `rouge`, `vert` and `bleu` between 0 and 255 and clamps any value outside that range. `Pixel.parse("152 35 425")` gives `Pixel(152, 35, 255)`. A pixel prints in hexadecimal, for example `#01 C8 6F`.

### Matrices

A `Matrice(element_type)` (`mediakit.matrice`) has a fixed capacity of 100 by 100 cells. Every cell starts as `element_type()`, and the matrix keeps a logical `height` and `width`. The element type can be `int`, `Pixel`, `Couleur` or `Entier`.

```python
from mediakit.matrice import Matrice

matrice = Matrice(int)
matrice.charger_depuis_fichier("matrice_nombres.txt")
matrice.ajouter_element(7, 0, 0)
print(matrice.element(0, 0))
copie = matrice.clone()
```

Reads and writes behave as follows:

- `element(pos_y, pos_x)` returns a default value for a position beyond the height or width.
- `ajouter_element` raises `IndexError` outside the matrix.
- `lire_element(texte, pos_y, pos_x)` parses the text and stores the result.

In a matrix file, a line holding only `L` starts a new row, and every other line holds one element of the current row. A file must therefore begin with `L`. A line that cannot be parsed or placed raises `ValueError`.

### Enlarging and rotating

```python
from mediakit.image import Image
from mediakit.definitions import Direction

image = Image(matrice)
image.pivoter_matrice(Direction.Left)
image.redimensionner_image(3)
print(image)
```

An image prints one row per line, with cells separated by `" | "` and a trailing `" |"`.

`AgrandirMatrice` (`mediakit.agrandir_matrice`) and `PivoterMatrice` (`mediakit.pivoter_matrice`) apply the same operations directly to a matrix, in place:

- `AgrandirMatrice.redimensionner_image` raises `ValueError` when the enlarged matrix would exceed the capacity.
- `AgrandirMatrice.trouver_le_plus_proche_voisin(rapport, pos_y, pos_x)` returns the source point for an enlarged position.

## What the package does not do

mediakit is a library only. It installs no command-line program. Nothing in it saves a library, a set of authors or a matrix back to a file. It reads text files and prints to strings.