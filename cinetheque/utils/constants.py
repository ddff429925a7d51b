"""
Constantes globales pour Cinetheque.

Ce module contient les constantes partagées par les sérialiseurs :
- Noms externes des champs (en-tête CSV, clés JSON)
- Libellés utilisés dans les messages d'erreur
"""

# Noms des champs dans les fichiers (en-tete CSV et cles JSON)
FIELD_TITLE = "title"
FIELD_CREATOR = "creator"
FIELD_RELEASE_YEAR = "releaseYear"
FIELD_CATEGORY = "category"
FIELD_RATING = "rating"
FIELD_VIEW_STATUS = "viewStatus"

FILE_FIELDS = (
    FIELD_TITLE,
    FIELD_CREATOR,
    FIELD_RELEASE_YEAR,
    FIELD_CATEGORY,
    FIELD_RATING,
    FIELD_VIEW_STATUS,
)

CSV_SEPARATOR = ","
CSV_QUOTE = '"'
CSV_HEADER = CSV_SEPARATOR.join(FILE_FIELDS)

# Titre affiche quand un enregistrement rejete a un titre vide
MISSING_TITLE_LABEL = "missing title"
