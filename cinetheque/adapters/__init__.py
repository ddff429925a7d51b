"""
Couche adaptateurs.

Sous-packages :
- serializers/ : Lecture et écriture du catalogue en CSV et JSON
- cli/ : Interface en ligne de commande (Typer + Rich)
"""
