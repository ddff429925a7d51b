"""
Interface en ligne de commande (Typer + Rich).

Les commandes chargent le catalogue configuré, agissent via la façade
VideothequeService puis sauvegardent le catalogue si elles l'ont modifié.
"""
