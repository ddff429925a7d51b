"""
Couche application (services).

- sorting : Stratégies de tri sélectionnables par clé
- history/ : Commandes réversibles et historique annuler/rétablir
- videotheque : Façade composant repository et historique
"""
