"""
Couche domaine (core).

Contient les entités métier, les erreurs, les ports (interfaces abstraites)
et les objets valeur. Cette couche n'a AUCUNE dépendance vers l'infrastructure.

Sous-packages :
- entities/ : Entités métier (Film, ViewStatus)
- ports/ : Interfaces abstraites (repository, sérialiseurs)
- value_objects/ : Objets valeur immutables (Status, FilterCriteria)
"""
