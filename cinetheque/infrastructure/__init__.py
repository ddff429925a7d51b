"""
Couche infrastructure.

Contient les implémentations concrètes des ports de persistance.
"""
