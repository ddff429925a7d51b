"""Utilitaires et constantes partagés."""
