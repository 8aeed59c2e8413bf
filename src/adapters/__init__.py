"""Adaptadores: implementaciones concretas (credenciales, HTTP, ficheros)."""
