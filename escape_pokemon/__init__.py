"""Juego de escape de texto con salas descritas por archivos de objetos e interacciones."""

__version__ = "1.0.0"

__all__ = ["juego", "lista", "modelos", "resumen", "sala", "tabla_hash"]