"""
Módulo de configuración de la calculadora.
Contiene las preferencias de ventana, voz y puntero de mano.
"""

from .settings import AppConfig

__all__ = ['AppConfig']
