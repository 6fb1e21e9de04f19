"""
Módulo de interfaz de usuario.
Contiene la rejilla de botones y el renderizador.
"""

from .layout import Button, ButtonGrid
from .renderer import UIRenderer

__all__ = ['Button', 'ButtonGrid', 'UIRenderer']
