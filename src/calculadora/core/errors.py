"""
Excepciones de la calculadora.

La calculadora no muestra estados de error al usuario: la división por cero
devuelve 0 y el resto de entradas llegan siempre desde la rejilla de botones.
Estas excepciones cubren únicamente errores de programación y de arranque.
"""


class CalculatorError(Exception):
    """Error base de la calculadora."""


class UnknownKeyError(CalculatorError):
    """Se recibió una tecla que no existe en la rejilla de botones."""

    def __init__(self, key):
        super().__init__(f"Tecla desconocida: {key!r}")
        self.key = key


class CameraError(CalculatorError):
    """No se pudo abrir la cámara para el puntero de mano."""
