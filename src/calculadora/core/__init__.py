"""
Módulo core con la lógica principal de la calculadora.
Contiene el estado, las transiciones, el formateo y el puntero de mano.
"""

from .calculator import Calculator, CalculatorState, calculate, transition
from .errors import CalculatorError, CameraError, UnknownKeyError
from .pointer import PinchTracker

__all__ = [
    'Calculator', 'CalculatorState', 'calculate', 'transition',
    'CalculatorError', 'CameraError', 'UnknownKeyError', 'PinchTracker',
]
