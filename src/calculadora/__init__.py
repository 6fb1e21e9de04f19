"""
Calculadora aritmética de dos operandos con rejilla de botones.
"""

from .core.calculator import Calculator, CalculatorState

__version__ = "1.0.0"

__all__ = ['Calculator', 'CalculatorState']
