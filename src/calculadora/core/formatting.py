"""
Conversión de números a texto para el display.

Los operandos se guardan como texto. Este módulo decide cómo se escribe un
número tras cada operación y cómo se abrevia un valor demasiado largo para
caber en pantalla.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

import numpy as np


# Límite de caracteres antes de pasar a notación exponencial
MAX_DISPLAY_LENGTH = 12
EXPONENTIAL_DIGITS = 6

# Prefijo numérico más largo al inicio del texto ("1e-8." → "1e-8")
NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_float(text):
    """
    Lee el número al inicio de `text`, ignorando lo que venga detrás.

    Args:
        text (str): Texto del display (ej: "1e-8.", "Infinity5")

    Returns:
        float: Valor del prefijo numérico, o NaN si no hay ninguno

    Ejemplos:
        "1e-8." → 1e-8
        "Infinity5" → inf
        "1e" → 1.0
        "abc" → nan
    """
    match = NUMBER_PREFIX.match(str(text))
    if match is None:
        return math.nan
    return float(match.group(1))


def format_number(value):
    """
    Convierte un número a su representación textual más corta.

    Args:
        value (float): Número a convertir

    Returns:
        str: Texto sin ".0" para enteros ("3"), notación posicional entre
             1e-6 y 1e21, exponencial fuera de ese rango ("1e+21", "1e-7")

    Ejemplos:
        3.0 → "3"
        -0.0 → "0"
        0.1 + 0.2 → "0.30000000000000004"
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"  # Incluye -0

    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim='-')
    return np.format_float_scientific(value, trim='-', exp_digits=1)


def to_exponential(value, digits=EXPONENTIAL_DIGITS):
    """
    Formatea un número en notación exponencial con `digits` decimales.

    El exponente se escribe sin ceros a la izquierda y siempre con signo:
    123456789.123 → "1.234568e+8".

    La mantisa se redondea sobre el valor exacto del float; en un empate
    exacto gana la mantisa de mayor magnitud (1234568.5 → "1.234569e+6").
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    prefix = "-" if value < 0 else ""
    step = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = 1100  # Suficiente para la expansión exacta de cualquier float
        magnitude = Decimal(abs(value))
        exponent = magnitude.adjusted() if magnitude else 0
        mantissa = magnitude.scaleb(-exponent).quantize(step, rounding=ROUND_HALF_UP)
        if mantissa >= 10:
            exponent += 1
            mantissa = (mantissa / 10).quantize(step, rounding=ROUND_HALF_UP)

    sign = "+" if exponent >= 0 else "-"
    return f"{prefix}{mantissa:f}e{sign}{abs(exponent)}"


def format_display(text, max_length=MAX_DISPLAY_LENGTH, digits=EXPONENTIAL_DIGITS):
    """
    Texto que se muestra en la línea principal del display.

    Args:
        text (str): Valor actual del display
        max_length (int): Longitud máxima en texto plano
        digits (int): Decimales de la mantisa en notación exponencial

    Returns:
        str: `text` sin cambios si cabe, o su notación exponencial
    """
    if len(text) > max_length:
        return to_exponential(parse_float(text), digits)
    return text


def format_preview(previous, operator):
    """Expresión pendiente ("12 +") o cadena vacía si no hay operación."""
    if operator and previous:
        return f"{previous} {operator}"
    return ""
