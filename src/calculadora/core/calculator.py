"""
Lógica de calculadora aritmética de dos operandos.

Este módulo contiene el estado de la calculadora, las funciones de transición
que lo actualizan al pulsar cada botón y la clase Calculator que guarda el
estado actual y avisa a los renderizadores tras cada cambio.
"""

from dataclasses import dataclass, replace

from .errors import UnknownKeyError
from .formatting import format_display, format_number, format_preview, parse_float


# ============================================================================
# TECLAS DE LA REJILLA
# ============================================================================
DIGITS = "0123456789"
OPERATORS = ("+", "-", "×", "÷")
DECIMAL = "."
TOGGLE_SIGN = "+/-"
PERCENT = "%"
EQUALS = "="
CLEAR = "C"

# Símbolos alternativos que se normalizan al operador canónico
OPERATOR_ALIASES = {
    "−": "-",
    "*": "×",
    "x": "×",
    "/": "÷",
}


def normalize_operator(op):
    """Devuelve el símbolo canónico de un operador (ej: "*" → "×")."""
    return OPERATOR_ALIASES.get(op, op)


# ============================================================================
# CLASE: CalculatorState
# Propósito: Estado inmutable de la calculadora
#   - display: Texto mostrado en pantalla (se lee con parse_float)
#   - previous: Operando izquierdo capturado al pulsar un operador
#   - operator: Operador pendiente de segundo operando
#   - waiting_for_operand: El siguiente dígito empieza un número nuevo
# ============================================================================
@dataclass(frozen=True)
class CalculatorState:
    display: str = "0"
    previous: str = None
    operator: str = None
    waiting_for_operand: bool = False


INITIAL_STATE = CalculatorState()


# ============================================================================
# EVALUADOR
# ============================================================================
def calculate(first, second, operator):
    """
    Aplica un operador binario a dos operandos.

    Args:
        first (float): Operando izquierdo
        second (float): Operando derecho
        operator (str): "+", "-", "×" o "÷"

    Returns:
        float: Resultado de la operación

    Nota:
        La división por cero devuelve 0 en lugar de un error. Un operador
        desconocido devuelve el segundo operando.
    """
    operator = normalize_operator(operator)
    if operator == "+":
        return first + second
    if operator == "-":
        return first - second
    if operator == "×":
        return first * second
    if operator == "÷":
        return first / second if second != 0 else 0
    return second


# ============================================================================
# FUNCIONES DE TRANSICIÓN
# Cada función recibe un estado y devuelve el estado siguiente
# ============================================================================
def input_digit(state, digit):
    """
    Añade un dígito al display.

    Si se espera un operando nuevo, el dígito sustituye al display.
    Un "0" solitario también se sustituye (colapso de ceros a la izquierda).
    """
    digit = str(digit)
    if state.waiting_for_operand:
        return replace(state, display=digit, waiting_for_operand=False)
    display = digit if state.display == "0" else state.display + digit
    return replace(state, display=display)


def input_decimal(state):
    """Añade el punto decimal (solo uno por número)."""
    if state.waiting_for_operand:
        return replace(state, display="0.", waiting_for_operand=False)
    if DECIMAL not in state.display:
        return replace(state, display=state.display + DECIMAL)
    return state


def input_operator(state, operator):
    """
    Registra un operador.

    Comportamiento:
        1. Sin operando previo: el display pasa a ser el operando previo
        2. Con operador pendiente: se evalúa la operación pendiente y el
           resultado pasa al display y al operando previo (encadenado)

    Ejemplo:
        2 + 3 + → display="5", previous="5", operator="+"
    """
    operator = normalize_operator(operator)
    value = parse_float(state.display)
    display = state.display
    previous = state.previous

    if previous is None:
        previous = format_number(value)
    elif state.operator:
        result = calculate(parse_float(previous or "0"), value, state.operator)
        display = previous = format_number(result)

    return CalculatorState(display=display, previous=previous,
                           operator=operator, waiting_for_operand=True)


def equals(state):
    """Evalúa la operación pendiente, si la hay."""
    if state.previous is None or not state.operator:
        return state
    result = calculate(parse_float(state.previous), parse_float(state.display), state.operator)
    return CalculatorState(display=format_number(result), previous=None,
                           operator=None, waiting_for_operand=True)


def clear(state):
    """Vuelve al estado inicial (botón C)."""
    return INITIAL_STATE


def percentage(state):
    """Divide el valor del display entre 100."""
    return replace(state, display=format_number(parse_float(state.display) / 100))


def toggle_sign(state):
    """Cambia el signo del valor del display."""
    return replace(state, display=format_number(parse_float(state.display) * -1))


_ACTIONS = {
    DECIMAL: input_decimal,
    TOGGLE_SIGN: toggle_sign,
    PERCENT: percentage,
    EQUALS: equals,
    CLEAR: clear,
}


def transition(state, key):
    """
    Calcula el estado siguiente tras pulsar un botón.

    Args:
        state (CalculatorState): Estado actual
        key (str): Etiqueta del botón ("7", ".", "+", "÷", "=", "C", ...)

    Returns:
        CalculatorState: Estado siguiente

    Raises:
        UnknownKeyError: Si la etiqueta no corresponde a ningún botón
    """
    if len(key) == 1 and key in DIGITS:
        return input_digit(state, key)
    if normalize_operator(key) in OPERATORS:
        return input_operator(state, key)
    action = _ACTIONS.get(key)
    if action is None:
        raise UnknownKeyError(key)
    return action(state)


# ============================================================================
# CLASE: Calculator
# Propósito: Contenedor del estado actual
# Responsabilidades:
#   - Aplicar transiciones al pulsar botones
#   - Notificar a los callbacks de renderizado tras cada cambio
#   - Exponer el texto del display y de la expresión pendiente
# ============================================================================
class Calculator:
    """
    Calculadora de dos operandos con evaluación de izquierda a derecha.

    El estado es inmutable; cada pulsación lo sustituye por el resultado de
    `transition()` y llama a los callbacks suscritos con el nuevo estado.
    """

    def __init__(self, state=None):
        self.state = state if state else INITIAL_STATE
        self._listeners = []

    # ------------------------------------------------------------------
    # Suscripción de renderizadores
    # ------------------------------------------------------------------
    def subscribe(self, callback):
        """Registra `callback(state)`; se llama tras cada pulsación."""
        self._listeners.append(callback)
        return callback

    def unsubscribe(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self.state)

    # ------------------------------------------------------------------
    # Entrada
    # ------------------------------------------------------------------
    def press(self, key):
        """
        Procesa la pulsación de un botón.

        Args:
            key (str): Etiqueta del botón

        Returns:
            CalculatorState: Nuevo estado
        """
        self.state = transition(self.state, key)
        self._notify()
        return self.state

    def press_sequence(self, keys):
        """Pulsa varios botones en orden (ej: ["1", "+", "2", "="])."""
        for key in keys:
            self.press(key)
        return self.state

    def clear_all(self):
        return self.press(CLEAR)

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------
    @property
    def display(self):
        return self.state.display

    @property
    def previous(self):
        return self.state.previous

    @property
    def operator(self):
        return self.state.operator

    @property
    def waiting_for_operand(self):
        return self.state.waiting_for_operand

    def get_display(self):
        """Texto de la línea principal (exponencial si supera 12 caracteres)."""
        return format_display(self.state.display)

    def get_expression(self):
        """Expresión pendiente para la línea superior ("12 +")."""
        return format_preview(self.state.previous, self.state.operator)
