"""
Disposición de la rejilla de botones.

Define los botones de la calculadora, sus colores y su posición en píxeles,
y traduce la posición del puntero al botón que hay debajo.
"""


# ============================================================================
# COLORES (BGR)
# ============================================================================
BACKGROUND = (42, 23, 15)          # Fondo de la ventana
PANEL = (59, 41, 30)               # Fondo del display
BORDER = (85, 65, 51)              # Bordes
PREVIEW_TEXT = (184, 163, 148)     # Expresión pendiente
VALUE_TEXT = (255, 255, 255)       # Valor actual

# variante: (fondo, fondo con hover, texto)
VARIANTS = {
    'default': ((255, 255, 255), (251, 250, 249), (55, 41, 31)),
    'operation': ((22, 115, 249), (12, 88, 234), (255, 255, 255)),
    'equal': ((94, 197, 34), (74, 163, 22), (255, 255, 255)),
    'clear': ((68, 68, 239), (38, 38, 220), (255, 255, 255)),
}

COLUMNS = 4

# Filas de la rejilla: (etiqueta, variante, columnas que ocupa)
BUTTON_ROWS = [
    [("C", 'clear', 1), ("+/-", 'default', 1), ("%", 'default', 1), ("÷", 'operation', 1)],
    [("7", 'default', 1), ("8", 'default', 1), ("9", 'default', 1), ("×", 'operation', 1)],
    [("4", 'default', 1), ("5", 'default', 1), ("6", 'default', 1), ("-", 'operation', 1)],
    [("1", 'default', 1), ("2", 'default', 1), ("3", 'default', 1), ("+", 'operation', 1)],
    [("0", 'default', 2), (".", 'default', 1), ("=", 'equal', 1)],
]


class Button:
    """Botón de la rejilla con su rectángulo en píxeles."""

    def __init__(self, label, variant, x, y, w, h):
        self.label = label
        self.variant = variant
        self.x, self.y, self.w, self.h = x, y, w, h

    def contains(self, px, py):
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    @property
    def center(self):
        return self.x + self.w // 2, self.y + self.h // 2

    @property
    def colors(self):
        return VARIANTS[self.variant]

    def __repr__(self):
        return f"Button({self.label!r}, {self.variant!r}, {self.x}, {self.y}, {self.w}, {self.h})"


# ============================================================================
# CLASE: ButtonGrid
# Propósito: Posicionar los botones en la ventana
# Responsabilidades:
#   - Calcular el rectángulo de cada botón a partir del área disponible
#   - Resolver qué botón hay bajo una posición (hit test)
# ============================================================================
class ButtonGrid:
    """
    Rejilla de 4 columnas y 5 filas.

    Args:
        x, y (int): Esquina superior izquierda del área de botones
        width, height (int): Tamaño del área de botones
        gap (int): Separación entre botones en píxeles
    """

    def __init__(self, x, y, width, height, gap=12):
        self.x, self.y = x, y
        self.width, self.height = width, height
        self.gap = gap
        self.buttons = self._build()

    def _build(self):
        rows = len(BUTTON_ROWS)
        cell_w = (self.width - self.gap * (COLUMNS - 1)) // COLUMNS
        cell_h = (self.height - self.gap * (rows - 1)) // rows

        buttons = []
        for r, row in enumerate(BUTTON_ROWS):
            col = 0
            for label, variant, span in row:
                bx = self.x + col * (cell_w + self.gap)
                by = self.y + r * (cell_h + self.gap)
                bw = cell_w * span + self.gap * (span - 1)
                buttons.append(Button(label, variant, bx, by, bw, cell_h))
                col += span
        return buttons

    def hit_test(self, px, py):
        """Botón bajo la posición (px, py), o None si cae entre botones."""
        for button in self.buttons:
            if button.contains(px, py):
                return button
        return None

    def get(self, label):
        for button in self.buttons:
            if button.label == label:
                return button
        return None

    @property
    def labels(self):
        return [b.label for b in self.buttons]

    @classmethod
    def for_window(cls, width, height, margin=24, top=244):
        """Rejilla que ocupa la ventana por debajo del display."""
        return cls(margin, top, width - 2 * margin, height - top - margin)
