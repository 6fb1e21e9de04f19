"""
Puntero de mano: geometría y confirmación de pulsaciones.

Convierte los landmarks de una mano en la posición de un puntero (punta del
índice) y decide cuándo un pellizco (pulgar + índice juntos) cuenta como clic.
No depende de MediaPipe: recibe los landmarks ya convertidos a píxeles.
"""

import math
from collections import deque


# Índices de landmarks de MediaPipe Hands
WRIST = 0
THUMB_TIP = 4
INDEX_MCP = 5
INDEX_TIP = 8


def distance(a, b):
    """Distancia euclidiana 2D entre dos landmarks {'x', 'y'}."""
    return math.sqrt((a['x'] - b['x'])**2 + (a['y'] - b['y'])**2)


def fingertip_position(landmarks):
    """Posición (x, y) en píxeles de la punta del índice, o None."""
    if len(landmarks) < 21:
        return None
    tip = landmarks[INDEX_TIP]
    return int(tip['x']), int(tip['y'])


def pinch_ratio(landmarks):
    """
    Distancia pulgar-índice relativa al tamaño de la mano.

    Returns:
        float: Distancia TIP(4)-TIP(8) dividida entre WRIST(0)-MCP(5), o None

    Normalizar por el tamaño de la mano hace el umbral independiente de la
    distancia a la cámara.
    """
    if len(landmarks) < 21:
        return None
    hand_size = distance(landmarks[WRIST], landmarks[INDEX_MCP])
    return distance(landmarks[THUMB_TIP], landmarks[INDEX_TIP]) / (hand_size + 1e-6)


# ============================================================================
# CLASE: PinchTracker
# Propósito: Confirmar clics por pellizco sostenido
# Responsabilidades:
#   - Acumular el estado de pellizco de los últimos frames
#   - Emitir un clic cuando el pellizco se mantiene `hold_frames` frames
#   - Exigir soltar antes del siguiente clic
# ============================================================================
class PinchTracker:
    """
    Sistema hold-to-confirm para el puntero de mano.

    Un clic se confirma cuando al menos `min_stability` de los últimos
    `hold_frames` frames detectan pellizco. Tras el clic el buffer se limpia y
    no se emite otro hasta que la mano se abre.
    """

    def __init__(self, hold_frames=15, threshold=0.35, min_stability=0.7):
        """
        Args:
            hold_frames (int): Frames que debe mantenerse el pellizco
            threshold (float): Valor máximo de `pinch_ratio` para considerar pellizco
            min_stability (float): Fracción de frames con pellizco requerida
        """
        self.hold_frames = hold_frames
        self.threshold = threshold
        self.min_stability = min_stability
        self.buffer = deque(maxlen=hold_frames)
        self.latched = False   # Clic emitido, esperando a que se suelte

    def configure(self, hold_frames, threshold):
        """Actualiza umbrales (ej: al activar el modo extendido)."""
        self.threshold = threshold
        if hold_frames != self.hold_frames:
            self.hold_frames = hold_frames
            self.buffer = deque(self.buffer, maxlen=hold_frames)

    def is_pinching(self, landmarks):
        ratio = pinch_ratio(landmarks)
        return ratio is not None and ratio < self.threshold

    def update(self, landmarks):
        """
        Procesa los landmarks de un frame.

        Args:
            landmarks (list): 21 landmarks en píxeles, o lista vacía sin mano

        Returns:
            bool: True si en este frame se confirma un clic
        """
        pinching = self.is_pinching(landmarks) if landmarks else False

        if self.latched:
            if not pinching:
                self.latched = False
            return False

        self.buffer.append(pinching)
        if len(self.buffer) < self.hold_frames:
            return False

        stability = sum(self.buffer) / len(self.buffer)
        if stability >= self.min_stability:
            self.latched = True
            self.reset_buffer()
            return True
        return False

    @property
    def progress(self):
        """Progreso del pellizco actual (0.0-1.0) para la barra visual."""
        if self.latched or not self.buffer:
            return 0.0
        return min(sum(self.buffer) / (self.hold_frames * self.min_stability), 1.0)

    def reset_buffer(self):
        self.buffer.clear()
