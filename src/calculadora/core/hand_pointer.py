"""
Puntero de mano usando MediaPipe.

Este módulo contiene la clase HandPointer, que sigue la punta del índice con
la cámara y la convierte en eventos de puntero sobre la rejilla de botones.
"""

import cv2
import mediapipe as mp

from .pointer import PinchTracker, fingertip_position


# ============================================================================
# CLASE: HandPointer
# Propósito: Usar la mano como ratón
# Responsabilidades:
#   - Detectar landmarks de una mano con MediaPipe Hands
#   - Mover el puntero con la punta del índice
#   - Confirmar clics con un pellizco sostenido (PinchTracker)
# ============================================================================
class HandPointer:
    """
    Puntero controlado por la mano.

    Modelo de operación:
        1. Cada frame se extraen los 21 landmarks de la mano
        2. La punta del índice da la posición del puntero
        3. Pulgar e índice juntos durante `hold_frames` frames = clic
    """

    def __init__(self, config, detection_confidence=0.7, tracking_confidence=0.7):
        """
        Inicializa MediaPipe Hands para una sola mano.

        Args:
            config (AppConfig): Configuración (umbral de pellizco, frames de hold)
            detection_confidence (float): Confianza mínima para detectar la mano
            tracking_confidence (float): Confianza mínima para seguirla entre frames
        """
        self.config = config
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,      # Modo video
            max_num_hands=1,
            min_detection_confidence=detection_confidence,
            min_tracking_confidence=tracking_confidence,
            model_complexity=1
        )
        self.mp_draw = mp.solutions.drawing_utils
        self.mp_draw_styles = mp.solutions.drawing_styles

        self.tracker = PinchTracker(
            hold_frames=config.get_hold_time(),
            threshold=config.get_distance_threshold(config.pinch_threshold),
        )
        self.position = None   # Última posición conocida del puntero

    def get_landmarks(self, img):
        """
        Extrae los landmarks de la mano detectada en la imagen.

        Args:
            img (np.array): Imagen BGR de la cámara

        Returns:
            tuple: (landmarks, results)
                - landmarks: 21 dicts {'x', 'y', 'z'} en píxeles, o [] sin mano
                - results: Objeto results de MediaPipe (para dibujar)
        """
        img_rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
        img_rgb.flags.writeable = False
        results = self.hands.process(img_rgb)

        landmarks = []
        if results.multi_hand_landmarks:
            h, w, _ = img.shape
            for lm in results.multi_hand_landmarks[0].landmark:
                landmarks.append({'x': lm.x * w, 'y': lm.y * h, 'z': lm.z})
        return landmarks, results

    def draw_hands(self, img, results):
        """Dibuja el esqueleto de la mano detectada sobre la imagen."""
        if results.multi_hand_landmarks:
            for hand_landmarks in results.multi_hand_landmarks:
                self.mp_draw.draw_landmarks(
                    img, hand_landmarks, self.mp_hands.HAND_CONNECTIONS,
                    self.mp_draw_styles.get_default_hand_landmarks_style(),
                    self.mp_draw_styles.get_default_hand_connections_style()
                )
        return img

    def update(self, img):
        """
        Procesa un frame de cámara.

        Args:
            img (np.array): Frame BGR (ya espejado)

        Returns:
            tuple: (position, clicked, results)
                - position: (x, y) del puntero o None sin mano
                - clicked: True si se confirmó un clic en este frame
                - results: Objeto results de MediaPipe
        """
        # Los umbrales pueden cambiar en caliente (modo extendido)
        self.tracker.configure(
            self.config.get_hold_time(),
            self.config.get_distance_threshold(self.config.pinch_threshold),
        )

        landmarks, results = self.get_landmarks(img)
        self.position = fingertip_position(landmarks)
        clicked = self.tracker.update(landmarks)
        return self.position, clicked, results

    @property
    def progress(self):
        return self.tracker.progress

    def close(self):
        self.hands.close()
