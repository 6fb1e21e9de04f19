"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos visuales.
"""

import time

import cv2
import numpy as np

from calculadora.config import AppConfig
from calculadora.core.formatting import format_display, format_preview
from .layout import BACKGROUND, BORDER, PANEL, PREVIEW_TEXT, VALUE_TEXT, ButtonGrid


# Las fuentes Hershey de OpenCV solo tienen ASCII
ASCII_SYMBOLS = {"×": "x", "÷": "/", "−": "-"}


def to_ascii(text):
    """Sustituye los símbolos sin glifo en OpenCV por su equivalente ASCII."""
    for symbol, replacement in ASCII_SYMBOLS.items():
        text = text.replace(symbol, replacement)
    return text


def fit_font_scale(text, max_width, scale, font=cv2.FONT_HERSHEY_DUPLEX, thickness=2, min_scale=0.6):
    """Reduce la escala de fuente hasta que `text` quepa en `max_width` píxeles."""
    while scale > min_scale:
        text_w = cv2.getTextSize(text, font, scale, thickness)[0][0]
        if text_w <= max_width:
            break
        scale -= 0.1
    return scale


# ============================================================================
class UIRenderer:
    """
    Renderizador de la calculadora.

    Componentes visuales:
        1. Título de la ventana
        2. Display: expresión pendiente (línea superior) y valor actual
        3. Rejilla de botones con resaltado de hover y pulsación
        4. Feedback: mensajes temporales de confirmación
        5. Puntero de mano con anillo de progreso del pellizco (modo cámara)
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (AppConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else AppConfig()
        self.grid = ButtonGrid.for_window(width, height)

        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)

        self.pressed_label = None            # Botón resaltado tras pulsarlo
        self.pressed_timer = 0

    def new_canvas(self):
        """Imagen vacía con el color de fondo."""
        img = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        img[:] = BACKGROUND
        return img

    def show_feedback(self, msg, color=(0, 255, 0), duration=40):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration

    def flash_button(self, label, duration=6):
        """Resalta un botón durante unos frames tras pulsarlo."""
        self.pressed_label = label
        self.pressed_timer = duration

    # ------------------------------------------------------------------
    # Componentes
    # ------------------------------------------------------------------
    def draw_title(self, img):
        x, y = 24, 24
        cv2.rectangle(img, (x, y), (x + 36, y + 36), (212, 182, 6), -1)
        # Icono: mini rejilla de calculadora
        for i in range(2):
            for j in range(2):
                cx, cy = x + 8 + i * 14, y + 8 + j * 14
                cv2.rectangle(img, (cx, cy), (cx + 8, cy + 8), (255, 255, 255), -1)
        cv2.putText(img, self.config.window_title, (x + 50, y + 28),
                    cv2.FONT_HERSHEY_DUPLEX, 0.9, (255, 255, 255), 2)

    def draw_display(self, img, calc):
        """
        Dibuja el display de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            calc (Calculator): Calculadora con el estado actual

        Componentes:
            1. Expresión pendiente ("12 +"), solo si hay operador y operando previo
            2. Valor actual alineado a la derecha; notación exponencial si
               el texto supera `max_display_length` caracteres
        """
        x, y, w, h = 24, 80, self.width - 48, 130
        cv2.rectangle(img, (x, y), (x + w, y + h), PANEL, -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), BORDER, 2)

        state = calc.state
        preview = to_ascii(format_preview(state.previous, state.operator))
        if preview:
            text_w = cv2.getTextSize(preview, cv2.FONT_HERSHEY_SIMPLEX, 0.6, 1)[0][0]
            cv2.putText(img, preview, (x + w - 16 - text_w, y + 36),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.6, PREVIEW_TEXT, 1)

        display = format_display(state.display, self.config.max_display_length,
                                 self.config.exponential_digits)
        scale = fit_font_scale(display, w - 32, 2.0)
        text_w = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, scale, 2)[0][0]
        cv2.putText(img, display, (x + w - 16 - text_w, y + h - 28),
                    cv2.FONT_HERSHEY_DUPLEX, scale, VALUE_TEXT, 2)

    def draw_buttons(self, img, hovered=None):
        """
        Dibuja la rejilla de botones.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            hovered (Button): Botón bajo el puntero (opcional)
        """
        if self.pressed_timer > 0:
            self.pressed_timer -= 1

        for button in self.grid.buttons:
            bg, bg_hover, fg = button.colors
            is_hover = hovered is not None and hovered.label == button.label
            is_pressed = self.pressed_timer > 0 and self.pressed_label == button.label

            color = bg_hover if is_hover else bg
            x, y, w, h = button.x, button.y, button.w, button.h
            if is_pressed:
                # Efecto "active:scale-95"
                dx, dy = int(w * 0.025), int(h * 0.025)
                x, y, w, h = x + dx, y + dy, w - 2 * dx, h - 2 * dy

            cv2.rectangle(img, (x, y), (x + w, y + h), color, -1)
            if is_hover:
                cv2.rectangle(img, (x, y), (x + w, y + h), BORDER, 2)
            self._draw_label(img, button.label, (x + w // 2, y + h // 2), fg)

    def _draw_label(self, img, label, center, color):
        cx, cy = center
        if label == "×":
            d = 9
            cv2.line(img, (cx - d, cy - d), (cx + d, cy + d), color, 2, cv2.LINE_AA)
            cv2.line(img, (cx - d, cy + d), (cx + d, cy - d), color, 2, cv2.LINE_AA)
        elif label == "÷":
            cv2.line(img, (cx - 11, cy), (cx + 11, cy), color, 2, cv2.LINE_AA)
            cv2.circle(img, (cx, cy - 8), 2, color, -1, cv2.LINE_AA)
            cv2.circle(img, (cx, cy + 8), 2, color, -1, cv2.LINE_AA)
        else:
            (tw, th), _ = cv2.getTextSize(label, cv2.FONT_HERSHEY_SIMPLEX, 0.9, 2)
            cv2.putText(img, label, (cx - tw // 2, cy + th // 2),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.9, color, 2, cv2.LINE_AA)

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal en la franja entre display y botones.

        Efecto:
            - Fade-out con alpha blending
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            alpha = min(self.feedback_timer / 20.0, 1.0)
            color = tuple(int(c * alpha) for c in self.feedback_color)
            # Franja entre el display (y <= 210) y la rejilla de botones
            cv2.putText(img, to_ascii(self.feedback_msg), (32, 232),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.55, color, 1)

    def draw_pointer(self, img, position, progress=0.0):
        """
        Dibuja el puntero de mano y el progreso del pellizco.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            position (tuple): (x, y) del puntero, o None
            progress (float): 0.0-1.0, fracción del hold completada
        """
        if position is None:
            return
        cv2.circle(img, position, 8, (0, 255, 255), -1)
        if progress > 0:
            cv2.ellipse(img, position, (18, 18), -90, 0, int(360 * progress),
                        (0, 255, 0), 3)

    def draw_status(self, img, voice_enabled, extended):
        """Indicadores de voz y modo extendido en la esquina superior derecha."""
        y_offset = 40
        if voice_enabled:
            cv2.putText(img, "VOZ: ON", (self.width - 110, y_offset),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.5, (0, 255, 0), 1)
            y_offset += 22
        if extended:
            cv2.putText(img, "MODO ACCESIBLE", (self.width - 160, y_offset),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 200, 0), 1)

    # ------------------------------------------------------------------
    # Frame completo
    # ------------------------------------------------------------------
    def render(self, calc, hovered=None, pointer=None, progress=0.0, background=None):
        """
        Dibuja un frame completo de la calculadora.

        Args:
            calc (Calculator): Calculadora con el estado actual
            hovered (Button): Botón bajo el puntero
            pointer (tuple): Posición del puntero de mano (modo cámara)
            progress (float): Progreso del pellizco
            background (np.array): Frame de cámara a mezclar con el fondo

        Returns:
            np.array: Imagen BGR de tamaño (height, width, 3)
        """
        img = self.new_canvas()
        if background is not None:
            frame = cv2.resize(background, (self.width, self.height))
            cv2.addWeighted(frame, 0.35, img, 0.65, 0, img)

        self.draw_title(img)
        self.draw_display(img, calc)
        self.draw_buttons(img, hovered)
        self.draw_feedback(img)
        self.draw_status(img, self.config.voice_enabled, self.config.extended_gestures)
        self.draw_pointer(img, pointer, progress)

        # Cursor parpadeante mientras se escribe un operando
        if pointer is None and not calc.waiting_for_operand and int(time.time() * 2) % 2 == 0:
            cv2.line(img, (self.width - 34, 130), (self.width - 34, 180), (0, 255, 0), 2)
        return img
