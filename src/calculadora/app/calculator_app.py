"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2

from calculadora.config import AppConfig
from calculadora.core.calculator import EQUALS, Calculator
from calculadora.core.errors import CameraError
from calculadora.ui.renderer import UIRenderer
from calculadora.voice.feedback import VoiceFeedback


# ============================================================================
class CalculatorApp:
    """
    Aplicación de calculadora con rejilla de botones.

    Arquitectura:
        - Calculator: Estado y transiciones
        - UIRenderer: Dibujo de display y botones
        - VoiceFeedback: Anuncio por voz de teclas y resultados (opcional)
        - HandPointer: Puntero controlado con la mano por cámara (opcional)
        - CalculatorApp: Coordinador, eventos de ratón y bucle principal

    Flujo:
        clic → press(label) → Calculator.press → callback → redraw
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación.

        Args:
            config (AppConfig): Configuración (opcional)

        Raises:
            CameraError: Si se pidió puntero de mano y la cámara no abre
        """
        self.config = config if config else AppConfig()

        self.calc = Calculator()
        self.ui = UIRenderer(self.config.width, self.config.height, self.config)
        self.voice = VoiceFeedback(self.config)

        # Estado del puntero
        self.hovered = None         # Botón bajo el puntero
        self.mouse_down = None      # Botón sobre el que se pulsó el ratón
        self.pointer = None         # Posición del puntero de mano
        self.frame = None           # Último frame de cámara

        self.window_open = False
        self.last_image = None

        # Re-renderizar tras cada cambio de estado
        self.calc.subscribe(self.on_state_change)

        self.cap = None
        self.hand_pointer = None
        if self.config.camera_enabled:
            self._open_camera()

    def _open_camera(self):
        """Abre la cámara y el puntero de mano (MediaPipe)."""
        from calculadora.core.hand_pointer import HandPointer

        self.cap = cv2.VideoCapture(self.config.camera_index)
        if not self.cap.isOpened():
            raise CameraError(f"Error al abrir cámara {self.config.camera_index}")
        self.cap.set(cv2.CAP_PROP_BUFFERSIZE, 1)  # Buffer mínimo para baja latencia

        self.hand_pointer = HandPointer(self.config)
        print(f"OK Camara {self.config.camera_index}: puntero de mano activado")
        if self.config.extended_gestures:
            print("✓ Modo Gestos Extendidos ACTIVADO (para movilidad reducida)")

    # ------------------------------------------------------------------
    # Entrada
    # ------------------------------------------------------------------
    def press(self, label):
        """
        Procesa la pulsación de un botón de la rejilla.

        Args:
            label (str): Etiqueta del botón ("7", "+", "=", ...)

        Returns:
            CalculatorState: Nuevo estado
        """
        before = self.calc.state
        self.ui.flash_button(label)
        self.voice.speak_key(label)

        state = self.calc.press(label)

        if label == EQUALS and before.operator and before.previous is not None:
            self.ui.show_feedback(f"{before.previous} {before.operator} {before.display} = {state.display}",
                                  (0, 255, 255), 60)
            self.voice.speak_result(state.display)
        return state

    def on_mouse(self, event, x, y, flags, param):
        """
        Callback de ratón de OpenCV.

        - Movimiento: actualiza el botón bajo el puntero
        - Botón izquierdo abajo: recuerda el botón pulsado
        - Botón izquierdo arriba: si sigue sobre el mismo botón, lo pulsa
        """
        button = self.ui.grid.hit_test(x, y)

        if event == cv2.EVENT_MOUSEMOVE:
            self.hovered = button
        elif event == cv2.EVENT_LBUTTONDOWN:
            self.mouse_down = button
        elif event == cv2.EVENT_LBUTTONUP:
            if button is not None and self.mouse_down is not None \
                    and button.label == self.mouse_down.label:
                self.press(button.label)
            self.mouse_down = None

    def update_hand_pointer(self):
        """
        Lee un frame de cámara y convierte la mano en eventos de puntero.

        Returns:
            bool: False si la cámara dejó de entregar frames
        """
        ret, frame = self.cap.read()
        if not ret:
            return False

        # Espejear y ajustar al tamaño de la ventana para que la punta del
        # índice caiga en coordenadas de la rejilla
        frame = cv2.flip(frame, 1)
        frame = cv2.resize(frame, (self.config.width, self.config.height))

        position, clicked, results = self.hand_pointer.update(frame)
        self.frame = self.hand_pointer.draw_hands(frame, results)
        self.pointer = position
        self.hovered = self.ui.grid.hit_test(*position) if position else None

        if clicked and self.hovered is not None:
            self.press(self.hovered.label)
        return True

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def on_state_change(self, state):
        """Callback de renderizado suscrito a la calculadora."""
        self.redraw()

    def redraw(self):
        progress = self.hand_pointer.progress if self.hand_pointer else 0.0
        self.last_image = self.ui.render(self.calc, hovered=self.hovered,
                                         pointer=self.pointer, progress=progress,
                                         background=self.frame)
        if self.window_open:
            cv2.imshow(self.config.window_title, self.last_image)
        return self.last_image

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Leer cámara y actualizar puntero de mano (si está activado)
            2. Renderizar la calculadora
            3. Procesar eventos de ventana

        Controles de ventana:
            - ESC o 'q': Salir de la aplicación
        """
        title = self.config.window_title
        cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(title, self.on_mouse)
        self.window_open = True

        print("\n" + "=" * 50)
        print("CALCULADORA")
        print("=" * 50)
        if self.hand_pointer:
            print("Puntero: punta del indice | Clic: pellizco sostenido")
        else:
            print("Haz clic en los botones con el raton")
        if self.config.voice_enabled:
            print("🔊 FEEDBACK POR VOZ: Activado")
        print("Presiona ESC o 'q' para salir\n")

        try:
            while True:
                if self.hand_pointer and not self.update_hand_pointer():
                    break

                self.redraw()

                key = cv2.waitKey(15) & 0xFF
                if key == 27 or key == ord('q'):
                    break
                if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                    break
        finally:
            self.close()

    def close(self):
        """Libera cámara, puntero de mano y ventanas."""
        if self.hand_pointer:
            self.hand_pointer.close()
            self.hand_pointer = None
        if self.cap:
            self.cap.release()
            self.cap = None
        if self.window_open:
            cv2.destroyAllWindows()
            self.window_open = False
            print("\nOK Aplicacion cerrada correctamente")
