"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para anunciar las teclas pulsadas y
los resultados, ejecutándose en un hilo aparte para no bloquear la interfaz.
"""

import threading
from collections import deque

import pyttsx3


NUMBERS_ES = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve",
}

KEYS_ES = {
    "+": "más",
    "-": "menos",
    "×": "por",
    "÷": "entre",
    ".": "coma",
    "%": "por ciento",
    "+/-": "cambio de signo",
    "C": "borrar",
}


def key_to_speech(key):
    """Texto hablado para una tecla (ej: "7" → "siete", "×" → "por")."""
    if key in NUMBERS_ES:
        return NUMBERS_ES[key]
    return KEYS_ES.get(key, key)


def result_to_speech(result):
    """
    Texto hablado para un resultado.

    "-2.5" → "igual a menos 2 coma 5"
    """
    text = str(result)
    if text.startswith("-"):
        text = "menos " + text[1:]
    return "igual a " + text.replace(".", " coma ")


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar texto a voz en español
#   - Ejecutar en hilo separado para no bloquear UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (un mensaje a la vez, máximo 5 pendientes)
        - Configuración de volumen y velocidad
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (AppConfig): Configuración de la aplicación

        Si el motor no puede inicializarse, la voz queda desactivada.
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self._lock = threading.Lock()

        if not self.config.voice_enabled:
            return

        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.config.voice_enabled = False

    def _configure_engine(self):
        """Aplica volumen, velocidad y una voz del idioma configurado si existe."""
        self.engine.setProperty('volume', self.config.voice_volume)
        self.engine.setProperty('rate', self.config.voice_rate)

        language = self.config.voice_language.lower()
        for voice in self.engine.getProperty('voices'):
            languages = [str(lang).lower() for lang in (getattr(voice, 'languages', None) or [])]
            if any(language in lang for lang in languages) or f"{language}-" in voice.id.lower():
                self.engine.setProperty('voice', voice.id)
                print(f"✓ Voz seleccionada: {voice.name}")
                return

        print(f"⚠ No se encontró voz para '{language}'. Usando voz predeterminada.")

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.config.voice_enabled or not self.engine:
            return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def speak_key(self, key):
        """Anuncia la tecla pulsada ("=" se anuncia con el resultado)."""
        if key != "=":
            self.speak(key_to_speech(key))

    def speak_result(self, result):
        """Anuncia el resultado de un cálculo ("igual a 42")."""
        self.speak(result_to_speech(result))
