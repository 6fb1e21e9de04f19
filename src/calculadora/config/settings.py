"""
Configuración de la calculadora.

Este módulo contiene la configuración centralizada: ventana, display,
feedback por voz y puntero de mano (incluido el modo extendido para usuarios
con movilidad reducida).
"""


# ============================================================================
# CLASE: AppConfig
# Propósito: Preferencias de la aplicación
# Responsabilidades:
#   - Tamaño de ventana y límites del display
#   - Preferencias de voz (volumen, velocidad, idioma)
#   - Umbrales del puntero de mano y modo extendido
# ============================================================================
class AppConfig:
    """
    Configuración de la calculadora con valores por defecto.

    Opciones disponibles:
        - Ventana: ancho/alto en píxeles
        - Display: longitud máxima antes de notación exponencial
        - Feedback por voz configurable
        - Puntero de mano opcional (cámara) con modo extendido
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = "Calculadora"
        self.width = 420
        self.height = 640

        # ====================================================================
        # DISPLAY
        # ====================================================================
        self.max_display_length = 12    # Caracteres antes de pasar a exponencial
        self.exponential_digits = 6     # Decimales de la mantisa

        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = False      # Activar/desactivar feedback por voz
        self.voice_volume = 0.8         # Volumen (0.0-1.0)
        self.voice_rate = 150           # Palabras por minuto
        self.voice_language = 'es'

        # ====================================================================
        # PUNTERO DE MANO (cámara)
        # ====================================================================
        self.camera_index = None        # None = solo ratón
        self.pinch_threshold = 0.35     # pinch_ratio máximo para contar pellizco
        self.gesture_hold_time = 8      # Frames de pellizco para confirmar clic
        self.extended_gestures = False  # Modo extendido (movilidad reducida)
        self.extended_hold_time = 15    # Frames en modo extendido
        self.distance_multiplier = 1.5  # Tolerancia extra del pellizco

    def get_hold_time(self):
        """Retorna los frames de hold según el modo activo."""
        return self.extended_hold_time if self.extended_gestures else self.gesture_hold_time

    def get_distance_threshold(self, base_distance):
        """
        Calcula el umbral de distancia según el modo.

        Args:
            base_distance (float): Umbral base

        Returns:
            float: Umbral ajustado por el multiplicador en modo extendido
        """
        return base_distance * (self.distance_multiplier if self.extended_gestures else 1.0)

    @property
    def camera_enabled(self):
        return self.camera_index is not None

    @classmethod
    def from_args(cls, args):
        """
        Crea una configuración a partir de los argumentos de línea de comandos.

        Args:
            args (argparse.Namespace): Resultado de `build_parser().parse_args()`
        """
        config = cls()
        config.width = args.ancho
        config.height = args.alto
        config.camera_index = args.camara
        config.voice_enabled = args.voz
        config.extended_gestures = args.extendido
        return config
