"""
Punto de entrada de la calculadora.

Ejecución:
    python -m calculadora
    python -m calculadora --camara 0 --voz
"""

import argparse
import sys
import traceback

from calculadora.app import CalculatorApp
from calculadora.config import AppConfig
from calculadora.core.errors import CalculatorError


def build_parser():
    defaults = AppConfig()
    parser = argparse.ArgumentParser(
        prog="calculadora",
        description="Calculadora aritmética con rejilla de botones.",
    )
    parser.add_argument("--camara", type=int, default=None, metavar="INDICE",
                        help="Usar la mano como puntero con la cámara INDICE")
    parser.add_argument("--voz", dest="voz", action="store_true", default=defaults.voice_enabled,
                        help="Anunciar teclas y resultados por voz")
    parser.add_argument("--sin-voz", dest="voz", action="store_false",
                        help="Desactivar el feedback por voz")
    parser.add_argument("--extendido", action="store_true",
                        help="Modo gestos extendidos (pellizco más largo y tolerante)")
    parser.add_argument("--ancho", type=int, default=defaults.width,
                        help="Ancho de la ventana en píxeles")
    parser.add_argument("--alto", type=int, default=defaults.height,
                        help="Alto de la ventana en píxeles")
    return parser


def main(argv=None):
    """
    Arranca la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre por el usuario
        - CalculatorError: Error de arranque conocido (ej: cámara)
        - Exception general: Muestra traceback completo

    Returns:
        int: Código de salida
    """
    args = build_parser().parse_args(argv)
    config = AppConfig.from_args(args)

    try:
        app = CalculatorApp(config)
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except CalculatorError as e:
        print(f"\nError: {e}")
        return 1
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
