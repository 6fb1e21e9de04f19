import numpy as np

from calculadora.config import AppConfig
from calculadora.core.calculator import Calculator
from calculadora.ui.layout import ButtonGrid
from calculadora.ui.renderer import UIRenderer, fit_font_scale, to_ascii


EXPECTED_LABELS = [
    "C", "+/-", "%", "÷",
    "7", "8", "9", "×",
    "4", "5", "6", "-",
    "1", "2", "3", "+",
    "0", ".", "=",
]


def test_grid_labels_and_order():
    grid = ButtonGrid.for_window(420, 640)
    assert grid.labels == EXPECTED_LABELS


def test_grid_geometry():
    grid = ButtonGrid(0, 0, 336, 383, gap=12)
    seven, eight = grid.get("7"), grid.get("8")
    assert seven.w == eight.w == 75
    assert eight.x == seven.x + 75 + 12

    zero, dot = grid.get("0"), grid.get(".")
    assert zero.w == 2 * 75 + 12
    assert dot.x == zero.x + zero.w + 12


def test_hit_test():
    grid = ButtonGrid.for_window(420, 640)
    for button in grid.buttons:
        assert grid.hit_test(*button.center) is button

    assert grid.hit_test(0, 0) is None
    c, sign = grid.get("C"), grid.get("+/-")
    # Punto en el hueco entre dos botones
    assert grid.hit_test(c.x + c.w + 2, c.y + 5) is None
    assert sign.x > c.x + c.w + 2


def test_button_variants():
    grid = ButtonGrid.for_window(420, 640)
    assert grid.get("C").variant == 'clear'
    assert grid.get("=").variant == 'equal'
    assert {grid.get(op).variant for op in "+-×÷"} == {'operation'}
    assert grid.get("5").variant == 'default'


def test_to_ascii():
    assert to_ascii("12 ×") == "12 x"
    assert to_ascii("3 ÷") == "3 /"
    assert to_ascii("1 +") == "1 +"


def test_fit_font_scale_shrinks_long_text():
    assert fit_font_scale("1", 300, 2.0) == 2.0
    assert fit_font_scale("1.234568e+12", 100, 2.0) < 2.0


def test_render_frame():
    config = AppConfig()
    ui = UIRenderer(config.width, config.height, config)
    calc = Calculator()

    img = ui.render(calc)
    assert img.shape == (config.height, config.width, 3)
    assert img.dtype == np.uint8

    calc.press_sequence(["9", "9", "+"])
    changed = ui.render(calc)
    # El display ocupa la franja superior de la ventana
    assert np.any(img[80:210] != changed[80:210])


def test_render_with_pointer_and_background():
    ui = UIRenderer(420, 640)
    calc = Calculator()
    camera = np.full((480, 640, 3), 200, dtype=np.uint8)
    hovered = ui.grid.get("5")

    img = ui.render(calc, hovered=hovered, pointer=hovered.center,
                    progress=0.5, background=camera)
    assert img.shape == (640, 420, 3)
    assert tuple(img[hovered.center[1], hovered.center[0]]) == (0, 255, 255)


def test_feedback_fades_out():
    ui = UIRenderer(420, 640)
    ui.show_feedback("1 + 2 = 3", duration=3)
    calc = Calculator()
    for _ in range(3):
        ui.render(calc)
    assert ui.feedback_timer == 0


def test_feedback_does_not_overlap_display():
    config = AppConfig()
    calc = Calculator()
    calc.press_sequence(["1", "2", "+"])  # Sin cursor parpadeante

    plain = UIRenderer(config.width, config.height, config).render(calc)
    ui = UIRenderer(config.width, config.height, config)
    ui.show_feedback("12 + 30 = 42")
    with_feedback = ui.render(calc)

    rows = np.nonzero(np.any(plain != with_feedback, axis=(1, 2)))[0]
    assert len(rows) > 0
    assert rows.min() > 210
    assert rows.max() < ui.grid.y
