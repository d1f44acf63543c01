"""
Tests for the QPainter backend.

Renders into an offscreen QImage and checks pixels. Skipped when PyQt6
cannot be loaded.
"""

import unittest

from cuecanvas.core import (
    Circle, DrawStyle, Entity, Layer, Line, Rectangle, Window
)

try:
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QColor, QImage, QPainter
    from cuecanvas.graphics.qt_context import QPainterContext, render_to_image
    HAS_QT = True
except ImportError:
    HAS_QT = False


@unittest.skipUnless(HAS_QT, "PyQt6 not available")
class TestQPainterContext(unittest.TestCase):
    """Test canvas semantics on a QPainter."""
    
    def setUp(self):
        self.image = QImage(100, 80, QImage.Format.Format_ARGB32_Premultiplied)
        self.image.fill(Qt.GlobalColor.transparent)
        self.painter = QPainter(self.image)
        self.ctx = QPainterContext(self.painter)
    
    def tearDown(self):
        if self.painter.isActive():
            self.painter.end()
    
    def pixel(self, x, y) -> QColor:
        if self.painter.isActive():
            self.painter.end()
        return self.image.pixelColor(x, y)
    
    def test_surface_size(self):
        self.assertEqual((self.ctx.width, self.ctx.height), (100, 80))
    
    def test_fill_rect(self):
        self.ctx.fill_style = "#ff0000"
        self.ctx.begin_path()
        self.ctx.rect(10, 10, 20, 20)
        self.ctx.fill()
        self.assertEqual(self.pixel(20, 20).name(), "#ff0000")
        self.assertEqual(self.pixel(50, 50).alpha(), 0)
    
    def test_save_restore_attributes(self):
        self.ctx.fill_style = "red"
        self.ctx.set_line_dash([3, 1])
        self.ctx.save()
        self.ctx.fill_style = "blue"
        self.ctx.set_line_dash([])
        self.ctx.global_alpha = 0.5
        self.ctx.restore()
        self.assertEqual(self.ctx.fill_style, "red")
        self.assertEqual(self.ctx.get_line_dash(), (3.0, 1.0))
        self.assertEqual(self.ctx.global_alpha, 1.0)
    
    def test_odd_dash_is_doubled(self):
        self.ctx.set_line_dash([5])
        self.assertEqual(self.ctx.get_line_dash(), (5.0, 5.0))
    
    def test_invalid_values_ignored(self):
        self.ctx.set_line_dash([4, 2])
        self.ctx.set_line_dash([1, -1])
        self.assertEqual(self.ctx.get_line_dash(), (4.0, 2.0))
        self.ctx.line_width = 0
        self.assertEqual(self.ctx.line_width, 1.0)
        self.ctx.global_alpha = 2
        self.assertEqual(self.ctx.global_alpha, 1.0)
    
    def test_negative_arc_radius(self):
        with self.assertRaises(ValueError):
            self.ctx.arc(0, 0, -1, 0, 1)
    
    def test_clear_rect(self):
        self.ctx.fill_style = "#00ff00"
        self.ctx.begin_path()
        self.ctx.rect(0, 0, 100, 80)
        self.ctx.fill()
        self.ctx.clear_rect(0, 0, self.ctx.width, self.ctx.height)
        self.assertEqual(self.pixel(40, 40).alpha(), 0)


@unittest.skipUnless(HAS_QT, "PyQt6 not available")
class TestRenderToImage(unittest.TestCase):
    """Test full window rendering through Qt."""
    
    def setUp(self):
        self.window = Window(0, 0, 100, 100)
        self.window.horizon.ratio = 2
        self.layer = Layer()
        self.window.add_layer(self.layer)
    
    def test_filled_circle(self):
        self.layer.add_entity(Circle(20, 20, 5, DrawStyle(fill_style="#0000ff", stroke_style="#0000ff")))
        image = render_to_image(self.window, 100, 100, antialias=False)
        self.assertEqual(image.pixelColor(40, 40).name(), "#0000ff")
        self.assertEqual(image.pixelColor(5, 5).alpha(), 0)
    
    def test_background(self):
        image = render_to_image(self.window, 10, 10, background="#102030")
        self.assertEqual(image.pixelColor(5, 5).name(), "#102030")
    
    def test_z_order_paints_last_on_top(self):
        low = Rectangle(10, 10, 10, 10, DrawStyle(fill_style="#ff0000", stroke_style="#ff0000"))
        high = Rectangle(10, 10, 10, 10, DrawStyle(fill_style="#00ff00", stroke_style="#00ff00"))
        high.config.z = 1
        self.layer.add_entity(high)
        self.layer.add_entity(low)
        image = render_to_image(self.window, 100, 100, antialias=False)
        self.assertEqual(image.pixelColor(20, 20).name(), "#00ff00")
    
    def test_line_pixels(self):
        a = Entity(5, 10)
        b = Entity(45, 10)
        self.layer.add_entity(Line(a, b, DrawStyle(stroke_style="#ffffff", line_width=4)))
        image = render_to_image(self.window, 100, 100, antialias=False)
        self.assertEqual(image.pixelColor(50, 20).name(), "#ffffff")
        self.assertEqual(image.pixelColor(50, 40).alpha(), 0)


if __name__ == '__main__':
    unittest.main()
