"""
Tests for the Entity base class and its layer back-reference.
"""

import gc
import math
import unittest

from cuecanvas.core import Entity, Layer, Point, Window
from cuecanvas.graphics import RecordingContext


class TestEntityMovement(unittest.TestCase):
    """Test position operations."""
    
    def test_default_position(self):
        """Test entities start at the origin, visible, z=0 and unattached."""
        e = Entity()
        self.assertEqual(e.position, Point(0, 0))
        self.assertTrue(e.config.visible)
        self.assertEqual(e.config.z, 0)
        self.assertIsNone(e.get_layer())
    
    def test_distance(self):
        """Test Euclidean distance between positions."""
        a = Entity(0, 0)
        b = Entity(3, 4)
        self.assertAlmostEqual(a.distance(b), 5.0)
        self.assertAlmostEqual(b.distance(a), 5.0)
    
    def test_move_is_relative(self):
        e = Entity(1, 2)
        e.move(3, -4)
        self.assertEqual((e.position.x, e.position.y), (4, -2))
    
    def test_move_to_is_absolute(self):
        e = Entity(1, 2)
        e.move_to(-7, 9.5)
        self.assertEqual((e.position.x, e.position.y), (-7, 9.5))
    
    def test_move_to_entity_copies_once(self):
        """Test move_to_entity snaps to the other position without binding."""
        target = Entity(10, 20)
        e = Entity()
        e.move_to_entity(target)
        self.assertEqual((e.position.x, e.position.y), (10, 20))
        
        target.move(5, 5)
        self.assertEqual((e.position.x, e.position.y), (10, 20))
        self.assertIsNot(e.position, target.position)
    
    def test_bounding_box_is_point(self):
        bb = Entity(2, 3).get_bounding_box()
        self.assertEqual((bb.min_x, bb.min_y, bb.max_x, bb.max_y), (2, 3, 2, 3))
    
    def test_distance_irrational(self):
        self.assertAlmostEqual(Entity(0, 0).distance(Entity(1, 1)), math.sqrt(2))


class TestEntityRender(unittest.TestCase):
    """Test the base render is a no-op."""
    
    def test_base_render_draws_nothing(self):
        ctx = RecordingContext(100, 100)
        Entity(5, 5).render(ctx, Window())
        self.assertEqual(ctx.calls, [])


class TestEntityLayerReference(unittest.TestCase):
    """Test the back-reference only follows layer membership."""
    
    def test_layer_is_read_only_on_config(self):
        e = Entity()
        with self.assertRaises(AttributeError):
            e.config.layer = Layer()
    
    def test_add_sets_reference(self):
        layer = Layer()
        e = Entity()
        layer.add_entity(e)
        self.assertIs(e.get_layer(), layer)
        self.assertIs(e.config.layer, layer)
    
    def test_reference_does_not_keep_layer_alive(self):
        """Test the back-reference is weak."""
        layer = Layer()
        e = Entity()
        layer.add_entity(e)
        del layer
        gc.collect()
        self.assertIsNone(e.get_layer())


if __name__ == '__main__':
    unittest.main()
