import math
from unittest import TestCase

from spatial3d import Angle
from spatial3d.angles import cos, sin, tan, cosh, sinh, tanh


class TestAngle(TestCase):

    def test_init(self):

        self.assertEqual(Angle().radians, 0)
        self.assertEqual(Angle(1).radians, 1.0)
        self.assertIsInstance(Angle(1).radians, float)

        self.assertEqual(Angle.zero(), Angle(0))

    def test_degrees(self):

        angle = Angle.from_degrees(180)

        self.assertAlmostEqual(angle.radians, math.pi)
        self.assertAlmostEqual(angle.degrees, 180)

        angle.degrees = 90

        self.assertAlmostEqual(angle.radians, math.pi / 2)

    def test_trigonometry(self):

        angle = Angle.from_degrees(60)

        self.assertAlmostEqual(angle.cos, 0.5)
        self.assertAlmostEqual(angle.sin, math.sqrt(3) / 2)
        self.assertAlmostEqual(angle.tan, math.sqrt(3))

        self.assertEqual(cos(Angle(0)), 1.0)
        self.assertEqual(sin(Angle(0)), 0.0)
        self.assertEqual(tan(Angle(0)), 0.0)
        self.assertEqual(cosh(Angle(0)), 1.0)
        self.assertEqual(sinh(Angle(0)), 0.0)
        self.assertEqual(tanh(Angle(0)), 0.0)

        self.assertAlmostEqual(Angle(1).cosh, math.cosh(1))
        self.assertAlmostEqual(Angle(1).sinh, math.sinh(1))
        self.assertAlmostEqual(Angle(1).tanh, math.tanh(1))

    def test_inverse_trigonometry(self):

        self.assertAlmostEqual(Angle.acos(0).radians, math.pi / 2)
        self.assertAlmostEqual(Angle.asin(1).radians, math.pi / 2)
        self.assertAlmostEqual(Angle.atan(1).radians, math.pi / 4)
        self.assertAlmostEqual(Angle.atan2(1, -1).radians, 3 * math.pi / 4)
        self.assertAlmostEqual(Angle.acosh(1).radians, 0)
        self.assertAlmostEqual(Angle.asinh(0).radians, 0)
        self.assertAlmostEqual(Angle.atanh(0).radians, 0)

        with self.assertRaises(ValueError):
            Angle.acos(2)

    def test_normalize(self):

        with self.subTest(radians=-math.pi):
            # the lower bound is excluded
            self.assertEqual(Angle(-math.pi).normalized.radians, math.pi)

        with self.subTest(radians=math.pi):
            self.assertEqual(Angle(math.pi).normalized.radians, math.pi)

        with self.subTest(radians=2 * math.pi):
            self.assertEqual(Angle(2 * math.pi).normalized.radians, 0)

        with self.subTest(radians=5 * math.pi / 2):
            self.assertAlmostEqual(Angle(5 * math.pi / 2).normalized.radians, math.pi / 2)

        with self.subTest(radians=-7 * math.pi / 4):
            self.assertAlmostEqual(Angle(-7 * math.pi / 4).normalized.radians, math.pi / 4)

        with self.subTest(radians=0.5):
            self.assertEqual(Angle(0.5).normalized.radians, 0.5)

        angle = Angle(7)

        angle.normalize()

        self.assertAlmostEqual(angle.radians, 7 - 2 * math.pi)

    def test_normalized_does_not_modify(self):

        angle = Angle(3 * math.pi)

        _ = angle.normalized

        self.assertEqual(angle.radians, 3 * math.pi)

    def test_invert(self):

        self.assertAlmostEqual(Angle(math.pi / 4).inverse.radians, -3 * math.pi / 4)
        self.assertAlmostEqual(Angle(-math.pi / 4).inverse.radians, 3 * math.pi / 4)
        self.assertAlmostEqual(Angle(0).inverse.radians, -math.pi)

        angle = Angle(math.pi)

        angle.invert()

        self.assertEqual(angle.radians, 0)

    def test_negate(self):

        self.assertEqual(Angle(1).negated, Angle(-1))
        self.assertEqual(-Angle(1), Angle(-1))

        angle = Angle(2)

        angle.negate()

        self.assertEqual(angle, Angle(-2))

    def test_rotate(self):

        angle = Angle(1)

        self.assertEqual(angle.rotated(Angle(0.5)), Angle(1.5))
        self.assertEqual(angle, Angle(1))

        angle.rotate(Angle(-2))

        self.assertEqual(angle, Angle(-1))

    def test_flip(self):

        with self.subTest(axis='x'):
            self.assertEqual(Angle(0.5).flipped('x'), Angle(-0.5))
            self.assertEqual(Angle(0.5).flipped('X'), Angle(-0.5))

        with self.subTest(axis='y'):
            self.assertAlmostEqual(Angle(0.5).flipped('y').radians, math.pi - 0.5)

            self.assertEqual(Angle(0).flipped('Y').radians, math.pi)

        with self.subTest(axis='z'):
            with self.assertRaises(ValueError):
                Angle(0.5).flip('z')

        angle = Angle(0.25)

        angle.flip('x')

        self.assertEqual(angle, Angle(-0.25))

    def test_is_approximately_equal(self):

        self.assertTrue(Angle(1).is_approximately_equal(Angle(1 + 1e-12)))
        self.assertFalse(Angle(1).is_approximately_equal(Angle(1.001)))
        self.assertTrue(Angle(1).is_approximately_equal(Angle(1.001), relative_tolerance=1e-2))

        # angles are not normalized before comparing
        self.assertFalse(Angle(0).is_approximately_equal(Angle(2 * math.pi)))
        self.assertTrue(Angle(0).normalized.is_approximately_equal(Angle(2 * math.pi).normalized))

    def test_arithmetic(self):

        self.assertEqual(Angle(1) + Angle(2), Angle(3))
        self.assertEqual(Angle(1) - Angle(2), Angle(-1))

        angle = Angle(1)
        original = angle

        angle += Angle(1)

        self.assertIs(angle, original)
        self.assertEqual(angle, Angle(2))

        angle -= Angle(0.5)

        self.assertIs(angle, original)
        self.assertEqual(angle, Angle(1.5))

        positive = +angle

        self.assertEqual(positive, angle)
        self.assertIsNot(positive, angle)

        with self.assertRaises(TypeError):
            Angle(1) + 1

        with self.assertRaises(TypeError):
            Angle(1) - 1

    def test_eq(self):

        self.assertEqual(Angle(1), Angle(1))
        self.assertNotEqual(Angle(1), Angle(1 + 1e-15))
        self.assertNotEqual(Angle(1), 1)

    def test_float(self):

        self.assertEqual(float(Angle(0.5)), 0.5)
        self.assertEqual(math.cos(Angle(0)), 1.0)

    def test_dict(self):

        angle = Angle(0.5)

        self.assertEqual(angle.to_dict(), {'radians': 0.5})
        self.assertEqual(Angle.from_dict(angle.to_dict()), angle)

    def test_repr(self):

        self.assertEqual(repr(Angle(0.5)), 'Angle(radians=0.5)')
        self.assertEqual(str(Angle(0.5)), 'Angle(radians=0.5)')

    def test_copy(self):

        angle = Angle(1)

        copied = angle.copy()

        copied.radians = 2

        self.assertEqual(angle.radians, 1)
