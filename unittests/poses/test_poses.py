from unittest import TestCase

import numpy as np

from spatial3d import (Pose3D, ScaledPose3D, Rotation3D, Angle, RotationAxis3D, Axis3D, Vector3D, Point3D, Size3D)


def about_z(degrees: float) -> Rotation3D:
    return Rotation3D.from_angle_axis(Angle.from_degrees(degrees), RotationAxis3D.z_axis())


def rot_z(theta: float) -> np.ndarray:
    return np.array([[np.cos(theta), -np.sin(theta), 0], [np.sin(theta), np.cos(theta), 0], [0, 0, 1]])


class TestPose3D(TestCase):

    def test_init(self):

        pose = Pose3D()

        self.assertEqual(pose.position, Point3D.zero())
        self.assertTrue(pose.rotation.is_identity)

        position = Point3D(1, 2, 3)
        rotation = about_z(90)

        pose = Pose3D(position, rotation)

        # the inputs are copied
        position.x = 10
        rotation.invert()

        self.assertEqual(pose.position, Point3D(1, 2, 3))
        self.assertEqual(pose.rotation, about_z(90))

        pose = Pose3D([1, 2, 3], [0, 0, 0, 1])

        self.assertEqual(pose.position, Point3D(1, 2, 3))

    def test_identity(self):

        self.assertTrue(Pose3D.identity().is_identity)
        self.assertIsInstance(Pose3D.identity(), Pose3D)

        self.assertFalse(Pose3D(Point3D(0, 0, 1e-300)).is_identity)

        negated = Pose3D(rotation=[0, 0, 0, -1])

        self.assertFalse(negated.is_identity)
        self.assertTrue(negated.is_approximately_equal(Pose3D.identity()))

    def test_concatenation(self):

        half_turn = Pose3D(Point3D.zero(), about_z(180))
        shift = Pose3D(Point3D(1, 2, 0), Rotation3D.identity())

        result = half_turn * shift

        # the position of the right hand pose is added without being rotated
        self.assertEqual(result.position, Point3D(1, 2, 0))
        self.assertTrue(result.rotation.is_approximately_equal(about_z(180)))

        result = shift * half_turn

        self.assertEqual(result.position, Point3D(1, 2, 0))
        self.assertTrue(result.rotation.is_approximately_equal(about_z(180)))

        # the operands are untouched
        self.assertEqual(half_turn.position, Point3D.zero())
        self.assertTrue(shift.rotation.is_identity)

    def test_concatenation_rotation_order(self):

        quarter_x = Pose3D(rotation=Rotation3D.from_angle_axis(Angle(np.pi / 2), RotationAxis3D.x_axis()))
        quarter_z = Pose3D(rotation=about_z(90))

        result = quarter_z * quarter_x

        self.assertTrue(result.rotation.is_approximately_equal(quarter_z.rotation * quarter_x.rotation))
        self.assertFalse(result.rotation.is_approximately_equal(quarter_x.rotation * quarter_z.rotation))

    def test_imul(self):

        pose = Pose3D(Point3D(1, 0, 0), about_z(45))
        original = pose

        pose *= Pose3D(Point3D(0, 1, 0), about_z(45))

        self.assertIs(pose, original)
        self.assertEqual(pose.position, Point3D(1, 1, 0))
        self.assertTrue(pose.rotation.is_approximately_equal(about_z(90)))

        with self.assertRaises(TypeError):
            pose *= ScaledPose3D()

    def test_mul_errors(self):

        with self.assertRaises(TypeError):
            Pose3D() * ScaledPose3D()

        with self.assertRaises(TypeError):
            Pose3D() * 2

    def test_concatenating(self):

        pose = Pose3D(Point3D(1, 0, 0))

        with self.subTest(other=Pose3D):
            result = pose.concatenating(Pose3D(Point3D(0, 1, 0), about_z(90)))

            self.assertIsInstance(result, Pose3D)
            self.assertEqual(result.position, Point3D(1, 1, 0))
            self.assertTrue(result.rotation.is_approximately_equal(about_z(90)))

        with self.subTest(other=ScaledPose3D):
            result = pose.concatenating(ScaledPose3D(Point3D(0, 1, 0), about_z(90), 2))

            self.assertIsInstance(result, ScaledPose3D)
            self.assertEqual(result.position, Point3D(1, 1, 0))
            self.assertTrue(result.rotation.is_approximately_equal(about_z(90)))
            self.assertEqual(result.scale, 2)

        with self.subTest(other=Point3D):
            with self.assertRaises(TypeError):
                pose.concatenating(Point3D())

    def test_inverse(self):

        pose = Pose3D(Point3D(1, 2, 3), about_z(90))

        inverse = pose.inverse

        self.assertEqual(inverse.position, Point3D(-1, -2, -3))
        self.assertTrue(inverse.rotation.is_approximately_equal(about_z(-90)))

        self.assertTrue((pose * inverse).is_approximately_equal(Pose3D.identity()))
        self.assertTrue(inverse.inverse.is_approximately_equal(pose))

        self.assertEqual(-pose, inverse)

        pose.invert()

        self.assertEqual(pose, inverse)

    def test_apply(self):

        pose = Pose3D(Point3D(1, 0, 0), about_z(180))

        with self.subTest(primitive=Point3D):
            # translate first, then rotate
            point = Point3D(1, 0, 0).applying(pose)

            self.assertTrue(point.is_approximately_equal(Point3D(-2, 0, 0)))

        with self.subTest(primitive=Vector3D):
            vector = pose * Vector3D(1, 0, 0)

            self.assertIsInstance(vector, Vector3D)
            self.assertTrue(vector.is_approximately_equal(Vector3D(-2, 0, 0)))

        with self.subTest(primitive=Size3D):
            size = Size3D(1, 2, 3).applying(Pose3D(Point3D(1, 1, 1), about_z(90)))

            self.assertTrue(size.is_approximately_equal(Size3D(-3, 2, 4)))

        with self.subTest(in_place=True):
            point = Point3D(1, 0, 0)

            point.apply(pose)

            self.assertTrue(point.is_approximately_equal(Point3D(-2, 0, 0)))

        with self.subTest(pose=None):
            with self.assertRaises(TypeError):
                Point3D().apply(Rotation3D())

    def test_unapply(self):

        pose = Pose3D(Point3D(1, 0, 0), about_z(90))

        point = Point3D.zero().unapplying(pose)

        self.assertTrue(point.is_approximately_equal(Point3D(0, 1, 0)))

        self.assertTrue(point.is_approximately_equal(Point3D.zero().applying(pose.inverse)))

    def test_matrix(self):

        pose = Pose3D(Point3D(1, 2, 3), about_z(90))

        np.testing.assert_array_almost_equal(pose.matrix, [[0, -1, 0, 1],
                                                           [1, 0, 0, 2],
                                                           [0, 0, 1, 3],
                                                           [0, 0, 0, 1]])

        self.assertTrue(Pose3D.from_matrix(pose.matrix).is_approximately_equal(pose))

    def test_from_matrix(self):

        matrix = np.eye(4)
        matrix[:3, :3] = 3 * rot_z(np.pi / 2)
        matrix[:3, 3] = [1, 2, 3]

        pose = Pose3D.from_matrix(matrix)

        self.assertEqual(pose.position, Point3D(1, 2, 3))
        self.assertTrue(pose.rotation.is_approximately_equal(about_z(90)))
        self.assertTrue(pose.rotation.valid)

    def test_from_matrix_degenerate(self):

        with self.subTest(matrix='non-uniform'):
            with self.assertLogs('spatial3d.poses', level='DEBUG'):
                self.assertIsNone(Pose3D.from_matrix(np.diag([1., 2, 1, 1])))

        with self.subTest(matrix='zero'):
            self.assertIsNone(Pose3D.from_matrix(np.zeros((4, 4))))

        with self.subTest(matrix='nan'):
            self.assertIsNone(Pose3D.from_matrix(np.full((4, 4), np.nan)))

        with self.subTest(matrix='3x3'):
            with self.assertRaises(ValueError):
                Pose3D.from_matrix(np.eye(3))

    def test_flip(self):

        pose = Pose3D(Point3D(1, 2, 3))

        flipped = pose.flipped('x')

        self.assertEqual(flipped.position, Point3D(-1, 2, 3))
        self.assertTrue(flipped.rotation.is_approximately_equal(Rotation3D([1, 0, 0, 0])))

        flipped = pose.flipped(Axis3D.Y)

        self.assertEqual(flipped.position, Point3D(1, -2, 3))
        self.assertTrue(flipped.rotation.is_approximately_equal(Rotation3D([0, 1, 0, 0])))

        pose.flip('Z')

        self.assertEqual(pose.position, Point3D(1, 2, -3))
        self.assertTrue(pose.rotation.is_approximately_equal(Rotation3D([0, 0, 1, 0])))

        with self.assertRaises(ValueError):
            pose.flip('w')

    def test_flip_twice(self):

        pose = Pose3D(Point3D(1, 2, 3), Rotation3D.from_euler_angles([0.1, 0.2, 0.3]))

        for axis in Axis3D:
            with self.subTest(axis=axis):
                self.assertTrue(pose.flipped(axis).flipped(axis).is_approximately_equal(pose))

    def test_translate_rotate(self):

        pose = Pose3D(Point3D(1, 2, 3), about_z(45))

        translated = pose.translated(Vector3D(1, 1, 1))

        self.assertEqual(translated.position, Point3D(2, 3, 4))
        self.assertEqual(pose.position, Point3D(1, 2, 3))

        rotated = pose.rotated(about_z(45))

        self.assertTrue(rotated.rotation.is_approximately_equal(about_z(90)))
        self.assertEqual(rotated.position, Point3D(1, 2, 3))

    def test_looking_at(self):

        pose = Pose3D.looking_at(Point3D(0, 0, 5), position=Point3D(0, 0, -5))

        self.assertEqual(pose.position, Point3D(0, 0, -5))
        self.assertTrue(pose.rotation.is_approximately_equal(Rotation3D.from_forward(Vector3D.forward())))

        pose = Pose3D.from_forward(Vector3D.forward(), position=Point3D(1, 1, 1))

        self.assertEqual(pose.position, Point3D(1, 1, 1))
        self.assertTrue(pose.rotation.is_approximately_equal(Rotation3D.from_forward(Vector3D.forward())))

    def test_from_scaled_pose(self):

        pose = Pose3D.from_scaled_pose(ScaledPose3D(Point3D(1, 2, 3), about_z(90), 5))

        self.assertIsInstance(pose, Pose3D)
        self.assertEqual(pose, Pose3D(Point3D(1, 2, 3), about_z(90)))

    def test_is_approximately_equal(self):

        pose = Pose3D(Point3D(1, 2, 3), about_z(90))

        self.assertTrue(pose.is_approximately_equal(Pose3D(Point3D(1, 2, 3 + 1e-12), about_z(90 + 1e-7))))
        self.assertFalse(pose.is_approximately_equal(Pose3D(Point3D(1, 2, 3.1), about_z(90))))
        self.assertFalse(pose.is_approximately_equal(Pose3D(Point3D(1, 2, 3), about_z(91))))

        self.assertTrue(pose.is_approximately_equal(Pose3D(Point3D(1, 2, 3.001), about_z(90)), tolerance=1e-3))

    def test_eq(self):

        self.assertEqual(Pose3D(Point3D(1, 2, 3), about_z(90)), Pose3D(Point3D(1, 2, 3), about_z(90)))
        self.assertNotEqual(Pose3D(Point3D(1, 2, 3)), Pose3D(Point3D(1, 2, 4)))
        self.assertNotEqual(Pose3D(), ScaledPose3D())

    def test_dict(self):

        pose = Pose3D(Point3D(1, 2, 3))

        self.assertEqual(pose.to_dict(), {'position': {'x': 1.0, 'y': 2.0, 'z': 3.0},
                                          'rotation': {'quaternion': [0.0, 0.0, 0.0, 1.0]}})

        self.assertEqual(Pose3D.from_dict(pose.to_dict()), pose)

    def test_repr(self):

        self.assertEqual(repr(Pose3D()), 'Pose3D(position=Point3D(x=0.0, y=0.0, z=0.0), '
                                         'rotation=Rotation3D(x=0.0, y=0.0, z=0.0, w=1.0))')


class TestScaledPose3D(TestCase):

    def test_init(self):

        pose = ScaledPose3D()

        self.assertEqual(pose.scale, 1)
        self.assertTrue(pose.is_identity)

        pose = ScaledPose3D(Point3D(1, 2, 3), about_z(90), 2)

        self.assertEqual(pose.scale, 2)
        self.assertFalse(pose.is_identity)

    def test_identity(self):

        self.assertIsInstance(ScaledPose3D.identity(), ScaledPose3D)

        self.assertTrue(ScaledPose3D(scale=1 + 1e-12).is_identity)
        self.assertFalse(ScaledPose3D(scale=2).is_identity)

    def test_concatenation(self):

        lhs = ScaledPose3D(Point3D(1, 0, 0), about_z(90), 2)
        rhs = ScaledPose3D(Point3D(0, 1, 0), about_z(90), 3)

        result = lhs * rhs

        self.assertEqual(result.position, Point3D(1, 1, 0))
        self.assertTrue(result.rotation.is_approximately_equal(about_z(180)))
        self.assertEqual(result.scale, 6)

        lhs *= rhs

        self.assertEqual(lhs, result)

        with self.assertRaises(TypeError):
            lhs * Pose3D()

    def test_concatenating(self):

        scaled = ScaledPose3D(Point3D(1, 0, 0), about_z(45), 2)

        result = scaled.concatenating(Pose3D(Point3D(0, 1, 0), about_z(45)))

        self.assertIsInstance(result, ScaledPose3D)
        self.assertEqual(result.position, Point3D(1, 1, 0))
        self.assertTrue(result.rotation.is_approximately_equal(about_z(90)))
        self.assertEqual(result.scale, 2)

        result = scaled.concatenating(ScaledPose3D(scale=3))

        self.assertEqual(result.scale, 6)

        with self.assertRaises(TypeError):
            scaled.concatenating(Rotation3D())

    def test_inverse(self):

        pose = ScaledPose3D(Point3D(1, 2, 3), Rotation3D.from_euler_angles([0.1, 0.2, 0.3]), 4)

        inverse = pose.inverse

        self.assertEqual(inverse.position, Point3D(-1, -2, -3))
        self.assertEqual(inverse.scale, 0.25)

        self.assertTrue(inverse.inverse.is_approximately_equal(pose))

        self.assertTrue((pose * inverse).is_approximately_equal(ScaledPose3D.identity()))

    def test_inverse_zero_scale(self):

        pose = ScaledPose3D(scale=0)

        with self.assertWarns(RuntimeWarning):
            inverse = pose.inverse

        self.assertEqual(inverse.scale, np.inf)

    def test_apply(self):

        pose = ScaledPose3D(Point3D(1, 0, 0), about_z(180), 2)

        # translate, rotate, then scale
        self.assertTrue(Point3D(1, 0, 0).applying(pose).is_approximately_equal(Point3D(-4, 0, 0)))

        self.assertTrue((pose * Vector3D(1, 0, 0)).is_approximately_equal(Vector3D(-4, 0, 0)))

        size = Size3D(1, 2, 3).applying(ScaledPose3D(rotation=about_z(90), scale=0.5))

        self.assertTrue(size.is_approximately_equal(Size3D(-1, 0.5, 1.5)))

    def test_unapply(self):

        pose = ScaledPose3D(Point3D(1, 0, 0), about_z(90), 2)

        point = Point3D.zero().unapplying(pose)

        self.assertTrue(point.is_approximately_equal(Point3D(0, 0.5, 0)))

    def test_uniformly_scale(self):

        pose = ScaledPose3D(scale=2)

        scaled = pose.uniformly_scaled(3)

        self.assertEqual(scaled.scale, 6)
        self.assertEqual(pose.scale, 2)

        pose.uniformly_scale(0.5)

        self.assertEqual(pose.scale, 1)

    def test_from_matrix(self):

        matrix = np.eye(4)
        matrix[:3, :3] = 3 * rot_z(np.pi / 2)
        matrix[:3, 3] = [1, 2, 3]

        pose = ScaledPose3D.from_matrix(matrix)

        self.assertAlmostEqual(pose.scale, 3)
        self.assertEqual(pose.position, Point3D(1, 2, 3))
        self.assertTrue(pose.rotation.is_approximately_equal(about_z(90)))

        self.assertIsNone(ScaledPose3D.from_matrix(np.diag([1., 1, 3, 1])))

    def test_matrix(self):

        pose = ScaledPose3D(Point3D(1, 2, 3), about_z(90), 5)

        # the scale is not part of the matrix
        np.testing.assert_array_almost_equal(pose.matrix, Pose3D(Point3D(1, 2, 3), about_z(90)).matrix)

    def test_from_pose(self):

        pose = ScaledPose3D.from_pose(Pose3D(Point3D(1, 2, 3), about_z(90)))

        self.assertIsInstance(pose, ScaledPose3D)
        self.assertEqual(pose.scale, 1)
        self.assertEqual(pose, ScaledPose3D(Point3D(1, 2, 3), about_z(90)))

        self.assertEqual(ScaledPose3D.from_pose(Pose3D(), scale=2).scale, 2)

    def test_flip(self):

        pose = ScaledPose3D(Point3D(1, 2, 3), scale=2)

        flipped = pose.flipped('x')

        self.assertIsInstance(flipped, ScaledPose3D)
        self.assertEqual(flipped.position, Point3D(-1, 2, 3))
        self.assertEqual(flipped.scale, 2)

    def test_is_approximately_equal(self):

        pose = ScaledPose3D(Point3D(1, 2, 3), about_z(90), 2)

        self.assertTrue(pose.is_approximately_equal(ScaledPose3D(Point3D(1, 2, 3), about_z(90), 2 + 1e-12)))
        self.assertFalse(pose.is_approximately_equal(ScaledPose3D(Point3D(1, 2, 3), about_z(90), 2.1)))

    def test_eq(self):

        self.assertEqual(ScaledPose3D(scale=2), ScaledPose3D(scale=2))
        self.assertNotEqual(ScaledPose3D(scale=2), ScaledPose3D(scale=3))
        self.assertNotEqual(ScaledPose3D(), Pose3D())

    def test_dict(self):

        pose = ScaledPose3D(Point3D(1, 2, 3), scale=2)

        self.assertEqual(pose.to_dict(), {'position': {'x': 1.0, 'y': 2.0, 'z': 3.0},
                                          'rotation': {'quaternion': [0.0, 0.0, 0.0, 1.0]},
                                          'scale': 2.0})

        self.assertEqual(ScaledPose3D.from_dict(pose.to_dict()), pose)

    def test_repr(self):

        self.assertIn('scale=1.0', repr(ScaledPose3D()))
