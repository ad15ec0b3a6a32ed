from dataclasses import FrozenInstanceError, replace
from unittest import TestCase

from spatial3d.utilities.numerics import DEFAULT_TOLERANCE
from spatial3d.utilities.options import NumericOptions, DEFAULT_OPTIONS


class TestNumericOptions(TestCase):

    def test_defaults(self):

        options = NumericOptions()

        self.assertEqual(options.relative_tolerance, DEFAULT_TOLERANCE)
        self.assertEqual(options.absolute_tolerance, 0)
        self.assertEqual(options.nlerp_threshold, 0.9995)
        self.assertTrue(options.clamp_euler_pitch)

        self.assertEqual(options, DEFAULT_OPTIONS)

    def test_validation(self):

        with self.subTest(field='relative_tolerance'):
            with self.assertRaises(ValueError):
                NumericOptions(relative_tolerance=-1)

            with self.assertRaises(ValueError):
                NumericOptions(relative_tolerance=2)

        with self.subTest(field='absolute_tolerance'):
            with self.assertRaises(ValueError):
                NumericOptions(absolute_tolerance=-1e-3)

        with self.subTest(field='nlerp_threshold'):
            with self.assertRaises(ValueError):
                NumericOptions(nlerp_threshold=1.5)

    def test_frozen(self):

        with self.assertRaises(FrozenInstanceError):
            DEFAULT_OPTIONS.relative_tolerance = 1e-3

        loose = replace(DEFAULT_OPTIONS, relative_tolerance=1e-3)

        self.assertEqual(loose.relative_tolerance, 1e-3)
        self.assertEqual(DEFAULT_OPTIONS.relative_tolerance, DEFAULT_TOLERANCE)

    def test_tolerances(self):

        self.assertEqual(NumericOptions().tolerances(),
                         {'absolute_tolerance': None, 'relative_tolerance': DEFAULT_TOLERANCE})

        self.assertEqual(NumericOptions(absolute_tolerance=1e-9).tolerances(),
                         {'absolute_tolerance': 1e-9, 'relative_tolerance': DEFAULT_TOLERANCE})

        # explicit values win over the stored ones
        self.assertEqual(NumericOptions(absolute_tolerance=1e-9).tolerances(1e-3, 1e-6),
                         {'absolute_tolerance': 1e-6, 'relative_tolerance': 1e-3})

    def test_options_dict(self):

        self.assertEqual(NumericOptions().options_dict, {'relative_tolerance': DEFAULT_TOLERANCE,
                                                         'absolute_tolerance': 0.0,
                                                         'nlerp_threshold': 0.9995,
                                                         'clamp_euler_pitch': True})

    def test_apply_options(self):

        class Target:
            pass

        target = Target()

        NumericOptions(nlerp_threshold=0.99).apply_options(target)

        self.assertEqual(target.nlerp_threshold, 0.99)
        self.assertEqual(target.relative_tolerance, DEFAULT_TOLERANCE)
        self.assertTrue(target.clamp_euler_pitch)
