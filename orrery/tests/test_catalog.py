"""Test catalog loading and the command-line summary"""
import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from pathlib import Path

import numpy as np

from orrery import bodies_data, load_bodies_data, BodyClass, ParameterFormatError, estimate_radius, TO_RAD
from orrery.__main__ import main


class TestBundledCatalog(unittest.TestCase):

    def test_major_bodies_present(self):
        for name in ('Mercury', 'Venus', 'Earth', 'Mars', 'Jupiter', 'Saturn', 'Uranus', 'Neptune', 'Pluto'):
            self.assertIn(name, bodies_data)

    def test_earth(self):
        earth = bodies_data['Earth']
        self.assertEqual(earth.body_class, BodyClass.PLANET)
        self.assertAlmostEqual(earth.orbital_period_centuries, 0.01, places=7)
        self.assertAlmostEqual(earth.axis_dec, np.pi / 2, places=12)
        np.testing.assert_allclose(earth.mass_kg, 5.9722e24, rtol=1e-12)

    def test_pluto_is_dwarf_planet(self):
        pluto = bodies_data['Pluto']
        self.assertEqual(pluto.body_class, BodyClass.DWARF_PLANET)
        self.assertLess(pluto.periapsis_distance, bodies_data['Neptune'].apoapsis_distance)

    def test_saturn_rings(self):
        self.assertEqual(bodies_data['Saturn'].ring_radius_factor, 2.3)
        self.assertEqual(bodies_data['Jupiter'].ring_radius_factor, 0.0)

    def test_retrograde_rotation(self):
        self.assertLess(bodies_data['Venus'].theta_dot, 0.0)

    def test_small_body_estimates(self):
        apophis = bodies_data['Apophis']
        self.assertTrue(apophis.is_small_body())
        self.assertEqual(apophis.epoch, 51544.5)
        self.assertEqual(apophis.radius_km, float(estimate_radius(19.09)))
        np.testing.assert_allclose(apophis.mass_kg, 8.7523e9 * apophis.radius_km**3, rtol=1e-14)


class TestLoadCatalog(unittest.TestCase):

    def _write(self, text):
        fd, path = tempfile.mkstemp(suffix='.csv')
        with os.fdopen(fd, 'w') as f:
            f.write(text)
        self.addCleanup(os.remove, path)
        return Path(path)

    def test_custom_catalog(self):
        path = self._write(
            "name,type,a,e,inc\n"
            "Alpha,2,3.0,0.1,10\n"
            ",,,,\n"
            "Beta,,,,\n"
        )
        bodies = load_bodies_data(path)
        self.assertEqual(sorted(bodies), ['Alpha', 'Beta'])
        self.assertEqual(bodies['Alpha'].body_class, BodyClass.LARGE_MOON_OR_ASTEROID)
        self.assertAlmostEqual(bodies['Alpha'].inclination, 10.0 * TO_RAD, places=15)
        self.assertEqual(bodies['Beta'].semi_major_axis, 1.0)

    def test_catalog_with_byte_order_mark(self):
        fd, path = tempfile.mkstemp(suffix='.csv')
        with os.fdopen(fd, 'w', encoding='utf-8-sig') as f:
            f.write("name,a\nAlpha,2.0\nBeta,3.0\n")
        self.addCleanup(os.remove, path)

        bodies = load_bodies_data(Path(path))
        self.assertEqual(sorted(bodies), ['Alpha', 'Beta'])
        self.assertEqual(bodies['Beta'].semi_major_axis, 3.0)

    def test_bad_catalog_entry(self):
        path = self._write("name,a\nAlpha,far\n")
        with self.assertRaises(ParameterFormatError) as ctx:
            load_bodies_data(path)
        self.assertEqual(ctx.exception.field, 'a')

    def test_missing_catalog(self):
        with self.assertRaises(FileNotFoundError):
            load_bodies_data(Path(tempfile.gettempdir()) / 'no_such_orrery_catalog.csv')


class TestCLI(unittest.TestCase):

    def test_summary(self):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main([])
        self.assertEqual(status, 0)
        text = out.getvalue()
        self.assertIn('Name', text)
        self.assertIn('Jupiter', text)
        self.assertIn('DWARF_PLANET', text)

    def test_single_body(self):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(['--name', 'Mars'])
        self.assertEqual(status, 0)
        lines = out.getvalue().strip().split('\n')
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[1].startswith('Mars'))

    def test_unknown_body(self):
        err = io.StringIO()
        with redirect_stderr(err):
            status = main(['--name', 'Vulcan'])
        self.assertEqual(status, 1)
        self.assertIn('Vulcan', err.getvalue())


if __name__ == '__main__':
    unittest.main()
