import os
import tempfile
import threading
import unittest

from exactrational import (
    DEFAULT_CONFIG,
    Rational,
    RationalConfig,
    as_rational,
    canonicalize,
    from_integers,
    get_config,
    load_config,
    set_config,
    use_config,
)


class RationalConfigTests(unittest.TestCase):
    def test_defaults(self):
        self.assertFalse(DEFAULT_CONFIG.auto_demote_integral)
        self.assertIs(get_config(), DEFAULT_CONFIG)
        self.assertIsInstance(from_integers(4, 2), Rational)

    def test_validation(self):
        with self.assertRaises(TypeError):
            RationalConfig(auto_demote_integral=1)
        with self.assertRaises(TypeError):
            RationalConfig(parse_exponent_limit=1.5)
        with self.assertRaises(ValueError):
            RationalConfig(parse_exponent_limit=-1)
        with self.assertRaises(ValueError):
            RationalConfig.from_mapping({"demote": True})

    def test_use_config_demotes_integral_results(self):
        with use_config(auto_demote_integral=True) as active:
            self.assertTrue(active.auto_demote_integral)
            value = from_integers(4, 2)
            self.assertIs(type(value), int)
            self.assertEqual(value, 2)
            self.assertIs(type(Rational(1, 2) + Rational(1, 2)), int)
            self.assertIs(type(Rational(3, 2) * 2), int)
            self.assertIs(type(Rational(1, 2) ** 0), int)
            self.assertIsInstance(Rational(1, 2) + Rational(1, 3), Rational)
            # the constructor always builds a Rational
            self.assertIsInstance(Rational(4, 2), Rational)
        self.assertIsInstance(from_integers(4, 2), Rational)

    def test_explicit_config_argument(self):
        demoting = RationalConfig(auto_demote_integral=True)
        self.assertEqual(canonicalize(6, 3, config=demoting), 2)
        self.assertIs(type(canonicalize(6, 3, config=demoting)), int)
        self.assertIs(type(as_rational("4/2", config=demoting)), int)
        self.assertIsInstance(canonicalize(6, 3), Rational)

    def test_set_config_applies_to_new_threads(self):
        results = []

        def worker():
            results.append(from_integers(4, 2))

        set_config(RationalConfig(auto_demote_integral=True))
        try:
            self.assertIs(type(from_integers(4, 2)), int)
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()
        finally:
            set_config(DEFAULT_CONFIG)
        self.assertEqual(len(results), 1)
        self.assertIs(type(results[0]), int)
        self.assertIs(get_config(), DEFAULT_CONFIG)

    def test_use_config_overrides_process_config(self):
        set_config(RationalConfig(auto_demote_integral=True))
        try:
            with use_config(auto_demote_integral=False):
                self.assertIsInstance(from_integers(4, 2), Rational)
            self.assertIs(type(from_integers(4, 2)), int)
        finally:
            set_config(DEFAULT_CONFIG)

    def test_set_config_rejects_other_types(self):
        with self.assertRaises(TypeError):
            set_config({"auto_demote_integral": True})

    def test_load_config_from_toml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "settings.toml")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("[exactrational]\nauto_demote_integral = true\nparse_exponent_limit = 50\n")
            config = load_config(path)
        self.assertTrue(config.auto_demote_integral)
        self.assertEqual(config.parse_exponent_limit, 50)
        self.assertIs(get_config(), DEFAULT_CONFIG)

    def test_load_config_without_table_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "settings.toml")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("[other]\nvalue = 1\n")
            self.assertEqual(load_config(path), DEFAULT_CONFIG)

    def test_load_config_rejects_unknown_keys(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "settings.toml")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("[exactrational]\nmax_denominator = 10\n")
            with self.assertRaises(ValueError):
                load_config(path)

    def test_load_config_install(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "settings.toml")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("[exactrational]\nauto_demote_integral = true\n")

            try:
                load_config(path, install=True)
                installed = get_config()
            finally:
                set_config(DEFAULT_CONFIG)
        self.assertTrue(installed.auto_demote_integral)
        self.assertIs(get_config(), DEFAULT_CONFIG)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
