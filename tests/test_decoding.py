import math
import unittest

from thermokin.decoding import (
    decode_species,
    decode_terms,
    decode_text,
    flag_from_payload,
    float_from_payload,
    parse_bool,
    parse_float,
    parse_int,
    parse_or_default,
    parse_precision,
    precision_from_payload,
)
from thermokin.errors import DecodeError, ParseError
from thermokin.models import StoichiometricTerm

INVALID_UTF8 = b"\xff\xfe"


class TestScalars(unittest.TestCase):
    def test_float_literals(self):
        self.assertEqual(parse_float(b"298.15", "temperature"), 298.15)
        self.assertEqual(parse_float(b"-241.8", "enthalpy"), -241.8)
        self.assertEqual(parse_float(b"1e13", "A"), 1e13)
        self.assertEqual(parse_float(b"5", "k"), 5.0)
        self.assertEqual(parse_float(b".5", "k"), 0.5)
        self.assertTrue(math.isinf(parse_float(b"inf", "k")))
        self.assertTrue(math.isnan(parse_float(b"NaN", "k")))

    def test_float_rejects_non_numbers(self):
        for raw in (b"", b"abc", b" 1.0", b"1.0\n", b"1_000", b"1.0K", b"0x10"):
            with self.subTest(raw=raw):
                with self.assertRaises(ParseError):
                    parse_float(raw, "temperature")

    def test_parse_error_message_names_input(self):
        with self.assertRaises(ParseError) as ctx:
            parse_float(b"hot", "temperature")
        self.assertTrue(str(ctx.exception).startswith("Failed to parse temperature"))

    def test_invalid_utf8(self):
        with self.assertRaises(DecodeError) as ctx:
            parse_float(INVALID_UTF8, "temperature")
        self.assertTrue(str(ctx.exception).startswith("Invalid UTF-8 in temperature"))
        with self.assertRaises(DecodeError):
            decode_text(INVALID_UTF8, "formula")

    def test_int(self):
        self.assertEqual(parse_int(b"2", "order"), 2)
        self.assertEqual(parse_int(b"-1", "order"), -1)
        with self.assertRaises(ParseError):
            parse_int(b"1.5", "order")

    def test_precision(self):
        self.assertEqual(parse_precision(b"4", "precision"), 4)
        with self.assertRaises(ParseError):
            parse_precision(b"-1", "precision")

    def test_bool(self):
        self.assertTrue(parse_bool(b"true", "flag"))
        self.assertFalse(parse_bool(b"false", "flag"))
        with self.assertRaises(ParseError):
            parse_bool(b"True", "flag")


class TestParseOrDefault(unittest.TestCase):
    def test_valid_value_is_used(self):
        self.assertEqual(parse_or_default(parse_precision, b"5", "precision", 2), 5)

    def test_unparsable_falls_back(self):
        self.assertEqual(parse_or_default(parse_precision, b"many", "precision", 2), 2)
        self.assertEqual(parse_or_default(parse_precision, b"-3", "precision", 2), 2)
        self.assertFalse(parse_or_default(parse_bool, b"", "scientific flag", False))
        self.assertEqual(parse_or_default(parse_float, b"?", "initial concentration", 1.0), 1.0)

    def test_missing_falls_back(self):
        self.assertFalse(parse_or_default(parse_bool, None, "scientific flag", False))

    def test_invalid_utf8_still_fails(self):
        with self.assertRaises(DecodeError):
            parse_or_default(parse_precision, INVALID_UTF8, "precision", 2)


class TestStructured(unittest.TestCase):
    def test_terms(self):
        terms = decode_terms(b'[["H2", 2], ["O2", 0.5]]', "reactants")
        self.assertEqual(
            terms,
            (StoichiometricTerm("H2", 2.0), StoichiometricTerm("O2", 0.5)),
        )
        self.assertIsInstance(terms[0].coefficient, float)

    def test_empty_terms(self):
        self.assertEqual(decode_terms(b"[]", "products"), ())

    def test_malformed_terms(self):
        cases = [
            b"not json",
            b'{"H2": 2}',
            b'[["H2"]]',
            b'[["H2", 2, 3]]',
            b'[[2, "H2"]]',
            b'[["H2", "2"]]',
            b'[["H2", true]]',
            b'[["H2", NaN]]',
            INVALID_UTF8,
        ]
        for raw in cases:
            with self.subTest(raw=raw):
                with self.assertRaises(DecodeError):
                    decode_terms(raw, "reactants")

    def test_species(self):
        table = decode_species(
            '{"H2O": {"delta_Hf": -241.826, "S": 188.835, "delta_Gf": -228.61, "phase": "g"}}'.encode("utf-8"),
            "thermodynamic data",
        )
        record = table.lookup("H2O", "product")
        self.assertEqual(record.enthalpy_of_formation, -241.826)
        self.assertEqual(record.entropy, 188.835)
        self.assertEqual(record.gibbs_of_formation, -228.61)

    def test_malformed_species(self):
        cases = [
            b"[]",
            b'{"H2O": 1.0}',
            b'{"H2O": {"delta_Hf": -241.8, "S": 188.8}}',
            b'{"H2O": {"delta_Hf": "x", "S": 188.8, "delta_Gf": 0}}',
        ]
        for raw in cases:
            with self.subTest(raw=raw):
                with self.assertRaises(DecodeError):
                    decode_species(raw, "thermodynamic data")

    def test_coefficient_beyond_float_range(self):
        huge = b"1" + b"0" * 400
        with self.assertRaises(DecodeError) as ctx:
            decode_terms(b'[["H2", ' + huge + b"]]", "reactants")
        self.assertTrue(str(ctx.exception).startswith("Failed to parse reactants"))

    def test_record_field_beyond_float_range(self):
        huge = b"1" + b"0" * 400
        raw = b'{"H2O": {"delta_Hf": ' + huge + b', "S": 188.8, "delta_Gf": 0}}'
        with self.assertRaises(DecodeError):
            decode_species(raw, "thermodynamic data")


class TestJobFileFields(unittest.TestCase):
    def test_float(self):
        self.assertEqual(float_from_payload(298.15, "temperature"), 298.15)
        self.assertEqual(float_from_payload(300, "temperature"), 300.0)
        self.assertEqual(float_from_payload("350.5", "temperature"), 350.5)

    def test_float_rejects_non_numbers(self):
        for value in ("hot", True, None, [300], 10 ** 400):
            with self.subTest(value=value):
                with self.assertRaises(ParseError):
                    float_from_payload(value, "temperature")

    def test_precision(self):
        self.assertEqual(precision_from_payload(4, "precision", 2), 4)
        self.assertEqual(precision_from_payload("3", "precision", 2), 3)
        for value in (-1, "lots", "-1", 1.5, True, [2]):
            with self.subTest(value=value):
                self.assertEqual(precision_from_payload(value, "precision", 2), 2)

    def test_flag(self):
        self.assertTrue(flag_from_payload(True, "scientific", False))
        self.assertTrue(flag_from_payload("true", "scientific", False))
        self.assertFalse(flag_from_payload("false", "scientific", True))
        for value in (None, "yes", 1, "True"):
            with self.subTest(value=value):
                self.assertFalse(flag_from_payload(value, "scientific", False))


if __name__ == '__main__':
    unittest.main()
