"""
Test per i parser delle opzioni (frame rate e colore marker)
"""
import unittest

from srt_to_edl.core import parse_frame_rate, parse_marker_color


class TestSelections(unittest.TestCase):
    """Test per funzioni pure di parsing delle opzioni"""

    def test_parse_frame_rate_variants(self):
        """Numeri, stringhe e suffisso fps"""
        self.assertEqual(parse_frame_rate(24), 24.0)
        self.assertEqual(parse_frame_rate('25'), 25.0)
        self.assertEqual(parse_frame_rate(' 29.97 '), 29.97)
        self.assertEqual(parse_frame_rate('23.976fps'), 23.976)
        self.assertEqual(parse_frame_rate(30.0), 30.0)

    def test_parse_frame_rate_invalid(self):
        """Errori su valori non ammessi"""
        with self.assertRaises(ValueError):
            parse_frame_rate('60')
        with self.assertRaises(ValueError):
            parse_frame_rate('abc')
        with self.assertRaises(ValueError):
            parse_frame_rate(0)
        with self.assertRaises(ValueError):
            parse_frame_rate(None)
        with self.assertRaises(ValueError):
            parse_frame_rate(True)

    def test_parse_marker_color_case_insensitive(self):
        self.assertEqual(parse_marker_color('yellow'), 'Yellow')
        self.assertEqual(parse_marker_color(' BLUE '), 'Blue')
        self.assertEqual(parse_marker_color('Fuchsia'), 'Fuchsia')

    def test_parse_marker_color_invalid(self):
        with self.assertRaises(ValueError):
            parse_marker_color('Orange')
        with self.assertRaises(ValueError):
            parse_marker_color('')
        with self.assertRaises(ValueError):
            parse_marker_color(None)


if __name__ == "__main__":
    unittest.main()
