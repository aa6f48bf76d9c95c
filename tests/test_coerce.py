import unittest

from docx_codec.coerce import (
    VAL,
    VAL_INT,
    Attr,
    dual_attr,
    enum_parser,
    on_off_element,
    parse_dxa,
    parse_enum,
    parse_int,
    parse_non_negative_dxa,
    parse_non_negative_int,
    parse_on_off,
    parse_percent,
    w,
)
from docx_codec.types import AlignmentType, BorderType
from docx_codec.xml_node import XmlNode


class OnOffTests(unittest.TestCase):
    def test_absent_value_is_on(self) -> None:
        self.assertTrue(parse_on_off(None))
        self.assertFalse(parse_on_off(None, default=False))

    def test_off_spellings(self) -> None:
        for value in ("0", "false", "off", " FALSE ", "Off"):
            self.assertFalse(parse_on_off(value), value)

    def test_on_spellings(self) -> None:
        for value in ("1", "true", "on", "anything"):
            self.assertTrue(parse_on_off(value), value)

    def test_element_presence(self) -> None:
        self.assertFalse(on_off_element(None))
        self.assertTrue(on_off_element(XmlNode("w:b")))
        self.assertFalse(on_off_element(XmlNode("w:b", {"w:val": "0"})))
        self.assertTrue(on_off_element(XmlNode("w:b", {"val": "true"})))


class NumberTests(unittest.TestCase):
    def test_parse_int(self) -> None:
        self.assertEqual(parse_int("12"), 12)
        self.assertEqual(parse_int(" 5 "), 5)
        self.assertEqual(parse_int("-3"), -3)
        self.assertEqual(parse_int("12.7"), 12)
        self.assertIsNone(parse_int("abc"))
        self.assertIsNone(parse_int(None))

    def test_parse_non_negative_int(self) -> None:
        self.assertEqual(parse_non_negative_int("0"), 0)
        self.assertIsNone(parse_non_negative_int("-1"))

    def test_parse_dxa_points(self) -> None:
        self.assertEqual(parse_dxa("10pt"), 200)
        self.assertEqual(parse_dxa("12.7pt"), 254)
        self.assertEqual(parse_dxa("1440"), 1440)
        self.assertEqual(parse_dxa("-720"), -720)
        self.assertIsNone(parse_dxa("wide"))
        self.assertIsNone(parse_dxa("xpt"))

    def test_parse_non_negative_dxa(self) -> None:
        self.assertEqual(parse_non_negative_dxa("1pt"), 20)
        self.assertIsNone(parse_non_negative_dxa("-1"))

    def test_parse_percent(self) -> None:
        self.assertEqual(parse_percent("150%"), 150)
        self.assertEqual(parse_percent("90"), 90)
        self.assertIsNone(parse_percent("big"))


class EnumTests(unittest.TestCase):
    def test_known_value(self) -> None:
        self.assertEqual(parse_enum("center", AlignmentType), AlignmentType.CENTER)

    def test_unknown_value_falls_back(self) -> None:
        self.assertIsNone(parse_enum("bogus", AlignmentType))
        self.assertEqual(
            parse_enum("bogus", BorderType, BorderType.SINGLE),
            BorderType.SINGLE,
        )

    def test_enum_parser(self) -> None:
        parse = enum_parser(AlignmentType)
        self.assertEqual(parse("both"), AlignmentType.BOTH)
        self.assertIsNone(parse("middle"))


class AttrTests(unittest.TestCase):
    def test_w_keys(self) -> None:
        self.assertEqual(w("val"), ("w:val", "val"))

    def test_read_prefers_first_key(self) -> None:
        node = XmlNode("w:pStyle", {"val": "B", "w:val": "A"})
        self.assertEqual(VAL.read(node), "A")

    def test_read_defaults(self) -> None:
        attr = Attr(w("sz"), 7, parse_int)
        self.assertEqual(attr.read(None), 7)
        self.assertEqual(attr.read(XmlNode("w:x")), 7)
        self.assertEqual(attr.read(XmlNode("w:x", {"w:sz": "big"})), 7)
        self.assertEqual(attr.read(XmlNode("w:x", {"w:sz": "9"})), 9)

    def test_present(self) -> None:
        self.assertTrue(VAL_INT.present(XmlNode("w:x", {"w:val": "x"})))
        self.assertFalse(VAL_INT.present(XmlNode("w:x")))
        self.assertFalse(VAL_INT.present(None))

    def test_dual_attr(self) -> None:
        start = Attr(w("start"), convert=parse_dxa)
        left = Attr(w("left"), convert=parse_dxa)
        node = XmlNode("w:ind", {"w:start": "720", "w:left": "100"})
        self.assertEqual(dual_attr(node, start, left), 720)
        node = XmlNode("w:ind", {"w:start": "wide", "w:left": "100"})
        self.assertEqual(dual_attr(node, start, left), 100)
        node = XmlNode("w:ind")
        self.assertIsNone(dual_attr(node, start, left))


if __name__ == "__main__":
    unittest.main()
