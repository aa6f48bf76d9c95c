import unittest

from docx_codec.errors import MalformedMarkupError, MissingPartError, ReaderError
from docx_codec.xml_node import XmlDocument, XmlNode, parse_node

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

ALIASED = f"""<?xml version="1.0" encoding="UTF-8"?>
<x:p xmlns:x="{W_NS}" xmlns:q="urn:unknown">
  <!-- comment -->
  <x:r><x:t xml:space="preserve"> a </x:t></x:r>
  <x:r q:flag="1"/>
  <q:extra/>
</x:p>
"""


class ParseNodeTests(unittest.TestCase):
    def test_conventional_prefixes(self) -> None:
        node = parse_node(ALIASED)
        self.assertEqual(node.tag, "w:p")
        self.assertEqual(node.local_name, "p")
        self.assertEqual([child.tag for child in node.children], ["w:r", "w:r", "q:extra"])

    def test_text_and_xml_space(self) -> None:
        node = parse_node(ALIASED)
        text = node.children[0].children[0]
        self.assertEqual(text.text, " a ")
        self.assertEqual(text.get("xml:space"), "preserve")

    def test_unknown_namespace_keeps_declared_prefix(self) -> None:
        node = parse_node(ALIASED)
        self.assertEqual(node.children[1].get("q:flag"), "1")

    def test_default_namespace_gives_local_name(self) -> None:
        node = parse_node('<Properties xmlns="urn:props"><property name="a"/></Properties>')
        self.assertEqual(node.tag, "Properties")
        self.assertEqual(node.children[0].tag, "property")

    def test_find_returns_first_match(self) -> None:
        node = XmlNode(
            "w:rPr",
            children=[XmlNode("w:sz", {"w:val": "20"}), XmlNode("w:sz", {"w:val": "40"})],
        )
        self.assertEqual(node.find("w:sz").get("w:val"), "20")
        self.assertIsNone(node.find("w:b"))
        self.assertEqual(len(list(node.iter_children("w:sz"))), 2)

    def test_missing_part(self) -> None:
        with self.assertRaises(MissingPartError):
            parse_node(None, part="word/document.xml")
        with self.assertRaises(MissingPartError) as ctx:
            parse_node(b"", part="word/styles.xml")
        self.assertEqual(ctx.exception.part, "word/styles.xml")
        self.assertIsInstance(ctx.exception, FileNotFoundError)

    def test_malformed_markup(self) -> None:
        with self.assertRaises(MalformedMarkupError) as ctx:
            parse_node(b"<w:p xmlns:w='urn:x'>\n<w:r>", part="doc")
        self.assertIsInstance(ctx.exception, ReaderError)
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertIsNotNone(ctx.exception.line)


class XmlDocumentTests(unittest.TestCase):
    def test_round_trip_plain(self) -> None:
        doc = XmlDocument.from_string('<a><b x="1">text</b><c/></a>')
        self.assertEqual(str(doc), '<a><b x="1">text</b><c></c></a>')

    def test_trim(self) -> None:
        doc = XmlDocument.from_string("<a>  hi  </a>")
        self.assertEqual(doc.data[0].data, "hi")
        doc = XmlDocument.from_bytes(b"<a>  hi  </a>")
        self.assertEqual(doc.data[0].data, "  hi  ")

    def test_namespaces_kept_as_attributes(self) -> None:
        doc = XmlDocument.from_string('<w:p xmlns:w="urn:x"><w:r/></w:p>')
        root = doc.data[0]
        self.assertEqual(root.name, "w:p")
        self.assertEqual(root.attributes, [("xmlns:w", "urn:x")])
        self.assertEqual(root.children[0].name, "w:r")
        self.assertEqual(str(doc), '<w:p xmlns:w="urn:x"><w:r></w:r></w:p>')

    def test_malformed(self) -> None:
        with self.assertRaises(MalformedMarkupError):
            XmlDocument.from_string("<a><b></a>")


if __name__ == "__main__":
    unittest.main()
