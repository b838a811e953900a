import unittest

from htmlbuild.elements import (
    ContainerElement,
    ImageElement,
    RawHtml,
    TextElement,
    set_pair,
)


class TextElementTest(unittest.TestCase):
    def test_text_is_escaped_with_apostrophe_entities(self) -> None:
        element = TextElement("<script>alert('hack')</script>")
        self.assertEqual(
            element.text(), "&lt;script&gt;alert(&#x27;hack&#x27;)&lt;/script&gt;"
        )

    def test_text_element_shape(self) -> None:
        element = TextElement("plain")
        self.assertEqual(element.tag(), "span")
        self.assertIsNone(element.attributes())
        self.assertFalse(element.is_void())
        self.assertEqual(tuple(element.children()), ())

    def test_existing_entities_are_escaped_once_more(self) -> None:
        self.assertEqual(TextElement("&#39;").text(), "&amp;#39;")


class RawHtmlTest(unittest.TestCase):
    def test_raw_reports_passthrough_sentinel(self) -> None:
        raw = RawHtml("<b>Bold</b> text")
        self.assertEqual(raw.tag(), "")
        self.assertTrue(raw.is_void())
        self.assertEqual(raw.text(), "<b>Bold</b> text")
        self.assertEqual(raw.render(), "<b>Bold</b> text")


class ImageElementTest(unittest.TestCase):
    def test_src_first_then_alt(self) -> None:
        image = ImageElement("a.png?x=1&y=2").with_alt('A "quoted" alt')
        self.assertEqual(
            image.attributes(),
            [("src", "a.png?x=1&amp;y=2"), ("alt", "A &quot;quoted&quot; alt")],
        )

    def test_alt_omitted_when_unset(self) -> None:
        self.assertEqual(ImageElement("a.png").attributes(), [("src", "a.png")])

    def test_extra_attributes_are_escaped_and_key_unique(self) -> None:
        image = (
            ImageElement("a.png")
            .with_attribute("width", "100")
            .with_attribute("title", "<t>")
            .with_attribute("width", "200")
        )
        attrs = image.attributes()
        self.assertEqual(attrs[0], ("src", "a.png"))
        self.assertEqual(set(attrs[1:]), {("width", "200"), ("title", "&lt;t&gt;")})

    def test_image_is_void_without_text(self) -> None:
        image = ImageElement("a.png")
        self.assertTrue(image.is_void())
        self.assertIsNone(image.text())
        self.assertFalse(image.has_content())


class ContainerElementTest(unittest.TestCase):
    def test_no_attributes_reports_none(self) -> None:
        self.assertIsNone(ContainerElement("div").attributes())

    def test_id_then_class_then_extras(self) -> None:
        div = (
            ContainerElement("div")
            .with_attribute("data-x", "1")
            .with_class("primary")
            .with_class("large")
            .with_id("main-content")
        )
        attrs = div.attributes()
        self.assertEqual(attrs[0], ("id", "main-content"))
        self.assertEqual(attrs[1], ("class", "primary large"))
        self.assertEqual(attrs[2:], [("data-x", "1")])

    def test_extra_attribute_keys_and_values_are_escaped(self) -> None:
        div = ContainerElement("div").with_attribute('on"x', "<v>")
        self.assertEqual(div.attributes(), [("on&quot;x", "&lt;v&gt;")])

    def test_class_list_escaped_as_one_value(self) -> None:
        div = ContainerElement("div").with_class("a&b").with_class("c")
        self.assertEqual(div.attributes(), [("class", "a&amp;b c")])

    def test_with_text_appends_text_child(self) -> None:
        div = ContainerElement("p").with_text("one").with_child(RawHtml("<br>"))
        children = div.children()
        self.assertEqual(children[0], TextElement("one"))
        self.assertEqual(children[1], RawHtml("<br>"))

    def test_with_children_extends_in_order(self) -> None:
        ul = ContainerElement("ul").with_children(
            [ContainerElement("li").with_text(str(i)) for i in range(3)]
        )
        self.assertEqual(len(ul.children()), 3)
        self.assertEqual(ul.children()[2].children()[0], TextElement("2"))

    def test_builder_methods_do_not_mutate_receiver(self) -> None:
        base = ContainerElement("div")
        configured = base.with_id("x").with_class("c").with_attribute("k", "v").with_text("t")
        self.assertIsNone(base.attributes())
        self.assertEqual(tuple(base.children()), ())
        self.assertEqual(len(configured.children()), 1)

        image = ImageElement("a.png")
        image.with_alt("alt").with_attribute("width", "1")
        self.assertEqual(image.attributes(), [("src", "a.png")])


class ImmutabilityTest(unittest.TestCase):
    def test_elements_are_hashable(self) -> None:
        image = ImageElement("a.png").with_attribute("width", "10")
        div = ContainerElement("div").with_attribute("k", "v").with_child(image)
        self.assertEqual(hash(image), hash(ImageElement("a.png").with_attribute("width", "10")))
        self.assertIn(div, {div})

    def test_extra_attributes_cannot_be_mutated(self) -> None:
        image = ImageElement("a.png").with_attribute("width", "10")
        with self.assertRaises(TypeError):
            image.extra_attributes["width"] = "20"  # type: ignore[index]
        self.assertEqual(image.attributes(), [("src", "a.png"), ("width", "10")])

    def test_set_pair_replaces_existing_key_in_place(self) -> None:
        pairs = (("a", "1"), ("b", "2"))
        self.assertEqual(set_pair(pairs, "a", "3"), (("a", "3"), ("b", "2")))
        self.assertEqual(set_pair(pairs, "c", "4"), pairs + (("c", "4"),))
        self.assertEqual(pairs, (("a", "1"), ("b", "2")))


if __name__ == "__main__":
    unittest.main()
