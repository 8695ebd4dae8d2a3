import os
import tempfile
import unittest

from PIL import Image

from ascii_render.exporter import render_ascii_to_image
from ascii_render.result import ASCIIResult, create_result


class TestASCIIResult(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def test_dimensions_and_stats(self):
        result = ASCIIResult("@@ \n @.")
        self.assertEqual(result.width, 3)
        self.assertEqual(result.height, 2)

        stats = result.get_stats()
        self.assertEqual(stats["total_characters"], 6)
        self.assertEqual(stats["unique_characters"], 3)

    def test_empty_result(self):
        result = ASCIIResult("")
        self.assertEqual((result.width, result.height), (0, 0))

    def test_create_result_metadata(self):
        result = create_result("@", palette="@ ", invert=False)
        self.assertIn("generated_at", result.metadata)
        self.assertEqual(result.metadata["palette"], "@ ")
        self.assertEqual(str(result), "@")

    def test_save_text(self):
        path = os.path.join(self.tmp.name, "art.txt")
        ASCIIResult("@ \n @").save(path)
        with open(path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "@ \n @\n")

    def test_save_html_escapes(self):
        path = os.path.join(self.tmp.name, "art.html")
        create_result("<&>", palette="<&> ").save(path)
        with open(path, encoding="utf-8") as f:
            content = f.read()
        self.assertIn("<pre>&lt;&amp;&gt;</pre>", content)
        self.assertIn("&lt;&amp;&gt; ", content)

    def test_save_png(self):
        path = os.path.join(self.tmp.name, "art.png")
        ASCIIResult("@@@\n. .").save(path)
        with Image.open(path) as image:
            self.assertEqual(image.format, "PNG")
            self.assertGreater(image.width, 40)


class TestExporter(unittest.TestCase):

    def test_empty_text(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "empty.png")
            self.assertIsNone(render_ascii_to_image("", path))
            self.assertFalse(os.path.exists(path))

    def test_image_grows_with_text(self):
        with tempfile.TemporaryDirectory() as tmp:
            small = render_ascii_to_image("@", os.path.join(tmp, "small.png"))
            large = render_ascii_to_image("@@@@@@@@\n@\n@\n@", os.path.join(tmp, "large.png"))
            with Image.open(small) as a, Image.open(large) as b:
                self.assertGreater(b.width, a.width)
                self.assertGreater(b.height, a.height)


if __name__ == "__main__":
    unittest.main()
