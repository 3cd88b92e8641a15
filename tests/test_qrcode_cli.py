import os
import tempfile
import unittest

from PIL import Image

from qrcode_cli import build_parser, main


class TestQRCodeCliMethods(unittest.TestCase):
    def test_parser_defaults(self):
        args = build_parser().parse_args(["hello"])
        self.assertEqual("hello", args.data)
        self.assertEqual("M", args.ec_level)
        self.assertIsNone(args.version)
        self.assertIsNone(args.mask_pattern)
        self.assertEqual("png", args.format)
        self.assertEqual(8, args.scale)
        self.assertEqual(4, args.border)

    def test_writes_png(self):
        with tempfile.TemporaryDirectory() as folder:
            output = os.path.join(folder, "hello.png")
            self.assertEqual(0, main(["https://google.com", "--output", output, "--scale", "2"]))
            with Image.open(output) as image:
                self.assertEqual("PNG", image.format)
                self.assertEqual((66, 66), image.size)

    def test_writes_bmp(self):
        with tempfile.TemporaryDirectory() as folder:
            output = os.path.join(folder, "hello.bmp")
            args = ["Hello gamer!", "--output", output, "--format", "bmp", "--ec-level", "H", "--version", "5", "--mask-pattern", "6"]
            self.assertEqual(0, main(args))
            with Image.open(output) as image:
                self.assertEqual("BMP", image.format)
                self.assertEqual(((37 + 8) * 8, (37 + 8) * 8), image.size)

    def test_failures(self):
        self.assertEqual(1, main([""]))
        self.assertEqual(1, main(["https://google.com", "--version", "1"]))
        self.assertEqual(1, main(["x" * 2954, "--ec-level", "L"]))

    def test_bad_render_arguments(self):
        with tempfile.TemporaryDirectory() as folder:
            output = os.path.join(folder, "hello.png")
            self.assertEqual(1, main(["Hello", "--border", "-2", "--output", output]))
            self.assertEqual(1, main(["Hello", "--scale", "0", "--format", "bmp", "--output", os.path.join(folder, "hello.bmp")]))
            self.assertEqual([], os.listdir(folder))
