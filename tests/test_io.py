import unittest
import sys
import os
import shutil

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from textmaze.io.mask import load_mask

import pygame

class TestMaskLoading(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def save_image(self, name, width, height, black):
        surface = pygame.Surface((width, height))
        surface.fill((255, 255, 255))
        for x, y in black:
            surface.set_at((x, y), (0, 0, 0))
        path = os.path.join("test_out", name)
        pygame.image.save(surface, path)
        return path

    def test_black_pixels(self):
        # Surface coordinates are (x, y)
        path = self.save_image("mask.bmp", 4, 3, [(1, 0), (3, 2)])
        mask = load_mask(path, 4, 3)
        self.assertEqual(mask, {(0, 1), (2, 3)})

    def test_all_white(self):
        path = self.save_image("white.bmp", 5, 5, [])
        self.assertEqual(load_mask(path, 5, 5), set())

    def test_size_mismatch(self):
        path = self.save_image("small.bmp", 3, 3, [(0, 0)])
        with self.assertLogs("textmaze.io.mask", level="WARNING") as logs:
            mask = load_mask(path, 4, 3)
        self.assertEqual(mask, set())
        self.assertIn("expected 4x3", logs.output[0])

    def test_missing_file(self):
        with self.assertLogs("textmaze.io.mask", level="WARNING"):
            mask = load_mask(os.path.join("test_out", "nope.pbm"), 4, 4)
        self.assertEqual(mask, set())

    def test_not_an_image(self):
        path = os.path.join("test_out", "garbage.pbm")
        with open(path, "wb") as f:
            f.write(b"definitely not a bitmap")
        with self.assertLogs("textmaze.io.mask", level="WARNING"):
            self.assertEqual(load_mask(path, 4, 4), set())

if __name__ == '__main__':
    unittest.main()
