import unittest

from pdf.geometry import PageFrame, plan_band


class TestPageFrame(unittest.TestCase):
    def test_extend_bottom_keeps_top(self):
        frame = PageFrame.from_box(0, 0, 300, 200)
        new = frame.extend_bottom(25)
        self.assertEqual(new.top, frame.top)
        self.assertEqual(new.bottom, -25)
        self.assertEqual(new.height, 225)
        self.assertEqual(new.width, 300)
        self.assertEqual(new.as_box(), (0, -25, 300, 200))

    def test_grow_height_moves_top(self):
        frame = PageFrame.from_box(0, 0, 300, 200)
        self.assertEqual(frame.grow_height(25).as_box(), (0, 0, 300, 225))

    def test_shift_origin(self):
        frame = PageFrame.from_box(10, 20, 110, 220)
        self.assertEqual(frame.shift_origin(5).as_box(), (10, 15, 110, 215))

    def test_to_page_point(self):
        frame = PageFrame.from_box(0, -25, 300, 200)
        self.assertEqual(frame.to_page_point(0, 200), (0, 0))
        self.assertEqual(frame.to_page_point(150, -20), (150, 220))


class TestPlanBand(unittest.TestCase):
    def test_centered_above_new_bottom(self):
        frame = PageFrame.from_box(0, 0, 300, 200).extend_bottom(25)
        band = plan_band(frame, "Арт: F/034", text_width=60, text_height=16, font_size=14)
        self.assertEqual(band.text_x, 120)
        self.assertEqual(band.text_y, -20)
        self.assertEqual(band.box, (115, -22, 185, -2))
        self.assertEqual(band.text, "Арт: F/034")
        self.assertEqual(band.font_size, 14)

    def test_offset_frame(self):
        frame = PageFrame.from_box(50, 10, 250, 110)
        band = plan_band(frame, "x", text_width=100, text_height=10, font_size=10, bottom_inset=3)
        self.assertEqual(band.text_x, 100)
        self.assertEqual(band.text_y, 13)


if __name__ == "__main__":
    unittest.main()
