import unittest

from pdf.segmenter import segment_document, segment_page


class TestSegmentPage(unittest.TestCase):
    def test_single_row(self):
        records = segment_page("0149711785-0110-1 Деталь под покраску F/034 1 1785")
        self.assertEqual(len(records), 1)
        r = records[0]
        self.assertEqual(r.shipment_number, "0149711785-0110-1")
        self.assertEqual(r.article, "F/034")
        self.assertEqual(r.product_name, "Деталь под покраску")
        self.assertEqual(r.page, 1)

    def test_blocks_end_at_next_number(self):
        text = (
            "Отчёт 1 0149711785-0110-1 Деталь под покраску F/034 1 1785 "
            "2 0149711786-0110-2 Кронштейн AB-12 2 1786"
        )
        records = segment_page(text, page_number=3)
        self.assertEqual([r.shipment_number for r in records], ["0149711785-0110-1", "0149711786-0110-2"])
        self.assertEqual([r.article for r in records], ["F/034", "AB-12"])
        self.assertEqual(records[1].product_name, "Кронштейн")
        self.assertTrue(all(r.page == 3 for r in records))

    def test_record_emitted_without_article(self):
        records = segment_page("12345678-0001-1 товар без артикула")
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].article, "")
        self.assertFalse(records[0].has_article)

    def test_no_numbers(self):
        self.assertEqual(segment_page("Итого: 0 отправлений"), [])

    def test_number_length_bounds(self):
        for number in ("12345678-0110-1", "123456789012-0110-1", "12345678-0110-12", "123456789012-0110-99"):
            with self.subTest(number=number):
                records = segment_page(f"{number} Деталь под покраску F/034 1 1785")
                self.assertEqual([r.shipment_number for r in records], [number])
                self.assertEqual(records[0].article, "F/034")
                self.assertEqual(records[0].product_name, "Деталь под покраску")

    def test_number_too_short_is_ignored(self):
        self.assertEqual(segment_page("1234567-0110-1 Деталь F/034 1 1785"), [])


class TestSegmentDocument(unittest.TestCase):
    def test_pages_numbered_from_one(self):
        records = segment_document([
            "0149711785-0110-1 Деталь F/034 1 1785",
            "",
            "0149711787-0110-1 Болт B-7 4 1787",
        ])
        self.assertEqual([r.page for r in records], [1, 3])


if __name__ == "__main__":
    unittest.main()
