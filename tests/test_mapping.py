import unittest

from data_model import MappingTable, ShipmentRecord


class TestShipmentRecord(unittest.TestCase):
    def test_rejects_malformed_number(self):
        with self.assertRaises(ValueError):
            ShipmentRecord(shipment_number="0149711785-110-1")

    def test_accepts_number_bounds(self):
        ShipmentRecord(shipment_number="12345678-0001-1")
        ShipmentRecord(shipment_number="123456789012-0001-12")


class TestMappingTable(unittest.TestCase):
    def setUp(self):
        self.first = ShipmentRecord("0149711785-0110-1", "F/034", "Деталь", page=1)
        self.other = ShipmentRecord("0149711786-0110-1", "AB-12", "Кронштейн", page=1)
        self.repeat = ShipmentRecord("0149711785-0110-1", "Z/999", "Другая деталь", page=2)

    def test_lookup(self):
        table = MappingTable.from_records([self.first, self.other])
        self.assertEqual(len(table), 2)
        self.assertIs(table.lookup("0149711786-0110-1"), self.other)
        self.assertIsNone(table.lookup("0000000000-0000-0"))
        self.assertIn("0149711785-0110-1", table)

    def test_first_occurrence_wins(self):
        with self.assertLogs("data_model.mapping", level="WARNING"):
            table = MappingTable.from_records([self.first, self.other, self.repeat])
        self.assertEqual(len(table), 2)
        self.assertEqual(table.lookup("0149711785-0110-1").article, "F/034")
        self.assertEqual(table.duplicates, [self.repeat])

    def test_iteration_in_scan_order(self):
        table = MappingTable.from_records([self.other, self.first, self.repeat])
        self.assertEqual([r.article for r in table], ["AB-12", "F/034"])

    def test_duplicates_is_a_copy(self):
        table = MappingTable.from_records([self.first, self.repeat])
        table.duplicates.clear()
        self.assertEqual(len(table.duplicates), 1)


if __name__ == "__main__":
    unittest.main()
