import os
import tempfile
import unittest

from csv_handler import CSVHandler


class TestCSVHandler(unittest.TestCase):
    """Testes de leitura e escrita do registro de pontos."""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.csv_path = os.path.join(self.tmp_dir.name, "temp", "partida.csv")
        self.handler = CSVHandler(self.csv_path)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_missing_file_returns_empty_list(self):
        self.assertEqual(self.handler.load_csv(), [])

    def test_save_without_points_writes_nothing(self):
        self.handler.save_csv([])
        self.assertFalse(os.path.exists(self.csv_path))

    def test_save_and_load(self):
        points = [
            {"point_id": 2, "winner": "B", "server": "A", "timestamp_sec": 12.5},
            {"point_id": 1, "winner": "A", "server": "A", "timestamp_sec": 3.25},
        ]
        self.handler.save_csv(points)
        self.assertTrue(os.path.exists(self.csv_path))

        loaded = self.handler.load_csv()
        self.assertEqual([p["point_id"] for p in loaded], [1, 2])
        self.assertEqual(loaded[0]["winner"], "A")
        self.assertEqual(loaded[1]["server"], "A")
        self.assertAlmostEqual(loaded[1]["timestamp_sec"], 12.5)

    def test_blank_timestamp_loads_as_zero(self):
        os.makedirs(os.path.dirname(self.csv_path))
        with open(self.csv_path, "w", encoding="utf-8") as f:
            f.write("point_id;winner;server;timestamp_sec\n1;A;A;\n2;B;A;4,5\n")

        loaded = self.handler.load_csv()
        self.assertEqual(loaded[0]["timestamp_sec"], 0.0)
        self.assertAlmostEqual(loaded[1]["timestamp_sec"], 4.5)


if __name__ == "__main__":
    unittest.main()
