import os
import tempfile
import unittest

from csv_handler import CSVHandler
from statistics_generator import StatisticsGenerator


class TestStatisticsGenerator(unittest.TestCase):
    """Testes do relatório estatístico gerado a partir do registro de pontos."""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.csv_path = os.path.join(self.tmp_dir.name, "partida.csv")

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _write_points(self, winners):
        points = [
            {"point_id": i + 1, "winner": w, "server": "", "timestamp_sec": float(i)}
            for i, w in enumerate(winners)
        ]
        CSVHandler(self.csv_path).save_csv(points)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            StatisticsGenerator(os.path.join(self.tmp_dir.name, "nada.csv"), "A", "B")

    def test_service_games_and_breaks(self):
        # Game 1: A saca e vence. Game 2: B saca e A quebra. Game 3: A saca, B quebra.
        self._write_points(["A"] * 4 + ["A"] * 4 + ["B"] * 4 + ["B"] * 2)
        generator = StatisticsGenerator(self.csv_path, "Guga", "Meligeni")
        report = generator.generate_report()

        stats_a, stats_b = generator.stats["A"], generator.stats["B"]
        self.assertEqual(stats_a["total_points_played"], 14)
        self.assertEqual(stats_a["points_won"], 8)
        self.assertEqual(stats_a["points_won_serving"], 4)
        self.assertEqual(stats_a["points_won_receiving"], 4)
        self.assertEqual(stats_a["service_games"], 2)
        self.assertEqual(stats_a["service_games_held"], 1)
        self.assertEqual(stats_a["breaks"], 1)
        self.assertEqual(stats_b["service_games"], 1)
        self.assertEqual(stats_b["breaks"], 1)
        self.assertEqual(stats_b["points_won_receiving"], 4)
        self.assertEqual(stats_b["points_won_serving"], 2)
        self.assertIn("JOGADOR: Guga", report)

    def test_points_after_match_end_are_ignored(self):
        self._write_points(["A"] * 72 + ["B"] * 5)
        generator = StatisticsGenerator(self.csv_path, "Guga", "Meligeni")
        generator.generate_report()
        self.assertEqual(generator.stats["A"]["total_points_played"], 72)
        self.assertEqual(generator.stats["B"]["points_won"], 0)
        self.assertEqual(generator.stats["A"]["sets_won"], 3)

    def test_tiebreak_counted(self):
        winners = []
        for _ in range(6):
            winners += ["A"] * 4 + ["B"] * 4
        winners += ["B"] * 4
        self._write_points(winners)
        generator = StatisticsGenerator(self.csv_path, "Guga", "Meligeni")
        generator.generate_report()
        self.assertEqual(generator.stats["B"]["tiebreaks_won"], 1)
        self.assertEqual(generator.stats["B"]["sets_won"], 1)
        self.assertEqual(generator.stats["A"]["service_games"] + generator.stats["B"]["service_games"], 12)

    def test_plot_summary_chart(self):
        self._write_points(["A"] * 8 + ["B"] * 4)
        generator = StatisticsGenerator(self.csv_path, "Guga", "Meligeni")
        chart_path = os.path.join(self.tmp_dir.name, "graficos", "resumo.png")
        generator.plot_summary_chart(chart_path)
        self.assertTrue(os.path.exists(chart_path))


if __name__ == "__main__":
    unittest.main()
