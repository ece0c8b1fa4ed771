import os
import tempfile
import unittest
from datetime import datetime

from history_store import MatchHistoryStore, MatchRecord
from tennis_match import TennisMatch


class TestMatchHistoryStore(unittest.TestCase):
    """Testes do histórico de partidas gravado em CSV."""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.csv_path = os.path.join(self.tmp_dir.name, "historico", "partidas.csv")
        self.store = MatchHistoryStore(self.csv_path)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _finished_match(self):
        match = TennisMatch()
        # 6-4, 0-6, 6-0, 6-0
        for code in ["A"] * 20 + ["B"] * 16 + ["A"] * 4:
            match.point_won_by(code)
        for code in ["B"] * 24 + ["A"] * 48:
            match.point_won_by(code)
        return match

    def _record(self, location="Roland Garros"):
        return MatchRecord(
            date=datetime(2025, 6, 8, 15, 30),
            player1_sets=3,
            player2_sets=1,
            player1_games=[6, 3, 7, 6],
            player2_games=[4, 6, 6, 2],
            location=location,
        )

    def test_empty_history_when_file_is_missing(self):
        self.assertEqual(self.store.get_all_matches(), [])

    def test_record_from_finished_match(self):
        match = self._finished_match()
        self.assertTrue(match.complete())
        record = self.store.record_from_match(match, "Clube")
        self.assertEqual(record.player1_sets, 3)
        self.assertEqual(record.player2_sets, 1)
        self.assertEqual(record.player1_games, [6, 0, 6, 6])
        self.assertEqual(record.player2_games, [4, 6, 0, 0])
        self.assertEqual(record.location, "Clube")

    def test_record_from_unfinished_match_skips_current_set(self):
        match = TennisMatch()
        for code in ["A"] * 24 + ["B"] * 8:
            match.point_won_by(code)
        record = self.store.record_from_match(match, "Clube")
        self.assertEqual(record.player1_games, [6])
        self.assertEqual(record.player2_games, [0])

    def test_save_and_load(self):
        record = self._record()
        self.store.save_match(record)
        self.store.save_match(self._record(location=""))

        matches = self.store.get_all_matches()
        self.assertEqual(len(matches), 2)
        self.assertEqual(matches[0], record)
        self.assertEqual(matches[1].location, "")

    def test_get_and_delete_match(self):
        first, second = self._record(), self._record("Wimbledon")
        self.store.save_match(first)
        self.store.save_match(second)

        self.assertEqual(self.store.get_match(second.id).location, "Wimbledon")
        self.store.delete_match(first.id)
        self.assertIsNone(self.store.get_match(first.id))
        self.assertEqual([m.id for m in self.store.get_all_matches()], [second.id])

    def test_clear_all_matches(self):
        self.store.save_match(self._record())
        self.store.clear_all_matches()
        self.assertEqual(self.store.get_all_matches(), [])

    def test_format_match_for_display(self):
        text = MatchHistoryStore.format_match_for_display(self._record())
        self.assertEqual(
            text,
            "08/06/2025 15:30 - Roland Garros\n"
            "Player 1: 3 sets, Player 2: 1 sets\n"
            "Games: [6-4] [3-6] [7-6] [6-2] ",
        )


if __name__ == "__main__":
    unittest.main()
