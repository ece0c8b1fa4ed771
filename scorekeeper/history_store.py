import os
import uuid
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import List, Optional

import pandas as pd

COLUMNS = ["id", "date", "player1_sets", "player2_sets", "player1_games", "player2_games", "location"]


@dataclass
class MatchRecord:
    """Resultado de uma partida encerrada, no formato guardado no histórico."""

    date: datetime
    player1_sets: int
    player2_sets: int
    player1_games: List[int]
    player2_games: List[int]
    location: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


def _games_to_str(games: List[int]) -> str:
    return ",".join(str(g) for g in games)


def _str_to_games(text: str) -> List[int]:
    return [int(g) for g in text.split(",") if g.strip()]


class MatchHistoryStore:
    """
    Guarda o histórico de partidas em um arquivo CSV.
    Cada instância aponta para um arquivo; não há estado global.
    """

    def __init__(self, csv_path: str):
        self.csv_path = csv_path

    @staticmethod
    def record_from_match(match, location: str, date: Optional[datetime] = None) -> MatchRecord:
        """
        Monta o registro a partir das consultas da partida: sets anteriores mais
        o set atual, quando a partida já terminou.
        """
        player1_games = [p1 for p1, _ in match.previous_sets_scores()]
        player2_games = [p2 for _, p2 in match.previous_sets_scores()]
        if match.complete():
            player1_games.append(match.player1_current_games())
            player2_games.append(match.player2_current_games())

        return MatchRecord(
            date=date or datetime.now(),
            player1_sets=match.player1_sets(),
            player2_sets=match.player2_sets(),
            player1_games=player1_games,
            player2_games=player2_games,
            location=location,
        )

    def get_all_matches(self) -> List[MatchRecord]:
        """Retorna todas as partidas salvas; lista vazia se o arquivo não existir."""
        try:
            df = pd.read_csv(self.csv_path, sep=";", dtype=str, keep_default_na=False)
        except FileNotFoundError:
            return []
        except pd.errors.EmptyDataError:
            return []

        records = []
        for row in df.to_dict("records"):
            records.append(MatchRecord(
                date=datetime.fromisoformat(row["date"]),
                player1_sets=int(row["player1_sets"]),
                player2_sets=int(row["player2_sets"]),
                player1_games=_str_to_games(row["player1_games"]),
                player2_games=_str_to_games(row["player2_games"]),
                location=row["location"],
                id=row["id"],
            ))
        return records

    def save_match(self, record: MatchRecord):
        """Acrescenta a partida ao histórico."""
        history = self.get_all_matches()
        history.append(record)
        self._write(history)
        print(f"Partida salva no histórico: {self.csv_path}")

    def get_match(self, match_id: str) -> Optional[MatchRecord]:
        return next((m for m in self.get_all_matches() if m.id == match_id), None)

    def delete_match(self, match_id: str):
        history = [m for m in self.get_all_matches() if m.id != match_id]
        self._write(history)

    def clear_all_matches(self):
        if os.path.exists(self.csv_path):
            os.remove(self.csv_path)

    def _write(self, history: List[MatchRecord]):
        output_dir = os.path.dirname(self.csv_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir)

        rows = []
        for record in history:
            row = asdict(record)
            row["date"] = record.date.isoformat()
            row["player1_games"] = _games_to_str(record.player1_games)
            row["player2_games"] = _games_to_str(record.player2_games)
            rows.append(row)

        pd.DataFrame(rows, columns=COLUMNS).to_csv(self.csv_path, index=False, sep=";")

    @staticmethod
    def format_match_for_display(record: MatchRecord) -> str:
        """Resumo de uma partida para a listagem do histórico."""
        date_str = record.date.strftime("%d/%m/%Y %H:%M")
        game_summary = ""
        for p1, p2 in zip(record.player1_games, record.player2_games):
            game_summary += f"[{p1}-{p2}] "
        return (f"{date_str} - {record.location}\n"
                f"Player 1: {record.player1_sets} sets, Player 2: {record.player2_sets} sets\n"
                f"Games: {game_summary}")
