import time

from config import CONFIG
from tennis_match import TennisMatch


class AppState:
    """
    Gerencia todo o estado da sessão de marcação de uma partida.
    """
    def __init__(self, player_a_name: str, player_b_name: str, config=CONFIG):
        self.player_names = {"A": player_a_name, "B": player_b_name}
        self.config = config

        self.match = TennisMatch()
        self.all_points_data = []
        self.point_counter = 0
        self.started_at = time.time()

        self.last_event_info = "Pressione 1 ou 2 para marcar um ponto."
        self.last_server_changed = False
        self.total_games_played = 0
        self.new_balls_due = False
        # Id do registro no histórico da partida atual, se já foi salva
        self.saved_match_id = None

    def record_point(self, player_code: str):
        """Registra o ponto na partida e no histórico de pontos da sessão."""
        server = self.match.server()
        self.last_server_changed = self.match.point_won_by(player_code)

        self.point_counter += 1
        self.all_points_data.append({
            "point_id": self.point_counter,
            "winner": player_code,
            "server": server,
            "timestamp_sec": round(time.time() - self.started_at, 3),
        })
        self.new_balls_due = self.check_for_new_balls()

    def check_for_new_balls(self) -> bool:
        """
        Verifica se é hora de anunciar a troca de bolas: após os primeiros 7 games,
        depois a cada 9 games, ou no início de um tie-break em 6-6.
        Só anuncia quando o total de games mudou desde a última verificação.
        """
        current_total = self.match.total_games_played()
        if current_total <= self.total_games_played:
            return False

        first = self.config["NEW_BALLS_FIRST_AFTER"]
        every = self.config["NEW_BALLS_EVERY"]
        due = False
        if current_total == first:
            due = True
        elif current_total > first and (current_total - first) % every == 0:
            due = True
        elif (self.match.is_current_game_tiebreak()
              and self.match.player1_current_games() == 6
              and self.match.player2_current_games() == 6):
            due = True

        self.total_games_played = current_total
        return due

    def rebuild_from_points(self, points):
        """
        Refaz a partida do zero a partir de uma lista de pontos.
        Como o placar só depende da ordem dos pontos, o resultado é sempre o mesmo.
        """
        self.match.reset()
        self.all_points_data = []
        self.point_counter = 0
        self.total_games_played = 0
        self.last_server_changed = False
        self.new_balls_due = False

        for point_data in points:
            if self.match.complete():
                break
            self.last_server_changed = self.match.point_won_by(point_data["winner"])
            self.all_points_data.append(point_data)
            self.point_counter = max(self.point_counter, int(point_data["point_id"]))
        self.total_games_played = self.match.total_games_played()

    def reset_match(self):
        """Descarta todos os pontos e começa uma nova partida."""
        self.rebuild_from_points([])
        self.started_at = time.time()
        self.saved_match_id = None
