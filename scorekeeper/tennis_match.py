from tennis_set import TennisSet

SETS_TO_WIN = 3
# Índice do 5º set, jogado com tie-break em 12-12
LAST_SET_INDEX = 4


class TennisMatch:
    """
    Gerencia uma partida em melhor de cinco sets: a sequência de sets, o placar
    de sets, o rodízio de saque (inclusive dentro do tie-break) e os
    indicadores de game/set/match point.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Reinicia a partida: um único set, placar zerado e jogador 1 sacando."""
        self.sets = [TennisSet()]
        self.current_set_index = 0
        self.player1_sets_won = 0
        self.player2_sets_won = 0
        self.player1_serving = True
        self.tiebreak_points_played = 0
        self._tiebreak_first_server_is_player1 = None

    def point_won_by(self, player_code):
        """Registra um ponto pelo código do jogador ("A" ou "B"). Retorna se o sacador mudou."""
        if player_code == "A":
            return self.add_point_to_player1()
        if player_code == "B":
            return self.add_point_to_player2()
        raise ValueError(f"Código de jogador inválido: {player_code}")

    def add_point_to_player1(self):
        """Soma um ponto ao jogador 1 e retorna True se o sacador mudou neste ponto."""
        return self._add_point(TennisSet.add_point_to_player1)

    def add_point_to_player2(self):
        """Soma um ponto ao jogador 2 e retorna True se o sacador mudou neste ponto."""
        return self._add_point(TennisSet.add_point_to_player2)

    def _add_point(self, add_to_set):
        if self.complete():
            return False

        current_set = self.sets[self.current_set_index]
        was_tiebreak = current_set.is_in_tiebreak()
        was_game_complete = current_set.is_game_complete()
        was_set_complete = current_set.complete()

        add_to_set(current_set)

        if was_tiebreak:
            self.tiebreak_points_played += 1

        if current_set.complete() and not was_set_complete:
            self._finish_set(current_set, was_tiebreak)
            return True

        if current_set.is_game_complete() and not was_game_complete and not was_tiebreak:
            self.player1_serving = not self.player1_serving
            if current_set.is_in_tiebreak():
                # Quem sacaria o próximo game abre o tie-break
                self._tiebreak_first_server_is_player1 = self.player1_serving
            return True

        if was_tiebreak and self._tiebreak_service_changes():
            self.player1_serving = not self.player1_serving
            return True

        return False

    def _tiebreak_service_changes(self):
        # Troca após o 1º ponto e depois a cada dois pontos (3º, 5º, 7º...)
        played = self.tiebreak_points_played
        return played == 1 or (played > 1 and played % 2 == 1)

    def _finish_set(self, finished_set, was_tiebreak):
        if finished_set.player1_won():
            self.player1_sets_won += 1
        elif finished_set.player2_won():
            self.player2_sets_won += 1

        if was_tiebreak and self._tiebreak_first_server_is_player1 is not None:
            # Quem recebeu o primeiro ponto do tie-break saca o próximo set
            self.player1_serving = not self._tiebreak_first_server_is_player1
        else:
            self.player1_serving = not self.player1_serving
        self._tiebreak_first_server_is_player1 = None

        if not self.complete():
            self.current_set_index += 1
            self.sets.append(TennisSet(is_last_set=self.current_set_index == LAST_SET_INDEX))
            self.tiebreak_points_played = 0

    def player1_won(self):
        return self.player1_sets_won >= SETS_TO_WIN

    def player2_won(self):
        return self.player2_sets_won >= SETS_TO_WIN

    def complete(self):
        return self.player1_won() or self.player2_won()

    def winner(self):
        if self.player1_won():
            return "A"
        if self.player2_won():
            return "B"
        return None

    def _current_set(self):
        if self.current_set_index < len(self.sets):
            return self.sets[self.current_set_index]
        return None

    def player1_game_score(self):
        current_set = self._current_set()
        return current_set.player1_game_score() if current_set else ""

    def player2_game_score(self):
        current_set = self._current_set()
        return current_set.player2_game_score() if current_set else ""

    def player1_current_games(self):
        current_set = self._current_set()
        return current_set.get_player1_games() if current_set else 0

    def player2_current_games(self):
        current_set = self._current_set()
        return current_set.get_player2_games() if current_set else 0

    def player1_sets(self):
        return self.player1_sets_won

    def player2_sets(self):
        return self.player2_sets_won

    def previous_sets_scores(self):
        """Placar de games (jogador 1, jogador 2) de cada set já encerrado, em ordem."""
        return [(s.get_player1_games(), s.get_player2_games())
                for s in self.sets[:self.current_set_index]]

    def total_games_played(self):
        total = sum(p1 + p2 for p1, p2 in self.previous_sets_scores())
        return total + self.player1_current_games() + self.player2_current_games()

    def is_current_game_tiebreak(self):
        current_set = self._current_set()
        return current_set.is_in_tiebreak() if current_set else False

    def is_player1_serving(self):
        return self.player1_serving

    def server(self):
        return "A" if self.player1_serving else "B"

    def has_player1_game_point(self):
        current_set = self._current_set()
        return current_set.has_player1_game_point() if current_set else False

    def has_player2_game_point(self):
        current_set = self._current_set()
        return current_set.has_player2_game_point() if current_set else False

    def has_player1_set_point(self):
        current_set = self._current_set()
        return current_set.has_player1_set_point() if current_set else False

    def has_player2_set_point(self):
        current_set = self._current_set()
        return current_set.has_player2_set_point() if current_set else False

    def has_player1_match_point(self):
        """Match point: set point para quem já tem um set a menos do que o necessário."""
        return self.has_player1_set_point() and self.player1_sets_won == SETS_TO_WIN - 1

    def has_player2_match_point(self):
        return self.has_player2_set_point() and self.player2_sets_won == SETS_TO_WIN - 1
