from game import Game, tiebreak_score

GAMES_TO_WIN_SET = 6
TIEBREAK_AT = 6
LAST_SET_TIEBREAK_AT = 12


class TennisSet:
    """
    Gerencia os games de um set, incluindo a entrada no tie-break.
    No último set da partida o tie-break só começa em 12-12.
    """

    def __init__(self, is_last_set=False):
        self.player1_games = 0
        self.player2_games = 0
        self.current_game = Game()
        self.is_tiebreak = False
        self.is_last_set = is_last_set
        self.game_just_completed = False

    def add_point_to_player1(self):
        """Processa um ponto do jogador 1 no game atual (ou no tie-break)."""
        if self.complete():
            return

        self.game_just_completed = False
        self.current_game.add_point_to_player1()

        if self.current_game.player1_won():
            self.player1_games += 1
            self.game_just_completed = True
            self._prepare_next_game()

    def add_point_to_player2(self):
        """Processa um ponto do jogador 2 no game atual (ou no tie-break)."""
        if self.complete():
            return

        self.game_just_completed = False
        self.current_game.add_point_to_player2()

        if self.current_game.player2_won():
            self.player2_games += 1
            self.game_just_completed = True
            self._prepare_next_game()

    def _prepare_next_game(self):
        # Vencer o tie-break encerra o set; o game vencido fica como está
        if self.is_tiebreak or self.complete():
            return
        self.current_game = Game()
        self.is_tiebreak = self._should_start_tiebreak()

    def _should_start_tiebreak(self):
        threshold = LAST_SET_TIEBREAK_AT if self.is_last_set else TIEBREAK_AT
        return self.player1_games == threshold and self.player2_games == threshold

    def player1_won(self):
        if self.is_tiebreak:
            return self.current_game.player1_won()
        return (self.player1_games >= GAMES_TO_WIN_SET
                and self.player1_games >= self.player2_games + 2)

    def player2_won(self):
        if self.is_tiebreak:
            return self.current_game.player2_won()
        return (self.player2_games >= GAMES_TO_WIN_SET
                and self.player2_games >= self.player1_games + 2)

    def complete(self):
        return self.player1_won() or self.player2_won()

    def get_player1_games(self):
        return self.player1_games

    def get_player2_games(self):
        return self.player2_games

    def is_game_complete(self):
        """Indica se o último ponto processado encerrou um game (usado na troca de saque)."""
        return self.game_just_completed

    def is_in_tiebreak(self):
        return self.is_tiebreak

    def player1_game_score(self):
        """Placar do game atual; no tie-break mostra os pontos corridos (1, 2, 3...)."""
        game = self.current_game
        if self.is_tiebreak and not game.complete():
            return tiebreak_score(game.player1_points, game.player2_points)
        return game.player1_score()

    def player2_game_score(self):
        game = self.current_game
        if self.is_tiebreak and not game.complete():
            return tiebreak_score(game.player2_points, game.player1_points)
        return game.player2_score()

    def has_player1_game_point(self):
        return self.current_game.game_points_for_player1() > 0

    def has_player2_game_point(self):
        return self.current_game.game_points_for_player2() > 0

    def has_player1_set_point(self):
        """
        Set point: vencer o game atual daria o set ao jogador 1.
        No tie-break equivale ao game point.
        """
        if self.complete():
            return False
        if self.is_tiebreak:
            return self.has_player1_game_point()
        return self._has_set_point(self.player1_games, self.player2_games,
                                   self.has_player1_game_point())

    def has_player2_set_point(self):
        if self.complete():
            return False
        if self.is_tiebreak:
            return self.has_player2_game_point()
        return self._has_set_point(self.player2_games, self.player1_games,
                                   self.has_player2_game_point())

    @staticmethod
    def _has_set_point(games, other_games, has_game_point):
        leads_by_one = games == other_games + 1
        leads_by_two = games >= other_games + 2
        return games >= GAMES_TO_WIN_SET - 1 and (leads_by_one or leads_by_two) and has_game_point
