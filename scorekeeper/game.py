POINT_MAP = {0: "0", 1: "15", 2: "30", 3: "40"}


def tennis_score(points, other_points):
    """Converte a contagem de pontos para a notação do tênis (0, 15, 30, 40, A)."""
    if points in POINT_MAP:
        return POINT_MAP[points]
    # Acima de 40 só existe vantagem; qualquer empate continua "40"
    if points == other_points + 1:
        return "A"
    return "40"


def tiebreak_score(points, other_points):
    """
    Converte a contagem de pontos para o placar numérico do tie-break.
    A contagem com formato de vantagem continua aparecendo como "A".
    """
    if points >= 4 and points == other_points + 1:
        return "A"
    return str(points)


class Game:
    """
    Pontuação de um único game: 0/15/30/40, deuce e vantagem.
    Também serve como contador de pontos bruto durante o tie-break.
    """

    def __init__(self):
        self.player1_points = 0
        self.player2_points = 0

    def add_point_to_player1(self):
        """Soma um ponto ao jogador 1, devolvendo o deuce se o jogador 2 tinha vantagem."""
        if self.complete():
            return

        if self.player2_points >= 4 and self.player2_points == self.player1_points + 1:
            self.player1_points = 3
            self.player2_points = 3
        else:
            self.player1_points += 1

    def add_point_to_player2(self):
        """Soma um ponto ao jogador 2, devolvendo o deuce se o jogador 1 tinha vantagem."""
        if self.complete():
            return

        if self.player1_points >= 4 and self.player1_points == self.player2_points + 1:
            self.player1_points = 3
            self.player2_points = 3
        else:
            self.player2_points += 1

    def player1_won(self):
        return self.player1_points >= 4 and self.player1_points >= self.player2_points + 2

    def player2_won(self):
        return self.player2_points >= 4 and self.player2_points >= self.player1_points + 2

    def complete(self):
        return self.player1_won() or self.player2_won()

    def player1_score(self):
        if self.complete():
            return ""
        return tennis_score(self.player1_points, self.player2_points)

    def player2_score(self):
        if self.complete():
            return ""
        return tennis_score(self.player2_points, self.player1_points)

    def game_points_for_player1(self):
        """
        Quantos pontos seguidos o jogador 2 precisa para anular o game point
        do jogador 1 (ex: 40-15 -> 2). Retorna 0 se não houver game point.
        """
        return self._game_points(self.player1_points, self.player2_points)

    def game_points_for_player2(self):
        """Mesmo cálculo de game_points_for_player1, visto pelo jogador 2."""
        return self._game_points(self.player2_points, self.player1_points)

    @staticmethod
    def _game_points(points, other_points):
        if points < 3:
            return 0
        if points == 3 and other_points < 3:
            return 3 - other_points
        if points >= 4 and points == other_points + 1:
            return 1
        return 0
