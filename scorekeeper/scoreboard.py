from typing import Dict


class Scoreboard:
    """
    Formata os dados de um objeto TennisMatch para exibição.
    É uma classe de apresentação (Presenter) e não contém estado próprio.
    """

    def get_score_data(self, match, player_names: Dict[str, str]) -> Dict:
        """
        Recebe um objeto TennisMatch e os nomes dos jogadores ({"A": ..., "B": ...})
        e retorna um dicionário com os dados formatados para a tela.
        """
        if match.complete():
            final_sets = match.previous_sets_scores()
            final_sets.append((match.player1_current_games(), match.player2_current_games()))
            return {
                "match_over": True,
                "winner": player_names[match.winner()],
                "sets": (match.player1_sets(), match.player2_sets()),
                "sets_hist": final_sets,
            }

        previous_sets = match.previous_sets_scores()
        data = {
            "match_over": False,
            "is_tiebreak": match.is_current_game_tiebreak(),
            "pA": {
                "name": player_names["A"],
                "sets_hist": [s[0] for s in previous_sets],
                "sets": match.player1_sets(),
                "games": match.player1_current_games(),
                "points_str": match.player1_game_score(),
                "is_server": match.is_player1_serving(),
                "highlight": self._highlight(
                    match.has_player1_match_point(),
                    match.has_player1_set_point(),
                    match.has_player1_game_point(),
                ),
            },
            "pB": {
                "name": player_names["B"],
                "sets_hist": [s[1] for s in previous_sets],
                "sets": match.player2_sets(),
                "games": match.player2_current_games(),
                "points_str": match.player2_game_score(),
                "is_server": not match.is_player1_serving(),
                "highlight": self._highlight(
                    match.has_player2_match_point(),
                    match.has_player2_set_point(),
                    match.has_player2_game_point(),
                ),
            },
        }
        return data

    @staticmethod
    def _highlight(match_point, set_point, game_point):
        if match_point:
            return "MATCH POINT"
        if set_point:
            return "SET POINT"
        if game_point:
            return "GAME POINT"
        return ""

    def render_text(self, score_data: Dict) -> str:
        """Monta as linhas do placar para o terminal."""
        if score_data.get("match_over"):
            sets_a, sets_b = score_data["sets"]
            games = " ".join(f"[{a}-{b}]" for a, b in score_data["sets_hist"])
            return f"VENCEDOR: {score_data['winner']} ({sets_a}-{sets_b}) {games}"

        lines = []
        for key in ("pA", "pB"):
            player = score_data[key]
            server_mark = "*" if player["is_server"] else " "
            sets_hist = " ".join(str(g) for g in player["sets_hist"]) or "-"
            line = (f"{server_mark} {player['name']:<20} {sets_hist:<12} "
                    f"{player['sets']:>2} {player['games']:>3} {player['points_str']:>4}")
            if player["highlight"]:
                line += f"  <{player['highlight']}>"
            lines.append(line)
        if score_data["is_tiebreak"]:
            lines.append("  TIE-BREAK")
        return "\n".join(lines)
