import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import os
import argparse

from tennis_match import TennisMatch


class StatisticsGenerator:
    """
    Generates a statistical report from a recorded points CSV file.
    Game-level numbers come from replaying the points through TennisMatch.
    """
    def __init__(self, csv_path: str, player_a: str, player_b: str):
        if not os.path.exists(csv_path):
            raise FileNotFoundError(f"Analysis file not found: {csv_path}")

        self.df = pd.read_csv(csv_path, sep=";", dtype={"winner": str})
        self.df['point_id'] = pd.to_numeric(self.df['point_id'], errors='coerce')
        self.df.dropna(subset=['point_id', 'winner'], inplace=True)
        self.df.sort_values('point_id', inplace=True)
        self.df.reset_index(drop=True, inplace=True)

        self.csv_path = csv_path
        self.match = TennisMatch()

        self.stats = {}
        for player_code, player_name in [('A', player_a), ('B', player_b)]:
            self.stats[player_code] = {
                'name': player_name,
                'total_points_played': 0,
                'points_won': 0,
                'points_won_serving': 0,
                'points_won_receiving': 0,
                'service_games': 0,
                'service_games_held': 0,
                'breaks': 0,
                'tiebreaks_won': 0,
                'sets_won': 0,
            }

    def _replay(self):
        """Replays every point, tagging each one with the server and the game it closed."""
        self.match.reset()
        servers, closed_game, tiebreak_points = [], [], []

        for winner in self.df['winner']:
            if self.match.complete():
                servers.append(None)
                closed_game.append(False)
                tiebreak_points.append(False)
                continue

            servers.append(self.match.server())
            tiebreak_points.append(self.match.is_current_game_tiebreak())
            games_before = self.match.total_games_played()
            self.match.point_won_by(winner)
            closed_game.append(self.match.total_games_played() > games_before)

        self.df['server'] = servers
        self.df['closed_game'] = closed_game
        self.df['tiebreak'] = tiebreak_points
        # Points recorded after the end of the match are ignored
        self.df.dropna(subset=['server'], inplace=True)

    def _calculate_stats(self):
        """Processes every point to calculate the full set of statistics."""
        self._replay()
        total = len(self.df)

        for code in ('A', 'B'):
            p_stats = self.stats[code]
            won = self.df[self.df['winner'] == code]

            p_stats['total_points_played'] = total
            p_stats['points_won'] = len(won)
            p_stats['points_won_serving'] = int((won['server'] == code).sum())
            p_stats['points_won_receiving'] = int((won['server'] != code).sum())

            games = self.df[self.df['closed_game'] & ~self.df['tiebreak']]
            served = games[games['server'] == code]
            p_stats['service_games'] = len(served)
            p_stats['service_games_held'] = int((served['winner'] == code).sum())
            p_stats['breaks'] = int(((games['server'] != code) & (games['winner'] == code)).sum())

            tiebreaks = self.df[self.df['closed_game'] & self.df['tiebreak']]
            p_stats['tiebreaks_won'] = int((tiebreaks['winner'] == code).sum())

        self.stats['A']['sets_won'] = self.match.player1_sets()
        self.stats['B']['sets_won'] = self.match.player2_sets()

    def generate_report(self):
        """Generates and prints the complete, formatted report."""
        self._calculate_stats()

        report = f"\n--- Relatório Estatístico da Partida ---\n"
        report += f"{self.stats['A']['name']} vs. {self.stats['B']['name']}\n"

        sets_hist = self.match.previous_sets_scores()
        if self.match.complete():
            sets_hist.append((self.match.player1_current_games(), self.match.player2_current_games()))
        report += "Sets: " + " ".join(f"[{a}-{b}]" for a, b in sets_hist) + "\n"

        for code in ['A', 'B']:
            p_stats = self.stats[code]

            report += "\n" + "="*50 + "\n"
            report += f" JOGADOR: {p_stats['name']}\n"
            report += "="*50 + "\n"

            report += "\n-- PONTOS --\n"
            total_played = p_stats['total_points_played']
            win_perc = (p_stats['points_won'] / total_played * 100) if total_played > 0 else 0
            report += f"- Pontos Ganhos: {p_stats['points_won']} de {total_played} ({win_perc:.1f}%)\n"
            report += f"- Pontos sacando: {p_stats['points_won_serving']}\n"
            report += f"- Pontos recebendo: {p_stats['points_won_receiving']}\n"

            report += "\n-- GAMES --\n"
            if p_stats['service_games'] > 0:
                perc = p_stats['service_games_held'] / p_stats['service_games'] * 100
                report += f"- Games de saque confirmados: {p_stats['service_games_held']}/{p_stats['service_games']} ({perc:.1f}%)\n"
            report += f"- Quebras de saque: {p_stats['breaks']}\n"
            report += f"- Tie-breaks vencidos: {p_stats['tiebreaks_won']}\n"
            report += f"- Sets vencidos: {p_stats['sets_won']}\n"

        print(report)
        return report

    def plot_summary_chart(self, output_path: str):
        """Saves a bar chart comparing both players."""
        if not self.stats['A']['total_points_played']:
            self._calculate_stats()

        labels = ['points_won', 'points_won_serving', 'points_won_receiving', 'service_games_held', 'breaks']
        values_a = [self.stats['A'][k] for k in labels]
        values_b = [self.stats['B'][k] for k in labels]
        positions = range(len(labels))
        width = 0.4

        fig, ax = plt.subplots(figsize=(10, 5))
        ax.bar([p - width / 2 for p in positions], values_a, width, label=self.stats['A']['name'])
        ax.bar([p + width / 2 for p in positions], values_b, width, label=self.stats['B']['name'])
        ax.set_xticks(list(positions))
        ax.set_xticklabels(["Pontos", "Sacando", "Recebendo", "Saques confirmados", "Quebras"])
        ax.set_title("Resumo da Partida")
        ax.legend()

        output_dir = os.path.dirname(output_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir)
        fig.savefig(output_path)
        plt.close(fig)
        print(f"Gráfico salvo em: {output_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Gerador de Estatísticas de Partida de Tênis.")
    parser.add_argument("csv_path", help="Caminho para o arquivo CSV de pontos da partida.")
    parser.add_argument("--player_a", default="JOGADOR A", help="Nome do Jogador A.")
    parser.add_argument("--player_b", default="JOGADOR B", help="Nome do Jogador B.")
    parser.add_argument("--chart", help="Caminho para salvar o gráfico de resumo (PNG).")
    args = parser.parse_args()
    try:
        stats_generator = StatisticsGenerator(
            csv_path=args.csv_path,
            player_a=args.player_a,
            player_b=args.player_b
        )
        stats_generator.generate_report()
        if args.chart:
            stats_generator.plot_summary_chart(args.chart)
    except FileNotFoundError as e:
        print(f"ERRO: {e}")
