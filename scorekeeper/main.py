import argparse
import os
from datetime import datetime

from tqdm import tqdm

# Importações dos módulos do projeto
from config import CONFIG
from app_state import AppState
from scoreboard import Scoreboard
from csv_handler import CSVHandler
from history_store import MatchHistoryStore
from commands import AddPointCommand, DeleteLastPointCommand, ResetMatchCommand, SaveMatchCommand


class TennisScorekeeper:
    def __init__(self, config, args):
        self.config = config
        self.args = args

        self.state = AppState(player_a_name=args.player_a, player_b_name=args.player_b, config=config)
        self.scoreboard_presenter = Scoreboard()
        self.history_store = MatchHistoryStore(args.history_csv)
        self.csv_handler = CSVHandler(args.points_csv)

    def _get_command(self, key):
        if key in self.config["KEY_MAPPINGS"]:
            event_info = self.config["KEY_MAPPINGS"][key]
            action = event_info["action"]
            if action == "ADD_POINT": return AddPointCommand(self.state, event_info["code"])
            if action == "UNDO": return DeleteLastPointCommand(self.state, self.history_store)
            if action == "RESET": return ResetMatchCommand(self.state)
        return None

    def show_scoreboard(self):
        score_data = self.scoreboard_presenter.get_score_data(self.state.match, self.state.player_names)
        print(self.scoreboard_presenter.render_text(score_data))
        print(f"Último: {self.state.last_event_info}")

    def show_history(self):
        matches = self.history_store.get_all_matches()
        if not matches:
            print("Nenhuma partida no histórico.")
            return
        for record in matches:
            print(self.history_store.format_match_for_display(record))
            print("-" * 40)

    def load_from_csv(self):
        loaded_points = self.csv_handler.load_csv()
        if not loaded_points:
            return
        self.state.rebuild_from_points(loaded_points)
        self.state.last_event_info = f"Carregado do CSV. {len(self.state.all_points_data)} pontos."

    def replay(self, csv_path):
        """Reprocessa um arquivo de pontos inteiro e mostra o placar final."""
        points = CSVHandler(csv_path).load_csv()
        if not points:
            print("Nenhum ponto encontrado no arquivo. Saindo.")
            return

        self.state.reset_match()
        for point_data in tqdm(points, desc="Reprocessando pontos"):
            if self.state.match.complete():
                print(f"Aviso: ponto {point_data['point_id']} registrado após o fim da partida foi ignorado.")
                continue
            self.state.record_point(point_data["winner"])
        self.show_scoreboard()

    def run(self):
        self.load_from_csv()
        self.show_scoreboard()

        while True:
            try:
                key = input("> ").strip()
            except EOFError:
                break

            if key == "x":
                break
            if key == "h":
                self.show_history()
                continue

            command = self._get_command(key)
            if command is None:
                print("Comando inválido. Use: " + ", ".join(
                    f"{k} ({v['desc']})" for k, v in self.config["KEY_MAPPINGS"].items()))
                continue

            was_complete = self.state.match.complete()
            command.execute()
            if self.state.match.complete() and not was_complete:
                SaveMatchCommand(self.state, self.history_store, self.args.location).execute()
            self.show_scoreboard()

        self.stop()

    def stop(self):
        self.csv_handler.save_csv(self.state.all_points_data)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Marcador de Partidas de Tênis.", formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("--player_a", default=CONFIG["PLAYER_A_NAME"], help="Nome do Jogador A. Padrão: 'JOGADOR A'")
    parser.add_argument("--player_b", default=CONFIG["PLAYER_B_NAME"], help="Nome do Jogador B. Padrão: 'JOGADOR B'")
    parser.add_argument("--location", default=CONFIG["LOCATION"], help="Local da partida, guardado no histórico.")
    parser.add_argument("--history_csv", default=CONFIG["HISTORY_CSV_PATH"], help="Arquivo CSV do histórico de partidas.")
    parser.add_argument("--points_csv", default=None, help="Arquivo CSV onde os pontos da sessão são gravados.")
    parser.add_argument("--replay", default=None, help="Reprocessa um CSV de pontos e mostra o placar final.")
    parser.add_argument("--history", action="store_true", help="Lista as partidas salvas e sai.")

    args = parser.parse_args(argv)

    # Gera o caminho de saída do CSV de pontos dinamicamente
    if args.points_csv is None:
        session_name = datetime.now().strftime("%Y%m%d_%H%M%S")
        args.points_csv = os.path.join(CONFIG["POINTS_CSV_DIR"], f"partida_{session_name}.csv")

    scorekeeper = TennisScorekeeper(config=CONFIG, args=args)
    try:
        if args.history:
            scorekeeper.show_history()
        elif args.replay:
            scorekeeper.replay(args.replay)
        else:
            print("""
    ==================================================================
    Marcador de Tênis - Comandos
    ==================================================================
    1 / 2 : ponto para o Jogador A / B
    z     : apagar último ponto      r : reiniciar partida
    h     : histórico de partidas    x : sair
    ==================================================================
    """)
            scorekeeper.run()
    except (FileNotFoundError, ValueError) as e:
        print(f"ERRO: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
