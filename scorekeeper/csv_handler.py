import pandas as pd
from typing import List, Dict
import os

COLUMNS = ["point_id", "winner", "server", "timestamp_sec"]


class CSVHandler:
    """Gerencia a leitura e escrita do registro de pontos de uma partida em CSV."""

    def __init__(self, csv_path: str):
        self.csv_path = csv_path

    def load_csv(self) -> List[Dict]:
        """
        Carrega os pontos de um arquivo CSV, se existir, em ordem de point_id.
        Retorna uma lista de dicionários, um por ponto.
        """
        try:
            df = pd.read_csv(self.csv_path, sep=";", decimal=",",
                             dtype={"winner": str, "server": str})
        except FileNotFoundError:
            print("Nenhum arquivo CSV encontrado. Iniciando uma nova partida.")
            return []
        except pd.errors.EmptyDataError:
            return []

        if df.empty:
            return []

        df = df.dropna(subset=["point_id", "winner"]).sort_values("point_id")
        points = []
        for row in df.to_dict("records"):
            timestamp = row.get("timestamp_sec")
            points.append({
                "point_id": int(row["point_id"]),
                "winner": row["winner"],
                "server": row.get("server"),
                # Célula vazia vira NaN no pandas
                "timestamp_sec": 0.0 if pd.isna(timestamp) else float(timestamp),
            })
        print(f"Pontos carregados com sucesso de: {self.csv_path}")
        return points

    def save_csv(self, all_points_data: List[Dict]):
        """
        Salva todos os pontos da sessão atual em um arquivo CSV,
        sobrescrevendo qualquer arquivo existente.
        """
        if not all_points_data:
            print("Nenhum ponto foi gravado. Nenhum arquivo CSV será gerado.")
            return

        output_dir = os.path.dirname(self.csv_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir)

        df = pd.DataFrame(all_points_data)
        try:
            df.to_csv(self.csv_path, index=False, sep=";", decimal=",", columns=COLUMNS)
            print(f"Pontos salvos com sucesso em: {self.csv_path}")
        except OSError as e:
            print(f"Erro ao salvar o arquivo CSV: {e}")
