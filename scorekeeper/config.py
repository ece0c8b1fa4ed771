CONFIG = {
    # --- JOGADORES ---
    "PLAYER_A_NAME": "JOGADOR A",
    "PLAYER_B_NAME": "JOGADOR B",
    "LOCATION": "Local desconhecido",

    # --- ARQUIVOS ---
    "HISTORY_CSV_PATH": "Analises/historico_partidas.csv",
    "POINTS_CSV_DIR": "Analises/temp",

    # --- TROCA DE BOLAS ---
    "NEW_BALLS_FIRST_AFTER": 7,  # Primeira troca após 7 games
    "NEW_BALLS_EVERY": 9,  # Depois a cada 9 games

    # --- CONTROLES ---
    "KEY_MAPPINGS": {
        "1": {"action": "ADD_POINT", "code": "A", "desc": "Ponto Jogador A"},
        "2": {"action": "ADD_POINT", "code": "B", "desc": "Ponto Jogador B"},
        "z": {"action": "UNDO", "desc": "Apagar último ponto"},
        "r": {"action": "RESET", "desc": "Reiniciar partida"},
        "h": {"action": "HISTORY", "desc": "Histórico de partidas"},
        "x": {"action": "EXIT", "desc": "Sair"},
    },
}
