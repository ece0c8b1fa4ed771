from abc import ABC, abstractmethod


class Command(ABC):
    """Interface para os comandos executáveis."""
    def __init__(self, app_state):
        self.app_state = app_state

    @abstractmethod
    def execute(self):
        pass


class AddPointCommand(Command):
    def __init__(self, app_state, player_code):
        super().__init__(app_state)
        self.player_code = player_code

    def execute(self):
        state = self.app_state
        if state.match.complete():
            state.last_event_info = "ERRO: A partida já terminou! Pressione r para reiniciar."
            return

        state.record_point(self.player_code)
        name = state.player_names[self.player_code]
        state.last_event_info = f"Ponto {state.point_counter}: {name}"

        if state.match.complete():
            winner = state.player_names[state.match.winner()]
            state.last_event_info = f"Fim de partida! Vencedor: {winner}"
        elif state.new_balls_due:
            state.last_event_info += " - Bolas novas, por favor!"
        elif state.last_server_changed:
            state.last_event_info += f" - Troca de saque: {state.player_names[state.match.server()]}"


class DeleteLastPointCommand(Command):
    """
    Comando para apagar o último ponto registrado (destrutivo).
    Se a partida já estava salva no histórico, o registro também é apagado.
    """
    def __init__(self, app_state, history_store=None):
        super().__init__(app_state)
        self.history_store = history_store

    def execute(self):
        state = self.app_state
        if not state.all_points_data:
            state.last_event_info = "Nenhum ponto para apagar."
            print("--- Nenhum ponto concluído para apagar. ---")
            return

        remaining = state.all_points_data[:-1]
        deleted_point = state.all_points_data[-1]

        # Recalcula todo o estado do jogo do zero para garantir consistência
        state.rebuild_from_points(remaining)

        if state.saved_match_id is not None and not state.match.complete():
            if self.history_store is not None:
                self.history_store.delete_match(state.saved_match_id)
            state.saved_match_id = None

        state.last_event_info = f"Ponto {deleted_point['point_id']} foi APAGADO."
        print(f"--- Último ponto (Ponto {deleted_point['point_id']}) foi APAGADO. O placar foi recalculado. ---")


class ResetMatchCommand(Command):
    def execute(self):
        self.app_state.reset_match()
        self.app_state.last_event_info = "Nova partida iniciada."


class SaveMatchCommand(Command):
    """Salva a partida encerrada no histórico."""
    def __init__(self, app_state, history_store, location):
        super().__init__(app_state)
        self.history_store = history_store
        self.location = location

    def execute(self):
        state = self.app_state
        if not state.match.complete():
            state.last_event_info = "ERRO: Só é possível salvar partidas encerradas!"
            return None

        record = self.history_store.record_from_match(state.match, self.location)
        self.history_store.save_match(record)
        state.saved_match_id = record.id
        state.last_event_info = "Partida salva no histórico."
        return record
