"""In-memory store for active game sessions"""

import threading
from typing import Dict, List

from pb_challenge.config import settings
from pb_challenge.domain.exceptions import GameFlowError, GameNotFoundError
from pb_challenge.domain.game import GameState
from pb_challenge.domain.models import Character


class GameRepository:
    """Repository for game sessions, held only for the life of the process"""

    def __init__(self, max_games: int | None = None):
        self.max_games = settings.max_active_games if max_games is None else max_games
        self._games: Dict[str, GameState] = {}
        self._lock = threading.Lock()

    def create_game(self, character: Character, initial_assets: int) -> GameState:
        """Create a game and move it past the intro"""
        game = GameState.new(character=character, initial_assets=initial_assets)
        game.start()
        with self._lock:
            if len(self._games) >= self.max_games:
                self._evict_finished()
            if len(self._games) >= self.max_games:
                raise GameFlowError(f"Too many active games (limit {self.max_games})")
            self._games[game.game_id] = game
        return game

    def get_game(self, game_id: str) -> GameState:
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(f"Game {game_id} not found")
        return game

    def list_games(self) -> List[GameState]:
        with self._lock:
            return list(self._games.values())

    def _evict_finished(self) -> None:
        # Caller holds the lock
        for game_id in [g.game_id for g in self._games.values() if g.is_over]:
            del self._games[game_id]


game_repository = GameRepository()
