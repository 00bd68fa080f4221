"""Flappy Dragon: a small Flappy Bird style arcade game on a pygame character console."""

from flappy_dragon.config import GameConfig
from flappy_dragon.obstacle import Obstacle
from flappy_dragon.player import Player
from flappy_dragon.state import GameMode, GameState

__all__ = ["GameConfig", "GameMode", "GameState", "Obstacle", "Player"]
