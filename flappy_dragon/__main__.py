from flappy_dragon.config import GameConfig
from flappy_dragon.console import build_console, main_loop
from flappy_dragon.state import GameState


def main():
    config = GameConfig()
    console, screen = build_console(config)
    main_loop(console, GameState(config), screen, config.fps)


if __name__ == "__main__":
    main()
