import random

from flappy_dragon.config import NAVY, GameConfig
from flappy_dragon.obstacle import Obstacle
from flappy_dragon.player import Player


class GameMode:
    """The three mutually exclusive game modes."""

    MENU = 0
    PLAYING = 1
    END = 2


class GameState:
    """Owns the player, the current obstacle and the score; driven once per frame."""

    def __init__(self, config=None, rng=None):
        """Initialize the game in menu mode."""
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

        self.mode = GameMode.MENU
        self.frame_time = 0.0
        self.score = 0
        self.player = self.new_player()
        self.obstacle = Obstacle(self.config.screen_width, 0, self.config, self.rng)

    def new_player(self):
        """Create a player at the configured start position."""
        return Player(self.config.player_start_x, self.config.player_start_y, self.config)

    def tick(self, ctx):
        """Host callback: dispatch to the handler for the current mode."""
        if self.mode == GameMode.MENU:
            self.main_menu(ctx)
        elif self.mode == GameMode.PLAYING:
            self.play(ctx)
        elif self.mode == GameMode.END:
            self.dead(ctx)

    def restart(self):
        """Start a fresh run: new player, new obstacle, zero score."""
        self.player = self.new_player()
        self.frame_time = 0.0
        self.score = 0
        self.obstacle = Obstacle(self.config.screen_width, 0, self.config, self.rng)
        self.mode = GameMode.PLAYING

    def play(self, ctx):
        ctx.cls_bg(NAVY)

        # Physics runs at a fixed slow cadence, independent of the frame rate
        self.frame_time += ctx.frame_time_ms
        if self.frame_time > self.config.frame_duration:
            self.frame_time = 0.0
            self.player.advance()

        if ctx.key == self.config.flap_key:
            self.player.flap()

        self.player.draw(ctx)
        ctx.print(0, 0, "Press SPACE to flap.")
        ctx.print(0, 1, f"Score: {self.score}")
        self.obstacle.draw(ctx, self.player.x)

        # Player has passed the obstacle: score it and place the next one a screen ahead
        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = Obstacle(
                self.player.x + self.config.screen_width, self.score, self.config, self.rng
            )

        if self.player.y > self.config.screen_height or self.obstacle.collides(self.player):
            self.mode = GameMode.END

    def main_menu(self, ctx):
        ctx.cls()
        ctx.print_centered(self.config.headline_row, "Welcome to Flappy Dragon")
        ctx.print_centered(self.config.option_rows[0], "(P) Play Game")
        ctx.print_centered(self.config.option_rows[1], "(Q) Quit Game")
        self.handle_choice(ctx)

    def dead(self, ctx):
        ctx.cls()
        ctx.print_centered(self.config.headline_row, "You are dead!")
        ctx.print_centered(self.config.headline_row + 1, f"You earned {self.score} points")
        ctx.print_centered(self.config.option_rows[0], "(P) Play Again")
        ctx.print_centered(self.config.option_rows[1], "(Q) Quit Game")
        self.handle_choice(ctx)

    def handle_choice(self, ctx):
        """Handle the play/quit choice shared by the menu and death screens."""
        if ctx.key == self.config.play_key:
            self.restart()
        elif ctx.key == self.config.quit_key:
            ctx.quitting = True
