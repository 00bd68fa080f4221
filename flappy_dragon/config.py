import pygame

# Colours used by the game screens
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)


class GameConfig:
    """Holds all game constants shared by the player, obstacles and host."""

    def __init__(self, **overrides):
        """Initialize game configuration, applying any keyword overrides."""
        # Playing field, in console cells
        self.screen_width = 80
        self.screen_height = 50

        # Physics runs every frame_duration milliseconds, not every frame
        self.frame_duration = 75.0
        self.gravity = 0.2
        self.terminal_velocity = 2.0
        self.flap_velocity = -2.0

        # Player spawn point
        self.player_start_x = 5
        self.player_start_y = 25

        # Obstacle generation; the gap centre is drawn from [gap_min_y, gap_max_y)
        self.gap_min_y = 10
        self.gap_max_y = 40
        self.max_gap_size = 20
        self.min_gap_size = 2

        # Key bindings
        self.flap_key = pygame.K_SPACE
        self.play_key = pygame.K_p
        self.quit_key = pygame.K_q

        # Menu text rows
        self.headline_row = 5
        self.option_rows = (8, 9)

        # Window settings
        self.title = "Flappy Dragon"
        self.cell_size = 12
        self.fps = 60

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise TypeError(f"GameConfig got an unexpected setting '{name}'")
            setattr(self, name, value)

    def gap_size_for(self, score):
        """Return the obstacle gap size for the given score."""
        return max(self.min_gap_size, self.max_gap_size - score)
