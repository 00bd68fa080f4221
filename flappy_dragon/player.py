from flappy_dragon.config import BLACK, YELLOW, GameConfig


class Player:
    """The dragon: falls under gravity, flaps upward, drifts right one cell per tick."""

    def __init__(self, x, y, config=None):
        """Initialize the player at the given world position, at rest."""
        self.config = config or GameConfig()
        self.x = x
        self.y = y
        self.velocity = 0.0

    def advance(self):
        """Apply one physics tick of gravity and movement."""
        # Positive velocity moves down the screen, row 0 is the top
        if self.velocity < self.config.terminal_velocity:
            self.velocity = min(self.velocity + self.config.gravity,
                                self.config.terminal_velocity)

        self.y += int(self.velocity)
        self.x += 1

        if self.y < 0:
            self.y = 0

    def flap(self):
        """Reset velocity to the flap impulse (not additive)."""
        self.velocity = self.config.flap_velocity

    def draw(self, ctx):
        """Draw the player; it always sits in column 0 while the world scrolls."""
        ctx.set(0, self.y, YELLOW, BLACK, '@')
