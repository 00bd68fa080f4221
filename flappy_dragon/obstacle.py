import random

from flappy_dragon.config import BLACK, RED, GameConfig


class Obstacle:
    """A wall with a single gap, standing at a fixed world x position."""

    def __init__(self, x, score, config=None, rng=None):
        """Create an obstacle at x whose gap narrows as the score rises.

        ``rng`` only needs a ``randrange(start, stop)`` method; tests pass a
        seeded or stubbed source to pin the gap centre.
        """
        self.config = config or GameConfig()
        rng = rng or random.Random()

        self.x = x
        self.gap_y = rng.randrange(self.config.gap_min_y, self.config.gap_max_y)
        self.size = self.config.gap_size_for(score)

    @property
    def gap_top(self):
        """First row of the gap; rows above it are wall."""
        return self.gap_y - self.size // 2

    @property
    def gap_bottom(self):
        """First row of the bottom wall."""
        return self.gap_y + self.size // 2

    def draw(self, ctx, player_x):
        """Draw both wall segments relative to the player's world x."""
        screen_x = self.x - player_x

        # Top wall
        for y in range(0, self.gap_top):
            ctx.set(screen_x, y, RED, BLACK, '|')

        # Bottom wall
        for y in range(self.gap_bottom, self.config.screen_height):
            ctx.set(screen_x, y, RED, BLACK, '|')

    def collides(self, player):
        """Check whether the player is inside the wall column but outside the gap.

        Only the exact column is tested. This is sufficient while the player
        moves one cell per tick; a larger step would need an interval check.
        """
        if player.x != self.x:
            return False

        above_gap = player.y < self.gap_top
        below_gap = player.y > self.gap_bottom
        return above_gap or below_gap
