import pygame

from flappy_dragon.config import BLACK, WHITE

BLANK = ' '


class PygameConsole:
    """A grid of character cells drawn with pygame; the game's only view of the host."""

    def __init__(self, width, height, cell_size=12, title="Flappy Dragon"):
        """Initialize an empty cell buffer and the glyph font."""
        pygame.font.init()

        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.title = title

        # Per-frame input and timing, filled in by the main loop
        self.key = None
        self.frame_time_ms = 0.0
        self.quitting = False

        self.cells = [[(BLANK, WHITE, BLACK)] * width for _ in range(height)]
        self.font = self.load_font()
        self.glyph_cache = {}

    def load_font(self):
        """Load a monospace font for the glyphs, falling back to pygame's default."""
        try:
            return pygame.font.SysFont("monospace", self.cell_size, bold=True)
        except (pygame.error, FileNotFoundError, OSError):
            print("Warning: Could not load monospace font, using default")
            return pygame.font.Font(None, self.cell_size + 4)

    @property
    def pixel_size(self):
        return self.width * self.cell_size, self.height * self.cell_size

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x, y, fg, bg, glyph):
        """Set one cell; positions outside the console are ignored."""
        if self.in_bounds(x, y):
            self.cells[y][x] = (glyph, fg, bg)

    def print(self, x, y, text):
        """Write text left to right starting at (x, y), white on black."""
        for offset, char in enumerate(text):
            self.set(x + offset, y, WHITE, BLACK, char)

    def print_centered(self, y, text):
        self.print((self.width - len(text)) // 2, y, text)

    def cls(self):
        self.cls_bg(BLACK)

    def cls_bg(self, color):
        """Blank every cell to the given background colour."""
        for row in self.cells:
            for x in range(self.width):
                row[x] = (BLANK, WHITE, color)

    def glyph(self, char, fg):
        """Return the rendered surface for a glyph, caching by glyph and colour."""
        cache_key = (char, fg)
        if cache_key not in self.glyph_cache:
            self.glyph_cache[cache_key] = self.font.render(char, True, fg)
        return self.glyph_cache[cache_key]

    def render(self, surface):
        """Draw every cell onto the surface."""
        size = self.cell_size
        for y, row in enumerate(self.cells):
            for x, (char, fg, bg) in enumerate(row):
                rect = pygame.Rect(x * size, y * size, size, size)
                surface.fill(bg, rect)
                if char != BLANK:
                    glyph = self.glyph(char, fg)
                    surface.blit(glyph, glyph.get_rect(center=rect.center))

    def poll_events(self):
        """Drain pending events; keep at most one key press for this frame."""
        self.key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quitting = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.quitting = True
                else:
                    self.key = event.key


def build_console(config):
    """Initialize pygame and open the game window.

    Errors from window creation are not handled here; the game cannot run
    without a window.
    """
    pygame.init()
    console = PygameConsole(config.screen_width, config.screen_height,
                            config.cell_size, config.title)

    screen = pygame.display.set_mode(console.pixel_size)
    pygame.display.set_caption(config.title)
    pygame.key.set_repeat(0)  # Disable key repeat

    return console, screen


def main_loop(console, state, screen, fps=60):
    """Run the game until the state asks to quit or the window is closed."""
    clock = pygame.time.Clock()
    console.frame_time_ms = 0.0

    while not console.quitting:
        console.poll_events()
        if console.quitting:
            break

        state.tick(console)

        console.render(screen)
        pygame.display.flip()

        # Time spent on this frame feeds the next tick
        console.frame_time_ms = float(clock.tick(fps))

    pygame.quit()
