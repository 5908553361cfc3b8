"""
game.py
-------
Game orchestrator: owns the canvas, the entity collection, the score and
the frame loop.

Frame loop
----------
run() requests a frame from the FrameScheduler. Each frame updates every
entity in collection order, then either draws the playfield and requests
the next frame, or (once a tomato has ended the run) draws the start screen
and stops requesting frames.
"""

import asyncio
import random

from cracker_chase.audio.sound_manager import SoundManager
from cracker_chase.core.debug.debug_logger import DebugLogger
from cracker_chase.core.runtime.frame_scheduler import FrameScheduler
from cracker_chase.core.runtime.game_settings import Assets, Colors, Fonts, Gameplay, Keys, default_settings
from cracker_chase.core.runtime.session_stats import SessionStats
from cracker_chase.core.services.asset_loader import AssetLoader, ResourceLoadError
from cracker_chase.core.services.input_manager import InputManager
from cracker_chase.entities import Background, Cheese, Cracker, Tomato
from cracker_chase.ui.text_renderer import TextRenderer


START_SCREEN_LINES = (
    ("Welcome to Cracker Chase", 240),
    ("Steer the cheese to capture the crackers", 280),
    ("BEWARE THE KILLER TOMATOES", 320),
    ("Arrow keys to move", 470),
    ("Press G to play", 520),
)

NON_NEGATIVE_SETTINGS = (
    "cracker_count", "cracker_reward", "tomato_count",
    "first_entry_delay", "entry_delay_step", "acceleration", "cheese_speed",
)


def validate_gameplay(gameplay):
    """
    Reject gameplay settings the game cannot run with.

    Raises:
        ValueError: naming the first offending key
    """
    for key in NON_NEGATIVE_SETTINGS:
        if gameplay[key] < 0:
            raise ValueError(f"gameplay.{key} must be >= 0, got {gameplay[key]}")
    friction = gameplay["friction"]
    if not 0 <= friction <= 1:
        raise ValueError(f"gameplay.friction must be within [0, 1], got {friction}")


class Game:
    """Cracker Chase orchestrator."""

    def __init__(self, surface, settings=None, input_manager=None, scheduler=None,
                 loader=None, sounds=None, text=None, rng=None):
        """
        Args:
            surface: Target pygame.Surface; its size is the canvas size
            settings: Settings tree (see default_settings())
            input_manager: InputManager feeding frame snapshots
            scheduler: FrameScheduler driving the frame loop
            loader: AssetLoader for images and sounds
            sounds: SoundManager for cues
            text: TextRenderer for the start screen and score overlay
            rng: random.Random used for cracker placement
        """
        settings = settings or default_settings()
        gameplay = {**Gameplay.as_dict(), **settings.get("gameplay", {})}
        validate_gameplay(gameplay)
        assets_root = settings.get("assets", {}).get("root", Assets.ROOT)
        audio_enabled = settings.get("audio", {}).get("enabled", True)

        self.surface = surface
        self.canvas_width, self.canvas_height = surface.get_size()

        self.input = input_manager or InputManager()
        self.scheduler = scheduler or FrameScheduler()
        self.loader = loader or AssetLoader(assets_root)
        self.sounds = sounds or SoundManager(enabled=audio_enabled)
        self.text = text or TextRenderer()
        self.rng = rng or random.Random(gameplay["seed"])

        self.stats = SessionStats()
        self.running = False
        self._start_bound = False
        self.input.set_capturing(False)

        # Defaults inherited by new tomatoes
        self.acceleration = gameplay["acceleration"]
        self.friction = gameplay["friction"]

        self.entities = []
        self._build_entities(gameplay)

        DebugLogger.init(
            f"Game {self.canvas_width}x{self.canvas_height} | "
            f"{len(self.crackers)} crackers | {len(self.tomatoes)} tomatoes"
        )

    def _build_entities(self, gameplay):
        self.background = Background(self, Assets.BACKGROUND)
        self.entities.append(self.background)

        self.crackers = [
            Cracker(self, Assets.CRACKER, Assets.BURP_CUE, Assets.BURP_SOUND,
                    reward=gameplay["cracker_reward"])
            for _ in range(gameplay["cracker_count"])
        ]
        self.entities.extend(self.crackers)

        self.cheese = Cheese(self, Assets.CHEESE, speed=gameplay["cheese_speed"])
        self.entities.append(self.cheese)

        self.tomatoes = [
            Tomato(
                self, Assets.TOMATO,
                entry_delay=gameplay["first_entry_delay"] + i * gameplay["entry_delay_step"],
                base_acceleration=self.acceleration,
                friction=self.friction,
            )
            for i in range(gameplay["tomato_count"])
        ]
        self.entities.extend(self.tomatoes)

    # ===========================================================
    # Score
    # ===========================================================

    @property
    def score(self) -> int:
        return self.stats.score

    @property
    def high_score(self):
        return self.stats.high_score

    def add_score(self, amount: int):
        self.stats.add_score(amount)
        self.stats.add_cracker()

    # ===========================================================
    # Lifecycle
    # ===========================================================

    async def initialize(self):
        """
        Load every entity's resources concurrently.

        Raises:
            ResourceLoadError: the first resource that failed to load
        """
        DebugLogger.section("Loading Assets")
        try:
            await asyncio.gather(*(entity.load_assets(self.loader) for entity in self.entities))
        except ResourceLoadError as e:
            DebugLogger.fail(str(e), category="loading")
            raise
        DebugLogger.init_entry("Assets")
        DebugLogger.init_sub(f"{len(self.entities)} entities ready")

    def start(self):
        """Show the start screen and listen for the start key."""
        self.draw_start_screen()
        if not self._start_bound:
            self.input.bind_keydown(Keys.START, self._on_start_key)
            self._start_bound = True

    def _on_start_key(self):
        if not self.running:
            self.run()

    def reset(self):
        for entity in self.entities:
            entity.reset()
        self.stats.reset()

    def run(self):
        """Begin a new run from a clean state."""
        self.reset()
        self.input.clear_transitions()
        self.input.set_capturing(True)
        self.running = True
        DebugLogger.state("Run started")
        self.scheduler.request_frame(self._frame)

    def end(self):
        """Stop the current run and record the high score. Later calls in the same run are ignored."""
        if not self.running:
            return
        self.running = False
        self.input.set_capturing(False)
        if self.stats.finish_run():
            DebugLogger.state(f"Game over | score {self.score} | new high score")
        else:
            DebugLogger.state(f"Game over | score {self.score} | high score {self.high_score}")

    # ===========================================================
    # Frame Loop
    # ===========================================================

    def update(self, frame_input):
        for entity in self.entities:
            entity.update(frame_input)
        self.stats.add_frame()

    def _frame(self, timestamp=None):
        self.update(self.input.consume())

        if not self.running:
            self.draw_start_screen()
            self.text.display_message(self.surface, f"Your score: {self.score}", 150)
            return

        self.draw()
        self.scheduler.request_frame(self._frame)

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self):
        for entity in self.entities:
            entity.draw(self.surface)
        self.text.draw_text(self.surface, f"Score: {self.score}", 10, 40, Fonts.BODY_SIZE, Colors.TEXT)

    def draw_start_screen(self):
        self.background.draw(self.surface)
        self.text.display_message(self.surface, "Cracker Chase", 70, Fonts.TITLE_SIZE)

        if self.high_score is not None:
            self.text.display_message(self.surface, f"High score: {self.high_score}", 110)

        for line, y in START_SCREEN_LINES:
            self.text.display_message(self.surface, line, y)
