import logging
import sys

import easygui
import numpy as np
import pygame

from pathlib import Path
from typing import Optional

from chipvm.emulator import Emulator, SCREEN_HEIGHT, SCREEN_WIDTH
from chipvm.errors import Chip8Error

logger = logging.getLogger(__name__)

# Constants
SCALED_SCREEN_WIDTH = 800
SCALED_SCREEN_HEIGHT = 400
FRAME_RATE = 60
INSTRUCTIONS_PER_TIMER_TICK = 10
GAME_EXTENSIONS = (".ch8", ".chip8")
GAMES_PATH = str(Path.cwd().joinpath("games", "*.ch8"))
CAPTION = "ChipVM"

COLOUR_PALETTE = [(0, 0, 0), (0, 255, 0)]

KEY_LOOKUP = {
    pygame.K_1: 1,
    pygame.K_q: 4,
    pygame.K_a: 7,
    pygame.K_z: 10,
    pygame.K_2: 2,
    pygame.K_w: 5,
    pygame.K_s: 8,
    pygame.K_x: 0,
    pygame.K_3: 3,
    pygame.K_e: 6,
    pygame.K_d: 9,
    pygame.K_c: 11,
    pygame.K_4: 12,
    pygame.K_r: 13,
    pygame.K_f: 14,
    pygame.K_v: 15,
}


class Frontend:
    """
    A pygame window which hosts an emulator: loads games, forwards key presses, paces the emulator and draws its display.
    """
    def __init__(self, emulator: Optional[Emulator] = None):
        """
        Constructor.
        :param emulator: The emulator to host.  A new one is created if not provided.
        """
        self.emulator = emulator if emulator is not None else Emulator()
        self.game_loaded = False
        self.selecting_game = False
        self.running = False

        pygame.init()
        pygame.display.init()
        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()
        self.inter_screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), 0, 8)
        self.inter_screen.set_palette(COLOUR_PALETTE)
        self.screen = pygame.display.set_mode((SCALED_SCREEN_WIDTH, SCALED_SCREEN_HEIGHT))

    # region Games
    def pick_game(self) -> None:
        """
        Open the game picker and load the selected game.
        """
        self.selecting_game = True
        file_name = easygui.fileopenbox(title="Select a Game", default=GAMES_PATH, filetypes=[["*.ch8", "*.chip8", "CHIP-8"]])
        self.selecting_game = False

        if not file_name:
            easygui.msgbox("Pick a game to play!  Press the L key to re-open the game picker.", "No Game Selected")
            return

        self.load_game(Path(file_name))

    def load_game(self, path: Path) -> bool:
        """
        Stop any currently running game and load the game at the provided path into the emulator.
        :param path: The path of the game.
        :return: True if the game was loaded, False otherwise.
        """
        if not path.exists():
            easygui.msgbox(f"Game could not be loaded as the path does not exist!  Path: {path}.", "Game Not Found")
            return False

        if path.suffix.lower() not in GAME_EXTENSIONS:
            easygui.msgbox(f"Game does not appear to be a CHIP-8 game as neither the '.ch8' nor the '.chip8' file type was found in the file name.  Path: {path}.", "Wrong File Extension")
            return False

        self.emulator.reset()
        self.game_loaded = False

        logger.debug(f"Loading game at path {path}.")
        try:
            self.emulator.load_program(path.read_bytes())
        except Chip8Error as error:
            easygui.msgbox(f"Game could not be loaded!  {error}", "Game Not Loaded")
            return False

        pygame.display.set_caption(path.stem)
        self.game_loaded = True
        return True
    # endregion

    # region Display
    def draw_to_display(self) -> None:
        """
        Update the display from the emulator's frame buffer.
        """
        pixels = self.emulator.display_snapshot().T.astype(np.ubyte)
        pygame.surfarray.blit_array(self.inter_screen, pixels)
        self.screen.blit(pygame.transform.scale(self.inter_screen, self.screen.get_size()), (0, 0))
        pygame.display.flip()
    # endregion

    # region Loop
    def handle_event(self, event: pygame.event.Event) -> None:
        """
        React to a single pygame event.
        :param event: The event to handle.
        """
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN or event.type == pygame.KEYUP:
            pressed = event.type == pygame.KEYDOWN

            if pressed and event.key == pygame.K_l and not self.selecting_game:
                self.pick_game()
                return

            # CHIP-8 Controls
            key = KEY_LOOKUP.get(event.key, None)
            if key is not None:
                if pressed:
                    self.emulator.key_press(key)
                else:
                    self.emulator.key_release(key)

    def run_frame(self) -> None:
        """
        Run one frame's worth of instructions followed by a single timer tick.  A fatal emulator error stops the game.
        """
        if not self.game_loaded:
            return

        try:
            for _ in range(INSTRUCTIONS_PER_TIMER_TICK):
                self.emulator.tick()
        except Chip8Error as error:
            self.game_loaded = False
            easygui.msgbox(f"The game stopped because of an error!  {error}  Press the L key to load another game.", "Game Stopped")
            return

        self.emulator.tick_timers()

    def event_loop(self, path: Optional[Path] = None) -> None:
        """
        Loop which handles all events and paces the emulator, spawning the first game picker to get started if no game was provided.
        :param path: The path of a game to load immediately.
        """
        if path is None or not self.load_game(path):
            self.pick_game()

        self.running = True
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)

            self.run_frame()
            self.draw_to_display()
            self.clock.tick(FRAME_RATE)

        pygame.quit()
    # endregion


def main() -> None:
    # Set up the logging
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s]:  %(message)s", stream=sys.stdout)
    logging.getLogger("chipvm").setLevel(logging.DEBUG if "pydevd" in sys.modules else logging.WARNING)

    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    Frontend().event_loop(path)


if __name__ == "__main__":
    main()
