import logging
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from pathlib import Path
from unittest import mock

from chipvm.emulator import Emulator, GAME_START_ADDRESS
from chipvm.frontend import Frontend, INSTRUCTIONS_PER_TIMER_TICK, KEY_LOOKUP


class TestKeyLookup:
    def test_every_key_mapped_once(self):
        assert sorted(KEY_LOOKUP.values()) == list(range(16)), "Keypad is not fully mapped."


@mock.patch("chipvm.frontend.easygui")
class TestFrontend:
    def setup_method(self):
        self.frontend = Frontend(Emulator())

    def teardown_method(self):
        pygame.quit()

    def write_game(self, tmp_path: Path, program: bytes, name: str = "game.ch8") -> Path:
        path = tmp_path / name
        path.write_bytes(program)
        return path

    def test_load_game(self, easygui, tmp_path):
        path = self.write_game(tmp_path, bytes.fromhex("6133"))
        assert self.frontend.load_game(path)
        assert self.frontend.game_loaded
        assert self.frontend.emulator.ram[GAME_START_ADDRESS:GAME_START_ADDRESS + 2] == bytes.fromhex("6133")
        easygui.msgbox.assert_not_called()

    def test_load_game_missing(self, easygui, tmp_path):
        assert not self.frontend.load_game(tmp_path / "missing.ch8")
        assert not self.frontend.game_loaded
        easygui.msgbox.assert_called_once()

    def test_load_game_wrong_extension(self, easygui, tmp_path):
        path = self.write_game(tmp_path, bytes.fromhex("6133"), "game.txt")
        assert not self.frontend.load_game(path)
        easygui.msgbox.assert_called_once()

    def test_load_game_too_large(self, easygui, tmp_path):
        path = self.write_game(tmp_path, bytes(4096))
        assert not self.frontend.load_game(path)
        assert not self.frontend.game_loaded
        easygui.msgbox.assert_called_once()

    def test_load_game_resets(self, easygui, tmp_path):
        self.frontend.emulator.registers[3] = 8
        self.frontend.emulator.program_counter = 900
        self.frontend.load_game(self.write_game(tmp_path, bytes.fromhex("6133")))
        assert self.frontend.emulator.registers[3] == 0
        assert self.frontend.emulator.program_counter == GAME_START_ADDRESS

    def test_pick_game_cancelled(self, easygui):
        easygui.fileopenbox.return_value = None
        self.frontend.pick_game()
        assert not self.frontend.game_loaded
        assert not self.frontend.selecting_game
        easygui.msgbox.assert_called_once()

    def test_pick_game(self, easygui, tmp_path):
        easygui.fileopenbox.return_value = str(self.write_game(tmp_path, bytes.fromhex("6133")))
        self.frontend.pick_game()
        assert self.frontend.game_loaded

    def test_handle_key_events(self, easygui):
        self.frontend.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_v))
        assert self.frontend.emulator.keys[15]
        self.frontend.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_v))
        assert not self.frontend.emulator.keys[15]

        self.frontend.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p))
        assert not any(self.frontend.emulator.keys), "Unmapped key changed the keypad."

    def test_handle_load_key(self, easygui):
        easygui.fileopenbox.return_value = None
        self.frontend.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_l))
        easygui.fileopenbox.assert_called_once()

    def test_handle_quit(self, easygui):
        self.frontend.running = True
        self.frontend.handle_event(pygame.event.Event(pygame.QUIT))
        assert not self.frontend.running

    def test_run_frame(self, easygui, tmp_path):
        # Loop forever adding 1 to register 0.
        self.frontend.load_game(self.write_game(tmp_path, bytes.fromhex("7001" "1200")))
        self.frontend.emulator.delay = 5
        self.frontend.run_frame()
        assert self.frontend.emulator.registers[0] == INSTRUCTIONS_PER_TIMER_TICK // 2
        assert self.frontend.emulator.delay == 4, "Timers were not ticked once per frame."

    def test_run_frame_without_game(self, easygui):
        self.frontend.emulator.delay = 5
        self.frontend.run_frame()
        assert self.frontend.emulator.delay == 5

    def test_run_frame_error_stops_game(self, easygui, tmp_path):
        self.frontend.load_game(self.write_game(tmp_path, bytes.fromhex("00ee")))
        self.frontend.run_frame()
        assert not self.frontend.game_loaded, "Game kept running after a fatal error."
        easygui.msgbox.assert_called_once()

    def test_draw_to_display(self, easygui):
        self.frontend.emulator.pixels[2, 5] = True
        self.frontend.draw_to_display()
        assert self.frontend.inter_screen.get_at_mapped((5, 2)) == 1, "Lit pixel not drawn at (x, y)."
        assert self.frontend.inter_screen.get_at_mapped((2, 5)) == 0

    def test_draw_to_display_scales_to_window(self, easygui):
        self.frontend.emulator.pixels[2, 5] = True
        self.frontend.draw_to_display()
        assert self.frontend.screen.get_size() == (800, 400), "Window is not the scaled size."
        assert tuple(self.frontend.screen.get_at((5 * 12 + 6, 2 * 12 + 6)))[:3] == (0, 255, 0), "Lit pixel not scaled onto the window."
        assert tuple(self.frontend.screen.get_at((2 * 12 + 6, 5 * 12 + 6)))[:3] == (0, 0, 0)

    def test_run_frame_error_logged_once(self, easygui, tmp_path, caplog):
        self.frontend.load_game(self.write_game(tmp_path, bytes.fromhex("00ee")))
        with caplog.at_level(logging.ERROR, logger="chipvm"):
            self.frontend.run_frame()
        errors = [record for record in caplog.records if record.levelno == logging.ERROR]
        assert len(errors) == 1, "A fatal error was logged more than once."
