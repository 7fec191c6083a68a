from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

if __package__ in (None, ""):
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from telegraph.codec import Direction, translate
from telegraph.config import AppConfig, ConfigError, load_config, save_config
from telegraph.sounder import MorseSounder, list_output_devices

BANNER = "TELEGRAM: Convert between text and Morse code."
MENU = "[1] to convert TO morse.\n[2] to convert FROM morse.\n[q] to quit program."
PROMPT = "Input: "
CLEAR_SCREEN = "\033[2J\033[H"

MENU_CHOICES = {
    "1": Direction.TO_MORSE,
    "2": Direction.FROM_MORSE,
}

InputFn = Callable[[str], str]


class TranslatorConsole:
    def __init__(self, cfg: AppConfig, input_fn: InputFn = input, sounder: Optional[MorseSounder] = None):
        self.cfg = cfg
        self.input_fn = input_fn
        self.sounder = sounder or MorseSounder(cfg.sounder)

    def run(self) -> int:
        while True:
            print(BANNER)
            print(MENU)
            choice = self._read("\n" + PROMPT)
            if choice is None or choice == "q":
                break
            direction = MENU_CHOICES.get(choice)
            if direction is None:
                continue

            self.clear()
            message = self._read(PROMPT)
            if message is None:
                break
            self.show(message, direction)
        return 0

    def show(self, message: str, direction: Direction) -> None:
        result = translate(message, direction)
        print(f"Output: {result.render()}\n")
        if result.valid and direction == Direction.TO_MORSE and self.cfg.console.play_output:
            self.play(result.text)

    def play(self, morse: str) -> None:
        try:
            self.sounder.play(morse, device=self.cfg.console.output_device)
        except RuntimeError as exc:
            print(f"ERR {exc}")

    def clear(self) -> None:
        if self.cfg.console.clear_screen:
            print(CLEAR_SCREEN, end="", flush=True)

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self.input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return None


def _print_devices_cli() -> int:
    print("Output devices:")
    for idx, name in list_output_devices():
        print(f"  [{idx}] {name}")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Convert between text and Morse code")
    p.add_argument("--config", default=None, help="YAML config path.")
    p.add_argument("--write-config", action="store_true", help="Save the effective config to --config and exit.")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--to-morse", metavar="TEXT", default=None, help="Translate TEXT to Morse and exit.")
    mode.add_argument("--from-morse", metavar="MORSE", default=None, help="Translate MORSE to text and exit.")
    p.add_argument("--play", action="store_true", help="Play Morse output as a tone.")
    p.add_argument("--no-clear", action="store_true", help="Do not clear the screen before reading a message.")
    p.add_argument("--output-device", type=int, default=None, help="Output device index.")
    p.add_argument("--wpm", type=float, default=None, help="Playback speed in words per minute.")
    p.add_argument("--tone-hz", type=float, default=None, help="Playback tone.")
    p.add_argument("--list-devices", action="store_true", help="List audio output devices and exit.")
    return p


def _apply_cli_overrides(cfg: AppConfig, args: argparse.Namespace) -> None:
    if args.play:
        cfg.console.play_output = True
    if args.no_clear:
        cfg.console.clear_screen = False
    if args.output_device is not None:
        cfg.console.output_device = args.output_device
    if args.wpm is not None:
        cfg.sounder.wpm = max(1.0, args.wpm)
    if args.tone_hz is not None:
        cfg.sounder.tone_hz = args.tone_hz


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.write_config and not args.config:
        parser.error("--write-config requires --config")

    try:
        cfg = load_config(args.config) if args.config else AppConfig()
    except ConfigError as exc:
        print(f"ERR {exc}")
        return 2
    _apply_cli_overrides(cfg, args)

    if args.write_config:
        save_config(args.config, cfg)
        print(f"Config written to {args.config}")
        return 0
    if args.list_devices:
        return _print_devices_cli()

    console = TranslatorConsole(cfg)
    if args.to_morse is not None:
        console.show(args.to_morse, Direction.TO_MORSE)
        return 0
    if args.from_morse is not None:
        console.show(args.from_morse, Direction.FROM_MORSE)
        return 0
    return console.run()


if __name__ == "__main__":
    raise SystemExit(main())
