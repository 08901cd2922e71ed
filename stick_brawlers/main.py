#!/usr/bin/env python3
"""
STICK BRAWLERS - Local Versus Fighting Game
===========================================
Entry point for the game.

Run: python -m stick_brawlers.main  (or the `stick-brawlers` script)
"""

import sys
import logging

from stick_brawlers.config import GAME_TITLE

logger = logging.getLogger(__name__)

CONTROLS_HELP = """\
Controls:
  Player 1    W/A/S/D move, F attack
  Player 2    O/K/L/; move, J attack
  R / Enter   Restart after a knockout
  Escape      Quit"""


def main(argv=None):
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv
    if '--help' in argv or '-h' in argv:
        print(f"{GAME_TITLE}\n")
        print("Usage: stick-brawlers [--debug]\n")
        print(CONTROLS_HELP)
        return 0

    logging.basicConfig(
        level=logging.DEBUG if '--debug' in argv else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print(f"\n{'='*60}")
    print(f"  {GAME_TITLE}")
    print(f"{'='*60}\n")
    print(CONTROLS_HELP + "\n")

    # Imported here so --help works without opening a window
    from stick_brawlers.core.game import Game
    from stick_brawlers.graphics.renderer import Renderer
    from stick_brawlers.ui.manager import UIManager
    from stick_brawlers.audio.sound_manager import SoundManager

    game = Game()

    sound_manager = None
    if game.audio_available:
        sound_manager = SoundManager()

    game.initialize_systems(
        renderer=Renderer(),
        ui_manager=UIManager(),
        sound_manager=sound_manager
    )
    game.new_match()

    try:
        game.run()
    except KeyboardInterrupt:
        print("\nGame stopped by user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
