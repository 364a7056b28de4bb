#!/usr/bin/env python3
"""
Main script to launch Arena Pong with PyGame graphical interface
"""

import importlib.util
import logging
import sys

try:
    from arena_pong.gui.game_app import main
    from arena_pong.utils.config import load_display_config

except ImportError as e:
    print(f"Import error: {e}")
    print()
    print("Checking dependencies:")
    for module in ("pygame", "numpy", "pydantic"):
        if importlib.util.find_spec(module) is not None:
            print(f"✓ {module} is installed")
        else:
            print(f"✗ {module} is not installed - pip install {module}")
    sys.exit(1)

if __name__ == "__main__":
    print("=== ARENA PONG ===")
    print()

    logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s: %(message)s")

    if load_display_config():
        print("Loaded display settings from arena_pong_display.json")

    print("CONTROLS:")
    print("  Left player: W/S (QWERTY), Z/S (AZERTY)")
    print("  Right player: Up/Down arrows")
    print("  P or SPACE: Pause")
    print("  R: Restart")
    print("  F2: Show FPS")
    print("  ESC: Quit")
    print()

    try:
        main()
    except Exception:
        import traceback

        traceback.print_exc()
        sys.exit(1)
