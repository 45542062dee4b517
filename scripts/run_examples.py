#!/usr/bin/env python3
"""
Print a workout for every named preset (no seed, so catalog order is stable).
Run: python scripts/run_examples.py
"""
import os
import sys

# Ensure the repo root is on path (run from anywhere)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotoday_generate import PRESETS, generate_workout


def main():
    for name, preset in PRESETS.items():
        try:
            output = generate_workout(dict(preset))
        except ValueError as e:
            print(f"ERROR: preset {name}: {e}")
            sys.exit(1)
        print(output)
        print("---")


if __name__ == "__main__":
    main()
