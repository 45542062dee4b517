#!/usr/bin/env python3
"""Do Today: Decision Tree (CLI)

Walks the user through the workout form and calls generate_workout() from
dotoday_generate.py. Each "new workout" reuses the answers with a fresh seed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from dotoday_generate import (
    DEFAULT_INPUTS,
    ENERGY_LEVELS,
    EQUIPMENT_LEVELS,
    EXPERIENCE_LEVELS,
    LOCATIONS,
    TIME_OPTIONS,
    WORKOUT_STYLES,
    configure_logging,
    free_tier_notice,
    generate_workout,
    new_variation_seed,
    summarize_inputs,
)

logger = logging.getLogger(__name__)


def _ask_choice(prompt: str, options: List[str], default_idx: int = 1) -> int:
    # returns 1-based selection index
    print(prompt)
    for i, opt in enumerate(options, start=1):
        print(f"  {i}) {opt}")
    while True:
        raw = input(f"Choose 1-{len(options)} [{default_idx}]: ").strip()
        if raw == "":
            return default_idx
        try:
            v = int(raw)
            if 1 <= v <= len(options):
                return v
        except ValueError:
            pass
        print("Invalid choice.")


def _ask_option(prompt: str, options: Sequence[Any], default: Any) -> Any:
    labels = [f"{o} min" if isinstance(o, int) else str(o) for o in options]
    idx = _ask_choice(prompt, labels, default_idx=list(options).index(default) + 1)
    return options[idx - 1]


def _ask_yes_no(prompt: str, default: bool = True) -> bool:
    idx = _ask_choice(prompt, ["yes", "no"], default_idx=1 if default else 2)
    return idx == 1


def collect_inputs() -> Dict[str, Any]:
    d = DEFAULT_INPUTS
    tier = _ask_choice("Plan?", ["Free", "Pro"], default_idx=1 if d["is_free_user"] else 2)
    inputs: Dict[str, Any] = {"is_free_user": tier == 1}
    inputs["time_minutes"] = _ask_option("How much time do you have?", TIME_OPTIONS, d["time_minutes"])
    inputs["location"] = _ask_option("Where are you training?", LOCATIONS, d["location"])
    inputs["equipment"] = _ask_option("What equipment is available?", EQUIPMENT_LEVELS, d["equipment"])
    inputs["experience"] = _ask_option("Experience level?", EXPERIENCE_LEVELS, d["experience"])
    inputs["energy"] = _ask_option("Energy today?", ENERGY_LEVELS, d["energy"])
    inputs["workout_style"] = _ask_option("Workout style?", WORKOUT_STYLES, d["workout_style"])
    inputs["limitations"] = input("Limitations (optional, e.g. knee pain): ").strip()
    return inputs


def main():
    configure_logging()
    print("\n=== DO TODAY ===")
    print("One focused workout. Clear and doable.\n")

    inputs = collect_inputs()

    notice = free_tier_notice(inputs)
    if notice:
        print(f"\n{notice}")

    while True:
        seed = new_variation_seed()
        logger.debug("Generating with seed %s", seed)
        plan = generate_workout({**inputs, "variation_seed": seed})
        print(f"\n{summarize_inputs(inputs)}\n")
        print(plan)
        print()
        if not _ask_yes_no("New workout with the same answers?", default=False):
            break


if __name__ == "__main__":
    main()
