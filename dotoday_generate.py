# dotoday_generate.py
# Single workout generator for Do Today.
# Pure and deterministic: same inputs + same variation_seed -> byte-identical plan.
# - Free tier: 20 min cap, bodyweight only, no lunges/jumps, no powerlifting
# - Knee limitation: knee-risk moves dropped, knee-friendly moves first
# - Powerlifting: one main lift + accessories, falls back to strength when no main lift fits

import argparse
import logging
import os
import time
from dataclasses import dataclass
from typing import AbstractSet, Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ------------------------------
# Option sets
# ------------------------------
TIME_OPTIONS: Tuple[int, ...] = (10, 20, 30, 45, 60)
LOCATIONS: Tuple[str, ...] = ("home", "hotel", "gym")
EQUIPMENT_LEVELS: Tuple[str, ...] = ("none", "dumbbells", "barbell", "full_gym")
EXPERIENCE_LEVELS: Tuple[str, ...] = ("beginner", "intermediate", "advanced")
ENERGY_LEVELS: Tuple[str, ...] = ("low", "medium", "high")
WORKOUT_STYLES: Tuple[str, ...] = ("balanced", "strength", "conditioning", "powerlifting")

FREE_TIME_CAP = 20
BARBELL_EQUIPMENT = ("barbell", "full_gym")

DEFAULT_INPUTS: Dict[str, Any] = {
    "time_minutes": 20,
    "location": "home",
    "equipment": "none",
    "experience": "beginner",
    "energy": "medium",
    "limitations": "",
    "is_free_user": True,
    "variation_seed": None,
    "workout_style": "balanced",
}

# ------------------------------
# Presets (the demo requests)
# ------------------------------
PRESETS: Dict[str, Dict[str, Any]] = {
    "free_home_dumbbells": {
        "time_minutes": 20,
        "location": "home",
        "equipment": "dumbbells",
        "experience": "beginner",
        "energy": "low",
        "limitations": "",
        "is_free_user": True,
    },
    "hotel_knee_pain": {
        "time_minutes": 30,
        "location": "hotel",
        "equipment": "none",
        "experience": "intermediate",
        "energy": "medium",
        "limitations": "knee pain",
        "is_free_user": False,
    },
    "gym_barbell_advanced": {
        "time_minutes": 45,
        "location": "gym",
        "equipment": "barbell",
        "experience": "advanced",
        "energy": "high",
        "limitations": "",
        "is_free_user": False,
    },
    "free_full_gym_capped": {
        "time_minutes": 30,
        "location": "gym",
        "equipment": "full_gym",
        "experience": "intermediate",
        "energy": "high",
        "limitations": "",
        "is_free_user": True,
    },
    "home_dumbbells_knee": {
        "time_minutes": 20,
        "location": "home",
        "equipment": "dumbbells",
        "experience": "intermediate",
        "energy": "medium",
        "limitations": "knee pain",
        "is_free_user": False,
    },
}


def apply_preset(config: Dict[str, Any], preset_name: Optional[str]) -> Dict[str, Any]:
    if not preset_name:
        return config
    key = preset_name.strip()
    if key not in PRESETS:
        valid = ", ".join(sorted(PRESETS.keys()))
        raise SystemExit(f"Unknown preset '{preset_name}'. Valid presets: {valid}")
    preset = PRESETS[key]
    for k, v in preset.items():
        if config.get(k) is None:
            config[k] = v
    return config


# ------------------------------
# Exercise catalog
# ------------------------------
@dataclass(frozen=True)
class Exercise:
    name: str
    at: Tuple[str, ...]
    equip: Tuple[str, ...]
    type: str
    tags: Tuple[str, ...]

    def has_any_tag(self, wanted: AbstractSet[str]) -> bool:
        return any(t in wanted for t in self.tags)


_EVERYWHERE = ("home", "hotel", "gym")
_DB_EQUIP = ("dumbbells", "full_gym")
_BB_EQUIP = ("barbell", "full_gym")

LIBRARY: Dict[str, Tuple[Exercise, ...]] = {
    "bodyweight": (
        Exercise("Squat", _EVERYWHERE, ("none",), "bodyweight", ("lower", "squat")),
        Exercise("Push-up", _EVERYWHERE, ("none",), "bodyweight", ("upper",)),
        Exercise("Reverse lunge", _EVERYWHERE, ("none",), "bodyweight", ("lower", "lunge")),
        Exercise("Glute bridge", _EVERYWHERE, ("none",), "bodyweight", ("hinge", "glute")),
        Exercise("Plank", _EVERYWHERE, ("none",), "bodyweight", ("core",)),
        Exercise("Dead bug", _EVERYWHERE, ("none",), "bodyweight", ("core",)),
        Exercise("Mountain climber", _EVERYWHERE, ("none",), "bodyweight", ("core", "cardio")),
        Exercise("Step-back lunge", _EVERYWHERE, ("none",), "bodyweight", ("lower", "lunge")),
        Exercise("Hip hinge", _EVERYWHERE, ("none",), "bodyweight", ("hinge",)),
        Exercise("Standing calf raise", _EVERYWHERE, ("none",), "bodyweight", ("lower",)),
    ),
    "dumbbell": (
        Exercise("Dumbbell squat", _EVERYWHERE, _DB_EQUIP, "dumbbell", ("lower", "squat")),
        Exercise("Dumbbell row", _EVERYWHERE, _DB_EQUIP, "dumbbell", ("upper", "row")),
        Exercise("Dumbbell deadlift", _EVERYWHERE, _DB_EQUIP, "dumbbell", ("hinge",)),
        Exercise("Dumbbell press", _EVERYWHERE, _DB_EQUIP, "dumbbell", ("upper",)),
        Exercise("Dumbbell lunge", _EVERYWHERE, _DB_EQUIP, "dumbbell", ("lower", "lunge")),
        Exercise("Dumbbell shoulder press", _EVERYWHERE, _DB_EQUIP, "dumbbell", ("upper",)),
        Exercise("Farmer carry", _EVERYWHERE, _DB_EQUIP, "dumbbell", ("carry", "core")),
    ),
    "barbell": (
        Exercise("Barbell squat", ("gym",), _BB_EQUIP, "barbell", ("lower", "squat", "main_lift")),
        Exercise("Barbell bench press", ("gym",), _BB_EQUIP, "barbell", ("upper", "bench", "main_lift")),
        Exercise("Barbell deadlift", ("gym",), _BB_EQUIP, "barbell", ("hinge", "deadlift", "main_lift")),
        Exercise("Barbell row", ("gym",), _BB_EQUIP, "barbell", ("upper", "row")),
        Exercise("Barbell overhead press", ("gym",), _BB_EQUIP, "barbell", ("upper",)),
    ),
}

PLANK = "Plank"
MAIN_LIFT_TAG = "main_lift"

KNEE_EXCLUDE_TAGS = frozenset({"jump", "run", "lunge", "squat", "step-up"})
KNEE_PREFER_TAGS = frozenset({"upper", "core", "hinge", "carry"})
FREE_EXCLUDE_TAGS = frozenset({"lunge", "jump"})
ACCESSORY_PREFER_TAGS = frozenset({"row", "hinge", "core", "carry", "upper"})

FOCUS: Dict[str, str] = {
    "low": "Gentle Full Body",
    "medium": "Balanced Full Body",
    "high": "Full Body Power",
}


# ------------------------------
# Seeded shuffle (Mulberry32)
# ------------------------------
_U32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & _U32


def mulberry32(seed: int) -> Callable[[], float]:
    """Return a generator of floats in [0, 1) seeded with a 32-bit integer.

    Every step wraps to unsigned 32-bit, so a given seed yields the same
    sequence on every platform.
    """
    state = seed & _U32

    def rand() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & _U32
        t = state
        r = _imul(t ^ (t >> 15), 1 | t)
        r ^= (r + _imul(r ^ (r >> 7), 61 | r)) & _U32
        return ((r ^ (r >> 14)) & _U32) / 4294967296

    return rand


def shuffle_with_seed(items: Sequence[T], seed: int) -> List[T]:
    rand = mulberry32(seed)
    arr = list(items)
    for i in range(len(arr) - 1, 0, -1):
        j = int(rand() * (i + 1))
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _maybe_shuffle(items: Sequence[T], seed: Optional[int], offset: int = 0) -> List[T]:
    if seed is None:
        return list(items)
    return shuffle_with_seed(items, seed + offset)


# ------------------------------
# Input normalization
# ------------------------------
@dataclass(frozen=True)
class NormalizedInputs:
    time_minutes: int
    location: str
    equipment: str
    experience: str
    energy: str
    limitations: str
    is_free_user: bool
    variation_seed: Optional[int]
    workout_style: str
    requested_style: str

    @property
    def knee_limited(self) -> bool:
        return has_knee_limitations(self.limitations)

    @property
    def has_limitations(self) -> bool:
        return len(self.limitations) > 0

    @property
    def barbell_access(self) -> bool:
        return (not self.is_free_user) and self.equipment in BARBELL_EQUIPMENT


def clamp_time(is_free: bool, time_minutes: int) -> int:
    if not is_free:
        return time_minutes
    return FREE_TIME_CAP if time_minutes > FREE_TIME_CAP else time_minutes


def normalize_equipment(is_free: bool, equipment: str) -> str:
    return "none" if is_free else equipment


def sanitize_limitations(limitations: Optional[str]) -> str:
    if not limitations:
        return ""
    return limitations.strip()


def has_knee_limitations(limitations: str) -> bool:
    return "knee" in limitations.lower()


def resolve_style(requested: Optional[str], is_free: bool, equipment: str) -> str:
    style = requested or "balanced"
    if style == "powerlifting":
        if is_free:
            return "strength"
        if equipment not in BARBELL_EQUIPMENT:
            return "strength"
    return style


def _require_choice(field: str, value: Any, choices: Sequence[Any]) -> None:
    if value not in choices:
        valid = ", ".join(str(c) for c in choices)
        raise ValueError(f"Invalid {field} {value!r}. Valid values: {valid}")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_inputs(raw: Dict[str, Any]) -> None:
    minutes = raw.get("time_minutes")
    if not _is_int(minutes):
        raise ValueError(f"Invalid time_minutes {minutes!r}. Expected one of: {', '.join(map(str, TIME_OPTIONS))}")
    _require_choice("time_minutes", minutes, TIME_OPTIONS)
    _require_choice("location", raw.get("location"), LOCATIONS)
    _require_choice("equipment", raw.get("equipment"), EQUIPMENT_LEVELS)
    _require_choice("experience", raw.get("experience"), EXPERIENCE_LEVELS)
    _require_choice("energy", raw.get("energy"), ENERGY_LEVELS)
    if raw.get("workout_style") is not None:
        _require_choice("workout_style", raw["workout_style"], WORKOUT_STYLES)
    seed = raw.get("variation_seed")
    if seed is not None and not _is_int(seed):
        raise ValueError(f"Invalid variation_seed {seed!r}. Expected an integer or None")


def normalize_inputs(raw: Dict[str, Any]) -> NormalizedInputs:
    validate_inputs(raw)
    is_free = bool(raw.get("is_free_user"))
    equipment = normalize_equipment(is_free, raw["equipment"])
    requested = raw.get("workout_style") or "balanced"
    style = resolve_style(requested, is_free, equipment)
    if style != requested:
        logger.debug("Style %s not available (free=%s, equipment=%s); using %s", requested, is_free, equipment, style)
    return NormalizedInputs(
        time_minutes=clamp_time(is_free, raw["time_minutes"]),
        location=raw["location"],
        equipment=equipment,
        experience=raw["experience"],
        energy=raw["energy"],
        limitations=sanitize_limitations(raw.get("limitations")),
        is_free_user=is_free,
        variation_seed=raw.get("variation_seed"),
        workout_style=style,
        requested_style=requested,
    )


# ------------------------------
# Pool building
# ------------------------------
def allowed_types(equipment: str) -> List[str]:
    types = ["bodyweight"]
    if equipment in ("dumbbells", "full_gym"):
        types.append("dumbbell")
    if equipment in ("barbell", "full_gym"):
        types.append("barbell")
    return types


def build_pool(inputs: NormalizedInputs) -> List[Exercise]:
    equip = inputs.equipment
    knee_limited = inputs.knee_limited

    pool: List[Exercise] = []
    for t in allowed_types(equip):
        for ex in LIBRARY[t]:
            if inputs.location not in ex.at:
                continue
            if equip not in ex.equip and equip != "full_gym":
                continue
            if knee_limited and ex.has_any_tag(KNEE_EXCLUDE_TAGS):
                continue
            if inputs.is_free_user and ex.has_any_tag(FREE_EXCLUDE_TAGS):
                continue
            pool.append(ex)

    if knee_limited:
        pool.sort(key=lambda ex: 0 if ex.has_any_tag(KNEE_PREFER_TAGS) else 1)

    logger.debug("Pool for %s/%s: %d exercises", inputs.location, equip, len(pool))
    return _maybe_shuffle(pool, inputs.variation_seed)


def pick_exercises(pool: Sequence[Exercise], count: int) -> List[Exercise]:
    return list(pool[: max(0, count)])


# ------------------------------
# Plan shape + volume
# ------------------------------
@dataclass(frozen=True)
class PlanTemplate:
    label: str
    rounds: int
    moves: int


@dataclass(frozen=True)
class VolumePrescription:
    reps: int
    seconds: int


PLAN_TABLE: Dict[str, Dict[int, PlanTemplate]] = {
    "strength": {
        10: PlanTemplate("ROUNDS", 3, 2),
        20: PlanTemplate("ROUNDS", 3, 3),
        30: PlanTemplate("ROUNDS", 4, 3),
        45: PlanTemplate("ROUNDS", 5, 4),
        60: PlanTemplate("ROUNDS", 5, 4),
    },
    "conditioning": {
        10: PlanTemplate("EMOM", 1, 3),
        20: PlanTemplate("AMRAP", 1, 4),
        30: PlanTemplate("AMRAP", 1, 4),
        45: PlanTemplate("AMRAP", 1, 5),
        60: PlanTemplate("AMRAP", 1, 5),
    },
    "balanced": {
        10: PlanTemplate("EMOM", 1, 3),
        20: PlanTemplate("AMRAP", 1, 4),
        30: PlanTemplate("ROUNDS", 4, 4),
        45: PlanTemplate("ROUNDS", 5, 4),
        60: PlanTemplate("ROUNDS", 6, 4),
    },
}

VOLUME_BASE: Dict[str, VolumePrescription] = {
    "strength": VolumePrescription(reps=6, seconds=20),
    "conditioning": VolumePrescription(reps=14, seconds=40),
    "balanced": VolumePrescription(reps=10, seconds=30),
}


def plan_for_style(style: str, time_minutes: int) -> PlanTemplate:
    # styles without their own row read as balanced
    table = PLAN_TABLE.get(style, PLAN_TABLE["balanced"])
    return table[time_minutes]


def volume_for(style: str, energy: str, has_limitations: bool) -> VolumePrescription:
    base = VOLUME_BASE.get(style, VOLUME_BASE["balanced"])
    if energy == "low" or has_limitations:
        return VolumePrescription(reps=max(6, base.reps - 2), seconds=max(15, base.seconds - 10))
    if energy == "high":
        return VolumePrescription(reps=base.reps + 2, seconds=base.seconds + 5)
    return base


# ------------------------------
# Composers
# ------------------------------
def format_line(ex: Exercise, volume: VolumePrescription, plan: PlanTemplate) -> str:
    prefix = f"Rounds {plan.rounds}" if plan.label == "ROUNDS" else plan.label
    if ex.name == PLANK:
        return f"- {prefix}: {ex.name}: {volume.seconds}s"
    return f"- {prefix}: {ex.name}: {volume.reps} reps"


def compose_general(pool: Sequence[Exercise], style: str, inputs: NormalizedInputs) -> List[str]:
    plan = plan_for_style(style, inputs.time_minutes)
    volume = volume_for(style, inputs.energy, inputs.has_limitations)
    return [format_line(ex, volume, plan) for ex in pick_exercises(pool, plan.moves)]


POWERLIFT_RX: Dict[str, Tuple[int, int]] = {
    "beginner": (3, 5),
    "intermediate": (5, 5),
    "advanced": (5, 3),
}


def powerlift_prescription(experience: str) -> str:
    sets, reps = POWERLIFT_RX.get(experience, POWERLIFT_RX["intermediate"])
    return f"{sets}x{reps}"


def accessory_count(time_minutes: int) -> int:
    return 1 if time_minutes <= 20 else 2


def compose_powerlifting(pool: Sequence[Exercise], inputs: NormalizedInputs) -> Optional[List[str]]:
    """Main lift + accessories, or None when the pool holds no main lift."""
    candidates = [ex for ex in pool if MAIN_LIFT_TAG in ex.tags]
    if not candidates:
        return None

    main_lift = _maybe_shuffle(candidates, inputs.variation_seed)[0]
    lines = [f"- {main_lift.name}: {powerlift_prescription(inputs.experience)} (rest 2-3 min)"]

    accessories = [ex for ex in pool if ex.name != main_lift.name]
    accessories.sort(key=lambda ex: 0 if ex.has_any_tag(ACCESSORY_PREFER_TAGS) else 1)
    accessories = _maybe_shuffle(accessories, inputs.variation_seed, offset=1)

    for ex in pick_exercises(accessories, accessory_count(inputs.time_minutes)):
        if ex.name == PLANK:
            lines.append(f"- {ex.name}: 30s")
        else:
            lines.append(f"- {ex.name}: 3x8")
    return lines


# ------------------------------
# Warm-ups
# ------------------------------
@dataclass(frozen=True)
class WarmupMove:
    name: str
    reps: Optional[int] = None
    seconds: Optional[int] = None


@dataclass(frozen=True)
class WarmupTemplate:
    label: str
    minutes: int
    moves: Tuple[WarmupMove, ...]
    uses_barbell: bool = False
    # False marks a template with jumps; free users never get one
    no_jump: Optional[bool] = None
    knee_safe: bool = False


@dataclass(frozen=True)
class WarmupBlock:
    label: str
    minutes: int
    lines: Tuple[str, ...]


def _wu(label: str, minutes: int, *moves: WarmupMove, uses_barbell: bool = False, knee_safe: bool = True) -> WarmupTemplate:
    return WarmupTemplate(label, minutes, tuple(moves), uses_barbell=uses_barbell, no_jump=True, knee_safe=knee_safe)


_MARCH = WarmupMove("March in place", seconds=30)
_ARM_CIRCLES = WarmupMove("Arm circles", seconds=20)
_PLANK = WarmupMove("Plank", seconds=20)
_HINGE = WarmupMove("Hip hinge", reps=8)
_BRIDGE = WarmupMove("Glute bridge", reps=8)
_DEAD_BUG = WarmupMove("Dead bug", reps=6)
_PUSH_UP = WarmupMove("Push-up", reps=6)
_WALL_PUSH_UP = WarmupMove("Wall push-up", reps=8)

WARMUP_TEMPLATES: Dict[str, Tuple[WarmupTemplate, ...]] = {
    "strength": (
        _wu("Activate", 3, _MARCH, _HINGE, _BRIDGE, _PLANK),
        _wu("Prep", 4, _MARCH, _BRIDGE, _DEAD_BUG, _PLANK),
        _wu("Get loose", 4, _ARM_CIRCLES, _HINGE, _WALL_PUSH_UP, WarmupMove("Calf raise", reps=10)),
    ),
    "conditioning": (
        _wu("Wake up", 3, _MARCH, WarmupMove("Mountain climber", seconds=20), _HINGE, _PLANK),
        _wu("Quick prep", 4, _MARCH, _PUSH_UP, _DEAD_BUG, _PLANK),
        _wu("Get loose", 4, _ARM_CIRCLES, _HINGE, _BRIDGE, _PLANK),
        _wu("Activate", 5, _MARCH, _BRIDGE, _PUSH_UP, _DEAD_BUG, _PLANK),
    ),
    "powerlifting": (
        _wu(
            "Barbell prep", 4,
            WarmupMove("Barbell warm-up set", reps=8),
            WarmupMove("Barbell warm-up set", reps=5),
            WarmupMove("Hip hinge", reps=6),
            _PLANK,
            uses_barbell=True,
            knee_safe=False,
        ),
        _wu("Activate", 3, _MARCH, _HINGE, _BRIDGE, _PLANK),
        _wu("Prep", 4, _ARM_CIRCLES, _HINGE, _BRIDGE, _DEAD_BUG),
    ),
    "balanced": (
        _wu("Activate", 3, _MARCH, _HINGE, _PUSH_UP, _PLANK),
        _wu("Prep", 4, _MARCH, _BRIDGE, _PUSH_UP, _DEAD_BUG),
        _wu("Get loose", 4, _ARM_CIRCLES, _HINGE, _WALL_PUSH_UP, _PLANK),
        _wu("Wake up", 5, _MARCH, _HINGE, _BRIDGE, _PUSH_UP, _PLANK),
    ),
}


def warmup_templates_for_style(style: str) -> Tuple[WarmupTemplate, ...]:
    return WARMUP_TEMPLATES.get(style, WARMUP_TEMPLATES["balanced"])


def format_warmup_move(move: WarmupMove) -> str:
    if move.seconds:
        return f"- {move.name}: {move.seconds}s"
    reps = move.reps if move.reps is not None else 8
    return f"- {move.name}: {reps} reps"


def build_warmup(style: str, inputs: NormalizedInputs) -> WarmupBlock:
    templates = warmup_templates_for_style(style)
    shuffled = _maybe_shuffle(templates, inputs.variation_seed, offset=3)

    knee_limited = inputs.knee_limited
    allow_barbell = inputs.barbell_access

    def barbell_ok(t: WarmupTemplate) -> bool:
        return allow_barbell or not t.uses_barbell

    def usable(t: WarmupTemplate) -> bool:
        if knee_limited and not t.knee_safe:
            return False
        if inputs.is_free_user and t.no_jump is False:
            return False
        return barbell_ok(t)

    chosen = next((t for t in shuffled if usable(t)), None)
    if chosen is None:
        chosen = next((t for t in templates if t.knee_safe and barbell_ok(t)), templates[0])

    return WarmupBlock(chosen.label, chosen.minutes, tuple(format_warmup_move(m) for m in chosen.moves))


# ------------------------------
# Entry point
# ------------------------------
def generate_workout(raw: Dict[str, Any]) -> str:
    """Build the full plan text for one request.

    Raises ValueError when a field is outside its fixed set of values.
    """
    inputs = normalize_inputs(raw)
    pool = build_pool(inputs)
    style = inputs.workout_style

    lines: Optional[List[str]] = None
    if style == "powerlifting":
        lines = compose_powerlifting(pool, inputs)
        if lines is None:
            logger.debug("No main lift in pool; falling back to a strength session")
            style = "strength"
    if lines is None:
        lines = compose_general(pool, style, inputs)
    warmup = build_warmup(style, inputs)

    return "\n".join(
        [
            f"Today's Focus: {FOCUS[inputs.energy]}",
            f"{warmup.label} ({warmup.minutes} min):",
            *warmup.lines,
            f"Workout ({inputs.time_minutes} min):",
            *lines,
            "Rest as needed. Start now.",
        ]
    )


# ------------------------------
# Presentation helpers
# ------------------------------
def free_tier_notice(inputs: Dict[str, Any]) -> str:
    if not inputs.get("is_free_user"):
        return ""
    over_time = inputs.get("time_minutes", 0) > FREE_TIME_CAP
    has_equipment = inputs.get("equipment", "none") != "none"
    if over_time and has_equipment:
        return "Free caps to 20 min and bodyweight."
    if over_time:
        return "Free caps to 20 min."
    if has_equipment:
        return "Free uses bodyweight only."
    return ""


def summarize_inputs(inputs: Dict[str, Any]) -> str:
    limitations = inputs.get("limitations")
    return " · ".join(
        [
            f"{inputs['time_minutes']} min",
            inputs["location"],
            inputs["equipment"],
            inputs["experience"],
            f"{inputs['energy']} energy",
            f"limitations: {limitations}" if limitations else "no limitations",
            f"style: {inputs.get('workout_style') or 'balanced'}",
            "free" if inputs.get("is_free_user") else "pro",
        ]
    )


def new_variation_seed() -> int:
    return int(time.time() * 1000)


def configure_logging(verbose: bool = False) -> None:
    name = os.getenv("DOTODAY_LOG_LEVEL", "DEBUG" if verbose else "WARNING").strip().upper()
    level = logging.getLevelName(name)
    known = isinstance(level, int)
    logging.basicConfig(
        level=level if known else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not known:
        logger.warning("Unknown DOTODAY_LOG_LEVEL %r; using WARNING", name)


# ------------------------------
# CLI main
# ------------------------------
def _parse_bool(s: str) -> bool:
    v = s.strip().lower()
    if v in ("true", "1", "yes", "y", "free"):
        return True
    if v in ("false", "0", "no", "n", "pro"):
        return False
    raise argparse.ArgumentTypeError(f"expected yes/no, got '{s}'")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Do Today - single workout generator")
    parser.add_argument("--preset", help="Named input set: " + ", ".join(sorted(PRESETS.keys())))
    parser.add_argument("--time", dest="time_minutes", type=int, choices=TIME_OPTIONS)
    parser.add_argument("--location", choices=LOCATIONS)
    parser.add_argument("--equipment", choices=EQUIPMENT_LEVELS)
    parser.add_argument("--experience", choices=EXPERIENCE_LEVELS)
    parser.add_argument("--energy", choices=ENERGY_LEVELS)
    parser.add_argument("--style", dest="workout_style", choices=WORKOUT_STYLES)
    parser.add_argument("--limitations")
    parser.add_argument("--free", dest="is_free_user", type=_parse_bool, metavar="yes|no")
    parser.add_argument("--seed", dest="variation_seed", type=int, help="Variation seed (omit for stable order)")
    parser.add_argument("--new", action="store_true", help="Use a fresh time-based seed")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)

    config: Dict[str, Any] = {k: getattr(args, k) for k in DEFAULT_INPUTS}
    config = apply_preset(config, args.preset)
    for k, v in DEFAULT_INPUTS.items():
        if config.get(k) is None:
            config[k] = v
    if args.new and config.get("variation_seed") is None:
        config["variation_seed"] = new_variation_seed()

    notice = free_tier_notice(config)
    if notice:
        print(notice)

    try:
        plan = generate_workout(config)
    except ValueError as e:
        raise SystemExit(str(e))
    print(plan)


if __name__ == "__main__":
    main()
