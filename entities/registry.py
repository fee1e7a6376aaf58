"""
entities/registry.py — Central registry of crop and power-up kinds.

This is the ONLY file that needs to change when adding a new crop or
power-up kind. Add a member to the enum, then add one line to the
matching registry below. Drawing code in entities/crop.py and
entities/power_up.py dispatches on the kind.

Registry format:
    {
        Kind.MEMBER: (spec, base_weight),
        ...
    }

    spec:        Frozen dataclass holding the kind's fixed gameplay and
                 visual parameters.
    base_weight: Relative probability weight used by core/spawner.py.
                 Weights are relative to each other, not percentages.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from settings import COLOR, POWER_UP_DURATION_S
from utils.color import RGBColor


class CropKind(Enum):
    """Collectible crop rarities."""
    WHEAT        = "wheat"
    PUMPKIN      = "pumpkin"
    GOLDEN_APPLE = "golden_apple"


class PowerUpKind(Enum):
    """Temporary farmer buffs."""
    SPEED  = "speed"
    SCYTHE = "scythe"


@dataclass(frozen=True)
class CropSpec:
    """Fixed parameters of one crop kind.

    Attributes:
        value:      Points awarded on harvest.
        head_size:  Radius of the drawn crop head.
        stem_color: RGB of the stem.
        head_color: RGB of the head; also used for the floating +points text.
    """
    value:      int
    head_size:  int
    stem_color: RGBColor
    head_color: RGBColor


@dataclass(frozen=True)
class PowerUpSpec:
    """Fixed parameters of one power-up kind.

    Attributes:
        effect:         Human-readable effect name shown in the HUD.
        color:          RGB of the pickup and of the farmer's indicator.
        duration:       Seconds the effect lasts after pickup.
        multiplier:     Speed multiplier while active (1.0 = no change).
        collect_radius: Area-harvest radius while active, or None.
    """
    effect:         str
    color:          RGBColor
    duration:       float = POWER_UP_DURATION_S
    multiplier:     float = 1.0
    collect_radius: float | None = None


# ── Registries ────────────────────────────────────────────────────────────────
CROP_REGISTRY: dict[CropKind, tuple[CropSpec, int]] = {
    CropKind.WHEAT:        (CropSpec(1,  8, COLOR["wheat_stem"],   COLOR["wheat_head"]),   70),
    CropKind.PUMPKIN:      (CropSpec(3, 12, COLOR["pumpkin_stem"], COLOR["pumpkin_head"]), 20),
    CropKind.GOLDEN_APPLE: (CropSpec(5, 10, COLOR["apple_stem"],   COLOR["apple_head"]),   10),
}

POWER_UP_REGISTRY: dict[PowerUpKind, tuple[PowerUpSpec, int]] = {
    PowerUpKind.SPEED:  (PowerUpSpec("Speed Boost", COLOR["speed"],  multiplier=1.8),     1),
    PowerUpKind.SCYTHE: (PowerUpSpec("Scythe",      COLOR["scythe"], collect_radius=80),  1),
}


def crop_spec(kind: CropKind) -> CropSpec:
    """Return the fixed parameters for a crop kind."""
    return CROP_REGISTRY[kind][0]


def power_up_spec(kind: PowerUpKind) -> PowerUpSpec:
    """Return the fixed parameters for a power-up kind."""
    return POWER_UP_REGISTRY[kind][0]
