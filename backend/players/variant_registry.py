"""
Registry for autopilot players.

Maps the names accepted by the --autopilot flag to player classes.
"""

from typing import Dict, List, Type

from .base import Player
from .random_player import RandomPlayer
from .straight_player import StraightPlayer


PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "straight": StraightPlayer,
}

AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())


def get_player_class(variant: str) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Raises:
        ValueError: if the variant is unknown
    """
    try:
        return PLAYER_VARIANTS[variant]
    except KeyError:
        raise ValueError(
            f"Unknown player variant '{variant}'. Available: {', '.join(AVAILABLE_VARIANTS)}"
        ) from None


def list_variants() -> List[str]:
    return list(AVAILABLE_VARIANTS)
