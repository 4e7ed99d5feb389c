from __future__ import annotations

from enum import Enum


class RoundingMode(Enum):
    """Rounding modes supported by `DecimalValue.round_to`.

    Directions are relative to the magnitude, never to the sign: UP moves away
    from zero and DOWN moves toward zero for negative values too.

    Members:
        HALF_UP: Round to nearest; an exact half moves away from zero.
        HALF_DOWN: Round to nearest; an exact half moves toward zero.
        UP: Any discarded remainder moves away from zero.
        DOWN: Discard the remainder (truncate).
    """

    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    UP = "UP"
    DOWN = "DOWN"
