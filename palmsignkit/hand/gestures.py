from __future__ import annotations
import logging
from enum import Enum
from typing import Iterable, List
from pydantic import BaseModel, ConfigDict
from .geometry import THUMB_TIP, INDEX_MCP, as_points, count_extended_fingers

logger = logging.getLogger(__name__)

# fixed heuristic thresholds (normalized units / finger counts)
THUMB_UP_Y_MARGIN = 0.03
THUMB_UP_MAX_EXTENDED = 2
OPEN_PALM_MIN_EXTENDED = 4
FIST_MAX_EXTENDED = 1

class Gesture(str, Enum):
    NONE = "none"
    OPEN_PALM = "open_palm"
    FIST = "fist"
    THUMB_UP = "thumb_up"
    UNKNOWN = "unknown"

LABELS = {
    Gesture.NONE: "—",
    Gesture.THUMB_UP: "Yes 👍",
    Gesture.OPEN_PALM: "Hello 👋",
    Gesture.FIST: "No 👎",
    Gesture.UNKNOWN: "Not recognized",
}

class GestureResult(BaseModel):
    model_config = ConfigDict(frozen=True, use_enum_values=True)
    name: Gesture
    label: str

    @classmethod
    def of(cls, gesture: Gesture) -> "GestureResult":
        return cls(name=gesture, label=LABELS[gesture])

NONE_RESULT = GestureResult.of(Gesture.NONE)

def is_thumb_up(pts) -> bool:
    # y grows downwards, so "above the index base" means a smaller y
    if pts[THUMB_TIP][1] > pts[INDEX_MCP][1] - THUMB_UP_Y_MARGIN:
        return False
    return count_extended_fingers(pts) <= THUMB_UP_MAX_EXTENDED

def interpret_gesture(hand) -> GestureResult:
    """
    Classify one hand. Checks run in priority order and the first match wins:
    thumb-up, then open palm, then fist, else unknown.
    Invalid or missing landmarks give the `none` result instead of raising.
    """
    pts = as_points(hand)
    if pts is None:
        return NONE_RESULT
    if is_thumb_up(pts):
        return GestureResult.of(Gesture.THUMB_UP)
    extended = count_extended_fingers(pts)
    if extended >= OPEN_PALM_MIN_EXTENDED:
        return GestureResult.of(Gesture.OPEN_PALM)
    if extended <= FIST_MAX_EXTENDED:
        return GestureResult.of(Gesture.FIST)
    return GestureResult.of(Gesture.UNKNOWN)

def classify_frame(hands: Iterable) -> List[GestureResult]:
    # one result per hand in input order; a frame without hands yields a single `none`
    results = [interpret_gesture(h) for h in (hands if hands is not None else ())]
    if not results:
        return [NONE_RESULT]
    logger.debug("classified %d hand(s): %s", len(results), [r.name for r in results])
    return results
