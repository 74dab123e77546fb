from __future__ import annotations
import logging
from typing import Dict, NamedTuple, Optional
import numpy as np

logger = logging.getLogger(__name__)

NUM_LANDMARKS = 21
WRIST=0; THUMB_TIP=4; INDEX_MCP=5; INDEX_TIP=8; MIDDLE_TIP=12; RING_TIP=16; PINKY_TIP=20

FINGER_TIPS = {"thumb": THUMB_TIP, "index": INDEX_TIP, "middle": MIDDLE_TIP,
               "ring": RING_TIP, "pinky": PINKY_TIP}
JOINT_OFFSET = 2  # proximal joint sits two indices before each tip

class Landmark(NamedTuple):
    x: float
    y: float
    z: float = 0.0

def _rows(hand):
    # mediapipe NormalizedLandmarkList keeps its points under .landmark
    seq = list(getattr(hand, "landmark", hand))
    if not seq: return []
    first = seq[0]
    if hasattr(first, "x"):
        return [(p.x, p.y, getattr(p, "z", 0.0)) for p in seq]
    if isinstance(first, dict):
        return [(p["x"], p["y"], p.get("z", 0.0)) for p in seq]
    return seq

def as_points(hand) -> Optional[np.ndarray]:
    """
    Normalize a hand to a float (21, k>=2) array of x,y[,z] rows.
    Returns None for anything that cannot be classified: absent or empty input,
    a landmark count other than 21, unconvertible rows, NaN/inf coordinates.
    """
    if hand is None:
        return None
    try:
        pts = np.asarray(hand if isinstance(hand, np.ndarray) else _rows(hand), dtype=float)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.debug("unreadable hand landmarks: %s", e)
        return None
    if pts.ndim != 2 or pts.shape[0] != NUM_LANDMARKS or pts.shape[1] < 2:
        if pts.size:
            logger.debug("ignoring hand with shape %s", pts.shape)
        return None
    if not np.all(np.isfinite(pts)):
        logger.debug("ignoring hand with non-finite coordinates")
        return None
    return pts

def distance(a, b) -> float:
    # x,y plane only, z is ignored
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))

def extended_fingers(pts) -> Dict[str, bool]:
    # a finger counts as extended when its tip is strictly farther from the wrist than its proximal joint
    wrist = pts[WRIST]
    return {name: distance(pts[tip], wrist) > distance(pts[tip - JOINT_OFFSET], wrist)
            for name, tip in FINGER_TIPS.items()}

def count_extended_fingers(pts) -> int:
    return sum(extended_fingers(pts).values())
