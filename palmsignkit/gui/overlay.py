from __future__ import annotations
from typing import Sequence, Tuple
import cv2
import numpy as np
from ..hand.gestures import Gesture, GestureResult

# skeleton edges between the 21 hand landmarks
HAND_CONNECTIONS = [
    (0,1),(1,2),(2,3),(3,4),
    (0,5),(5,6),(6,7),(7,8),
    (5,9),(9,10),(10,11),(11,12),
    (9,13),(13,14),(14,15),(15,16),
    (13,17),(17,18),(18,19),(19,20),
    (0,17),
]

def to_pixels(pts, frame_shape) -> np.ndarray:
    h, w = frame_shape[:2]
    xy = np.asarray(pts, dtype=float)[:, :2] * (w, h)
    return xy.round().astype(int)

def draw_hand(frame, pts, line_color=(0,255,0), point_color=(0,0,255)):
    px = to_pixels(pts, frame.shape)
    for a, b in HAND_CONNECTIONS:
        cv2.line(frame, tuple(map(int, px[a])), tuple(map(int, px[b])), line_color, 2, cv2.LINE_AA)
    for x, y in px:
        cv2.circle(frame, (int(x), int(y)), 3, point_color, -1)
    return frame

def draw_label(frame, text: str, org: Tuple[int,int]=(10,30), color=(255,255,255), scale=0.8):
    # outline first so the text stays readable on any background
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, (0,0,0), 4, cv2.LINE_AA)
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, color, 2, cv2.LINE_AA)
    return frame

def panel_texts(results: Sequence[GestureResult]) -> Tuple[str, str]:
    """Text for the gesture and translation panels; every detected hand is listed."""
    shown = [r for r in results if r.name != Gesture.NONE]
    if not shown:
        return "No gesture detected", "Translation: —"
    return ("Gesture: " + " | ".join(r.name for r in shown),
            "Translation: " + " | ".join(r.label for r in shown))

def render(frame, hands, results: Sequence[GestureResult]):
    """Draw every tracked hand and the gesture name (ASCII only, cv2 fonts lack emoji)."""
    for hand, res in zip(hands, results):
        draw_hand(frame, hand["pts"])
        if res.name != Gesture.NONE:
            wx, wy = to_pixels(hand["pts"], frame.shape)[0]
            draw_label(frame, str(res.name), (int(wx), int(wy) + 25), scale=0.6)
    draw_label(frame, panel_texts(results)[0])
    return frame
