from __future__ import annotations
import logging
import mediapipe as mp
import numpy as np
import cv2

logger = logging.getLogger(__name__)

class HandLandmarks:
    def __init__(self, max_hands=1, model_complexity=1, min_detection_confidence=0.6, min_tracking_confidence=0.6):
        self.hands = mp.solutions.hands.Hands(
            max_num_hands=max_hands, model_complexity=model_complexity,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence)
        logger.info("hand tracker ready (max_hands=%d, complexity=%d)", max_hands, model_complexity)

    @classmethod
    def from_config(cls, tracker) -> "HandLandmarks":
        return cls(**tracker.model_dump())

    def __call__(self, frame_bgr):
        rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        res = self.hands.process(rgb)
        if not res.multi_hand_landmarks: return []
        out=[]
        handedness = res.multi_handedness or [None]*len(res.multi_hand_landmarks)
        for lm, handed in zip(res.multi_hand_landmarks, handedness):
            pts = np.array([(p.x,p.y,p.z) for p in lm.landmark], dtype=float)
            label = handed.classification[0].label.lower() if handed else None
            out.append({"pts":pts, "handedness": label})
        return out

    def close(self):
        self.hands.close()
