from __future__ import annotations
import cv2, time, logging
from typing import Iterator, Dict, Any, Callable, Optional

logger = logging.getLogger(__name__)

def frames(camera: int|str=0, width: int=1280, height: int=720,
           should_stop: Optional[Callable[[], bool]] = None) -> Iterator[Dict[str,Any]]:
    """
    Yield {"image": BGR frame, "meta": {"ts": ...}} until the stream ends or
    `should_stop()` turns true. The capture is always released on exit.
    """
    cap = cv2.VideoCapture(camera)
    if width:  cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
    if height: cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
    if not cap.isOpened():
        cap.release()
        raise RuntimeError(f"Cannot open camera {camera}")
    logger.info("camera %s opened at %dx%d", camera, width, height)
    try:
        while should_stop is None or not should_stop():
            ok, frame = cap.read()
            if not ok:
                logger.warning("camera %s returned no frame, stopping", camera)
                break
            yield {"image": frame, "meta": {"ts": time.time()}}
    finally:
        cap.release()
        logger.info("camera %s released", camera)
