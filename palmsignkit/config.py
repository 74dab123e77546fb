from __future__ import annotations
import logging
import yaml
from pathlib import Path
from typing import Optional, Union
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "palmsign.yaml"

class CameraConfig(BaseModel):
    index: int = 0
    width: int = Field(1280, gt=0)
    height: int = Field(720, gt=0)

class TrackerConfig(BaseModel):
    max_hands: int = Field(1, ge=1)
    model_complexity: int = Field(1, ge=0, le=1)
    min_detection_confidence: float = Field(0.6, ge=0.0, le=1.0)
    min_tracking_confidence: float = Field(0.6, ge=0.0, le=1.0)

class BroadcastConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(8765, gt=0, lt=65536)

class AppConfig(BaseModel):
    """
    Settings for the capture/tracking/output collaborators.
    Gesture thresholds live in palmsignkit.hand.gestures.
    """
    camera: CameraConfig = Field(default_factory=CameraConfig)
    tracker: TrackerConfig = Field(default_factory=TrackerConfig)
    broadcast: BroadcastConfig = Field(default_factory=BroadcastConfig)
    log_level: str = "INFO"

def load_config(path: Optional[Union[str, Path]] = DEFAULT_CONFIG_PATH) -> AppConfig:
    if path is None or not Path(path).exists():
        logger.debug("no config file at %s, using defaults", path)
        return AppConfig()
    with open(path, "r", encoding="utf-8") as f: cfg = yaml.safe_load(f)
    logger.debug("loaded config from %s", path)
    return AppConfig.model_validate(cfg or {})
