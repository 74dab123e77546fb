from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Optional, Literal, List, Dict, Any
import asyncio, logging, time, websockets
from ..hand.gestures import GestureResult, NONE_RESULT, classify_frame

logger = logging.getLogger(__name__)

class GestureEvent(BaseModel):
    ts: float = Field(default_factory=lambda: time.time())
    type: Literal["gesture","none"]
    hand_index: Optional[int]=None
    handedness: Optional[str]=None
    gesture: GestureResult = NONE_RESULT

def events_for_frame(hands: Optional[List[Dict[str,Any]]]) -> List[GestureEvent]:
    """
    Per-frame dispatch: one `none` event for an empty frame, otherwise one
    `gesture` event per tracked hand (dicts as produced by HandLandmarks).
    """
    if not hands:
        return [GestureEvent(type="none")]
    ts = time.time()
    results = classify_frame([h.get("pts") for h in hands])
    return [GestureEvent(ts=ts, type="gesture", hand_index=i, handedness=h.get("handedness"), gesture=r)
            for i, (h, r) in enumerate(zip(hands, results))]

async def ws_broadcast(queue: "asyncio.Queue[str]", host="0.0.0.0", port=8765):
    clients=set()
    async def handler(websocket):
        clients.add(websocket)
        logger.info("client connected (%d total)", len(clients))
        try:
            await websocket.wait_closed()
        finally:
            clients.discard(websocket)
            logger.info("client disconnected (%d left)", len(clients))
    async with websockets.serve(handler, host, port):
        logger.info("broadcasting events on ws://%s:%d", host, port)
        while True:
            msg = await queue.get()
            websockets.broadcast(clients, msg)
