from __future__ import annotations
import typer, json, asyncio, logging
from rich import print
from pathlib import Path
from typing import Optional, List, Any
from .config import DEFAULT_CONFIG_PATH, load_config
from .hand.gestures import classify_frame
from .runtime.events import events_for_frame, ws_broadcast
from .logs import setup_logging

app = typer.Typer(add_completion=False, help="PalmSign hand gesture CLI (psk)")
logger = logging.getLogger(__name__)

def _is_point(p: Any) -> bool:
    # a point holds scalars only; its values are checked later by as_points
    if isinstance(p, dict): return True
    return isinstance(p, (list, tuple)) and bool(p) and not any(isinstance(v, (list, tuple, dict)) for v in p)

def _hands_from_json(data: Any) -> List[Any]:
    # decided by the first element: a point means one hand, anything else a list of hands
    if isinstance(data, dict):
        data = data.get("hands", [])
    if not isinstance(data, list):
        raise ValueError("expected a list of landmarks or a list of hands")
    if data and _is_point(data[0]):
        return [data]
    return data

@app.command()
def classify(path: Path = typer.Argument(..., help="JSON file with one hand (21 points) or a list of hands")):
    """
    Classify landmarks from a JSON file and print one JSON result per hand.
    """
    try:
        hands = _hands_from_json(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, ValueError) as e:
        print(f"[red]Cannot read landmarks from {path}:[/red] {e}")
        raise typer.Exit(code=1)
    for res in classify_frame(hands):
        typer.echo(res.model_dump_json())

@app.command()
def run(config: str = typer.Option(DEFAULT_CONFIG_PATH, help="YAML config file"),
        camera: Optional[int] = typer.Option(None, help="Camera index (overrides config)"),
        preview: bool = typer.Option(True, "--preview/--no-preview", help="Show annotated camera window"),
        ws: bool = typer.Option(False, "--ws", help="Broadcast events over WebSocket")):
    """
    Live loop: track hands, print JSONL gesture events; press q in the preview to quit.
    """
    import cv2
    from .io.camera import frames
    from .hand.landmarks import HandLandmarks
    from .gui.overlay import render

    cfg = load_config(config)
    setup_logging(cfg.log_level)
    cam_index = cfg.camera.index if camera is None else camera
    hands = HandLandmarks.from_config(cfg.tracker)
    queue: "asyncio.Queue[str]" = asyncio.Queue()

    async def producer():
        for f in frames(cam_index, cfg.camera.width, cfg.camera.height):
            hs = hands(f["image"])
            events = events_for_frame(hs)
            for e in events:
                line = e.model_dump_json()
                typer.echo(line)
                if ws: await queue.put(line)
            if preview:
                render(f["image"], hs, [e.gesture for e in events if e.type == "gesture"])
                cv2.imshow("PalmSign", f["image"])
                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break
            await asyncio.sleep(0)

    async def main():
        if ws:
            bcast = asyncio.create_task(ws_broadcast(queue, cfg.broadcast.host, cfg.broadcast.port))
            try:
                await producer()
            finally:
                bcast.cancel()
        else:
            await producer()

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("interrupted")
    finally:
        hands.close()
        if preview: cv2.destroyAllWindows()

@app.command()
def gui(config: str = typer.Option(DEFAULT_CONFIG_PATH, help="YAML config file")):
    """
    Open the start/stop window with gesture and translation panels.
    """
    from .gui.app import main as gui_main
    gui_main(config)

if __name__ == "__main__":
    app()
