from __future__ import annotations
import logging
from rich.logging import RichHandler

def setup_logging(level: str = "INFO") -> logging.Logger:
    """Route all logging through a single rich console handler on stderr."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
    return root
