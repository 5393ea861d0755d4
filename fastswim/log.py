from __future__ import annotations
import logging, sys
from typing import Optional

FORMAT = "[%(asctime)s][%(levelname)s] %(name)s | %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    fmt = logging.Formatter(FORMAT, "%H:%M:%S")
    handlers: list[logging.Handler] = []
    sh = logging.StreamHandler(sys.stderr); sh.setFormatter(fmt); handlers.append(sh)
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        handlers.append(fh)
    logging.basicConfig(level=level, handlers=handlers)
