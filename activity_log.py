import os
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = "itemtree.log"
_log_lock = threading.Lock()


def get_log_path() -> Path:
    return Path(os.getenv("ITEMTREE_LOG_PATH", DEFAULT_LOG_PATH))


def reset_log() -> None:
    with _log_lock:
        get_log_path().write_text("", encoding="utf-8")


def log_event(status: str, event: str, detail: Optional[str] = None) -> None:
    """Append one ``timestamp<TAB>STATUS<TAB>event[<TAB>detail]`` line."""
    timestamp = datetime.now().isoformat(timespec="seconds")
    message = detail.strip() if detail else ""
    line = f"{timestamp}\t{status.upper()}\t{event}"
    if message:
        # Keep one event per line.
        line = f"{line}\t{' '.join(message.split())}"
    with _log_lock:
        with get_log_path().open("a", encoding="utf-8") as log:
            log.write(line + "\n")
