from datetime import datetime, timezone
from pathlib import Path


def append_log(log_path: Path, domain: str, level: str, message: str) -> None:
    """Append one ``[timestamp] [domain] LEVEL: message`` line to ``log_path``.

    Newlines in ``message`` are folded so every entry stays on one line.
    The parent directory is created on demand. Write failures are ignored.
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    line = " ".join(message.splitlines()) if message else ""
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"[{timestamp}] [{domain}] {level}: {line}\n")
    except OSError:
        pass  # Logging should never raise
