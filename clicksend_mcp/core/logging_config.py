from pathlib import Path
import logging
import os
import sys
from typing import Optional
from datetime import datetime

LOGGER_NAME = "clicksend_mcp"


def setup_logging(
    logs_dir: Optional[str | Path] = None,
    log_file_name: str = "server.log",
    level: Optional[str] = None,
) -> logging.Logger:
    """Configure root logging to stderr and a timestamped file under `logs_dir`.

    Idempotent: calling multiple times won't add duplicate handlers.
    stdout is reserved for the MCP stdio transport, so the console handler writes to stderr.
    The level comes from $LOG_LEVEL, then `level` (usually config.yaml), then INFO.
    Returns the package logger for callers to use.
    """
    if logs_dir is None:
        logs_dir = Path.cwd() / "logs"
    else:
        logs_dir = Path(logs_dir)

    level_name = (os.environ.get("LOG_LEVEL") or level or "INFO").upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    # One file handler per process; the timestamped name differs between calls
    file_handler_exists = any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)
    if not file_handler_exists:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base = Path(log_file_name).stem
        ext = Path(log_file_name).suffix or ".log"
        log_file = logs_dir / f"{base}_{timestamp}{ext}"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            fh.setLevel(log_level)
            root_logger.addHandler(fh)
        except OSError as e:
            # Read-only installs still get stderr logging
            sys.stderr.write(f"Cannot write log file {log_file}: {e}\n")

    stream_stderr_exists = any(
        type(h) is logging.StreamHandler and getattr(h, "stream", None) is sys.stderr
        for h in root_logger.handlers
    )
    if not stream_stderr_exists:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        sh.setLevel(log_level)
        root_logger.addHandler(sh)

    return logging.getLogger(LOGGER_NAME)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Helper to get a logger by name; falls back to the package logger."""
    return logging.getLogger(name) if name else logging.getLogger(LOGGER_NAME)
