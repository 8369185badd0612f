"""Desktop entry point: serve the converter form locally and open it in a browser.

Installed as the ``land-converter`` console script. Host, port and whether a
browser is opened come from ``LANDCONV_*`` settings.
"""

from __future__ import annotations

import socket
import sys
import threading
import time
import traceback
import webbrowser
from pathlib import Path
from typing import Optional

import uvicorn

from land_converter.config import settings

CRASH_LOG_NAME = "land_converter_crash.log"


def resolve_port(host: str, port: int) -> int:
    """Return port, or a free one on host when port is 0."""
    if port:
        return port
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        return s.getsockname()[1]


def crash_log_path() -> Path:
    # A frozen build keeps its log beside the executable
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent / CRASH_LOG_NAME
    return Path.cwd() / CRASH_LOG_NAME


def write_crash_log(report: str, path: Optional[Path] = None) -> Path:
    path = path or crash_log_path()
    path.write_text(report, encoding="utf-8")
    return path


def open_when_started(server: uvicorn.Server, url: str, timeout: float = 5.0) -> bool:
    """Open url once the server reports it is accepting connections.

    Returns False if the server did not start within timeout seconds.
    """
    deadline = time.monotonic() + timeout
    while not server.started:
        if time.monotonic() > deadline:
            return False
        time.sleep(0.05)
    webbrowser.open(url)
    return True


def serve() -> None:
    port = resolve_port(settings.host, settings.port)
    url = f"http://{settings.host}:{port}"
    server = uvicorn.Server(uvicorn.Config(
        "land_converter.main:app",
        host=settings.host,
        port=port,
        log_level=settings.log_level,
    ))

    print(f"{settings.app_name} running at {url} (Ctrl+C to stop)")
    if settings.open_browser:
        threading.Thread(target=open_when_started, args=(server, url), daemon=True).start()
    server.run()


def main() -> None:
    try:
        serve()
    except Exception:
        report = traceback.format_exc()
        print(report, file=sys.stderr)
        try:
            print(f"Crash log written to {write_crash_log(report)}", file=sys.stderr)
        except OSError as exc:
            print(f"Could not write crash log: {exc}", file=sys.stderr)
        # Keep a double-clicked console window open long enough to read
        if getattr(sys, "frozen", False):
            try:
                input("Press Enter to close.")
            except EOFError:
                pass
        raise SystemExit(1)


if __name__ == "__main__":
    main()
