"""
main.py — Launcher for the PM2.5 shortcut intent server and demo frontend.

Usage:
    python main.py

Starts the intent server and the Streamlit frontend as subprocesses, waits
for both to be healthy, then prints the URL. Press Ctrl-C to exit; both
servers are terminated cleanly on exit.
"""

import sys
import subprocess
import time
from pathlib import Path

import httpx

from pm25_intent.config import FRONTEND_PORT, PM25_PORT

ROOT = Path(__file__).parent

SERVER_HEALTH_URL = f"http://localhost:{PM25_PORT}/health"
FRONTEND_HEALTH_URL = f"http://localhost:{FRONTEND_PORT}/_stcore/health"


# ── Health polling ─────────────────────────────────────────────────────────────

def _wait_for_health(url: str, timeout: int) -> bool:
    """Poll GET url until status 200 or timeout (seconds). Returns True on success."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            if httpx.get(url, timeout=1.0).status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(0.5)
    return False


# ── Graceful shutdown ──────────────────────────────────────────────────────────

def _shutdown(procs: list, log_files: list) -> None:
    """SIGTERM all processes, wait up to 5 s each, then SIGKILL stragglers."""
    for p in procs:
        p.terminate()
    for p in procs:
        try:
            p.wait(timeout=5)
        except subprocess.TimeoutExpired:
            p.kill()
    for f in log_files:
        f.close()


def _start(label: str, args: list, log_name: str, health_url: str, timeout: int,
           procs: list, log_files: list) -> None:
    print(f"Starting {label}...", end=" ", flush=True)
    log = open(ROOT / log_name, "w")
    log_files.append(log)
    procs.append(
        subprocess.Popen(args, cwd=ROOT, stdout=log, stderr=subprocess.STDOUT)
    )

    if not _wait_for_health(health_url, timeout=timeout):
        print("FAILED")
        print(
            f"Error: {label} did not become healthy within {timeout} s.\n"
            f"Check {log_name} for details.",
            file=sys.stderr,
        )
        _shutdown(procs, log_files)
        sys.exit(1)
    print("OK")


# ── Entry point ────────────────────────────────────────────────────────────────

def main() -> None:
    log_files = []
    procs = []

    try:
        print(
            "PM2.5 Shortcut\n"
            f"  Intents  → http://localhost:{PM25_PORT}/intents\n"
            f"  Frontend → http://localhost:{FRONTEND_PORT}\n"
            "  Logs     → pm25_server.log, frontend.log"
        )

        _start(
            "intent server",
            [sys.executable, "-m", "pm25_intent.server"],
            "pm25_server.log",
            SERVER_HEALTH_URL,
            15,
            procs,
            log_files,
        )
        _start(
            "Streamlit frontend",
            [sys.executable, "-m", "streamlit", "run", "frontend/app.py",
             "--server.port", str(FRONTEND_PORT),
             "--server.headless", "true"],
            "frontend.log",
            FRONTEND_HEALTH_URL,
            30,
            procs,
            log_files,
        )

        print(f"\nOpen your browser at: http://localhost:{FRONTEND_PORT}")
        print("Press Ctrl-C to stop all services.\n")

        # Keep the launcher alive until interrupted
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            print()

    finally:
        print("Shutting down...")
        _shutdown(procs, log_files)


if __name__ == "__main__":
    main()
