#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""AI Showcase launcher: starts the inference API and the Streamlit UI.

Services are described in ``servers.json``. Each one is started with the
current interpreter, its output goes to ``logs/<name>.log``, and the launcher
waits for its health URL before moving on. A busy port is bumped upwards
(``--port-bump`` attempts). The UI receives the API's final port through
``SHOWCASE_API_URL``.
"""

from __future__ import annotations

import argparse
import json
import os
import socket
import subprocess
import sys
import time
import urllib.error
import urllib.request
import webbrowser
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


# ── Paths ──────────────────────────────────────────────────────────────────────
ROOT = Path(__file__).resolve().parent
SERVERS_JSON = ROOT / "servers.json"
LOG_DIR = ROOT / "logs"

PORT_FLAGS = ("--port", "--server.port")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="run_all", description="AI Showcase launcher")
    parser.add_argument("--no-open", action="store_true", help="Do not open the browser automatically.")
    parser.add_argument("--only", choices=["api", "streamlit"], help="Start a single service.")
    parser.add_argument(
        "--port-bump",
        type=int,
        default=20,
        help="Number of attempts to increase the port if it is already in use.",
    )
    return parser.parse_args(argv)


# ── ANSI Colors ────────────────────────────────────────────────────────────────
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"


def c(txt: str, *styles: str) -> str:
    return "".join(styles) + txt + RESET


def _now() -> str:
    return time.strftime("%H:%M:%S")


def _info(message: str) -> None:
    print(c(f"[{_now()}] ", DIM) + c("i ", FG_CYAN, BOLD) + message)


def _ok(message: str) -> None:
    print(c(f"[{_now()}] ", DIM) + c("OK ", FG_GREEN, BOLD) + message)


def _warn(message: str) -> None:
    print(c(f"[{_now()}] ", DIM) + c("! ", FG_YELLOW, BOLD) + c(message, FG_YELLOW))


def _err(message: str) -> None:
    print(c(f"[{_now()}] ", DIM) + c("X ", FG_RED, BOLD) + message)


# ── Helpers ───────────────────────────────────────────────────────────────────

def extract_port(cmd: List[str]) -> Optional[int]:
    """Return the value following ``--port``/``--server.port`` in ``cmd``, if any."""
    for flag in PORT_FLAGS:
        if flag in cmd:
            idx = cmd.index(flag)
            if idx + 1 < len(cmd) and cmd[idx + 1].isdigit():
                return int(cmd[idx + 1])
    return None


def replace_port(cmd: List[str], new_port: int) -> List[str]:
    out = cmd[:]
    for flag in PORT_FLAGS:
        if flag in out:
            idx = out.index(flag)
            if idx + 1 < len(out):
                out[idx + 1] = str(new_port)
    return out


def replace_port_in_urls(urls: List[str], old: int, new: int) -> List[str]:
    return [u.replace(f":{old}/", f":{new}/") for u in urls]


def port_in_use(port: int, host: str = "0.0.0.0") -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError:
            return True
    return False


def url_ok(url: str, timeout: float = 1.5) -> bool:
    try:
        with urllib.request.urlopen(url, timeout=timeout) as resp:
            return 200 <= resp.status < 300
    except (urllib.error.URLError, OSError):
        return False


def load_services(cfg: Dict[str, Any], only: Optional[str] = None) -> List[Dict[str, Any]]:
    """Normalize ``servers.json`` entries, adding ``key`` and ``port``."""
    result: List[Dict[str, Any]] = []
    for key, svc in cfg.get("services", {}).items():
        if only and key != only:
            continue
        service = dict(svc)
        service["key"] = key
        service["port"] = extract_port(service.get("cmd", []))
        result.append(service)
    return result


# ── Launch & Health ────────────────────────────────────────────────────────────
SPINNER = "|/-\\"


def _free_port(key: str, port: int, steps: int) -> Optional[int]:
    if not port_in_use(port):
        return port
    for step in range(1, steps + 1):
        if not port_in_use(port + step):
            _warn(f"[{key}] Port {port} is busy -> switched to {port + step}")
            return port + step
    _err(f"[{key}] Port {port} is busy and no free port was found nearby.")
    return None


def _wait_healthy(key: str, urls: List[str], timeout: int) -> bool:
    for url in urls:
        for i in range(timeout):
            if url_ok(url):
                print()
                _ok(f"[{key}] Healthy @ {url}")
                return True
            frame = SPINNER[i % len(SPINNER)]
            print(
                c(f"\r{frame} ", FG_YELLOW, BOLD) + c(f"waiting {key}... {i + 1}s/{timeout}s", FG_YELLOW),
                end="",
                flush=True,
            )
            time.sleep(1)
    print()
    return False


def start_service(svc: Dict[str, Any], ports: Dict[str, int], port_bump: int) -> Tuple[Optional[subprocess.Popen], Optional[int]]:
    key = svc["key"]
    cmd = list(svc["cmd"])
    health = list(svc.get("health", []))
    port = svc.get("port")

    if port:
        final = _free_port(key, port, port_bump)
        if final is None:
            return None, None
        if final != port:
            cmd = replace_port(cmd, final)
            health = replace_port_in_urls(health, port, final)
        port = final

    env = dict(os.environ)
    for name, value in svc.get("env", {}).items():
        env[name] = value.format(**{f"{k}_port": v for k, v in ports.items()})

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = (LOG_DIR / f"{key}.log").open("ab", buffering=0)
    cwd = ROOT / svc.get("cwd", ".")
    _info(f"[{key}] Starting: {sys.executable} {' '.join(cmd)} (cwd={cwd})")
    proc = subprocess.Popen([sys.executable] + cmd, cwd=str(cwd), env=env, stdout=log_file, stderr=log_file)

    start = time.time()
    timeout = int(svc.get("health_timeout", 120))
    if not _wait_healthy(key, health, timeout):
        _err(f"[{key}] Failed to become healthy within {timeout}s (see logs/{key}.log).")
        proc.terminate()
        return None, None

    _info(f"[{key}] Ready in {int(time.time() - start)}s.")
    return proc, port


def stop_all(procs: Dict[str, subprocess.Popen]) -> None:
    for proc in procs.values():
        if proc.poll() is None:
            proc.terminate()


# ── Main ───────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    if not SERVERS_JSON.exists():
        _err(f"servers.json not found: {SERVERS_JSON}")
        sys.exit(1)
    try:
        cfg = json.loads(SERVERS_JSON.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        _err(f"Invalid servers.json: {exc}")
        sys.exit(1)

    print(c(cfg.get("project", "AI Showcase"), FG_CYAN, BOLD))
    print(c("─" * 60, FG_CYAN))

    procs: Dict[str, subprocess.Popen] = {}
    # declared ports, replaced by the final (possibly bumped) ones as services start
    ports: Dict[str, int] = {s["key"]: s["port"] for s in load_services(cfg) if s["port"]}
    for svc in load_services(cfg, args.only):
        proc, port = start_service(svc, ports, args.port_bump)
        if proc is None:
            _err("Aborting launch due to previous errors.")
            stop_all(procs)
            sys.exit(1)
        procs[svc["key"]] = proc
        if port:
            ports[svc["key"]] = port

    ui_port = ports.get("streamlit")
    if ui_port:
        url = f"http://127.0.0.1:{ui_port}"
        _info(f"Streamlit UI at {url}")
        if not args.no_open:
            webbrowser.open_new_tab(url)

    print(c("\nAll services are up. Press CTRL+C to stop.\n", FG_GREEN, BOLD))
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print(c("\nStopping services...", FG_RED, BOLD))
        stop_all(procs)
        print(c("Bye.", FG_GREEN, BOLD))


if __name__ == "__main__":
    main()
