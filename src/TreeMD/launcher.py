"""Start the Streamlit preview app and open it in the browser."""

from __future__ import annotations

import argparse
import logging
import threading
import time
import webbrowser
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8501
APP_PATH = Path(__file__).resolve().parent / "app.py"


def _wait_and_open_browser(url: str, attempts: int = 30) -> bool:
    """Poll *url* until the server answers, then open the browser."""
    for _ in range(attempts):
        try:
            resp = requests.get(url, timeout=2)
        except requests.RequestException:
            resp = None
        if resp is not None and resp.status_code == 200:
            webbrowser.open(url)
            return True
        time.sleep(1)
    logger.warning("Preview server did not answer at %s", url)
    return False


def parse_preview_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="treemd preview")
    p.add_argument("--port", type=int, default=DEFAULT_PORT)
    p.add_argument(
        "--no-browser",
        action="store_true",
        help="do not open a browser window",
    )
    return p.parse_args(argv)


def launch_preview(argv: list[str] | None = None) -> None:
    args = parse_preview_args(argv or [])
    url = f"http://localhost:{args.port}"

    # Force production mode before bootstrap.run() reads the config, so the
    # port flag is honoured outside site-packages too.
    from streamlit import config as _stconfig

    _stconfig.get_config_options(
        force_reparse=True,
        options_from_flags={"global.developmentMode": False},
    )

    from streamlit.web import bootstrap

    if not args.no_browser:
        threading.Thread(
            target=_wait_and_open_browser, args=(url,), daemon=True
        ).start()

    bootstrap.run(
        str(APP_PATH),
        is_hello=False,
        args=[],
        flag_options={
            "global.developmentMode": False,
            "server.headless": True,
            "server.port": args.port,
            "browser.gatherUsageStats": False,
        },
    )
