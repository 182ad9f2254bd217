"""
Fire-and-forget beacon used when the client is going away.

Mirrors a browser beacon: an empty POST, no custom headers (so no bearer
credential), no retry and no response handling.
"""

import logging
import threading

import requests

logger = logging.getLogger(__name__)


class ThreadBeacon:
    def __init__(self, timeout: float = 5.0, session: requests.Session | None = None) -> None:
        self.timeout = timeout
        self.http = session or requests.Session()

    def send(self, url: str) -> None:
        threading.Thread(target=self._post, args=(url,), daemon=True).start()

    def _post(self, url: str) -> None:
        try:
            self.http.post(
                url,
                data=b"",
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.debug("Beacon to %s not delivered: %s", url, exc)
