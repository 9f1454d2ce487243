"""Shared HTTP session for api.weather.gov requests."""

from __future__ import annotations

import threading
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import NWS_RETRIES, NWS_USER_AGENT

NWS_HEADERS = {
    "User-Agent": NWS_USER_AGENT,
    "Accept": "application/geo+json",
}

_session: Optional[requests.Session] = None
_session_lock = threading.Lock()


def build_session(retries: int = NWS_RETRIES) -> requests.Session:
    session = requests.Session()
    session.headers.update(NWS_HEADERS)
    retry = Retry(
        total=retries,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry, pool_maxsize=16)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def get_session() -> requests.Session:
    """Return the process-wide session, creating it on first use."""
    global _session
    with _session_lock:
        if _session is None:
            _session = build_session()
        return _session
