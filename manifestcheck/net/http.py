"""HTTP helpers for the single best-effort schema fetch."""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from manifestcheck import __version__

USER_AGENT = f"manifestcheck/{__version__}"


def http_session(user_agent: str = USER_AGENT) -> requests.Session:
    """Create a requests session that issues each request exactly once.

    Retries are disabled at the urllib3 layer so a failed connect, read or
    status surfaces immediately to the caller.
    """

    session = requests.Session()
    retry = Retry(
        total=0,
        connect=0,
        read=0,
        status=0,
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
    return session
