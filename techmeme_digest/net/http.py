"""HTTP helpers providing sessions that never retry."""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def single_attempt_session() -> requests.Session:
    """Create a requests session that makes exactly one attempt per call.

    A failed request surfaces immediately to the caller; the run treats it
    as fatal instead of backing off.
    """

    session = requests.Session()
    retry = Retry(total=0, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session
