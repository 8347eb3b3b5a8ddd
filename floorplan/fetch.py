"""Asset-fetch collaborator: download icon bytes over HTTP."""
import logging
from typing import Optional

import requests

from floorplan.constants import FETCH_TIMEOUT

logger = logging.getLogger(__name__)


class AssetFetchFailure(RuntimeError):
    """Non-success response (status_code set) or transport error (status_code None)."""

    def __init__(self, url: str, status_code: Optional[int], reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            msg = f"fetch {url}: {reason}"
        else:
            msg = f"fetch {url}: HTTP {status_code} {reason}".rstrip()
        super().__init__(msg)


def fetch_asset(url: str, timeout: float = FETCH_TIMEOUT) -> bytes:
    """GET *url* and return the body; raise AssetFetchFailure otherwise."""
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise AssetFetchFailure(url, None, str(exc)) from exc
    if not resp.ok:
        raise AssetFetchFailure(url, resp.status_code, resp.reason or "")
    logger.debug("fetched %s (%d bytes)", url, len(resp.content))
    return resp.content
