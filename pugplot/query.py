# pugplot/query.py
import re
from typing import Iterable, List, Optional
from urllib.parse import quote

import requests

from .errors import FetchError
from .settings import Settings

_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)")


def is_numeric_name(arg: str) -> bool:
    """True for arguments that cannot be compound names (digits or a plain decimal)."""
    arg = arg.strip()
    if not arg or arg.isnumeric():
        return True
    return _DECIMAL.fullmatch(arg) is not None


def filter_names(args: Iterable[str]) -> List[str]:
    """Drop numeric arguments, keeping the order of the rest."""
    return [arg for arg in args if not is_numeric_name(arg)]


def build_url(name: str, settings: Optional[Settings] = None) -> str:
    """
    Build the PUG REST lookup URL for a compound name:
    {base_url}/{urlencoded-name}{suffix}
    """
    settings = settings or Settings()
    base = settings.base_url.rstrip("/")
    return f"{base}/{quote(name, safe='')}{settings.suffix}"


class PubChemClient:
    """
    Blocking GET client for the compound-by-name endpoint.
    A session may be injected (tests pass a fake one).
    """

    def __init__(self, settings: Optional[Settings] = None, session=None):
        self.settings = settings or Settings()
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def fetch(self, name: str) -> bytes:
        """Return the raw response body for `name`, or raise FetchError."""
        url = build_url(name, self.settings)
        try:
            r = self.session.get(url, timeout=self.settings.timeout)
        except requests.RequestException as e:
            raise FetchError(name, f"request for {name!r} failed: {e}") from e

        if not r.ok:
            raise FetchError(
                name,
                f"request for {name!r} returned HTTP {r.status_code}",
                status=r.status_code,
            )
        return r.content

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
