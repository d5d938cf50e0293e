"""
core/http.py -- Outbound HTTP client construction.

Every outbound client is built from an explicit HttpClientOptions value rather
than by mutating a shared client after the fact. The options come from
Settings: TLS verification follows Settings.http_verify_tls (off only for
APP_ENV=local) and every request gets Settings.http_timeout unless the caller
passes its own.

Two client flavours are supported:
  requests  -- build_session() returns a configured requests.Session.
  httpx     -- client_kwargs() returns the keyword arguments that httpx (and
               therefore authlib's starlette client) accepts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from core.config import Settings, get_settings

logger = logging.getLogger("accountdesk.http")

# Provider and API endpoints redirect at most once or twice; 3 hops is generous and
# limits SSRF via redirect chains.
_MAX_REDIRECTS = 3


@dataclass(frozen=True)
class HttpClientOptions:
    verify: bool = True
    timeout: float = 30.0


def options_from_settings(settings: Optional[Settings] = None) -> HttpClientOptions:
    """Build HttpClientOptions from Settings (the cached singleton by default)."""
    cfg = settings or get_settings()
    return HttpClientOptions(verify=bool(cfg.http_verify_tls), timeout=cfg.http_timeout)


class _TimeoutSession(requests.Session):
    """requests.Session that applies a default timeout to every request.

    requests has no session-level timeout; without this a forgotten timeout=
    argument blocks forever on an unresponsive host.
    """

    def __init__(self, timeout: float) -> None:
        super().__init__()
        self.default_timeout = timeout

    def request(self, method, url, **kwargs):  # type: ignore[override]
        kwargs.setdefault("timeout", self.default_timeout)
        return super().request(method, url, **kwargs)


def build_session(options: Optional[HttpClientOptions] = None) -> requests.Session:
    """Return a requests.Session configured from the given options.

    Usage:
        session = build_session(options_from_settings())
        resp = session.get("https://example.com/api")
    """
    opts = options or options_from_settings()
    session = _TimeoutSession(opts.timeout)
    session.verify = opts.verify
    session.max_redirects = _MAX_REDIRECTS
    if not opts.verify:
        logger.debug("Built HTTP session with TLS verification disabled")
    return session


def client_kwargs(options: Optional[HttpClientOptions] = None) -> dict[str, Any]:
    """Return httpx client keyword arguments for the given options."""
    opts = options or options_from_settings()
    return {"verify": opts.verify, "timeout": opts.timeout}
