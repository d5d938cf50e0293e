"""
auth/oauth.py -- Authlib OAuth/OIDC provider registration.

build_oauth() returns a fresh authlib OAuth registry with every configured
provider registered. Only providers with both client ID and secret configured
get registered.

The HTTP client each provider uses is configured explicitly through
client_kwargs built from core.http.HttpClientOptions: timeout from
HTTP_TIMEOUT, TLS verification off only when APP_ENV=local. authlib forwards
these kwargs to the httpx client it creates for metadata discovery and token
exchange.

The authorization redirect and callback handling live in the host web
application; this module only declares the providers.

Supported providers:
  google -- Authorization code flow; OIDC discovery.

Layer rule: no imports from api/. Import from core/ is allowed.
"""

from __future__ import annotations

import logging
from typing import Optional

from authlib.integrations.starlette_client import OAuth

from core.config import Settings, get_settings
from core.http import HttpClientOptions, client_kwargs, options_from_settings

logger = logging.getLogger("accountdesk.auth.oauth")

GOOGLE_DISCOVERY_URL = "https://accounts.google.com/.well-known/openid-configuration"


def _google_configured(cfg: Settings) -> bool:
    return bool(cfg.google_client_id and cfg.google_client_secret)


def build_oauth(settings: Optional[Settings] = None, options: Optional[HttpClientOptions] = None) -> OAuth:
    """Return an OAuth registry with all configured providers registered.

    Args:
        settings: Settings to read client credentials from. Defaults to the
                  cached singleton.
        options:  HTTP client options for provider calls. Defaults to the
                  options derived from settings.
    """
    cfg = settings or get_settings()
    opts = options or options_from_settings(cfg)
    registry = OAuth()

    # Google -- OIDC discovery
    if _google_configured(cfg):
        registry.register(
            name="google",
            client_id=cfg.google_client_id,
            client_secret=cfg.google_client_secret,
            server_metadata_url=GOOGLE_DISCOVERY_URL,
            client_kwargs={"scope": "openid email profile", **client_kwargs(opts)},
        )
        logger.info("Google OAuth provider registered (verify_tls=%s, timeout=%.0fs)", opts.verify, opts.timeout)
    else:
        logger.debug("Google OAuth provider not configured")

    return registry


def get_enabled_providers(settings: Optional[Settings] = None) -> list[dict]:
    """Return {"name", "label"} metadata for every configured OAuth provider.

    Used by login pages to decide which provider buttons to render. Returns an
    empty list if no OAuth env vars are set.
    """
    cfg = settings or get_settings()
    providers: list[dict] = []
    if _google_configured(cfg):
        providers.append({"name": "google", "label": "Google"})
    return providers
