"""httpx client construction.

- One place for timeouts, headers, authentication and TLS policy, so every
  service talks to Ops Manager the same way.
- Tests bypass it and hand a `httpx.AsyncClient(transport=MockTransport(...))`
  straight to `Client`.
"""

from __future__ import annotations

import ssl

import httpx

from opsmngr.core.config import ClientSettings

MEDIA_TYPE = "application/json"


def build_verify(settings: ClientSettings) -> bool | ssl.SSLContext:
    """TLS verification policy: disabled, custom CA bundle or system default."""

    if settings.skip_verify:
        return False
    if settings.ca_cert_path is not None:
        return ssl.create_default_context(cafile=str(settings.ca_cert_path))
    return True


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create the `httpx.AsyncClient` shared by all services.

    Digest authentication is enabled only when both API key halves are
    configured; without them requests go out anonymously.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": MEDIA_TYPE,
    }
    if extra_headers:
        headers.update(extra_headers)

    auth: httpx.Auth | None = None
    if settings.has_credentials:
        auth = httpx.DigestAuth(settings.public_key or "", settings.private_key or "")

    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        auth=auth,
        verify=build_verify(settings),
    )
