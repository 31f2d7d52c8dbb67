"""OAuth / OpenID Connect identity adapter, implements the SessionProvider interface.

The bearer token sent by the browser is forwarded to the issuer's
``/userinfo`` endpoint; a successful answer yields the actor's email and
nickname. Anything else means there is no usable session.
"""

import logging

import httpx

from backoffice.application.interfaces import SessionProvider
from backoffice.domain.entities import Actor

logger = logging.getLogger(__name__)


class OAuthUserInfoSessionProvider(SessionProvider):
    """Infrastructure adapter for the hosted identity provider.

    Uses httpx; an injected client is reused, otherwise a short-lived
    client is opened per lookup.
    """

    def __init__(
        self,
        issuer_base_url: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._issuer_base_url = issuer_base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def userinfo_url(self) -> str:
        return f"{self._issuer_base_url}/userinfo"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def get_session(self, token: str | None) -> Actor | None:
        if not token:
            return None

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.get(
                self.userinfo_url,
                headers={"Authorization": f"Bearer {token}", "Accept": "application/json"},
            )
            if response.status_code != 200:
                logger.info("Identity provider rejected token (HTTP %d)", response.status_code)
                return None
            data = response.json()
        except httpx.HTTPError as exc:
            logger.warning("Identity provider unreachable: %s", exc)
            return None
        except ValueError:
            logger.warning("Identity provider returned a non-JSON userinfo body")
            return None
        finally:
            if should_close:
                await client.aclose()

        email = data.get("email")
        if not email:
            logger.warning("Userinfo response carries no email; treating as anonymous")
            return None
        nickname = data.get("nickname") or data.get("name") or email.split("@", 1)[0]
        return Actor(email=email, nickname=nickname)
