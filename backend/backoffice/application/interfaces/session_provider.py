"""Abstract interface for the external identity provider."""

from abc import ABC, abstractmethod

from backoffice.domain.entities import Actor


class SessionProvider(ABC):
    """Resolves a bearer token into the authenticated actor, if any."""

    @abstractmethod
    async def get_session(self, token: str | None) -> Actor | None:
        """Return the actor behind ``token`` or ``None`` when there is no session."""
        ...
