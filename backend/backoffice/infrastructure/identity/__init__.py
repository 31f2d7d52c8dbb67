from .oauth_session_provider import OAuthUserInfoSessionProvider

__all__ = ["OAuthUserInfoSessionProvider"]
