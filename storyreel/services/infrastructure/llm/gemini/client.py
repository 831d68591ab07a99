"""
Gemini client factory

Every generator call builds its own ``google.genai.Client`` from a freshly
resolved API key; no client instance is shared between calls. The factory is
injectable so tests can hand generators a fake client without touching the
network.

Usage:
    factory = GeminiClientFactory()
    api_key = factory.resolve_api_key()
    client = factory.create_client(api_key)
    response = client.models.generate_content(model="gemini-2.5-flash", contents="Hello!")
"""

from typing import Any, Callable, Optional

from google import genai

from storyreel.core import CredentialResolver, get_logger

logger = get_logger(__name__, component="gemini_client")

ClientBuilder = Callable[[str], Any]


def _build_genai_client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


class GeminiClientFactory:
    """Resolves credentials and constructs Gemini clients on demand."""

    def __init__(
        self,
        resolver: Optional[CredentialResolver] = None,
        client_builder: Optional[ClientBuilder] = None,
    ):
        """
        Args:
            resolver: Credential resolver (defaults to environment + local settings)
            client_builder: Callable taking an API key and returning a client
                exposing ``models`` and ``operations``
        """
        self.resolver = resolver or CredentialResolver()
        self._client_builder = client_builder or _build_genai_client

    def resolve_api_key(self) -> str:
        """Resolve the key; raises MissingCredentialError before any network call."""
        return self.resolver.resolve()

    def create_client(self, api_key: Optional[str] = None) -> Any:
        api_key = api_key or self.resolve_api_key()
        logger.debug("Creating Gemini client")
        return self._client_builder(api_key)


def create_client(api_key: Optional[str] = None) -> Any:
    """
    Create a Gemini client (convenience function).

    Args:
        api_key: Optional API key; resolved from environment/settings when omitted
    """
    return GeminiClientFactory().create_client(api_key)
