from scrapers.loader import ProviderProtocol
from utils.exceptions import ProviderNotFoundError


class Repository:
    """Singleton registry of loaded catalog providers.

    A lookup convenience for callers that load providers by name; the host
    framework that instantiates providers and drives their calls lives
    outside this package.

    get for methods that return some value
    register should be called by a plugin's load function.
    """

    _instance = None

    def __init__(self) -> None:
        if not hasattr(self, "sources"):
            self.sources = {}

    def __new__(cls):
        if not Repository._instance:
            Repository._instance = super().__new__(cls)
        return Repository._instance

    def register(self, provider: ProviderProtocol) -> None:
        self.sources[provider.config.name] = provider

    def get_active_sources(self) -> list[str]:
        """Get list of currently registered provider names.

        Returns:
            List of provider names (e.g., ["AnimeApi"])
        """
        return sorted(self.sources.keys())

    def get_provider(self, name: str) -> ProviderProtocol:
        """Look up a registered provider class by name.

        Raises:
            ProviderNotFoundError: If no provider with that name is loaded
        """
        try:
            return self.sources[name]
        except KeyError:
            raise ProviderNotFoundError(f"Provider '{name}' is not loaded") from None

    def clear(self) -> None:
        """Forget every registered provider."""
        self.sources.clear()


rep = Repository()
