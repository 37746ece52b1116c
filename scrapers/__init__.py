"""Plugin system for catalog providers.

Plugin architecture for catalog sources:
- loader: Plugin discovery and loading system
- plugins: Actual provider implementations
"""

from scrapers import loader

__all__ = ["loader"]
