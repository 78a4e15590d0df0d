from cms_listing.adapters.webflow.client import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_VERSION,
    WebflowClient,
)

__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_API_VERSION",
    "WebflowClient",
]
