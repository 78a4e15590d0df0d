# cms-listing-build: Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from cms_listing.core.ports.cms import CmsPort
from cms_listing.core.ports.document import DocumentTreePort

__all__ = [
    "CmsPort",
    "DocumentTreePort",
]
