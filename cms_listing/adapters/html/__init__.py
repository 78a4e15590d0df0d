from cms_listing.adapters.html.soup_document import SoupDocument

__all__ = ["SoupDocument"]
