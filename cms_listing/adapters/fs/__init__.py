from cms_listing.adapters.fs.filestore import OutputStore, read_document

__all__ = ["OutputStore", "read_document"]
