"""Notice catalog - document tree layout, resolution and page collections."""

from privacy_hub.catalog.collections import notice_pages, project_pages
from privacy_hub.catalog.resolver import DocumentResolver

__all__ = ["DocumentResolver", "notice_pages", "project_pages"]
