"""Site generation glue: the external build step and template filters."""

from privacy_hub.site.builder import SiteBuildError, SiteBuilder

__all__ = ["SiteBuilder", "SiteBuildError"]
