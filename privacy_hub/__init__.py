"""Privacy Hub - versioned multilingual legal notices for a static site."""

__version__ = "0.1.0"


# Lazy imports to keep `import privacy_hub` cheap for the CLI
def __getattr__(name: str):
    if name == "VersionArchiver":
        from privacy_hub.versioning.archiver import VersionArchiver

        return VersionArchiver
    if name == "DocumentResolver":
        from privacy_hub.catalog.resolver import DocumentResolver

        return DocumentResolver
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["VersionArchiver", "DocumentResolver", "__version__"]
