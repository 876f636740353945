"""Parse the mount table, detect mount points and handle mount options."""

__version__ = "0.1.0"
__all__ = ["errors", "filters", "flags", "info", "mounted"]