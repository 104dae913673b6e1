"""Data files shipped with the package, loaded as module resources."""
