"""Configuration, logging and file helpers shared by the ``physics`` packages."""
