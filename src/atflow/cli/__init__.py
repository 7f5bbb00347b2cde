"""atflow command line interface."""
