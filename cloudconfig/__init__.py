"""cloudconfig - interactive setup for the cloud config meta record."""
__version__ = "0.1.0"
