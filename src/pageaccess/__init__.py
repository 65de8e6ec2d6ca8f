"""pageaccess - admin access-override service for the affiliate dashboard."""

__version__ = "0.1.0"
