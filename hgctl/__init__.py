"""hgctl - service controller for the helium_gateway daemon."""

__version__ = "0.1.0"
