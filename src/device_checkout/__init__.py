"""Device Checkout Registry: track which user holds which device."""

__version__ = "1.0.0"
