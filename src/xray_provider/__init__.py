"""xray-provider: declarative Xray resources over the Xray REST API."""

__version__ = "0.1.0"
