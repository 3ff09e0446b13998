"""Personal-finance calculations for the Cofrin app."""

__version__ = "0.1.0"
