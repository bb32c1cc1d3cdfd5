"""reclaimspace - find and remove reclaimable development folders."""

__version__ = "0.1.0"
