"""Core configuration for reclaimspace."""
