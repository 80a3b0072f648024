"""Structural sanity checks for Kubernetes-style YAML manifests."""

__version__ = "0.1.0"
