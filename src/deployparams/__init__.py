"""Deployment parameter reconciliation for Bicep templates."""

__version__ = "0.1.0"
