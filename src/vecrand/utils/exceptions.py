"""Custom exceptions for vecrand."""

from __future__ import annotations


class VecrandError(Exception):
    """Base exception for vecrand."""


class ConfigError(VecrandError):
    """Invalid or unreadable run configuration."""


class SamplingError(VecrandError):
    """Sampled output failed a distribution check."""
