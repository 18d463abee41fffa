"""Compute backends for the Welch test."""

from pywelch.welch.backends.cpu import CPUWelchBackend

__all__ = ["CPUWelchBackend"]
