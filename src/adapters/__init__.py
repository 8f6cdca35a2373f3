"""Adapters package: command-line entry points."""

__all__ = []
