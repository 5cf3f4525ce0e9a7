"""Driving adapters: command-line entry points and user interfaces."""

__all__ = []
