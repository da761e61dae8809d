"""Adapters: command-line entry points and user interfaces."""
