"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so callers can get a
ready display cache without knowing which adapters back it.
"""
