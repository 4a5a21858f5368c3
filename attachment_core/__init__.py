"""
Attachment Core - wire attachment normalization and display resource caching.

Takes an optionally-wrapped binary attachment returned over a remote-procedure
boundary and turns it into something rendering code can validate, hash, cache
and display through revocable host resources.

Layers:
- domain: pure, total decode/canonicalize/validate/hash/assemble functions
- application: the display resource cache and its ports
- infrastructure: display hosts, observability, metrics
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
