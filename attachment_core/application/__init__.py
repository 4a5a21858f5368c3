"""Application layer for attachment core.

Orchestrates the domain services against injected ports: the display
resource cache, the revocation sweeper and status-check error reporting.
"""
