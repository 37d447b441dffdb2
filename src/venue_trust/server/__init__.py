"""HTTP server mode for venue-trust.

Provides a lightweight stdlib-based JSON API over the trust engine
without requiring any additional web framework dependencies.
"""
from __future__ import annotations

from venue_trust.server.app import (
    TrustScoreServer,
    VenueTrustHandler,
    create_server,
    run_server,
)

__all__ = ["TrustScoreServer", "VenueTrustHandler", "create_server", "run_server"]
