"""HTTP server for venue-trust using stdlib http.server.

Routes:
    POST   /trust-score         — compute a venue trust score
    POST   /incidents/impact    — rank incidents by impact
    POST   /reviews/summary     — summarize a review collection
    POST   /incidents/summary   — summarize an incident collection
    GET    /levels              — trust level thresholds and descriptions
    GET    /health              — health check

Every scoring request carries an explicit ``now``.

Usage:
    python -m venue_trust.server.app --port 8080
    python -m venue_trust.server.app --host 127.0.0.1 --port 9000
"""
from __future__ import annotations

import argparse
import json
import logging
import urllib.parse
from http.server import BaseHTTPRequestHandler, HTTPServer

from venue_trust.server import routes
from venue_trust.trust.policy import ScoringPolicy
from venue_trust.trust.scorer import TrustScorer

logger = logging.getLogger(__name__)


class TrustScoreServer(HTTPServer):
    """HTTPServer that carries the TrustScorer shared by all requests."""

    def __init__(
        self,
        server_address: tuple[str, int],
        scorer: TrustScorer,
    ) -> None:
        super().__init__(server_address, VenueTrustHandler)
        self.scorer = scorer


class VenueTrustHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the venue-trust server.

    All request bodies and responses use JSON.
    """

    server: TrustScoreServer

    def log_message(self, format: str, *args: object) -> None:
        """Override to route access logs through the Python logging system."""
        logger.debug(format, *args)

    # ── GET ───────────────────────────────────────────────────────────────────

    def do_GET(self) -> None:
        """Handle all GET requests by routing on the URL path."""
        path = urllib.parse.urlparse(self.path).path.rstrip("/")

        if path == "/health":
            status, data = routes.handle_health()
        elif path == "/levels":
            status, data = routes.handle_levels(self.server.scorer)
        else:
            status, data = 404, {"error": "Not found", "detail": f"No route for GET {path}"}
        self._send_json(status, data)

    # ── POST ──────────────────────────────────────────────────────────────────

    def do_POST(self) -> None:
        """Handle all POST requests by routing on the URL path."""
        path = urllib.parse.urlparse(self.path).path.rstrip("/")

        body = self._read_json_body()
        if body is None:
            return

        scorer = self.server.scorer
        if path == "/trust-score":
            status, data = routes.handle_trust_score(body, scorer)
        elif path == "/incidents/impact":
            status, data = routes.handle_incident_impact(body, scorer)
        elif path == "/reviews/summary":
            status, data = routes.handle_review_summary(body)
        elif path == "/incidents/summary":
            status, data = routes.handle_incident_summary(body, scorer)
        else:
            status, data = 404, {"error": "Not found", "detail": f"No route for POST {path}"}
        self._send_json(status, data)

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _send_json(self, status: int, data: dict[str, object]) -> None:
        """Serialize *data* to JSON and send an HTTP response with *status*."""
        body = json.dumps(data, default=str).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _read_json_body(self) -> dict[str, object] | None:
        """Read and parse the JSON request body.

        Returns None (and sends a 400 error response) if parsing fails or
        the body is not a JSON object.
        """
        content_length = int(self.headers.get("Content-Length", 0))
        if content_length == 0:
            return {}

        raw = self.rfile.read(content_length)
        try:
            parsed = json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            self._send_json(400, {"error": "Invalid JSON", "detail": str(exc)})
            return None
        if not isinstance(parsed, dict):
            self._send_json(
                400, {"error": "Invalid JSON", "detail": "Request body must be an object."}
            )
            return None
        return parsed


def create_server(
    host: str = "0.0.0.0",
    port: int = 8080,
    policy: ScoringPolicy | None = None,
) -> TrustScoreServer:
    """Create (but do not start) the venue-trust HTTP server.

    Parameters
    ----------
    host:
        Bind address (default ``"0.0.0.0"`` — all interfaces).
    port:
        TCP port to listen on (default 8080).
    policy:
        Scoring policy for every request. Defaults to the standard policy.

    Returns
    -------
    TrustScoreServer
        A configured server instance ready to call ``serve_forever()`` on.
    """
    server = TrustScoreServer((host, port), TrustScorer(policy))
    logger.info("venue-trust server created at http://%s:%d", host, port)
    return server


def run_server(
    host: str = "0.0.0.0",
    port: int = 8080,
    policy: ScoringPolicy | None = None,
) -> None:
    """Create and run the venue-trust HTTP server (blocking)."""
    server = create_server(host=host, port=port, policy=policy)
    logger.info("Serving venue-trust on http://%s:%d, press Ctrl-C to stop", host, port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down venue-trust server.")
    finally:
        server.server_close()


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="venue-trust HTTP server",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    parser.add_argument("--port", type=int, default=8080, help="TCP port")
    parser.add_argument(
        "--policy-file",
        default=None,
        help="Path to a JSON scoring policy",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


if __name__ == "__main__":
    args = _build_arg_parser().parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level))
    loaded_policy = None
    if args.policy_file:
        with open(args.policy_file, encoding="utf-8") as fh:
            loaded_policy = ScoringPolicy.model_validate_json(fh.read())
    run_server(host=args.host, port=args.port, policy=loaded_policy)
