"""Health-check payload for the HTTP API."""

from simulator import __version__
from simulator.schemas.ping import PingResponse


def build_ping_response() -> PingResponse:
    """Static pong plus the running package version."""
    return PingResponse(message="pong", version=__version__)
