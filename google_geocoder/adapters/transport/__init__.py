"""Transport adapters - Implementations of TransportPort.

Available implementations:
- RequestsTransport: blocking GET over a requests.Session
"""

from .requests_transport import RequestsTransport

__all__ = ["RequestsTransport"]
