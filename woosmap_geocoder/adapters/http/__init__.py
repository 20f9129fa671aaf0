"""HTTP adapters - Implementations of HttpTransportPort.

Available implementations:
- RequestsHttpTransport: requests.Session based transport
"""

from .requests_transport import RequestsHttpTransport

__all__ = ["RequestsHttpTransport"]
