"""HTTP adapter exports."""

from .client import HTTPClient, HTTPResult, RequestsHTTPClient

__all__ = ["HTTPClient", "HTTPResult", "RequestsHTTPClient"]
