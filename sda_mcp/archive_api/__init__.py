"""Sudan Digital Archive API client and models."""

from .client import API_KEY_HEADER, RawResponse, SdaApiClient

__all__ = ["API_KEY_HEADER", "RawResponse", "SdaApiClient"]
