"""HTTP middleware for the PC Builder backend."""

from pcbuilder.middleware.cors import CORSHeadersMiddleware

__all__ = ["CORSHeadersMiddleware"]
