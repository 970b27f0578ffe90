"""Chaum-Pedersen zero-knowledge password authentication: protocol, in-memory service and client."""

__version__ = "0.1.0"
__all__ = ["client", "server", "zkp"]