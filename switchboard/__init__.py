"""Switchboard: multi-engine intent recognition and routing.

Classifies free-text customer messages for a multi-tenant scheduling
service by combining weighted engine votes, then turns the winning
intent into a routing decision.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
