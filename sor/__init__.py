"""Balancer Smart Order Router - route proposal in Python."""

from sor.routing.proposal import RouteProposer, SwapOptions

__version__ = "0.1.0"
__all__ = ["RouteProposer", "SwapOptions", "__version__"]
