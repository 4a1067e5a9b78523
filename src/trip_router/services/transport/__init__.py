"""Transport catalog lookups and mode estimation."""

from .catalog import TransportCatalog
from .estimator import TransportEstimator

__all__ = ["TransportCatalog", "TransportEstimator"]
