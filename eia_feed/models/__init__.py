"""Series data models."""

from .series import Cadence, CadenceSpec, FetchDescriptor, Observation, SeriesBatch

__all__ = ["Cadence", "CadenceSpec", "FetchDescriptor", "Observation", "SeriesBatch"]
