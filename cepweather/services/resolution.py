from __future__ import annotations

import logging
from typing import Optional

from ..abstractions import LocationResolver, TemperatureResolver
from ..cep import normalize_cep
from ..context import CallContext
from ..conversion import to_triple
from ..entities import TemperatureTriple


class ResolutionService:
    """Resolve a raw CEP into a :class:`TemperatureTriple`.

    The two lookups run strictly in sequence since the temperature query is
    built from the resolved location. Resolver errors are propagated as-is;
    mapping them to transport responses is the caller's job.
    """

    def __init__(
        self,
        location_resolver: LocationResolver,
        temperature_resolver: TemperatureResolver,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.location_resolver = location_resolver
        self.temperature_resolver = temperature_resolver
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def resolve(self, raw_cep: object, context: Optional[CallContext] = None) -> TemperatureTriple:
        context = context or CallContext.background()
        cep = normalize_cep(raw_cep)

        location = self.location_resolver.lookup(cep, context)
        self._log.debug("CEP %s resolved to %s", cep, location)

        celsius = self.temperature_resolver.current_celsius(location, context)
        triple = to_triple(celsius)
        self._log.debug("Temperature for %s: %s", cep, triple)
        return triple


__all__ = ["ResolutionService"]
