from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from concurrent.futures import Executor
from typing import TypeVar

from arpscout.config import Settings
from arpscout.errors import FormatError
from arpscout.models import (
    HOSTNAME_FALLBACK,
    VENDOR_FALLBACK,
    DeviceRecord,
    SyncOutcome,
)

from .executor import lookup_executor
from .hostname import HostnameResolver
from .reachability import ReachabilityProbe
from .registry import DeviceRegistry
from .vendor import VendorLookupClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PARALLEL_SYNCS = 50


def _settle(result: T | BaseException, fallback: T, lookup: str, ip: str) -> T:
    if isinstance(result, FormatError):
        logger.warning("Skipping %s lookup for %s: %s", lookup, ip, result)
        return fallback
    if isinstance(result, Exception):
        logger.warning("%s lookup for %s failed: %s", lookup.capitalize(), ip, result)
        return fallback
    if isinstance(result, BaseException):
        raise result
    return result


class EnrichmentOrchestrator:
    """Fills in host name, vendor and reachability for device records."""

    def __init__(
        self,
        resolver: HostnameResolver,
        vendors: VendorLookupClient,
        probe: ReachabilityProbe,
        registry: DeviceRegistry | None = None,
        parallel_syncs: int = DEFAULT_PARALLEL_SYNCS,
        executor: Executor | None = None,
    ) -> None:
        self._resolver = resolver
        self._vendors = vendors
        self._probe = probe
        self._registry = registry
        self._parallel_syncs = parallel_syncs
        # owned: shut down in close()
        self._executor = executor

    @classmethod
    def from_settings(
        cls, settings: Settings, registry: DeviceRegistry | None = None
    ) -> EnrichmentOrchestrator:
        enrichment = settings.enrichment
        executor = lookup_executor(enrichment.parallel_syncs)
        return cls(
            resolver=HostnameResolver(enrichment.dns_timeout, executor=executor),
            vendors=VendorLookupClient.from_config(settings.vendor, executor=executor),
            probe=ReachabilityProbe(enrichment.probe_timeout, executor=executor),
            registry=registry,
            parallel_syncs=enrichment.parallel_syncs,
            executor=executor,
        )

    def close(self) -> None:
        self._vendors.close()
        if self._executor is not None:
            # lookups past their timeout may still hold a worker
            self._executor.shutdown(wait=False, cancel_futures=True)

    async def sync(self, record: DeviceRecord) -> DeviceRecord:
        """Enrich ``record`` in place unless it is already synced."""
        async with record.lock:
            if record.is_synced:
                return record

            ip = record.ip_address
            host_result, vendor_result, probe_result = await asyncio.gather(
                self._resolver.resolve(ip),
                self._vendors.lookup_vendor(record.mac_address),
                self._probe.probe(ip),
                return_exceptions=True,
            )
            record.apply_enrichment(
                host_name=_settle(host_result, HOSTNAME_FALLBACK, "hostname", ip),
                vendor=_settle(vendor_result, VENDOR_FALLBACK, "vendor", ip),
                is_available=_settle(probe_result, False, "reachability", ip),
            )

        if self._registry is not None and not self._registry.is_current(record):
            logger.debug("Enriched %s after its snapshot was replaced", ip)
        logger.debug(
            "%s: host=%s vendor=%s available=%s state=%s",
            ip,
            record.host_name,
            record.vendor,
            record.is_available,
            record.sync_state.value,
        )
        return record

    async def sync_all(
        self, records: Iterable[DeviceRecord] | None = None
    ) -> list[SyncOutcome]:
        """Enrich every record and wait for all of them to finish.

        Defaults to the registry's current records. Outcomes come back in
        input order; a failure is captured on its outcome instead of raised.
        """
        if records is None:
            if self._registry is None:
                raise ValueError("No records given and no registry to read from")
            records = self._registry.records
        targets = list(records)
        semaphore = asyncio.Semaphore(self._parallel_syncs)

        async def _bounded(record: DeviceRecord) -> DeviceRecord:
            async with semaphore:
                return await self.sync(record)

        results = await asyncio.gather(
            *(_bounded(record) for record in targets), return_exceptions=True
        )

        outcomes: list[SyncOutcome] = []
        for record, result in zip(targets, results):
            if isinstance(result, BaseException):
                logger.warning("Enrichment of %s failed: %s", record.ip_address, result)
                outcomes.append(SyncOutcome(record, result))
            else:
                outcomes.append(SyncOutcome(result))

        synced = sum(1 for outcome in outcomes if outcome.record.is_synced)
        logger.info("Enrichment finished: %d/%d device(s) synced", synced, len(outcomes))
        return outcomes
