"""Forbidden-domain index built over canonical domains."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator

import structlog

from .domain import Domain

log = structlog.get_logger()


def _minimal_cover(domains: list[Domain]) -> tuple[Domain, ...]:
    """Drop every domain already covered by an earlier retained ancestor.

    ``domains`` must be sorted. Each candidate is compared only with the last
    retained domain: after sorting, an ancestor always precedes its whole
    run of descendants.
    """
    retained: list[Domain] = []
    for domain in domains:
        if retained and domain.is_subdomain_of(retained[-1]):
            continue
        retained.append(domain)
    return tuple(retained)


class DomainChecker:
    """Answers "is this domain (or any of its ancestors) forbidden?".

    The index is built once from the forbidden domains and never changes
    afterwards, so a single instance may be queried from several threads.
    """

    def __init__(self, forbidden: Iterable[Domain]) -> None:
        domains = sorted(forbidden)
        self._domains = _minimal_cover(domains)
        log.debug("index_built", read=len(domains), retained=len(self._domains))

    @property
    def domains(self) -> tuple[Domain, ...]:
        """The minimal covering set, sorted."""
        return self._domains

    def is_forbidden(self, domain: Domain) -> bool:
        # The only stored domain that can cover ``domain`` is the greatest one
        # not after it.
        pos = bisect_right(self._domains, domain)
        return pos > 0 and domain.is_subdomain_of(self._domains[pos - 1])

    def __contains__(self, domain: object) -> bool:
        return isinstance(domain, Domain) and self.is_forbidden(domain)

    def __iter__(self) -> Iterator[Domain]:
        return iter(self._domains)

    def __len__(self) -> int:
        return len(self._domains)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainChecker):
            return NotImplemented
        return self._domains == other._domains

    def __repr__(self) -> str:
        return f"DomainChecker({[str(d) for d in self._domains]!r})"


def build_index(domains: Iterable[Domain]) -> DomainChecker:
    """Build the forbidden-domain index from canonical domains."""
    return DomainChecker(domains)
