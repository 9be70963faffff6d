"""Canonical domain names: reversed, dot-terminated label sequences.

``mail.google.com`` is stored as ``com.google.mail.`` so that a sub-domain
check becomes a plain prefix test and sorting keeps every domain next to its
descendants.
"""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "."


class InvalidDomainError(ValueError):
    """Raised when a raw domain string cannot be canonicalized."""


def _reverse_name(name: str) -> str:
    if name.endswith(SEPARATOR):
        name = name[:-1]
    labels = name.split(SEPARATOR)
    # A leading separator contributes one ignorable empty label.
    if len(labels) > 1 and not labels[0]:
        labels = labels[1:]
    return "".join(label + SEPARATOR for label in reversed(labels))


@dataclass(frozen=True, order=True)
class Domain:
    """A domain name in canonical (reversed) form.

    Equality, hashing and ordering all come from ``reversed_name``.
    """

    reversed_name: str

    @classmethod
    def parse(cls, raw: str) -> Domain:
        if not raw:
            raise InvalidDomainError("domain name must not be empty")
        return cls(_reverse_name(raw))

    @classmethod
    def from_canonical(cls, reversed_name: str) -> Domain:
        """Wrap an already canonical string without reversing it again."""
        if not reversed_name.endswith(SEPARATOR):
            raise InvalidDomainError(f"not a canonical domain: {reversed_name!r}")
        return cls(reversed_name)

    @property
    def labels(self) -> list[str]:
        """Labels in written (left-to-right) order."""
        return list(reversed(self.reversed_name[:-1].split(SEPARATOR)))

    def is_subdomain_of(self, other: Domain) -> bool:
        """True if ``self`` equals ``other`` or lies anywhere below it."""
        return self.reversed_name.startswith(other.reversed_name)

    def __str__(self) -> str:
        labels = self.labels
        written = SEPARATOR.join(labels)
        if not written:
            return SEPARATOR
        # Empty edge labels need an extra separator to survive parse().
        if not labels[0]:
            written = SEPARATOR + written
        if not labels[-1]:
            written += SEPARATOR
        return written


def canonicalize(raw: str) -> Domain:
    """Parse a raw domain string such as ``mail.google.com``."""
    return Domain.parse(raw)
