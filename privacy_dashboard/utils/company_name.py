"""
Company-name helpers used to key and compare tracker entities.

Entity names arrive from the host in several shapes: bare domains
(``Fixel.ai``), legal names (``Bad Co LLC``) and plain brand names.
``remove_tld`` produces the display key; ``normalize_company_name``
produces a lower-case comparison key.
"""

from __future__ import annotations

import re

_TLD_SUFFIX = re.compile(r"\.[a-z]+$", re.IGNORECASE)

_CORPORATE_DESIGNATORS = frozenset([
    "co", "company", "corp", "corporation", "inc", "incorporated",
    "llc", "llp", "ltd", "limited", "plc", "gmbh", "ag", "sa", "sas",
    "srl", "bv", "nv", "ab", "oy", "pty", "kk",
])

# Trailing ", Inc." / " LLC" / " Co." style tokens.
_DESIGNATOR_TOKEN = re.compile(r"[\s,]+([A-Za-z]+)\.?$")


def _strip_designators(name: str) -> str:
    """Remove trailing corporate designators, keeping at least one word."""
    while True:
        match = _DESIGNATOR_TOKEN.search(name)
        if match is None or match.group(1).lower() not in _CORPORATE_DESIGNATORS:
            return name
        name = name[: match.start()]


def remove_tld(company_name: str) -> str:
    """Strip a trailing TLD and corporate designators from an entity name.

    Examples:
        ``"Fixel.ai"`` -> ``"Fixel"``,
        ``"Bad Co LLC"`` -> ``"Bad"``,
        ``"Amazon.com, Inc."`` -> ``"Amazon"``.

    A name that consists only of a designator is returned unchanged.
    """
    stripped = _TLD_SUFFIX.sub("", _strip_designators(company_name.strip()))
    return stripped.strip() or company_name


def normalize_company_name(company_name: str | None) -> str:
    """Build a lower-case alphanumeric comparison key for a company name."""
    return re.sub(r"[^a-z0-9]", "", remove_tld(company_name or "").lower())
