"""Deduplicate companies when several tier rosters are combined."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Hashable

from sponsorscout.schemas.company import Company, Tier


def _dedupe_by(companies: Iterable[Company], key: Callable[[Company], Hashable]) -> list[Company]:
    kept: list[Company] = []
    slots: dict[Hashable, int] = {}
    for company in companies:
        k = key(company)
        slot = slots.get(k)
        if slot is None:
            slots[k] = len(kept)
            kept.append(company)
        elif company.priority_score > kept[slot].priority_score:
            # Whole record replaced: the winner's name, contacts and tier survive
            kept[slot] = company
    return kept


def normalized_name(company: Company) -> str:
    return company.name.strip().lower()


def dedupe_companies(companies: Iterable[Company]) -> list[Company]:
    """
    Remove duplicate companies, keeping the higher-scored record.

    Pass one groups by ``id``, pass two by trimmed lower-cased ``name``. The
    first record seen wins ties; a later duplicate replaces it only with a
    strictly higher ``priority_score``. The result is sorted by score, highest
    first, and running it again returns the same list.

    Args:
        companies: Companies from one or more rosters

    Returns:
        Deduplicated companies sorted by priority score
    """
    unique = _dedupe_by(_dedupe_by(companies, lambda c: c.id), normalized_name)
    unique.sort(key=lambda c: c.priority_score, reverse=True)
    return unique


def tier_counts(companies: Iterable[Company]) -> dict[str, int]:
    """Count companies per tier, including empty tiers."""
    counts = {tier.value: 0 for tier in Tier}
    for company in companies:
        counts[company.tier.value] += 1
    return counts
