"""Rank employers from LCA filing rows and bucket them into priority tiers."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from sponsorscout.config import TieringConfig
from sponsorscout.schemas.company import ROSTER_TIERS, Company, Tier, TierData
from sponsorscout.utils.slug import create_company_id

# Column names in the DOL LCA disclosure file
EMPLOYER_NAME = "EMPLOYER_NAME"
EMPLOYER_CITY = "EMPLOYER_CITY"
EMPLOYER_STATE = "EMPLOYER_STATE"
CASE_STATUS = "CASE_STATUS"
QUARTER = "QUARTER"
POC_COLUMNS = {
    "poc_first_name": "EMPLOYER_POC_FIRST_NAME",
    "poc_last_name": "EMPLOYER_POC_LAST_NAME",
    "poc_email": "EMPLOYER_POC_EMAIL",
    "poc_phone": "EMPLOYER_POC_PHONE",
}

QUARTERS = ("Q1", "Q2", "Q3", "Q4")


def priority_score(lca_count: int, approval_rate: float) -> float:
    """
    Weighted ranking score: half filing volume, half approval percentage.

    Examples:
        >>> priority_score(1000, 0.5)
        525.0
    """
    return round(0.5 * lca_count + 0.5 * approval_rate * 100, 2)


@dataclass
class FilingAggregate:
    """Running per-employer totals collected during the scan."""

    name: str
    city: str
    state: str
    poc: dict[str, str]
    lca_count: int = 0
    certified_count: int = 0
    lca_q1: int = 0
    lca_q2: int = 0
    lca_q3: int = 0
    lca_q4: int = 0

    def add(self, status: str, quarter: str) -> None:
        self.lca_count += 1
        if "CERTIFIED" in status.upper():
            self.certified_count += 1
        quarter = quarter.strip().upper()
        if quarter in QUARTERS:
            attr = f"lca_{quarter.lower()}"
            setattr(self, attr, getattr(self, attr) + 1)

    @property
    def approval_rate(self) -> float:
        return self.certified_count / self.lca_count if self.lca_count else 0.0


def _field(row: Mapping[str, str | None], column: str) -> str:
    value = row.get(column)
    return value.strip() if isinstance(value, str) else ""


class TierBuilder:
    """
    Builds the ranked company list from a filing dataset.

    Rows are grouped by the trimmed, upper-cased employer name. Rows without an
    employer name, and rows the CSV reader cannot parse, are skipped and counted
    in ``rows_skipped``; a build that skips everything yields no companies.
    """

    def __init__(self, thresholds: TieringConfig | None = None) -> None:
        """
        Initialize the builder.

        Args:
            thresholds: Tier lower bounds (uses defaults if not provided)
        """
        self.thresholds = thresholds or TieringConfig()
        self.rows_seen = 0
        self.rows_skipped = 0

    def assign_tier(self, lca_count: int) -> Tier:
        """
        Bucket a company by filing count.

        Every count lands in exactly one tier; each bound is inclusive.
        """
        t = self.thresholds
        if lca_count >= t.top_min:
            return Tier.TOP
        if lca_count >= t.middle_min:
            return Tier.MIDDLE
        if lca_count >= t.lower_min:
            return Tier.LOWER
        if lca_count >= t.lowest_min:
            return Tier.LOWEST
        return Tier.BELOW50

    def iter_rows(self, path: str | Path) -> Iterator[dict[str, str | None]]:
        """
        Stream rows from a CSV filing dataset.

        Lines that are not valid UTF-8 are skipped and counted with the
        malformed rows.

        Args:
            path: Path to the CSV file (header row required)

        Yields:
            One dict per parsable row

        Raises:
            OSError: If the file cannot be opened
        """
        with open(path, "rb") as f:
            reader = csv.DictReader(self._decoded_lines(f))
            while True:
                try:
                    row = next(reader)
                except StopIteration:
                    return
                except csv.Error as e:
                    self.rows_skipped += 1
                    logger.debug("Skipping malformed row near line {}: {}", reader.line_num, e)
                    continue
                yield row

    def _decoded_lines(self, lines: Iterable[bytes]) -> Iterator[str]:
        for line_num, raw in enumerate(lines, start=1):
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError as e:
                self.rows_skipped += 1
                logger.debug("Skipping undecodable line {}: {}", line_num, e)

    def aggregate(self, rows: Iterable[Mapping[str, str | None]]) -> dict[str, FilingAggregate]:
        """
        Accumulate per-employer counts in one pass.

        Args:
            rows: Filing rows keyed by column name

        Returns:
            Aggregates keyed by normalized employer name, in first-seen order
        """
        aggregates: dict[str, FilingAggregate] = {}
        for row in rows:
            self.rows_seen += 1
            raw_name = _field(row, EMPLOYER_NAME)
            key = raw_name.upper()
            if not key:
                self.rows_skipped += 1
                continue

            aggregate = aggregates.get(key)
            if aggregate is None:
                aggregate = FilingAggregate(
                    name=raw_name,
                    city=_field(row, EMPLOYER_CITY),
                    state=_field(row, EMPLOYER_STATE),
                    poc={attr: _field(row, col) for attr, col in POC_COLUMNS.items()},
                )
                aggregates[key] = aggregate
            aggregate.add(_field(row, CASE_STATUS), _field(row, QUARTER))
        return aggregates

    def rank(self, aggregates: Mapping[str, FilingAggregate]) -> list[Company]:
        """Score, sort by priority descending and assign tiers."""
        companies: list[Company] = []
        for key, agg in aggregates.items():
            approval_rate = round(agg.approval_rate, 2)
            companies.append(
                Company(
                    id=create_company_id(key),
                    name=agg.name,
                    city=agg.city,
                    state=agg.state,
                    lca_count=agg.lca_count,
                    lca_q1=agg.lca_q1,
                    lca_q2=agg.lca_q2,
                    lca_q3=agg.lca_q3,
                    lca_q4=agg.lca_q4,
                    approval_rate=approval_rate,
                    priority_score=priority_score(agg.lca_count, approval_rate),
                    tier=self.assign_tier(agg.lca_count),
                    **{attr: value or None for attr, value in agg.poc.items()},
                )
            )
        companies.sort(key=lambda c: c.priority_score, reverse=True)
        return companies

    def build(self, rows: Iterable[Mapping[str, str | None]]) -> list[Company]:
        """
        Aggregate filing rows into ranked, tiered companies.

        Args:
            rows: Filing rows keyed by column name

        Returns:
            Companies sorted by priority score, highest first
        """
        companies = self.rank(self.aggregate(rows))
        logger.info(
            "Built {} companies from {} rows ({} skipped)",
            len(companies),
            self.rows_seen,
            self.rows_skipped,
        )
        return companies

    def build_from_file(self, path: str | Path) -> list[Company]:
        return self.build(self.iter_rows(path))


def split_tiers(companies: Iterable[Company]) -> dict[Tier, list[Company]]:
    """Group ranked companies by tier, keeping rank order inside each tier."""
    buckets: dict[Tier, list[Company]] = {tier: [] for tier in Tier}
    for company in companies:
        buckets[company.tier].append(company)
    return buckets


def tier_documents(companies: Iterable[Company], generated_at: str) -> dict[Tier, TierData]:
    """
    Build the stored roster documents for the scraped tiers.

    ``below50`` companies are not stored as a roster.
    """
    buckets = split_tiers(companies)
    return {
        tier: TierData(
            generated_at=generated_at,
            count=len(buckets[tier]),
            tier=tier.value,
            companies=buckets[tier],
        )
        for tier in ROSTER_TIERS
    }
