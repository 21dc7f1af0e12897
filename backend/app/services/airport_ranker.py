"""Airport relevance ranker — scores and orders directory results against a typed query."""

from dataclasses import dataclass
from typing import Iterable

from app.schemas.airport import AirportRecord
from app.services.ranking_config import RankingConfig, get_ranking_config

MIN_QUERY_LENGTH = 2


@dataclass(frozen=True)
class ScoredCandidate:
    record: AirportRecord
    score: int


class AirportRelevanceRanker:
    """Additive, rule-based relevance ranking for airport autocomplete and resolution.

    Every rule is evaluated independently and its bonus summed, so a record
    matching several rules outranks one matching a single rule. The
    "international" and country-context bonuses only boost records that
    already matched the query textually; they never make a match on their own.

    Stateless apart from the immutable config, so one instance can be shared
    across requests and threads.
    """

    def __init__(self, config: RankingConfig):
        self.config = config

    def score(self, query: str, record: AirportRecord) -> int:
        q = query.strip().lower()
        if not q:
            return 0

        rules = self.config.rules
        iata = record.iata_code.upper()
        city = (record.city_name or "").lower()
        name = (record.name or "").lower()
        country = (record.country_name or "").lower()

        score = 0
        if iata == q.upper():
            score += rules.exact_iata
        if city and city == q:
            score += rules.exact_city
            score += self.config.hub_bonus(iata)
        if city.startswith(q):
            score += rules.city_prefix
        if q.upper() in iata:
            score += rules.iata_contains
        if q in city:
            score += rules.city_contains
        if q in name:
            score += rules.name_contains
        if q in country:
            score += rules.country_contains

        if score == 0:
            return 0

        if "international" in name:
            score += rules.international
        if self.config.is_country_context(q, record.country_code):
            score += rules.country_context
        return score

    def score_all(self, query: str, candidates: Iterable[AirportRecord]) -> list[ScoredCandidate]:
        """Score every candidate, dropping non-matches and keeping the best per IATA code."""
        best: dict[str, ScoredCandidate] = {}
        for record in candidates:
            s = self.score(query, record)
            if s <= 0:
                continue
            current = best.get(record.iata_code)
            if current is None or s > current.score:
                best[record.iata_code] = ScoredCandidate(record=record, score=s)
        return sorted(best.values(), key=lambda c: (-c.score, c.record.iata_code))

    def rank(
        self,
        query: str,
        candidates: Iterable[AirportRecord],
        limit: int = 10,
    ) -> list[AirportRecord]:
        """Return at most ``limit`` records, most relevant first, unique by IATA code.

        Queries shorter than two characters after trimming return ``[]``.
        Raises ``TypeError``/``ValueError`` on contract violations.
        """
        if not isinstance(query, str):
            raise TypeError(f"query must be a str, got {type(query).__name__}")
        if candidates is None:
            raise TypeError("candidates must be an iterable of AirportRecord, got None")
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError(f"limit must be an int, got {type(limit).__name__}")
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        q = query.strip()
        if len(q) < MIN_QUERY_LENGTH or limit == 0:
            return []

        return [c.record for c in self.score_all(q, candidates)[:limit]]


_default_ranker: AirportRelevanceRanker | None = None


def get_airport_ranker() -> AirportRelevanceRanker:
    global _default_ranker
    if _default_ranker is None:
        _default_ranker = AirportRelevanceRanker(get_ranking_config())
    return _default_ranker


def rank_airports(query: str, candidates: Iterable[AirportRecord], limit: int = 10) -> list[AirportRecord]:
    """Rank with the shared ranker built from the bundled configuration."""
    return get_airport_ranker().rank(query, candidates, limit)
