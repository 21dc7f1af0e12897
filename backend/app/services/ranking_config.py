"""Airport ranking configuration — rule bonuses, major-hub table, country-context table.

The tables are product policy, so they ship as versioned data
(``app/data/airport_ranking.json``) and are loaded into one immutable object
that the ranker receives at construction time.
"""

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from app.config import settings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "airport_ranking.json"

MAX_HUB_BONUS = 10_000


class RankingConfigError(ValueError):
    """Raised when the ranking configuration file is malformed."""


@dataclass(frozen=True)
class RuleBonuses:
    """Score added by each matching rule. Rules are additive."""
    exact_iata: int = 100
    exact_city: int = 90
    city_prefix: int = 80
    iata_contains: int = 70
    city_contains: int = 60
    name_contains: int = 40
    country_contains: int = 20
    international: int = 200       # boost, only on an otherwise matching record
    country_context: int = 3000    # boost, only on an otherwise matching record


@dataclass(frozen=True)
class RankingConfig:
    """Top-level ranking config. Tables are read-only views."""
    rules: RuleBonuses = field(default_factory=RuleBonuses)
    major_hubs: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    country_context: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    version: int = 1

    def hub_bonus(self, iata_code: str) -> int:
        return self.major_hubs.get(iata_code.upper(), 0)

    def is_country_context(self, query: str, country_code: str) -> bool:
        """True when ``query`` is a city we consider searched-for in ``country_code``."""
        cities = self.country_context.get(country_code.upper())
        return bool(cities) and query.lower() in cities


def _require_int(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RankingConfigError(f"{where} must be an integer, got {value!r}")
    if value < 0:
        raise RankingConfigError(f"{where} must be non-negative, got {value}")
    return value


def _require_code(value: Any, length: int, where: str) -> str:
    if not isinstance(value, str) or len(value) != length or not value.isalpha():
        raise RankingConfigError(f"{where}: expected a {length}-letter code, got {value!r}")
    return value.upper()


def parse_ranking_config(raw: Mapping[str, Any]) -> RankingConfig:
    """Build a :class:`RankingConfig` from decoded JSON, validating every entry."""
    if not isinstance(raw, Mapping):
        raise RankingConfigError("ranking config must be a JSON object")

    rule_kwargs = {}
    known_rules = RuleBonuses.__dataclass_fields__.keys()
    for name, value in (raw.get("rule_bonuses") or {}).items():
        if name not in known_rules:
            raise RankingConfigError(f"unknown rule bonus: {name!r}")
        rule_kwargs[name] = _require_int(value, f"rule_bonuses.{name}")

    hubs: dict[str, int] = {}
    for code, bonus in (raw.get("major_hubs") or {}).items():
        iata = _require_code(code, 3, "major_hubs")
        bonus = _require_int(bonus, f"major_hubs.{iata}")
        if bonus > MAX_HUB_BONUS:
            raise RankingConfigError(f"major_hubs.{iata} exceeds {MAX_HUB_BONUS}")
        hubs[iata] = bonus

    context: dict[str, frozenset[str]] = {}
    for code, cities in (raw.get("country_context") or {}).items():
        country = _require_code(code, 2, "country_context")
        if not isinstance(cities, list) or not all(isinstance(c, str) for c in cities):
            raise RankingConfigError(f"country_context.{country} must be a list of city names")
        context[country] = frozenset(c.strip().lower() for c in cities if c.strip())

    return RankingConfig(
        rules=RuleBonuses(**rule_kwargs),
        major_hubs=MappingProxyType(hubs),
        country_context=MappingProxyType(context),
        version=_require_int(raw.get("version", 1), "version"),
    )


def load_ranking_config(path: str | Path | None = None) -> RankingConfig:
    """Load and validate the ranking config from a JSON file."""
    path = Path(path) if path else DEFAULT_CONFIG_PATH
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise RankingConfigError(f"ranking config not found: {path}") from e
    except json.JSONDecodeError as e:
        raise RankingConfigError(f"ranking config is not valid JSON: {path}: {e}") from e

    config = parse_ranking_config(raw)
    logger.info(
        f"Loaded airport ranking config v{config.version} from {path} "
        f"({len(config.major_hubs)} hubs, {len(config.country_context)} countries)"
    )
    return config


@lru_cache(maxsize=1)
def get_ranking_config() -> RankingConfig:
    """Process-wide ranking config, honouring ``settings.airport_ranking_config_path``."""
    return load_ranking_config(settings.airport_ranking_config_path or None)
