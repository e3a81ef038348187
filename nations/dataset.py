"""
Loading the nations dataset.

The document is an array of records::

    {"name": "Angola", "region": "Sub-Saharan Africa",
     "income": [[1800, 359.93], ...],
     "population": [[1800, 1567028], ...],
     "lifeExpectancy": [[1800, 26.98], ...]}

Loaded once; anything that does not match is a fatal DatasetError, there is
no partial dataset.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import requests

from nations.series import Series

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 30  # seconds

# JSON key → Entity attribute
SERIES_FIELDS: dict[str, str] = {
    "income":         "income",
    "population":     "population",
    "lifeExpectancy": "life_expectancy",
}


class DatasetError(ValueError):
    """The dataset could not be fetched or does not match the expected schema."""


@dataclass(frozen=True)
class Entity:
    name: str
    region: str
    income: Series
    population: Series
    life_expectancy: Series


def _parse_series(raw, where: str) -> Series:
    if not isinstance(raw, list) or not raw:
        raise DatasetError(f"{where}: expected a non-empty list of [year, value] pairs")
    for k, pair in enumerate(raw):
        if (
            not isinstance(pair, (list, tuple))
            or len(pair) != 2
            or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in pair)
        ):
            raise DatasetError(f"{where}[{k}]: expected [year, value], got {pair!r}")
    series = Series.from_pairs(raw)
    if not (np.all(np.isfinite(series.years)) and np.all(np.isfinite(series.values))):
        raise DatasetError(f"{where}: non-finite sample")
    if np.any(np.diff(series.years) < 0):
        raise DatasetError(f"{where}: years are not in ascending order")
    return series


def parse_entities(raw) -> list[Entity]:
    """Validate the decoded JSON document and build entities in document order."""
    if not isinstance(raw, list):
        raise DatasetError(f"expected a list of nations, got {type(raw).__name__}")

    entities: list[Entity] = []
    seen: set[str] = set()
    for idx, rec in enumerate(raw):
        if not isinstance(rec, dict):
            raise DatasetError(f"record {idx}: expected an object, got {type(rec).__name__}")
        name, region = rec.get("name"), rec.get("region")
        if not isinstance(name, str) or not isinstance(region, str):
            raise DatasetError(f"record {idx}: 'name' and 'region' must be strings")
        if name in seen:
            raise DatasetError(f"record {idx}: duplicate name {name!r}")
        seen.add(name)

        fields = {}
        for key, attr in SERIES_FIELDS.items():
            if key not in rec:
                raise DatasetError(f"{name}: missing {key!r}")
            fields[attr] = _parse_series(rec[key], f"{name}.{key}")
        entities.append(Entity(name=name, region=region, **fields))
    return entities


def _fetch(source: str | Path):
    src = str(source)
    if src.startswith(("http://", "https://")):
        resp = requests.get(src, timeout=FETCH_TIMEOUT)
        resp.raise_for_status()
        return resp.json()
    with open(src) as f:
        return json.load(f)


def load_entities(source: str | Path) -> list[Entity]:
    """Fetch (URL) or read (path) the dataset and validate it."""
    try:
        raw = _fetch(source)
    except (requests.RequestException, OSError, ValueError) as e:
        raise DatasetError(f"could not load dataset from {source}: {e}") from e
    entities = parse_entities(raw)
    logger.info(f"Loaded {len(entities)} nations from {source}")
    return entities


def regions_of(entities: list[Entity]) -> list[str]:
    """Distinct regions in first-seen order."""
    return list(dict.fromkeys(e.region for e in entities))
