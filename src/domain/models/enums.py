"""Domain enumerations for the beer service.

String-valued enums use the str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (FastAPI / Pydantic default behaviour).
"""

from enum import Enum


class BeerStyle(str, Enum):
    """Closed set of beer styles accepted on the wire.

    Storage keeps beer_style as free text; values outside this set are
    rejected when a stored row is mapped for the wire.
    """

    ALE = "ALE"
    PALE_ALE = "PALE_ALE"
    IPA = "IPA"
    WHEAT = "WHEAT"
    PORTER = "PORTER"
    STOUT = "STOUT"
    GOSE = "GOSE"
    LAGER = "LAGER"
    SAISON = "SAISON"
