# dreamhouse/domain/styles.py
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType


# canonical style -> related styles; relation is checked in both directions
_STYLE_GRAPH: dict[str, tuple[str, ...]] = {
    "mid-century modern": ("modern", "contemporary", "atomic ranch", "retro modern", "post and beam"),
    "modern": ("mid-century modern", "contemporary", "minimalist", "international style"),
    "contemporary": ("modern", "mid-century modern", "northwest contemporary", "minimalist"),
    "northwest contemporary": ("contemporary", "modern", "pacific northwest", "northwest lodge"),
    "pacific northwest": ("northwest contemporary", "northwest lodge", "contemporary"),
    "northwest lodge": ("pacific northwest", "northwest contemporary", "cabin"),
    "craftsman": ("bungalow", "arts and crafts", "american foursquare", "seattle box", "prairie"),
    "bungalow": ("craftsman", "arts and crafts", "cottage"),
    "arts and crafts": ("craftsman", "bungalow", "mission"),
    "prairie": ("craftsman", "american foursquare", "ranch"),
    "american foursquare": ("craftsman", "seattle box", "traditional", "prairie"),
    "seattle box": ("craftsman", "american foursquare"),
    "colonial": ("dutch colonial", "georgian", "federal", "cape cod", "traditional", "colonial revival"),
    "colonial revival": ("colonial", "georgian", "traditional"),
    "dutch colonial": ("colonial", "traditional", "cape cod"),
    "georgian": ("colonial", "federal", "traditional"),
    "federal": ("georgian", "colonial", "greek revival"),
    "greek revival": ("federal", "neoclassical", "antebellum"),
    "neoclassical": ("greek revival", "georgian"),
    "tudor": ("english cottage", "storybook", "traditional", "european"),
    "victorian": ("queen anne", "italianate", "painted lady", "second empire", "gothic revival"),
    "queen anne": ("victorian", "painted lady", "italianate"),
    "italianate": ("victorian", "queen anne", "second empire"),
    "second empire": ("victorian", "italianate"),
    "gothic revival": ("victorian", "carpenter gothic"),
    "farmhouse": ("modern farmhouse", "country", "ranch", "rural"),
    "modern farmhouse": ("farmhouse", "contemporary", "transitional"),
    "ranch": ("rambler", "split level", "mid-century modern", "atomic ranch"),
    "rambler": ("ranch", "split level"),
    "split level": ("ranch", "rambler", "tri-level", "raised ranch"),
    "cape cod": ("colonial", "traditional", "cottage", "new england", "saltbox"),
    "saltbox": ("cape cod", "colonial", "new england"),
    "cottage": ("bungalow", "cape cod", "english cottage", "storybook"),
    "english cottage": ("cottage", "tudor", "storybook"),
    "mediterranean": ("spanish", "mission", "italian villa", "tuscan"),
    "spanish": ("mediterranean", "mission", "spanish colonial", "pueblo revival"),
    "spanish colonial": ("spanish", "mission", "mediterranean"),
    "mission": ("spanish", "mediterranean", "arts and crafts"),
    "pueblo revival": ("spanish", "adobe", "southwestern"),
    "southwestern": ("pueblo revival", "adobe", "spanish"),
    "minimalist": ("modern", "contemporary", "scandinavian"),
    "scandinavian": ("minimalist", "modern", "nordic"),
    "transitional": ("traditional", "contemporary", "modern farmhouse"),
    "traditional": ("colonial", "transitional", "cape cod", "georgian"),
    "cabin": ("northwest lodge", "rustic", "log home", "a-frame"),
    "a-frame": ("cabin", "mid-century modern"),
    "rustic": ("cabin", "log home", "farmhouse"),
    "log home": ("cabin", "rustic"),
    "townhouse": ("urban", "row house"),
    "row house": ("townhouse", "brownstone"),
    "brownstone": ("row house", "italianate"),
    "industrial": ("loft", "modern", "urban"),
    "loft": ("industrial", "urban", "modern"),
}

STYLE_SIMILARITY: Mapping[str, tuple[str, ...]] = MappingProxyType(_STYLE_GRAPH)

_WS = re.compile(r"\s+")


def normalize_style(style: str) -> str:
    return _WS.sub(" ", style.strip().lower())


def style_similarity(style_a: str, style_b: str) -> float:
    """
    1.0 identical, 0.5 related (either direction of the table), 0.0 otherwise.
    """
    a = normalize_style(style_a)
    b = normalize_style(style_b)

    if a == b:
        return 1.0
    if b in STYLE_SIMILARITY.get(a, ()):
        return 0.5
    if a in STYLE_SIMILARITY.get(b, ()):
        return 0.5
    return 0.0


def best_style_match(desired_styles: Iterable[str], property_style: str | None) -> float:
    if not property_style:
        return 0.0

    best = 0.0
    for desired in desired_styles:
        best = max(best, style_similarity(desired, property_style))
        if best == 1.0:
            break
    return best
