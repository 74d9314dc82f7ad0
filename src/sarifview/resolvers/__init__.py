# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Location resolution."""

from sarifview.resolvers.location import LocationResolver, gather_ordered, region_to_range, resolve_uri

__all__ = [
    "LocationResolver",
    "gather_ordered",
    "region_to_range",
    "resolve_uri",
]
