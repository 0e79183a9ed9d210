"""Mini README: External map-data acquisition.

Exports the Overpass fetcher used by the route planner together with the
query builder and payload parser, which are handy on their own when
debugging what the service returned for an area.
"""

from .overpass import OverpassFetcher, build_crossings_query, parse_elements

__all__ = ["OverpassFetcher", "build_crossings_query", "parse_elements"]
