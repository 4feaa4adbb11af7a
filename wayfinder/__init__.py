"""Top-level package for the wayfinder project.

This package maps waypoints and the routes between them into an
in-memory graph, validates and loads that graph from hand-maintained
CSV tables, and answers shortest-route queries between named locations
of an indoor or campus map.
"""
