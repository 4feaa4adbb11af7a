"""High-level pipeline orchestration for the wayfinder.

The pipeline is organized in several stages:

1. Table retrieval (local files or HTTP, chosen by configuration).
2. Graph loading (tables validated and ingested into a Graph).
3. Path computation (Dijkstra's algorithm).
4. Formatting the route for display.

This module wires these stages together through the container; each
step lives in its own testable module.

Usage:
    python -m wayfinder.pipeline START END
"""

from __future__ import annotations

import sys
from typing import List, Optional, Union

from .config import AppConfig, configure_logging, load_config
from .container import Container
from .domain.errors import ConfigurationError
from .services import WayfindingService


def solve_route_query(
    start: Union[int, str],
    end: Union[int, str],
    config: Optional[AppConfig] = None,
    *,
    container: Optional[Container] = None,
) -> str:
    """Run the pipeline for one query and return a message.

    This helper is designed to be reused from other front-ends
    (CLI, web handlers, tests, etc.).
    """
    container = container or Container.create_default(config)
    service: WayfindingService = container.resolve(WayfindingService)
    return service.describe_route(start, end)


def run_pipeline(argv: Optional[List[str]] = None) -> int:
    """Answer the query given on the command line.

    Returns:
        Process exit status: 0 when a route was printed, 1 when the query
        failed, 2 for bad usage or invalid configuration.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: python -m wayfinder.pipeline START END", file=sys.stderr)
        return 2

    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2
    configure_logging(config.observability)

    service: WayfindingService = Container.create_default(config).resolve(WayfindingService)
    path, error = service.route_safe(args[0], args[1])
    if path is None:
        print(error)
        return 1
    print(service.format_result(path))
    return 0


if __name__ == "__main__":
    sys.exit(run_pipeline())
