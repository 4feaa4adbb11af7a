"""Graph loading from vertex, edge and label tables.

Loading is best-effort: a malformed row is skipped and recorded in the
returned IngestionReport while every valid row is still applied. Nothing
in this module raises for bad data.

Table formats:
- vertices: header ``ID,X,Y`` then one integer triple per row
- edges: no header, two vertex ids per row; both directions are added
- labels: header ``LABEL,ID`` then (label, vertex id) per row
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..domain.errors import (
    CellParseError,
    IngestionError,
    MissingColumnError,
    SelfLoopError,
    UnknownVertexReferenceError,
)
from ..domain.models import Edge, GraphLoadReport, IngestionReport, Vertex
from ..io.table import Table, parse_integer, parse_table
from .model import Graph

logger = logging.getLogger(__name__)

VERTEX_COLUMNS = ("ID", "X", "Y")
LABEL_COLUMNS = ("LABEL", "ID")

_FIELD_NAMES = {
    "ID": "ID",
    "X": "X coordinate",
    "Y": "Y coordinate",
    "FROM": "ID in first column",
    "TO": "ID in second column",
}


def _cell(row: Sequence[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def _parse_int(
    row: Sequence[str],
    index: int,
    column: str,
    row_number: int,
    errors: List[IngestionError],
) -> Optional[int]:
    value = _cell(row, index)
    parsed = parse_integer(value)
    if parsed is None:
        errors.append(
            CellParseError(
                f"Invalid {_FIELD_NAMES.get(column, column)} in row {row_number}: {value!r}",
                row_number=row_number,
                column=column,
                value=value,
            )
        )
    return parsed


def _missing_columns(table: Table, required: Sequence[str]) -> List[IngestionError]:
    return [
        MissingColumnError(f"Table has no {column} column", column=column)
        for column in required
        if not table.has_header(column)
    ]


def _resolve(
    graph: Graph, vertex_id: int, row_number: int, errors: List[IngestionError]
) -> Optional[Vertex]:
    vertex = graph.get_vertex_by_id(vertex_id)
    if vertex is None:
        errors.append(
            UnknownVertexReferenceError(
                f"Graph contains no vertex with ID {vertex_id} (row {row_number})",
                row_number=row_number,
                vertex_id=vertex_id,
            )
        )
    return vertex


def _report(table_name: str, table: Table, applied: int, errors: List[IngestionError]) -> IngestionReport:
    logger.debug("Parsed %s table:\n%s", table_name, table.pretty())
    for error in errors:
        logger.warning(
            "Skipped %s row",
            table_name,
            extra={"row_number": error.row_number, "error": str(error)},
        )
    logger.info(
        "Table ingested",
        extra={"table": table_name, "applied": applied, "errors": len(errors)},
    )
    return IngestionReport(table_name=table_name, applied=applied, errors=tuple(errors))


def ingest_vertices(table: Table, graph: Graph) -> IngestionReport:
    """Add one vertex per valid row of ``table`` to ``graph``.

    Each of the ``ID``, ``X`` and ``Y`` cells must be an integer; every
    malformed cell is reported separately and its row is skipped.
    """
    errors = _missing_columns(table, VERTEX_COLUMNS)
    if errors:
        return _report("vertices", table, 0, errors)

    id_col, x_col, y_col = (table.column_index(column) for column in VERTEX_COLUMNS)
    applied = 0
    for row_number, row in enumerate(table, start=1):
        row_errors: List[IngestionError] = []
        vertex_id = _parse_int(row, id_col, "ID", row_number, row_errors)
        x = _parse_int(row, x_col, "X", row_number, row_errors)
        y = _parse_int(row, y_col, "Y", row_number, row_errors)
        if row_errors:
            errors.extend(row_errors)
            continue
        graph.add_vertex(Vertex(id=vertex_id, x=x, y=y))
        applied += 1

    return _report("vertices", table, applied, errors)


def ingest_edges(table: Table, graph: Graph) -> IngestionReport:
    """Connect the two vertices named on each valid row of ``table``.

    Both directed edges are inserted so every route is navigable either
    way. Rows naming an unknown vertex, or the same vertex twice, are
    skipped.
    """
    errors: List[IngestionError] = []
    applied = 0
    for row_number, row in enumerate(table, start=1):
        row_errors: List[IngestionError] = []
        first_id = _parse_int(row, 0, "FROM", row_number, row_errors)
        second_id = _parse_int(row, 1, "TO", row_number, row_errors)
        if row_errors:
            errors.extend(row_errors)
            continue

        first = _resolve(graph, first_id, row_number, row_errors)
        second = _resolve(graph, second_id, row_number, row_errors)
        if row_errors:
            errors.extend(row_errors)
            continue

        if first.id == second.id:
            errors.append(
                SelfLoopError(
                    f"Vertex {first.id} cannot be connected to itself (row {row_number})",
                    row_number=row_number,
                    vertex_id=first.id,
                )
            )
            continue

        graph.add_edge(Edge.between(first, second))
        graph.add_edge(Edge.between(second, first))
        applied += 1

    return _report("edges", table, applied, errors)


def ingest_labels(table: Table, graph: Graph) -> IngestionReport:
    """Bind the label on each valid row of ``table`` to its vertex.

    Rows with an empty label, a malformed id or an unknown vertex are
    skipped.
    """
    errors = _missing_columns(table, LABEL_COLUMNS)
    if errors:
        return _report("labels", table, 0, errors)

    label_col, id_col = (table.column_index(column) for column in LABEL_COLUMNS)
    applied = 0
    for row_number, row in enumerate(table, start=1):
        row_errors: List[IngestionError] = []
        label = _cell(row, label_col)
        if not label:
            row_errors.append(
                CellParseError(
                    f"Empty LABEL in row {row_number}",
                    row_number=row_number,
                    column="LABEL",
                    value=label,
                )
            )
        vertex_id = _parse_int(row, id_col, "ID", row_number, row_errors)
        vertex = None
        if vertex_id is not None:
            vertex = _resolve(graph, vertex_id, row_number, row_errors)
        if row_errors:
            errors.extend(row_errors)
            continue
        graph.add_label(label, vertex)
        applied += 1

    return _report("labels", table, applied, errors)


def load_graph(
    vertex_text: str,
    edge_text: str,
    label_text: Optional[str] = None,
    *,
    image: Optional[str] = None,
) -> Tuple[Graph, GraphLoadReport]:
    """Build a graph from the raw text of its data files.

    Vertices are loaded first so that edges and labels can refer to them.

    Returns
    -------
    Graph, GraphLoadReport
        The (possibly partial) graph and what went wrong while building it.
    """
    graph = Graph()
    vertices = ingest_vertices(parse_table(vertex_text, has_headers=True), graph)
    edges = ingest_edges(parse_table(edge_text, has_headers=False), graph)
    labels = None
    if label_text is not None:
        labels = ingest_labels(parse_table(label_text, has_headers=True), graph)
    graph.set_image(image)

    report = GraphLoadReport(vertices=vertices, edges=edges, labels=labels)
    logger.info(
        "Graph loaded",
        extra={"nodes": len(graph), "applied": report.applied, "errors": len(report.errors)},
    )
    return graph, report
