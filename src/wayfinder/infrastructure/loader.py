"""
CSV bulk loader for location graphs.

Reads a locations file and a walkways file, both header-first CSV:

    id,name,latitude,longitude,landmarkCategory
    sourceId,destId,distance,trafficCondition

Header names are matched case-insensitively. Each row is parsed into a typed
record, checked against the JSON schemas in ``wayfinder.utils.validation``
and inserted into the graph. A bad row never aborts the load: it is logged,
recorded in the LoadReport and skipped. Only an unreadable source or a
missing header raises LoaderError.
"""

import csv
import logging
import math
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, TextIO, Tuple, Union

from ..core.enums import LandmarkType, TrafficCondition
from ..core.exceptions import (
    DuplicateResourceError,
    GraphOperationError,
    LoaderError,
    NodeNotFoundError,
    ValidationError,
)
from ..core.graph import LocationGraph
from ..utils.validation.schema import SchemaValidator

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, TextIO]

NODE_HEADERS = ("id", "name", "latitude", "longitude", "landmarkcategory")
EDGE_HEADERS = ("sourceid", "destid", "distance", "trafficcondition")


class RowError(Exception):
    """A single CSV row that cannot be loaded."""


@dataclass(frozen=True)
class SkippedRow:
    """A row left out of the graph, with the reason."""

    source: str
    line_number: int
    reason: str


@dataclass
class LoadReport:
    """
    Outcome of a bulk load.

    Attributes:
        nodes_loaded: Locations inserted
        edges_loaded: Two-way walkways inserted
        skipped: Rows that were rejected, in file order
        original_conditions: Declared condition of every loaded directed edge,
            suitable for ``RoutingEngine.restore_traffic_conditions``
    """

    nodes_loaded: int = 0
    edges_loaded: int = 0
    skipped: List[SkippedRow] = field(default_factory=list)
    original_conditions: Dict[Tuple[int, int], TrafficCondition] = field(default_factory=dict)

    @property
    def clean(self) -> bool:
        return not self.skipped

    def skip(self, source: str, line_number: int, reason: str) -> None:
        logger.warning("Skipping %s line %d: %s", source, line_number, reason)
        self.skipped.append(SkippedRow(source, line_number, reason))


@contextmanager
def _open_source(source: Source) -> Iterator[Tuple[str, TextIO]]:
    if hasattr(source, "read"):
        yield getattr(source, "name", "<stream>"), source
        return
    try:
        handle = open(source, "r", newline="", encoding="utf-8")
    except OSError as e:
        raise LoaderError(f"Cannot open {source}: {e}") from e
    with handle:
        yield os.fspath(source), handle


def _read_header(reader, name: str, required: Tuple[str, ...]) -> Dict[str, int]:
    try:
        header = next(reader)
    except StopIteration:
        raise LoaderError(f"{name} is empty; expected header {','.join(required)}")

    columns = {column.strip().lower(): index for index, column in enumerate(header)}
    missing = [column for column in required if column not in columns]
    if missing:
        raise LoaderError(f"{name} is missing required column(s): {', '.join(missing)}")
    return columns


def _field(row: List[str], columns: Dict[str, int], key: str) -> str:
    return row[columns[key]].strip()


def _parse_int(value: str, label: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise RowError(f"{label} '{value}' is not an integer")


def _parse_float(value: str, label: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise RowError(f"{label} '{value}' is not a number")
    if not math.isfinite(number):
        raise RowError(f"{label} '{value}' is not finite")
    return number


def _rows(reader, width: int) -> Iterator[Tuple[int, Optional[List[str]], Optional[str]]]:
    """Yield (line number, row, error) for every non-blank data row."""
    for row in reader:
        if not row or all(not cell.strip() for cell in row):
            continue
        if len(row) != width:
            yield reader.line_num, None, f"expected {width} columns, found {len(row)}"
        else:
            yield reader.line_num, row, None


def load_nodes(
    source: Source,
    graph: LocationGraph,
    report: Optional[LoadReport] = None,
    validator: Optional[SchemaValidator] = None,
) -> LoadReport:
    """
    Load locations from CSV into ``graph``.

    Args:
        source: Path or open text stream
        graph: Graph to populate
        report: Report to extend; a new one is created if omitted
        validator: Schema validator, defaults to the built-in schemas

    Returns:
        The load report

    Raises:
        LoaderError: If the source cannot be read or lacks a required column
    """
    report = report if report is not None else LoadReport()
    validator = validator or SchemaValidator()

    with _open_source(source) as (name, handle):
        reader = csv.reader(handle)
        columns = _read_header(reader, name, NODE_HEADERS)

        for line_number, row, error in _rows(reader, len(columns)):
            if error:
                report.skip(name, line_number, error)
                continue
            try:
                record = {
                    "id": _parse_int(_field(row, columns, "id"), "id"),
                    "name": _field(row, columns, "name"),
                    "latitude": _parse_float(_field(row, columns, "latitude"), "latitude"),
                    "longitude": _parse_float(_field(row, columns, "longitude"), "longitude"),
                    "landmark_type": LandmarkType.parse(
                        _field(row, columns, "landmarkcategory")
                    ).name,
                }
                result = validator.validate_location(record)
                if not result.is_valid:
                    raise RowError("; ".join(result.errors))

                graph.add_node(
                    record["id"],
                    record["name"],
                    record["latitude"],
                    record["longitude"],
                    LandmarkType[record["landmark_type"]],
                )
            except (RowError, ValidationError, DuplicateResourceError) as e:
                report.skip(name, line_number, str(e))
                continue
            report.nodes_loaded += 1

    logger.info("Loaded %d locations from %s", report.nodes_loaded, name)
    return report


def load_edges(
    source: Source,
    graph: LocationGraph,
    report: Optional[LoadReport] = None,
    validator: Optional[SchemaValidator] = None,
) -> LoadReport:
    """
    Load two-way walkways from CSV into ``graph``.

    Endpoints must already be present in the graph, so locations are loaded
    first. Each accepted row records its declared condition for both
    directions in ``report.original_conditions``.

    Raises:
        LoaderError: If the source cannot be read or lacks a required column
    """
    report = report if report is not None else LoadReport()
    validator = validator or SchemaValidator()

    with _open_source(source) as (name, handle):
        reader = csv.reader(handle)
        columns = _read_header(reader, name, EDGE_HEADERS)

        for line_number, row, error in _rows(reader, len(columns)):
            if error:
                report.skip(name, line_number, error)
                continue
            try:
                record = {
                    "source_id": _parse_int(_field(row, columns, "sourceid"), "sourceId"),
                    "dest_id": _parse_int(_field(row, columns, "destid"), "destId"),
                    "distance": _parse_float(_field(row, columns, "distance"), "distance"),
                    "condition": TrafficCondition.parse(
                        _field(row, columns, "trafficcondition")
                    ).name,
                }
                result = validator.validate_edge(record)
                if not result.is_valid:
                    raise RowError("; ".join(result.errors))

                condition = TrafficCondition[record["condition"]]
                graph.add_edge(record["source_id"], record["dest_id"], record["distance"], condition)
            except (
                RowError,
                ValidationError,
                NodeNotFoundError,
                GraphOperationError,
                DuplicateResourceError,
            ) as e:
                report.skip(name, line_number, str(e))
                continue

            report.original_conditions[(record["source_id"], record["dest_id"])] = condition
            report.original_conditions[(record["dest_id"], record["source_id"])] = condition
            report.edges_loaded += 1

    logger.info("Loaded %d walkways from %s", report.edges_loaded, name)
    return report


def load_graph(nodes_source: Source, edges_source: Source) -> Tuple[LocationGraph, LoadReport]:
    """
    Build a new graph from a locations file and a walkways file.

    Returns:
        The populated graph and the combined load report
    """
    graph = LocationGraph()
    report = LoadReport()
    validator = SchemaValidator()
    load_nodes(nodes_source, graph, report, validator)
    load_edges(edges_source, graph, report, validator)

    if report.skipped:
        logger.info(
            "Graph loaded with %d skipped row(s): %d locations, %d walkways",
            len(report.skipped),
            report.nodes_loaded,
            report.edges_loaded,
        )
    return graph, report
