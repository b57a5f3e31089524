# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Loading and normalization of feature and color tables.

Both tables are read as text with polars and normalized at this boundary:
identifiers are coerced to plain text, thousands separators are stripped from
coordinates and colors are validated. Everything downstream works on
`FeatureRecord` and `ColorAssignment` objects only.
"""

from pathlib import Path
from typing import Any, Iterable, List, Sequence, Union

import polars as pl
from pydantic_extra_types.color import Color

from protfig.core import ColorAssignment, FeatureRecord, logger

from .errors import (
    EmptyTableError,
    FileNotFoundError,
    InvalidColorError,
    InvalidCoordinateError,
    MissingColumnError,
    MissingValueError,
    TableFileError,
)

FEATURE_COLUMNS = ("protein_id", "domain", "start", "stop")
COLOR_COLUMNS = ("domain", "color")

_ROW = "__row"


def read_table(file_path: Union[str, Path]) -> pl.DataFrame:
    """Read a CSV file with every column kept as text.

    Args:
        file_path: Path to the CSV file.

    Returns:
        DataFrame with one String column per CSV column. Empty fields are null.

    Raises:
        FileNotFoundError: If the file does not exist.
        TableFileError: If the file is not readable as CSV.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(str(path))

    try:
        df = pl.read_csv(path, infer_schema_length=0)
    except pl.exceptions.PolarsError as e:
        raise TableFileError(str(path), str(e)) from e

    logger.debug(f"Read {df.height} rows with columns {df.columns} from {path}")
    return df


def _rows_to_dataframe(
    rows: Iterable[Sequence[Any]], columns: Sequence[str]
) -> pl.DataFrame:
    """Build a text DataFrame from plain row tuples."""
    data = [[None if v is None else str(v) for v in row] for row in rows]
    return pl.DataFrame(
        data,
        schema={name: pl.Utf8 for name in columns},
        orient="row",
    )


def _check_columns(
    df: pl.DataFrame, required: Sequence[str], table_name: str
) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise MissingColumnError(table_name, missing, df.columns)


def _check_not_null(
    df: pl.DataFrame, columns: Sequence[str], table_name: str
) -> None:
    for column in columns:
        rows = df.filter(pl.col(column).is_null())[_ROW].to_list()
        if rows:
            raise MissingValueError(table_name, column, rows)


def _parse_coordinate(column: str) -> pl.Expr:
    return (
        pl.col(column)
        .cast(pl.Utf8)
        .str.replace_all(",", "", literal=True)
        .str.strip_chars()
        .cast(pl.Float64, strict=False)
    )


def normalize_feature_table(df: pl.DataFrame) -> pl.DataFrame:
    """Validate and normalize a raw feature table.

    Args:
        df: Feature table with at least the columns protein_id, domain, start
            and stop. Columns may hold any dtype; extra columns are dropped.

    Returns:
        DataFrame with String protein_id/domain, Int64 start/stop and a derived
        Int64 length column, rows in input order.

    Raises:
        MissingColumnError: If a required column is absent.
        EmptyTableError: If the table has no rows.
        MissingValueError: If a required field is empty.
        InvalidCoordinateError: If start or stop is not an integer once
            thousands separators are removed.
    """
    _check_columns(df, FEATURE_COLUMNS, "feature")
    if df.height == 0:
        raise EmptyTableError("feature")

    df = df.select(FEATURE_COLUMNS).with_row_index(_ROW, offset=1)
    _check_not_null(df, FEATURE_COLUMNS, "feature")

    parsed = df.with_columns(
        pl.col("protein_id").cast(pl.Utf8),
        pl.col("domain").cast(pl.Utf8),
        _parse_coordinate("start").alias("start_value"),
        _parse_coordinate("stop").alias("stop_value"),
    )

    for column in ("start", "stop"):
        value = pl.col(f"{column}_value")
        invalid = parsed.filter(
            value.is_null() | value.is_infinite() | (value != value.floor())
        )
        if invalid.height:
            raise InvalidCoordinateError(
                column,
                invalid[column].cast(pl.Utf8).to_list(),
                invalid[_ROW].to_list(),
            )

    return parsed.select(
        "protein_id",
        "domain",
        pl.col("start_value").cast(pl.Int64).alias("start"),
        pl.col("stop_value").cast(pl.Int64).alias("stop"),
    ).with_columns((pl.col("stop") - pl.col("start") + 1).alias("length"))


def to_feature_records(df: pl.DataFrame) -> List[FeatureRecord]:
    """Convert a normalized feature table into records, keeping row order."""
    return [
        FeatureRecord(protein_id, domain, start, stop)
        for protein_id, domain, start, stop in df.select(FEATURE_COLUMNS).iter_rows()
    ]


def normalize_color_table(df: pl.DataFrame) -> List[ColorAssignment]:
    """Validate a raw color table and convert it into color assignments.

    Args:
        df: Color table with at least the columns domain and color.

    Returns:
        Color assignments in table order, colors normalized to hex.

    Raises:
        MissingColumnError: If a required column is absent.
        MissingValueError: If a domain or color field is empty.
        InvalidColorError: If a color is not recognized.
    """
    _check_columns(df, COLOR_COLUMNS, "color")
    df = (
        df.select(COLOR_COLUMNS)
        .with_row_index(_ROW, offset=1)
        .with_columns(pl.col("domain").cast(pl.Utf8), pl.col("color").cast(pl.Utf8))
    )
    _check_not_null(df, COLOR_COLUMNS, "color")

    assignments: List[ColorAssignment] = []
    for domain, color in df.select(COLOR_COLUMNS).iter_rows():
        try:
            hex_color = Color(color.strip()).as_hex()
        except ValueError as e:
            raise InvalidColorError(color, domain) from e
        assignments.append(ColorAssignment(domain=domain, color=hex_color))
    return assignments


def load_feature_table(file_path: Union[str, Path]) -> List[FeatureRecord]:
    """Read, validate and normalize a feature table CSV file."""
    return to_feature_records(normalize_feature_table(read_table(file_path)))


def load_color_table(file_path: Union[str, Path]) -> List[ColorAssignment]:
    """Read and validate a color table CSV file."""
    return normalize_color_table(read_table(file_path))


def features_from_rows(rows: Iterable[Sequence[Any]]) -> List[FeatureRecord]:
    """Normalize in-memory (protein_id, domain, start, stop) rows.

    Values go through the same normalization as CSV input, so coordinates
    such as ``"1,050"`` are accepted.
    """
    return to_feature_records(
        normalize_feature_table(_rows_to_dataframe(rows, FEATURE_COLUMNS))
    )


def colors_from_rows(rows: Iterable[Sequence[Any]]) -> List[ColorAssignment]:
    """Validate in-memory (domain, color) rows."""
    return normalize_color_table(_rows_to_dataframe(rows, COLOR_COLUMNS))
