"""Text rendering and export utilities for query results."""

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq
from pathlib import Path

from config import EXPORT_PARQUET_COMPRESSION, MAX_TABLE_ROWS


def format_table(df: pd.DataFrame, max_rows: int = MAX_TABLE_ROWS) -> str:
    """
    Render a result as a plain-text table.

    Args:
        df: Query result
        max_rows: Rows to show before truncating

    Returns:
        Table text, with a trailing row count when truncated
    """
    if df.empty:
        return "(no rows)"

    text = df.head(max_rows).to_string(index=False)
    if len(df) > max_rows:
        text += f"\n... {len(df) - max_rows:,} more rows ({len(df):,} total)"

    return text


def export_result_csv(df: pd.DataFrame) -> str:
    """Export a query result to a CSV string."""
    return df.to_csv(index=False)


def export_result_parquet(df: pd.DataFrame, output_path: Path) -> Path:
    """
    Write a query result to a Parquet file.

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    table = pa.Table.from_pandas(df, preserve_index=False)
    pq.write_table(
        table,
        output_path,
        compression=EXPORT_PARQUET_COMPRESSION,
        use_dictionary=True,
        write_statistics=True
    )

    return output_path
