"""Data structures for the walkthrough."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class ValidationResult:
    """Result of validating the source table set."""

    is_valid: bool
    errors: list[str]
    warnings: list[str]
    missing_tables: set[str]
    row_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def total_rows(self) -> int:
        """Sum of rows across all tables."""
        return sum(self.row_counts.values())

    def __str__(self) -> str:
        """Human-readable validation summary."""
        status = "✅ Valid" if self.is_valid else "❌ Invalid"
        parts = [f"{status} ({len(self.row_counts)} tables, {self.total_rows:,} rows)"]

        if self.errors:
            parts.append(f"Errors: {len(self.errors)}")
        if self.warnings:
            parts.append(f"Warnings: {len(self.warnings)}")

        return " | ".join(parts)
