"""
Reports Module — PDF Dashboard Snapshots

Public API:
- generate_snapshot_pdf: Render a DashboardSnapshot as PDF bytes
- generate_filename: Smart filename pattern
"""

from .generator import generate_filename, generate_snapshot_pdf

__all__ = [
    "generate_snapshot_pdf",
    "generate_filename",
]
