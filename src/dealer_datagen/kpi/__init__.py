"""
KPI synthesis and dataset-derived KPI summaries.
"""

from .summaries import inventory_kpis, order_kpis, order_summary
from .synthesizer import (
    ROLE_KPI_SCHEMAS,
    KPISchema,
    KPISynthesizer,
    change_type_for,
    kpi_titles_for,
)

__all__ = [
    "ROLE_KPI_SCHEMAS",
    "KPISchema",
    "KPISynthesizer",
    "change_type_for",
    "inventory_kpis",
    "kpi_titles_for",
    "order_kpis",
    "order_summary",
]
