"""
Tabular Reports

DataFrame views of category results for presentation collaborators
(printable checklists, CSV export). Values are passed through unformatted.
"""

from typing import Dict, List

import pandas as pd

from readykit.models.common import ItemStatus
from readykit.models.results import CategoryStatusResult, ShortageResult

STATUS_COLUMNS = [
    "category_id",
    "status",
    "completion_percentage",
    "item_count",
    "critical_count",
    "warning_count",
    "ok_count",
    "shortage_count",
    "total_actual",
    "total_needed",
    "unit",
]

SHORTAGE_COLUMNS = ["category_id", "item_id", "item_name", "actual", "needed", "missing", "unit"]


def statuses_to_dataframe(statuses: List[CategoryStatusResult]) -> pd.DataFrame:
    """One row per category, in input order."""
    if not statuses:
        return pd.DataFrame(columns=STATUS_COLUMNS)

    rows = []
    for s in statuses:
        rows.append({
            "category_id": s.category_id,
            "status": s.status.value,
            "completion_percentage": s.completion_percentage,
            "item_count": s.item_count,
            "critical_count": s.critical_count,
            "warning_count": s.warning_count,
            "ok_count": s.ok_count,
            "shortage_count": len(s.shortages),
            "total_actual": s.total_actual,
            "total_needed": s.total_needed,
            "unit": s.primary_unit.value if s.primary_unit else None,
        })
    df = pd.DataFrame(rows, columns=STATUS_COLUMNS)
    # Object column keeps None for mixed or empty categories instead of NaN
    df["unit"] = pd.Series([row["unit"] for row in rows], index=df.index, dtype=object)
    return df


def shortages_to_dataframe(results: List[ShortageResult]) -> pd.DataFrame:
    """One row per missing item across categories, largest gap first within each category."""
    rows = [
        {"category_id": r.category_id, **s.model_dump()}
        for r in results
        for s in r.shortages
    ]
    if not rows:
        return pd.DataFrame(columns=SHORTAGE_COLUMNS)

    df = pd.DataFrame(rows)
    df["unit"] = df["unit"].map(lambda u: u.value if hasattr(u, "value") else u)
    return df[SHORTAGE_COLUMNS]


def get_status_summary(statuses: List[CategoryStatusResult]) -> Dict:
    """Summary counts across all categories."""
    if not statuses:
        return {}

    df = statuses_to_dataframe(statuses)
    return {
        "total_categories": len(df),
        "categories_ok": int((df["status"] == ItemStatus.OK.value).sum()),
        "categories_warning": int((df["status"] == ItemStatus.WARNING.value).sum()),
        "categories_critical": int((df["status"] == ItemStatus.CRITICAL.value).sum()),
        "average_completion": float(df["completion_percentage"].mean()),
        "total_shortages": int(df["shortage_count"].sum()),
        "items_tracked": int(df["item_count"].sum()),
    }
