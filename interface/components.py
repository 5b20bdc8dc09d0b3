"""
Streamlit UI components for the product merge tool.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import streamlit as st

from config import CSV_EXPORT_NAME, PREVIEW_PAGE_SIZE, SUPPORTED_EXTENSIONS, XLSX_EXPORT_NAME
from reconciliation import MergeStats
from writers import rows_to_csv_bytes, rows_to_xlsx_bytes


def render_header() -> None:
    st.title("📦 Product Data Merger")
    st.caption("Merge DE, product information and barcode files into one product list.")


def render_file_uploaders() -> Tuple[Any, Any, Any]:
    """Render the DE / product / barcode uploaders and return the uploaded files."""
    col_de, col_product, col_barcode = st.columns(3)

    with col_de:
        de_file = st.file_uploader("DE file", type=list(SUPPORTED_EXTENSIONS), key="de_upload")
    with col_product:
        product_file = st.file_uploader("Product information file", type=list(SUPPORTED_EXTENSIONS), key="product_upload")
    with col_barcode:
        barcode_file = st.file_uploader("Barcode file (optional)", type=list(SUPPORTED_EXTENSIONS), key="barcode_upload")

    return de_file, product_file, barcode_file


def render_process_button(enabled: bool) -> bool:
    return st.button("🔄 Process files", type="primary", disabled=not enabled)


def render_merge_summary(stats: MergeStats) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Matched", stats.matched)
    c2.metric("DE only", stats.de_only)
    c3.metric("Product only", stats.product_only)
    c4.metric("With barcode", stats.barcode_filled)

def page_frame(rows: List[Dict[str, Any]], page: int) -> pd.DataFrame:
    """One preview page as text; empty cells (None/NaN) show as blanks."""
    start = (page - 1) * PREVIEW_PAGE_SIZE
    page_rows = rows[start:start + PREVIEW_PAGE_SIZE]
    return pd.DataFrame(page_rows).fillna("").astype(str)


def render_paginated_table(rows: Optional[List[Dict[str, Any]]], key: str) -> None:
    """Show `rows` one page at a time."""
    if not rows:
        st.info("No data")
        return

    total_pages = max(1, math.ceil(len(rows) / PREVIEW_PAGE_SIZE))
    page = st.number_input(
        f"Page (1-{total_pages})",
        min_value=1,
        max_value=total_pages,
        value=1,
        step=1,
        key=f"{key}_page",
    )

    frame = page_frame(rows, int(page))
    start = (int(page) - 1) * PREVIEW_PAGE_SIZE
    st.dataframe(frame, hide_index=True, width="stretch")
    st.caption(f"Showing {start + 1}-{start + len(frame)} of {len(rows)} rows")


def render_download_buttons(merged: List[Dict[str, Any]]) -> None:
    col_csv, col_xlsx = st.columns(2)

    with col_csv:
        st.download_button(
            label="📥 Download CSV",
            data=rows_to_csv_bytes(merged),
            file_name=CSV_EXPORT_NAME,
            mime="text/csv",
            type="secondary",
            width="stretch",
            key="download_csv",
        )
    with col_xlsx:
        st.download_button(
            label="📥 Download Excel",
            data=rows_to_xlsx_bytes(merged),
            file_name=XLSX_EXPORT_NAME,
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            type="primary",
            width="stretch",
            key="download_xlsx",
        )


def render_clear_button() -> bool:
    return st.button("🗑️ Clear", type="secondary")
