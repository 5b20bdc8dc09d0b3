# interface/app.py
"""
Product Data Merger - Main Application

Streamlit interface: upload the DE, product information and (optional)
barcode files, merge them, preview the result and download it as CSV/XLSX.
"""

import streamlit as st

from components import (
    render_clear_button,
    render_download_buttons,
    render_file_uploaders,
    render_header,
    render_merge_summary,
    render_paginated_table,
    render_process_button,
)
from config import configure_logging
from processor import forget_files, process_uploaded_files, restore_session

configure_logging()

# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Product Data Merger",
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "initialized" not in st.session_state:
    stored_de, stored_product = restore_session()

    st.session_state.de_rows = (stored_de or {}).get("content")
    st.session_state.product_rows = (stored_product or {}).get("content")
    st.session_state.merged = (stored_de or {}).get("mergedData")
    st.session_state.stats = None
    st.session_state.processed = bool(st.session_state.de_rows)
    st.session_state.initialized = True

# ============================================================================
# MAIN APP FLOW
# ============================================================================
render_header()

de_file, product_file, barcode_file = render_file_uploaders()

if render_process_button(enabled=bool(de_file and product_file)):
    with st.spinner("🔄 Merging files..."):
        success, result, error = process_uploaded_files(de_file, product_file, barcode_file)

    if success:
        st.session_state.de_rows = result.de_rows
        st.session_state.product_rows = result.product_rows
        st.session_state.merged = result.merged
        st.session_state.stats = result.stats
        st.session_state.processed = True
    else:
        st.error(f"❌ Error: {error}")

# ============================================================================
# RESULTS SECTION
# ============================================================================
if st.session_state.processed:
    if st.session_state.stats is not None:
        render_merge_summary(st.session_state.stats)

    tab_de, tab_product, tab_merged = st.tabs(["DE File", "Product File", "Merged Data"])

    with tab_de:
        render_paginated_table(st.session_state.de_rows, key="de")
    with tab_product:
        render_paginated_table(st.session_state.product_rows, key="product")
    with tab_merged:
        render_paginated_table(st.session_state.merged, key="merged")
        if st.session_state.merged:
            render_download_buttons(st.session_state.merged)

if render_clear_button():
    forget_files()
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    st.rerun()
