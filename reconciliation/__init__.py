from .indexer import build_barcode_index, build_index, clean_barcode_row
from .merge import MergeStats, merge_files, merge_with_stats, summarize_merge
from .transform import clean_title, handle_unique_de, handle_unique_product, join_descriptions, merge_row

__all__ = [
    "MergeStats",
    "build_barcode_index",
    "build_index",
    "clean_barcode_row",
    "clean_title",
    "handle_unique_de",
    "handle_unique_product",
    "join_descriptions",
    "merge_files",
    "merge_row",
    "merge_with_stats",
    "summarize_merge",
]
