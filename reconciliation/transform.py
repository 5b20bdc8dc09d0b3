"""
Row transformations for the three merge cases.

- handle_unique_de: SKU only in the DE file
- handle_unique_product: SKU only in the product information file
- merge_row: SKU in both; DE supplies identity, price, stock, subcategory and
  images, the product file supplies everything else

Column names on the input side are the suppliers' own headers. Note that the
product file uses "Package size L/W/H" while the output uses
"Package size Length/Width/Height".
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from config import DESCRIPTION_SEPARATOR
from domain.records import IMAGE_COLUMNS, MergedRecord, Record, get_field
from fields.normalization import is_blank, to_text

PRODUCT_DESCRIPTION_COLUMNS = [f"Description {n}" for n in range(1, 6)]

# output column -> product file column
PRODUCT_COLUMNS = {
    "Material": "Material",
    "Category": "Category",
    "Brand": "Brand",
    "Product size": "Product size",
    "Package size Length": "Package size L",
    "Package size Width": "Package size W",
    "Package size Height": "Package size H",
    "Net weight": "Net weight",
    "Gross weight": "Gross weight",
    "Volume/CBM": "Volume/CBM",
    "Color": "Color",
}


def clean_title(name: Any, raw_sku: Any) -> str:
    """
    Build a display title from a product name.

    Names follow "<Brand> <title words> <SKU>": drop the first word, then the
    first occurrence of the raw SKU text.

    Example:
        clean_title("Brand WidgetX AAA001", "AAA001") -> "WidgetX"
    """
    words = to_text(name).split(" ")
    title = " ".join(words[1:])

    sku = to_text(raw_sku)
    if sku:
        title = title.replace(sku, "", 1)
    return title.strip()


def join_descriptions(values: Iterable[Any]) -> str:
    """Join the non-empty description cells with a blank line between them."""
    return DESCRIPTION_SEPARATOR.join(to_text(v) for v in values if not is_blank(v))


def image_fields(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy image1..image12 from a row, defaulting missing slots to ''."""
    return {column: get_field(record, column) for column in IMAGE_COLUMNS}


def handle_unique_de(de_row: Mapping[str, Any], sku: str) -> Record:
    """DE-only row: every DE column except the raw Description, plus SKU/Description/Barcode."""
    row: Record = {
        column: ("" if is_blank(value) else value)
        for column, value in de_row.items()
        if column != "Description"
    }
    row["SKU"] = sku
    row["Description"] = to_text(de_row.get("Description 1"))
    row["Barcode"] = ""
    return row


def handle_unique_product(product_row: Mapping[str, Any], sku: str) -> MergedRecord:
    """Product-only row: project the product sheet onto the output columns."""
    p = product_row

    row: Dict[str, Any] = {
        "SKU": sku,
        "EAN": get_field(p, "EAN"),
        "Material": get_field(p, "Material"),
        "Title": clean_title(p.get("Name"), p.get("SKU")),
        "Subcategory": get_field(p, "Title"),
    }
    for out_column, in_column in PRODUCT_COLUMNS.items():
        if out_column not in row:
            row[out_column] = get_field(p, in_column)

    row["Description"] = join_descriptions(
        [p.get(c) for c in PRODUCT_DESCRIPTION_COLUMNS] + [p.get("Specifications")]
    )
    row["Barcode"] = ""
    row.update(image_fields(p))
    return row  # type: ignore[return-value]


def merge_row(de_row: Mapping[str, Any], product_row: Mapping[str, Any], sku: str) -> MergedRecord:
    """Matched row: combine a DE row with its product information row."""
    d, p = de_row, product_row

    row: Dict[str, Any] = {
        "SKU": sku,
        "EAN": get_field(d, "EAN"),
        "Subcategory": get_field(d, "Category"),
        "Price": get_field(d, "Price"),
        "Stock": get_field(d, "Stock"),
        "Material": get_field(p, "Material"),
        "Title": clean_title(p.get("Name"), p.get("SKU")),
    }
    for out_column, in_column in PRODUCT_COLUMNS.items():
        if out_column not in row:
            row[out_column] = get_field(p, in_column)

    row["Description"] = join_descriptions(
        [d.get("Description 1")] + [p.get(c) for c in PRODUCT_DESCRIPTION_COLUMNS]
    )
    row["Barcode"] = ""
    # images always come from DE in a matched row
    row.update(image_fields(d))
    return row  # type: ignore[return-value]
