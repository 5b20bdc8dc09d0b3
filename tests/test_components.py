import pytest

pytest.importorskip("streamlit")

from config import PREVIEW_PAGE_SIZE  # noqa: E402
from interface.components import page_frame  # noqa: E402


def test_page_frame_shows_blanks_for_missing_cells():
    rows = [{"SKU": "A", "Price": None}, {"SKU": "B", "Price": 3.5, "Color": "Red"}]

    frame = page_frame(rows, 1)

    assert frame.to_dict(orient="records") == [
        {"SKU": "A", "Price": "", "Color": ""},
        {"SKU": "B", "Price": "3.5", "Color": "Red"},
    ]


def test_page_frame_slices_pages():
    rows = [{"SKU": str(i)} for i in range(PREVIEW_PAGE_SIZE + 3)]

    frame = page_frame(rows, 2)

    assert list(frame["SKU"]) == [str(i) for i in range(PREVIEW_PAGE_SIZE, PREVIEW_PAGE_SIZE + 3)]
