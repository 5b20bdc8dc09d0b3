from reconciliation.indexer import build_barcode_index, build_index, clean_barcode_row


def test_build_index_uses_normalized_sku():
    index = build_index([{"SKU": "B34AAA001V1", "Price": 10}, {"SKU": "BBB002"}])
    assert list(index) == ["AAA001", "BBB002"]
    assert index["AAA001"]["Price"] == 10


def test_build_index_skips_empty_keys():
    index = build_index([{"SKU": "B34V1"}, {"SKU": ""}, {"Name": "no sku"}, {"SKU": "X1"}])
    assert list(index) == ["X1"]


def test_build_index_last_write_wins_and_keeps_position():
    index = build_index(
        [
            {"SKU": "A", "Price": 1},
            {"SKU": "B", "Price": 2},
            {"SKU": "B34A", "Price": 3},
        ]
    )
    assert list(index) == ["A", "B"]
    assert index["A"]["Price"] == 3


def test_clean_barcode_row_renames_columns():
    row = clean_barcode_row({"EAN Barcode": 1.68071e12, "sku": "B34X", "Other": "y"})
    assert row == {"Barcode": "1680710000000", "SKU": "B34X", "Other": "y"}


def test_barcode_index_by_sku():
    index = build_barcode_index([{"SKU": "B34AAA001V1", "Barcode": "123456789012"}])
    assert index["AAA001"]["Barcode"] == "123456789012"


def test_barcode_index_numeric_barcode_is_decimal_string():
    index = build_barcode_index([{"Sku": "AAA001", "barcode": 1.68071e12}])
    assert index["AAA001"]["Barcode"] == "1680710000000"


def test_barcode_index_synthetic_key_without_sku():
    index = build_barcode_index([{"Barcode": "999"}])
    assert list(index) == ["barcode_999"]
    assert index["barcode_999"]["Barcode"] == "999"


def test_barcode_index_skips_noise_rows():
    index = build_barcode_index([{"Barcode": "", "SKU": ""}, {"Note": "header"}, {"SKU": "B34V1", "Barcode": "1"}])
    assert index == {}
