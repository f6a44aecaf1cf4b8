"""Tests for loading and cross-checking the products, salesmen and sales files."""

import builtins
import logging
from pathlib import Path

import pytest

from sales_datagen.loaders import data_loader
from sales_datagen.loaders.data_loader import load_products, load_sales, load_salesmen
from sales_datagen.models.core import Product, Sale, Salesman


def write_dataset(root, products="", salesmen="", sales=None):
    """Lay out a dataset under root; sales maps file name -> contents."""
    sales_dir = root / "sales"
    sales_dir.mkdir(parents=True, exist_ok=True)
    (root / "products.txt").write_text(products, encoding="utf-8")
    (root / "salesmen.txt").write_text(salesmen, encoding="utf-8")
    for name, contents in (sales or {}).items():
        (sales_dir / name).write_text(contents, encoding="utf-8")
    return root


def load_all(root):
    products = load_products(root / "products.txt")
    salesmen = load_salesmen(root / "salesmen.txt")
    sales = load_sales(root / "sales", salesmen, products)
    return products, salesmen, sales


def warnings_from(caplog):
    return [r for r in caplog.records if r.levelno == logging.WARNING]


def test_minimal_round_trip(tmp_path, caplog):
    root = write_dataset(
        tmp_path,
        products="1;Cocacola;1500\n",
        salesmen="CC;10000001;Ada;Byron\n",
        sales={"CC_10000001.txt": "1;3\n"},
    )
    with caplog.at_level(logging.WARNING):
        products, salesmen, sales = load_all(root)

    assert products == {1: Product(1, "Cocacola", 1500)}
    assert products[1].name == "Cocacola"
    assert list(salesmen) == ["CC_10000001"]
    salesman = salesmen["CC_10000001"]
    assert salesman.full_name == "Ada Byron"
    assert sales == {salesman: [Sale(1, 3)]}
    assert warnings_from(caplog) == []


def test_unknown_product_reference_skipped(tmp_path, caplog):
    root = write_dataset(
        tmp_path,
        products="1;Cocacola;1500\n",
        salesmen="CC;10000001;Ada;Byron\n",
        sales={"CC_10000001.txt": "2;4\n"},
    )
    with caplog.at_level(logging.WARNING):
        _, salesmen, sales = load_all(root)

    assert sales[salesmen["CC_10000001"]] == []
    messages = [r.getMessage() for r in warnings_from(caplog)]
    assert len(messages) == 1
    assert "product not found: 2" in messages[0]
    assert "CC_10000001.txt" in messages[0]


def test_orphan_sales_file_skipped(tmp_path, caplog):
    root = write_dataset(tmp_path, sales={"CC_10000001.txt": "1;3\n"})
    with caplog.at_level(logging.WARNING):
        products, salesmen, sales = load_all(root)

    assert salesmen == {}
    assert sales == {}
    messages = [r.getMessage() for r in warnings_from(caplog)]
    assert any("salesman not found: CC_10000001.txt" in m for m in messages)


@pytest.mark.parametrize("line", ["1;0", "1;-3"])
def test_non_positive_quantity_skipped(tmp_path, caplog, line):
    root = write_dataset(
        tmp_path,
        products="1;Cocacola;1500\n",
        salesmen="CC;10000001;Ada;Byron\n",
        sales={"CC_10000001.txt": line + "\n"},
    )
    with caplog.at_level(logging.WARNING):
        _, salesmen, sales = load_all(root)

    assert sales[salesmen["CC_10000001"]] == []
    assert any("invalid quantity" in r.getMessage() for r in warnings_from(caplog))


def test_malformed_product_line_skipped(tmp_path, caplog):
    path = tmp_path / "products.txt"
    path.write_text("abc;Cocacola;1500\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        products = load_products(path)

    assert products == {}
    messages = [r.getMessage() for r in warnings_from(caplog)]
    assert len(messages) == 1
    assert "abc;Cocacola;1500" in messages[0]
    assert str(path) in messages[0]


def test_missing_sales_directory_is_fatal(tmp_path):
    with pytest.raises(OSError):
        load_sales(tmp_path / "missing", {}, {})


def test_sales_path_that_is_a_file_is_fatal(tmp_path):
    not_a_dir = tmp_path / "sales"
    not_a_dir.write_text("", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        load_sales(not_a_dir, {}, {})


def test_sale_line_edge_cases(tmp_path, caplog):
    root = write_dataset(
        tmp_path,
        products="1;Cocacola;1500\n3;Pepsi;2000\n",
        salesmen="CE;20000002;Alan;Turing\n",
        sales={"CE_20000002.txt": "3;5;\n\n7\n1;x\n1;2\n"},
    )
    with caplog.at_level(logging.WARNING):
        _, salesmen, sales = load_all(root)

    # Trailing separator accepted, blank line ignored, file order preserved
    assert sales[salesmen["CE_20000002"]] == [Sale(3, 5), Sale(1, 2)]
    messages = [r.getMessage() for r in warnings_from(caplog)]
    assert len(messages) == 2
    assert any("Invalid sale line skipped" in m and ": 7" in m for m in messages)
    assert any("Invalid sale data skipped" in m for m in messages)


@pytest.mark.parametrize("file_name", ["FOO.txt", "A_B_C.txt"])
def test_bad_sales_file_names_skipped(tmp_path, caplog, file_name):
    root = write_dataset(
        tmp_path,
        products="1;Cocacola;1500\n",
        salesmen="CC;10000001;Ada;Byron\n",
        sales={file_name: "1;3\n"},
    )
    with caplog.at_level(logging.WARNING):
        _, _, sales = load_all(root)

    assert sales == {}
    assert any(file_name in r.getMessage() for r in warnings_from(caplog))


def test_non_txt_entries_ignored(tmp_path, caplog):
    root = write_dataset(
        tmp_path,
        products="1;Cocacola;1500\n",
        salesmen="CC;10000001;Ada;Byron\n",
        sales={"CC_10000001.csv": "1;3\n", "notes.md": "hello\n"},
    )
    (root / "sales" / "CC_10000001.txt").mkdir()
    with caplog.at_level(logging.WARNING):
        _, _, sales = load_all(root)

    assert sales == {}
    assert warnings_from(caplog) == []


def test_invalid_product_values_skipped(tmp_path, caplog):
    path = tmp_path / "products.txt"
    path.write_text(
        "0;Zero;100\n2;Negative;-1\n3;Ok;0\n4;Too;Many;Fields\n5;Trailing;10;\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING):
        products = load_products(path)

    assert sorted(products) == [3, 5]
    assert products[5].price == 10
    assert len(warnings_from(caplog)) == 3


def test_duplicate_product_ids_last_wins(tmp_path, caplog):
    path = tmp_path / "products.txt"
    path.write_text("1;Cocacola;1500\n1;Pepsi;2000\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        products = load_products(path)

    assert products[1].name == "Pepsi"
    assert products[1].price == 2000
    assert any("Duplicate product id 1" in r.getMessage() for r in warnings_from(caplog))


def test_salesmen_parsing(tmp_path, caplog):
    path = tmp_path / "salesmen.txt"
    path.write_text(
        "CC;10000001;Ada;Byron\n"
        "CE;12345678901;Grace;Hopper\n"
        "CC;abc;Bad;Number\n"
        "CC;10000002;Missing\n"
        "TI;10000003;Wrong;Type\n"
        "CC;-4;Negative;Number\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING):
        salesmen = load_salesmen(path)

    assert set(salesmen) == {"CC_10000001", "CE_12345678901"}
    assert salesmen["CE_12345678901"] == Salesman("CE", 12345678901, "Grace", "Hopper")
    assert len(warnings_from(caplog)) == 4


def test_salesman_key_uses_parsed_doc_number(tmp_path):
    path = tmp_path / "salesmen.txt"
    path.write_text(" CC ; 0010000001 ; Ada ; Byron \n", encoding="utf-8")
    salesmen = load_salesmen(path)
    assert list(salesmen) == ["CC_10000001"]
    assert salesmen["CC_10000001"].first_name == "Ada"


def test_missing_products_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_products(tmp_path / "products.txt")


def test_undecodable_product_line_skipped(tmp_path, caplog):
    path = tmp_path / "products.txt"
    path.write_bytes(b"1;Cocacola;1500\n2;Caf\xe9;2000\n")
    with caplog.at_level(logging.WARNING):
        products = load_products(path)

    assert products == {1: Product(1, "Cocacola", 1500)}
    messages = [r.getMessage() for r in warnings_from(caplog)]
    assert len(messages) == 1
    assert "Undecodable line skipped" in messages[0]
    assert f"{path}:2" in messages[0]


def test_undecodable_salesman_line_skipped(tmp_path, caplog):
    path = tmp_path / "salesmen.txt"
    path.write_bytes(b"CC;10000001;Ada;Byron\nCE;10000002;Jos\xe9;Rojas\n")
    with caplog.at_level(logging.WARNING):
        salesmen = load_salesmen(path)

    assert list(salesmen) == ["CC_10000001"]
    assert len(warnings_from(caplog)) == 1


def test_undecodable_sale_line_keeps_valid_lines(tmp_path, caplog):
    root = write_dataset(
        tmp_path,
        products="1;Cocacola;1500\n",
        salesmen="CC;10000001;Ada;Byron\n",
    )
    (root / "sales" / "CC_10000001.txt").write_bytes(b"1;3\n1;4 \xe9\n")
    with caplog.at_level(logging.WARNING):
        _, salesmen, sales = load_all(root)

    assert sales[salesmen["CC_10000001"]] == [Sale(1, 3)]
    messages = [r.getMessage() for r in warnings_from(caplog)]
    assert len(messages) == 1
    assert "Undecodable line skipped" in messages[0]
    assert "CC_10000001.txt:2" in messages[0]


def test_duplicate_salesman_keys_last_wins(tmp_path, caplog):
    path = tmp_path / "salesmen.txt"
    path.write_text(
        "CC;10000001;Ada;Byron\nCE;10000001;Grace;Hopper\nCC;10000001;Alan;Turing\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING):
        salesmen = load_salesmen(path)

    assert set(salesmen) == {"CC_10000001", "CE_10000001"}
    assert salesmen["CC_10000001"].full_name == "Alan Turing"
    messages = [r.getMessage() for r in warnings_from(caplog)]
    assert len(messages) == 1
    assert "Duplicate salesman CC_10000001" in messages[0]


def test_unreadable_sales_file_skipped(tmp_path, caplog, monkeypatch):
    root = write_dataset(
        tmp_path,
        products="1;Cocacola;1500\n",
        salesmen="CC;10000001;Ada;Byron\nCE;10000002;Alan;Turing\n",
        sales={"CC_10000001.txt": "1;3\n", "CE_10000002.txt": "1;4\n"},
    )
    locked = root / "sales" / "CC_10000001.txt"

    def guarded_open(path, *args, **kwargs):
        if Path(path) == locked:
            raise PermissionError(13, "Permission denied", str(path))
        return builtins.open(path, *args, **kwargs)

    monkeypatch.setattr(data_loader, "open", guarded_open, raising=False)

    with caplog.at_level(logging.WARNING):
        _, salesmen, sales = load_all(root)

    assert sales[salesmen["CE_10000002"]] == [Sale(1, 4)]
    assert sales[salesmen["CC_10000001"]] == []
    messages = [r.getMessage() for r in warnings_from(caplog)]
    assert len(messages) == 1
    assert "Error reading sales file CC_10000001.txt" in messages[0]
