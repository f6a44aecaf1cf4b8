import json
from pathlib import Path

import pytest

from sales_datagen.config.layout import DataLayout
from sales_datagen.config.loader import load_generation_config


def test_default_generation_config():
    config = load_generation_config()
    assert config["default_counts"] == {"products": 10, "salesmen": 5}
    assert config["fallback_catalog_size"] == 10
    assert config["ranges"]["price"] == [1000, 10000]
    assert config["ranges"]["doc_number"] == [10_000_000, 99_999_999]
    assert config["ranges"]["sales_lines"] == [5, 15]
    assert config["ranges"]["quantity"] == [1, 20]


def test_partial_config_is_merged_over_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"ranges": {"quantity": [2, 4]}}), encoding="utf-8")

    config = load_generation_config(str(path))
    assert config["ranges"]["quantity"] == [2, 4]
    assert config["ranges"]["price"] == [1000, 10000]
    assert config["default_counts"]["products"] == 10


def test_non_object_config_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(TypeError):
        load_generation_config(str(path))


def test_data_layout_paths(tmp_path):
    default = DataLayout()
    assert default.products_file == Path("data/products.txt")
    assert default.salesmen_file == Path("data/salesmen.txt")
    assert default.sales_file("CC", 10000001) == Path("data/sales/CC_10000001.txt")

    layout = DataLayout(str(tmp_path / "out"))
    assert isinstance(layout.root, Path)
    layout.ensure_dirs()
    assert layout.sales_dir.is_dir()
    layout.ensure_dirs()


def test_loaded_config_does_not_alias_defaults():
    config = load_generation_config()
    config["ranges"]["price"][0] = 1
    config["name_pool"]["pool_sizes"]["first_names"] = 1
    assert load_generation_config()["ranges"]["price"] == [1000, 10000]
    assert load_generation_config()["name_pool"]["pool_sizes"]["first_names"] == 200
