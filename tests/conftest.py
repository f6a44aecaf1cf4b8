import pytest

from sales_datagen.config.layout import DataLayout
from sales_datagen.generators.info_files import InfoFileGenerator

SMALL_POOLS = {"name_pool": {"pool_sizes": {"first_names": 25, "last_names": 25}}}


@pytest.fixture
def layout(tmp_path):
    return DataLayout(tmp_path / "data")


@pytest.fixture
def generator(layout):
    return InfoFileGenerator(layout=layout, seed=42, config=SMALL_POOLS)
