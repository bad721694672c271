import shutil
from pathlib import Path

import pytest

from fbcam.termcache.formats.tab import TabAdapter

DATA_DIR = Path(__file__).parent / "data"


class CountingAdapter(TabAdapter):
    """Tab adapter that counts how many times it parsed something."""

    def __init__(self):
        self.calls = 0

    def parse(self, stream, source=None):
        self.calls += 1
        return super().parse(stream, source=source)


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def tab_file(tmp_path):
    """A writable copy of the tab-delimited test ontology."""
    path = tmp_path / "go.tab"
    shutil.copyfile(DATA_DIR / "go.tab", path)
    return path


@pytest.fixture
def counting_adapter():
    return CountingAdapter()
