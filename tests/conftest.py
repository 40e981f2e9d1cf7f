import pook as pook_mod
import pytest

from advent.catalog import Catalog


@pytest.fixture(autouse=True)
def remove_user_env(monkeypatch, tmp_path):
    # tests never see a real settings file or session cookie
    monkeypatch.delenv("AOC_SESSION", raising=False)
    monkeypatch.delenv("ADVENT_SETTINGS", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def input_dir(tmp_path):
    path = tmp_path / "Input"
    path.mkdir()
    return path


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def pook():
    pook_mod.on()
    yield pook_mod
    pook_mod.off()
