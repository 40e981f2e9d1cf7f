import pytest

from advent.catalog import Catalog
from advent.exceptions import ScaffoldError
from advent.harness import run
from advent.models import Solution
from advent.scaffold import scaffold
from advent.scaffold import solution_path
from advent.scaffold import SOLUTIONS_DIR
from advent.types import DayKey
from advent.types import NOT_SOLVED
from advent.types import Part


def test_solution_path(tmp_path):
    assert solution_path(DayKey(2022, 3), tmp_path) == tmp_path / "year2022" / "day03.py"
    assert solution_path(DayKey(2022, 3)) == SOLUTIONS_DIR / "year2022" / "day03.py"


def test_scaffold_creates_year_package(tmp_path, capsys):
    path = scaffold(DayKey(2022, 3), solutions_dir=tmp_path)
    assert path == tmp_path / "year2022" / "day03.py"
    assert (tmp_path / "year2022" / "__init__.py").exists()
    txt = path.read_text()
    assert "@puzzle(2022, 3)\nclass Day03(Solution):" in txt
    out, err = capsys.readouterr()
    assert "Creating a new year's directory at " in out
    assert "Creating solution file for 2022/03 at " in out


def test_scaffold_existing_year(tmp_path, capsys):
    scaffold(DayKey(2022, 3), solutions_dir=tmp_path)
    capsys.readouterr()
    scaffold(DayKey(2022, 4), solutions_dir=tmp_path)
    out, err = capsys.readouterr()
    assert "new year's directory" not in out


def test_scaffold_never_overwrites(tmp_path):
    path = scaffold(DayKey(2022, 3), solutions_dir=tmp_path)
    path.write_text("my precious solution")
    with pytest.raises(ScaffoldError) as exc_info:
        scaffold(DayKey(2022, 3), solutions_dir=tmp_path)
    assert str(exc_info.value) == "Code for 2022/03 already exists"
    assert path.read_text() == "my precious solution"


def test_scaffold_refuses_day_already_in_catalog(tmp_path, catalog):
    catalog.puzzle(2022, 3)(type("Day03", (Solution,), {}))
    with pytest.raises(ScaffoldError):
        scaffold(DayKey(2022, 3), solutions_dir=tmp_path, catalog=catalog)
    assert not (tmp_path / "year2022").exists()


def test_scaffold_then_resolve(tmp_path, monkeypatch):
    pkg = tmp_path / "roundtrip_solutions"
    pkg.mkdir()
    (pkg / "__init__.py").touch()
    monkeypatch.syspath_prepend(tmp_path)
    fresh = Catalog()
    monkeypatch.setattr("advent.catalog.catalog", fresh)
    key = DayKey(2022, 3)
    path = scaffold(key, solutions_dir=pkg)
    txt = path.read_text()
    fresh.register_all(packages=["roundtrip_solutions"], plugins=False)
    solution = fresh.resolve(key)
    assert solution.key == key
    assert run(solution, Part.ONE, "")[0] is NOT_SOLVED
    assert run(solution, Part.TWO, "")[0] is NOT_SOLVED
    with pytest.raises(ScaffoldError):
        scaffold(key, solutions_dir=pkg, catalog=fresh)
    assert path.read_text() == txt
