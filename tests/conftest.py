from pathlib import Path

import pytest

from campuspaths.config import CampusDataConfig, reset_config

BUILDINGS_CSV = """shortName,longName,x,y
CSE,Paul G. Allen Center,100.0,100.0
MGH,Mary Gates Hall,300.0,100.0
KNE,Kane Hall,300.0,300.0
SUZ,Suzzallo Library,100.0,300.0
ODE,Odegaard Library,900.0,900.0
,Unnamed Shed,1.0,1.0
"""

PATHS_CSV = """x1,y1,x2,y2,distance
100.0,100.0,200.0,100.0,100.0
200.0,100.0,300.0,100.0,100.0
300.0,100.0,300.0,300.0,200.0
100.0,100.0,100.0,300.0,200.0
100.0,300.0,200.0,200.0,141.421
200.0,200.0,300.0,300.0,141.421
200.0,100.0,200.0,200.0,100.0
"""


@pytest.fixture
def campus_dir(tmp_path: Path) -> Path:
    (tmp_path / "campus_buildings.csv").write_text(BUILDINGS_CSV, encoding="utf-8")
    (tmp_path / "campus_paths.csv").write_text(PATHS_CSV, encoding="utf-8")
    return tmp_path


@pytest.fixture
def campus_config(campus_dir: Path) -> CampusDataConfig:
    return CampusDataConfig(data_dir=campus_dir)


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()
