from __future__ import annotations

import pytest

# Name lines are padded to 24 characters, as distributed by CelesTrak.
ISS_NAME = "ISS (ZARYA)             "
ISS_LINE1 = "1 25544U 98067A   17126.53358796  .00002780  00000-0  49495-4 0  9993"
ISS_LINE2 = "2 25544  51.6401 245.6477 0005666 129.9909  47.4633 15.53976999552869"

TIANGONG_NAME = "TIANGONG 1              "
TIANGONG_LINE1 = "1 37820U 11053A   17128.17101010  .00017038  00000-0  10346-3 0  9995"
TIANGONG_LINE2 = "2 37820  42.7592  83.7323 0017363 158.5208 331.2752 15.77000810321677"

MOLNIYA_NAME = "MOLNIYA 2-10            "
MOLNIYA_LINE1 = "1 07376U 74056A   17128.50000000 -.00001767  00000-0  26226-3 0  9990"
MOLNIYA_LINE2 = "2 07376  62.8847 308.5504 7362834 292.3246   8.4617  2.01122600128337"

# Launch years are expanded against this year in tests.
CURRENT_YEAR = 2026


@pytest.fixture
def iss_lines() -> list[str]:
    return [ISS_NAME, ISS_LINE1, ISS_LINE2]


@pytest.fixture
def tiangong_lines() -> list[str]:
    return [TIANGONG_NAME, TIANGONG_LINE1, TIANGONG_LINE2]


@pytest.fixture
def molniya_lines() -> list[str]:
    return [MOLNIYA_NAME, MOLNIYA_LINE1, MOLNIYA_LINE2]


@pytest.fixture
def catalog_lines(iss_lines, tiangong_lines, molniya_lines) -> list[str]:
    return iss_lines + tiangong_lines + molniya_lines


@pytest.fixture
def current_year() -> int:
    return CURRENT_YEAR


@pytest.fixture
def tle_file(tmp_path, catalog_lines):
    path = tmp_path / "catalog.txt"
    path.write_text("\n".join(catalog_lines) + "\n", encoding="ascii")
    return path
