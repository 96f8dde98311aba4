import pytest

from codegolf.country import flag_emoji, load_countries

TOML = """
Europe = [
  { id = "GB", name = "United Kingdom" },
  { id = "FR", name = "France" },
]
Asia = [{ id = "JP", name = "Japan" }]
"""


@pytest.fixture
def countries_file(tmp_path):
    path = tmp_path / "countries.toml"
    path.write_text(TOML, encoding="utf-8")
    return path


def test_flag_emoji():
    assert flag_emoji("GB") == "\U0001F1EC\U0001F1E7"


def test_load_indexes_by_id(countries_file):
    countries = load_countries(countries_file)
    assert countries.by_id["FR"].name == "France"
    assert countries.by_id["JP"].flag == flag_emoji("JP")
    assert set(countries.by_id) == {"GB", "FR", "JP"}


def test_load_keeps_region_order(countries_file):
    countries = load_countries(countries_file)
    assert [c.id for c in countries.tree["Europe"]] == ["GB", "FR"]
    assert countries.tree["Asia"][0] is countries.by_id["JP"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_countries(tmp_path / "absent.toml")


def test_region_must_be_list(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text('Europe = "nope"\n', encoding="utf-8")
    with pytest.raises(ValueError):
        load_countries(path)