import json
from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "app.py")


def test_app_solves_default_problem():
    at = AppTest.from_file(APP, default_timeout=60)
    at.run()
    assert not at.exception

    at.button[0].click().run()
    assert not at.exception
    subheaders = [s.value for s in at.subheader]
    assert "Result" in subheaders
    assert "Graphical table" in subheaders
    assert "Graph" in subheaders


def test_app_simplex_tableaux():
    at = AppTest.from_file(APP, default_timeout=60)
    at.run()
    cfg = {"c": [5, 4, 3], "A": [[2, 3, 1], [4, 1, 2], [3, 4, 2]], "b": [5, 11, 8], "senses": ["<=", "<=", "<="]}
    at.text_area[0].set_value(json.dumps(cfg))
    at.selectbox[0].select("simplex")
    at.checkbox[1].check()
    at.button[0].click().run()

    assert not at.exception
    subheaders = [s.value for s in at.subheader]
    assert "Simplex tableaux" in subheaders
    assert "Iterations / Tableaux" in subheaders


def test_app_reports_bad_json():
    at = AppTest.from_file(APP, default_timeout=60)
    at.run()
    at.text_area[0].set_value("{")
    at.button[0].click().run()

    assert not at.exception
    assert at.error[0].value.startswith("Invalid LP JSON")
