import os

import pytest

import app as app_module
from config import CFG


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(CFG, "ISOLATE", False)
    monkeypatch.setattr(CFG, "SOLUTION_OUT", "solution.txt")
    monkeypatch.setattr(CFG, "LAYOUT_HTML", "layout_view.html")
    monkeypatch.setattr(app_module, "BASE_DIR", str(tmp_path))
    monkeypatch.setattr(app_module, "SOLUTION_DIR", str(tmp_path))
    monkeypatch.setattr(app_module, "SOLUTION_FILENAME", "solution.txt")
    monkeypatch.setattr(app_module, "LAYOUT_DIR", str(tmp_path))
    monkeypatch.setattr(app_module, "LAYOUT_FILENAME", "layout_view.html")
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c


def test_index_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"<form" in resp.data


def test_solve_json(client, tmp_path):
    resp = client.post("/solve", json={"rows": 4, "columns": 4, "pieces": "LLZZ"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["ok"] is True
    assert body["status"] == "Solved"
    assert body["plain"] == "AAAB\nACBB\nCCBD\nCDDD\n"
    assert body["pretty"].startswith("┌")
    with open(os.path.join(tmp_path, "solution.txt"), encoding="utf-8") as fh:
        assert fh.read() == body["plain"]
    assert os.path.exists(os.path.join(tmp_path, "layout_view.html"))


def test_solve_form_renders_result_page(client):
    resp = client.post("/solve", data={"rows": "1", "columns": "4", "count_I": "1"})
    assert resp.status_code == 200
    assert b"AAAA" in resp.data
    assert b"<svg" in resp.data

    latest = client.get("/result/latest")
    assert latest.status_code == 200
    assert b"AAAA" in latest.data


def test_solve_without_solution(client, tmp_path):
    resp = client.post("/solve", json={"rows": 1, "columns": 4, "pieces": "T"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["ok"] is False
    assert body["status"] == "No solution"
    assert body["plain"] == ""
    with open(os.path.join(tmp_path, "solution.txt"), encoding="utf-8") as fh:
        assert fh.read() == "No solution\n"


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"columns": 4, "pieces": "I"}, "Bad puzzle: value of <rows> must be a positive integer"),
        ({"rows": 1, "columns": 3, "pieces": ""}, "The total number of squares on the board is not a multiple of four."),
        (
            {"rows": 2, "columns": 4, "pieces": "I"},
            "The total number of squares on the board and the total number of squares in pieces don't match.",
        ),
    ],
)
def test_solve_rejects_bad_input(client, payload, message):
    resp = client.post("/solve", json=payload)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["ok"] is False
    assert body["status"] == "Error"
    assert body["message"] == message


def test_solver_failure_is_500(client, monkeypatch):
    monkeypatch.setattr(
        app_module, "_run_solver", lambda rows, columns, pieces: (False, None, {}, "Stopped before solution (timebox)")
    )
    resp = client.post("/solve", json={"rows": 4, "columns": 4, "pieces": "LLZZ"})
    assert resp.status_code == 500
    assert resp.get_json()["message"] == "Stopped before solution (timebox)"


def test_progress_reports_last_run(client):
    client.post("/solve", json={"rows": 4, "columns": 4, "pieces": "LLZZ"})
    resp = client.get("/progress")
    assert resp.status_code == 200
    assert resp.headers["Cache-Control"] == "no-store, max-age=0"
    snap = resp.get_json()
    assert snap["status"] == "Solved"
    assert snap["done"] is True
    assert snap["grid"] == "4 × 4"
    assert snap["pieces"] == "LLZZ"
    assert snap["result_url"] == "/result/latest"


def test_downloads(client):
    client.post("/solve", json={"rows": 4, "columns": 4, "pieces": "LLZZ"})
    solution = client.get("/download/solution")
    assert solution.status_code == 200
    assert solution.data == b"AAAB\nACBB\nCCBD\nCDDD\n"
    layout = client.get("/download/html")
    assert layout.status_code == 200
    assert b"<svg" in layout.data


def test_layout_download_follows_unsolvable_run(client):
    client.post("/solve", json={"rows": 4, "columns": 4, "pieces": "LLZZ"})
    assert b"<svg" in client.get("/download/html").data

    client.post("/solve", json={"rows": 1, "columns": 4, "pieces": "T"})
    layout = client.get("/download/html")
    assert layout.status_code == 200
    assert b"<svg" not in layout.data
    assert b"No solution" in layout.data
    assert "1 × 4: T".encode("utf-8") in layout.data
