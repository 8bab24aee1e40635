import pytest
from flask import Flask

from src.work_tracker.work_tracker.api.controller import register
from src.work_tracker.work_tracker.container import build_container
from src.work_tracker.work_tracker.main import create_app


@pytest.fixture()
def container(tmp_path):
    return build_container(ledger_dir=tmp_path / "ledger", state_file=tmp_path / "state.json")


@pytest.fixture()
def client(container):
    app = create_app(container)
    app.config["TESTING"] = True
    return app.test_client()


def test_fix_day_and_summary(client):
    resp = client.put("/days/2026-02-10", json={"clock_in": "08:05", "clock_out": "19:37"})
    assert resp.status_code == 200
    assert resp.get_json()["record"]["worked_hours"] == 7.5
    assert resp.get_json()["record"]["overtime_hours"] == 1.5

    summary = client.get("/summary/2026-02").get_json()
    assert summary["exists"] is True
    assert summary["totals"]["days"] == 1
    assert summary["records"][0]["clock_in"] == "08:05"


def test_fix_day_validation_error(client):
    resp = client.put("/days/2026-02-10", json={"clock_in": "19:00", "clock_out": "08:00"})

    assert resp.status_code == 400
    assert "later than" in resp.get_json()["error"]


def test_bad_month_is_rejected(client):
    assert client.get("/summary/2026-13").status_code == 400


def test_clock_in_guard_and_force(client):
    assert client.post("/clock-in", json={"time": "08:30"}).status_code == 201
    assert client.post("/clock-in", json={"time": "08:40"}).status_code == 400

    resp = client.post("/clock-in", json={"time": "08:40", "force": True})
    assert resp.status_code == 201
    assert resp.get_json()["replaced"] == "08:30"
    assert resp.get_json()["schedule"]["required_end"] == "17:40"

    status = client.get("/status").get_json()
    assert status["clock_in"] == "08:40"


def test_clock_out_without_clock_in(client):
    resp = client.post("/clock-out", json={"time": "18:00"})

    assert resp.status_code == 400


def test_status_when_idle(client):
    assert client.get("/status").get_json()["phase"] == "NOT_CLOCKED_IN"


def test_ledger_write_failure_is_500(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    app = Flask(__name__)
    register(app, build_container(ledger_dir=blocker, state_file=tmp_path / "state.json"))

    resp = app.test_client().put("/days/2026-02-10", json={"clock_in": "08:30", "clock_out": "18:00"})

    assert resp.status_code == 500


def test_non_object_body_is_rejected(client):
    resp = client.put("/days/2026-02-10", json=["08:30", "18:00"])

    assert resp.status_code == 400
    assert "JSON object" in resp.get_json()["error"]

    assert client.post("/clock-in", json=[1, 2]).status_code == 400
