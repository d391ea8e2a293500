import pytest
from fastapi.testclient import TestClient

from backend.app.main import app
from drill.exercises import EXERCISES
from drill.validator import MSG_CONTINUE, MSG_SOLVED


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_list_and_read_exercises(client: TestClient) -> None:
    res = client.get("/api/exercises")
    assert res.status_code == 200
    body = res.json()
    assert [ex["id"] for ex in body] == [ex.id for ex in EXERCISES]

    res = client.get("/api/exercises/re2")
    assert res.status_code == 200
    assert res.json()["target"] == "x=-0.5"
    assert res.json()["type"] == "EQUATION"


def test_unknown_exercise_is_404(client: TestClient) -> None:
    assert client.get("/api/exercises/nope").status_code == 404
    assert client.post("/api/exercises/nope/attempts").status_code == 404


def test_attempt_flow(client: TestClient) -> None:
    attempt = client.post("/api/exercises/re2/attempts").json()
    assert attempt["draft"] == "1/(x+1) = 2"
    assert attempt["steps"] == []
    assert attempt["solved"] is False

    attempt = client.post("/api/attempts/steps",
                          json={"attempt": attempt, "text": "1=2(x+1)"}).json()
    assert attempt["steps"][0]["valid"] is True
    assert attempt["steps"][0]["message"] == MSG_CONTINUE

    attempt = client.post("/api/attempts/steps",
                          json={"attempt": attempt, "text": "x=-0.5"}).json()
    assert attempt["solved"] is True
    assert attempt["steps"][-1]["message"] == MSG_SOLVED

    res = client.post("/api/attempts/steps/delete", json={"attempt": attempt, "index": 0})
    assert res.status_code == 200
    assert res.json()["solved"] is False
    assert len(res.json()["steps"]) == 1


def test_client_cannot_replace_exercise_target(client: TestClient) -> None:
    attempt = client.post("/api/exercises/tr1/attempts").json()
    attempt["exercise"]["target"] = "(x-3)(x-5)"
    attempt["exercise"]["expression"] = "(x-3)(x-5)"

    res = client.post("/api/attempts/steps", json={"attempt": attempt, "text": "(x-3)(x-5)"})
    assert res.status_code == 200
    assert res.json()["steps"][0]["valid"] is False
    assert res.json()["exercise"]["target"] == "(x-3)(x-4)"


def test_delete_out_of_range_is_400(client: TestClient) -> None:
    attempt = client.post("/api/exercises/tr1/attempts").json()
    res = client.post("/api/attempts/steps/delete", json={"attempt": attempt, "index": 0})
    assert res.status_code == 400


def test_evaluate(client: TestClient) -> None:
    res = client.post("/api/evaluate", json={"text": "x^2 + 1", "x": 2})
    assert res.json()["value"] == pytest.approx(5)

    res = client.post("/api/evaluate", json={"text": "1/x", "x": 0})
    assert res.status_code == 200
    assert res.json()["value"] is None


def test_check(client: TestClient) -> None:
    res = client.post("/api/check", json={"text": "(x-3)(x+3)", "reference": "x^2-9"})
    body = res.json()
    assert body["equivalent"] is True
    assert body["factored"] is True
    assert body["is_zero"] is False
    assert body["display"] == "(x - 3)(x + 3)"

    res = client.post("/api/check", json={"text": "x - x", "reference": "0"})
    assert res.json()["is_zero"] is True
    assert res.json()["factored"] is False


def test_check_empty_is_400(client: TestClient) -> None:
    res = client.post("/api/check", json={"text": "  ", "reference": "x"})
    assert res.status_code == 400
