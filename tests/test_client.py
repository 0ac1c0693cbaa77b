import pytest
import requests

from nqueens.client import DEFAULT_SERVER_URL, SolverClient
from nqueens.errors import ClientError, ConflictError


@pytest.fixture
def client(flask_session):
    return SolverClient("http://solver.test/", timeout=5, session=flask_session)


def test_info(client, flask_session):
    assert client.info()["title"] == "N-Queens Solver"
    assert flask_session.calls == [("GET", "http://solver.test/", None)]


def test_solve_with_queens(client, flask_session):
    data = client.solve(n=5, queens=[(0, 0)])
    assert data["solutions"] == [[0, 2, 4, 1, 3], [0, 3, 1, 4, 2]]
    assert flask_session.calls[0][2] == {"mode": "all", "render": False, "n": 5, "queens": [[0, 0]]}


def test_solve_with_board_first_rendered(client):
    data = client.solve(board=["0000", "Q000", "0000", "0000"], stop_after_first=True, render=True)
    assert data["count"] == 1
    assert data["boards"] == [" · · ♛ ·\n ♛ · · ·\n · · · ♛\n · ♛ · ·"]


def test_conflict_raises_conflict_error(client):
    with pytest.raises(ConflictError, match="attacking each other"):
        client.solve(n=4, queens=[(0, 0), (3, 3)])


def test_bad_request_raises_client_error(client):
    with pytest.raises(ClientError) as e:
        client.solve(n=3)
    assert e.value.status_code == 400
    assert str(e.value) == "Board size must be between 4 and 128."


def test_non_json_error_body():
    class Response:
        status_code = 502
        ok = False
        text = "Bad Gateway"

        def json(self):
            raise ValueError("not json")

    class Session:
        def request(self, *args, **kwargs):
            return Response()

    with pytest.raises(ClientError, match="returned 502: Bad Gateway"):
        SolverClient("http://solver.test", session=Session()).info()


def test_non_json_success_body():
    class Response:
        status_code = 200
        ok = True
        text = "<html>ok</html>"

        def json(self):
            raise requests.JSONDecodeError("Expecting value", self.text, 0)

    class Session:
        def request(self, *args, **kwargs):
            return Response()

    with pytest.raises(ClientError, match="non-JSON body") as e:
        SolverClient("http://solver.test", session=Session()).solve(n=4)
    assert e.value.status_code == 200


def test_connection_error():
    class Session:
        def request(self, *args, **kwargs):
            raise requests.ConnectionError("refused")

    with pytest.raises(ClientError, match="Could not reach solver service"):
        SolverClient("http://solver.test", session=Session()).solve(n=4)


def test_defaults_from_environment(monkeypatch):
    monkeypatch.delenv("NQUEENS_SERVER_URL", raising=False)
    monkeypatch.delenv("NQUEENS_TIMEOUT", raising=False)
    client = SolverClient()
    assert client.base_url == DEFAULT_SERVER_URL
    assert client.timeout == 30.0
    assert isinstance(client.session, requests.Session)

    monkeypatch.setenv("NQUEENS_SERVER_URL", "http://queens:9000/")
    monkeypatch.setenv("NQUEENS_TIMEOUT", "2.5")
    client = SolverClient()
    assert client.base_url == "http://queens:9000"
    assert client.timeout == 2.5
