import pytest
from urllib.parse import urlsplit

from nqueens.app import create_app


@pytest.fixture
def app():
    return create_app({"TESTING": True})


@pytest.fixture
def http(app):
    return app.test_client()


class FlaskResponse:
    """Just enough of requests.Response for SolverClient."""

    def __init__(self, resp):
        self.status_code = resp.status_code
        self.ok = resp.status_code < 400
        self.text = resp.get_data(as_text=True)
        self._resp = resp

    def json(self):
        data = self._resp.get_json(silent=True)
        if data is None:
            raise ValueError("no JSON body")
        return data


class FlaskSession:
    """Routes SolverClient calls into a Flask test client."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, headers=None, timeout=None, json=None):
        self.calls.append((method, url, json))
        resp = self.test_client.open(urlsplit(url).path, method=method, headers=headers, json=json)
        return FlaskResponse(resp)


@pytest.fixture
def flask_session(http):
    return FlaskSession(http)
