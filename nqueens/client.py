import logging
import os

import requests

from nqueens.errors import ClientError, ConflictError

logger = logging.getLogger(__name__)

# ----- Service config -----
DEFAULT_SERVER_URL = "http://localhost:8080"


class SolverClient:
    """Talks to the JSON solver service started by `nqueens-server`."""

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or os.environ.get("NQUEENS_SERVER_URL", DEFAULT_SERVER_URL)).rstrip("/")
        self.timeout = float(timeout if timeout is not None else os.environ.get("NQUEENS_TIMEOUT", 30))
        self.session = session or requests.Session()

    def headers(self):
        return {"Accept": "application/json", "Content-Type": "application/json"}

    def info(self):
        """Return the service title and supported board sizes."""
        return self._request("GET", "/")

    def solve(self, n=None, queens=None, board=None, stop_after_first=False, render=False):
        """
        Solve a board remotely.

        Args:
            n (int | None): Board size; required unless `board` is given.
            queens (list[tuple[int, int]] | None): (row, col) of fixed queens.
            board (list[str] | None): Grid rows of 'Q' and '0'.
            stop_after_first (bool): Ask only for the first solution.
            render (bool): Also return each solution drawn as text.

        Returns:
            dict: The service response with "n", "mode", "count" and "solutions".

        Raises:
            ConflictError: If the fixed queens attack each other.
            ClientError: On any other non-2xx response.
        """
        payload = {"mode": "first" if stop_after_first else "all", "render": render}
        if board is not None:
            payload["board"] = list(board)
        if n is not None:
            payload["n"] = n
        if queens is not None:
            payload["queens"] = [list(q) for q in queens]

        logger.debug("POST %s/solve %s", self.base_url, payload)
        return self._request("POST", "/solve", json=payload)

    def _request(self, method, path, **kwargs):
        try:
            resp = self.session.request(method, f"{self.base_url}{path}", headers=self.headers(),
                                        timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ClientError(f"Could not reach solver service at {self.base_url}: {e}") from e

        if resp.status_code == 409:
            raise ConflictError(self._error_message(resp))
        if not resp.ok:
            logger.warning("Solver service error %s: %r", resp.status_code, resp.text)
            raise ClientError(self._error_message(resp), status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError:
            raise ClientError(f"Solver service returned a non-JSON body: {resp.text!r}",
                              status_code=resp.status_code) from None

    @staticmethod
    def _error_message(resp):
        try:
            return resp.json()["error"]
        except (ValueError, KeyError, TypeError):
            return f"Solver service returned {resp.status_code}: {resp.text}"
