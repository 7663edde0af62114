import secrets
import threading
import time
import webbrowser
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Callable, Dict, List, Optional
from urllib.parse import parse_qs, urlencode, urlparse

import requests

from playlister.config import (
    AUTH_TIMEOUT_SECONDS,
    DEFAULT_REDIRECT_URI,
    HTTP_TIMEOUT_SECONDS,
    SCOPES,
    SPOTIFY_AUTH_URL,
    SPOTIFY_TOKEN_URL,
)
from playlister.core.logging_utils import log_debug, log_info, log_step
from playlister.spotify.client import SpotifyClient

_SUCCESS_PAGE = (
    b"<html><body><h1>Spotify authorization complete</h1>"
    b"<p>You can close this window and return to the application.</p>"
    b"</body></html>"
)
_FAILURE_PAGE = (
    b"<html><body><h1>Spotify authorization failed</h1>"
    b"<p>Check the terminal for details.</p>"
    b"</body></html>"
)
_ALREADY_DONE_PAGE = (
    b"<html><body><h1>Spotify authorization already handled</h1>"
    b"<p>You can close this window.</p>"
    b"</body></html>"
)


class SpotifyAuthError(Exception):
    """Raised when the authorization flow cannot produce a session."""


def generate_state() -> str:
    """Opaque anti-forgery token, unique per authorization flow."""
    return f"playlister-{secrets.token_urlsafe(16)}"


class AuthorizationResult:
    """
    Single-slot outcome of an authorization flow.

    Either a token payload or an error is stored, whichever comes first;
    later offers are ignored and reported as such (False).
    """

    def __init__(self) -> None:
        self._future: Future = Future()
        self._lock = threading.Lock()

    def done(self) -> bool:
        return self._future.done()

    def set_token(self, token_info: Dict) -> bool:
        with self._lock:
            if self._future.done():
                return False
            self._future.set_result(token_info)
            return True

    def set_error(self, error: BaseException) -> bool:
        with self._lock:
            if self._future.done():
                return False
            self._future.set_exception(error)
            return True

    def wait(self, timeout: Optional[float] = None) -> Dict:
        """
        Block until an outcome is available and return the token payload.
        Re-raises the stored error; raises concurrent.futures.TimeoutError
        when nothing arrives in time.
        """
        return self._future.result(timeout=timeout)


class _CallbackServer(HTTPServer):
    def __init__(self, address, flow: "AuthorizationFlow", result: AuthorizationResult):
        self.flow = flow
        self.result = result
        super().__init__(address, _CallbackHandler)


class _CallbackHandler(BaseHTTPRequestHandler):
    """
    Serves the redirect path only: turns the first callback into an
    AuthorizationResult outcome.
    """

    server: _CallbackServer

    def do_GET(self):
        parsed = urlparse(self.path)
        if parsed.path != self.server.flow.callback_path:
            self._respond(404, b"<html><body><h1>Not found</h1></body></html>")
            return

        if self.server.result.done():
            self._respond(200, _ALREADY_DONE_PAGE)
            return

        log_debug(f"Auth callback received: path={parsed.path}")
        params = parse_qs(parsed.query)
        try:
            token_info = self.server.flow.handle_callback(params)
        except SpotifyAuthError as e:
            self.server.result.set_error(e)
            self._respond(400, _FAILURE_PAGE)
            return

        self.server.result.set_token(token_info)
        self._respond(200, _SUCCESS_PAGE)

    def _respond(self, status: int, body: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        log_debug(format % args)


class AuthorizationFlow:
    """
    Interactive OAuth2 authorization-code flow against Spotify.

    run() binds a loopback listener on the redirect URI, opens the
    authorization page in a browser, waits for the single redirect carrying
    the code, checks the echoed state, exchanges the code for a token and
    returns an authenticated SpotifyClient. The listener only lives for the
    duration of run().
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str = DEFAULT_REDIRECT_URI,
        scopes: Optional[List[str]] = None,
        state: Optional[str] = None,
        timeout: float = AUTH_TIMEOUT_SECONDS,
        browser: Optional[str] = None,
        opener: Optional[Callable[[str], bool]] = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scopes = list(SCOPES if scopes is None else scopes)
        self.state = state or generate_state()
        self.timeout = timeout
        self.browser = browser
        self._opener = opener or self._open_browser

        # The listener port must be the one the browser is redirected to.
        parsed = urlparse(redirect_uri)
        if parsed.port is None:
            raise ValueError(f"redirect URI {redirect_uri!r} needs an explicit port")
        self.host = parsed.hostname or "127.0.0.1"
        self.port = parsed.port
        self.callback_path = parsed.path or "/"

    def build_authorize_url(self) -> str:
        query = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": " ".join(self.scopes),
            "state": self.state,
        }
        return f"{SPOTIFY_AUTH_URL}?{urlencode(query)}"

    def exchange_code(self, code: str) -> Dict:
        """Trade an authorization code for a token payload."""
        token_data = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.redirect_uri,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        try:
            r = requests.post(
                SPOTIFY_TOKEN_URL, data=token_data, timeout=HTTP_TIMEOUT_SECONDS
            )
            r.raise_for_status()
            token_info = r.json()
        except (requests.RequestException, ValueError) as e:
            raise SpotifyAuthError(f"failed to exchange authorization code: {e}") from e

        if not token_info.get("access_token"):
            raise SpotifyAuthError("token endpoint returned no access_token")
        token_info["timestamp"] = int(time.time())
        return token_info

    def handle_callback(self, params: Dict[str, List[str]]) -> Dict:
        """
        Validate the redirect query parameters and exchange the code.
        Raises SpotifyAuthError on a provider error, a state mismatch or a
        missing code; no exchange happens in those cases.
        """
        error = params.get("error", [None])[0]
        if error:
            raise SpotifyAuthError(f"Spotify authorization failed: {error}")

        state = params.get("state", [None])[0]
        if not state or not secrets.compare_digest(state.encode(), self.state.encode()):
            raise SpotifyAuthError("state mismatch in authorization callback")

        code = params.get("code", [None])[0]
        if not code:
            raise SpotifyAuthError("missing 'code' parameter in authorization callback")

        return self.exchange_code(code)

    def _open_browser(self, url: str) -> bool:
        try:
            browser = webbrowser.get(self.browser) if self.browser else webbrowser.get()
        except webbrowser.Error as e:
            raise SpotifyAuthError(f"failed to open browser: {e}") from e
        return browser.open(url)

    def _start_listener(self, result: AuthorizationResult) -> _CallbackServer:
        try:
            return _CallbackServer((self.host, self.port), self, result)
        except OSError as e:
            raise SpotifyAuthError(
                f"failed to start HTTP server on {self.host}:{self.port}: {e}"
            ) from e

    def run(self) -> SpotifyClient:
        result = AuthorizationResult()
        httpd = self._start_listener(result)
        thread = threading.Thread(
            target=httpd.serve_forever, name="playlister-auth-callback", daemon=True
        )
        thread.start()

        try:
            auth_url = self.build_authorize_url()
            log_step("Opening browser for Spotify authorization...")
            log_info(
                f"If your browser does not open automatically, visit this URL:\n{auth_url}"
            )
            if not self._opener(auth_url):
                raise SpotifyAuthError("failed to open browser")

            try:
                token_info = result.wait(timeout=self.timeout)
            except FutureTimeoutError:
                raise SpotifyAuthError(
                    f"timed out after {self.timeout}s waiting for Spotify authorization"
                ) from None
        finally:
            httpd.shutdown()
            httpd.server_close()
            thread.join()

        return SpotifyClient(token_info)
