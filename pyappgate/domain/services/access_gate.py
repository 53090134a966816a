"""Path-based access decisions for incoming requests."""

from collections.abc import Iterable

from pyappgate.api.paths import ENTRY_PATHS, HOME_PATH, LOGIN_PATH, UNAUTHED_PATHS
from pyappgate.domain.models.access import Decision, SessionIdentity
from pyappgate.utils.glob_matcher import matches_globs


class AccessGate:
    """
    Decide whether a request may proceed.

    Anonymous requests are only allowed on paths matching the allow-list globs.
    Authenticated requests to the entry pages (login and signup) are sent home.
    The entry pages are compared literally and independently of the allow-list.
    """

    def __init__(
        self,
        unauthed_paths: Iterable[str] = UNAUTHED_PATHS,
        login_path: str = LOGIN_PATH,
        home_path: str = HOME_PATH,
        entry_paths: Iterable[str] = ENTRY_PATHS,
    ) -> None:
        """
        Initialize the gate.

        Args:
            unauthed_paths: Glob patterns reachable without a session.
            login_path: Where anonymous users are sent.
            home_path: Where authenticated users are sent from entry pages.
            entry_paths: Exact paths an authenticated user should not see.

        """
        self.unauthed_paths = tuple(unauthed_paths)
        self.login_path = login_path
        self.home_path = home_path
        self.entry_paths = frozenset(entry_paths)

    def decide(self, path: str, identity: SessionIdentity) -> Decision:
        """
        Map a request path and session identity to a decision.

        Args:
            path: The normalized request path.
            identity: The session identity of the requester.

        Returns:
            The decision for this request.

        """
        if not identity.is_present and not matches_globs(path, self.unauthed_paths):
            return Decision.redirect_to(self.login_path)
        if identity.is_present and path in self.entry_paths:
            return Decision.redirect_to(self.home_path)
        return Decision.proceed()
