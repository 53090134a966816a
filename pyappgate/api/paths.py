"""Path lists shared by the access gate and the routing table."""

# API endpoints reachable without a session that are not served by page routing.
PUBLIC_NON_ROUTED_API_PATHS: tuple[str, ...] = (
    "/api/oauth",
    "/api/subscriptions/webhook",
    "/api/support/contact",
)

UNAUTHED_PATHS: tuple[str, ...] = (
    "/",
    "/home",
    "/docs",
    "/blog",
    "/blog/**/*",
    "/login",
    "/login/email",
    "/login/confirm",
    "/login/accept-invite",
    "/login/confirm-signup",
    "/signup",
    "/resources/**/*",
    "/legal/**/*",
    "/s/*",
    "/embed/*",
    *PUBLIC_NON_ROUTED_API_PATHS,
)

LOGIN_PATH = "/login"
SIGNUP_PATH = "/signup"
HOME_PATH = "/"

# Entry-only pages an authenticated user is sent away from. Compared exactly, not as globs.
ENTRY_PATHS: frozenset[str] = frozenset({LOGIN_PATH, SIGNUP_PATH})
