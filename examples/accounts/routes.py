"""Accounts: public pages, a members area, and sign-in/sign-up screens.

Demonstrates:
- anonymous routes visible to everyone
- authorized routes that bounce signed-out visitors to ``/login``
- unauthorized routes that bounce signed-in users to ``/account``
- a per-route ``redirect_path`` and ``condition``
- a catch-all not-found view

Inspect:
    PYTHONPATH=examples routegate routes accounts.routes
    PYTHONPATH=examples routegate routes accounts.routes --authenticated
    PYTHONPATH=examples routegate check accounts.routes
"""

from dataclasses import dataclass

BILLING_ENABLED = False


@dataclass(frozen=True, slots=True)
class View:
    """Stand-in for a host view: renders a title."""

    title: str

    def render(self) -> str:
        return f"<h1>{self.title}</h1>"


home = View("Home")
pricing = View("Pricing")
account = View("Account")
billing = View("Billing")
login = View("Sign in")
signup = View("Sign up")
not_found = View("Not found")


routes = {
    "anonymous_structure": {
        "routes": [
            {"path": "/", "component": home},
            {"path": "/pricing", "component": pricing, "route_props": {"exact": False}},
        ],
    },
    "authorized_structure": {
        "fallback_path": "/login",
        "routes": [
            {"path": "/account", "component": account},
            {
                "path": "/account/billing",
                "component": billing,
                "condition": BILLING_ENABLED,
                "redirect_path": "/account",
            },
        ],
    },
    "unauthorized_structure": {
        "fallback_path": "/account",
        "routes": [
            {"path": "/login", "component": login},
            {"path": "/signup", "component": signup},
        ],
    },
    "fallback_component": not_found,
}
