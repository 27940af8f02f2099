"""
Basic Gatekeeper usage example.

This example demonstrates the fundamental Gatekeeper operations:
- Registering route rules
- Setting the user token
- Route and component gating
"""

import jwt

from gatekeeper import Gatekeeper, GatekeeperConfig


def basic_example():
    """Demonstrate basic Gatekeeper usage"""
    print("Basic Gatekeeper Example")
    print("=" * 30)

    # 1. Create a gatekeeper reading claims under "claims"
    gatekeeper = Gatekeeper.new(GatekeeperConfig(root_claims_property="claims"))

    # 2. Register route rules
    gatekeeper.add_rule("/admin", ["acme:admin"])
    gatekeeper.add_rule("/reports", [{"organizationType": "*", "role": "analyst"}])
    gatekeeper.add_rule("/acme", ["acme:*"])

    # 3. Set the user token (signature is not checked here)
    token = jwt.encode(
        {
            "sub": "user-1",
            "claims": [
                {"organizationType": "acme", "role": "analyst"},
                {"organizationType": "globex"},
            ],
        },
        "example-secret-change-me-0123456789abcdef",
        algorithm="HS256",
    )
    gatekeeper.set_user_token(token)
    print(f"✓ Session roles: {list(gatekeeper.user_roles)}")

    # 4. Gate routes
    for route in ("/admin", "/reports", "/acme", "/public"):
        print(f"  {route:<10} -> {gatekeeper.route_gate(route)}")

    # 5. Gate a component
    print(f"✓ Component: {gatekeeper.component_gate(['globex:*'], 'GlobexPanel')!r}")

    # 6. Explain a decision
    decision = gatekeeper.evaluate_route("/admin")
    print(f"✓ /admin decision: {decision.outcome.value} ({decision.reason})")


if __name__ == "__main__":
    basic_example()
