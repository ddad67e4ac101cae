"""HTTP layer: application factory, routers and dependencies."""
