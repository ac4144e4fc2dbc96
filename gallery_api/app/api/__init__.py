"""
API package containing the HTTP routes.

``router.router`` aggregates the endpoint routers and is included by
``main.create_app``.
"""
