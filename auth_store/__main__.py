"""Run the auth-store server with ``python -m auth_store``."""

from .server.main import main

main()
