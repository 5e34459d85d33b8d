"""Allow running the CLI with ``python -m certs_cli``."""

from .main import main

main()
