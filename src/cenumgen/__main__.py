"""Allow running with ``python -m cenumgen``."""

from .cli import main

main()
