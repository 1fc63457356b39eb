"""Allow running as ``python -m chronicle``."""

from chronicle.cli import main

main()
