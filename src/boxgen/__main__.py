"""Allow running boxgen as ``python -m boxgen``."""

from boxgen.cli import main

main()
