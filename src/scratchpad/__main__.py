"""Allow running Scratchpad with ``python -m scratchpad``."""

from scratchpad.main import main

main()
