"""Allow ``python -m pathstep``."""

from pathstep.cli import main

main()
