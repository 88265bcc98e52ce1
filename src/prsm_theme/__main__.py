"""Allow ``python -m prsm_theme``."""

from prsm_theme.cli import main

main()
