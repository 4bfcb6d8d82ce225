"""Allow running the GUI with ``python -m dictionary_plus``."""

from dictionary_plus.gui.app import main

main()
