import sys

from .app import main_cli_runner

sys.exit(main_cli_runner())
