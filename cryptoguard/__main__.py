"""
Launcher for `python -m cryptoguard`.

    python -m cryptoguard            interactive menu
    python -m cryptoguard menu       interactive menu
    python -m cryptoguard gui        graphical interface
    python -m cryptoguard -e ...     one-shot command line (see --help)
"""

import sys

from cryptoguard import cli


def launch(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv or argv[0].lower() == "menu":
        return cli.main(["--menu", *argv[1:]])
    if argv[0].lower() == "gui":
        return cli.main(["--gui", *argv[1:]])
    return cli.main(argv)


if __name__ == "__main__":
    sys.exit(launch())
