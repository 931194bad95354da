#!/usr/bin/env python3
"""
Dark Pig Git - commit graph viewer
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv
from PySide6.QtWidgets import QApplication, QMessageBox

from darkpig.config.settings import Settings
from darkpig.constants import DEBUG_ENV, LOG_FILE, LOG_FORMAT, LOG_TO_FILE_ENV
from darkpig.errors import RepositoryAccessError
from darkpig.git_backend.repository import DarkPigRepository
from darkpig.ui.workspace import Workspace

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Log to stderr, and to LOG_FILE as well when LOG_TO_FILE=1"""
    level = logging.DEBUG if os.environ.get(DEBUG_ENV) == "1" else logging.INFO

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if os.environ.get(LOG_TO_FILE_ENV) == "1":
        handlers.append(logging.FileHandler(LOG_FILE))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="darkpig",
        description="Dark Pig Git - commit graph viewer",
    )
    parser.add_argument(
        "repo",
        nargs="?",
        default=None,
        help="Repository to open (default: $GIT_REPO_PATH, the settings file, or the current directory)",
    )
    return parser.parse_args(argv)


def resolve_repo_path(cli_path: str | None, settings: Settings) -> str | None:
    """CLI argument first, then GIT_REPO_PATH or the settings file"""
    return cli_path or settings.get_repo_path()


def main() -> None:
    args = parse_args()
    load_dotenv()
    configure_logging()

    settings = Settings()

    app = QApplication(sys.argv)
    app.setApplicationName("Dark Pig Git")
    app.setOrganizationName("Dark Pig")

    try:
        repo = DarkPigRepository(resolve_repo_path(args.repo, settings))
    except RepositoryAccessError as e:
        logger.error("%s", e)
        msg = QMessageBox()
        msg.setIcon(QMessageBox.Icon.Critical)
        msg.setWindowTitle("Git Repository Required")
        msg.setText("Dark Pig Git could not open a git repository.")
        msg.setInformativeText(str(e))
        msg.exec()
        sys.exit(1)

    window = Workspace(repo, settings)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
