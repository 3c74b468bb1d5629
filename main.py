#!/usr/bin/env python3
"""
regreddit - Main entry point.

Deletes your own Reddit posts and comments, except those in whitelisted
subreddits, and can submit links and self-posts with the same credentials.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

# Load environment variables before settings reads them
from dotenv import load_dotenv

load_dotenv()

from config import settings  # noqa: E402
from regreddit.auth.session_manager import SessionManager  # noqa: E402
from regreddit.deletion.deletion_engine import DeletionEngine  # noqa: E402
from regreddit.deletion.whitelist import Whitelist  # noqa: E402
from regreddit.errors import AuthError, ConfigError, SubmitError  # noqa: E402
from regreddit.submission.submitter import Submitter  # noqa: E402
from regreddit.utils.logging import get_logger, setup_logging  # noqa: E402
from regreddit.utils.statistics import StatisticsReporter  # noqa: E402


def absolute_url(value: str) -> str:
    """argparse type for the URL of a link post."""
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise argparse.ArgumentTypeError(f"not an absolute http(s) URL: {value}")
    return value


def username_arg(value: str) -> str:
    """argparse type for --username."""
    name = value.strip()
    if not name:
        raise argparse.ArgumentTypeError("username cannot be empty")
    return name


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog=settings.NAME,
        description="Nuke your Reddit account.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Delete every post and comment outside the whitelist
  regreddit --yes -vv

  # Submit a link
  regreddit submit link python "A title" https://example.com

  # Submit a self-post from a file
  regreddit submit self-post python "A title" --text-file body.md
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.VERSION}")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the TOML config file. Defaults to $REGREDDIT_CONFIG or ./.regreddit.toml.",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="The command won't do anything without this flag.",
    )
    parser.add_argument(
        "--username",
        default=None,
        type=username_arg,
        help="The username of the Reddit account. Defaults to the username in the config file.",
    )
    parser.add_argument(
        "-v",
        dest="verbosity",
        action="count",
        default=0,
        help="The verbosity of logging. Can be repeated `-vvv`.",
    )

    commands = parser.add_subparsers(dest="command")
    submit = commands.add_parser("submit", help="Submit to Reddit.")
    kinds = submit.add_subparsers(dest="submit_kind", required=True)

    link = kinds.add_parser("link", help="Submit a link.")
    link.add_argument("subreddit")
    link.add_argument("title")
    link.add_argument("url", type=absolute_url, help="The URL to submit.")

    self_post = kinds.add_parser("self-post", help="Submit a self-post.")
    self_post.add_argument("subreddit")
    self_post.add_argument("title")
    content = self_post.add_mutually_exclusive_group(required=True)
    content.add_argument("--text", help="The body text to submit.")
    content.add_argument(
        "--text-file", type=Path, help="A file containing the body text to submit."
    )
    content.add_argument("--richtext-json", help="The body richtext JSON data to submit.")
    content.add_argument(
        "--richtext-json-file", type=Path, help="A file containing richtext JSON data to submit."
    )

    return parser


def resolve_config_path(config_path: Optional[Path] = None) -> Path:
    """Pick the config file: explicit flag, then $REGREDDIT_CONFIG, then the default."""
    if config_path:
        return config_path
    if settings.REGREDDIT_CONFIG:
        return Path(settings.REGREDDIT_CONFIG)
    return settings.DEFAULT_CONFIG_PATH


def run_nuke(config_path: Path, username: Optional[str] = None) -> int:
    """
    Delete every post and comment outside the whitelist.

    Args:
        config_path: Path to the TOML config file
        username: Account whose listings are paged (defaults to the config username)

    Returns:
        Exit code (0 on completion, even with per-item failures)
    """
    logger = get_logger()
    stats_reporter = StatisticsReporter()

    try:
        with SessionManager(config_path) as session_manager:
            loaded, session = session_manager.create_authenticated_session()
            target = username or loaded.credentials.username

            whitelist = Whitelist(loaded.whitelist, case_sensitive=loaded.whitelist_case_sensitive)
            deletion_engine = DeletionEngine(session=session, username=target, whitelist=whitelist)

            for listing_stats in deletion_engine.run().values():
                stats_reporter.update_from_listing_stats(listing_stats)

    except ConfigError as e:
        logger.error(f"Config error: {e}")
        return 1

    except AuthError as e:
        logger.error(f"Authentication failed: {e}")
        return 1

    stats_reporter.print_summary()
    print(
        f"Successfully nuked your Reddit account: {stats_reporter.stats['total_deleted']} deleted, "
        f"{stats_reporter.stats['total_failed']} failed, "
        f"{stats_reporter.stats['total_skipped']} whitelisted.",
        file=sys.stderr,
    )
    return 0


def read_body(args: argparse.Namespace) -> tuple[Optional[str], Optional[str]]:
    """
    Resolve the self-post body from whichever input source was given.

    Returns:
        Tuple of (text, richtext_json), exactly one of them set

    Raises:
        OSError: If a body file cannot be read
    """
    if args.text_file is not None:
        return args.text_file.read_text(encoding="utf-8"), None
    if args.richtext_json_file is not None:
        return None, args.richtext_json_file.read_text(encoding="utf-8")
    return args.text, args.richtext_json


def run_submit(args: argparse.Namespace, config_path: Path) -> int:
    """
    Submit a link or a self-post.

    Args:
        args: Parsed arguments of the submit subcommand
        config_path: Path to the TOML config file

    Returns:
        Exit code (0 on success, 1 on failure)
    """
    logger = get_logger()

    text = richtext_json = None
    if args.submit_kind == "self-post":
        try:
            text, richtext_json = read_body(args)
        except OSError as e:
            logger.error(f"Could not read post body: {e}")
            return 1

    try:
        with SessionManager(config_path) as session_manager:
            _, session = session_manager.create_authenticated_session()
            submitter = Submitter(session)

            if args.submit_kind == "link":
                submitter.submit_link(args.subreddit, args.title, args.url)
            else:
                submitter.submit_self_post(
                    args.subreddit, args.title, text=text, richtext_json=richtext_json
                )

    except ConfigError as e:
        logger.error(f"Config error: {e}")
        return 1

    except (AuthError, SubmitError) as e:
        logger.error(str(e))
        return 1

    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for regreddit.

    Parses command-line arguments and runs the requested command.
    """
    args = build_parser().parse_args(argv)
    logger = setup_logging(verbosity=args.verbosity)
    config_path = resolve_config_path(args.config)

    try:
        if args.command == "submit":
            return run_submit(args, config_path)

        if not args.yes:
            print("You did not specify the `--yes` flag. Exiting...", file=sys.stderr)
            return 1

        return run_nuke(config_path, username=args.username)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user; re-run to finish the remaining items")
        return 130


if __name__ == "__main__":
    sys.exit(main())
