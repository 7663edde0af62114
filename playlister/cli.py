import argparse
import logging
import sys
from typing import List, Optional

import requests

from playlister.config import (
    AUTH_TIMEOUT_SECONDS,
    ConfigError,
    load_credentials,
    load_environment,
)
from playlister.core import (
    TrackListError,
    configure_logging,
    log_error,
    log_info,
    log_section,
    log_step,
    log_success,
    log_warning,
    read_track_requests,
)
from playlister.pipeline import import_tracks, write_unmatched_report
from playlister.spotify import (
    AuthorizationFlow,
    SpotifyAuthError,
    create_playlist_for_current_user,
    playlist_name_from_path,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playlister",
        description="Create a Spotify playlist from a CSV of (track, artist) rows.",
    )
    parser.add_argument(
        "-csv",
        "--csv",
        dest="csv_path",
        metavar="PATH",
        help="path to CSV file (header row, then title,artist rows)",
    )
    parser.add_argument(
        "--browser",
        default=None,
        help="browser to open for authorization (webbrowser name, e.g. 'chrome')",
    )
    parser.add_argument(
        "--auth-timeout",
        type=float,
        default=AUTH_TIMEOUT_SECONDS,
        metavar="SECONDS",
        help="how long to wait for the browser authorization (default: %(default)s)",
    )
    parser.add_argument(
        "--unmatched-report",
        default=None,
        metavar="PATH",
        help="write a markdown report of tracks that were not found",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        metavar="PATH",
        help="environment file holding the Spotify credentials (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(args: argparse.Namespace) -> int:
    credentials = load_credentials()

    log_section("Track list")
    track_requests = read_track_requests(args.csv_path)
    log_info(f"{len(track_requests)} tracks read from {args.csv_path}.")

    log_section("Spotify authorization")
    flow = AuthorizationFlow(
        client_id=credentials.client_id,
        client_secret=credentials.client_secret,
        redirect_uri=credentials.redirect_uri,
        timeout=args.auth_timeout,
        browser=args.browser,
    )
    client = flow.run()
    log_success("Authorized with Spotify.")

    log_section("Playlist")
    playlist = create_playlist_for_current_user(
        client, playlist_name_from_path(args.csv_path)
    )

    log_section("Import")
    report = import_tracks(client, playlist.id, track_requests)
    log_success(
        f"Added {report.added}/{report.total} tracks to playlist '{playlist.name}'."
    )
    if report.failed:
        log_warning(f"{len(report.failed)} tracks failed because of API errors.")
    if report.not_found:
        log_warning(f"{len(report.not_found)} tracks were not found.")
        if args.unmatched_report:
            path = write_unmatched_report(
                report.not_found, args.unmatched_report, playlist_name=playlist.name
            )
            log_step(f"See report: {path}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    if not args.csv_path:
        parser.print_usage(sys.stderr)
        log_error("Please provide a path to a CSV file using the -csv flag.")
        return EXIT_USAGE

    load_environment(args.env_file)
    try:
        return run(args)
    except (ConfigError, TrackListError, SpotifyAuthError) as e:
        log_error(str(e))
    except requests.RequestException as e:
        log_error(f"Spotify API request failed: {e}")
    return EXIT_FAILURE
