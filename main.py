#
# File: main.py
# Revision: 31
# Description: Entry point. Loads the repository list (from cache or a fresh
# scan), lets the user pick one, and prints its full path to stdout.
#

import argparse
import logging
import sys

from config import load_final_config
from logging_config import configure_logging
from selector import select_repository
from services.repo_cache import load_repositories
from utils.errors import ScanError, SelectionError

def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fuzzy-find a local Git repository and print its path.")
    parser.add_argument("--root", default=None, help="Directory to scan for repositories.")
    parser.add_argument("--cache-file", default=None, help="Where the repository list is cached.")
    parser.add_argument("--rescan", action="store_true", help="Ignore the cache and scan again.")
    parser.add_argument("--list", action="store_true", help="Print every repository path instead of prompting.")
    parser.add_argument("--debug", action="store_true", help="Enable detailed debug logging.")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_arguments(argv)
    configure_logging(args.debug)

    config = load_final_config(args)
    try:
        repos = load_repositories(config, rescan=args.rescan)
    except ScanError as e:
        logging.error(f"Error: {e}")
        return 1

    if args.list:
        for repo in repos:
            print(repo.full_path)
        return 0

    try:
        idx = select_repository(repos)
    except SelectionError as e:
        print(f"Error selecting repository: {e}")
        return 0
    print(repos[idx].full_path)
    return 0

def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)

if __name__ == '__main__':
    run()
