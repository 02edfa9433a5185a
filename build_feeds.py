"""
build_feeds.py - Standalone feed builder.

Runs from CI or cron:
    0 * * * *  /path/to/venv/bin/python /path/to/repo/build_feeds.py [output_dir]

Fetches the Nuka Knights home, Minerva and nuke code pages and writes the
JSON feeds (score, dailyops, axolotl, events, minerva, nukecodes, recipes).
"""
import sys

from feed76.app import main


if __name__ == "__main__":
    sys.exit(main())
