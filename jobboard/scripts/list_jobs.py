# jobboard/scripts/list_jobs.py
"""Fetch postings from the listing service, filter them, print one line each."""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from jobboard.config import JOBS_API_URL, SALARY_FILTER_MIN, SALARY_FILTER_MAX
from jobboard.constants import JOB_TYPES
from jobboard.services.display import card_badges
from jobboard.services.job_board import JobBoard
from jobboard.services.listing_client import make_client


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="list_jobs", description=__doc__)
    p.add_argument("--url", default=JOBS_API_URL, help="listing service URL")
    p.add_argument("--title", default="", help="title contains (case-insensitive)")
    p.add_argument("--location", default="", help="location contains (case-insensitive)")
    p.add_argument("--job-type", default="", choices=["", *JOB_TYPES])
    p.add_argument("--salary-min", type=float, default=SALARY_FILTER_MIN)
    p.add_argument("--salary-max", type=float, default=SALARY_FILTER_MAX)
    return p


def format_line(job) -> str:
    b = card_badges(job)
    tag = " [local]" if job.is_local else ""
    return (
        f"#{job.id:<5} {job.title or 'Untitled'} @ {job.company or '-'} ({job.location or '-'}) "
        f"| {b['job_type']} | {b['experience']} | {b['salary']} | {job.posted or ''}{tag}"
    )


async def _run(args: argparse.Namespace) -> int:
    board = JobBoard()
    board.set_filters(
        title=args.title,
        location=args.location,
        job_type=args.job_type,
        salary=(args.salary_min, args.salary_max),
    )
    async with make_client() as client:
        result = await board.load(client, url=args.url)

    if result is not None and not result.ok:
        print(f"Could not load jobs ({result.status}): {result.reason}", file=sys.stderr)
        return 1

    shown = board.visible
    for job in shown:
        print(format_line(job))
    print(f"{len(shown)} of {len(board.jobs)} jobs shown")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING)
    args = build_parser().parse_args(argv)
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
