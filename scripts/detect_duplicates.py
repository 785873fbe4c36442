"""
Print candidate duplicate affairs for a politician.

Usage:
    python scripts/detect_duplicates.py --politician-id 42
    python scripts/detect_duplicates.py --slug jean-dupont
"""

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

load_dotenv('.env')

from rich.console import Console
from rich.table import Table

from transparence.db.session import db
from transparence.db.repositories import PoliticianRepository
from transparence.services import AffairAdminService, PoliticianNotFoundError

logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

console = Console()


async def run(politician_id: int | None, slug: str | None) -> int:
    await db.initialize()
    try:
        async with db.session() as session:
            if slug:
                politician = await PoliticianRepository(session).get_by_slug(slug)
                if politician is None:
                    console.print(f"[red]Unknown politician slug: {slug}[/red]")
                    return 1
                politician_id = politician.id

            try:
                groups, total = await AffairAdminService(session).detect_duplicates(politician_id)
            except PoliticianNotFoundError as exc:
                console.print(f"[red]{exc}[/red]")
                return 1
    finally:
        await db.close()

    console.print(f"\n[bold]{total}[/bold] affair(s) compared, [bold]{len(groups)}[/bold] candidate pair(s)\n")
    if not groups:
        return 0

    table = Table(show_lines=True)
    table.add_column("Score", justify="right")
    table.add_column("Affair A")
    table.add_column("Affair B")
    table.add_column("Reasons")
    for group in groups:
        a, b = group.affairs
        table.add_row(
            str(group.score),
            f"#{a.id} {a.title}",
            f"#{b.id} {b.title}",
            "\n".join(group.reasons),
        )
    console.print(table)
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Report candidate duplicate affairs")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--politician-id", type=int)
    target.add_argument("--slug")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args.politician_id, args.slug)))


if __name__ == "__main__":
    main()
