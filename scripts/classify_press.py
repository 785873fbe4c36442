"""
Assign analysis tiers to press articles awaiting analysis.

Usage:
    python scripts/classify_press.py
    python scripts/classify_press.py --feed lemonde --limit 50 --dry-run
"""

import argparse
import asyncio
import logging
import os
import sys
from collections import Counter

from dotenv import load_dotenv

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

load_dotenv('.env')

from rich.console import Console
from rich.table import Table

from transparence.config import settings
from transparence.db.session import db
from transparence.db.repositories import PressArticleRepository
from transparence.models.press import ArticleTier, PressArticle
from transparence.services.press_tiering import analysis_model_for, prioritize_articles

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

console = Console()


async def classify_pending(limit: int, feed_source: str | None, reclassify: bool, dry_run: bool) -> Counter:
    """Classify pending articles and store their tier unless ``dry_run``."""
    await db.initialize()
    counts: Counter = Counter()

    try:
        async with db.session() as session:
            repo = PressArticleRepository(session)
            models = await repo.list_pending_analysis(
                limit=limit,
                feed_source=feed_source,
                reclassify=reclassify,
            )
            if not models:
                console.print("[yellow]No article awaiting analysis.[/yellow]")
                return counts

            articles = [PressArticle.model_validate(model) for model in models]
            for item in prioritize_articles(articles):
                counts[item.tier] += 1
                if not dry_run:
                    await repo.set_tier(item.article.id, item.tier, item.matched_keyword)
    finally:
        await db.close()

    return counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Assign analysis tiers to press articles")
    parser.add_argument("--limit", type=int, default=settings.press.batch_size)
    parser.add_argument("--feed", dest="feed_source", default=None, help="Only this feed source")
    parser.add_argument("--reclassify", action="store_true", help="Recompute existing tiers")
    parser.add_argument("--dry-run", action="store_true", help="Do not write tiers")
    args = parser.parse_args()

    counts = asyncio.run(
        classify_pending(args.limit, args.feed_source, args.reclassify, args.dry_run)
    )

    table = Table(title="Press tiering" + (" (dry run)" if args.dry_run else ""))
    table.add_column("Tier")
    table.add_column("Articles", justify="right")
    table.add_column("Analysis model")
    for tier in ArticleTier:
        table.add_row(tier.value, str(counts.get(tier, 0)), analysis_model_for(tier))
    console.print(table)


if __name__ == "__main__":
    main()
