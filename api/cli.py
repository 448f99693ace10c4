#!/usr/bin/env python3
"""CLI for Event Lodging API management tasks.

Usage:
    python -m cli <command>

Commands:
    create-tables  Create any missing tables from the SQLAlchemy models (dev only)
    seed-hotels    Insert the sample hotels and rooms
"""

import argparse
import asyncio
import sys

from sqlalchemy import func, select

from core.database import Base, create_engine, create_session_maker, dispose_engine
from core.logger import configure_logging, get_logger
from models import Hotel, Room

configure_logging()
logger = get_logger(__name__)

SAMPLE_HOTELS: list[dict] = [
    {
        "name": "ZAGAIA ECO RESORT",
        "image": "https://eliteresorts.com.br/blog/wp-content/uploads/2022/08/BR-Zagaia-Eco-Resort-Piscina-001-2.jpg",
        "rooms": [("101", 1), ("102", 2), ("103", 3)],
    },
    {
        "name": "POUSADA ARTE DA NATUREZA",
        "image": "https://eliteresorts.com.br/blog/wp-content/uploads/2022/08/BR-Pousada-Arte-da-Natureza-Piscina-002.jpg",
        "rooms": [("201", 2), ("202", 2)],
    },
    {
        "name": "HOTEL SANTA ESMERALDA",
        "image": "https://eliteresorts.com.br/blog/wp-content/uploads/2022/08/BR-Hotel-Santa-Esmeralda-Panorâmica-001.jpg",
        "rooms": [("301", 1), ("302", 3), ("303", 3)],
    },
]


async def create_tables() -> None:
    engine = create_engine()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await dispose_engine(engine)


async def seed_hotels() -> int:
    """Insert SAMPLE_HOTELS unless hotels already exist. Returns rows added."""
    engine = create_engine()
    session_maker = create_session_maker(engine)
    try:
        async with session_maker() as session:
            existing = await session.scalar(select(func.count()).select_from(Hotel))
            if existing:
                logger.info("seed.hotels.skipped", existing=existing)
                return 0

            for sample in SAMPLE_HOTELS:
                hotel = Hotel(name=sample["name"], image=sample["image"])
                hotel.rooms = [
                    Room(name=name, capacity=capacity)
                    for name, capacity in sample["rooms"]
                ]
                session.add(hotel)
            await session.commit()
            return len(SAMPLE_HOTELS)
    finally:
        await dispose_engine(engine)


def cmd_create_tables() -> int:
    logger.info("Creating tables...")
    asyncio.run(create_tables())
    logger.info("Tables ready")
    return 0


def cmd_seed_hotels() -> int:
    added = asyncio.run(seed_hotels())
    logger.info("seed.hotels.complete", added=added)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Event Lodging API CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("create-tables", help="Create missing tables (dev only)")
    subparsers.add_parser("seed-hotels", help="Insert sample hotels and rooms")

    args = parser.parse_args()

    if args.command == "create-tables":
        return cmd_create_tables()
    if args.command == "seed-hotels":
        return cmd_seed_hotels()

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
