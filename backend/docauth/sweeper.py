#!/usr/bin/env python3
"""
Expired Session / Verification Request Sweeper

Periodically deletes sessions and verification requests past their expiry.
Reads already treat expired records as missing and delete them; the sweeper
only clears records that are never looked up again.

Usage:
    python -m docauth.sweeper

Environment Variables:
    MONGO_URI: MongoDB connection string
    AUTH_DB_NAME: Auth database name (default: auth_db)
    SWEEP_INTERVAL_MINUTES: Minutes between sweeps (default: 60)
    LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import logging
import signal
import sys
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from docauth.config import Settings, get_settings
from docauth.core.log import setup_logging
from docauth.database.registry import create_indexes
from docauth.services.expiry import purge_expired

logger = logging.getLogger("docauth.sweeper")


class ExpirySweeper:
    """Background sweeper for expired auth records."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.mongo_client: Optional[AsyncIOMotorClient] = None
        self.db = None
        self.running = False

    async def connect(self):
        """Connect to MongoDB and ensure indexes."""
        self.mongo_client = AsyncIOMotorClient(self.settings.mongo_uri)

        # Test connection
        await self.mongo_client.admin.command("ping")
        logger.info("Connected to MongoDB")

        self.db = self.mongo_client[self.settings.auth_db_name]
        await create_indexes(self.db)

    async def disconnect(self):
        """Disconnect from MongoDB."""
        if self.mongo_client:
            self.mongo_client.close()
            self.mongo_client = None
        logger.info("Disconnected")

    async def sweep_once(self) -> dict[str, int]:
        """Run a single sweep and return deleted counts per collection."""
        counts = await purge_expired(self.db)
        logger.info(
            "Sweep complete: "
            + ", ".join(f"{name}={count}" for name, count in counts.items())
        )
        return counts

    async def run(self):
        """Main worker loop."""
        self.running = True

        while self.running:
            try:
                await self.sweep_once()

                logger.info(
                    f"Sleeping {self.settings.sweep_interval_minutes} minutes until next sweep..."
                )
                await asyncio.sleep(self.settings.sweep_interval_minutes * 60)

            except asyncio.CancelledError:
                logger.info("Sweeper cancelled")
                break
            except Exception as e:
                logger.error(f"Error in sweep loop: {e}")
                await asyncio.sleep(60)  # Wait before retry

    def stop(self):
        """Stop the worker gracefully."""
        logger.info("Stopping sweeper...")
        self.running = False


# ==================== Main Entry Point ====================

async def main():
    """Main entry point."""
    sweeper = ExpirySweeper()

    # Signal handlers for graceful shutdown
    loop = asyncio.get_running_loop()
    task = asyncio.current_task()

    def shutdown_handler(sig):
        logger.info(f"Received signal {sig.name}")
        sweeper.stop()
        task.cancel()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, lambda s=sig: shutdown_handler(s))

    try:
        await sweeper.connect()
        await sweeper.run()
    except asyncio.CancelledError:
        pass
    except Exception as e:
        logger.error(f"Sweeper error: {e}")
        sys.exit(1)
    finally:
        await sweeper.disconnect()
        logger.info("Sweeper shutdown complete")


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info("=" * 60)
    logger.info("Expired Session Sweeper")
    logger.info(f"Database: {settings.auth_db_name}")
    logger.info(f"Sweep interval: {settings.sweep_interval_minutes} minutes")
    logger.info("=" * 60)

    asyncio.run(main())
