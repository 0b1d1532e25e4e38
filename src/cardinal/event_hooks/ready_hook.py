import logging

import discord

logger = logging.getLogger(__name__)


async def handle(client: discord.Client):
    """Log the session identity once the gateway is ready."""
    logger.info(f"Logged in as {client.user.name} (ID: {client.user.id})")
    logger.info("Serving %d guild(s)", len(client.guilds))
