import logging

import discord

from cardinal import interpreter, reporting
from cardinal.errors import CardinalError

logger = logging.getLogger(__name__)


async def handle(client: discord.Client, message: discord.Message):
    """Handle incoming Discord messages."""

    # Other bots are still inspected; only our own replies are skipped.
    bot_user = getattr(client, "user", None)
    if bot_user is not None and message.author.id == bot_user.id:
        return

    try:
        outcome = await interpreter.execute(client, message)
    except CardinalError as exc:
        logger.error("Command failed for message %s: %s", message.id, exc)
        await reporting.report_outcome(client, exc)
        return
    except Exception as exc:
        logger.exception("Unexpected error handling message %s", message.id)
        await reporting.report_outcome(client, exc)
        return

    if outcome is None:
        return

    logger.debug("Handled %s for message %s: %s", outcome.command.family.value, message.id, outcome)
    await reporting.report_outcome(client, None)
