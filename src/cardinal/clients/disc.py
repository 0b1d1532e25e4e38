"""Discord bot bootstrap utilities."""

from __future__ import annotations

import asyncio
import logging
import signal

import discord

from cardinal.config import core
from cardinal.event_hooks import message_hook, ready_hook

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
intents = discord.Intents.default()
intents.members = True
intents.message_content = True


class CardinalBot(discord.Client):
    """Gateway client that hands every message to the tag command pipeline."""

    def __init__(self) -> None:
        super().__init__(intents=intents)

    async def on_ready(self) -> None:
        await ready_hook.handle(self)

    async def on_message(self, message: discord.Message) -> None:
        await message_hook.handle(self, message)


# Strong references to in-flight close tasks; the loop only keeps weak ones.
_shutdown_tasks: set[asyncio.Task] = set()


def _install_signal_handlers(bot: CardinalBot) -> None:
    loop = asyncio.get_running_loop()

    def _shutdown(signame: str) -> None:
        logger.info("Received %s; closing connection.", signame)
        task = loop.create_task(bot.close())
        _shutdown_tasks.add(task)
        task.add_done_callback(_shutdown_tasks.discard)

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _shutdown, sig.name)
        except (NotImplementedError, RuntimeError):
            # Windows event loops lack signal handler support; Ctrl-C still
            # surfaces as KeyboardInterrupt there.
            pass


async def _serve(token: str) -> None:
    bot = CardinalBot()
    _install_signal_handlers(bot)
    async with bot:
        await bot.start(token)


def run(token: str | None = None) -> int:
    """Start the Discord bot; returns a process exit code."""

    token = token or core.DISCORD_API_TOKEN
    if not token:
        logger.error("No DISCORD_API_TOKEN configured. Cannot run client.")
        return 1

    logger.info("Bot is now running. Press CTRL-C to exit.")
    try:
        asyncio.run(_serve(token))
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted; connection closed.")
    return 0
