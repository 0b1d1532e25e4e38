"""Self-service tag roles for Discord guilds."""
