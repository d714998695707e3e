"""Schedule screen command handler."""

from services.jikan_client import JikanClient
from ui.navigation import Navigator


def schedule(args) -> None:
    """Open the weekly schedule, then follow navigation until the user quits."""
    with JikanClient() as client:
        Navigator(client).run("/schedule", once=args.once)
