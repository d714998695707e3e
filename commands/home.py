"""Home screen command handler."""

from services.jikan_client import JikanClient
from ui.navigation import Navigator


def home(args) -> None:
    """Open the home screen, then follow navigation until the user quits."""
    with JikanClient() as client:
        Navigator(client).run("/", once=args.once)
