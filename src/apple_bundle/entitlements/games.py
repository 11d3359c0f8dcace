from __future__ import annotations

from ..codec import plist_field, record


@record
class Games:
    # A Boolean value that indicates whether users of the app may see and compare achievements on
    # a leaderboard, invite friends, and start multiplayer games.
    # Available: macOS 10.8+
    game_center: bool | None = plist_field("com.apple.developer.game-center")
