"""Experience counts used by the dynamic K-factor."""

from __future__ import annotations

from rating_engine.validation import require_games_played


def total_games_played(
    singles_wins: int = 0,
    singles_losses: int = 0,
    doubles_wins: int = 0,
    doubles_losses: int = 0,
) -> int:
    """Experience across both disciplines, as fed to the team K-factor."""
    return (
        require_games_played(singles_wins, field_name="singles_wins")
        + require_games_played(singles_losses, field_name="singles_losses")
        + require_games_played(doubles_wins, field_name="doubles_wins")
        + require_games_played(doubles_losses, field_name="doubles_losses")
    )
