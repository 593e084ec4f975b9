"""Basic strategy table for hit/stand play."""

from enum import Enum, auto
from typing import Mapping


class Action(Enum):
    """Possible player actions."""

    HIT = auto()
    STAND = auto()

    def __str__(self) -> str:
        return self.name.title()


# Type aliases for clarity
DealerUpcard = int  # 2-11 (11 = Ace)
PlayerTotal = int  # Hard total or soft total value


class BasicStrategy:
    """
    Basic strategy lookup tables for a single deck, dealer standing on 17.

    Only hitting and standing are modelled. Where the full chart would
    double, the hit/stand fallback is used instead.
    """

    def __init__(self) -> None:
        """Build the lookup tables."""
        self._hard_table = self._build_hard_table()
        self._soft_table = self._build_soft_table()

    def get_action(
        self,
        player_total: PlayerTotal,
        dealer_upcard: DealerUpcard,
        is_soft: bool = False,
    ) -> Action:
        """
        Get the basic strategy action.

        Args:
            player_total: Player's hand total
            dealer_upcard: Dealer's upcard value (2-11, Ace=11)
            is_soft: Whether the hand is soft

        Returns:
            The recommended action
        """
        table = self._soft_table if is_soft else self._hard_table
        action = table.get((player_total, dealer_upcard))
        if action:
            return action

        # Totals outside the tables
        if player_total >= 17:
            return Action.STAND
        return Action.HIT

    def _build_hard_table(self) -> Mapping[tuple[int, int], Action]:
        """Build hard totals strategy table."""
        H = Action.HIT
        S = Action.STAND

        # Dealer upcards: 2, 3, 4, 5, 6, 7, 8, 9, 10, A(11)
        table: dict[tuple[int, int], Action] = {}

        # Hard 4-11: Always hit
        for total in range(4, 12):
            for dealer in range(2, 12):
                table[(total, dealer)] = H

        # Hard 12
        for dealer in [2, 3, 7, 8, 9, 10, 11]:
            table[(12, dealer)] = H
        for dealer in [4, 5, 6]:
            table[(12, dealer)] = S

        # Hard 13-16
        for total in range(13, 17):
            for dealer in range(2, 7):
                table[(total, dealer)] = S
            for dealer in range(7, 12):
                table[(total, dealer)] = H

        # Hard 17+: Always stand
        for total in range(17, 22):
            for dealer in range(2, 12):
                table[(total, dealer)] = S

        return table

    def _build_soft_table(self) -> Mapping[tuple[int, int], Action]:
        """Build soft totals strategy table."""
        H = Action.HIT
        S = Action.STAND

        table: dict[tuple[int, int], Action] = {}

        # Soft 12-17: Always hit
        for total in range(12, 18):
            for dealer in range(2, 12):
                table[(total, dealer)] = H

        # Soft 18 (A,7)
        for dealer in range(2, 9):
            table[(18, dealer)] = S
        for dealer in [9, 10, 11]:
            table[(18, dealer)] = H

        # Soft 19-21: Always stand
        for total in range(19, 22):
            for dealer in range(2, 12):
                table[(total, dealer)] = S

        return table
