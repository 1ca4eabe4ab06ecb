"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side identity. ``ABOVE`` starts on rows 0-2, ``BELOW`` on rows 5-7."""

    ABOVE = 0
    BELOW = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def label(self) -> str:
        """Human-readable name, also used by the save format."""
        return _PLAYER_LABELS[self]

    @property
    def promotion_row(self) -> int:
        """Row on which a plain piece of this side is crowned."""
        return 7 if self == Player.ABOVE else 0

    @property
    def forward(self) -> int:
        """Row delta of a plain piece's forward step."""
        return 1 if self == Player.ABOVE else -1

    @classmethod
    def from_label(cls, label: str) -> Player:
        try:
            return _PLAYER_BY_LABEL[label]
        except KeyError:
            raise ValueError(f"Invalid player label: {label!r}") from None

    def __str__(self) -> str:
        return self.label


class GameStyle(IntEnum):
    """Who controls each side. The first letter names the side that starts."""

    PVP = 0
    PVC = 1
    CVP = 2
    CVC = 3

    @property
    def label(self) -> str:
        return _STYLE_LABELS[self]

    def is_computer(self, player: Player) -> bool:
        """Whether *player* is computer-controlled under this style."""
        if self == GameStyle.CVC:
            return True
        if self == GameStyle.PVC:
            return player == Player.ABOVE
        if self == GameStyle.CVP:
            return player == Player.BELOW
        return False

    @classmethod
    def from_label(cls, label: str) -> GameStyle:
        try:
            return _STYLE_BY_LABEL[label]
        except KeyError:
            raise ValueError(f"Invalid game style label: {label!r}") from None

    @classmethod
    def from_sides(cls, above_is_computer: bool, below_is_computer: bool) -> GameStyle:
        for style in cls:
            if (
                style.is_computer(Player.ABOVE) == above_is_computer
                and style.is_computer(Player.BELOW) == below_is_computer
            ):
                return style
        raise AssertionError("unreachable")

    def __str__(self) -> str:
        return self.label


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    ABOVE_WINS = 1
    BELOW_WINS = 2

    @classmethod
    def win_for(cls, player: Player) -> GameResult:
        return cls.ABOVE_WINS if player == Player.ABOVE else cls.BELOW_WINS


_PLAYER_LABELS: dict[Player, str] = {
    Player.ABOVE: "Red",
    Player.BELOW: "Black",
}
_PLAYER_BY_LABEL: dict[str, Player] = {v: k for k, v in _PLAYER_LABELS.items()}

_STYLE_LABELS: dict[GameStyle, str] = {
    GameStyle.PVP: "Player-vs-Player",
    GameStyle.PVC: "Player-vs-Computer",
    GameStyle.CVP: "Computer-vs-Player",
    GameStyle.CVC: "Computer-vs-Computer",
}
_STYLE_BY_LABEL: dict[str, GameStyle] = {v: k for k, v in _STYLE_LABELS.items()}
