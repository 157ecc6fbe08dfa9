from enum import Enum, auto


class GameState(Enum):
    LOADING_ASSETS = auto()
    FADING_IN_MENU = auto()
    FADING_OUT_MENU = auto()
    FADING_IN_GAME = auto()
    ASCENDING_INTO_GAME = auto()
    ZOOMING_INTO_GAME = auto()
    BIKE_COMING_IN = auto()
    CAR_COMING_IN = auto()
    PLAYING = auto()


MENU_STATES = frozenset({GameState.FADING_IN_MENU, GameState.FADING_OUT_MENU})
