import os

ASSETS_PATH: str = "./assets/"
SPRITES_PATH: str = ASSETS_PATH + "sprites/"
SPRITE_EXT: str = ".png"

# Every sprite the game draws. Loading finishes only when all of them are in.
SPRITE_NAMES: tuple[str, ...] = (
    # Street
    "street",
    "fence",
    "fence_door_0",
    "fence_door_1",
    "fence_door_2",
    "lamp_top",
    "lamp_bottom",
    # Buildings
    "skyscraper_0",
    "skyscraper_1",
    "skyscraper_2",
    "background_skyscraper_0",
    "background_skyscraper_1",
    "background_skyscraper_2",
    # Parks and yards
    "grass",
    "tree_0",
    "tree_1",
    "bush_0",
    "bush_1",
    "trashcan",
    # Vehicles
    *(f"bike_{i}" for i in range(4)),
    *(f"bike_back_{i}" for i in range(4)),
    *(f"car_{i}" for i in range(8)),
    # HUD
    "press_left",
    "press_right",
    "miles",
    "dot",
    *(str(d) for d in range(10)),
    # Menu
    "start_button",
    "cursor",
)


def sprite_path(name: str, base: str = SPRITES_PATH) -> str:
    """File that sprite `name` is loaded from, e.g. bike_0 -> bike_0.png."""
    return os.path.join(base, name + SPRITE_EXT)
