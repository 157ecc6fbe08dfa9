WIDTH = 1500
HEIGHT = 800
FULLSCREEN = True
TITLE = "City Bike"
FPS = 60
VSYNC = False
# Sprites loaded per frame while the game sits in the loading state
LOAD_BATCH = 8
# Camera zoom (world units to pixels) at startup
START_SCALE = 5.0
# Typing this character closes the window in any state
DEBUG_EXIT_CHAR = "ö"

# Intro cinematic
MENU_FADE_START = 1.1
MENU_FADE_STEP = 0.01
INTRO_OFFSET = (-100.0, 300.0)
INTRO_SCALE = 3.0
INTRO_FADE = 1.4
INTRO_FADE_END = -0.3
ASCEND_SLOWDOWN_ABOVE = 150.0
ASCEND_ACCEL = 0.02
ASCEND_MIN_SPEED = -0.1
ZOOM_STEP = 0.005
ZOOM_END_SCALE = 10.0

# Race tuning (world units per frame)
BIKE_DRAG = 0.9975
BIKE_BOOST = 0.96
BIKE_MIN_SPEED = 0.1
BIKE_MAX_SPEED = 1.75
CAR_MIN_SPEED = 1.0
CAR_ENTRANCE_SPEED = 1.5
CAMERA_FOLLOW = 0.05
ARROW_HINT_FRAMES = 600
ARROW_HINT_SWAP = 15
ARROW_HINT_FADE = 100
MILES_PER_UNIT = 0.0001

# Colours (8-bit RGB)
SKY_TOP = (12, 19, 34)
SKY_BOTTOM = (36, 34, 48)
STAR_COLOR = (255, 255, 200)
FRONT_YARD_COLOR = (38, 38, 38)
PARK_COLOR = (38, 56, 34)
