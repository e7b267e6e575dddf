# --- Display ---
WIDTH = 800
HEIGHT = 400
FPS = 60
GRID_SPACING = 50

# --- World / Physics ---
# Gravity, jump and lift are applied once per tick (units/tick), not scaled by dt.
SPEED = 450.0               # scroll speed (units/s)
GRAVITY = 0.98              # cube gravity per tick
JUMP_FORCE = -16.0          # cube jump impulse
SHIP_LIFT = -0.9            # ship lift per tick while pressed
SHIP_GRAVITY_SCALE = 0.6    # ship falls with reduced gravity
SHIP_MAX_VY = 8.0           # clamp ship vertical velocity to [-8, 8]
CUBE_SPIN_DEG_PER_S = 450.0 # cosmetic roll while airborne
GROUND_Y = 350.0            # ground line (y grows downward)

# --- Player ---
PLAYER_X = 150.0            # player's fixed x (world scrolls left)
PLAYER_SIZE = 30.0

# --- Collision ---
BROAD_PHASE_MIN = 100.0     # obstacle relative x must be > MIN ...
BROAD_PHASE_MAX = 200.0     # ... and < MAX to be considered
SPIKE_FOOTPRINT_W = 30.0
SPIKE_HIT_BAND = 25.0       # lethal band above the ground line

# --- Clock ---
DT_MAX = 0.1                # anything larger is a stall (tab switch, drag, ...)
DT_FALLBACK = 1.0 / 60.0

# --- Level ---
LEVEL_LENGTH = 15000.0
VIEW_MIN_X = -100.0         # obstacles outside this relative range are not drawn
VIEW_MAX_X = 900.0

# --- Colors (RGB) ---
COLOR_BG = (0, 0, 0)
COLOR_GRID = (17, 17, 17)
COLOR_FLOOR = (0, 12, 26)
COLOR_ACCENT = (0, 255, 255)
COLOR_SPIKE = (255, 51, 51)
COLOR_PORTAL_SHIP = (255, 0, 255)
COLOR_PORTAL_CUBE = (0, 255, 0)
COLOR_FG = (220, 232, 255)
COLOR_PROGRESS = (0, 255, 255)
COLOR_PROGRESS_BG = (30, 40, 55)
