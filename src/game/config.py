# --- Display / World (world units, 1 unit = 1 px at scale 1) ---
WORLD_WIDTH = 800
WORLD_HEIGHT = 300
FPS = 60                    # reference rate: dt = 1.0 is one frame at 60 Hz
DT_MAX = 3.0                # clamp for long stalls (backgrounded window, debugger...)

# --- Ground ---
GROUND_Y = 258              # baseline where the runner stands
GROUND_SEGMENT_W = 16       # period of the dashed ground pattern

# --- World speed / scoring ---
SPEED_START = 6.0           # units per frame
SPEED_INCREMENT = 0.0025    # per frame while playing
SCORE_DIVISOR = 10          # distance units per score point

# --- Runner ---
RUNNER_X = 50
RUNNER_W = 44
RUNNER_H = 47
GRAVITY = 0.8               # units / frame^2
JUMP_STRENGTH = 13.5        # units / frame
RUNNER_INSET = (6, 6, 12, 10)   # left, top, width shrink, height shrink
LEG_RATE = 0.25             # leg ticks per unit of speed·dt

# --- Obstacles ---
OBSTACLE_VARIANTS = (       # (width, height)
    (18, 36),
    (24, 48),
    (34, 42),
    (48, 56),
)
OBSTACLE_INSET = 4
OBSTACLE_SPEED_MARGIN = 0.5
OBSTACLE_PRUNE_X = -40      # removed once right edge is left of this

# --- Spawning ---
GAP_MIN = 140
GAP_MAX = 280
SPAWN_EDGE_MARGIN = 30      # spawn at least this far past the right edge
SPAWN_DEFAULT_LAST_X = WORLD_WIDTH + 60
SPAWN_INTERVAL = 75.0       # frames; lower is more frequent
SPAWN_INTERVAL_MIN = 38.0
SPAWN_DECAY = 2.0           # interval reduction per unit of speed

# --- Clouds (parallax) ---
CLOUD_W = 46
CLOUD_H = 16
CLOUD_PARALLAX = 0.35
CLOUD_CHANCE = 0.01         # per frame while playing
CLOUD_INITIAL = 4
CLOUD_Y_MIN = 40
CLOUD_Y_SPAN = 80
CLOUD_PRUNE_X = -20

# --- High score storage ---
HIGHSCORE_KEY = "trex_highscore"
HIGHSCORE_PATH_DEFAULT = "~/.trex_runner/highscore.json"

# --- Colors (RGB) ---
COLOR_SKY = (255, 255, 255)
COLOR_INK = (34, 34, 34)
COLOR_CLOUD = (221, 221, 221)
COLOR_GROUND = (207, 207, 207)
COLOR_GROUND_DASH = (189, 189, 189)
COLOR_TEXT = (102, 102, 102)
COLOR_TEXT_STRONG = (17, 17, 17)
COLOR_PANEL = (255, 255, 255, 219)
COLOR_PANEL_EDGE = (221, 221, 221)
