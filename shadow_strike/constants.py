# --- Playfield ---
GAME_WIDTH = 800
GAME_HEIGHT = 600
GROUND_HEIGHT = 40

# --- Player ---
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 70
PLAYER_X = 100
# Top edge of the player when standing; the player's y never goes below this line.
PLAYER_GROUND_Y = GAME_HEIGHT - PLAYER_HEIGHT - GROUND_HEIGHT

# --- Physics ---
FRAME_MS = 16  # reference frame all speeds are tuned against
GRAVITY = 0.6
PLAYER_JUMP_VELOCITY = -15
GROUND_SPEED = 4

# --- Shurikens ---
SHURIKEN_WIDTH = 30
SHURIKEN_HEIGHT = 30
SHURIKEN_SPEED = 10

# --- Enemies / obstacles ---
ENEMY_WIDTH = 50
ENEMY_HEIGHT = 50
ENEMY_Y = PLAYER_GROUND_Y + PLAYER_HEIGHT - ENEMY_HEIGHT
OBSTACLE_MIN_WIDTH = 30
OBSTACLE_MAX_WIDTH = 80
OBSTACLE_MIN_HEIGHT = 40
OBSTACLE_MAX_HEIGHT = 100

# --- Spawning ---
ENEMY_SPAWN_THRESHOLD = 300
OBSTACLE_SPAWN_THRESHOLD = 400

# --- Scoring / difficulty ---
SCORE_PER_ENEMY = 100
MAX_SCORE = 10000
DIFFICULTY_INTERVAL_MS = 5000
SUGGESTION_TIMEOUT_S = 2.0

# --- Persistence ---
HIGH_SCORE_KEY = "shadow-strike-highscore"
