"""
constants.py: Centralized configuration for game and runtime settings.
"""

# -------- Runtime Config --------
FPS = 60                        # Display refresh / simulation ticks per second
DB_FILE = "flappy_best.db"
BEST_SCORE_KEY = "flappyBirdHighScore"

# -------- Game World Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600

# -------- Bird Config --------
BIRD_X = 50                     # Fixed bird X position
BIRD_WIDTH = 20
BIRD_HEIGHT = 20

# -------- Pipe Config --------
PIPE_WIDTH = 40
PIPE_GAP = 100
PIPE_SPEED = 2.0                # pixels/frame
PIPE_SPAWN_SPACING = 150        # Spawn once the newest pipe is this far in
PIPE_MIN_HEIGHT = 50            # Shortest top or bottom segment

# -------- Physics Config (Pixels / Frame / Frame) --------
# Fixed per-frame step, not scaled by wall-clock time
GRAVITY = 0.5
JUMP_IMPULSE = -8.0             # Instantaneous velocity (overwrites)
ROTATION_GAIN = 3.0             # degrees per unit of velocity
ROTATION_MIN = -30.0
ROTATION_MAX = 90.0

# -------- Sound Config --------
# (frequency Hz, duration ms, waveform)
JUMP_SOUND = (800, 100, "square")
SCORE_SOUND = (1000, 200, "sine")
HIT_SOUND = (200, 300, "sawtooth")
SOUND_START_GAIN = 0.3
SOUND_END_GAIN = 0.01
