from __future__ import annotations

# App
APP_VERSION = "0.3.0"

# Smoothing modes (CLI / demo names)
MODE_HALF_LIFE = "half-life"
MODE_FACTOR = "factor"
MODE_LAMBDA = "lambda"
MODES = (MODE_HALF_LIFE, MODE_FACTOR, MODE_LAMBDA)
DEFAULT_MODE = MODE_HALF_LIFE

# Default control parameter per mode.
# These three describe the same decay speed (ln2 / 0.25 ~= 2.77 1/sec).
DEFAULT_HALF_LIFE = 0.25  # seconds to close half the gap
DEFAULT_LAMBDA = 2.772588722239781  # 1/sec, larger = faster follow
DEFAULT_SMOOTHING = 0.0625  # fraction of the gap left after 1 sec

# Trace / compare
DEFAULT_SOURCE = 0.0
DEFAULT_TARGET = 10.0
DEFAULT_FPS = 60.0
DEFAULT_SECONDS = 1.0
DEFAULT_EVERY = 6  # print every n-th frame
DEFAULT_FPS_LIST = "30,60,144"

# Demo window
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
FPS_CAP = 0  # 0 = uncapped
MAX_DT = 0.05  # frame-time clamp (sec), avoids jumps after stalls
