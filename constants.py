# --- Window ---
WIDTH, HEIGHT = 1400, 900
FPS = 60

# --- Cloth grid ---
CLOTH_COLS = 70
CLOTH_ROWS = 45
CLOTH_SPACING = 18.0

# --- Mouse buttons (pygame numbering) ---
GRAB_BUTTON = 1
CUT_BUTTON = 3

# --- Colors ---
WHITE = (255, 255, 255)
BACKGROUND = (10, 10, 15)
