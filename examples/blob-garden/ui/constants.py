"""Layout constants and color definitions."""

FPS = 60

SCREEN_W = 800
SCREEN_H = 640
STATUS_H = 56

BLOB_CENTER = (SCREEN_W / 2, (SCREEN_H - STATUS_H) / 2)

BG_COLOR = (14, 16, 24)
STATUS_BG = (28, 30, 44)
TEXT_COLOR = (210, 210, 220)
TEXT_DIM = (120, 120, 140)
TOKEN_BG = (40, 44, 60)

CALLOUT_RISE_PX = 40.0
