"""Layout constants and colors, in 1x logical canvas pixels."""

# Timing
FPS = 30
ZOOM = 3

# Canvas
CANVAS_W = 160
CANVAS_H = 144

# Name boxes
FRONT_NAME_X = 11
FRONT_NAME_END_X = 80
FRONT_NAME_Y = 7
BACK_NAME_END_X = 149
BACK_NAME_Y = 72
NAME_TEXT_SIZE = 6

# Health bars
FRONT_HP_BAR = (30, 17)
BACK_HP_BAR = (93, 83)
HP_BAR_W = 50
HP_BAR_H = 5

# Clock readout
CLOCK_TEXT_SIZE = 24
CLOCK_CENTER = (82, 117)

# Winner banner
WINNER_TEXT_SIZE = 10
WINNER_CENTER = (82, 112)
WINNER_LINE_H = WINNER_TEXT_SIZE + 2

# Day screen
DAY_BOX = (20, 47, 120, 30)
DAY_LABEL_SIZE = 8
DAY_TEXT_SIZE = 14
DAYS = ["MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY"]

# Detail screen
DETAIL_TITLE = "POKEDEX ENTRY"
DETAIL_TITLE_SIZE = 10
DETAIL_TITLE_CENTER = (80, 20)
DETAIL_TEXT_SIZE = 8
DETAIL_TEXT_X = 10
DETAIL_TEXT_Y = 40
DETAIL_TEXT_W = 140
DETAIL_LINE_GAP = 4

# Colors
BG_COLOR = (248, 248, 248)
TEXT_COLOR = (0, 0, 0)
HP_FILL = (100, 100, 100)
HP_BORDER = (0, 0, 0)
BOX_FILL = (255, 255, 255)
