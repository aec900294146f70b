from .ppm import Color

DARK_COLOR = Color(0, 0, 0)
LIGHT_COLOR = Color(199, 192, 177)
DOOR_COLOR = Color(230, 100, 0)

# Room colors are drawn per channel from this inclusive range
ROOM_CHANNEL_MIN = 125
ROOM_CHANNEL_MAX = 255

__all__ = ["DARK_COLOR", "LIGHT_COLOR", "DOOR_COLOR", "ROOM_CHANNEL_MIN", "ROOM_CHANNEL_MAX"]
