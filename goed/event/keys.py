"""Key names and mouse buttons as they appear in key bindings."""

from __future__ import annotations

from enum import IntEnum

KEY_FUNCTION = "function"
KEY_LEFT_SUPER = "left_super"
KEY_RIGHT_SUPER = "right_super"
KEY_LEFT_ALT = "left_alt"
KEY_RIGHT_ALT = "right_alt"
KEY_LEFT_CONTROL = "left_control"
KEY_RIGHT_CONTROL = "right_control"
KEY_LEFT_SHIFT = "left_shift"
KEY_RIGHT_SHIFT = "right_shift"
KEY_UP_ARROW = "up_arrow"
KEY_DOWN_ARROW = "down_arrow"
KEY_LEFT_ARROW = "left_arrow"
KEY_RIGHT_ARROW = "right_arrow"
KEY_INSERT = "insert"
KEY_TAB = "tab"
KEY_SPACE = "space"
KEY_A = "a"
KEY_B = "b"
KEY_C = "c"
KEY_D = "d"
KEY_E = "e"
KEY_F = "f"
KEY_G = "g"
KEY_H = "h"
KEY_I = "i"
KEY_J = "j"
KEY_K = "k"
KEY_L = "l"
KEY_M = "m"
KEY_N = "n"
KEY_O = "o"
KEY_P = "p"
KEY_Q = "q"
KEY_R = "r"
KEY_S = "s"
KEY_T = "t"
KEY_U = "u"
KEY_V = "v"
KEY_W = "w"
KEY_X = "x"
KEY_Y = "y"
KEY_Z = "z"
KEY_1 = "1"
KEY_2 = "2"
KEY_3 = "3"
KEY_4 = "4"
KEY_5 = "5"
KEY_6 = "6"
KEY_7 = "7"
KEY_8 = "8"
KEY_9 = "9"
KEY_0 = "0"
KEY_PAD_END = "kp_end"
KEY_PAD_DOWN = "kp_down"
KEY_PAD_NEXT = "kp_next"
KEY_PAD_LEFT = "kp_left"
KEY_PAD_BEGIN = "kp_begin"
KEY_PAD_RIGHT = "kp_right"
KEY_PAD_HOME = "kp_home"
KEY_PAD_UP = "kp_up"
KEY_PAD_PRIOR = "kp_prior"
KEY_PAD_INSERT = "kp_insert"
KEY_PAD_SLASH = "kp_slash"
KEY_PAD_STAR = "kp_star"
KEY_PAD_MINUS = "kp_minus"
KEY_PAD_PLUS = "kp_plus"
KEY_PAD_DOT = "kp_dot"
KEY_PAD_EQUAL = "kp_equal"
KEY_PAD_ENTER = "kp_enter"
KEY_BACK_TICK = "`"
KEY_F1 = "f1"
KEY_F2 = "f2"
KEY_F3 = "f3"
KEY_F4 = "f4"
KEY_F5 = "f5"
KEY_F6 = "f6"
KEY_F7 = "f7"
KEY_F8 = "f8"
KEY_F9 = "f9"
KEY_F10 = "f10"
KEY_F11 = "f11"
KEY_F12 = "f12"
KEY_F13 = "f13"
KEY_F14 = "f14"
KEY_F15 = "f15"
KEY_F16 = "f16"
KEY_MINUS = "-"
KEY_EQUAL = "="
KEY_LEFT_BRACKET = "["
KEY_RIGHT_BRACKET = "]"
KEY_BACKSLASH = "\\"
KEY_SEMICOLON = ";"
KEY_QUOTE = "'"
KEY_COMMA = ","
KEY_PERIOD = "."
KEY_SLASH = "/"
KEY_RETURN = "return"
KEY_ESCAPE = "escape"
KEY_NUMLOCK = "numlock"
KEY_DELETE = "delete"
KEY_BACKSPACE = "backspace"
KEY_HOME = "home"
KEY_END = "end"
KEY_PRIOR = "prior"
KEY_NEXT = "next"
KEY_CAPS_LOCK = "caps"

# Modifier keys and the Combo flag each one sets.
MODIFIER_KEYS: dict[str, str] = {
    KEY_LEFT_SUPER: "lsuper",
    KEY_RIGHT_SUPER: "rsuper",
    KEY_LEFT_CONTROL: "lctrl",
    KEY_RIGHT_CONTROL: "rctrl",
    KEY_LEFT_ALT: "lalt",
    KEY_RIGHT_ALT: "ralt",
    KEY_LEFT_SHIFT: "lshift",
    KEY_RIGHT_SHIFT: "rshift",
    KEY_FUNCTION: "func",
}


class MouseButton(IntEnum):
    """Mouse buttons, one bit each."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 4
    WHEEL_UP = 8
    WHEEL_DOWN = 16
    WHEEL_LEFT = 32
    WHEEL_RIGHT = 64