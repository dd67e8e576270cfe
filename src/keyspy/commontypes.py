# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum


class KeyState(enum.Enum):
    DOWN = "DOWN"
    UP = "UP"


@enum.unique
class CanonicalKey(enum.Enum):
    # letters
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    # digits row
    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"
    # numpad
    NUMPAD_0 = "NUMPAD 0"
    NUMPAD_1 = "NUMPAD 1"
    NUMPAD_2 = "NUMPAD 2"
    NUMPAD_3 = "NUMPAD 3"
    NUMPAD_4 = "NUMPAD 4"
    NUMPAD_5 = "NUMPAD 5"
    NUMPAD_6 = "NUMPAD 6"
    NUMPAD_7 = "NUMPAD 7"
    NUMPAD_8 = "NUMPAD 8"
    NUMPAD_9 = "NUMPAD 9"
    NUMPAD_EQUALS = "NUMPAD EQUALS"
    NUMPAD_DIVIDE = "NUMPAD DIVIDE"
    NUMPAD_MULTIPLY = "NUMPAD MULTIPLY"
    NUMPAD_MINUS = "NUMPAD MINUS"
    NUMPAD_PLUS = "NUMPAD PLUS"
    NUMPAD_RETURN = "NUMPAD RETURN"
    NUMPAD_DOT = "NUMPAD DOT"
    NUMPAD_CLEAR = "NUMPAD CLEAR"
    # function keys
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    F21 = "F21"
    F22 = "F22"
    F23 = "F23"
    F24 = "F24"
    # navigation and editing
    RETURN = "RETURN"
    ESCAPE = "ESCAPE"
    SPACE = "SPACE"
    TAB = "TAB"
    BACKSPACE = "BACKSPACE"
    DELETE = "DELETE"
    INSERT = "INSERT"
    HOME = "HOME"
    END = "END"
    PAGE_UP = "PAGE UP"
    PAGE_DOWN = "PAGE DOWN"
    LEFT_ARROW = "LEFT ARROW"
    RIGHT_ARROW = "RIGHT ARROW"
    UP_ARROW = "UP ARROW"
    DOWN_ARROW = "DOWN ARROW"
    PRINT_SCREEN = "PRINT SCREEN"
    PAUSE = "PAUSE"
    CAPS_LOCK = "CAPS LOCK"
    NUM_LOCK = "NUM LOCK"
    SCROLL_LOCK = "SCROLL LOCK"
    # punctuation
    MINUS = "MINUS"
    EQUALS = "EQUALS"
    SQUARE_BRACKET_OPEN = "SQUARE BRACKET OPEN"
    SQUARE_BRACKET_CLOSE = "SQUARE BRACKET CLOSE"
    SEMICOLON = "SEMICOLON"
    QUOTE = "QUOTE"
    BACKSLASH = "BACKSLASH"
    COMMA = "COMMA"
    DOT = "DOT"
    FORWARD_SLASH = "FORWARD SLASH"
    BACKTICK = "BACKTICK"
    SECTION = "SECTION"
    # modifiers
    LEFT_SHIFT = "LEFT SHIFT"
    RIGHT_SHIFT = "RIGHT SHIFT"
    LEFT_CTRL = "LEFT CTRL"
    RIGHT_CTRL = "RIGHT CTRL"
    LEFT_ALT = "LEFT ALT"
    RIGHT_ALT = "RIGHT ALT"
    LEFT_META = "LEFT META"
    RIGHT_META = "RIGHT META"
    FN = "FN"
    # mouse
    MOUSE_LEFT = "MOUSE LEFT"
    MOUSE_RIGHT = "MOUSE RIGHT"
    MOUSE_MIDDLE = "MOUSE MIDDLE"
    MOUSE_X1 = "MOUSE X1"
    MOUSE_X2 = "MOUSE X2"

    UNKNOWN = "UNKNOWN"

    @enum.property
    def is_mouse(self):
        return self.value.startswith("MOUSE ")


MODIFIER_PAIRS = {
    "shift": (CanonicalKey.LEFT_SHIFT, CanonicalKey.RIGHT_SHIFT),
    "ctrl": (CanonicalKey.LEFT_CTRL, CanonicalKey.RIGHT_CTRL),
    "alt": (CanonicalKey.LEFT_ALT, CanonicalKey.RIGHT_ALT),
    "meta": (CanonicalKey.LEFT_META, CanonicalKey.RIGHT_META),
}


class KeySpyError(Exception):
    pass


class UnsupportedPlatformError(KeySpyError):
    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"No key server backend for platform {platform!r}")
