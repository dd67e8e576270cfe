# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# X11 keycodes are Linux input-event codes shifted up by 8, so this table is keyed by
# the evdev code (keycode - 8). Raw names follow linux/input-event-codes.h.
# Pointer buttons are X button numbers, moved into the mouse band.
from ..canonical import MOUSE_OFFSET
from ..commontypes import CanonicalKey as K
from . import keytable

X11_KEYCODE_OFFSET = -8

X11_KEYS = keytable(
    (1, "KEY_ESC", "ESCAPE", K.ESCAPE),
    (2, "KEY_1", "1", K.DIGIT_1),
    (3, "KEY_2", "2", K.DIGIT_2),
    (4, "KEY_3", "3", K.DIGIT_3),
    (5, "KEY_4", "4", K.DIGIT_4),
    (6, "KEY_5", "5", K.DIGIT_5),
    (7, "KEY_6", "6", K.DIGIT_6),
    (8, "KEY_7", "7", K.DIGIT_7),
    (9, "KEY_8", "8", K.DIGIT_8),
    (10, "KEY_9", "9", K.DIGIT_9),
    (11, "KEY_0", "0", K.DIGIT_0),
    (12, "KEY_MINUS", "MINUS", K.MINUS),
    (13, "KEY_EQUAL", "EQUALS", K.EQUALS),
    (14, "KEY_BACKSPACE", "BACKSPACE", K.BACKSPACE),
    (15, "KEY_TAB", "TAB", K.TAB),
    (16, "KEY_Q", "Q", K.Q),
    (17, "KEY_W", "W", K.W),
    (18, "KEY_E", "E", K.E),
    (19, "KEY_R", "R", K.R),
    (20, "KEY_T", "T", K.T),
    (21, "KEY_Y", "Y", K.Y),
    (22, "KEY_U", "U", K.U),
    (23, "KEY_I", "I", K.I),
    (24, "KEY_O", "O", K.O),
    (25, "KEY_P", "P", K.P),
    (26, "KEY_LEFTBRACE", "SQUARE BRACKET OPEN", K.SQUARE_BRACKET_OPEN),
    (27, "KEY_RIGHTBRACE", "SQUARE BRACKET CLOSE", K.SQUARE_BRACKET_CLOSE),
    (28, "KEY_ENTER", "RETURN", K.RETURN),
    (29, "KEY_LEFTCTRL", "LEFT CTRL", K.LEFT_CTRL),
    (30, "KEY_A", "A", K.A),
    (31, "KEY_S", "S", K.S),
    (32, "KEY_D", "D", K.D),
    (33, "KEY_F", "F", K.F),
    (34, "KEY_G", "G", K.G),
    (35, "KEY_H", "H", K.H),
    (36, "KEY_J", "J", K.J),
    (37, "KEY_K", "K", K.K),
    (38, "KEY_L", "L", K.L),
    (39, "KEY_SEMICOLON", "SEMICOLON", K.SEMICOLON),
    (40, "KEY_APOSTROPHE", "QUOTE", K.QUOTE),
    (41, "KEY_GRAVE", "BACKTICK", K.BACKTICK),
    (42, "KEY_LEFTSHIFT", "LEFT SHIFT", K.LEFT_SHIFT),
    (43, "KEY_BACKSLASH", "BACKSLASH", K.BACKSLASH),
    (44, "KEY_Z", "Z", K.Z),
    (45, "KEY_X", "X", K.X),
    (46, "KEY_C", "C", K.C),
    (47, "KEY_V", "V", K.V),
    (48, "KEY_B", "B", K.B),
    (49, "KEY_N", "N", K.N),
    (50, "KEY_M", "M", K.M),
    (51, "KEY_COMMA", "COMMA", K.COMMA),
    (52, "KEY_DOT", "DOT", K.DOT),
    (53, "KEY_SLASH", "FORWARD SLASH", K.FORWARD_SLASH),
    (54, "KEY_RIGHTSHIFT", "RIGHT SHIFT", K.RIGHT_SHIFT),
    (55, "KEY_KPASTERISK", "NUMPAD MULTIPLY", K.NUMPAD_MULTIPLY),
    (56, "KEY_LEFTALT", "LEFT ALT", K.LEFT_ALT),
    (57, "KEY_SPACE", "SPACE", K.SPACE),
    (58, "KEY_CAPSLOCK", "CAPS LOCK", K.CAPS_LOCK),
    (59, "KEY_F1", "F1", K.F1),
    (60, "KEY_F2", "F2", K.F2),
    (61, "KEY_F3", "F3", K.F3),
    (62, "KEY_F4", "F4", K.F4),
    (63, "KEY_F5", "F5", K.F5),
    (64, "KEY_F6", "F6", K.F6),
    (65, "KEY_F7", "F7", K.F7),
    (66, "KEY_F8", "F8", K.F8),
    (67, "KEY_F9", "F9", K.F9),
    (68, "KEY_F10", "F10", K.F10),
    (69, "KEY_NUMLOCK", "NUM LOCK", K.NUM_LOCK),
    (70, "KEY_SCROLLLOCK", "SCROLL LOCK", K.SCROLL_LOCK),
    (71, "KEY_KP7", "NUMPAD 7", K.NUMPAD_7),
    (72, "KEY_KP8", "NUMPAD 8", K.NUMPAD_8),
    (73, "KEY_KP9", "NUMPAD 9", K.NUMPAD_9),
    (74, "KEY_KPMINUS", "NUMPAD MINUS", K.NUMPAD_MINUS),
    (75, "KEY_KP4", "NUMPAD 4", K.NUMPAD_4),
    (76, "KEY_KP5", "NUMPAD 5", K.NUMPAD_5),
    (77, "KEY_KP6", "NUMPAD 6", K.NUMPAD_6),
    (78, "KEY_KPPLUS", "NUMPAD PLUS", K.NUMPAD_PLUS),
    (79, "KEY_KP1", "NUMPAD 1", K.NUMPAD_1),
    (80, "KEY_KP2", "NUMPAD 2", K.NUMPAD_2),
    (81, "KEY_KP3", "NUMPAD 3", K.NUMPAD_3),
    (82, "KEY_KP0", "NUMPAD 0", K.NUMPAD_0),
    (83, "KEY_KPDOT", "NUMPAD DOT", K.NUMPAD_DOT),
    (85, "KEY_ZENKAKUHANKAKU", "ZENKAKUHANKAKU", None),
    (86, "KEY_102ND", "102ND", K.SECTION),
    (87, "KEY_F11", "F11", K.F11),
    (88, "KEY_F12", "F12", K.F12),
    (89, "KEY_RO", "RO", None),
    (90, "KEY_KATAKANA", "KATAKANA", None),
    (91, "KEY_HIRAGANA", "HIRAGANA", None),
    (92, "KEY_HENKAN", "HENKAN", None),
    (93, "KEY_KATAKANAHIRAGANA", "KATAKANAHIRAGANA", None),
    (94, "KEY_MUHENKAN", "MUHENKAN", None),
    (96, "KEY_KPENTER", "NUMPAD RETURN", K.NUMPAD_RETURN),
    (97, "KEY_RIGHTCTRL", "RIGHT CTRL", K.RIGHT_CTRL),
    (98, "KEY_KPSLASH", "NUMPAD DIVIDE", K.NUMPAD_DIVIDE),
    (99, "KEY_SYSRQ", "PRINT SCREEN", K.PRINT_SCREEN),
    (100, "KEY_RIGHTALT", "RIGHT ALT", K.RIGHT_ALT),
    (102, "KEY_HOME", "HOME", K.HOME),
    (103, "KEY_UP", "UP ARROW", K.UP_ARROW),
    (104, "KEY_PAGEUP", "PAGE UP", K.PAGE_UP),
    (105, "KEY_LEFT", "LEFT ARROW", K.LEFT_ARROW),
    (106, "KEY_RIGHT", "RIGHT ARROW", K.RIGHT_ARROW),
    (107, "KEY_END", "END", K.END),
    (108, "KEY_DOWN", "DOWN ARROW", K.DOWN_ARROW),
    (109, "KEY_PAGEDOWN", "PAGE DOWN", K.PAGE_DOWN),
    (110, "KEY_INSERT", "INSERT", K.INSERT),
    (111, "KEY_DELETE", "DELETE", K.DELETE),
    (113, "KEY_MUTE", "MUTE", None),
    (114, "KEY_VOLUMEDOWN", "VOLUME DOWN", None),
    (115, "KEY_VOLUMEUP", "VOLUME UP", None),
    (116, "KEY_POWER", "POWER", None),
    (117, "KEY_KPEQUAL", "NUMPAD EQUALS", K.NUMPAD_EQUALS),
    (119, "KEY_PAUSE", "PAUSE", K.PAUSE),
    (121, "KEY_KPCOMMA", "NUMPAD COMMA", None),
    (125, "KEY_LEFTMETA", "LEFT META", K.LEFT_META),
    (126, "KEY_RIGHTMETA", "RIGHT META", K.RIGHT_META),
    (127, "KEY_COMPOSE", "COMPOSE", None),
    (183, "KEY_F13", "F13", K.F13),
    (184, "KEY_F14", "F14", K.F14),
    (185, "KEY_F15", "F15", K.F15),
    (186, "KEY_F16", "F16", K.F16),
    (187, "KEY_F17", "F17", K.F17),
    (188, "KEY_F18", "F18", K.F18),
    (189, "KEY_F19", "F19", K.F19),
    (190, "KEY_F20", "F20", K.F20),
    (191, "KEY_F21", "F21", K.F21),
    (192, "KEY_F22", "F22", K.F22),
    (193, "KEY_F23", "F23", K.F23),
    (194, "KEY_F24", "F24", K.F24),
    (MOUSE_OFFSET + 1, "Button1", "MOUSE LEFT", K.MOUSE_LEFT),
    (MOUSE_OFFSET + 2, "Button2", "MOUSE MIDDLE", K.MOUSE_MIDDLE),
    (MOUSE_OFFSET + 3, "Button3", "MOUSE RIGHT", K.MOUSE_RIGHT),
    # wheel clicks arrive as button presses
    (MOUSE_OFFSET + 4, "Button4", "WHEEL UP", None),
    (MOUSE_OFFSET + 5, "Button5", "WHEEL DOWN", None),
    (MOUSE_OFFSET + 6, "Button6", "WHEEL LEFT", None),
    (MOUSE_OFFSET + 7, "Button7", "WHEEL RIGHT", None),
    (MOUSE_OFFSET + 8, "Button8", "MOUSE BACK", K.MOUSE_X1),
    (MOUSE_OFFSET + 9, "Button9", "MOUSE FORWARD", K.MOUSE_X2),
)
