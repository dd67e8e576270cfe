# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# macOS virtual keycodes (kVK_* from HIToolbox/Events.h). These are positional: kVK_ANSI_A is
# wherever A sits on an ANSI keyboard, regardless of the active layout.
# Mouse buttons are CGMouseButton numbers, moved into the mouse band.
from ..canonical import MOUSE_OFFSET
from ..commontypes import CanonicalKey as K
from . import keytable

MAC_KEYS = keytable(
    (0x00, "kVK_ANSI_A", "A", K.A),
    (0x01, "kVK_ANSI_S", "S", K.S),
    (0x02, "kVK_ANSI_D", "D", K.D),
    (0x03, "kVK_ANSI_F", "F", K.F),
    (0x04, "kVK_ANSI_H", "H", K.H),
    (0x05, "kVK_ANSI_G", "G", K.G),
    (0x06, "kVK_ANSI_Z", "Z", K.Z),
    (0x07, "kVK_ANSI_X", "X", K.X),
    (0x08, "kVK_ANSI_C", "C", K.C),
    (0x09, "kVK_ANSI_V", "V", K.V),
    (0x0A, "kVK_ISO_Section", "Section", K.SECTION),
    (0x0B, "kVK_ANSI_B", "B", K.B),
    (0x0C, "kVK_ANSI_Q", "Q", K.Q),
    (0x0D, "kVK_ANSI_W", "W", K.W),
    (0x0E, "kVK_ANSI_E", "E", K.E),
    (0x0F, "kVK_ANSI_R", "R", K.R),
    (0x10, "kVK_ANSI_Y", "Y", K.Y),
    (0x11, "kVK_ANSI_T", "T", K.T),
    (0x12, "kVK_ANSI_1", "1", K.DIGIT_1),
    (0x13, "kVK_ANSI_2", "2", K.DIGIT_2),
    (0x14, "kVK_ANSI_3", "3", K.DIGIT_3),
    (0x15, "kVK_ANSI_4", "4", K.DIGIT_4),
    (0x16, "kVK_ANSI_6", "6", K.DIGIT_6),
    (0x17, "kVK_ANSI_5", "5", K.DIGIT_5),
    (0x18, "kVK_ANSI_Equal", "Equal", K.EQUALS),
    (0x19, "kVK_ANSI_9", "9", K.DIGIT_9),
    (0x1A, "kVK_ANSI_7", "7", K.DIGIT_7),
    (0x1B, "kVK_ANSI_Minus", "Minus", K.MINUS),
    (0x1C, "kVK_ANSI_8", "8", K.DIGIT_8),
    (0x1D, "kVK_ANSI_0", "0", K.DIGIT_0),
    (0x1E, "kVK_ANSI_RightBracket", "RightBracket", K.SQUARE_BRACKET_CLOSE),
    (0x1F, "kVK_ANSI_O", "O", K.O),
    (0x20, "kVK_ANSI_U", "U", K.U),
    (0x21, "kVK_ANSI_LeftBracket", "LeftBracket", K.SQUARE_BRACKET_OPEN),
    (0x22, "kVK_ANSI_I", "I", K.I),
    (0x23, "kVK_ANSI_P", "P", K.P),
    (0x24, "kVK_Return", "Return", K.RETURN),
    (0x25, "kVK_ANSI_L", "L", K.L),
    (0x26, "kVK_ANSI_J", "J", K.J),
    (0x27, "kVK_ANSI_Quote", "Quote", K.QUOTE),
    (0x28, "kVK_ANSI_K", "K", K.K),
    (0x29, "kVK_ANSI_Semicolon", "Semicolon", K.SEMICOLON),
    (0x2A, "kVK_ANSI_Backslash", "Backslash", K.BACKSLASH),
    (0x2B, "kVK_ANSI_Comma", "Comma", K.COMMA),
    (0x2C, "kVK_ANSI_Slash", "Slash", K.FORWARD_SLASH),
    (0x2D, "kVK_ANSI_N", "N", K.N),
    (0x2E, "kVK_ANSI_M", "M", K.M),
    (0x2F, "kVK_ANSI_Period", "Period", K.DOT),
    (0x30, "kVK_Tab", "Tab", K.TAB),
    (0x31, "kVK_Space", "Space", K.SPACE),
    (0x32, "kVK_ANSI_Grave", "Grave", K.BACKTICK),
    # "Delete" on a Mac keyboard is backspace; forward delete is 0x75
    (0x33, "kVK_Delete", "Delete", K.BACKSPACE),
    (0x35, "kVK_Escape", "Escape", K.ESCAPE),
    (0x36, "kVK_RightCommand", "RightCommand", K.RIGHT_META),
    (0x37, "kVK_Command", "Command", K.LEFT_META),
    (0x38, "kVK_Shift", "Shift", K.LEFT_SHIFT),
    (0x39, "kVK_CapsLock", "CapsLock", K.CAPS_LOCK),
    (0x3A, "kVK_Option", "Option", K.LEFT_ALT),
    (0x3B, "kVK_Control", "Control", K.LEFT_CTRL),
    (0x3C, "kVK_RightShift", "RightShift", K.RIGHT_SHIFT),
    (0x3D, "kVK_RightOption", "RightOption", K.RIGHT_ALT),
    (0x3E, "kVK_RightControl", "RightControl", K.RIGHT_CTRL),
    (0x3F, "kVK_Function", "Function", K.FN),
    (0x40, "kVK_F17", "F17", K.F17),
    (0x41, "kVK_ANSI_KeypadDecimal", "KeypadDecimal", K.NUMPAD_DOT),
    (0x43, "kVK_ANSI_KeypadMultiply", "KeypadMultiply", K.NUMPAD_MULTIPLY),
    (0x45, "kVK_ANSI_KeypadPlus", "KeypadPlus", K.NUMPAD_PLUS),
    (0x47, "kVK_ANSI_KeypadClear", "KeypadClear", K.NUMPAD_CLEAR),
    (0x48, "kVK_VolumeUp", "VolumeUp", None),
    (0x49, "kVK_VolumeDown", "VolumeDown", None),
    (0x4A, "kVK_Mute", "Mute", None),
    (0x4B, "kVK_ANSI_KeypadDivide", "KeypadDivide", K.NUMPAD_DIVIDE),
    (0x4C, "kVK_ANSI_KeypadEnter", "KeypadEnter", K.NUMPAD_RETURN),
    (0x4E, "kVK_ANSI_KeypadMinus", "KeypadMinus", K.NUMPAD_MINUS),
    (0x4F, "kVK_F18", "F18", K.F18),
    (0x50, "kVK_F19", "F19", K.F19),
    (0x51, "kVK_ANSI_KeypadEquals", "KeypadEquals", K.NUMPAD_EQUALS),
    (0x52, "kVK_ANSI_Keypad0", "Keypad0", K.NUMPAD_0),
    (0x53, "kVK_ANSI_Keypad1", "Keypad1", K.NUMPAD_1),
    (0x54, "kVK_ANSI_Keypad2", "Keypad2", K.NUMPAD_2),
    (0x55, "kVK_ANSI_Keypad3", "Keypad3", K.NUMPAD_3),
    (0x56, "kVK_ANSI_Keypad4", "Keypad4", K.NUMPAD_4),
    (0x57, "kVK_ANSI_Keypad5", "Keypad5", K.NUMPAD_5),
    (0x58, "kVK_ANSI_Keypad6", "Keypad6", K.NUMPAD_6),
    (0x59, "kVK_ANSI_Keypad7", "Keypad7", K.NUMPAD_7),
    (0x5A, "kVK_F20", "F20", K.F20),
    (0x5B, "kVK_ANSI_Keypad8", "Keypad8", K.NUMPAD_8),
    (0x5C, "kVK_ANSI_Keypad9", "Keypad9", K.NUMPAD_9),
    (0x5D, "kVK_JIS_Yen", "Yen", None),
    (0x5E, "kVK_JIS_Underscore", "Underscore", None),
    (0x5F, "kVK_JIS_KeypadComma", "KeypadComma", None),
    (0x60, "kVK_F5", "F5", K.F5),
    (0x61, "kVK_F6", "F6", K.F6),
    (0x62, "kVK_F7", "F7", K.F7),
    (0x63, "kVK_F3", "F3", K.F3),
    (0x64, "kVK_F8", "F8", K.F8),
    (0x65, "kVK_F9", "F9", K.F9),
    (0x66, "kVK_JIS_Eisu", "Eisu", None),
    (0x67, "kVK_F11", "F11", K.F11),
    (0x68, "kVK_JIS_Kana", "Kana", None),
    (0x69, "kVK_F13", "F13", K.F13),
    (0x6A, "kVK_F16", "F16", K.F16),
    (0x6B, "kVK_F14", "F14", K.F14),
    (0x6D, "kVK_F10", "F10", K.F10),
    (0x6E, "kVK_ContextualMenu", "ContextualMenu", None),
    (0x6F, "kVK_F12", "F12", K.F12),
    (0x71, "kVK_F15", "F15", K.F15),
    (0x72, "kVK_Help", "Help", K.INSERT),
    (0x73, "kVK_Home", "Home", K.HOME),
    (0x74, "kVK_PageUp", "PageUp", K.PAGE_UP),
    (0x75, "kVK_ForwardDelete", "ForwardDelete", K.DELETE),
    (0x76, "kVK_F4", "F4", K.F4),
    (0x77, "kVK_End", "End", K.END),
    (0x78, "kVK_F2", "F2", K.F2),
    (0x79, "kVK_PageDown", "PageDown", K.PAGE_DOWN),
    (0x7A, "kVK_F1", "F1", K.F1),
    (0x7B, "kVK_LeftArrow", "LeftArrow", K.LEFT_ARROW),
    (0x7C, "kVK_RightArrow", "RightArrow", K.RIGHT_ARROW),
    (0x7D, "kVK_DownArrow", "DownArrow", K.DOWN_ARROW),
    (0x7E, "kVK_UpArrow", "UpArrow", K.UP_ARROW),
    (MOUSE_OFFSET + 0, "CGMouseButton.left", "left", K.MOUSE_LEFT),
    (MOUSE_OFFSET + 1, "CGMouseButton.right", "right", K.MOUSE_RIGHT),
    (MOUSE_OFFSET + 2, "CGMouseButton.center", "center", K.MOUSE_MIDDLE),
)
