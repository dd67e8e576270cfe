# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Windows virtual-key codes, as reported by the low-level keyboard and mouse hooks.
# Mouse buttons are virtual keys too, so they share this table without an offset.
from ..commontypes import CanonicalKey as K
from . import keytable

WINDOWS_KEYS = keytable(
    (0x01, "VK_LBUTTON", "LButton", K.MOUSE_LEFT),
    (0x02, "VK_RBUTTON", "RButton", K.MOUSE_RIGHT),
    (0x03, "VK_CANCEL", "Cancel", None),
    (0x04, "VK_MBUTTON", "MButton", K.MOUSE_MIDDLE),
    (0x05, "VK_XBUTTON1", "XButton1", K.MOUSE_X1),
    (0x06, "VK_XBUTTON2", "XButton2", K.MOUSE_X2),
    (0x08, "VK_BACK", "Backspace", K.BACKSPACE),
    (0x09, "VK_TAB", "Tab", K.TAB),
    (0x0C, "VK_CLEAR", "NumpadClear", K.NUMPAD_CLEAR),
    (0x0D, "VK_RETURN", "Enter", K.RETURN),
    # the hooks report the sided variants (0xA0-0xA5); the generic ones only show up from synthesized input
    (0x10, "VK_SHIFT", "Shift", None),
    (0x11, "VK_CONTROL", "Ctrl", None),
    (0x12, "VK_MENU", "Alt", None),
    (0x13, "VK_PAUSE", "Pause", K.PAUSE),
    (0x14, "VK_CAPITAL", "CapsLock", K.CAPS_LOCK),
    (0x15, "VK_KANA", "Kana", None),
    (0x17, "VK_JUNJA", "Junja", None),
    (0x18, "VK_FINAL", "Final", None),
    (0x19, "VK_KANJI", "Kanji", None),
    (0x1B, "VK_ESCAPE", "Escape", K.ESCAPE),
    (0x1C, "VK_CONVERT", "Convert", None),
    (0x1D, "VK_NONCONVERT", "NonConvert", None),
    (0x1E, "VK_ACCEPT", "Accept", None),
    (0x1F, "VK_MODECHANGE", "ModeChange", None),
    (0x20, "VK_SPACE", "Space", K.SPACE),
    (0x21, "VK_PRIOR", "PageUp", K.PAGE_UP),
    (0x22, "VK_NEXT", "PageDown", K.PAGE_DOWN),
    (0x23, "VK_END", "End", K.END),
    (0x24, "VK_HOME", "Home", K.HOME),
    (0x25, "VK_LEFT", "Left", K.LEFT_ARROW),
    (0x26, "VK_UP", "Up", K.UP_ARROW),
    (0x27, "VK_RIGHT", "Right", K.RIGHT_ARROW),
    (0x28, "VK_DOWN", "Down", K.DOWN_ARROW),
    (0x29, "VK_SELECT", "Select", None),
    (0x2A, "VK_PRINT", "Print", None),
    (0x2B, "VK_EXECUTE", "Execute", None),
    (0x2C, "VK_SNAPSHOT", "PrintScreen", K.PRINT_SCREEN),
    (0x2D, "VK_INSERT", "Insert", K.INSERT),
    (0x2E, "VK_DELETE", "Delete", K.DELETE),
    (0x2F, "VK_HELP", "Help", None),
    (0x30, "VK_0", "0", K.DIGIT_0),
    (0x31, "VK_1", "1", K.DIGIT_1),
    (0x32, "VK_2", "2", K.DIGIT_2),
    (0x33, "VK_3", "3", K.DIGIT_3),
    (0x34, "VK_4", "4", K.DIGIT_4),
    (0x35, "VK_5", "5", K.DIGIT_5),
    (0x36, "VK_6", "6", K.DIGIT_6),
    (0x37, "VK_7", "7", K.DIGIT_7),
    (0x38, "VK_8", "8", K.DIGIT_8),
    (0x39, "VK_9", "9", K.DIGIT_9),
    (0x41, "VK_A", "A", K.A),
    (0x42, "VK_B", "B", K.B),
    (0x43, "VK_C", "C", K.C),
    (0x44, "VK_D", "D", K.D),
    (0x45, "VK_E", "E", K.E),
    (0x46, "VK_F", "F", K.F),
    (0x47, "VK_G", "G", K.G),
    (0x48, "VK_H", "H", K.H),
    (0x49, "VK_I", "I", K.I),
    (0x4A, "VK_J", "J", K.J),
    (0x4B, "VK_K", "K", K.K),
    (0x4C, "VK_L", "L", K.L),
    (0x4D, "VK_M", "M", K.M),
    (0x4E, "VK_N", "N", K.N),
    (0x4F, "VK_O", "O", K.O),
    (0x50, "VK_P", "P", K.P),
    (0x51, "VK_Q", "Q", K.Q),
    (0x52, "VK_R", "R", K.R),
    (0x53, "VK_S", "S", K.S),
    (0x54, "VK_T", "T", K.T),
    (0x55, "VK_U", "U", K.U),
    (0x56, "VK_V", "V", K.V),
    (0x57, "VK_W", "W", K.W),
    (0x58, "VK_X", "X", K.X),
    (0x59, "VK_Y", "Y", K.Y),
    (0x5A, "VK_Z", "Z", K.Z),
    (0x5B, "VK_LWIN", "LWin", K.LEFT_META),
    (0x5C, "VK_RWIN", "RWin", K.RIGHT_META),
    (0x5D, "VK_APPS", "Apps", None),
    (0x5F, "VK_SLEEP", "Sleep", None),
    (0x60, "VK_NUMPAD0", "Numpad0", K.NUMPAD_0),
    (0x61, "VK_NUMPAD1", "Numpad1", K.NUMPAD_1),
    (0x62, "VK_NUMPAD2", "Numpad2", K.NUMPAD_2),
    (0x63, "VK_NUMPAD3", "Numpad3", K.NUMPAD_3),
    (0x64, "VK_NUMPAD4", "Numpad4", K.NUMPAD_4),
    (0x65, "VK_NUMPAD5", "Numpad5", K.NUMPAD_5),
    (0x66, "VK_NUMPAD6", "Numpad6", K.NUMPAD_6),
    (0x67, "VK_NUMPAD7", "Numpad7", K.NUMPAD_7),
    (0x68, "VK_NUMPAD8", "Numpad8", K.NUMPAD_8),
    (0x69, "VK_NUMPAD9", "Numpad9", K.NUMPAD_9),
    (0x6A, "VK_MULTIPLY", "NumpadMultiply", K.NUMPAD_MULTIPLY),
    (0x6B, "VK_ADD", "NumpadAdd", K.NUMPAD_PLUS),
    (0x6C, "VK_SEPARATOR", "NumpadSeparator", None),
    (0x6D, "VK_SUBTRACT", "NumpadSubtract", K.NUMPAD_MINUS),
    (0x6E, "VK_DECIMAL", "NumpadDecimal", K.NUMPAD_DOT),
    (0x6F, "VK_DIVIDE", "NumpadDivide", K.NUMPAD_DIVIDE),
    (0x70, "VK_F1", "F1", K.F1),
    (0x71, "VK_F2", "F2", K.F2),
    (0x72, "VK_F3", "F3", K.F3),
    (0x73, "VK_F4", "F4", K.F4),
    (0x74, "VK_F5", "F5", K.F5),
    (0x75, "VK_F6", "F6", K.F6),
    (0x76, "VK_F7", "F7", K.F7),
    (0x77, "VK_F8", "F8", K.F8),
    (0x78, "VK_F9", "F9", K.F9),
    (0x79, "VK_F10", "F10", K.F10),
    (0x7A, "VK_F11", "F11", K.F11),
    (0x7B, "VK_F12", "F12", K.F12),
    (0x7C, "VK_F13", "F13", K.F13),
    (0x7D, "VK_F14", "F14", K.F14),
    (0x7E, "VK_F15", "F15", K.F15),
    (0x7F, "VK_F16", "F16", K.F16),
    (0x80, "VK_F17", "F17", K.F17),
    (0x81, "VK_F18", "F18", K.F18),
    (0x82, "VK_F19", "F19", K.F19),
    (0x83, "VK_F20", "F20", K.F20),
    (0x84, "VK_F21", "F21", K.F21),
    (0x85, "VK_F22", "F22", K.F22),
    (0x86, "VK_F23", "F23", K.F23),
    (0x87, "VK_F24", "F24", K.F24),
    (0x90, "VK_NUMLOCK", "NumLock", K.NUM_LOCK),
    (0x91, "VK_SCROLL", "ScrollLock", K.SCROLL_LOCK),
    (0xA0, "VK_LSHIFT", "LShift", K.LEFT_SHIFT),
    (0xA1, "VK_RSHIFT", "RShift", K.RIGHT_SHIFT),
    (0xA2, "VK_LCONTROL", "LCtrl", K.LEFT_CTRL),
    (0xA3, "VK_RCONTROL", "RCtrl", K.RIGHT_CTRL),
    (0xA4, "VK_LMENU", "LAlt", K.LEFT_ALT),
    (0xA5, "VK_RMENU", "RAlt", K.RIGHT_ALT),
    (0xA6, "VK_BROWSER_BACK", "BrowserBack", None),
    (0xA7, "VK_BROWSER_FORWARD", "BrowserForward", None),
    (0xA8, "VK_BROWSER_REFRESH", "BrowserRefresh", None),
    (0xA9, "VK_BROWSER_STOP", "BrowserStop", None),
    (0xAA, "VK_BROWSER_SEARCH", "BrowserSearch", None),
    (0xAB, "VK_BROWSER_FAVORITES", "BrowserFavorites", None),
    (0xAC, "VK_BROWSER_HOME", "BrowserHome", None),
    (0xAD, "VK_VOLUME_MUTE", "VolumeMute", None),
    (0xAE, "VK_VOLUME_DOWN", "VolumeDown", None),
    (0xAF, "VK_VOLUME_UP", "VolumeUp", None),
    (0xB0, "VK_MEDIA_NEXT_TRACK", "MediaNextTrack", None),
    (0xB1, "VK_MEDIA_PREV_TRACK", "MediaPrevTrack", None),
    (0xB2, "VK_MEDIA_STOP", "MediaStop", None),
    (0xB3, "VK_MEDIA_PLAY_PAUSE", "MediaPlayPause", None),
    (0xB4, "VK_LAUNCH_MAIL", "LaunchMail", None),
    (0xB5, "VK_LAUNCH_MEDIA_SELECT", "LaunchMediaSelect", None),
    (0xB6, "VK_LAUNCH_APP1", "LaunchApp1", None),
    (0xB7, "VK_LAUNCH_APP2", "LaunchApp2", None),
    (0xBA, "VK_OEM_1", "Semicolon", K.SEMICOLON),
    (0xBB, "VK_OEM_PLUS", "Equals", K.EQUALS),
    (0xBC, "VK_OEM_COMMA", "Comma", K.COMMA),
    (0xBD, "VK_OEM_MINUS", "Minus", K.MINUS),
    (0xBE, "VK_OEM_PERIOD", "Period", K.DOT),
    (0xBF, "VK_OEM_2", "Slash", K.FORWARD_SLASH),
    (0xC0, "VK_OEM_3", "Backtick", K.BACKTICK),
    (0xDB, "VK_OEM_4", "OpenBracket", K.SQUARE_BRACKET_OPEN),
    (0xDC, "VK_OEM_5", "Backslash", K.BACKSLASH),
    (0xDD, "VK_OEM_6", "CloseBracket", K.SQUARE_BRACKET_CLOSE),
    (0xDE, "VK_OEM_7", "Quote", K.QUOTE),
    (0xDF, "VK_OEM_8", "Oem8", None),
    (0xE2, "VK_OEM_102", "Oem102", None),
    (0xE5, "VK_PROCESSKEY", "ProcessKey", None),
    (0xF6, "VK_ATTN", "Attn", None),
    (0xF7, "VK_CRSEL", "CrSel", None),
    (0xF8, "VK_EXSEL", "ExSel", None),
    (0xF9, "VK_EREOF", "EraseEOF", None),
    (0xFA, "VK_PLAY", "Play", None),
    (0xFB, "VK_ZOOM", "Zoom", None),
    (0xFE, "VK_OEM_CLEAR", "OemClear", None),
)
