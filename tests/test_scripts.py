import sys

import pytest

from keyspy.commontypes import CanonicalKey, KeyState
from keyspy.eventtypes import KeyEvent, RawKeyDescriptor
from keyspy.scripts import events_parser, format_event, held_modifiers, is_exit_chord, print_events, verbosity
from keyspy.settings import BackendConfig, Settings


def make_event(key, state=KeyState.DOWN, raw_name=None, location=None):
    return KeyEvent(
        virtual_key=42,
        raw_key=RawKeyDescriptor(raw_name=raw_name or key.value, name=key.value, canonical=key),
        name=key,
        state=state,
        scan_code=42,
        raw="",
        location=location,
    )


def test_verbosity():
    assert verbosity(None, environ={}) == 0
    assert verbosity(None, environ={"KEYSPY_DEBUG": "2"}) == 2
    assert verbosity(None, environ={"KEYSPY_DEBUG": "9"}) == 3
    assert verbosity(None, environ={"KEYSPY_DEBUG": "loud"}) == 0
    assert verbosity(1, environ={"KEYSPY_DEBUG": "3"}) == 1
    assert verbosity(events_parser.parse_args(["-vv"]).verbose, environ={}) == 2


def test_held_modifiers():
    down = {CanonicalKey.RIGHT_SHIFT: True, CanonicalKey.LEFT_CTRL: False, CanonicalKey.A: True}
    assert held_modifiers(down) == ["shift"]


def test_format_event():
    line = format_event(
        make_event(CanonicalKey.A, raw_name="KEY_A", location=(3.0, 4.5)),
        {CanonicalKey.LEFT_CTRL: True, CanonicalKey.LEFT_ALT: True},
    )
    assert line.split() == ["DOWN", "A", "KEY_A", "vkey=42", "at=(3,", "4.5)", "ctrl+alt"]


def test_exit_chords():
    assert is_exit_chord(make_event(CanonicalKey.ESCAPE), {})
    assert not is_exit_chord(make_event(CanonicalKey.ESCAPE, KeyState.UP), {})
    assert is_exit_chord(make_event(CanonicalKey.C), {CanonicalKey.RIGHT_CTRL: True})
    assert not is_exit_chord(make_event(CanonicalKey.C), {})
    assert is_exit_chord(make_event(CanonicalKey.Q), {CanonicalKey.LEFT_META: True}, platform="darwin")
    assert not is_exit_chord(make_event(CanonicalKey.Q), {CanonicalKey.LEFT_META: True}, platform="linux")


@pytest.mark.skipif(sys.platform not in ("linux", "darwin", "win32"), reason="no key server backend")
def test_missing_server_exits_with_status_1(tmp_path, monkeypatch, capsys):
    missing = BackendConfig(server_path=tmp_path / "missing", allow_escalation=False)
    settings_path = tmp_path / "settings.json"
    Settings(windows=missing, mac=missing, x11=missing).save(settings_path)
    monkeypatch.setattr(sys, "argv", ["keyspy-events", "--settings", str(settings_path)])

    with pytest.raises(SystemExit) as excinfo:
        print_events()

    assert excinfo.value.code == 1
    assert "Unable to launch key server" in capsys.readouterr().err
