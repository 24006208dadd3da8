from unittest.mock import patch

import pytest

from zombiefield.music import Music
from zombiefield.resources import ResourceError, clear_musics


@pytest.fixture(autouse=True)
def empty_cache():
    clear_musics()
    yield
    clear_musics()


@pytest.fixture
def track(tmp_path):
    path = tmp_path / "theme.ogg"
    path.write_bytes(b"track bytes")
    return path


def test_new_music_is_closed():
    assert not Music().is_open


def test_open_marks_open(track):
    assert Music(track).is_open


def test_open_missing_raises(tmp_path):
    with pytest.raises(ResourceError):
        Music(tmp_path / "missing.ogg")


def test_play_loops_forever_by_default(track):
    with patch("pygame.mixer.music") as stream:
        music = Music(track)
        assert music.is_open
        music.play()
    assert stream.play.call_args.args == (-1,)
    loaded = stream.load.call_args.args
    assert loaded[0].getvalue() == b"track bytes"
    assert loaded[1] == "ogg"


def test_play_counted_times(track):
    with patch("pygame.mixer.music") as stream:
        music = Music(track)
        assert music.is_open
        music.play(3)
    assert stream.play.call_count == 1
    assert stream.play.call_args.args == (2,)


def test_play_once(track):
    with patch("pygame.mixer.music") as stream:
        music = Music(track)
        assert music.is_open
        music.play(1)
    assert stream.play.call_count == 1
    assert stream.play.call_args.args == (0,)


def test_play_when_closed_does_nothing():
    with patch("pygame.mixer.music") as stream:
        music = Music()
        music.play()
    assert not music.is_open
    assert stream.load.call_count == 0
    assert stream.play.call_count == 0


def test_stop_fades_out(track):
    with patch("pygame.mixer.get_init", return_value=(44100, -16, 2)), patch("pygame.mixer.music") as stream:
        music = Music(track)
        assert music.is_open
        music.stop()
    assert stream.fadeout.call_count == 1
    assert stream.fadeout.call_args.args == (1500,)


def test_stop_without_mixer_does_nothing(track):
    with patch("pygame.mixer.get_init", return_value=None), patch("pygame.mixer.music") as stream:
        music = Music(track)
        assert music.is_open
        music.stop(200)
    assert stream.fadeout.call_count == 0


def test_context_manager_closes(track):
    with patch("pygame.mixer.get_init", return_value=None):
        with Music(track) as music:
            assert music.is_open
    assert not music.is_open