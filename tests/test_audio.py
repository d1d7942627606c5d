import logging

from ipywidgets import Box

from pixelbird.internal.audio import AudioPlayer


def test_tracks_playback_without_a_slot():
    player = AudioPlayer()

    player.play("assets/music.wav")
    assert player.is_playing
    assert player.track == "assets/music.wav"

    player.stop()
    assert not player.is_playing


def test_missing_track_is_silent(tmp_path, caplog):
    slot = Box()
    player = AudioPlayer(slot)

    with caplog.at_level(logging.WARNING, logger="pixelbird"):
        player.play(str(tmp_path / "missing.wav"))

    assert slot.children == ()
    assert any("missing.wav" in record.getMessage() for record in caplog.records)
    player.stop()
    assert not player.is_playing


def test_playing_mounts_and_stop_unmounts_the_widget(tmp_path):
    track = tmp_path / "music.wav"
    track.write_bytes(b"RIFF\x00\x00\x00\x00WAVE")
    slot = Box()
    player = AudioPlayer(slot)

    player.play(str(track))
    assert len(slot.children) == 1
    assert slot.children[0].loop is True

    player.stop()
    assert slot.children == ()
