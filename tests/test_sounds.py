"""Tests for chime synthesis and the SoundManager playback API."""

import io
import wave

import numpy as np

from studyhub.audio.sounds import (
    SoundManager, SOUND_NAMES, PHASE_SOUNDS, SAMPLE_RATE,
    _generate_arpeggio, _generate_bell, _make_envelope,
)
from studyhub.timer.session import Phase


def _read_wav(data: bytes):
    with wave.open(io.BytesIO(data), "rb") as wf:
        return wf.getnchannels(), wf.getsampwidth(), wf.getframerate(), wf.getnframes()


class TestSynthesis:

    def test_arpeggio_is_mono_16bit(self):
        channels, width, rate, frames = _read_wav(_generate_arpeggio())
        assert (channels, width, rate) == (1, 2, SAMPLE_RATE)
        assert frames > 0

    def test_bell_lasts_one_second(self):
        _, _, rate, frames = _read_wav(_generate_bell())
        assert frames == rate

    def test_envelope_shape(self):
        env = _make_envelope(1000, attack=100, decay=100, sustain_level=0.5, release=100)
        assert env[0] == 0.0
        assert env[99] == 1.0
        assert np.isclose(env[500], 0.5)
        assert np.isclose(env[-1], 0.0)


class TestSoundManager:

    def test_generates_cache_files(self, qapp, tmp_path):
        SoundManager(sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            assert (tmp_path / f"{name}.wav").exists()

    def test_every_phase_has_a_sound(self):
        assert set(PHASE_SOUNDS) == set(Phase)
        assert set(PHASE_SOUNDS.values()) <= set(SOUND_NAMES)

    def test_volume_clamped(self, qapp, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        mgr.set_volume(150)
        assert mgr.volume == 100
        mgr.set_volume(-5)
        assert mgr.volume == 0

    def test_play_when_disabled_is_noop(self, qapp, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        mgr.set_enabled(False)
        assert mgr.enabled is False
        mgr.play_for_phase(Phase.WORK)

    def test_unknown_sound_is_noop(self, qapp, tmp_path):
        SoundManager(sounds_dir=tmp_path).play("fanfare")

    def test_default_dir_under_support_dir(self, qapp, studyhub_home):
        SoundManager()
        assert (studyhub_home / "sounds" / "work_complete.wav").exists()
