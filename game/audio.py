"""
Audio cues - fire-and-forget sound effects
"""

import logging
import math
import os
import pygame
from utils.constants import SOUND_BONUS, SOUND_DIR

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def _synth_tone(freq, duration, vol=0.3, slide=0.0):
    """Build a short stereo sine tone as a Sound"""
    n_samples = int(SAMPLE_RATE * duration)
    # buffer length = samples * 2 channels * 2 bytes
    buf = bytearray(n_samples * 4)

    for i in range(n_samples):
        t = i / SAMPLE_RATE
        f = freq + slide * t
        v = math.sin(f * t * 2 * math.pi)

        # Envelope
        env = 1.0
        if i < 500:
            env = i / 500
        if i > n_samples - 1000:
            env = (n_samples - i) / 1000

        val = max(-32768, min(32767, int(v * vol * env * 32767)))
        sample = val.to_bytes(2, 'little', signed=True)
        buf[i * 4:i * 4 + 2] = sample
        buf[i * 4 + 2:i * 4 + 4] = sample

    return pygame.mixer.Sound(buffer=bytes(buf))


class AudioCue:
    """
    Plays named sounds; has no effect on the game state
    """
    def __init__(self, sound_dir=SOUND_DIR):
        self.sound_dir = sound_dir
        self.sounds = {}
        self.enabled = self._init_mixer()
        if self.enabled:
            try:
                self.sounds[SOUND_BONUS] = self._load(SOUND_BONUS, lambda: _synth_tone(660, 0.25, slide=600))
            except pygame.error as e:
                logger.warning("Audio disabled: %s", e)
                self.enabled = False

    def _init_mixer(self):
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init(SAMPLE_RATE, -16, 2, 512)
        except pygame.error as e:
            logger.warning("Audio disabled: %s", e)
            return False
        return True

    def _load(self, name, fallback):
        """Load <sound_dir>/<name>.wav, or build the fallback sound"""
        path = os.path.join(self.sound_dir, f"{name}.wav")
        if os.path.exists(path):
            return pygame.mixer.Sound(path)
        return fallback()

    def play(self, name):
        """Play a sound by name"""
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()
