import random


class RandomSource:
    """
    Source of randomness for the value generator.
    Wraps a private random.Random so that tests can swap in a scripted
    source and independent generation passes never share state.
    """

    def __init__(self, rng=None):
        self._rng = rng or random.Random()

    def randint(self, low, high):
        """Uniform integer in [low, high], both inclusive."""
        return self._rng.randint(low, high)

    def uniform(self, low, high):
        return self._rng.uniform(low, high)

    def choice(self, values):
        return self._rng.choice(values)

    def boolean(self):
        return self._rng.random() < 0.5

    def int64(self):
        """Uniform signed 64-bit integer."""
        return self._rng.getrandbits(64) - 2 ** 63
