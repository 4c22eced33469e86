import logging

import numpy as np

import numtensor.param as param

logger = logging.getLogger(__name__)

DEFAULT_STREAM: str = 'default'


class PRG:
    """
    Named numpy Generator streams. The current stream serves every draw
    until another one is switched in.
    """

    def __init__(self: 'PRG', seed: int = None):
        self.prg_states: dict = dict()
        self.current: str = DEFAULT_STREAM

        self.import_seed(DEFAULT_STREAM, seed)

    @property
    def generator(self: 'PRG') -> np.random.Generator:
        return self.prg_states[self.current]

    def import_seed(self: 'PRG', name: str, seed: int = None):
        logger.debug('Seeding stream %r with %s', name, 'OS entropy' if seed is None else seed)
        self.prg_states[name] = np.random.default_rng(seed)

    def switch_seed(self: 'PRG', name: str):
        if name not in self.prg_states:
            raise KeyError(f'Unknown random stream: {name}')

        self.current = name

    def restore_seed(self: 'PRG'):
        self.current = DEFAULT_STREAM

    def random(self: 'PRG', n: int) -> np.ndarray:
        return self.generator.random(n)

    def positive_random(self: 'PRG', n: int) -> np.ndarray:
        # Generator.random draws from [0, 1), flip it to (0, 1]
        return 1. - self.generator.random(n)

    def uniform(self: 'PRG', low: float, high: float, n: int) -> np.ndarray:
        return self.generator.uniform(low, high, n)


_global_prg: PRG = None


def get_prg() -> PRG:
    global _global_prg

    if _global_prg is None:
        _global_prg = PRG(param.SEED)

    return _global_prg


def seed(value: int = None) -> PRG:
    global _global_prg

    _global_prg = PRG(value)
    return _global_prg
