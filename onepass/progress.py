from tqdm import tqdm
from func_prototypes import typed
from onepass.transducer import Wrapping


class Progressing(Wrapping):
    """
    Ticks a progress bar per value. The bar opens on the first value and is
    closed on completion, or when a step raises.
    """

    def __init__(self, rf, tqdm_args):
        super().__init__(rf)
        self.tqdm_args = tqdm_args
        self.pbar = None

    def step(self, acc, input):
        if self.pbar is None:
            self.pbar = tqdm(**self.tqdm_args)
        self.pbar.update(1)
        try:
            return self.rf.step(acc, input)
        except Exception as e:
            self.pbar.close()
            raise e

    def complete(self, acc):
        if self.pbar is not None:
            self.pbar.close()
        return self.rf.complete(acc)


@typed(str, bool)
def progressing(label='', quiet=False):
    def progressed(rf):
        return Progressing(rf, dict(desc=label, disable=quiet, leave=False, delay=1))
    progressed.__name__ = "progressing"
    return progressed
