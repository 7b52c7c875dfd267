# timing context manager, based on
# https://stackoverflow.com/questions/7370801/measure-time-elapsed-in-python
from timeit import default_timer as timer


class Timer:
    def __init__(self, msg, fmt="%0.3g"):
        """
        Measure the wall time of a block and print it on exit.
        Set Timer.items inside the block to also report the average time per item.
        :param msg: the label printed in front of the timing
        :param fmt: printf-style format of the elapsed seconds
        """
        self.msg = msg
        self.fmt = fmt
        self.items = 0
        self.time = None

    def __enter__(self):
        self.start = timer()
        return self

    def __exit__(self, *args):
        self.time = timer() - self.start
        print(self.report())

    def report(self):
        out = ("%s : " + self.fmt + " seconds") % (self.msg, self.time)
        if self.items:
            out += f" ({self.items} items, {1.0e6 * self.time / self.items:.3f} us/item)"
        return out
