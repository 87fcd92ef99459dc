from contextlib import contextmanager
from collections import namedtuple


Error = namedtuple('Error', ['path', 'message', 'severity'])

WARNING = 1
ERROR = 2


class MarkupError(Exception):
    pass


class DescriptionCycleError(MarkupError):
    pass


class DescriptionDepthError(MarkupError):
    pass


class StrictModeError(MarkupError):

    def __init__(self, errors):
        self.errors = list(errors)
        super(StrictModeError, self).__init__(
            '\n'.join(format_error(e) for e in self.errors)
        )


def format_error(error):
    return '{}: {}'.format('/'.join(error.path) or '<root>', error.message)


class Errors(object):
    """Collects malformed-shape reports while markup is being built.

    Reports are attached to the path of tag tokens that was being built when
    the problem was noticed, so that nested descriptions can be traced back.
    """

    def __init__(self):
        self.list = []
        self._stack = []

    @property
    def path(self):
        return tuple(self._stack)

    @contextmanager
    def element_ctx(self, token):
        self._stack.append(token)
        try:
            yield
        finally:
            self._stack.pop()

    def warn(self, message):
        self.list.append(Error(self.path, message, WARNING))

    def error(self, message):
        self.list.append(Error(self.path, message, ERROR))
