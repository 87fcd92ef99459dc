import difflib
import unittest
from contextlib import contextmanager, ExitStack
from unittest.mock import patch, Mock as _Mock

Mock = _Mock


@contextmanager
def _nested(*managers):
    with ExitStack() as stack:
        for manager in managers:
            stack.enter_context(manager)
        yield


def html_diff(first, second):
    return '\n'.join(difflib.ndiff(first.replace('><', '>\n<').splitlines(),
                                   second.replace('><', '>\n<').splitlines()))


class HTMLMixin(object):

    def assertHTML(self, html, expected):
        if str(html) != expected:
            msg = ('Generated markup is not equal:\n\n{}'
                   .format(html_diff(str(html), expected)))
            raise self.failureException(msg)


class TestCase(unittest.TestCase):
    ctx = tuple()

    def run(self, result=None):
        with _nested(*self.ctx):
            return super(TestCase, self).run(result)


__all__ = ['Mock', 'patch', 'HTMLMixin', 'TestCase']
