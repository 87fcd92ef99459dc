from contextlib import contextmanager
from collections.abc import Mapping

from .args import Keyed, coerce, unwrap
from .utils import Buffer, to_text
from .errors import Errors, DescriptionCycleError, DescriptionDepthError
from .builder import build_element
from .constant import CONTENT


MAX_DEPTH = 100


class GroupResolver(object):
    """Resolves nested description tree into markup.

    Nested trees are resolved before their parent element is built, siblings
    are concatenated in insertion order. Input mappings are never modified.
    Trees which exhaust the interpreter stack before reaching ``max_depth``
    are reported with :class:`taglet.errors.DescriptionDepthError` as well.
    """

    def __init__(self, errors=None, max_depth=MAX_DEPTH):
        self.errors = Errors() if errors is None else errors
        self.max_depth = max_depth
        self._path = []

    @contextmanager
    def _enter(self, node):
        if any(node is parent for parent in self._path):
            raise DescriptionCycleError(
                'Description refers to itself: {}'
                .format('/'.join(self.errors.path) or '<root>'))
        if len(self._path) >= self.max_depth:
            raise DescriptionDepthError(
                'Description is nested deeper than {} levels'
                .format(self.max_depth))
        self._path.append(node)
        try:
            yield
        finally:
            self._path.pop()

    def resolve(self, tree):
        try:
            return self._resolve(tree)
        except RecursionError:
            del self._path[:]
            raise DescriptionDepthError(
                'Description is nested too deep for the interpreter stack, '
                'max_depth is {}'.format(self.max_depth))

    def _resolve(self, tree):
        tree = unwrap(tree)
        if not isinstance(tree, Mapping):
            return self._resolve_content(tree)
        with self._enter(tree):
            buf = Buffer()
            buf.push()
            for token, description in tree.items():
                with self.errors.element_ctx(token):
                    description = self._resolve_description(description)
                buf.write(build_element(token, Keyed(description),
                                        self.errors))
            return buf.pop()

    def _resolve_description(self, description):
        description = coerce(description).normalize(self.errors)
        content = unwrap(description.get(CONTENT))
        if isinstance(content, (Mapping, list, tuple)):
            description[CONTENT] = self._resolve_content(content)
        return description

    def _resolve_content(self, content):
        content = unwrap(content)
        if isinstance(content, Mapping):
            return self._resolve(content)
        elif isinstance(content, (list, tuple)):
            with self._enter(content):
                return ''.join(self._resolve_content(item)
                               for item in content)
        else:
            return to_text(content)


def group(tree, errors=None, max_depth=MAX_DEPTH):
    return GroupResolver(errors, max_depth).resolve(tree)
