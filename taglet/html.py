import logging

from markupsafe import Markup

from .args import classify
from .group import GroupResolver, MAX_DEPTH
from .errors import Errors, StrictModeError, WARNING, ERROR, format_error
from .builder import build_element as _build_element
from .directives import parse_tag


log = logging.getLogger(__name__)


class Element(object):

    def __init__(self, synthesizer, token):
        self._synthesizer = synthesizer
        self.token = token

    def __repr__(self):
        return '<Element {}>'.format(self.token)

    @property
    def directives(self):
        return parse_tag(self.token)

    def __call__(self, *args):
        return self._synthesizer.element(self.token, *args)


class Synthesizer(object):
    """Builds HTML markup from tag-directive tokens and descriptions.

    Any public attribute, which is not defined here, is treated as a tag
    directive token::

        html = Synthesizer()
        html.a('href', '/x', 'Click')  # <a href="/x">Click</a>
        html.div_build_empty()  # <div></div>

    In lenient mode (default) malformed input never raises, reports are only
    logged with ``DEBUG`` level. In strict mode warnings are logged and errors
    raise :class:`taglet.errors.StrictModeError`. Cyclic and too deeply nested
    descriptions raise errors in both modes.

    Results are plain strings, nothing is escaped. With ``markup=True`` they
    are wrapped into :class:`markupsafe.Markup`, to be embedded into
    autoescaping templates as trusted markup. Keep in mind that
    :class:`markupsafe.Markup` escapes plain strings added to it.
    """

    def __init__(self, strict=False, max_depth=MAX_DEPTH, markup=False):
        self.strict = strict
        self.max_depth = max_depth
        self.markup = markup

    def __repr__(self):
        return ('<Synthesizer strict={!r} max_depth={!r} markup={!r}>'
                .format(self.strict, self.max_depth, self.markup))

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return Element(self, name)

    def _raise_on_errors(self, errors):
        errors_list = []
        for e in errors.list:
            if not self.strict:
                log.debug(format_error(e))
            elif e.severity == WARNING:
                log.warning(format_error(e))
            elif e.severity == ERROR:
                errors_list.append(e)
            else:
                raise ValueError(repr(e.severity))
        if errors_list:
            raise StrictModeError(errors_list)

    def _result(self, html):
        return Markup(html) if self.markup else str(html)

    def group(self, tree):
        errors = Errors()
        html = GroupResolver(errors, self.max_depth).resolve(tree)
        self._raise_on_errors(errors)
        return self._result(html)

    def element(self, token, *args):
        errors = Errors()
        html = _build_element(token, classify(args, errors), errors)
        self._raise_on_errors(errors)
        return self._result(html)

    def build_element(self, token, args=None):
        errors = Errors()
        html = _build_element(token, args, errors)
        self._raise_on_errors(errors)
        return self._result(html)

    def parse_tag(self, token):
        return parse_tag(token)


HTML = Synthesizer()

group = HTML.group
element = HTML.element
build_element = HTML.build_element
