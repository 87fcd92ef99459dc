import logging
from collections.abc import Mapping

from .args import coerce, unwrap
from .utils import Buffer, is_present, to_text
from .errors import Errors
from .constant import CONTENT, HTML_ELEMENTS
from .directives import parse_tag


log = logging.getLogger(__name__)


def render_content(value):
    value = unwrap(value)
    if isinstance(value, Mapping):
        return ''.join(to_text(item) for item in value.values())
    elif isinstance(value, (list, tuple)):
        return ''.join(to_text(item) for item in value)
    else:
        return to_text(value)


def _write_attrs(buf, description, quote):
    for name, value in description.items():
        if name == CONTENT:
            continue
        buf.write(' ')
        buf.write(to_text(name))
        if is_present(value):
            buf.write('=')
            buf.write(quote)
            buf.write(to_text(value))
            buf.write(quote)


def build_element(token, args=None, errors=None):
    """Builds single HTML element.

    :param token: tag-directive token, see :func:`taglet.directives.parse_tag`
    :param args: :class:`taglet.args.Arguments` instance, attribute mapping,
        positional sequence or a single content value
    :param errors: :class:`taglet.errors.Errors` to report malformed input to
    :return: markup string, empty when element is suppressed
    """
    errors = Errors() if errors is None else errors
    directives = parse_tag(token)
    with errors.element_ctx(token):
        description = coerce(args).normalize(errors)

        if directives.name not in HTML_ELEMENTS:
            errors.warn('Unknown element "{}"'.format(directives.name))

        content = unwrap(description.get(CONTENT))
        if not directives.self_closing and not directives.build_empty \
                and not is_present(content):
            log.debug('Element "%s" is suppressed: no content', token)
            return ''

        buf = Buffer()
        buf.push()
        buf.write('<')
        buf.write(directives.name)
        _write_attrs(buf, description, "'" if directives.single_quote else '"')

        if directives.self_closing:
            if is_present(content):
                errors.error('Content is not expected in the self-closing '
                             'element "{}"'.format(directives.name))
            buf.write(' />')
        else:
            buf.write('>')
            buf.write(render_content(content))
            buf.write('</')
            buf.write(directives.name)
            buf.write('>')
        return buf.pop()
