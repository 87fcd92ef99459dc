import re
from collections import namedtuple

from .constant import SELF_CLOSING_ELEMENTS


_SUFFIX_RE = re.compile(r'_+[0-9]+')

GROUP = '_group'
BUILD_EMPTY = '_build_empty'
SINGLE_QUOTE = '_single_quote'


TagDirectives = namedtuple('TagDirectives',
                           'name build_empty single_quote self_closing')


def _take(token, switch):
    if switch in token:
        return token.replace(switch, ''), True
    return token, False


def parse_tag(token):
    """Splits tag-directive token into tag name and rendering switches.

    Numeric suffixes (``p_1``, ``p_2``) and ``_group`` are dropped, so the
    same tag can be used several times as keys of one description tree.
    ``_build_empty`` renders element even without content, ``_single_quote``
    quotes attribute values with single quotes.

    Every switch is removed in one pass, in the order above. Removal may join
    leftovers into another switch, which is kept in the name then:
    ``p__group1`` becomes ``p_1`` and ``p__build_emptybuild_empty`` becomes
    ``p_build_empty`` with ``build_empty`` set.
    """
    token = _SUFFIX_RE.sub('', token)
    token = token.replace(GROUP, '')
    token, build_empty = _take(token, BUILD_EMPTY)
    token, single_quote = _take(token, SINGLE_QUOTE)
    return TagDirectives(token, build_empty, single_quote,
                         token in SELF_CLOSING_ELEMENTS)
