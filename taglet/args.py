from collections.abc import Mapping

from .constant import CONTENT


class Arguments(object):

    def normalize(self, errors=None):
        raise NotImplementedError


class Positional(Arguments):
    """Alternating attribute names and values, optionally followed by
    a content value: ``Positional(['href', '/x', 'Click'])``
    """

    def __init__(self, values):
        self.values = list(values)

    def __repr__(self):
        return 'Positional({!r})'.format(self.values)

    def __eq__(self, other):
        return type(self) is type(other) and self.values == other.values

    def __ne__(self, other):
        return not self.__eq__(other)

    def normalize(self, errors=None):
        description = {}
        i = iter(self.values)
        try:
            while True:
                name = next(i)
                try:
                    value = next(i)
                except StopIteration:
                    description[CONTENT] = name
                    break
                else:
                    if not isinstance(name, str):
                        _report(errors, 'Attribute name {!r} is not a string'
                                .format(name))
                        name = str(name)
                    description[name] = value
        except StopIteration:
            pass
        return description


class Keyed(Arguments):
    """Ready attribute record, content is stored under ``%content%`` key."""

    def __init__(self, record):
        self.record = record

    def __repr__(self):
        return 'Keyed({!r})'.format(self.record)

    def __eq__(self, other):
        return type(self) is type(other) and self.record == other.record

    def __ne__(self, other):
        return not self.__eq__(other)

    def normalize(self, errors=None):
        return dict(self.record)


def _report(errors, message):
    if errors is not None:
        errors.error(message)


def _is_container(value):
    return isinstance(value, (Mapping, list, tuple, Arguments))


def coerce(value, errors=None):
    if value is None:
        return Positional(())
    elif isinstance(value, Arguments):
        return value
    elif isinstance(value, Mapping):
        return Keyed(value)
    elif isinstance(value, (list, tuple)):
        return Positional(value)
    else:
        return Positional((value,))


def classify(args, errors=None):
    """Detects shape of the raw call arguments.

    Flat arguments are positional. As soon as any of them is a container,
    only the first argument is taken into account, as the whole argument
    list.
    """
    args = tuple(args)
    if not any(_is_container(arg) for arg in args):
        return Positional(args)
    first, rest = args[0], args[1:]
    if not _is_container(first):
        _report(errors, 'Expected mapping or sequence as the first argument, '
                        'got {!r}'.format(first))
    if rest:
        _report(errors, 'Extra arguments are ignored: {!r}'.format(rest))
    return coerce(first, errors)


def unwrap(value):
    """Returns underlying container of the :class:`Arguments` used as
    a content value, other values are returned as is.
    """
    if isinstance(value, Positional):
        return value.values
    elif isinstance(value, Keyed):
        return value.record
    return value
