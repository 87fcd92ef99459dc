import io


class Buffer(object):

    def __init__(self):
        self.stack = []

    def write(self, s):
        self.stack[-1].write(s)

    def push(self):
        self.stack.append(io.StringIO())

    def pop(self):
        return self.stack.pop().getvalue()


def is_present(value):
    """Tells whether value should be rendered.

    Empty and false values are not rendered, except for the ``"0"`` string,
    which is a meaningful value. Zero numbers are not rendered.
    """
    if isinstance(value, str) and value == '0':
        return True
    return bool(value)


def to_text(value):
    if value is None or value is False:
        return ''
    elif value is True:
        return '1'
    elif hasattr(value, '__html__'):
        return str(value.__html__())
    elif isinstance(value, bytes):
        return value.decode('utf-8')
    else:
        return str(value)
