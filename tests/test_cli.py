import json

from click.testing import CliRunner

from taglet.__main__ import cli

from .base import TestCase


TREE = """\
{
  "h1": {"%content%": "Title"},
  "ul": {
    "class": "menu",
    "%content%": {
      "li_1": {"%content%": "one"},
      "li_2": {"%content%": "0"},
      "li_3": {}
    }
  },
  "br": {}
}
"""


class TestCli(TestCase):

    def setUp(self):
        self.runner = CliRunner()

    def render(self, source, *args):
        with self.runner.isolated_filesystem():
            with open('tree.json', 'w') as f:
                f.write(source)
            return self.runner.invoke(cli, ['render', 'tree.json'] +
                                      list(args))

    def testRender(self):
        result = self.render(TREE)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            result.output,
            '<h1>Title</h1><ul class="menu"><li>one</li><li>0</li></ul>'
            '<br />',
        )

    def testRenderInvalidJson(self):
        result = self.render('{"div": ')
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn('Failed to parse source file', result.output)

    def testRenderNotAnObject(self):
        result = self.render(json.dumps(['div']))
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn('should be a JSON object', result.output)

    def testRenderStrict(self):
        source = json.dumps({'br': {'%content%': 'text'}})
        self.assertEqual(self.render(source).output, '<br />')
        result = self.render(source, '--strict')
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn('Content is not expected', result.output)

    def testRenderMaxDepth(self):
        source = json.dumps({'div': {'%content%': {'p': 'x'}}})
        result = self.render(source, '--max-depth', '1')
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn('nested deeper than 1 levels', result.output)

    def testElement(self):
        result = self.runner.invoke(cli, ['element', 'a', 'href', '/x',
                                          'Click'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output, '<a href="/x">Click</a>\n')

    def testDirectives(self):
        result = self.runner.invoke(cli, ['directives',
                                          'input_2_single_quote'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.splitlines(), [
            'name: input',
            'build_empty: False',
            'single_quote: True',
            'self_closing: True',
        ])
