import io

from ..interpreter import Interpreter
from ..interpreter.exceptions import EvaluatorError, LexerError, StandardError
from .asynctest import AsyncTest


class TestInterpreter(AsyncTest):

    def setUp(self):
        self.output = io.StringIO()
        self.errors = []

    def make_interpreter(self, setting=None):
        return Interpreter(setting, output=self.output, report=self.errors.append)

    @AsyncTest.asynchronize
    async def test_run(self):
        path = self.write_source('hello.chai', '''
            "Hello, Chai!" print
            1 2 + 3 + print
        ''')

        ok = await self.make_interpreter().run(path)
        self.assertTrue(ok)
        self.assertEqual(self.output.getvalue(), 'Hello, Chai!\n6\n')
        self.assertEqual(self.errors, [])

    @AsyncTest.asynchronize
    async def test_empty_file(self):
        path = self.write_source('empty.chai', '  \n\n ')
        self.assertTrue(await self.make_interpreter().run(path))
        self.assertEqual(self.output.getvalue(), '')

    @AsyncTest.asynchronize
    async def test_wrong_extension(self):
        path = self.write_source('hello.txt', '1 print')
        self.assertFalse(await self.make_interpreter().run(path))
        self.assertEqual(len(self.errors), 1)
        self.assertIsInstance(self.errors[0], StandardError)
        self.assertEqual(self.output.getvalue(), '')

    @AsyncTest.asynchronize
    async def test_custom_extension(self):
        path = self.write_source('hello.tea', '1 print')
        self.assertTrue(await self.make_interpreter({'extension': '.tea'}).run(path))
        self.assertEqual(self.output.getvalue(), '1\n')

    @AsyncTest.asynchronize
    async def test_unreadable(self):
        self.assertFalse(await self.make_interpreter().run('missing/file.chai'))
        self.assertEqual(str(self.errors[0]),
                         "Error: Failed to open file 'missing/file.chai' for reading")

    @AsyncTest.asynchronize
    async def test_lexer_errors_stop_before_evaluation(self):
        path = self.write_source('bad.chai', '"ok" print @@ 5 ##')
        self.assertFalse(await self.make_interpreter().run(path))
        self.assertEqual(len(self.errors), 2)
        self.assertTrue(all(isinstance(error, LexerError) for error in self.errors))
        self.assertEqual(self.output.getvalue(), '')

    def test_runtime_error_reports_once(self):
        interpreter = self.make_interpreter()
        self.assertFalse(interpreter.execute('"a" print 5 + print', 'main.chai'))
        self.assertEqual(self.output.getvalue(), 'a\n')
        self.assertEqual(len(self.errors), 1)
        self.assertIsInstance(self.errors[0], EvaluatorError)
        self.assertEqual(str(self.errors[0]),
                         'Error: main.chai (1,13): Expected 2 or more elements on stack.')

    def test_overflow_setting(self):
        source = '18446744073709551615 1 + print'
        self.assertTrue(self.make_interpreter().execute(source, 'main.chai'))
        self.assertEqual(self.output.getvalue(), '0\n')
        self.assertFalse(self.make_interpreter({'overflow': 'fail'}).execute(source, 'main.chai'))
        self.assertIsInstance(self.errors[0], EvaluatorError)

    def test_setting_is_per_instance(self):
        interpreter = self.make_interpreter({'overflow': 'fail'})
        self.assertEqual(interpreter.setting['overflow'], 'fail')
        self.assertEqual(Interpreter.setting['overflow'], 'wrap')
