from bracesets.logging import SetsLogger, _JSONFormatter
import io
import json
import logging
import unittest


class _FailingStr:
    def __str__(self) -> str:
        raise AssertionError('formatted a message that was never emitted')


class TestSetsLogger(unittest.TestCase):
    def setUp(self) -> None:
        self.stream = io.StringIO()
        self.python_logger = logging.getLogger(f'{__name__}.{self.id()}')
        self.python_logger.propagate = False
        handler = logging.StreamHandler(self.stream)
        handler.setFormatter(_JSONFormatter())
        self.python_logger.addHandler(handler)
        self.python_logger.setLevel(logging.INFO)
        self.addCleanup(self.python_logger.removeHandler, handler)
        self.logger = SetsLogger(self.python_logger)

    def test_str_format_arguments(self) -> None:
        self.logger.info('{} of {count}', 3, count=4)
        record = json.loads(self.stream.getvalue())
        self.assertEqual('3 of 4', record['message'])
        self.assertEqual('INFO', record['level_name'])

    def test_caller_is_recorded(self) -> None:
        self.logger.warning('look here')
        record = json.loads(self.stream.getvalue())
        self.assertEqual('test_caller_is_recorded', record['function_name'])
        self.assertEqual(__name__, record['module'])
        self.assertEqual('test_logging.py', record['file_name'])

    def test_disabled_levels_are_not_formatted(self) -> None:
        self.logger.debug('{}', _FailingStr())
        self.assertEqual('', self.stream.getvalue())

    def test_exceptions(self) -> None:
        try:
            raise KeyError('k')
        except KeyError:
            self.logger.error('failed', exc_info=True)
        record = json.loads(self.stream.getvalue())
        self.assertIn('KeyError', ''.join(record['exception']))
