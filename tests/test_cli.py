import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

from cathedral_core.cli import main


def _run(argv):
    buf = io.StringIO()
    with redirect_stdout(buf):
        code = main(argv)
    return code, buf.getvalue()


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write_board(self, text):
        path = os.path.join(self.tmpdir.name, 'board.txt')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def test_given_board_file_when_running_then_resolved_board_and_counts_printed(self):
        path = self._write_board("AAA\nA.A\nAAA\n")
        code, out = _run(['--file', path])
        self.assertEqual(code, 0)
        self.assertIn('A A A\nA a A\nA A A', out)
        self.assertIn('Player A: 8 pieces, 1 enclosed cells', out)
        self.assertIn('Unowned empty cells: 0', out)

    def test_given_reach_flag_when_running_then_reachability_maps_printed(self):
        path = self._write_board("AAA\nA.A\nAAA\n")
        code, out = _run(['--file', path, '--reach'])
        self.assertEqual(code, 0)
        self.assertIn("Reachable by A", out)
        self.assertIn("+ + +\n+ + +\n+ + +", out)
        self.assertIn("# # #\n# # #\n# # #", out)

    def test_given_non_square_file_when_running_then_error_and_exit_code(self):
        path = self._write_board("A..\n...\n")
        code, out = _run(['--file', path])
        self.assertEqual(code, 2)
        self.assertIn('error:', out)

    def test_given_random_flag_when_running_twice_with_seed_then_same_output(self):
        code1, out1 = _run(['--random', '--size', '6', '--seed', '3'])
        code2, out2 = _run(['--random', '--size', '6', '--seed', '3'])
        self.assertEqual(code1, 0)
        self.assertEqual(out1, out2)

    def test_given_size_env_when_running_without_file_then_empty_board_of_that_size(self):
        with mock.patch.dict(os.environ, {'CATHEDRAL_BOARD_SIZE': '4'}):
            code, out = _run([])
        self.assertEqual(code, 0)
        self.assertIn('. . . .\n. . . .\n. . . .\n. . . .', out)
        self.assertIn('Unowned empty cells: 16', out)


if __name__ == '__main__':
    unittest.main(verbosity=2)
