import io
import os
import subprocess
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from ppm_gradient.__main__ import main
from ppm_gradient.image import write_ppm

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(argv)
        return status, out.getvalue(), err.getvalue()

    def test_stdout_default_dimensions(self):
        status, out, err = self._run([])
        self.assertEqual(status, 0)
        self.assertTrue(out.startswith("P3\n1280 720\n255\n0 255 63\n"))
        self.assertTrue(out.endswith("255 0 63\n"))
        self.assertEqual(err, "")

    def test_output_file_matches_stdout(self):
        path = os.path.join(self.tmp.name, "gradient.ppm")
        status, out, _ = self._run(["--width", "16", "--height", "9", "--output", path])
        self.assertEqual(status, 0)
        self.assertEqual(out, "")

        expected = io.StringIO()
        write_ppm(expected, 16, 9)
        with open(path, "r", encoding="ascii") as f:
            self.assertEqual(f.read(), expected.getvalue())

    def test_workers_verbose(self):
        status, out, err = self._run(["--width", "8", "--height", "6", "--workers", "3", "--verbose"])
        self.assertEqual(status, 0)
        self.assertIn("Band 0 completed", err)
        self.assertTrue(err.endswith("Done.\n"))

        expected = io.StringIO()
        write_ppm(expected, 8, 6)
        self.assertEqual(out, expected.getvalue())

    def test_write_failure_exits_nonzero(self):
        # A directory cannot be opened for writing
        status, _, err = self._run(["--width", "4", "--height", "4", "--output", self.tmp.name])
        self.assertEqual(status, 1)
        self.assertTrue(err.startswith("error:"))

    def test_closed_pipe_exits_nonzero(self):
        # Reader takes a few bytes and hangs up, like `| head -c 10`
        proc = subprocess.Popen(
            [sys.executable, "-m", "ppm_gradient"],
            cwd=REPO_ROOT,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        self.assertEqual(proc.stdout.read(10), b"P3\n1280 72")
        proc.stdout.close()
        err = proc.stderr.read().decode()
        proc.stderr.close()
        self.assertEqual(proc.wait(timeout=60), 1)
        self.assertIn("error: output pipe closed", err)
        self.assertNotIn("Traceback", err)

    def test_rejects_small_dimensions(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                main(["--width", "1"])
        self.assertEqual(cm.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
