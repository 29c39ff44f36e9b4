import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock

import cli


class CliTests(unittest.TestCase):
    def _run(self, argv):
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            code = cli.main(argv)
        return code, buf.getvalue()

    def test_usage(self):
        code, out = self._run([])
        self.assertEqual(code, 1)
        self.assertIn("Usage", out)

    def test_missing_file(self):
        code, out = self._run([os.path.join(tempfile.gettempdir(), "no-such-parking-file.txt")])
        self.assertEqual(code, 1)
        self.assertTrue(out.startswith("Error opening file:"))

    def test_runs_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "cmds.txt")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("create_parking_lot 2\npark A\n\npark B\npark C\nstatus\n")
            code, out = self._run([path])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "Allocated slot number: 1",
            "Allocated slot number: 2",
            "Sorry, parking lot is full",
            "Slot No. Registration No.",
            "1 A",
            "2 B",
        ])

    def test_non_utf8_registration_is_kept_opaque(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "cmds.txt")
            with open(path, "wb") as fh:
                fh.write(b"create_parking_lot 2\npark M\xdcNCHEN-1\npark B\n"
                         b"leave M\xdcNCHEN-1 3\nstatus\n")
            code, out = self._run([path])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "Allocated slot number: 1",
            "Allocated slot number: 2",
            "Registration number M\ufffdNCHEN-1 with Slot Number 1 is free with Charge $20",
            "Slot No. Registration No.",
            "2 B",
        ])

    def test_read_error(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "cmds.txt")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("create_parking_lot 2\n")
            with mock.patch.object(cli.CommandInterpreter, "run", side_effect=OSError("disk gone")):
                code, out = self._run([path])
        self.assertEqual(code, 1)
        self.assertEqual(out, "Error reading file: disk gone\n")


if __name__ == "__main__":
    unittest.main()
