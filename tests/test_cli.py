import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import ujson

from fdclosure.cli import main
from fdclosure.errors import FDFormatError
from fdclosure.schema.fd import FDSet, fd
from fdclosure.schema.fd_json import fdset_from_json, fdset_to_json

CHAIN = [{"lhs": ["A"], "rhs": ["B"]}, {"lhs": ["B"], "rhs": ["C"]}]


class FDJsonTests(unittest.TestCase):
    def test_reads_list_and_object(self) -> None:
        expected = FDSet([fd(["A"], ["B"]), fd(["B"], ["C"])])
        self.assertEqual(fdset_from_json(CHAIN), expected)
        self.assertEqual(fdset_from_json({"fds": CHAIN}), expected)

    def test_rejects_malformed_input(self) -> None:
        for bad in [
            {"rules": CHAIN},
            "A -> B",
            [["A"], ["B"]],
            [{"lhs": ["A"]}],
            [{"lhs": "A", "rhs": ["B"]}],
            [{"lhs": ["A"], "rhs": [1]}],
        ]:
            with self.assertRaises(FDFormatError):
                fdset_from_json(bad)

    def test_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            fdset_from_json({})

    def test_writes_deterministic_order(self) -> None:
        fdset = FDSet([fd(["B", "A"], ["C"]), fd(["B"], ["C"]), fd(["A"], ["C", "B"])])
        self.assertEqual(
            fdset_to_json(fdset),
            [
                {"lhs": ["A"], "rhs": ["B", "C"]},
                {"lhs": ["B"], "rhs": ["C"]},
                {"lhs": ["A", "B"], "rhs": ["C"]},
            ],
        )


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.fds_path = self.tmp / "fds.json"
        self.fds_path.write_text(ujson.dumps(CHAIN), encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run_to_file(self, *extra: str):
        out_path = self.tmp / "out.json"
        with patch("sys.stdout", new_callable=io.StringIO):
            code = main(["--fds", str(self.fds_path), "--out", str(out_path), *extra])
        self.assertEqual(code, 0)
        return ujson.loads(out_path.read_text(encoding="utf-8"))

    def test_closure(self) -> None:
        result = self._run_to_file()
        self.assertEqual(len(result), 34)
        self.assertIn({"lhs": ["A"], "rhs": ["C"]}, result)

    def test_transitive(self) -> None:
        self.assertEqual(self._run_to_file("--op", "transitive"), [{"lhs": ["A"], "rhs": ["C"]}])

    def test_augment(self) -> None:
        result = self._run_to_file("--op", "augment", "--attrs", "D")
        self.assertEqual(
            result,
            [{"lhs": ["A", "D"], "rhs": ["B", "D"]}, {"lhs": ["B", "D"], "rhs": ["C", "D"]}],
        )

    def test_keys(self) -> None:
        self.assertEqual(self._run_to_file("--op", "keys", "--schema", "A,B,C,D"), [["A", "D"]])

    def test_prints_to_stdout(self) -> None:
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            code = main(["--fds", str(self.fds_path), "--op", "trivial"])
        self.assertEqual(code, 0)
        self.assertIn("--- Kết quả (trivial) ---", stdout.getvalue())
        self.assertIn('"lhs"', stdout.getvalue())

    def test_attribute_limit_exit_code(self) -> None:
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            code = main(["--fds", str(self.fds_path), "--max-attributes", "2"])
        self.assertEqual(code, 1)
        self.assertIn("Lỗi", stderr.getvalue())

    def test_invalid_json_exit_code(self) -> None:
        self.fds_path.write_text("{not json", encoding="utf-8")
        with patch("sys.stderr", new_callable=io.StringIO):
            code = main(["--fds", str(self.fds_path)])
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
