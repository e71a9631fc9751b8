import contextlib
import io
import math
import os
import tempfile
import unittest

from vector2 import Vector2d, Vector2i
from vector2.cli import OPERATIONS, evaluate, main


class TestEvaluate(unittest.TestCase):
    def test_unary(self):
        self.assertEqual(5, evaluate("length", Vector2i, 3, 4))
        self.assertEqual(Vector2d(0.6, 0.8), evaluate("normalized", Vector2d, 3, 4))
        self.assertEqual(math.pi / 2, evaluate("direction", Vector2i, 0, 1))
        self.assertEqual(Vector2i(-3, -4), evaluate("negate", Vector2i, 3, 4))
        self.assertEqual(Vector2i(4, 3), evaluate("flip", Vector2i, 3, 4))

    def test_with_arguments(self):
        self.assertEqual(Vector2i(-3, 10), evaluate("rotated", Vector2i, 10, 3, [str(math.pi / 2)]))
        self.assertEqual(Vector2i(4, 8), evaluate("scale", Vector2i, 1, 2, ["4"]))
        self.assertEqual(Vector2i(2, 3), evaluate("divide", Vector2i, 6, 9, ["3"]))
        self.assertEqual(Vector2i(4, 6), evaluate("add", Vector2i, 1, 2, ["3", "4"]))
        self.assertEqual(Vector2i(-2, -3), evaluate("subtract", Vector2i, 1, 2, ["3", "5"]))
        self.assertEqual(33, evaluate("dot", Vector2i, 7, 2, ["3", "6"]))
        self.assertEqual(Vector2i(4, 5), evaluate("convert", Vector2d, 4.4, 4.6, ["int"]))

    def test_from_dir_len_keeps_angle(self):
        self.assertEqual(Vector2i(3, 4), evaluate("from-dir-len", Vector2i, 1, 5))
        self.assertEqual(Vector2i(0, 5), evaluate("from-dir-len", Vector2i, math.pi / 2, 5))

    def test_errors(self):
        with self.assertRaises(ValueError):
            evaluate("cross", Vector2i, 1, 2)
        with self.assertRaises(ValueError):
            evaluate("add", Vector2i, 1, 2, ["3"])
        with self.assertRaises(ValueError):
            evaluate("scale", Vector2i, 1, 2, ["x"])
        with self.assertRaises(ZeroDivisionError):
            evaluate("divide", Vector2i, 1, 2, ["0"])
        with self.assertRaises(KeyError):
            evaluate("convert", Vector2i, 1, 2, ["complex"])

    def test_every_operation_is_documented(self):
        for name, op in OPERATIONS.items():
            with self.subTest(operation=name):
                self.assertTrue(op.help)


class TestMain(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.tmp = tmp.name
        self.missing_config = os.path.join(self.tmp, "missing.ini")

    def run_main(self, *argv: str) -> tuple[int, str]:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(["--config", self.missing_config, *argv])
        return code, out.getvalue().strip()

    def test_defaults(self):
        self.assertEqual((0, "5.000000"), self.run_main("length", "3", "4"))

    def test_int_type(self):
        self.assertEqual((0, "5"), self.run_main("--type", "int", "length", "3", "4"))
        self.assertEqual((0, "(-3, 10)"), self.run_main("-t", "int", "rotated", "10", "3", str(math.pi / 2)))
        self.assertEqual((0, "(3, 4)"), self.run_main("-t", "int", "from-dir-len", "1", "5"))

    def test_override_precision(self):
        self.assertEqual((0, "(0.60, 0.80)"), self.run_main("-o", "format.precision=2", "normalized", "3", "4"))
        self.assertEqual((0, "1.5708"), self.run_main("-o", "format.precision=4", "direction", "0", "1"))

    def test_config_file(self):
        config = os.path.join(self.tmp, "config.ini")
        with open(config, "w") as f:
            f.write("[vector]\nelement-type = int\n")

        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(["--config", config, "dot", "7", "2", "3", "6"])

        self.assertEqual(0, code)
        self.assertEqual("33", out.getvalue().strip())

    def test_evaluation_error(self):
        with self.assertLogs("vector2", "ERROR"):
            self.assertEqual(1, self.run_main("-t", "int", "divide", "6", "9", "0")[0])
        with self.assertLogs("vector2", "ERROR"):
            self.assertEqual(1, self.run_main("add", "1", "2", "3")[0])

    def test_config_error(self):
        with self.assertLogs("vector2", "ERROR"):
            self.assertEqual(1, self.run_main("-o", "format.width=3", "length", "3", "4")[0])
        with self.assertLogs("vector2", "ERROR"):
            self.assertEqual(1, self.run_main("-o", "format.precision", "length", "3", "4")[0])

    def test_non_finite_result_warns(self):
        with self.assertLogs("vector2", "WARNING"):
            code, output = self.run_main("divide", "1", "2", "0")

        self.assertEqual(0, code)
        self.assertEqual("(inf, inf)", output)

    def test_infinite_input_for_integers(self):
        with self.assertLogs("vector2", "ERROR"):
            self.assertEqual(1, self.run_main("-t", "int", "length", "inf", "0")[0])
        with self.assertLogs("vector2", "ERROR"):
            self.assertEqual(1, self.run_main("-t", "int", "scale", "1", "2", "inf")[0])

    def test_large_integer_result(self):
        code, output = self.run_main("-t", "int", "scale", "1e300", "0", "1")

        self.assertEqual(0, code)
        self.assertTrue(output.startswith("(10000000000000000"))
        self.assertTrue(output.endswith(", 0)"))

    def test_invalid_arguments(self):
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as cm:
            main(["cross", "1", "2"])

        self.assertEqual(2, cm.exception.code)


if __name__ == "__main__":
    unittest.main()
