import io
import unittest
from contextlib import redirect_stdout

from config.config import validate_config
from main import main
from utils.text import join_arguments, remove_whitespace


class TestTextHelpers(unittest.TestCase):
    def test_join_then_strip(self):
        self.assertEqual(join_arguments(["2", "+", "3"]), "2 + 3")
        self.assertEqual(remove_whitespace(" 2 +\t3\n"), "2+3")
        self.assertEqual(remove_whitespace(join_arguments(["2", "3+4"])), "23+4")


class TestMain(unittest.TestCase):
    def test_config_is_valid(self):
        validate_config()

    def run_main(self, argv):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main(argv)
        return code, buffer.getvalue()

    def test_prints_result(self):
        self.assertEqual(self.run_main(["2", "+", "3*4"]), (0, "14.0\n"))

    def test_leading_minus_is_expression(self):
        self.assertEqual(self.run_main(["-5+3"]), (0, "-2.0\n"))

    def test_infinity(self):
        self.assertEqual(self.run_main(["5/0"]), (0, "inf\n"))

    def test_failure_prints_nothing(self):
        with self.assertLogs("main", level="ERROR"):
            code, output = self.run_main(["2", "+"])
        self.assertEqual(code, 1)
        self.assertEqual(output, "")

    def test_no_arguments(self):
        with self.assertLogs("main", level="ERROR"):
            code, output = self.run_main([])
        self.assertEqual(code, 1)
        self.assertEqual(output, "")


if __name__ == "__main__":
    unittest.main()
