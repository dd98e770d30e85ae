import io
import json
import logging
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from crossword_helper import cli
from crossword_helper.utils.logger import configure_logging


def _run(argv) -> str:
    stdout = io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(io.StringIO()):
        cli.main(argv)
    return stdout.getvalue()


class GenerateCommandTests(unittest.TestCase):
    def test_prints_grid_and_entries(self) -> None:
        output = _run(["--words", "cat", "car", "--width", "10", "--height", "10"])
        self.assertIn("Across", output)
        self.assertIn("CAT (5,3)", output)
        self.assertIn("CAR (4,4)", output)
        self.assertNotIn("could not be placed", output)

    def test_reports_unplaced_words(self) -> None:
        output = _run(["--words", "cat", "dog", "--width", "10", "--height", "10"])
        self.assertIn("Warning: the following words could not be placed: DOG", output)

    def test_words_file_and_display_names(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            words_file = Path(tmp) / "words.txt"
            words_file.write_text("# dessert\nice cream\ncake\n", encoding="utf-8")
            output = _run(["--words-file", str(words_file), "--seed", "1"])
        self.assertIn("ICE CREAM", output)

    def test_output_then_load(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "layout.json"
            _run(["--words", "cat", "car", "--width", "10", "--height", "10", "--output", str(target)])
            data = json.loads(target.read_text(encoding="utf-8"))
            self.assertEqual(data["gridWidth"], 10)
            self.assertEqual(len(data["placements"]), 2)
            output = _run(["--load", str(target)])
        self.assertIn("CAR (4,4)", output)

    def test_rejects_bad_input(self) -> None:
        for argv in (
            ["--words", "cat", "r2d2"],
            ["--words", "solo"],
            ["--words", "cat", "car", "--width", "4"],
            ["--words", "cat", "car", "--height", "51"],
            ["--words", "cat", "car", "--log-level", "loud"],
            [],
        ):
            with self.subTest(argv=argv):
                with self.assertRaises(SystemExit) as ctx:
                    _run(argv)
                self.assertEqual(ctx.exception.code, 2)

    def test_broken_layout_exits_with_error(self) -> None:
        stderr = io.StringIO()
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "broken.json"
            target.write_text("[]", encoding="utf-8")
            with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main(["--load", str(target)])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Error:", stderr.getvalue())


class LoggingSetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(logging.WARNING)

    def test_level_names_are_accepted(self) -> None:
        stream = io.StringIO()
        configure_logging("debug", stream=stream)
        logging.getLogger("crossword_helper.test").debug("hello grid")
        self.assertIn("DEBUG   | crossword_helper.test | hello grid", stream.getvalue())
        self.assertEqual(logging.getLogger("urllib3").level, logging.WARNING)

    def test_unknown_level_name(self) -> None:
        with self.assertRaises(ValueError):
            configure_logging("loud")


class SuggestCommandTests(unittest.TestCase):
    def test_prints_suggestions_as_json(self) -> None:
        with mock.patch.object(cli, "DatamuseClient") as client_cls:
            client_cls.return_value.lookup.return_value = ["CAT", "COT"]
            output = _run(["--suggest", "c?t"])
        client_cls.return_value.lookup.assert_called_once_with("C?T")
        self.assertEqual(json.loads(output), ["CAT", "COT"])

    def test_rejects_pattern_without_wildcard(self) -> None:
        with self.assertRaises(SystemExit):
            _run(["--suggest", "cat"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
