import unittest

from how_cli.ai.parser import (
    LineKind,
    ParserState,
    classify_line,
    extract_code_blocks,
    next_state,
    parse_response,
    scan_markers,
)
from how_cli.ai.types import Answer


class TestParseResponse(unittest.TestCase):
    """Tests for the full marker -> code block -> raw text chain."""

    def test_inline_markers(self):
        """Title and command on the same line as their markers."""
        answer = parse_response("TITLE: Find process\nCOMMAND: lsof -i :3000")

        self.assertEqual(answer.title, "Find process")
        self.assertEqual(answer.description, "")
        self.assertEqual(answer.commands, ["lsof -i :3000"])

    def test_values_on_following_lines(self):
        """Values placed on the line after their marker parse like the inline form."""
        inline = parse_response("TITLE: Find process\nCOMMAND: lsof -i :3000")
        split = parse_response("TITLE:\nFind process\nCOMMAND:\nlsof -i :3000")

        self.assertEqual(split.title, inline.title)
        self.assertEqual(split.commands, inline.commands)

    def test_awaited_value_skips_blank_lines(self):
        answer = parse_response("DESCRIPTION:\n\n   \nLists open files\nCOMMAND: lsof")

        self.assertEqual(answer.description, "Lists open files")
        self.assertEqual(answer.commands, ["lsof"])

    def test_description_inline(self):
        answer = parse_response(
            "TITLE: Disk usage\nDESCRIPTION: Sorted by size\nCOMMAND: du -sh * | sort -h"
        )

        self.assertEqual(answer.description, "Sorted by size")
        self.assertEqual(answer.commands, ["du -sh * | sort -h"])

    def test_script_drops_blank_lines(self):
        answer = parse_response("SCRIPT:\necho hi\n\necho bye")

        self.assertEqual(answer.commands, ["echo hi\necho bye"])

    def test_script_keeps_indentation(self):
        answer = parse_response("SCRIPT:\nfor f in *.png; do\n  optipng \"$f\"\ndone")

        self.assertEqual(answer.commands, ["for f in *.png; do\n  optipng \"$f\"\ndone"])

    def test_commands_precede_script(self):
        """Discrete commands come first even when the script appears earlier."""
        text = "SCRIPT:\nline one\nline two\nCOMMAND: single"
        answer = parse_response(text)

        self.assertEqual(answer.commands, ["single", "line one\nline two"])

    def test_script_absorbs_trailing_prose(self):
        """There is no end-of-script marker, so later prose becomes script."""
        answer = parse_response("SCRIPT:\nmake build\nThis builds the project.")

        self.assertEqual(answer.commands, ["make build\nThis builds the project."])

    def test_multiple_commands_keep_order(self):
        answer = parse_response("COMMAND: first\nCOMMAND: second\nCOMMAND:\nthird")

        self.assertEqual(answer.commands, ["first", "second", "third"])

    def test_new_marker_cancels_wait(self):
        """A marker while a title is awaited wins over the awaited title."""
        answer = parse_response("TITLE:\nCOMMAND: ls\nplain text")

        self.assertEqual(answer.title, "")
        self.assertEqual(answer.commands, ["ls"])

    def test_markers_match_after_whitespace(self):
        answer = parse_response("   TITLE:  Spaced out  \n\tCOMMAND:   pwd  ")

        self.assertEqual(answer.title, "Spaced out")
        self.assertEqual(answer.commands, ["pwd"])

    def test_markers_are_case_sensitive(self):
        text = "title: nope\ncommand: ls"
        answer = parse_response(text)

        self.assertEqual(answer.title, "")
        self.assertEqual(answer.commands, [text])

    def test_fenced_block_fallback(self):
        answer = parse_response("```\nls -la\n```")

        self.assertEqual(answer.commands, ["ls -la"])

    def test_fenced_blocks_with_prose_and_language(self):
        text = (
            "You can use:\n```bash\nfind . -name '*.log'\n```\n"
            "or:\n```sh\nls *.log\nwc -l *.log\n```\nDone."
        )
        answer = parse_response(text)

        self.assertEqual(answer.commands, ["find . -name '*.log'", "ls *.log\nwc -l *.log"])

    def test_unterminated_block_is_dropped(self):
        answer = parse_response("```\nls\n```\n```\nnever closed")

        self.assertEqual(answer.commands, ["ls"])

    def test_markers_win_over_fences(self):
        answer = parse_response("COMMAND: ls\n```\npwd\n```")

        self.assertEqual(answer.commands, ["ls"])

    def test_title_kept_when_commands_come_from_fences(self):
        answer = parse_response("TITLE: List files\n```\nls\n```")

        self.assertEqual(answer.title, "List files")
        self.assertEqual(answer.commands, ["ls"])

    def test_empty_input(self):
        answer = parse_response("")

        self.assertEqual(answer, Answer(title="", description="", commands=[], raw_text=""))

    def test_plain_prose_passthrough(self):
        text = "Just run the ls command in the directory."
        answer = parse_response(text)

        self.assertEqual(answer.commands, [text])
        self.assertEqual(answer.raw_text, text)

    def test_unterminated_only_block_falls_back_to_raw(self):
        text = "```\nls -la"
        answer = parse_response(text)

        self.assertEqual(answer.commands, [text])

    def test_raw_text_is_unmodified(self):
        text = "  TITLE: x\r\nCOMMAND: y  \n"
        answer = parse_response(text)

        self.assertEqual(answer.raw_text, text)

    def test_reparsing_raw_text_is_stable(self):
        """Parsing the raw text of a parsed answer gives the same answer."""
        samples = [
            "TITLE: Find process\nCOMMAND: lsof -i :3000",
            "TITLE: Loop\nDESCRIPTION: Counts\nSCRIPT:\nfor i in 1 2 3; do\n  echo $i\ndone",
            "```\nls\n```",
            "free prose",
            "",
        ]
        for text in samples:
            with self.subTest(text=text):
                answer = parse_response(text)
                self.assertEqual(parse_response(answer.raw_text), answer)


class TestMarkerStateMachine(unittest.TestCase):
    """Tests for the line classification and transitions of the marker scan."""

    def test_classify_line(self):
        self.assertEqual(classify_line("  TITLE: x "), (LineKind.TITLE, "x"))
        self.assertEqual(classify_line("COMMAND:"), (LineKind.COMMAND, ""))
        self.assertEqual(classify_line("SCRIPT:"), (LineKind.SCRIPT, ""))
        self.assertEqual(classify_line("   "), (LineKind.BLANK, ""))
        self.assertEqual(classify_line("  ls -la "), (LineKind.TEXT, "ls -la"))

    def test_empty_marker_awaits_value(self):
        state = next_state(ParserState.IDLE, LineKind.DESCRIPTION, "", ParserState.IDLE)
        self.assertEqual(state, ParserState.AWAITING_DESCRIPTION)

    def test_inline_marker_clears_wait(self):
        state = next_state(
            ParserState.AWAITING_TITLE, LineKind.COMMAND, "ls", ParserState.IDLE
        )
        self.assertEqual(state, ParserState.IDLE)

    def test_blank_line_keeps_waiting(self):
        state = next_state(
            ParserState.AWAITING_COMMAND, LineKind.BLANK, "", ParserState.IDLE
        )
        self.assertEqual(state, ParserState.AWAITING_COMMAND)

    def test_awaited_value_returns_to_script(self):
        state = next_state(
            ParserState.AWAITING_COMMAND, LineKind.TEXT, "ls", ParserState.IN_SCRIPT
        )
        self.assertEqual(state, ParserState.IN_SCRIPT)

    def test_script_marker_cancels_wait(self):
        state = next_state(ParserState.AWAITING_TITLE, LineKind.SCRIPT, "", ParserState.IDLE)
        self.assertEqual(state, ParserState.IN_SCRIPT)

    def test_command_marker_inside_script(self):
        answer = scan_markers("SCRIPT:\necho a\nCOMMAND:\nls\necho b")

        self.assertEqual(answer.commands, ["ls", "echo a\necho b"])

    def test_scan_markers_without_markers(self):
        answer = scan_markers("nothing here")

        self.assertEqual(answer.commands, [])
        self.assertEqual(answer.raw_text, "nothing here")


class TestExtractCodeBlocks(unittest.TestCase):
    def test_empty_block_contributes_nothing(self):
        self.assertEqual(extract_code_blocks("```\n```\n```\nls\n```"), ["ls"])

    def test_no_fences(self):
        self.assertEqual(extract_code_blocks("ls -la"), [])

    def test_indented_fence(self):
        self.assertEqual(extract_code_blocks("  ```bash\n  ls\n  ```"), ["  ls"])
