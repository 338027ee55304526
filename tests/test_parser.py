"""Tests for confmgr.config.parser."""

import logging

from confmgr.config import EmptyFileError, FileOpenError, LineReadError, parse_file, parse_lines
from confmgr.config.parser import is_ignored, parse_line


class TestParseLine:
    """Tests for single line splitting."""

    def test_simple_pair(self):
        assert parse_line("Port = 8085") == ("Port", "8085")

    def test_value_keeps_inner_equals(self):
        assert parse_line("Conn = host=127.0.0.1;port=3306") == ("Conn", "host=127.0.0.1;port=3306")

    def test_quotes_removed_everywhere(self):
        assert parse_line('Motd = "Welcome to "the" server"') == ("Motd", "Welcome to the server")
        assert parse_line('Name = "unpaired') == ("Name", "unpaired")

    def test_trailing_comment_stripped(self):
        assert parse_line('Name = "MyServer"   # trailing comment') == ("Name", "MyServer")

    def test_missing_equals_is_malformed(self):
        assert parse_line("JustAWord") is None

    def test_equals_as_last_character_is_malformed(self):
        assert parse_line("Key =") is None

    def test_comment_after_equals_gives_empty_value(self):
        assert parse_line("Key = # only a comment") == ("Key", "")
        assert parse_line("Key =# tight comment") is None

    def test_ignored_lines(self):
        assert is_ignored("")
        assert is_ignored("# comment")
        assert is_ignored("[worldserver]")
        assert not is_ignored("Key = 1")


class TestParseLines:
    """Tests for parsing a whole file's lines."""

    def test_sample_file(self, caplog):
        lines = ["# comment\n", "[Section]\n", "Port = 8085\n", 'Name = "MyServer"   # trailing comment\n', "Port = 9000\n"]
        result = parse_lines(lines, "sample.conf")

        assert result.ok
        assert result.options == {"Port": "8085", "Name": "MyServer"}
        assert "Duplicate key name 'Port' in config file 'sample.conf'" in caplog.text

    def test_whitespace_is_trimmed(self):
        result = parse_lines(["   Key   =   some value   \n"], "ws.conf")
        assert result.options == {"Key": "some value"}

    def test_malformed_line_is_skipped_and_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            result = parse_lines(["Good = 1\n", "bad line\n", "Other = 2\n"], "mixed.conf")

        assert result.options == {"Good": "1", "Other": "2"}
        assert "Failure to read line number 2 in file 'mixed.conf'. Skip this line" in caplog.text

    def test_comment_right_after_equals_keeps_key(self, caplog):
        result = parse_lines(["Key = # note\n", "Other = 1\n"], "note.conf")

        assert result.options == {"Key": "", "Other": "1"}
        assert "Skip this line" not in caplog.text

    def test_diagnostics_name_the_parsing_function(self, caplog):
        parse_lines(["A = 1\n", "A = 2\n"], "dup.conf")

        assert caplog.records[-1].caller_info == "[parse_lines]"
        assert caplog.records[-1].log_type == "error"

    def test_empty_file_is_an_error(self):
        result = parse_lines(["# only comments\n", "\n", "[Section]\n"], "empty.conf")

        assert not result.ok
        assert isinstance(result.error, EmptyFileError)
        assert result.options == {}
        assert "Empty file 'empty.conf'" in str(result.error)

    def test_only_malformed_lines_is_empty(self):
        result = parse_lines(["nope\n", "Key=\n"], "bad.conf")
        assert isinstance(result.error, EmptyFileError)

    def test_read_error_reports_line_number(self):
        def failing_lines():
            yield "A = 1\n"
            yield "B = 2\n"
            raise OSError("disk went away")

        result = parse_lines(failing_lines(), "broken.conf")

        assert isinstance(result.error, LineReadError)
        assert result.error.line_number == 3
        assert result.options == {}


class TestParseFile:
    """Tests for parsing files on disk."""

    def test_parse_existing_file(self, sample_config):
        result = parse_file(sample_config)
        assert result.ok
        assert result.path == sample_config
        assert result.options == {"Port": "8085", "Name": "MyServer"}

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "missing.conf")
        result = parse_file(path)

        assert isinstance(result.error, FileOpenError)
        assert path in str(result.error)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.conf"
        path.write_bytes(b"A = 1\n\xff\xfe\xfa = 2\n")

        result = parse_file(str(path))

        assert isinstance(result.error, LineReadError)
        assert result.error.line_number >= 1

    def test_uses_given_logger(self, write_config):
        path = write_config("dup.conf", "A = 1\nA = 2\n")
        logger = logging.getLogger("test_parser_custom")
        records = []

        class ListHandler(logging.Handler):
            def emit(self, record):
                records.append(record)

        handler = ListHandler()
        logger.addHandler(handler)
        try:
            parse_file(path, logger)
        finally:
            logger.removeHandler(handler)

        assert len(records) == 1
        assert "Duplicate key name 'A'" in records[0].getMessage()
