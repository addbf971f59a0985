"""Tests for the CLI module."""

import io
import json
import logging

import pytest
from unittest.mock import patch
from PIL import Image

from conftest import build_mp3, make_image
from mp3meta import __version__, parse_mp3
from mp3meta.cli import main
from mp3meta.cli.utils import ExitCode, setup_logging


def run_cli(*args):
    """Run main() with the given arguments, returning the exit code."""
    with patch('sys.argv', ['mp3meta', *map(str, args)]):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def read_tag(path):
    return parse_mp3(io.BytesIO(path.read_bytes()))


def test_version_output(capsys):
    """Test that --version flag displays version correctly."""
    assert run_cli('--version') == 0
    captured = capsys.readouterr()
    assert __version__ in captured.out


def test_help_output(capsys):
    """Test that --help flag displays help information."""
    assert run_cli('--help') == 0
    captured = capsys.readouterr()
    assert 'mp3meta' in captured.out
    for command in ('show', 'edit', 'clear', 'cover'):
        assert command in captured.out


def test_no_command_shows_help(capsys):
    """Test that running without a command shows help."""
    assert run_cli() == ExitCode.INVALID_INPUT
    captured = capsys.readouterr()
    assert 'Read and write ID3 tags' in captured.out


def test_edit_help(capsys):
    """Test that edit help lists the field options."""
    assert run_cli('edit', '--help') == 0
    captured = capsys.readouterr()
    for option in ('--artist', '--album-artist', '--year', '--bpm',
                   '--disc-number', '--track-total', '--output'):
        assert option in captured.out


def test_invalid_log_level(mp3_file):
    """An unknown log level is a usage error."""
    assert run_cli('show', mp3_file, '--log-level', 'chatty') == 2


class TestShowCommand:
    """Test the show command."""

    def test_show_json(self, mp3_file, capsys):
        """--json prints every field."""
        assert run_cli('show', mp3_file, '--json') == 0
        result = json.loads(capsys.readouterr().out)
        assert result['status'] == 'success'
        assert result['tags']['artist'] == 'Sample Artist'
        assert result['tags']['track_number'] == 3
        assert result['tags']['track_total'] == 12
        assert result['tags']['has_cover_art'] is True
        assert result['cover_art']['width'] == 8
        assert result['cover_art']['height'] == 6

    def test_show_table(self, mp3_file, capsys):
        """Without --json a table is printed."""
        assert run_cli('show', mp3_file) == 0
        out = capsys.readouterr().out
        assert 'Sample Artist' in out
        assert 'composer' not in out

    def test_show_all(self, mp3_file, capsys):
        """--all lists empty fields too."""
        assert run_cli('show', mp3_file, '--all') == 0
        assert 'composer' in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        """A missing file is invalid input."""
        code = run_cli('show', tmp_path / 'missing.mp3', '--json')
        assert code == ExitCode.INVALID_INPUT
        result = json.loads(capsys.readouterr().out)
        assert result['status'] == 'error'
        assert result['error'] == 'invalid_input'

    def test_malformed_track(self, tmp_path, capsys):
        """A malformed track number is a data error."""
        path = tmp_path / 'bad.mp3'
        path.write_bytes(build_mp3({'TRCK': 'x/2'}))
        assert run_cli('show', path, '--json') == ExitCode.DATA_ERROR
        result = json.loads(capsys.readouterr().out)
        assert result['error'] == 'data_error'
        assert 'track_number' in result['message']


class TestEditCommand:
    """Test the edit command."""

    def test_edit_fields(self, mp3_file, capsys):
        """Given fields are changed, the rest are kept."""
        code = run_cli('edit', mp3_file, '--artist', 'New Artist',
                       '--album-artist', 'Band', '--year', '2024',
                       '--track-number', '5', '--json')
        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert set(result['changed']) == {'artist', 'album_artist', 'year', 'track_number'}

        tag = read_tag(mp3_file)
        assert tag.artist == 'New Artist'
        assert tag.album_artist == 'Band'
        assert tag.year == 2024
        assert (tag.track_number, tag.track_total) == (5, 12)
        assert tag.album == 'Sample Album'
        assert tag.cover_art is not None

    @pytest.mark.parametrize('option', ['--track-number', '--disc-total', '--bpm'])
    def test_negative_number_rejected(self, mp3_file, capsys, option):
        """Negative numbers are a usage error and the file is left alone."""
        original = mp3_file.read_bytes()
        assert run_cli('edit', mp3_file, option, '-1') == 2
        assert 'must not be negative' in capsys.readouterr().err
        assert mp3_file.read_bytes() == original
        assert run_cli('show', mp3_file, '--json') == 0

    def test_non_numeric_rejected(self, mp3_file):
        """Numbers must be integers."""
        assert run_cli('edit', mp3_file, '--year', 'soon') == 2

    def test_remove_field(self, mp3_file):
        """An empty string or 0 removes a field."""
        assert run_cli('edit', mp3_file, '--album', '', '--bpm', '0') == 0
        tag = read_tag(mp3_file)
        assert tag.album == ''
        assert tag.bpm == 0

    def test_output_file(self, mp3_file, tmp_path):
        """-o writes elsewhere and leaves the input alone."""
        original = mp3_file.read_bytes()
        output = tmp_path / 'copy.mp3'
        assert run_cli('edit', mp3_file, '--title', 'Copy', '-o', output) == 0
        assert mp3_file.read_bytes() == original
        assert read_tag(output).title == 'Copy'

    def test_config_file(self, mp3_file, tmp_path):
        """Write settings come from the -c config file."""
        config = tmp_path / 'config.toml'
        config.write_text('[write]\nid3_version = 4\n')
        assert run_cli('edit', mp3_file, '--title', 'V4', '-c', config) == 0
        assert mp3_file.read_bytes()[:4] == b'ID3\x04'

    def test_missing_config(self, mp3_file, tmp_path):
        """A missing config file is invalid input."""
        code = run_cli('edit', mp3_file, '--title', 'x', '-c', tmp_path / 'nope.toml')
        assert code == ExitCode.INVALID_INPUT

    def test_invalid_config(self, mp3_file, tmp_path, capsys):
        """Invalid config values are reported."""
        config = tmp_path / 'config.toml'
        config.write_text('[cover]\nformat = "BMP"\n')
        code = run_cli('edit', mp3_file, '--title', 'x', '-c', config, '--json')
        assert code == ExitCode.INVALID_INPUT
        assert json.loads(capsys.readouterr().out)['error'] == 'invalid_config'

    def test_config_wrong_type(self, mp3_file, tmp_path, capsys):
        """A config value of the wrong type is reported, not a traceback."""
        config = tmp_path / 'config.toml'
        config.write_text('[write]\npadding = "big"\n')
        code = run_cli('edit', mp3_file, '--title', 'x', '-c', config, '--json')
        assert code == ExitCode.INVALID_INPUT
        assert json.loads(capsys.readouterr().out)['error'] == 'invalid_config'

    def test_write_failure(self, mp3_file, tmp_path):
        """An unwritable output is a write failure."""
        output = tmp_path / 'missing_dir' / 'out.mp3'
        code = run_cli('edit', mp3_file, '--title', 'x', '-o', output)
        assert code == ExitCode.WRITE_FAILED


class TestClearCommand:
    """Test the clear command."""

    def test_clear(self, mp3_file, capsys):
        """Every field and the cover are removed."""
        assert run_cli('clear', mp3_file, '--json') == 0
        result = json.loads(capsys.readouterr().out)
        assert 'artist' in result['changed']
        assert 'cover_art' in result['changed']

        tag = read_tag(mp3_file)
        assert all(not tag[name] for name in tag.fields())
        assert tag.cover_art is None


class TestCoverCommand:
    """Test the cover command."""

    def test_export(self, mp3_file, tmp_path, cover_image):
        """The cover is saved to an image file."""
        export = tmp_path / 'cover.png'
        assert run_cli('cover', mp3_file, '--export', export) == 0
        with Image.open(export) as image:
            assert image.tobytes() == cover_image.tobytes()

    def test_export_without_cover(self, tmp_path):
        """Exporting from a file without cover art is a data error."""
        path = tmp_path / 'plain.mp3'
        path.write_bytes(build_mp3({'TPE1': 'Artist'}))
        code = run_cli('cover', path, '--export', tmp_path / 'cover.png')
        assert code == ExitCode.DATA_ERROR

    def test_set(self, mp3_file, tmp_path):
        """An image file replaces the cover."""
        image_path = tmp_path / 'new.png'
        new_cover = make_image((5, 5))
        new_cover.save(image_path)
        assert run_cli('cover', mp3_file, '--set', image_path) == 0
        tag = read_tag(mp3_file)
        assert tag.cover_art.size == (5, 5)
        assert tag.cover_art.tobytes() == new_cover.tobytes()

    def test_set_invalid_image(self, mp3_file, tmp_path):
        """A file that isn't an image is invalid input."""
        image_path = tmp_path / 'new.png'
        image_path.write_bytes(b'not an image')
        assert run_cli('cover', mp3_file, '--set', image_path) == ExitCode.INVALID_INPUT

    def test_remove(self, mp3_file):
        """--remove drops the cover and keeps the fields."""
        assert run_cli('cover', mp3_file, '--remove') == 0
        tag = read_tag(mp3_file)
        assert tag.cover_art is None
        assert tag.artist == 'Sample Artist'

    def test_action_required(self, mp3_file):
        """One of --export, --set or --remove is required."""
        assert run_cli('cover', mp3_file) == 2


class TestLogging:
    """Test setup_logging()."""

    def test_setup_logging_levels(self):
        """Test that each level name is accepted."""
        for level in ('debug', 'info', 'warning', 'error', 'critical'):
            setup_logging(level)
            assert logging.getLogger().level == getattr(logging, level.upper())

    def test_setup_logging_invalid(self):
        """Test that an invalid level raises ValueError."""
        with pytest.raises(ValueError, match='Invalid log level'):
            setup_logging('verbose')
