"""Tests for the standalone entry point."""

from games.Breakout import main as breakout_main
from games.Breakout.config import load_settings
from games.Breakout.main import build_parser, main


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.skin == 'geometric'
        assert args.fps is None
        assert args.lives is None
        assert args.max_frames is None

    def test_options(self):
        args = build_parser().parse_args(['--lives', '5', '--seed', '3', '--width', '640'])
        assert (args.lives, args.seed, args.width) == (5, 3, 640)


class TestMain:

    def test_runs_headless_for_fixed_frames(self):
        assert main(['--max-frames', '3', '--fps', '1000', '--log-level', 'OFF']) == 0

    def test_missing_config_exits_with_error(self, tmp_path):
        assert main(['--config', str(tmp_path / 'missing.yaml'), '--log-level', 'OFF']) == 2

    def test_invalid_override_exits_with_error(self):
        assert main(['--lives', '0', '--log-level', 'OFF']) == 2

    def _run_with_settings_spy(self, monkeypatch, argv):
        loaded = []

        def recording_load(*args, **kwargs):
            settings = load_settings(*args, **kwargs)
            loaded.append(settings)
            return settings

        monkeypatch.setattr(breakout_main, 'load_settings', recording_load)
        assert main(argv) == 0
        return loaded[0]

    def test_file_fps_kept_without_flag(self, tmp_path, monkeypatch):
        path = tmp_path / 'paced.yaml'
        path.write_text('fps: 30\n')
        settings = self._run_with_settings_spy(
            monkeypatch, ['--config', str(path), '--max-frames', '1', '--log-level', 'OFF'],
        )
        assert settings.fps == 30

    def test_fps_flag_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / 'paced.yaml'
        path.write_text('fps: 30\n')
        settings = self._run_with_settings_spy(
            monkeypatch,
            ['--config', str(path), '--fps', '45', '--max-frames', '1', '--log-level', 'OFF'],
        )
        assert settings.fps == 45

    def test_default_fps_without_file_or_flag(self, monkeypatch):
        settings = self._run_with_settings_spy(
            monkeypatch, ['--max-frames', '1', '--log-level', 'OFF'],
        )
        assert settings.fps == 60
