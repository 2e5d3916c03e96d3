"""Tests for reading launch.json and resolving it against the process."""

import os

from meteor_launch.settings import generate_settings, load_settings, read_launch_file


class TestReadLaunchFile:

    def test_missing_file_is_empty(self, workspace):
        assert read_launch_file() == {}

    def test_valid_file(self, workspace):
        workspace.write_launch({"WOW": "such"})
        assert read_launch_file() == {"WOW": "such"}

    def test_malformed_file_is_empty(self, workspace):
        workspace.write_launch(raw="{not json")
        assert read_launch_file() == {}

    def test_byte_order_mark_is_ignored(self, workspace):
        (workspace.root / "launch.json").write_bytes(b'\xef\xbb\xbf{"WOW": "such"}')
        assert read_launch_file() == {"WOW": "such"}

    def test_non_object_is_empty(self, workspace):
        workspace.write_launch(raw='["a", "b"]')
        assert read_launch_file() == {}

    def test_explicit_repo_root(self, workspace, tmp_path):
        other = tmp_path / "other"
        other.mkdir()
        (other / "launch.json").write_text('{"WOW": "other"}')
        assert read_launch_file(other) == {"WOW": "other"}


class TestLoadSettings:

    def test_defaults_use_cwd(self, workspace):
        workspace.write_launch({})
        results = load_settings({})
        assert results['METEOR_INPUT_DIR'] == str(workspace.root)
        assert results['METEOR_OUTPUT_DIR'] == ".build"
        assert results['METEOR_OUTPUT_ABSOLUTE'] == str(workspace.root / ".build")
        assert results['FL_REPORT_PATH'] == str(workspace.root / ".build" / "ios")

    def test_without_launch_file(self, workspace):
        results = load_settings({})
        assert results['METEOR_INPUT_DIR'] == str(workspace.root)

    def test_reads_os_environ_by_default(self, workspace, monkeypatch):
        workspace.write_launch({"METEOR_OUTPUT_DIR": "something"})
        monkeypatch.setenv('METEOR_OUTPUT_DIR', "nothing")
        results = load_settings()
        assert results['METEOR_OUTPUT_DIR'] == "nothing"

    def test_home_zipalign(self, workspace):
        workspace.write_launch({"ANDROID_ZIPALIGN": "/nonsense"})
        results = load_settings({"ANDROID_ZIPALIGN": "~/meow"})
        assert results['ANDROID_ZIPALIGN'] == str(workspace.home / "meow")

    def test_relative_zipalign(self, workspace):
        results = load_settings({"ANDROID_ZIPALIGN": "../meow"})
        assert results['ANDROID_ZIPALIGN'] == os.path.normpath(os.path.join(str(workspace.root), "../meow"))

    def test_custom_output_dir(self, workspace):
        workspace.write_launch({"XCODE_SCHEME_NAME": "scheme", "METEOR_OUTPUT_DIR": "../nonsense"})
        results = load_settings({})
        expected = workspace.root.parent / "nonsense"
        assert results['METEOR_OUTPUT_ABSOLUTE'] == str(expected)
        assert results['XCODE_PROJECT'] == str(expected / "ios" / "project" / "scheme.xcodeproj")

    def test_generate_settings_defaults_to_process_cwd(self, workspace):
        results = generate_settings({}, {})
        assert results['SIGH_OUTPUT_PATH'] == str(workspace.root)
        assert results['GYM_OUTPUT_DIRECTORY'] == str(workspace.root)
