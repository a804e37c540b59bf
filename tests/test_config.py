"""Tests for phpmnd.json loading and flag translation."""

import pytest

from phpmnd_hook.config import NON_ZERO_EXIT_FLAG, PhpMndConfig, load_arguments
from phpmnd_hook.errors import ConfigParseError
from phpmnd_hook.models import StringsMode


class TestLoad:
    def test_missing_file_gives_empty_config(self, tmp_path):
        config = PhpMndConfig.load(tmp_path / "phpmnd.json")
        assert config == PhpMndConfig()

    def test_missing_file_gives_only_mandatory_flag(self, tmp_path):
        assert load_arguments(tmp_path / "phpmnd.json") == [NON_ZERO_EXIT_FLAG]

    def test_malformed_json_raises(self, write_config):
        path = write_config('{"ignore-numbers": ["0", "1"],}')
        with pytest.raises(ConfigParseError, match="JSON Decode Error"):
            PhpMndConfig.load(path)

    def test_non_object_raises(self, write_config):
        path = write_config("[1, 2]")
        with pytest.raises(ConfigParseError, match="expected an object"):
            PhpMndConfig.load(path)

    def test_list_key_with_scalar_raises(self, write_config):
        path = write_config({"exclude-path": "vendor"})
        with pytest.raises(ConfigParseError, match="'exclude-path' must be a list"):
            PhpMndConfig.load(path)

    def test_unknown_keys_are_ignored(self, write_config):
        path = write_config({"colors": True})
        assert PhpMndConfig.load(path).to_arguments() == [NON_ZERO_EXIT_FLAG]

    def test_string_zero_is_false(self, write_config):
        path = write_config(
            {
                "hint": "0",
                "strings": "0",
                "include-numeric-string": "0",
                "allow-array-mapping": "0",
            }
        )
        assert PhpMndConfig.load(path).to_arguments() == [NON_ZERO_EXIT_FLAG]

    def test_string_one_is_true(self, write_config):
        path = write_config({"hint": "1"})
        assert PhpMndConfig.load(path).to_arguments() == ["--hint", NON_ZERO_EXIT_FLAG]

    def test_null_values_are_omitted(self, write_config):
        path = write_config({"ignore-numbers": None, "hint": None, "strings": None})
        assert PhpMndConfig.load(path).to_arguments() == [NON_ZERO_EXIT_FLAG]


class TestToArguments:
    def _args(self, write_config, content):
        return load_arguments(write_config(content))

    def test_ignore_numbers_joined_into_one_flag(self, write_config):
        args = self._args(write_config, {"ignore-numbers": ["0", "1"]})
        assert args.count("--ignore-numbers=0,1") == 1
        assert [a for a in args if a.startswith("--ignore-numbers")] == ["--ignore-numbers=0,1"]

    def test_numeric_entries_are_stringified(self, write_config):
        args = self._args(write_config, {"ignore-numbers": [0, 1, 2.5]})
        assert "--ignore-numbers=0,1,2.5" in args

    def test_exclude_path_one_flag_per_entry_in_order(self, write_config):
        args = self._args(write_config, {"exclude-path": ["a", "b"]})
        assert args == ["--exclude-path=a", "--exclude-path=b", NON_ZERO_EXIT_FLAG]

    def test_exclude_file_one_flag_per_entry(self, write_config):
        args = self._args(write_config, {"exclude-file": ["x.php", "y.php"]})
        assert args[:2] == ["--exclude-file=x.php", "--exclude-file=y.php"]

    def test_empty_list_keeps_joined_flag(self, write_config):
        args = self._args(write_config, {"ignore-funcs": [], "exclude-path": []})
        assert args == ["--ignore-funcs=", NON_ZERO_EXIT_FLAG]

    def test_false_booleans_emit_nothing(self, write_config):
        args = self._args(
            write_config,
            {"hint": False, "include-numeric-string": False, "allow-array-mapping": False},
        )
        assert args == [NON_ZERO_EXIT_FLAG]

    def test_full_config_order(self, write_config):
        args = self._args(
            write_config,
            {
                "allow-array-mapping": True,
                "include-numeric-string": True,
                "extensions": ["argument", "return"],
                "strings": True,
                "hint": True,
                "suffixes": ["php", "inc"],
                "exclude-file": ["f.php"],
                "exclude-path": ["vendor", "tests"],
                "ignore-funcs": ["round", "intval"],
                "ignore-numbers": ["0", "1"],
            },
        )
        assert args == [
            "--ignore-numbers=0,1",
            "--ignore-funcs=round,intval",
            "--exclude-path=vendor",
            "--exclude-path=tests",
            "--exclude-file=f.php",
            "--suffixes=php,inc",
            "--hint",
            "--strings",
            "--extensions=argument,return",
            "--include-numeric-string",
            "--allow-array-mapping",
            NON_ZERO_EXIT_FLAG,
        ]

    def test_mandatory_flag_is_always_last(self):
        config = PhpMndConfig(hint=True, suffixes=["php"])
        assert config.to_arguments()[-1] == NON_ZERO_EXIT_FLAG


class TestStringsMode:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, StringsMode.ALLOW),
            ("allow", StringsMode.ALLOW),
            ("ignore", StringsMode.IGNORE),
            (1, StringsMode.IGNORE),
            ("yes", StringsMode.IGNORE),
            (False, StringsMode.UNSET),
            (0, StringsMode.UNSET),
            ("", StringsMode.UNSET),
            ("0", StringsMode.UNSET),
        ],
    )
    def test_decoding(self, write_config, value, expected):
        config = PhpMndConfig.load(write_config({"strings": value}))
        assert config.strings == expected

    def test_allow_emits_strings_flag(self):
        args = PhpMndConfig(strings=StringsMode.ALLOW).to_arguments()
        assert "--strings" in args
        assert "--ignore-strings" not in args

    def test_ignore_emits_ignore_strings_flag(self):
        args = PhpMndConfig(strings=StringsMode.IGNORE).to_arguments()
        assert "--ignore-strings" in args
        assert "--strings" not in args

    def test_unset_emits_neither(self):
        assert PhpMndConfig().to_arguments() == [NON_ZERO_EXIT_FLAG]
