# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import unittest

from tests.test_support import temp_directory, temp_env, temp_files
from zbase32 import FormatOptions
from zbase32.config import (
    DEFAULT_CONFIG_PATH,
    init_user_config,
    load_app_config,
    resolve_config_path,
    user_config_path,
)


class TestConfig(unittest.TestCase):
    def test_packaged_defaults(self) -> None:
        config = load_app_config(DEFAULT_CONFIG_PATH)
        self.assertEqual(config.encode.format, FormatOptions.INCLUDE_SEPARATORS)
        self.assertTrue(config.encode.with_separators)
        self.assertFalse(config.ui.quiet)
        self.assertFalse(config.ui.no_color)

    def test_load_app_config_parses_sections(self) -> None:
        toml = """
[encode]
format = "NONE"

[ui]
quiet = "yes"
no_color = 1
"""
        with temp_files(**{"config.toml": toml}) as paths:
            config = load_app_config(paths["config.toml"])
        self.assertEqual(config.encode.format, FormatOptions.NONE)
        self.assertFalse(config.encode.with_separators)
        self.assertTrue(config.ui.quiet)
        self.assertTrue(config.ui.no_color)

    def test_missing_sections_use_defaults(self) -> None:
        with temp_files(**{"config.toml": ""}) as paths:
            config = load_app_config(paths["config.toml"])
        self.assertEqual(config.encode.format, FormatOptions.INCLUDE_SEPARATORS)
        self.assertFalse(config.ui.quiet)

    def test_boolean_format_is_accepted(self) -> None:
        with temp_files(**{"config.toml": "[encode]\nformat = false\n"}) as paths:
            config = load_app_config(paths["config.toml"])
        self.assertEqual(config.encode.format, FormatOptions.NONE)

    def test_invalid_values_name_the_field(self) -> None:
        cases = (
            ('[encode]\nformat = "dashes"\n', "encode.format"),
            ("[encode]\nformat = 3\n", "encode.format"),
            ('[ui]\nquiet = "maybe"\n', "ui.quiet"),
            ("[ui]\nno_color = 2\n", "ui.no_color"),
        )
        for toml, field in cases:
            with self.subTest(field=field, toml=toml):
                with temp_files(**{"config.toml": toml}) as paths:
                    with self.assertRaisesRegex(ValueError, field):
                        load_app_config(paths["config.toml"])

    def test_invalid_toml_raises_value_error(self) -> None:
        with temp_files(**{"config.toml": "[encode\n"}) as paths:
            with self.assertRaisesRegex(ValueError, "invalid TOML"):
                load_app_config(paths["config.toml"])

    def test_missing_explicit_config(self) -> None:
        with temp_directory() as tmp:
            with self.assertRaisesRegex(FileNotFoundError, "config file not found"):
                resolve_config_path(tmp / "missing.toml")


class TestUserConfig(unittest.TestCase):
    def test_user_config_path_honours_xdg(self) -> None:
        with temp_directory() as tmp:
            with temp_env({"XDG_CONFIG_HOME": str(tmp)}):
                self.assertEqual(user_config_path(), tmp / "zbase32" / "config.toml")

    def test_falls_back_to_packaged_default(self) -> None:
        with temp_directory() as tmp:
            with temp_env({"XDG_CONFIG_HOME": str(tmp)}):
                self.assertEqual(resolve_config_path(None), DEFAULT_CONFIG_PATH)

    def test_prefers_user_config_when_present(self) -> None:
        with temp_directory() as tmp:
            with temp_env({"XDG_CONFIG_HOME": str(tmp)}):
                path = init_user_config()
                self.assertTrue(path.is_file())
                self.assertEqual(resolve_config_path(None), path)

    def test_init_user_config_keeps_existing_file(self) -> None:
        with temp_directory() as tmp:
            with temp_env({"XDG_CONFIG_HOME": str(tmp)}):
                path = user_config_path()
                path.parent.mkdir(parents=True)
                path.write_text('[encode]\nformat = "none"\n', encoding="utf-8")
                init_user_config()
                config = load_app_config()
        self.assertEqual(config.encode.format, FormatOptions.NONE)
        self.assertEqual(config.path, path)


if __name__ == "__main__":
    unittest.main()
