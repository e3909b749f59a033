"""Tests for Resolver name-to-path resolution and fallback ordering."""

from pathlib import Path
from unittest.mock import Mock

import pytest
from sourceloader.exceptions import InvalidSettingsError
from sourceloader.resolution.resolver import Resolver


def make_resolver(root, recorder, fallback_paths=(), **kwargs):
    return Resolver(root, fallback_paths, activator=recorder, **kwargs)


class TestResolve:
    def test_bare_name_resolves_single_file(self, source_tree, recorder):
        result = make_resolver(source_tree, recorder).resolve("Fixture1")

        assert result == [source_tree / "Fixture1.py"]
        assert recorder.activated == result

    def test_dotted_name_maps_to_nested_path(self, source_tree, recorder):
        result = make_resolver(source_tree, recorder).resolve("Sub.Fixture3")

        assert result == [source_tree / "Sub" / "Fixture3.py"]

    def test_bare_name_found_in_subdirectory(self, source_tree, recorder):
        """ImportFixture3.py also contains the suffix and is walked before Sub/."""
        assert make_resolver(source_tree, recorder).resolve("Fixture3") == [
            source_tree / "ImportSub" / "ImportFixture3.py",
            source_tree / "Sub" / "Fixture3.py",
        ]

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_resolves_nothing(self, source_tree, recorder, name):
        resolver = make_resolver(source_tree, recorder, ["vendor", "lib"])

        assert resolver.resolve(name) == []
        assert resolver.resolve_all(["Fixture1", name]) == [source_tree / "Fixture1.py"]
        assert recorder.activated == [source_tree / "Fixture1.py"]

    def test_substring_matching_is_loose(self, source_tree, recorder):
        """Fixture2.py also matches ImportFixture2.py; both are activated in discovery order."""
        result = make_resolver(source_tree, recorder).resolve("Fixture2")

        assert result == [
            source_tree / "Fixture2.py",
            source_tree / "ImportSub" / "ImportFixture2.py",
        ]

    def test_unknown_name_returns_empty(self, source_tree, recorder):
        assert make_resolver(source_tree, recorder, ["vendor", "lib"]).resolve("Dummy") == []
        assert recorder.activated == []

    def test_missing_root_returns_empty_and_logs_error(self, tmp_path, recorder):
        logger = Mock()
        (tmp_path / "vendor").mkdir()

        result = make_resolver(tmp_path / "Dummy", recorder, ["vendor"], logger=logger).resolve("Fixture1")

        assert result == []
        logger.error.assert_called_once()
        assert "Invalid search directory path" in logger.error.call_args.args[0]

    def test_custom_separator_and_extension(self, tmp_path, recorder, write):
        target = write(tmp_path / "App" / "Controller" / "Home.php")

        resolver = make_resolver(tmp_path, recorder, extension="php", namespace_separator="\\")

        assert resolver.resolve("App\\Controller\\Home") == [target]

    def test_debug_logged_per_activation(self, source_tree, recorder):
        logger = Mock()

        make_resolver(source_tree, recorder, logger=logger).resolve("Fixture1")

        messages = [call.args[0] for call in logger.debug.call_args_list]
        assert any(str(source_tree / "Fixture1.py") in message for message in messages)

    def test_failing_logger_does_not_break_resolution(self, source_tree, recorder):
        logger = Mock()
        logger.debug.side_effect = RuntimeError("handler broke")
        logger.error.side_effect = RuntimeError("handler broke")

        resolver = make_resolver(source_tree, recorder, logger=logger)

        assert resolver.resolve("Fixture1") == [source_tree / "Fixture1.py"]
        assert resolver.search(source_tree / "nope", "x.py") == []

    def test_activation_error_propagates(self, source_tree):
        activator = Mock(side_effect=ValueError("broken source"))

        with pytest.raises(ValueError, match="broken source"):
            Resolver(source_tree, activator=activator).resolve("Fixture1")


class TestFallbacks:
    def test_primary_match_ignores_fallbacks(self, tmp_path, recorder, write):
        primary = write(tmp_path / "pkg" / "Thing.py")
        write(tmp_path / "fallback" / "Thing.py")

        result = make_resolver(tmp_path, recorder, ["fallback"]).resolve("pkg.Thing")

        assert result == [primary]

    def test_first_declared_fallback_wins(self, source_tree, recorder):
        result = make_resolver(source_tree, recorder, ["vendor", "lib"]).resolve("app.Fixture4")

        assert result == [source_tree / "vendor" / "Fixture4.py"]

    def test_fallback_order_is_respected(self, source_tree, recorder):
        result = make_resolver(source_tree, recorder, ["lib", "vendor"]).resolve("app.Fixture4")

        assert result == [source_tree / "lib" / "Fixture4.py"]

    def test_later_fallback_used_when_earlier_has_no_match(self, source_tree, recorder):
        result = make_resolver(source_tree, recorder, ["vendor", "lib"]).resolve("app.Fixture5")

        assert result == [source_tree / "lib" / "Fixture5.py"]

    def test_missing_fallback_logged_and_skipped(self, source_tree, recorder):
        logger = Mock()

        result = make_resolver(source_tree, recorder, ["missing", "lib"], logger=logger).resolve("app.Fixture5")

        assert result == [source_tree / "lib" / "Fixture5.py"]
        logger.error.assert_called_once()

    def test_fallback_with_trailing_slash(self, source_tree, recorder):
        result = make_resolver(source_tree, recorder, ["Sub/"]).resolve("other.Fixture3")

        assert result == [source_tree / "Sub" / "Fixture3.py"]

    @pytest.mark.parametrize("fallback", ["/etc", "../outside", "lib/../../x", ""])
    def test_fallbacks_outside_root_rejected(self, tmp_path, recorder, fallback):
        with pytest.raises(InvalidSettingsError):
            make_resolver(tmp_path, recorder, [fallback])


class TestResolveAll:
    def test_concatenates_in_input_order(self, source_tree, recorder):
        resolver = make_resolver(source_tree, recorder)

        result = resolver.resolve_all(["Sub.Fixture3", "Fixture1"])

        assert result == [source_tree / "Sub" / "Fixture3.py", source_tree / "Fixture1.py"]

    def test_length_is_sum_of_individual_results(self, source_tree):
        names = ["Fixture1", "Fixture2"]
        individual = sum(len(Resolver(source_tree, activator=Mock()).resolve(name)) for name in names)

        combined = Resolver(source_tree, activator=Mock()).resolve_all(names)

        assert len(combined) == individual == 3

    def test_unresolvable_names_contribute_nothing(self, source_tree, recorder):
        result = make_resolver(source_tree, recorder).resolve_all(["Dummy", "Fixture1", "AlsoMissing"])

        assert result == [source_tree / "Fixture1.py"]

    def test_duplicates_are_kept(self, source_tree, recorder):
        result = make_resolver(source_tree, recorder).resolve_all(["Fixture1", "Fixture1"])

        assert result == [source_tree / "Fixture1.py", source_tree / "Fixture1.py"]


def test_suffix_and_bare_name(tmp_path: Path, recorder):
    resolver = make_resolver(tmp_path, recorder)

    assert resolver.to_suffix("app.models.User") == str(Path("app") / "models" / "User") + ".py"
    assert resolver.bare_name("app.models.User") == "User"
    assert resolver.bare_name("User") == "User"
