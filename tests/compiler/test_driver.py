"""Tests for the compilation driver."""

from pathlib import Path

import pytest

from boxgen.compiler.driver import CompilationDriver
from boxgen.core.exceptions import CompilationError, CompilerServiceError, ConfigError
from boxgen.discovery.classifier import ConfigurationVariant

SOURCE = 'package tok\nfun box(): String = "OK"\n'


class TestCompilationDriver:
    """Test cases for CompilationDriver."""

    def test_routes_to_environment_of_variant(self, fake_environments) -> None:
        driver = CompilationDriver(fake_environments)

        unit = driver.compile(Path("box/Foo.kt"), SOURCE, ConfigurationVariant.JDK_ONLY)

        assert len(fake_environments[ConfigurationVariant.JDK_ONLY].compiled) == 1
        assert fake_environments[ConfigurationVariant.FULL_JDK].compiled == []
        assert unit.variant is ConfigurationVariant.JDK_ONLY
        assert unit.source_path == Path("box/Foo.kt")
        assert unit.files == {"tok/FooKt.class": b"jdk_only:tok"}

    def test_source_compiled_under_original_file_name(self, fake_environments) -> None:
        driver = CompilationDriver(fake_environments)

        driver.compile(Path("box/Foo.kt"), SOURCE, ConfigurationVariant.FULL_JDK)

        parsed = fake_environments[ConfigurationVariant.FULL_JDK].compiled[0]
        assert parsed.file_name == "Foo.kt"
        assert parsed.text == SOURCE

    def test_compiler_failure_wrapped(self, fake_environment_cls) -> None:
        env = fake_environment_cls(ConfigurationVariant.FULL_JDK, fail_on="undefinedThing")
        driver = CompilationDriver({ConfigurationVariant.FULL_JDK: env})
        text = SOURCE + "val x = undefinedThing\n"

        with pytest.raises(CompilationError) as exc_info:
            driver.compile(Path("box/Bad.kt"), text, ConfigurationVariant.FULL_JDK)

        err = exc_info.value
        assert err.file_path == Path("box/Bad.kt").absolute()
        assert err.source_text == text
        assert str(Path("box/Bad.kt").absolute()) in str(err)
        assert "undefinedThing" in str(err)
        assert isinstance(err.__cause__, RuntimeError)

    def test_parse_failure_wrapped(self) -> None:
        class RejectingEnvironment:
            def parse(self, text: str, file_name: str, module_name: str | None = None):
                raise CompilerServiceError("syntax error")

            def compile(self, source):  # pragma: no cover - never reached
                raise AssertionError

        driver = CompilationDriver({ConfigurationVariant.FULL_JDK: RejectingEnvironment()})

        with pytest.raises(CompilationError) as exc_info:
            driver.compile(Path("Foo.kt"), SOURCE, ConfigurationVariant.FULL_JDK)

        assert isinstance(exc_info.value.__cause__, CompilerServiceError)

    def test_missing_environment_is_config_error(self) -> None:
        driver = CompilationDriver({})

        with pytest.raises(ConfigError, match="full_jdk_and_junit"):
            driver.compile(Path("Foo.kt"), SOURCE, ConfigurationVariant.FULL_JDK_AND_JUNIT)

    def test_module_name_passed_to_environment(self, fake_environments) -> None:
        driver = CompilationDriver(fake_environments)

        driver.compile(
            Path("box/Foo.kt"), SOURCE, ConfigurationVariant.FULL_JDK, module_name="box_Foo_kt"
        )

        parsed = fake_environments[ConfigurationVariant.FULL_JDK].compiled[0]
        assert parsed.module_name == "box_Foo_kt"
