"""Unit tests for the injector chain and no-op injector."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from injectctl.core.chain import InjectorChain, NoopInjector
from injectctl.core.errors import StorageError
from injectctl.core.injector import Injector
from injectctl.core.profiles import APPLICATION_PROFILE, CONFIG_AGGREGATOR_PROFILE
from injectctl.models.injection import InjectionType


def _make_chain(project: Path) -> InjectorChain:
    """Create a chain over the application and aggregator configs."""
    return InjectorChain(
        [
            Injector(APPLICATION_PROFILE, project),
            Injector(CONFIG_AGGREGATOR_PROFILE, project),
        ]
    )


class TestInjectorChain:
    """Tests for InjectorChain."""

    def test_allowed_types_is_union(self, project: Path) -> None:
        """allowed_types combines the types of every member."""
        chain = _make_chain(project)

        assert chain.allowed_types == {
            InjectionType.COMPONENT,
            InjectionType.MODULE,
            InjectionType.DEPENDENCY,
            InjectionType.BEFORE_APPLICATION,
            InjectionType.CONFIG_PROVIDER,
        }
        assert chain.registers_type(InjectionType.CONFIG_PROVIDER)

    def test_is_registered_in_any_member(self, project: Path) -> None:
        """is_registered is True when one member has the entry."""
        chain = _make_chain(project)

        assert chain.is_registered("Application")
        assert chain.is_registered("App\\ConfigProvider")
        assert not chain.is_registered("Blog")

    def test_inject_only_reaches_registering_members(
        self, project: Path, notifier: MagicMock
    ) -> None:
        """A module is injected into the application config only."""
        aggregator_path = project / "config" / "config.php"
        before = aggregator_path.read_text()
        chain = _make_chain(project)

        chain.inject("Blog", InjectionType.MODULE, notifier)

        assert aggregator_path.read_text() == before
        assert "'Blog'" in (project / "config" / "application.config.php").read_text()

    def test_inject_dispatches_by_type(self) -> None:
        """inject skips members that do not register the type."""
        module_injector = MagicMock()
        module_injector.registers_type.return_value = True
        provider_injector = MagicMock()
        provider_injector.registers_type.return_value = False
        notifier = MagicMock()
        chain = InjectorChain([module_injector, provider_injector])

        chain.inject("Blog", InjectionType.MODULE, notifier)

        module_injector.inject.assert_called_once_with("Blog", InjectionType.MODULE, notifier)
        provider_injector.inject.assert_not_called()

    def test_remove_reaches_all_members(self, project: Path, notifier: MagicMock) -> None:
        """remove is applied to every member that has the entry."""
        chain = _make_chain(project)

        chain.remove("App\\ConfigProvider", notifier)

        assert not chain.is_registered("App\\ConfigProvider")
        notifier.info.assert_called_once()

    def test_remove_failure_logs_processed_files(
        self, project: Path, notifier: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A failing member stops removal and the files already changed are logged."""
        failing = MagicMock()
        failing.remove.side_effect = StorageError("disk full")
        chain = InjectorChain([Injector(APPLICATION_PROFILE, project), failing])

        with caplog.at_level(logging.WARNING), pytest.raises(StorageError):
            chain.remove("Application", notifier)

        assert not chain.injectors[0].is_registered("Application")
        assert "already processed" in caplog.text
        assert "application.config.php" in caplog.text

    def test_remove_failure_on_first_member_logs_nothing(
        self, notifier: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Nothing is logged when no file was changed before the failure."""
        failing = MagicMock()
        failing.remove.side_effect = StorageError("disk full")
        untouched = MagicMock()
        chain = InjectorChain([failing, untouched])

        with caplog.at_level(logging.WARNING), pytest.raises(StorageError):
            chain.remove("Blog", notifier)

        untouched.remove.assert_not_called()
        assert "already processed" not in caplog.text

    def test_with_dependencies_propagates(self, project: Path) -> None:
        """with_dependencies configures every member."""
        chain = _make_chain(project).with_dependencies(["Zend\\Router"])

        assert len(chain) == 2
        assert all(
            isinstance(i, Injector) and i.dependencies == ("Zend\\Router",) for i in chain
        )

    def test_with_application_modules_propagates(self, project: Path) -> None:
        """with_application_modules configures every member."""
        chain = _make_chain(project).with_application_modules(["Application"])

        assert all(
            isinstance(i, Injector) and i.application_modules == ("Application",)
            for i in chain.injectors
        )

    def test_empty_chain_registers_nothing(self, notifier: MagicMock) -> None:
        """An empty chain behaves like a no-op injector."""
        chain = InjectorChain()

        assert len(chain) == 0
        assert chain.allowed_types == frozenset()
        assert not chain.is_registered("Blog")
        chain.inject("Blog", InjectionType.MODULE, notifier)
        notifier.info.assert_not_called()


class TestNoopInjector:
    """Tests for NoopInjector."""

    def test_registers_nothing(self) -> None:
        """NoopInjector registers no type and no entry."""
        injector = NoopInjector()

        assert injector.allowed_types == frozenset()
        assert not injector.registers_type(InjectionType.MODULE)
        assert not injector.is_registered("Blog")

    def test_operations_do_nothing(self, notifier: MagicMock) -> None:
        """inject and remove neither notify nor fail."""
        injector = NoopInjector()

        injector.inject("Blog", InjectionType.MODULE, notifier)
        injector.remove("Blog", notifier)

        notifier.info.assert_not_called()
        notifier.error.assert_not_called()

    def test_builders_return_self(self) -> None:
        """Builder methods return the same no-op injector."""
        injector = NoopInjector()

        assert injector.with_dependencies(["A"]) is injector
        assert injector.with_application_modules(["B"]) is injector
