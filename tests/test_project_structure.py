"""Basic project scaffolding tests."""

import importlib


def test_package_importable() -> None:
    import broadside

    assert broadside.__version__


def test_submodules_exist() -> None:
    modules = [
        "broadside.engine.geometry",
        "broadside.engine.board",
        "broadside.engine.combat",
        "broadside.engine.game",
        "broadside.ai",
        "broadside.telemetry",
        "broadside.settings",
        "broadside.cli",
    ]

    for module in modules:
        assert importlib.import_module(module) is not None
