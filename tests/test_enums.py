import pytest

from compbench.enums import (
    ArchitectureType,
    CompilerType,
    ContainerType,
    Folder,
    LoggerType,
    PlatformType,
    TestType,
    filename,
    name,
    tests_to_run,
    title,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (ArchitectureType.ARM, "ARM"),
        (ArchitectureType.x86, "x86"),
        (ArchitectureType.x86_64, "x86_64"),
        (CompilerType.Clang, "Clang"),
        (CompilerType.Gcc, "GCC"),
        (Folder.Data, "data"),
        (Folder.Plot, "plot"),
        (PlatformType.Linux, "Linux"),
        (TestType.SieveOfEratosthenes, "SieveOfEratosthenes"),
        (TestType.ColorRGBCorrection, "ColorRGBCorrection"),
    ],
)
def test_name(value, expected):
    assert name(value) == expected


def test_every_test_type_name_matches_member_name():
    assert [name(t) for t in TestType] == [t.name for t in TestType]


def test_name_distinguishes_enums_with_equal_values():
    assert name(ArchitectureType.ARM) == "ARM"
    assert name(CompilerType.Gcc) == "GCC"
    assert name(Folder.Data) == "data"


@pytest.mark.parametrize(
    "value, expected",
    [
        (CompilerType.Clang, "clang"),
        (CompilerType.Gcc, "gcc"),
        (PlatformType.Linux, "Linux"),
    ],
)
def test_filename(value, expected):
    assert filename(value) == expected


def test_title():
    assert title(TestType.Base64) == "Kodowanie i dekodowanie Base64"
    assert title(TestType.Lambda) == "Lambda"
    assert title(TestType.ColorBrightnessCorrection) == "Korekcja koloru (jasność)"


def test_every_test_type_has_title():
    assert all(title(t) for t in TestType)


def test_tests_to_run_covers_all_in_declaration_order():
    assert list(tests_to_run()) == list(TestType)


@pytest.mark.parametrize("value", [ContainerType.TestCase, LoggerType.RawLogger, 0])
def test_name_rejects_unnamed(value):
    with pytest.raises(TypeError):
        name(value)


def test_filename_rejects_unnamed():
    with pytest.raises(TypeError):
        filename(ArchitectureType.x86)


def test_title_rejects_non_test():
    with pytest.raises(TypeError):
        title(CompilerType.Gcc)