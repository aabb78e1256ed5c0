from compbench.container_io import ContainerWriter
from compbench.containers import PlatformInfo, TestCaseContainer
from compbench.enums import CompilerType, TestType
from compbench.graph import insert_test_case, load_from_file, main, save_plots
from compbench.plot import PlotTab


def make(test_type, ips, count=None):
    container = TestCaseContainer()
    container.compiler.id = CompilerType.Gcc
    container.compiler.flags = "-O2"
    container.testcase.id = test_type
    container.testcase.ips = ips
    container.testcase.count = ips if count is None else count
    return container


def write_results(path, containers):
    with ContainerWriter(path) as writer:
        for container in containers:
            writer.write(container)


def test_insert_test_case_titles_plot():
    tabs = PlotTab()
    plot = insert_test_case(tabs, make(TestType.Base64, 10, count=42))
    assert plot.test_name == "Base64"
    assert plot.title == "Kodowanie i dekodowanie Base64, 42 iteracji"
    assert plot.subtitle == "Wiecej iteracji = wieksza wydajność"
    assert len(plot.tests) == 1


def test_same_test_shares_a_plot():
    tabs = PlotTab()
    first = insert_test_case(tabs, make(TestType.Lambda, 10))
    second = insert_test_case(tabs, make(TestType.Lambda, 20))
    assert first is second
    assert len(first.tests) == 2
    assert len(tabs) == 1


def test_load_from_file_skips_other_records(tmp_path):
    path = tmp_path / "results.raw"
    write_results(
        path,
        [make(TestType.Lambda, 5), PlatformInfo(), make(TestType.NaiveNWD, 7)],
    )
    tabs = PlotTab()
    assert load_from_file(tabs, path) == 2
    assert [plot.test_name for plot in tabs] == ["Lambda", "NaiveNWD"]


def test_save_plots_writes_one_png_per_test(tmp_path):
    tabs = PlotTab()
    insert_test_case(tabs, make(TestType.Lambda, 5))
    insert_test_case(tabs, make(TestType.MergeSort, 9))
    saved = save_plots(tabs, tmp_path / "plot")
    assert sorted(path.name for path in saved) == ["Lambda.png", "MergeSort.png"]
    assert all(path.read_bytes()[:4] == b"\x89PNG" for path in saved)


def test_main_reads_data_and_writes_plots(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    write_results(data / "a.raw", [make(TestType.Lambda, 5)])
    write_results(data / "b.raw", [make(TestType.Lambda, 8)])
    (data / "noextension").write_bytes(b"\xff")
    plots = tmp_path / "plot"
    assert main([str(data), str(plots)]) == 0
    assert sorted(path.name for path in plots.iterdir()) == ["Lambda.png"]


def test_main_with_missing_data_folder(tmp_path):
    plots = tmp_path / "plot"
    assert main([str(tmp_path / "missing"), str(plots)]) == 0
    assert list(plots.iterdir()) == []