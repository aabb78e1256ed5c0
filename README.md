# compbench

A small micro-benchmark suite. It runs a fixed set of benchmark cases for a
set time each, counts how many iterations each one manages, and records the
results in a compact binary `.raw` file. Two more commands read those files:
one adds up the measured durations per compiler, the other draws one bar
chart per benchmark case and saves it as a PNG image.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Running the benchmarks

```
compbench [SECONDS]
```

The command first prints what it knows about the build and the machine:

- the compiler (GCC or Clang) and its version, as reported by
  `platform.python_compiler()` for the running interpreter,
- the optimisation flags, taken from the interpreter's `OPT` build variable,
- the platform and the architecture (ARM, x86 or x86_64).

It then runs every case from `compbench.enums.tests_to_run()` for `SECONDS`
seconds each (5 when no argument is given; like `atoi`, a leading integer is
taken from the argument and anything unparsable counts as 0). Every case runs
at least one iteration. For each case it prints the iteration count and the
iterations per second.

The results are written to a file in the current directory named

```
<platform>-<architecture>-<compiler>-<version>-<flags>.raw
```

for example `Linux-x86_64-GCC-12.2.0-<flags>.raw`. Any `/` in the flags is
replaced by `_` so the result stays a single file name.

On systems that offer it, the runner asks for real-time round-robin
scheduling at priority 99; when that is not allowed it carries on without it.

The cases are Base64, EmptyCall, MergeSort, NaiveFactorial, NaiveFibonacci,
NaiveNWD, TailCallFibonacci, TailCallFactorial, Lambda, StringConcate,
SieveOfEratosthenes, ColorBrightnessCorrection and ColorRGBCorrection.

## Summarising results

```
compbench-top10 [DIRECTORY]
```

This reads every file in `DIRECTORY` (by default the `data` folder in your
home directory), keeps the test-case records, and prints the total measured
duration for each compiler:

```
gcc   : 65.02s
clang : 65.01s
```

## Drawing plots

```
compbench-graph [DATA_DIRECTORY [PLOT_DIRECTORY]]
```

This reads every file with a `.` in its name from `DATA_DIRECTORY` (default
`~/data`) and builds one horizontal bar chart per benchmark case. Each chart
holds one bar per recorded run, sorted by iterations per second; every bar
except the fastest is labelled with how far behind the fastest it is, in
percent. The charts are saved as 2000×1125 PNG images in `PLOT_DIRECTORY`
(default `~/plot`, created if missing), one per case, for example
`~/plot/MergeSort.png`.

## Using the library

The modules can be used directly:

- `compbench.enums` – the enumerations and their names (`name`, `filename`,
  `title`, `tests_to_run`).
- `compbench.datastream` – `DataStream`, a little-endian byte buffer;
  `StreamError` is raised on short or malformed data.
- `compbench.containers` – the records stored in result files
  (`VersionInfo`, `CompilerInfo`, `PlatformInfo`, `TestCaseInfo`,
  `TestCaseContainer`) and `create_container`.
- `compbench.container_io` – `ContainerReader`, `ContainerWriter` and
  `read_containers` for `.raw` files.
- `compbench.cases` – the benchmark cases and `create_case`.
- `compbench.info` – filling and describing compiler and platform records.
- `compbench.runner` – `Platform`, `LinuxPlatform`, `RawLogger`,
  `ElapsedTime`, `create_platform` and `create_logger`.
- `compbench.style`, `compbench.plot` – colours, fonts, `Plot` and `PlotTab`.

Writing and reading a result file:

```python
from compbench.container_io import ContainerWriter, read_containers
from compbench.containers import TestCaseContainer
from compbench.enums import TestType
from compbench.info import populate_compiler, populate_platform

record = TestCaseContainer()
populate_compiler(record.compiler)
populate_platform(record.platform)
record.testcase.id = TestType.MergeSort
record.testcase.duration = 5.0
record.testcase.count = 1_000_000
record.testcase.ips = 200_000

with ContainerWriter("results.raw") as writer:
    writer.write(record)

for container in read_containers("results.raw"):
    print(container.testcase.id, container.testcase.ips)
```

A `ContainerWriter` creates (or truncates) its file at once, collects the
records in memory and writes them all when it is closed.

Running a single case:

```python
from compbench.cases import create_case
from compbench.enums import TestType

case = create_case(TestType.Base64)
print(case.execute(12345))  # 5
```

## What it does not do

`compbench-graph` has no window: it does not show the charts on screen or
let you browse them interactively. It only writes the PNG files.