import re

import numpy as np

from matbench.bench.run_matmul import N, format_row, main, run_matmul
from matbench.kernels.generate import generate_matrix
from matbench.kernels.matmul_baseline import matmul_baseline
from matbench.timing import elapsed, timestamp, timestamp_diff


def test_format_row_round_trips():
    row = np.array([0.1, -0.25, 1e-20, 3.0])
    text = format_row(row)
    assert text == "[0.1, -0.25, 1e-20, 3.0]"
    values = [float(v) for v in text[1:-1].split(", ")]
    assert values == row.tolist()


def test_run_matmul_small():
    C, run_time = run_matmul(2)
    np.testing.assert_array_equal(C, np.array([[-0.0625, 0.0], [0.0, -0.0625]]))
    assert run_time >= 0.0


def test_main_output(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()

    assert N == 50
    assert len(lines) == N + 1

    A = generate_matrix(N)
    expected = matmul_baseline(A, A)
    for i, line in enumerate(lines[:N]):
        assert line.startswith("[") and line.endswith("]")
        values = [float(v) for v in line[1:-1].split(", ")]
        assert len(values) == N
        assert values == expected[i].tolist()

    m = re.fullmatch(r"Finished\. Run time = (\d+\.\d+) seconds\.", lines[-1])
    assert m is not None
    assert float(m.group(1)) >= 0.0


def test_timestamps():
    ts1 = timestamp()
    ts2 = timestamp()
    assert elapsed(ts1) >= 0.0
    assert timestamp_diff(ts2, ts1) >= 0.0
    assert timestamp_diff(1.0, 3.5) == -2.5
    assert timestamp_diff(3.5, 1.0) == 2.5
