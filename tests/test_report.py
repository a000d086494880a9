"""Tests for report formatting and file writers."""
import numpy as np
import pytest

from forceconstants.extract import ForceConstant
from surface.fit import ResidualReport

from anpass.io.reader import read_input
from anpass.io.report import (
    format_bias,
    format_pass,
    format_residuals,
    format_stationary_point,
)
from anpass.io.writer import (
    format_force_constants,
    read_force_constants,
    write_force_constants,
    write_recentered_input,
)


@pytest.fixture
def pass_result(sample_data):
    from orchestration.pipeline import Pipeline
    disps, energies, exps = sample_data
    return Pipeline().run_pass(disps, energies, exps)


class TestFormatBias:

    def test_layout(self):
        text = format_bias(np.array([0.001, -0.002, -76.5]))
        lines = text.splitlines()
        assert lines[0] == "INITIAL GUESS AT STATIONARY POINT IS " + f"{-76.5:20.12f}"
        assert lines[1] == "  0.00100000 -0.00200000"


class TestFormatResiduals:

    def test_table(self):
        report = ResidualReport(
            computed=np.array([1.0, 2.0]),
            observed=np.array([1.5, 2.0]),
        )
        lines = format_residuals(report).splitlines()
        assert lines[0] == "POINT            COMPUTED            OBSERVED            RESIDUAL"
        assert lines[1] == f"{1:5d}{1.0:20.12f}{1.5:20.12f}{-0.5:20.8E}"
        assert lines[1].endswith("-5.00000000E-01")
        assert lines[3] == "WEIGHTED SUM OF SQUARED RESIDUALS IS " + f"{0.25:17.8E}"
        assert len(lines) == 4


class TestFormatPass:

    def test_stationary_point_block(self, pass_result):
        text = format_stationary_point(pass_result)
        assert "M I N I M U M" in text
        assert f"WHERE ENERGY IS {pass_result.energy:20.12f}" in text
        assert f"{'AT':>12s}{pass_result.stationary_point[0]:18.10f}" in text
        assert "EIGENVALUE(S) OF HESSIAN, STARTING WITH LOWEST" in text
        assert text.count("EIGENVALUE ") == 2

    def test_long_line_printed(self, pass_result):
        text = format_stationary_point(pass_result)
        want = "".join(f"{v:20.12f}" for v in pass_result.long_line)
        assert want in text.splitlines()

    def test_sections_in_order(self, pass_result):
        text = format_pass(pass_result)
        assert text.index("INITIAL GUESS") < text.index("COMPUTED") < text.index("WHERE ENERGY")


class TestForceConstantFile:

    def test_line_layout(self):
        fcs = [ForceConstant(coords=(1, 1, 0, 0), value=8.358958979225)]
        assert format_force_constants(fcs) == "    1    1    0    0      8.358958979225\n"

    def test_negative_value(self):
        fcs = [ForceConstant(coords=(3, 3, 2, 1), value=-1.231659580792)]
        line = format_force_constants(fcs).rstrip("\n")
        assert len(line) == 40
        assert line.endswith("-1.231659580792")

    def test_write_then_read(self, tmp_path, pass_result):
        path = write_force_constants(tmp_path / 'fort.9903', pass_result.force_constants)
        back = read_force_constants(path)
        assert [fc.coords for fc in back] == [fc.coords for fc in pass_result.force_constants]
        for got, want in zip(back, pass_result.force_constants):
            assert got.value == pytest.approx(want.value, abs=5e-13)

    def test_read_skips_other_lines(self, tmp_path):
        path = tmp_path / 'fort.9903'
        path.write_text("header line\n    1    0    0    0      0.000388752719\n\n")
        fcs = read_force_constants(path)
        assert fcs == [ForceConstant(coords=(1, 0, 0, 0), value=0.000388752719)]


class TestRecenteredInput:

    def test_inserts_stationary_point(self, tmp_path, sample_input):
        long_line = np.array([0.004, -0.0025, -76.3621])
        out = write_recentered_input(sample_input, tmp_path / 'anpass2.in', long_line)
        lines = out.read_text().splitlines()
        idx = lines.index('STATIONARY POINT')
        assert lines[idx + 2] == 'END OF DATA'
        assert lines[idx + 1] == "".join(f"{v:20.12f}" for v in long_line)
        assert lines[-1] == '!INTDER FILE'

    def test_copy_reads_back_as_stationary(self, tmp_path, sample_input):
        long_line = np.array([0.004, -0.0025, -76.3621])
        out = write_recentered_input(sample_input, tmp_path / 'anpass2.in', long_line)
        original = read_input(sample_input)
        copy = read_input(out)
        assert copy.stationary
        np.testing.assert_allclose(copy.bias, long_line)
        np.testing.assert_array_equal(copy.displacements, original.displacements)
        np.testing.assert_array_equal(copy.exponents, original.exponents)
