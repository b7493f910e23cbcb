"""
Tests for the interactive console, driven through in-memory streams.
"""

import io

import pytest

from pylinear.cli import Console, build_parser, main


def run_session(lines, dtype='int'):
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    stderr = io.StringIO()
    status = Console(dtype=dtype, stdin=stdin, stdout=stdout, stderr=stderr).run()
    return status, stdout.getvalue(), stderr.getvalue()


def matrix_entry(first, second):
    """Menu input for option 1 followed by two matrices."""
    lines = [1]
    for rows in (first, second):
        lines += [len(rows), len(rows[0]) if rows else 0]
        lines += [value for row in rows for value in row]
    return lines


def vector_entry(first, second):
    lines = [2]
    for values in (first, second):
        lines += [len(values), *values]
    return lines


class TestMainMenu:

    def test_exit(self):
        status, out, _ = run_session([3])
        assert status == 0
        assert "Exiting program." in out

    def test_invalid_choice(self):
        _, out, _ = run_session([7, 3])
        assert "Invalid choice. Please enter a number between 1 and 3." in out

    def test_non_numeric_reprompts(self):
        _, out, err = run_session(["abc", 3])
        assert "Please enter a number" in err
        assert "Exiting program." in out

    def test_end_of_input_exits_cleanly(self):
        status, _, _ = run_session([1, 2])
        assert status == 0


class TestMatrixSession:

    def test_addition_and_back(self):
        lines = matrix_entry([[1, 2], [3, 4]], [[10, 20], [30, 40]]) + [1, 10, 3]
        _, out, err = run_session(lines)
        assert "Matrix 1:\n1 2\n3 4" in out
        assert "Matrix Addition Result:\n11 22\n33 44" in out
        assert err == ""

    def test_failure_reported_and_menu_continues(self):
        # 2x2 + 1x3 fails, then determinant still works on matrix 1
        lines = matrix_entry([[1, 2], [3, 4]], [[1, 2, 3]]) + [1, 9, 10, 3]
        _, out, err = run_session(lines)
        assert "matrix addition: operand dimensions must match" in err
        assert "Determinant of Matrix 1: -2" in out
        assert "only supported for 2x2" in err
        assert "Exiting program." in out

    def test_scalar_multiplication(self):
        lines = matrix_entry([[1, 2]], [[0, 0]]) + [3, 5, 10, 3]
        _, out, _ = run_session(lines)
        assert "Scalar Multiplication Result:\n5 10" in out

    def test_scalar_outside_int64_reprompts(self):
        lines = matrix_entry([[1, 2]], [[0, 0]]) + [3, "99999999999999999999", 2, 10, 3]
        _, out, err = run_session(lines)
        assert "out of range" in err
        assert "Scalar Multiplication Result:\n2 4" in out

    def test_norm_both_matrices(self):
        lines = matrix_entry([[3, 4]], [[0, 5]]) + [6, 10, 3]
        _, out, _ = run_session(lines)
        assert "Norm of Matrix 1: 5" in out
        assert "Norm of Matrix 2: 5" in out

    def test_eigenvalues(self):
        lines = matrix_entry([[2, 0], [0, 3]], [[1, 0], [0, 1]]) + [8, 10, 3]
        _, out, _ = run_session(lines)
        assert "Eigenvalues of Matrix 1: 3 2" in out
        assert "Eigenvalues of Matrix 2: 1 1" in out

    def test_int_inverse_truncation_warning(self):
        lines = matrix_entry([[4, 7], [2, 6]], [[1, 0], [0, 1]]) + [7, 10, 3]
        _, out, err = run_session(lines)
        assert "Inverse of Matrix 1:\n0 0\n0 0" in out
        assert "warning: inverse" in err

    def test_float_inverse(self):
        lines = matrix_entry([[4, 7], [2, 6]], [[1, 0], [0, 1]]) + [7, 10, 3]
        _, out, _ = run_session(lines, dtype='float')
        assert "Inverse of Matrix 1:" in out
        assert "0.6" in out

    def test_singular_inverse(self):
        lines = matrix_entry([[1, 2], [2, 4]], [[1, 0], [0, 1]]) + [7, 10, 3]
        _, _, err = run_session(lines)
        assert "singular" in err

    def test_invalid_matrix_choice(self):
        lines = matrix_entry([[1]], [[1]]) + [11, 10, 3]
        _, out, _ = run_session(lines)
        assert "Invalid choice. Please enter a number between 1 and 10." in out

    def test_negative_size_reprompts(self):
        lines = [1, -2, 1, 1, 7, 1, 1, 8, 10, 3]
        _, out, err = run_session(lines)
        assert "non-negative" in err
        assert "Matrix 1:\n7" in out


class TestVectorSession:

    def test_operations(self):
        lines = vector_entry([1, 2, 3], [4, 5, 6]) + [1, 2, 3, 4, 3]
        _, out, _ = run_session(lines)
        assert "Vector 1:\n1 2 3" in out
        assert "Vector Addition Result:\n5 7 9" in out
        assert "Vector Subtraction Result:\n-3 -3 -3" in out
        assert "Vector Inner Product Result:\n32" in out

    def test_length_mismatch(self):
        lines = vector_entry([1, 2], [1, 2, 3]) + [3, 4, 3]
        _, out, err = run_session(lines)
        assert "vector dimensions must match" in err
        assert "Exiting program." in out

    def test_invalid_vector_choice(self):
        lines = vector_entry([1], [1]) + [0, 4, 3]
        _, out, _ = run_session(lines)
        assert "Invalid choice. Please enter a number between 1 and 4." in out

    def test_float_elements(self):
        lines = vector_entry([0.5, 1.5], [1, 1]) + [1, 4, 3]
        _, out, _ = run_session(lines, dtype='float')
        assert "Vector Addition Result:\n1.5 2.5" in out

    def test_float_rejected_for_int_session(self):
        lines = [2, 1, "1.5", 2, 1, 3, 1, 4, 3]
        _, out, err = run_session(lines)
        assert "Please enter a number" in err
        assert "Vector Addition Result:\n5" in out

    def test_element_outside_int64_reprompts(self):
        lines = [2, 1, "99999999999999999999", 5, 1, 6, 1, 4, 3]
        status, out, err = run_session(lines)
        assert status == 0
        assert "out of range" in err
        assert "Vector Addition Result:\n11" in out

    @pytest.mark.parametrize("bad", ["nan", "inf", "1e400"])
    def test_non_finite_rejected_for_float_session(self, bad):
        lines = [2, 1, bad, 1.5, 1, 1, 1, 4, 3]
        _, out, err = run_session(lines, dtype='float')
        assert "finite" in err
        assert "Vector Addition Result:\n2.5" in out


class TestArguments:

    def test_default_dtype(self):
        assert build_parser().parse_args([]).dtype == 'int'

    def test_float_dtype(self):
        assert build_parser().parse_args(['--dtype', 'float']).dtype == 'float'

    def test_bad_dtype(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--dtype', 'complex'])

    def test_main_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO("3\n"))
        assert main([]) == 0
        assert "Exiting program." in capsys.readouterr().out
