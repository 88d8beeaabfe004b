import math
import numpy
import pytest
import random

from MathObjects import Exceptions
from MathObjects.LinearAlgebra.Matrix import Matrix


class TestConstruction:
	"""Validated and unvalidated construction."""

	def test_dimensions(self) -> None:
		"""Rows, columns and size follow the data."""
		matrix: Matrix = Matrix([[1, 2, 3], [4, 5, 6]])
		assert (matrix.rows, matrix.columns, matrix.size) == (2, 3, 6)
		assert len(matrix) == matrix.count() == 6

	@pytest.mark.parametrize('data', [[], [[]], [1, 2], [[1], []]])
	def test_empty_or_non_sequence_rows(self, data: list) -> None:
		"""Empty data and non-sequence rows are rejected."""
		with pytest.raises(Exceptions.MatrixException):
			Matrix(data)

	def test_jagged_rows(self) -> None:
		"""Rows must share the same column count."""
		with pytest.raises(Exceptions.MatrixException, match=r'The row \[1\] has a different number of columns'):
			Matrix([[1, 2], [3]])

	def test_row_not_sequence(self) -> None:
		"""Every row must be a sequence."""
		with pytest.raises(Exceptions.MatrixException, match=r'The row \[2\] is not a sequence'):
			Matrix([[1], [2], 3])

	def test_invalid_element(self) -> None:
		"""Non-numeric elements are reported with their position and type."""
		with pytest.raises(Exceptions.MatrixException, match=r"Element \[2\]\[1\] is of type 'str'"):
			Matrix([[1, 2], [3, 4], [5, '6']])

	def test_bool_element(self) -> None:
		"""Booleans are not numeric matrix elements."""
		with pytest.raises(Exceptions.MatrixException):
			Matrix([[True]])

	def test_unvalidated_trusts_input(self) -> None:
		"""Skipping validation accepts the data as given."""
		matrix: Matrix = Matrix([[1, 'x']], False)
		assert matrix.get(0, 1) == 'x'

	def test_tuples_and_numpy(self) -> None:
		"""Tuples and numpy arrays are accepted as input."""
		assert Matrix(((1, 2), (3, 4))).to_array() == [[1, 2], [3, 4]]
		assert Matrix(numpy.array([[1.5, 2.0]])).to_array() == [[1.5, 2.0]]

	def test_input_is_copied(self) -> None:
		"""Later changes to the source rows do not leak into the matrix."""
		rows: list[list[int]] = [[1, 2], [3, 4]]
		matrix: Matrix = Matrix(rows)
		rows[0][0] = 99
		assert matrix.get(0, 0) == 1


class TestFactories:
	"""Factory constructors."""

	def test_fill(self) -> None:
		"""fill sets every cell."""
		assert Matrix.fill(5, 1, -2).to_array() == [[-2]] * 5

	def test_fill_rows_are_independent(self) -> None:
		"""Filled rows do not share storage."""
		matrix: Matrix = Matrix.fill(2, 2, 0)
		matrix.set(0, 0, 1)
		assert matrix.to_array() == [[1, 0], [0, 0]]

	@pytest.mark.parametrize(('rows', 'columns'), [(0, 1), (1, 0), (-4, 5)])
	def test_fill_bad_dimensions(self, rows: int, columns: int) -> None:
		"""Dimensions must be positive."""
		with pytest.raises(Exceptions.OutOfBoundsException):
			Matrix.fill(rows, columns, 1)

	def test_identity(self) -> None:
		"""identity has ones on the diagonal only."""
		assert Matrix.identity(3).to_array() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]

		with pytest.raises(Exceptions.OutOfBoundsException, match='Size 0 is given'):
			Matrix.identity(0)

	def test_random_is_reproducible(self) -> None:
		"""The injected generator determines the values."""
		first: Matrix = Matrix.random(3, 4, -1.0, 1.0, random.Random(7))
		second: Matrix = Matrix.random(3, 4, -1.0, 1.0, random.Random(7))
		assert first == second
		assert all(-1.0 <= x <= 1.0 for row in first for x in row)

	def test_random_int_bounds(self) -> None:
		"""Random integers lie within the inclusive bounds."""
		matrix: Matrix = Matrix.random_int(10, 10, -3, 3, random.Random(1))
		assert all(isinstance(x, int) and -3 <= x <= 3 for row in matrix for x in row)

	def test_random_bad_bounds(self) -> None:
		"""The lower bound may not exceed the upper bound."""
		with pytest.raises(Exceptions.OutOfBoundsException):
			Matrix.random_int(2, 2, 5, 1)

		with pytest.raises(Exceptions.OutOfBoundsException):
			Matrix.random(0, 2)


class TestElementAccess:
	"""get, set, is_set and the tuple-key protocol."""

	def test_get_and_set(self) -> None:
		"""Elements are read and written by zero-based position."""
		matrix: Matrix = Matrix([[1, 2], [3, 4]])
		assert matrix.set(1, 0, 7) is matrix
		assert matrix.get(1, 0) == 7
		assert matrix[1, 0] == 7
		matrix[0, 1] = 2.5
		assert matrix.to_array() == [[1, 2.5], [7, 4]]

	def test_out_of_bounds(self) -> None:
		"""Access outside the extent fails without wrapping."""
		matrix: Matrix = Matrix([[1, 2], [3, 4]])

		with pytest.raises(Exceptions.OutOfBoundsException, match=r'The element \[3\]\[1\] does not exist'):
			matrix.get(3, 1)

		with pytest.raises(IndexError):
			matrix[-1, 0]

	def test_is_set(self) -> None:
		"""is_set and 'in' report existing positions."""
		matrix: Matrix = Matrix([[1, 2, 3]])
		assert matrix.is_set(0, 2)
		assert not matrix.is_set(1, 0)
		assert (0, 1) in matrix
		assert (0, -1) not in matrix

	def test_set_invalid_type(self) -> None:
		"""Only valid elements may be stored."""
		with pytest.raises(Exceptions.MatrixException, match="The type 'str' is incompatible"):
			Matrix([[1]]).set(0, 0, 'a')

	def test_bad_key_format(self) -> None:
		"""Keys must be (row, column) pairs."""
		with pytest.raises(Exceptions.MatrixException):
			Matrix([[1]])[0]

	def test_non_integer_indices(self) -> None:
		"""Indices must be integers and are never truncated."""
		matrix: Matrix = Matrix([[1, 2], [3, 4]])

		with pytest.raises(Exceptions.InvalidArgumentException):
			matrix[1.9, 0.5]

		with pytest.raises(Exceptions.InvalidArgumentException):
			matrix.get(1.9, 0)

		with pytest.raises(Exceptions.InvalidArgumentException):
			matrix.set(0, 1.0, 5)

		with pytest.raises(Exceptions.InvalidArgumentException):
			(True, 0) in matrix

		assert matrix.to_array() == [[1, 2], [3, 4]]

	def test_delete_unsupported(self) -> None:
		"""Elements cannot be removed."""
		with pytest.raises(Exceptions.UnsupportedOperationException):
			del Matrix([[1]])[0, 0]

	def test_iteration_yields_copies(self) -> None:
		"""Iterated rows are detached from the matrix."""
		matrix: Matrix = Matrix([[1, 2], [3, 4]])

		for row in matrix:
			row[0] = 0

		assert matrix.to_array() == [[1, 2], [3, 4]]


class TestArithmetic:
	"""Element-wise and matrix arithmetic."""

	def test_add_subtract(self) -> None:
		"""Adding then subtracting the same operand restores the original."""
		a: Matrix = Matrix([[1, 2], [3, 4]])
		b: Matrix = Matrix([[5, -6], [7, 0]])
		assert a.add(b).to_array() == [[6, -4], [10, 4]]
		assert a.add(b).subtract(b) == a
		assert (a + b - b) == a
		assert a.to_array() == [[1, 2], [3, 4]]

	def test_float_add_subtract_within_tolerance(self) -> None:
		"""Float round trips agree within tolerance."""
		a: Matrix = Matrix.random(3, 3, generator=random.Random(3))
		b: Matrix = Matrix.random(3, 3, generator=random.Random(4))
		assert a.add(b).subtract(b).is_equal(a)

	def test_mutating_add(self) -> None:
		"""m_add modifies and returns the receiver."""
		a: Matrix = Matrix([[1, 2]])
		assert a.m_add(Matrix([[1, 1]])) is a
		a += Matrix([[1, 1]])
		a -= Matrix([[0, 4]])
		assert a.to_array() == [[3, 0]]

	def test_shape_mismatch(self) -> None:
		"""Operands of different shapes cannot be added."""
		with pytest.raises(Exceptions.DimensionException):
			Matrix([[1, 2]]).add(Matrix([[1], [2]]))

		with pytest.raises(Exceptions.DimensionException):
			Matrix([[1, 2]]).m_subtract(Matrix([[1, 2, 3]]))

	def test_wrong_operand_type(self) -> None:
		"""Only matrices and vectors are operands."""
		with pytest.raises(Exceptions.InvalidArgumentException):
			Matrix([[1]]).add(5)

	def test_multiply(self) -> None:
		"""Matrix product follows the row-by-column rule."""
		a: Matrix = Matrix([[1, 2, 3], [4, 5, 6]])
		b: Matrix = Matrix([[7, 8], [9, 10], [11, 12]])
		assert a.multiply(b).to_array() == [[58, 64], [139, 154]]
		assert (a @ b) == a.multiply(b)

	def test_mutating_multiply_changes_shape(self) -> None:
		"""m_multiply takes the operand's column count."""
		a: Matrix = Matrix([[1, 2]])
		a @= Matrix([[1, 0, 2], [0, 1, 3]])
		assert (a.rows, a.columns, a.size) == (1, 3, 3)
		assert a.to_array() == [[1, 2, 8]]

	def test_multiply_incompatible(self) -> None:
		"""The inner dimensions must agree."""
		with pytest.raises(Exceptions.DimensionException):
			Matrix([[1, 2]]).multiply(Matrix([[1, 2]]))

	def test_scalar_and_sign(self) -> None:
		"""Scalar multiplication and negation apply to every element."""
		a: Matrix = Matrix([[1, -2], [0, 4]])
		assert a.multiply_by_scalar(3).to_array() == [[3, -6], [0, 12]]
		assert (2 * a).to_array() == (a * 2).to_array() == [[2, -4], [0, 8]]
		assert (-a).to_array() == a.change_sign().to_array() == [[-1, 2], [0, -4]]
		a.m_change_sign()
		a *= 0.5
		assert a.to_array() == [[-0.5, 1.0], [0, -2.0]]

	def test_scalar_type(self) -> None:
		"""The scalar must be a number."""
		with pytest.raises(Exceptions.InvalidArgumentException):
			Matrix([[1]]).multiply_by_scalar('2')


class TestComparison:
	"""Exact and tolerant equality."""

	def test_exact(self) -> None:
		"""Exact equality compares values and shapes."""
		assert Matrix([[1, 2]]).is_equal_exactly(Matrix([[1.0, 2.0]]))
		assert not Matrix([[1, 2]]).is_equal_exactly(Matrix([[1], [2]]))
		assert Matrix([[1]]) != Matrix([[1.0000001]])

	def test_tolerant(self) -> None:
		"""Tolerant equality accepts small differences."""
		assert Matrix([[1]]).is_equal(Matrix([[1.000000001]]))
		assert not Matrix([[1]]).is_equal(Matrix([[1.1]]))
		assert Matrix([[1]]).is_equal(Matrix([[1.1]]), 0.2)
		assert not Matrix([[1, 2]]).is_equal(Matrix([[1, 2, 3]]))


class TestTransposeAndJoin:
	"""Transpose, joins and submatrices."""

	def test_transpose(self) -> None:
		"""Transposing swaps rows and columns."""
		matrix: Matrix = Matrix([[1, 2, 3], [4, 5, 6]])
		transposed: Matrix = matrix.transpose()
		assert transposed.to_array() == [[1, 4], [2, 5], [3, 6]]
		assert (transposed.rows, transposed.columns) == (3, 2)
		assert transposed.transpose() == matrix

	def test_transpose_single_row(self) -> None:
		"""A single row becomes a single column."""
		matrix: Matrix = Matrix([[1, 2, 3]])
		assert matrix.m_transpose() is matrix
		assert matrix.to_array() == [[1], [2], [3]]
		assert (matrix.rows, matrix.columns) == (3, 1)

	def test_double_transpose_random(self) -> None:
		"""Transposing twice is the identity."""
		matrix: Matrix = Matrix.random_int(4, 7, generator=random.Random(11))
		assert matrix.transpose().transpose() == matrix

	def test_join_right(self) -> None:
		"""Columns of the operand are appended."""
		a: Matrix = Matrix([[1], [2]])
		joined: Matrix = a.join_right(Matrix([[3, 4], [5, 6]]))
		assert joined.to_array() == [[1, 3, 4], [2, 5, 6]]
		assert a.to_array() == [[1], [2]]

		with pytest.raises(Exceptions.DimensionException):
			a.join_right(Matrix([[1]]))

	def test_join_bottom(self) -> None:
		"""Rows of the operand are appended and copied."""
		a: Matrix = Matrix([[1, 2]])
		b: Matrix = Matrix([[3, 4]])
		assert a.m_join_bottom(b) is a
		b.set(0, 0, 0)
		assert a.to_array() == [[1, 2], [3, 4]]
		assert (a.rows, a.size) == (2, 4)

		with pytest.raises(Exceptions.DimensionException):
			a.join_bottom(Matrix([[1]]))

	def test_submatrix(self) -> None:
		"""Corner indices are inclusive."""
		matrix: Matrix = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
		assert matrix.submatrix(1, 1, 2, 2).to_array() == [[5, 6], [8, 9]]
		assert matrix.submatrix(0, 2, 2, 2).to_array() == [[3], [6], [9]]

	@pytest.mark.parametrize('corners', [(-1, 0, 1, 1), (0, 0, 3, 1), (1, 1, 0, 2), (0, 2, 0, 1)])
	def test_submatrix_bounds(self, corners: tuple[int, int, int, int]) -> None:
		"""Blocks outside the matrix are rejected."""
		with pytest.raises(Exceptions.OutOfBoundsException):
			Matrix.fill(3, 3, 0).submatrix(*corners)


class TestEchelon:
	"""Gaussian elimination."""

	def test_ref_without_swaps(self) -> None:
		"""Elimination without pivoting keeps the row order."""
		matrix: Matrix = Matrix([[5, 1, 4], [6, 1, 8]])
		echelon, swaps = matrix.row_echelon(False)
		assert swaps == 0
		assert echelon.is_equal(Matrix([[5, 1, 4], [0, -0.2, 3.2]]))
		assert matrix.m_ref(False) is matrix
		assert matrix.is_equal(echelon)

	def test_ref_with_swaps(self) -> None:
		"""Partial pivoting moves the largest entry up."""
		echelon, swaps = Matrix([[5, 1, 4], [6, 1, 8]]).row_echelon(True)
		assert swaps == 1
		assert echelon.is_equal(Matrix([[6, 1, 8], [0, 1 / 6, 4 - 40 / 6]]))

	def test_ties_do_not_swap(self) -> None:
		"""Equal magnitudes below the pivot do not trigger a swap."""
		_, swaps = Matrix([[2, 1], [-2, 3]]).row_echelon()
		assert swaps == 0

	def test_zero_column_advances_column_only(self) -> None:
		"""A zero column leaves the pivot row in place for the next column."""
		echelon: Matrix = Matrix([[0, 1, 2], [0, 2, 5]]).ref()
		assert echelon.is_equal(Matrix([[0, 2, 5], [0, 0, -0.5]]))

	def test_zero_pivot_without_swaps(self) -> None:
		"""A zero pivot without pivoting is a division by zero."""
		with pytest.raises(Exceptions.DivisionByZeroException):
			Matrix([[0, 1], [1, 0]]).ref(False)

		with pytest.raises(ZeroDivisionError):
			Matrix([[0, 1], [1, 0]]).row_echelon(False)

	def test_zero_snapping(self) -> None:
		"""Residues below the tolerance become exact zeros."""
		echelon: Matrix = Matrix([[3, 1], [1, 1 / 3 + 1e-12]]).ref(True, 1e-9)
		assert echelon.get(1, 1) == 0

	def test_rref(self) -> None:
		"""The reduced form has unit pivots alone in their columns."""
		matrix: Matrix = Matrix([[2, 1, -1, 8], [-3, -1, 2, -11], [-2, 1, 2, -3]])
		reduced: Matrix = matrix.rref()
		assert reduced.is_equal(Matrix([[1, 0, 0, 2], [0, 1, 0, 3], [0, 0, 1, -1]]))
		assert matrix.m_rref() is matrix
		assert matrix.is_equal(reduced)

	def test_rref_rank_deficient(self) -> None:
		"""Columns without pivots are skipped."""
		reduced: Matrix = Matrix([[1, 2, 3], [2, 4, 7]]).rref()
		assert reduced.is_equal(Matrix([[1, 2, 0], [0, 0, 1]]))

	def test_ref_results_are_independent(self) -> None:
		"""Returned forms do not alias the cache."""
		matrix: Matrix = Matrix([[4, 2], [2, 3]])
		first: Matrix = matrix.ref()
		first.set(0, 0, 100)
		assert matrix.ref().get(0, 0) == 4


class TestDeterminantAndTrace:
	"""Determinant and trace."""

	@pytest.mark.parametrize('size', [1, 2, 3, 4, 7])
	def test_identity(self, size: int) -> None:
		"""The identity has determinant one and trace n."""
		identity: Matrix = Matrix.identity(size)
		assert identity.determinant() == 1
		assert identity.trace() == size

	def test_closed_forms(self) -> None:
		"""Small matrices use the cofactor formulas."""
		assert Matrix([[-4]]).determinant() == -4
		assert Matrix([[1, 2], [3, 4]]).determinant() == -2
		assert Matrix([[2, -3, 1], [2, 0, -1], [1, 4, 5]]).determinant() == 49

	def test_elimination_path(self) -> None:
		"""Larger matrices are eliminated without pivoting."""
		matrix: Matrix = Matrix([[4, 3, 2, 1], [3, 4, 3, 2], [2, 3, 4, 3], [1, 2, 3, 4]])
		assert matrix.determinant() == pytest.approx(numpy.linalg.det(matrix.to_numpy()))
		assert matrix.determinant() == pytest.approx(20)

	def test_agrees_with_numpy(self) -> None:
		"""Elimination agrees with numpy for well-conditioned matrices."""
		matrix: Matrix = Matrix.random(5, 5, 1, 2, random.Random(5)).m_add(Matrix.identity(5).m_multiply_by_scalar(10))
		assert matrix.determinant() == pytest.approx(numpy.linalg.det(matrix.to_numpy()))

	def test_identical_rows(self) -> None:
		"""Linearly dependent rows give exactly zero."""
		assert Matrix([[1, 2], [1, 2]]).determinant() == 0
		assert Matrix([[1, 2, 3], [4, 5, 6], [1, 2, 3]]).determinant() == 0
		assert Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [1, 2, 3, 4], [9, 1, 2, 3]]).determinant() == 0

	def test_identical_float_rows(self) -> None:
		"""Repeated float rows give exactly zero through the closed formulas too."""
		generator: random.Random = random.Random(17)

		for size in (2, 3):
			for _ in range(100):
				rows: list[list[float]] = Matrix.random(size, size, -10, 10, generator).to_array()
				rows[-1] = list(rows[0])
				assert Matrix(rows).determinant() == 0

	@pytest.mark.parametrize('rows', [
		[[1, 2], [3, 4]],
		[[4.5, 7], [2, -6.25]],
		[[2, -3, 1], [2, 0, -1], [1, 4, 5]],
		[[6, 1, 1], [4, -2, 5], [2, 8, 7]],
		[[0.5, 1.5, -2], [3, 0.25, 1], [-1, 2, 4]],
	])
	def test_closed_forms_agree_with_elimination(self, rows: list[list[float]]) -> None:
		"""The 2x2 and 3x3 formulas match the product of the echelon diagonal."""
		matrix: Matrix = Matrix(rows)
		echelon, swaps = matrix.row_echelon(False)
		eliminated: float = (-1) ** swaps * math.prod(echelon.get(i, i) for i in range(matrix.rows))
		assert matrix.determinant() == pytest.approx(eliminated)

	def test_zero_pivot_yields_zero(self) -> None:
		"""A zero pivot in the no-swap elimination is reported as a zero determinant."""
		matrix: Matrix = Matrix([[0, 1, 0, 0], [1, 0, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
		assert matrix.determinant() == 0

	def test_non_square(self) -> None:
		"""Only square matrices have a determinant or trace."""
		with pytest.raises(Exceptions.MatrixException):
			Matrix([[1, 2]]).determinant()

		with pytest.raises(Exceptions.MatrixException, match='only defined for a square matrix'):
			Matrix([[1, 2]]).trace()


class TestCaching:
	"""Caching of derived values."""

	def test_values_are_cached(self) -> None:
		"""Derived values populate the cache."""
		matrix: Matrix = Matrix([[1, 2], [3, 4]])
		assert not matrix.cached
		matrix.trace()
		assert matrix.cached

	def test_mutation_invalidates(self) -> None:
		"""Every mutation drops all cached values."""
		matrix: Matrix = Matrix([[1, 2], [3, 4]])
		assert matrix.determinant() == -2
		assert matrix.trace() == 5
		matrix.set(0, 0, 2)
		assert not matrix.cached
		assert matrix.determinant() == 2
		assert matrix.trace() == 6
		matrix.m_multiply_by_scalar(2)
		assert matrix.determinant() == 8

	def test_ref_cache_after_mutation(self) -> None:
		"""Echelon forms are recomputed after a mutation."""
		matrix: Matrix = Matrix([[1, 2], [3, 4]])
		matrix.rref()
		matrix.m_transpose()
		assert matrix.ref(False).is_equal(Matrix([[1, 3], [0, -2]]))

	def test_disabled_caching(self) -> None:
		"""With caching disabled nothing is stored."""
		matrix: Matrix = Matrix([[1, 2], [3, 4]])
		matrix.trace()
		matrix.caching = False
		assert not matrix.caching
		assert not matrix.cached
		matrix.determinant()
		matrix.ref()
		matrix.rref()
		assert not matrix.cached

	def test_ref_cache_respects_parameters(self) -> None:
		"""Cached echelon forms are only reused for the same parameters."""
		matrix: Matrix = Matrix([[5, 1, 4], [6, 1, 8]])
		assert matrix.row_echelon(True)[1] == 1
		assert matrix.row_echelon(False)[1] == 0


class TestConversion:
	"""Conversions and rendering."""

	def test_to_string(self) -> None:
		"""Each row renders as a bracketed line."""
		matrix: Matrix = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
		assert matrix.to_string() == '[1, 2, 3]\n[4, 5, 6]\n[7, 8, 9]'
		assert str(matrix) == matrix.to_string()

	def test_repr(self) -> None:
		"""repr shows the type and dimensions."""
		assert repr(Matrix([[1, 2, 3]])).startswith('<Matrix 1x3 @ 0x')

	def test_to_array_is_copy(self) -> None:
		"""Modifying the exported rows does not change the matrix."""
		matrix: Matrix = Matrix([[1, 2]])
		matrix.to_array()[0][0] = 5
		assert matrix.get(0, 0) == 1

	def test_to_numpy(self) -> None:
		"""to_numpy exports a float array."""
		array: numpy.ndarray = Matrix([[1, 2], [3, 4]]).to_numpy()
		assert array.dtype == float
		assert array.shape == (2, 2)
		assert numpy.array_equal(array, [[1.0, 2.0], [3.0, 4.0]])

	def test_copy_and_square(self) -> None:
		"""Copies are independent and is_square checks the shape."""
		matrix: Matrix = Matrix([[1, 2], [3, 4]])
		copied: Matrix = matrix.copy()
		copied.set(0, 0, 0)
		assert matrix.get(0, 0) == 1
		assert matrix.is_square()
		assert not Matrix([[1, 2]]).is_square()
