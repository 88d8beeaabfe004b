from __future__ import annotations

import math
import numpy
import random
import typing

from .. import Exceptions
from .. import Misc
from ..Math import Functions
from . import Validators


class Matrix:
	"""
	Class representing a dense two-dimensional numeric matrix
	Methods prefixed with 'm_' modify this matrix in-place and return it; all others leave it untouched
	Trace, determinant and echelon forms are cached until the next modification
	Instances are not synchronized; sharing one between threads requires external locking
	"""

	ELEMENT_VALIDATOR: Validators.ElementValidator = Validators.NumericValidator()

	@classmethod
	def fill(cls, rows: int, columns: int, value: float) -> Matrix:
		"""
		Creates a matrix with all cells set to the specified value
		:param rows: The number of rows
		:param columns: The number of columns
		:param value: The value for all matrix cells
		:return: The filled matrix
		:raises OutOfBoundsException: If either dimension is not positive
		:raises MatrixException: If the value is not a valid matrix element
		"""

		Misc.raise_if(rows <= 0 or columns <= 0, Exceptions.OutOfBoundsException(f'Matrix dimensions must be greater than zero. Rows {rows} and columns {columns} are given'))
		return cls([[value] * columns for _ in range(rows)])

	@classmethod
	def identity(cls, size: int) -> Matrix:
		"""
		Creates a square identity matrix
		:param size: The number of rows and columns
		:return: The identity matrix
		:raises OutOfBoundsException: If the size is not positive
		"""

		Misc.raise_if(size <= 0, Exceptions.OutOfBoundsException(f'Size of identity matrix must be greater than zero. Size {size} is given.'))
		return cls([[1 if i == j else 0 for j in range(size)] for i in range(size)], False)

	@classmethod
	def random(cls, rows: int, columns: int, _min: float = 0.0, _max: float = 1.0, generator: typing.Optional[random.Random] = None) -> Matrix:
		"""
		Creates a matrix of uniformly distributed random floats
		:param rows: The number of rows
		:param columns: The number of columns
		:param _min: The lower bound
		:param _max: The upper bound
		:param generator: The random source to draw from or None to use a fresh generator
		:return: The random matrix
		:raises OutOfBoundsException: If either dimension is not positive or the lower bound exceeds the upper bound
		"""

		cls.__check_random_bounds__(rows, columns, _min, _max)
		generator = random.Random() if generator is None else generator
		return cls([[generator.uniform(_min, _max) for _ in range(columns)] for _ in range(rows)], False)

	@classmethod
	def random_int(cls, rows: int, columns: int, _min: int = 0, _max: int = 100, generator: typing.Optional[random.Random] = None) -> Matrix:
		"""
		Creates a matrix of uniformly distributed random integers
		:param rows: The number of rows
		:param columns: The number of columns
		:param _min: The inclusive lower bound
		:param _max: The inclusive upper bound
		:param generator: The random source to draw from or None to use a fresh generator
		:return: The random matrix
		:raises OutOfBoundsException: If either dimension is not positive or the lower bound exceeds the upper bound
		"""

		cls.__check_random_bounds__(rows, columns, _min, _max)
		generator = random.Random() if generator is None else generator
		return cls([[generator.randint(int(_min), int(_max)) for _ in range(columns)] for _ in range(rows)], False)

	@staticmethod
	def __check_random_bounds__(rows: int, columns: int, _min: float, _max: float) -> None:
		Misc.raise_if(rows <= 0 or columns <= 0, Exceptions.OutOfBoundsException(f'Matrix dimensions must be greater than zero. Rows {rows} and columns {columns} are given'))
		Misc.raise_if(_min > _max, Exceptions.OutOfBoundsException(f'The lower bound {_min} is greater than the upper bound {_max}'))

	@staticmethod
	def __is_operand__(value: typing.Any) -> bool:
		"""
		INTERNAL METHOD
		:param value: The object to check
		:return: Whether the object is a matrix or wraps one
		"""

		return isinstance(value, Matrix) or (hasattr(value, '__as_matrix__') and not isinstance(value, type))

	@staticmethod
	def __operand__(caller: typing.Callable, parameter_name: str, value: typing.Any) -> Matrix:
		"""
		INTERNAL METHOD
		Resolves an operand into the matrix holding its data
		:param caller: The operation receiving the operand
		:param parameter_name: The operand's parameter name
		:param value: The operand
		:return: The operand's matrix
		:raises InvalidArgumentException: If the operand is neither a matrix nor a vector
		"""

		if isinstance(value, Matrix):
			return value
		elif Matrix.__is_operand__(value):
			return value.__as_matrix__()

		raise Exceptions.InvalidArgumentException(caller, parameter_name, type(value), ('Matrix', 'Vector'))

	@staticmethod
	def __eliminate__(matrix: list[list[float]], do_swaps: bool, zero_tolerance: float) -> int:
		"""
		INTERNAL METHOD
		Brings the rows into row echelon form in-place using gaussian elimination
		:param matrix: The rows to reduce
		:param do_swaps: Whether to use partial pivoting
		:param zero_tolerance: Results smaller than this are stored as exact zero
		:return: The number of row swaps performed
		:raises DivisionByZeroException: If a pivot is zero and swapping is disabled
		"""

		rows: int = len(matrix)
		columns: int = len(matrix[0])
		swaps: int = 0
		row: int = 0
		column: int = 0

		while row < rows and column < columns:
			pivot_row: int = max(range(row, rows), key=lambda i: abs(matrix[i][column]))

			# Nothing to eliminate in this column; the same row is tried against the next column
			if matrix[pivot_row][column] == 0:
				column += 1
				continue

			if do_swaps and pivot_row != row:
				matrix[row], matrix[pivot_row] = matrix[pivot_row], matrix[row]
				swaps += 1

			pivot_values: list[float] = matrix[row]
			pivot: float = pivot_values[column]

			if pivot == 0:
				raise Exceptions.DivisionByZeroException(f'Pivot [{row}][{column}] is zero and row swaps are disabled')

			for i in range(row + 1, rows):
				current: list[float] = matrix[i]
				multiplier: float = current[column] / pivot
				current[column] = 0

				for j in range(column + 1, columns):
					value: float = current[j] - multiplier * pivot_values[j]
					current[j] = 0 if abs(value) < zero_tolerance else value

			row += 1
			column += 1

		return swaps

	@staticmethod
	def __back_substitute__(matrix: list[list[float]], zero_tolerance: float) -> None:
		"""
		INTERNAL METHOD
		Brings rows already in row echelon form into reduced row echelon form in-place
		:param matrix: The rows to reduce
		:param zero_tolerance: Results smaller than this are stored as exact zero
		"""

		columns: int = len(matrix[0])

		for row, values in enumerate(matrix):
			column: typing.Optional[int] = next((j for j, value in enumerate(values) if value != 0), None)

			if column is None:
				continue

			pivot: float = values[column]
			values[column] = 1

			for j in range(column + 1, columns):
				values[j] /= pivot

			for i in range(row):
				upper: list[float] = matrix[i]
				multiplier: float = upper[column]
				upper[column] = 0

				for j in range(column + 1, columns):
					value: float = upper[j] - multiplier * values[j]
					upper[j] = 0 if abs(value) < zero_tolerance else value

	def __init__(self, matrix: typing.Iterable[typing.Iterable[float]] | numpy.ndarray, validate: bool = True):
		"""
		Class representing a dense two-dimensional numeric matrix
		- Constructor -
		Skipping validation is meant for data already known to be well-formed; invalid data then produces an invalid matrix
		:param matrix: The rows of the matrix
		:param validate: Whether to check the shape and element types
		:raises MatrixException: If validation is requested and the data is empty, jagged or holds invalid elements
		"""

		if isinstance(matrix, numpy.ndarray):
			matrix = matrix.tolist()

		self.__matrix__: list[list[float]] = list(matrix)
		self.__rows__: int = len(self.__matrix__)

		if validate:
			self.__validate__()

		first: typing.Any = self.__matrix__[0] if self.__rows__ > 0 else None
		self.__columns__: int = len(first) if isinstance(first, (list, tuple)) else 0
		self.__size__: int = self.__rows__ * self.__columns__
		self.__caching__: bool = True
		self.__cached__: bool = False
		self.__trace_cache__: typing.Optional[float] = None
		self.__determinant_cache__: typing.Optional[float] = None
		self.__ref_cache__: typing.Optional[tuple[list[list[float]], int, bool, float]] = None
		self.__rref_cache__: typing.Optional[tuple[list[list[float]], float]] = None

	def __validate__(self) -> None:
		"""
		INTERNAL METHOD
		Checks the matrix shape and element types, copying every row into a list
		:raises MatrixException: If the data is empty, jagged or holds invalid elements
		"""

		Misc.raise_if(self.__rows__ == 0 or not isinstance(self.__matrix__[0], (list, tuple)) or len(self.__matrix__[0]) == 0, Exceptions.MatrixException('Matrix cannot be empty or contain empty rows or rows with non-sequence elements.'))
		columns: int = len(self.__matrix__[0])

		for row_index, row in enumerate(self.__matrix__):
			Misc.raise_ifn(isinstance(row, (list, tuple)), Exceptions.MatrixException(f'The matrix must be a sequence of sequences. The row [{row_index}] is not a sequence.'))
			Misc.raise_ifn(len(row) == columns, Exceptions.MatrixException(f'All matrix rows must have the same number of columns. The row [{row_index}] has a different number of columns.'))
			column_index: typing.Optional[int] = self.ELEMENT_VALIDATOR.first_invalid(row)

			if column_index is not None:
				raise Exceptions.MatrixException(f'Elements of a numeric matrix must be either integer or float. Element [{row_index}][{column_index}] is of type \'{self.ELEMENT_VALIDATOR.describe(row[column_index])}\'.')

			self.__matrix__[row_index] = list(row)

	def __invalidate__(self) -> None:
		"""
		INTERNAL METHOD
		Drops every cached value
		"""

		if self.__cached__:
			self.__trace_cache__ = None
			self.__determinant_cache__ = None
			self.__ref_cache__ = None
			self.__rref_cache__ = None
			self.__cached__ = False

	def __clone__(self) -> Matrix:
		"""
		INTERNAL METHOD
		:return: An unvalidated deep copy of this matrix
		"""

		return type(self)([row.copy() for row in self.__matrix__], False)

	def __position__(self, position: typing.Any) -> tuple[int, int]:
		"""
		INTERNAL METHOD
		:param position: A (row, column) pair
		:return: The validated pair
		:raises MatrixException: If the position is not a pair
		"""

		Misc.raise_ifn(isinstance(position, (tuple, list)) and len(position) == 2, Exceptions.MatrixException('Wrong format of element access. A (row, column) pair is expected.'))
		return position[0], position[1]

	def __require_same_shape__(self, other: Matrix, action: str) -> None:
		if self.__rows__ != other.__rows__ or self.__columns__ != other.__columns__:
			raise Exceptions.DimensionException(f'Cannot {action} matrix of dimension {Misc.format_dimensions(other.__rows__, other.__columns__)} and matrix of dimension {Misc.format_dimensions(self.__rows__, self.__columns__)}')

	def __echelon__(self, do_swaps: bool, zero_tolerance: float) -> tuple[list[list[float]], int]:
		"""
		INTERNAL METHOD
		:param do_swaps: Whether to use partial pivoting
		:param zero_tolerance: Results smaller than this are stored as exact zero
		:return: The (possibly cached) row echelon rows and the number of row swaps
		:raises DivisionByZeroException: If a pivot is zero and swapping is disabled
		"""

		if self.__ref_cache__ is not None:
			matrix, swaps, cached_swaps, cached_tolerance = self.__ref_cache__

			if cached_swaps == do_swaps and cached_tolerance == zero_tolerance:
				return matrix, swaps

		matrix: list[list[float]] = [row.copy() for row in self.__matrix__]
		swaps: int = Matrix.__eliminate__(matrix, do_swaps, zero_tolerance)

		if self.__caching__:
			self.__ref_cache__ = (matrix, swaps, do_swaps, zero_tolerance)
			self.__cached__ = True

		return matrix, swaps

	def __reduced_echelon__(self, zero_tolerance: float) -> list[list[float]]:
		"""
		INTERNAL METHOD
		:param zero_tolerance: Results smaller than this are stored as exact zero
		:return: The (possibly cached) reduced row echelon rows
		"""

		if self.__rref_cache__ is not None and self.__rref_cache__[1] == zero_tolerance:
			return self.__rref_cache__[0]

		# Any cached echelon form reduces to the same result
		echelon: list[list[float]] = self.__ref_cache__[0] if self.__ref_cache__ is not None else self.__echelon__(True, zero_tolerance)[0]
		matrix: list[list[float]] = [row.copy() for row in echelon]
		Matrix.__back_substitute__(matrix, zero_tolerance)

		if self.__caching__:
			self.__rref_cache__ = (matrix, zero_tolerance)
			self.__cached__ = True

		return matrix

	def __as_matrix__(self) -> Matrix:
		return self

	def __len__(self) -> int:
		"""
		:return: The number of cells in this matrix
		"""

		return self.__size__

	def __iter__(self) -> typing.Iterator[list[float]]:
		"""
		:return: An iterator over copies of this matrix's rows
		"""

		for row in self.__matrix__:
			yield list(row)

	def __repr__(self) -> str:
		return f'<{type(self).__name__} {Misc.format_dimensions(self.__rows__, self.__columns__)} @ {hex(id(self))}>'

	def __str__(self) -> str:
		return '\n'.join(f'[{", ".join(str(x) for x in row)}]' for row in self.__matrix__).strip()

	def __getitem__(self, position: tuple[int, int]) -> float:
		"""
		:param position: The zero-indexed (row, column) pair
		:return: The element at the position
		:raises MatrixException: If the position is not a pair
		:raises OutOfBoundsException: If the element does not exist
		"""

		return self.get(*self.__position__(position))

	def __setitem__(self, position: tuple[int, int], value: float) -> None:
		"""
		:param position: The zero-indexed (row, column) pair
		:param value: The new element value
		:raises MatrixException: If the position is not a pair or the value is not a valid element
		:raises OutOfBoundsException: If the element does not exist
		"""

		self.set(*self.__position__(position), value)

	def __delitem__(self, position: tuple[int, int]) -> None:
		"""
		Elements of a dense matrix cannot be removed
		:raises UnsupportedOperationException: Always
		"""

		raise Exceptions.UnsupportedOperationException('The matrix elements cannot be removed.')

	def __contains__(self, position: tuple[int, int]) -> bool:
		"""
		:param position: The zero-indexed (row, column) pair
		:return: Whether the element exists
		:raises MatrixException: If the position is not a pair
		"""

		return self.is_set(*self.__position__(position))

	def __eq__(self, other: typing.Any) -> bool:
		if Matrix.__is_operand__(other):
			return self.is_equal_exactly(other)

		return NotImplemented

	def __add__(self, other: Matrix) -> Matrix:
		if Matrix.__is_operand__(other):
			return self.add(other)

		return NotImplemented

	def __sub__(self, other: Matrix) -> Matrix:
		if Matrix.__is_operand__(other):
			return self.subtract(other)

		return NotImplemented

	def __matmul__(self, other: Matrix) -> Matrix:
		if Matrix.__is_operand__(other):
			return self.multiply(other)

		return NotImplemented

	def __mul__(self, other: float) -> Matrix:
		if isinstance(other, (int, float)) and not isinstance(other, bool):
			return self.multiply_by_scalar(other)

		return NotImplemented

	def __rmul__(self, other: float) -> Matrix:
		return self.__mul__(other)

	def __iadd__(self, other: Matrix) -> Matrix:
		if Matrix.__is_operand__(other):
			return self.m_add(other)

		return NotImplemented

	def __isub__(self, other: Matrix) -> Matrix:
		if Matrix.__is_operand__(other):
			return self.m_subtract(other)

		return NotImplemented

	def __imatmul__(self, other: Matrix) -> Matrix:
		if Matrix.__is_operand__(other):
			return self.m_multiply(other)

		return NotImplemented

	def __imul__(self, other: float) -> Matrix:
		if isinstance(other, (int, float)) and not isinstance(other, bool):
			return self.m_multiply_by_scalar(other)

		return NotImplemented

	def __neg__(self) -> Matrix:
		return self.change_sign()

	def __pos__(self) -> Matrix:
		return self.copy()

	def is_set(self, row: int, column: int) -> bool:
		"""
		:param row: The zero-indexed row
		:param column: The zero-indexed column
		:return: Whether the element exists
		:raises InvalidArgumentException: If an index is not an integer
		"""

		Misc.raise_ifn(isinstance(row, int) and not isinstance(row, bool), Exceptions.InvalidArgumentException(self.is_set, 'row', type(row), (int,)))
		Misc.raise_ifn(isinstance(column, int) and not isinstance(column, bool), Exceptions.InvalidArgumentException(self.is_set, 'column', type(column), (int,)))
		return 0 <= row < len(self.__matrix__) and isinstance(self.__matrix__[row], (list, tuple)) and 0 <= column < len(self.__matrix__[row])

	def get(self, row: int, column: int) -> float:
		"""
		:param row: The zero-indexed row
		:param column: The zero-indexed column
		:return: The element
		:raises OutOfBoundsException: If the element does not exist
		"""

		Misc.raise_ifn(self.is_set(row, column), Exceptions.OutOfBoundsException(f'The element [{row}][{column}] does not exist.'))
		return self.__matrix__[row][column]

	def set(self, row: int, column: int, value: float) -> Matrix:
		"""
		Replaces a single element
		:param row: The zero-indexed row
		:param column: The zero-indexed column
		:param value: The new element value
		:return: This matrix
		:raises OutOfBoundsException: If the element does not exist
		:raises MatrixException: If the value is not a valid element
		"""

		Misc.raise_ifn(self.is_set(row, column), Exceptions.OutOfBoundsException(f'The element [{row}][{column}] does not exist.'))
		Misc.raise_ifn(self.ELEMENT_VALIDATOR.is_valid(value), Exceptions.MatrixException(f'The type \'{self.ELEMENT_VALIDATOR.describe(value)}\' is incompatible with the given Matrix instance.'))
		self.__matrix__[row][column] = value
		self.__invalidate__()
		return self

	def add(self, term: Matrix) -> Matrix:
		"""
		Adds another matrix element-wise
		:param term: The matrix to add
		:return: The sum
		:raises DimensionException: If the dimensions do not match
		"""

		term = Matrix.__operand__(self.add, 'term', term)
		self.__require_same_shape__(term, 'add')
		return self.__clone__().m_add(term)

	def m_add(self, term: Matrix) -> Matrix:
		"""
		Adds another matrix element-wise in-place
		:param term: The matrix to add
		:return: This matrix
		:raises DimensionException: If the dimensions do not match
		"""

		term = Matrix.__operand__(self.m_add, 'term', term)
		self.__require_same_shape__(term, 'add')

		for row_left, row_right in zip(self.__matrix__, term.__matrix__):
			for i in range(self.__columns__):
				row_left[i] += row_right[i]

		self.__invalidate__()
		return self

	def subtract(self, term: Matrix) -> Matrix:
		"""
		Subtracts another matrix element-wise
		:param term: The matrix to subtract
		:return: The difference
		:raises DimensionException: If the dimensions do not match
		"""

		term = Matrix.__operand__(self.subtract, 'term', term)
		self.__require_same_shape__(term, 'subtract')
		return self.__clone__().m_subtract(term)

	def m_subtract(self, term: Matrix) -> Matrix:
		"""
		Subtracts another matrix element-wise in-place
		:param term: The matrix to subtract
		:return: This matrix
		:raises DimensionException: If the dimensions do not match
		"""

		term = Matrix.__operand__(self.m_subtract, 'term', term)
		self.__require_same_shape__(term, 'subtract')

		for row_left, row_right in zip(self.__matrix__, term.__matrix__):
			for i in range(self.__columns__):
				row_left[i] -= row_right[i]

		self.__invalidate__()
		return self

	def multiply(self, term: Matrix) -> Matrix:
		"""
		Multiplies this matrix by another matrix
		:param term: The right-hand matrix
		:return: The product
		:raises DimensionException: If this matrix's column count differs from the other's row count
		"""

		term = Matrix.__operand__(self.multiply, 'term', term)
		return self.__clone__().m_multiply(term)

	def m_multiply(self, term: Matrix) -> Matrix:
		"""
		Multiplies this matrix by another matrix in-place
		:param term: The right-hand matrix
		:return: This matrix, now shaped rows x term.columns
		:raises DimensionException: If this matrix's column count differs from the other's row count
		"""

		term = Matrix.__operand__(self.m_multiply, 'term', term)
		Misc.raise_ifn(self.__columns__ == term.__rows__, Exceptions.DimensionException(f'Cannot multiply matrix of dimension {Misc.format_dimensions(self.__rows__, self.__columns__)} by matrix of dimension {Misc.format_dimensions(term.__rows__, term.__columns__)}'))
		columns_right: list[tuple[float, ...]] = list(zip(*term.__matrix__))
		self.__matrix__ = [[sum(a * b for a, b in zip(row, column)) for column in columns_right] for row in self.__matrix__]
		self.__columns__ = term.__columns__
		self.__size__ = self.__rows__ * self.__columns__
		self.__invalidate__()
		return self

	def multiply_by_scalar(self, multiplier: float) -> Matrix:
		"""
		:param multiplier: The scalar
		:return: A copy of this matrix with every element multiplied by the scalar
		:raises InvalidArgumentException: If the multiplier is not a number
		"""

		return self.__clone__().m_multiply_by_scalar(multiplier)

	def m_multiply_by_scalar(self, multiplier: float) -> Matrix:
		"""
		Multiplies every element by a scalar in-place
		:param multiplier: The scalar
		:return: This matrix
		:raises InvalidArgumentException: If the multiplier is not a number
		"""

		Misc.raise_ifn(isinstance(multiplier, (int, float)) and not isinstance(multiplier, bool), Exceptions.InvalidArgumentException(self.m_multiply_by_scalar, 'multiplier', type(multiplier), (int, float)))

		for row in self.__matrix__:
			for i in range(self.__columns__):
				row[i] *= multiplier

		self.__invalidate__()
		return self

	def change_sign(self) -> Matrix:
		"""
		:return: A copy of this matrix with every element negated
		"""

		return self.__clone__().m_multiply_by_scalar(-1)

	def m_change_sign(self) -> Matrix:
		"""
		Negates every element in-place
		:return: This matrix
		"""

		return self.m_multiply_by_scalar(-1)

	def is_equal(self, term: Matrix, tolerance: float = Functions.DEFAULT_TOLERANCE) -> bool:
		"""
		:param term: The matrix to compare against
		:param tolerance: The largest element difference still considered equal
		:return: Whether both matrices have the same shape and all elements are equal within the tolerance
		"""

		term = Matrix.__operand__(self.is_equal, 'term', term)

		if self.__rows__ != term.__rows__ or self.__columns__ != term.__columns__:
			return False

		return all(Functions.are_equal(a, b, tolerance) for row_left, row_right in zip(self.__matrix__, term.__matrix__) for a, b in zip(row_left, row_right))

	def is_equal_exactly(self, term: Matrix) -> bool:
		"""
		Elements are compared numerically, so an integer equals the float of the same value
		:param term: The matrix to compare against
		:return: Whether both matrices have the same shape and all elements are exactly equal
		"""

		term = Matrix.__operand__(self.is_equal_exactly, 'term', term)

		if self.__rows__ != term.__rows__ or self.__columns__ != term.__columns__:
			return False

		return all(a == b for row_left, row_right in zip(self.__matrix__, term.__matrix__) for a, b in zip(row_left, row_right))

	def transpose(self) -> Matrix:
		"""
		:return: The transposed matrix
		"""

		return self.__clone__().m_transpose()

	def m_transpose(self) -> Matrix:
		"""
		Transposes this matrix in-place
		:return: This matrix
		"""

		if self.__rows__ == 1:
			if self.__columns__ > 1:
				self.__matrix__ = [[x] for x in self.__matrix__[0]]
		else:
			self.__matrix__ = [list(column) for column in zip(*self.__matrix__)]

		self.__rows__, self.__columns__ = self.__columns__, self.__rows__
		self.__invalidate__()
		return self

	def join_right(self, other: Matrix) -> Matrix:
		"""
		:param other: The matrix whose columns are appended
		:return: This matrix with the other matrix's columns appended to the right
		:raises DimensionException: If the row counts differ
		"""

		other = Matrix.__operand__(self.join_right, 'other', other)
		return self.__clone__().m_join_right(other)

	def m_join_right(self, other: Matrix) -> Matrix:
		"""
		Appends another matrix's columns to the right in-place
		:param other: The matrix whose columns are appended
		:return: This matrix
		:raises DimensionException: If the row counts differ
		"""

		other = Matrix.__operand__(self.m_join_right, 'other', other)
		Misc.raise_ifn(self.__rows__ == other.__rows__, Exceptions.DimensionException(f'Cannot join matrix of dimension {Misc.format_dimensions(other.__rows__, other.__columns__)} to the right of matrix of dimension {Misc.format_dimensions(self.__rows__, self.__columns__)}'))
		appended: list[list[float]] = [row.copy() for row in other.__matrix__]

		for row, extra in zip(self.__matrix__, appended):
			row.extend(extra)

		self.__columns__ += other.__columns__
		self.__size__ = self.__rows__ * self.__columns__
		self.__invalidate__()
		return self

	def join_bottom(self, other: Matrix) -> Matrix:
		"""
		:param other: The matrix whose rows are appended
		:return: This matrix with the other matrix's rows appended to the bottom
		:raises DimensionException: If the column counts differ
		"""

		other = Matrix.__operand__(self.join_bottom, 'other', other)
		return self.__clone__().m_join_bottom(other)

	def m_join_bottom(self, other: Matrix) -> Matrix:
		"""
		Appends another matrix's rows to the bottom in-place
		:param other: The matrix whose rows are appended
		:return: This matrix
		:raises DimensionException: If the column counts differ
		"""

		other = Matrix.__operand__(self.m_join_bottom, 'other', other)
		Misc.raise_ifn(self.__columns__ == other.__columns__, Exceptions.DimensionException(f'Cannot join matrix of dimension {Misc.format_dimensions(other.__rows__, other.__columns__)} to the bottom of matrix of dimension {Misc.format_dimensions(self.__rows__, self.__columns__)}'))
		self.__matrix__.extend([row.copy() for row in other.__matrix__])
		self.__rows__ += other.__rows__
		self.__size__ = self.__rows__ * self.__columns__
		self.__invalidate__()
		return self

	def submatrix(self, row_start: int, column_start: int, row_end: int, column_end: int) -> Matrix:
		"""
		Extracts a rectangular block of this matrix
		:param row_start: The first row
		:param column_start: The first column
		:param row_end: The last row (inclusive)
		:param column_end: The last column (inclusive)
		:return: The block as a new matrix
		:raises OutOfBoundsException: If the block does not lie within this matrix
		"""

		Misc.raise_if(row_start < 0 or column_start < 0 or row_end < row_start or column_end < column_start or row_end >= self.__rows__ or column_end >= self.__columns__, Exceptions.OutOfBoundsException(f'Block [{row_start}][{column_start}]..[{row_end}][{column_end}] is outside of matrix of dimension {Misc.format_dimensions(self.__rows__, self.__columns__)}'))
		return type(self)([row[column_start:column_end + 1] for row in self.__matrix__[row_start:row_end + 1]], False)

	def row_echelon(self, do_swaps: bool = True, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> tuple[Matrix, int]:
		"""
		Computes the row echelon form by gaussian elimination
		:param do_swaps: Whether to use partial pivoting
		:param zero_tolerance: Results smaller than this are stored as exact zero
		:return: The row echelon form and the number of row swaps performed
		:raises DivisionByZeroException: If a pivot is zero and swapping is disabled
		"""

		matrix, swaps = self.__echelon__(do_swaps, zero_tolerance)
		return type(self)([row.copy() for row in matrix], False), swaps

	def ref(self, do_swaps: bool = True, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> Matrix:
		"""
		:param do_swaps: Whether to use partial pivoting
		:param zero_tolerance: Results smaller than this are stored as exact zero
		:return: The row echelon form
		:raises DivisionByZeroException: If a pivot is zero and swapping is disabled
		"""

		return self.row_echelon(do_swaps, zero_tolerance)[0]

	def m_ref(self, do_swaps: bool = True, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> Matrix:
		"""
		Brings this matrix into row echelon form in-place
		:param do_swaps: Whether to use partial pivoting
		:param zero_tolerance: Results smaller than this are stored as exact zero
		:return: This matrix
		:raises DivisionByZeroException: If a pivot is zero and swapping is disabled
		"""

		matrix, _ = self.__echelon__(do_swaps, zero_tolerance)
		self.__matrix__ = [row.copy() for row in matrix]
		self.__invalidate__()
		return self

	def rref(self, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> Matrix:
		"""
		:param zero_tolerance: Results smaller than this are stored as exact zero
		:return: The reduced row echelon form
		"""

		return type(self)([row.copy() for row in self.__reduced_echelon__(zero_tolerance)], False)

	def m_rref(self, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> Matrix:
		"""
		Brings this matrix into reduced row echelon form in-place
		:param zero_tolerance: Results smaller than this are stored as exact zero
		:return: This matrix
		"""

		self.__matrix__ = [row.copy() for row in self.__reduced_echelon__(zero_tolerance)]
		self.__invalidate__()
		return self

	def determinant(self) -> float:
		"""
		Calculates the determinant
		Matrices up to 3x3 use the closed formulas; larger ones are eliminated without row swaps
		A zero pivot during that elimination means linearly dependent rows and a determinant of zero
		Results within the default tolerance of zero are returned as exactly zero
		:return: The determinant
		:raises MatrixException: If this matrix is not square
		"""

		if self.__determinant_cache__ is not None:
			return self.__determinant_cache__

		Misc.raise_ifn(self.is_square(), Exceptions.MatrixException('The determinant is only defined for a square matrix.'))
		m: list[list[float]] = self.__matrix__

		if self.__rows__ == 1:
			determinant: float = m[0][0]
		elif self.__rows__ == 2:
			determinant: float = m[0][0] * m[1][1] - m[0][1] * m[1][0]
		elif self.__rows__ == 3:
			determinant: float = m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1]) - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0]) + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
		else:
			try:
				echelon, swaps = self.__echelon__(False, Functions.DEFAULT_TOLERANCE)
				determinant: float = (-1) ** swaps * math.prod(echelon[i][i] for i in range(self.__rows__))
			except Exceptions.DivisionByZeroException:
				determinant: float = 0

		# Residue within the default tolerance is reported as an exact zero
		if Functions.is_zero(determinant):
			determinant = 0

		if self.__caching__:
			self.__determinant_cache__ = determinant
			self.__cached__ = True

		return determinant

	def trace(self) -> float:
		"""
		:return: The sum of the main diagonal
		:raises MatrixException: If this matrix is not square
		"""

		if self.__trace_cache__ is not None:
			return self.__trace_cache__

		Misc.raise_ifn(self.is_square(), Exceptions.MatrixException('The trace is only defined for a square matrix.'))
		trace: float = sum(self.__matrix__[i][i] for i in range(self.__rows__))

		if self.__caching__:
			self.__trace_cache__ = trace
			self.__cached__ = True

		return trace

	def is_square(self) -> bool:
		"""
		:return: Whether this matrix has as many rows as columns
		"""

		return self.__rows__ == self.__columns__

	def copy(self) -> Matrix:
		"""
		:return: A copy of this matrix
		"""

		return self.__clone__()

	def count(self) -> int:
		"""
		:return: The number of cells in this matrix
		"""

		return self.__size__

	def to_array(self) -> list[list[float]]:
		"""
		:return: A copy of this matrix as a list of rows
		"""

		return [list(row) for row in self.__matrix__]

	def to_numpy(self) -> numpy.ndarray:
		"""
		:return: This matrix converted to a numpy array
		"""

		return numpy.array(self.__matrix__, dtype=float)

	def to_string(self) -> str:
		"""
		:return: One bracketed, comma separated line per row
		"""

		return str(self)

	@property
	def rows(self) -> int:
		"""
		:return: The number of rows
		"""

		return self.__rows__

	@property
	def columns(self) -> int:
		"""
		:return: The number of columns
		"""

		return self.__columns__

	@property
	def size(self) -> int:
		"""
		:return: The number of cells
		"""

		return self.__size__

	@property
	def cached(self) -> bool:
		"""
		:return: Whether any derived value is currently cached
		"""

		return self.__cached__

	@property
	def caching(self) -> bool:
		"""
		:return: Whether derived values are cached
		"""

		return self.__caching__

	@caching.setter
	def caching(self, enabled: bool) -> None:
		"""
		Enables or disables caching of derived values
		Disabling drops every cached value
		:param enabled: Whether to cache
		"""

		self.__caching__ = bool(enabled)

		if not self.__caching__:
			self.__invalidate__()
