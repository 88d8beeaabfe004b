from __future__ import annotations

import enum
import numpy
import random
import typing

from .. import Exceptions
from .. import Misc
from ..Math import Functions
from .Matrix import Matrix


class VectorType(enum.Enum):
	"""
	The orientation of a vector
	"""

	COLUMN = 'column'
	ROW = 'row'

	def transpose(self) -> VectorType:
		"""
		:return: The opposite orientation
		"""

		return VectorType.ROW if self is VectorType.COLUMN else VectorType.COLUMN


class Vector:
	"""
	Class representing a matrix with exactly one row or exactly one column
	Holds a matrix and an orientation; operations whose result no longer fits a vector return a plain matrix
	Methods prefixed with 'm_' modify this vector in-place and return it, failing if the result cannot remain a vector
	"""

	@classmethod
	def __wrap__(cls, matrix: Matrix, vector_type: typing.Optional[VectorType] = None) -> Vector:
		"""
		INTERNAL METHOD
		Creates a vector taking ownership of an already valid vector-shaped matrix
		:param matrix: The matrix to wrap
		:param vector_type: The orientation or None to infer it from the shape
		:return: The vector
		"""

		vector: Vector = cls.__new__(cls)
		vector.__matrix__ = matrix
		vector.__vector_type__ = Vector.__infer_type__(matrix) if vector_type is None else vector_type
		return vector

	@staticmethod
	def __infer_type__(matrix: Matrix) -> VectorType:
		return VectorType.COLUMN if matrix.columns == 1 else VectorType.ROW

	@staticmethod
	def __shape__(values: typing.Sequence[float], vector_type: VectorType) -> list[list[float]]:
		return [list(values)] if vector_type is VectorType.ROW else [[x] for x in values]

	@classmethod
	def from_array(cls, array: typing.Iterable[float], vector_type: VectorType = VectorType.COLUMN) -> Vector:
		"""
		Creates a vector from a flat sequence of elements
		:param array: The elements
		:param vector_type: The orientation
		:return: The vector
		:raises MatrixException: If the sequence is empty or holds invalid elements
		"""

		values: list[float] = list(array)
		Misc.raise_if(len(values) == 0, Exceptions.MatrixException('Vector cannot be empty.'))
		return cls.__wrap__(Matrix(Vector.__shape__(values, vector_type)), vector_type)

	@classmethod
	def fill(cls, size: int, value: float, vector_type: VectorType = VectorType.COLUMN) -> Vector:
		"""
		Creates a vector with all elements set to the specified value
		:param size: The number of elements
		:param value: The value for all elements
		:param vector_type: The orientation
		:return: The filled vector
		:raises OutOfBoundsException: If the size is not positive
		"""

		Misc.raise_if(size <= 0, Exceptions.OutOfBoundsException(f'Vector size must be greater than zero. Size {size} is given.'))
		return cls.__wrap__(Matrix(Vector.__shape__([value] * size, vector_type)), vector_type)

	@classmethod
	def identity(cls, size: int, index: int = 0, vector_type: VectorType = VectorType.COLUMN) -> Vector:
		"""
		Creates a unit basis vector
		:param size: The number of elements
		:param index: The position of the single one
		:param vector_type: The orientation
		:return: The unit vector
		:raises OutOfBoundsException: If the size is not positive or the index is outside the vector
		"""

		Misc.raise_if(size <= 0, Exceptions.OutOfBoundsException(f'Vector size must be greater than zero. Size {size} is given.'))
		Misc.raise_ifn(0 <= index < size, Exceptions.OutOfBoundsException(f'The element [{index}] does not exist.'))
		return cls.__wrap__(Matrix(Vector.__shape__([1 if i == index else 0 for i in range(size)], vector_type), False), vector_type)

	@classmethod
	def random(cls, size: int, _min: float = 0.0, _max: float = 1.0, vector_type: VectorType = VectorType.COLUMN, generator: typing.Optional[random.Random] = None) -> Vector:
		"""
		Creates a vector of uniformly distributed random floats
		:param size: The number of elements
		:param _min: The lower bound
		:param _max: The upper bound
		:param vector_type: The orientation
		:param generator: The random source to draw from or None to use a fresh generator
		:return: The random vector
		:raises OutOfBoundsException: If the size is not positive or the lower bound exceeds the upper bound
		"""

		rows, columns = (1, size) if vector_type is VectorType.ROW else (size, 1)
		return cls.__wrap__(Matrix.random(rows, columns, _min, _max, generator), vector_type)

	@classmethod
	def random_int(cls, size: int, _min: int = 0, _max: int = 100, vector_type: VectorType = VectorType.COLUMN, generator: typing.Optional[random.Random] = None) -> Vector:
		"""
		Creates a vector of uniformly distributed random integers
		:param size: The number of elements
		:param _min: The inclusive lower bound
		:param _max: The inclusive upper bound
		:param vector_type: The orientation
		:param generator: The random source to draw from or None to use a fresh generator
		:return: The random vector
		:raises OutOfBoundsException: If the size is not positive or the lower bound exceeds the upper bound
		"""

		rows, columns = (1, size) if vector_type is VectorType.ROW else (size, 1)
		return cls.__wrap__(Matrix.random_int(rows, columns, _min, _max, generator), vector_type)

	def __init__(self, vector: Matrix | Vector | typing.Iterable[typing.Iterable[float]] | numpy.ndarray, validate: bool = True):
		"""
		Class representing a matrix with exactly one row or exactly one column
		- Constructor -
		A 1x1 vector is column oriented unless copied from a row vector
		:param vector: The rows of the vector or a matrix or vector to copy
		:param validate: Whether to check the element types
		:raises MatrixException: If validation is requested and the data is empty, jagged or holds invalid elements
		:raises DimensionException: If neither dimension is one
		"""

		base: Matrix = Matrix.__operand__(Vector.__init__, 'vector', vector).copy() if Matrix.__is_operand__(vector) else Matrix(vector, validate)
		Misc.raise_ifn(base.rows == 1 or base.columns == 1, Exceptions.DimensionException(f'Vector must have exactly one row or exactly one column. Matrix of dimension {Misc.format_dimensions(base.rows, base.columns)} is given.'))
		self.__matrix__: Matrix = base
		self.__vector_type__: VectorType = vector.vector_type if isinstance(vector, Vector) else Vector.__infer_type__(base)

	def __index_position__(self, index: int) -> tuple[int, int]:
		"""
		INTERNAL METHOD
		:param index: The zero-indexed element
		:return: The (row, column) pair of the element
		"""

		return (index, 0) if self.__vector_type__ is VectorType.COLUMN else (0, index)

	def __as_matrix__(self) -> Matrix:
		return self.__matrix__

	def __len__(self) -> int:
		return self.__matrix__.size

	def __iter__(self) -> typing.Iterator[float]:
		"""
		:return: An iterator over the elements of this vector
		"""

		return iter(self.to_plain_array())

	def __repr__(self) -> str:
		return f'<{type(self).__name__} {Misc.format_dimensions(self.rows, self.columns)} {self.__vector_type__.name} @ {hex(id(self))}>'

	def __str__(self) -> str:
		return str(self.__matrix__)

	def __getitem__(self, index: int) -> float:
		return self.v_get(index)

	def __setitem__(self, index: int, value: float) -> None:
		self.v_set(index, value)

	def __delitem__(self, index: int) -> None:
		raise Exceptions.UnsupportedOperationException('The vector elements cannot be removed.')

	def __contains__(self, index: int) -> bool:
		return self.v_is_set(index)

	def __eq__(self, other: typing.Any) -> bool:
		if Matrix.__is_operand__(other):
			return self.is_equal_exactly(other)

		return NotImplemented

	def __add__(self, other: Matrix | Vector) -> Vector:
		if Matrix.__is_operand__(other):
			return self.add(other)

		return NotImplemented

	def __sub__(self, other: Matrix | Vector) -> Vector:
		if Matrix.__is_operand__(other):
			return self.subtract(other)

		return NotImplemented

	def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
		if Matrix.__is_operand__(other):
			return self.multiply(other)

		return NotImplemented

	def __mul__(self, other: float) -> Vector:
		if isinstance(other, (int, float)) and not isinstance(other, bool):
			return self.multiply_by_scalar(other)

		return NotImplemented

	def __rmul__(self, other: float) -> Vector:
		return self.__mul__(other)

	def __iadd__(self, other: Matrix | Vector) -> Vector:
		if Matrix.__is_operand__(other):
			return self.m_add(other)

		return NotImplemented

	def __isub__(self, other: Matrix | Vector) -> Vector:
		if Matrix.__is_operand__(other):
			return self.m_subtract(other)

		return NotImplemented

	def __imatmul__(self, other: Matrix | Vector) -> Vector:
		if Matrix.__is_operand__(other):
			return self.m_multiply(other)

		return NotImplemented

	def __imul__(self, other: float) -> Vector:
		if isinstance(other, (int, float)) and not isinstance(other, bool):
			return self.m_multiply_by_scalar(other)

		return NotImplemented

	def __neg__(self) -> Vector:
		return self.change_sign()

	def __pos__(self) -> Vector:
		return self.copy()

	def v_is_set(self, index: int) -> bool:
		"""
		:param index: The zero-indexed element
		:return: Whether the element exists
		"""

		return self.__matrix__.is_set(*self.__index_position__(index))

	def v_get(self, index: int) -> float:
		"""
		:param index: The zero-indexed element
		:return: The element
		:raises OutOfBoundsException: If the element does not exist
		"""

		Misc.raise_ifn(self.v_is_set(index), Exceptions.OutOfBoundsException(f'The element [{index}] does not exist.'))
		return self.__matrix__.get(*self.__index_position__(index))

	def v_set(self, index: int, value: float) -> Vector:
		"""
		Replaces a single element
		:param index: The zero-indexed element
		:param value: The new element value
		:return: This vector
		:raises OutOfBoundsException: If the element does not exist
		:raises MatrixException: If the value is not a valid element
		"""

		Misc.raise_ifn(self.v_is_set(index), Exceptions.OutOfBoundsException(f'The element [{index}] does not exist.'))
		self.__matrix__.set(*self.__index_position__(index), value)
		return self

	def is_set(self, row: int, column: int) -> bool:
		return self.__matrix__.is_set(row, column)

	def get(self, row: int, column: int) -> float:
		return self.__matrix__.get(row, column)

	def set(self, row: int, column: int, value: float) -> Vector:
		self.__matrix__.set(row, column, value)
		return self

	def add(self, term: Matrix | Vector) -> Vector:
		"""
		Adds another vector element-wise
		:param term: The vector or same-shaped matrix to add
		:return: The sum
		:raises DimensionException: If the dimensions do not match
		"""

		return type(self).__wrap__(self.__matrix__.add(Matrix.__operand__(self.add, 'term', term)), self.__vector_type__)

	def m_add(self, term: Matrix | Vector) -> Vector:
		self.__matrix__.m_add(Matrix.__operand__(self.m_add, 'term', term))
		return self

	def subtract(self, term: Matrix | Vector) -> Vector:
		"""
		Subtracts another vector element-wise
		:param term: The vector or same-shaped matrix to subtract
		:return: The difference
		:raises DimensionException: If the dimensions do not match
		"""

		return type(self).__wrap__(self.__matrix__.subtract(Matrix.__operand__(self.subtract, 'term', term)), self.__vector_type__)

	def m_subtract(self, term: Matrix | Vector) -> Vector:
		self.__matrix__.m_subtract(Matrix.__operand__(self.m_subtract, 'term', term))
		return self

	def multiply_by_scalar(self, multiplier: float) -> Vector:
		return type(self).__wrap__(self.__matrix__.multiply_by_scalar(multiplier), self.__vector_type__)

	def m_multiply_by_scalar(self, multiplier: float) -> Vector:
		self.__matrix__.m_multiply_by_scalar(multiplier)
		return self

	def change_sign(self) -> Vector:
		return type(self).__wrap__(self.__matrix__.change_sign(), self.__vector_type__)

	def m_change_sign(self) -> Vector:
		self.__matrix__.m_change_sign()
		return self

	def multiply(self, term: Matrix | Vector) -> Matrix | Vector:
		"""
		Multiplies this vector by a matrix or vector
		The product is a plain matrix when this vector has several rows and the operand several columns
		:param term: The right-hand operand
		:return: The product
		:raises DimensionException: If this vector's column count differs from the operand's row count
		"""

		term = Matrix.__operand__(self.multiply, 'term', term)
		product: Matrix = self.__matrix__.multiply(term)

		if self.rows > 1 and term.columns > 1:
			return product

		return type(self).__wrap__(product, VectorType.ROW if term.columns > 1 else VectorType.COLUMN)

	def m_multiply(self, term: Matrix | Vector) -> Vector:
		"""
		Multiplies this vector by a matrix or vector in-place
		:param term: The right-hand operand
		:return: This vector
		:raises DimensionException: If this vector's column count differs from the operand's row count
		:raises MatrixException: If the product would not be a vector
		"""

		term = Matrix.__operand__(self.m_multiply, 'term', term)
		Misc.raise_if(self.rows > 1 and term.columns > 1, Exceptions.MatrixException(f'The product of dimension {Misc.format_dimensions(self.rows, term.columns)} cannot be stored in a vector.'))
		self.__matrix__.m_multiply(term)
		self.__vector_type__ = VectorType.ROW if term.columns > 1 else VectorType.COLUMN
		return self

	def dot_product(self, other: Vector) -> float:
		"""
		Calculates the dot product, ignoring orientation
		:param other: The other vector
		:return: The sum of element-wise products
		:raises DimensionException: If the sizes differ
		"""

		Misc.raise_ifn(isinstance(other, Vector), Exceptions.InvalidArgumentException(self.dot_product, 'other', type(other), (Vector,)))
		Misc.raise_ifn(self.size == other.size, Exceptions.DimensionException(f'Cannot calculate dot product of vectors of size {self.size} and {other.size}'))
		return sum(a * b for a, b in zip(self.to_plain_array(), other.to_plain_array()))

	def cross_product(self, other: Vector) -> Vector:
		"""
		Calculates the three-dimensional cross product
		:param other: The other vector
		:return: The cross product, oriented like this vector
		:raises MatrixException: If either vector does not have exactly three elements
		"""

		Misc.raise_ifn(isinstance(other, Vector), Exceptions.InvalidArgumentException(self.cross_product, 'other', type(other), (Vector,)))
		Misc.raise_ifn(self.size == 3 and other.size == 3, Exceptions.MatrixException(f'Cross product is only defined for vectors of size 3. Sizes {self.size} and {other.size} are given.'))
		a1, a2, a3 = self.to_plain_array()
		b1, b2, b3 = other.to_plain_array()
		return type(self).__wrap__(Matrix(Vector.__shape__([a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1], self.__vector_type__), False), self.__vector_type__)

	def join_right(self, other: Matrix | Vector) -> Matrix | Vector:
		"""
		:param other: The matrix or vector whose columns are appended
		:return: The joined result; a plain matrix when this vector has several rows
		:raises DimensionException: If the row counts differ
		"""

		other = Matrix.__operand__(self.join_right, 'other', other)
		joined: Matrix = self.__matrix__.join_right(other)
		return joined if self.rows > 1 else type(self).__wrap__(joined, VectorType.ROW)

	def m_join_right(self, other: Matrix | Vector) -> Vector:
		"""
		Appends columns in-place
		:param other: The row vector or single-row matrix to append
		:return: This vector, now row oriented
		:raises DimensionException: If the row counts differ
		:raises MatrixException: If the result would not be a vector
		"""

		other = Matrix.__operand__(self.m_join_right, 'other', other)
		Misc.raise_if(self.rows > 1, Exceptions.MatrixException(f'Joining to the right of a vector of dimension {Misc.format_dimensions(self.rows, self.columns)} does not produce a vector.'))
		self.__matrix__.m_join_right(other)
		self.__vector_type__ = VectorType.ROW
		return self

	def join_bottom(self, other: Matrix | Vector) -> Matrix | Vector:
		"""
		:param other: The matrix or vector whose rows are appended
		:return: The joined result; a plain matrix when this vector has several columns
		:raises DimensionException: If the column counts differ
		"""

		other = Matrix.__operand__(self.join_bottom, 'other', other)
		joined: Matrix = self.__matrix__.join_bottom(other)
		return joined if self.columns > 1 else type(self).__wrap__(joined, VectorType.COLUMN)

	def m_join_bottom(self, other: Matrix | Vector) -> Vector:
		"""
		Appends rows in-place
		:param other: The column vector or single-column matrix to append
		:return: This vector, now column oriented
		:raises DimensionException: If the column counts differ
		:raises MatrixException: If the result would not be a vector
		"""

		other = Matrix.__operand__(self.m_join_bottom, 'other', other)
		Misc.raise_if(self.columns > 1, Exceptions.MatrixException(f'Joining to the bottom of a vector of dimension {Misc.format_dimensions(self.rows, self.columns)} does not produce a vector.'))
		self.__matrix__.m_join_bottom(other)
		self.__vector_type__ = VectorType.COLUMN
		return self

	def transpose(self) -> Vector:
		"""
		:return: The vector with the opposite orientation
		"""

		return self.copy().m_transpose()

	def m_transpose(self) -> Vector:
		"""
		Flips the orientation in-place; single element vectors are left as they are
		:return: This vector
		"""

		if self.size > 1:
			self.__matrix__.m_transpose()
			self.__vector_type__ = self.__vector_type__.transpose()

		return self

	def subvector(self, start: int, length: int) -> Vector:
		"""
		Extracts a contiguous range of elements
		:param start: The first element
		:param length: The number of elements
		:return: The range as a new vector with the same orientation
		:raises OutOfBoundsException: If the range does not lie within this vector
		"""

		Misc.raise_if(start < 0 or length <= 0 or start + length > self.size, Exceptions.OutOfBoundsException(f'Range of {length} elements starting at [{start}] is outside of vector of size {self.size}'))
		end: int = start + length - 1
		block: Matrix = self.__matrix__.submatrix(start, 0, end, 0) if self.__vector_type__ is VectorType.COLUMN else self.__matrix__.submatrix(0, start, 0, end)
		return type(self).__wrap__(block, self.__vector_type__)

	def is_equal(self, term: Matrix | Vector, tolerance: float = Functions.DEFAULT_TOLERANCE) -> bool:
		return self.__matrix__.is_equal(Matrix.__operand__(self.is_equal, 'term', term), tolerance)

	def is_equal_exactly(self, term: Matrix | Vector) -> bool:
		return self.__matrix__.is_equal_exactly(Matrix.__operand__(self.is_equal_exactly, 'term', term))

	def trace(self) -> float:
		return self.__matrix__.trace()

	def determinant(self) -> float:
		return self.__matrix__.determinant()

	def row_echelon(self, do_swaps: bool = True, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> tuple[Vector, int]:
		matrix, swaps = self.__matrix__.row_echelon(do_swaps, zero_tolerance)
		return type(self).__wrap__(matrix, self.__vector_type__), swaps

	def ref(self, do_swaps: bool = True, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> Vector:
		return self.row_echelon(do_swaps, zero_tolerance)[0]

	def m_ref(self, do_swaps: bool = True, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> Vector:
		self.__matrix__.m_ref(do_swaps, zero_tolerance)
		return self

	def rref(self, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> Vector:
		return type(self).__wrap__(self.__matrix__.rref(zero_tolerance), self.__vector_type__)

	def m_rref(self, zero_tolerance: float = Functions.DEFAULT_TOLERANCE) -> Vector:
		self.__matrix__.m_rref(zero_tolerance)
		return self

	def copy(self) -> Vector:
		"""
		:return: A copy of this vector
		"""

		return type(self).__wrap__(self.__matrix__.copy(), self.__vector_type__)

	def to_matrix(self) -> Matrix:
		"""
		:return: A copy of this vector as a plain matrix
		"""

		return self.__matrix__.copy()

	def to_array(self) -> list[list[float]]:
		return self.__matrix__.to_array()

	def to_plain_array(self) -> list[float]:
		"""
		:return: The elements as a flat list regardless of orientation
		"""

		matrix: Matrix = self.__matrix__.transpose() if self.__vector_type__ is VectorType.COLUMN else self.__matrix__
		return matrix.to_array()[0]

	def to_numpy(self) -> numpy.ndarray:
		"""
		:return: The elements as a one-dimensional numpy array
		"""

		return numpy.array(self.to_plain_array(), dtype=float)

	def to_string(self) -> str:
		return str(self.__matrix__)

	@property
	def vector_type(self) -> VectorType:
		"""
		:return: The orientation of this vector
		"""

		return self.__vector_type__

	@property
	def rows(self) -> int:
		return self.__matrix__.rows

	@property
	def columns(self) -> int:
		return self.__matrix__.columns

	@property
	def size(self) -> int:
		return self.__matrix__.size

	@property
	def cached(self) -> bool:
		return self.__matrix__.cached

	@property
	def caching(self) -> bool:
		return self.__matrix__.caching

	@caching.setter
	def caching(self, enabled: bool) -> None:
		self.__matrix__.caching = enabled
