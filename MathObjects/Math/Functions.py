import typing


DEFAULT_TOLERANCE: typing.Final[float] = 1e-8


def is_zero(number: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
	"""
	:param number: The number to test
	:param tolerance: The largest magnitude still considered zero
	:return: Whether the number equals zero within the tolerance
	"""

	return abs(number) <= tolerance


def is_not_zero(number: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
	"""
	:param number: The number to test
	:param tolerance: The largest magnitude still considered zero
	:return: Whether the number differs from zero by more than the tolerance
	"""

	return abs(number) > tolerance


def are_equal(number_0: float, number_1: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
	"""
	:param number_0: The first number
	:param number_1: The second number
	:param tolerance: The largest difference still considered equal
	:return: Whether both numbers are equal within the tolerance
	"""

	return abs(number_0 - number_1) <= tolerance


def sign(number: float) -> int:
	"""
	:param number: The number
	:return: -1, 0 or 1 depending on the sign of the number
	"""

	return (number > 0) - (number < 0)


def gcd(a: int, b: int) -> int:
	"""
	Calculates the greatest common divisor using the Euclidean algorithm
	Callers needing a positive divisor take the absolute value of the result
	:param a: The first integer
	:param b: The second integer
	:return: The greatest common divisor
	"""

	return a if b == 0 else gcd(b, a % b)
