from __future__ import annotations

import re
import typing

from .. import Exceptions
from .. import Misc
from ..Math import Functions


class Rational:
	"""
	Class representing an exact mixed fraction 'whole numerator/denominator'
	Instances are immutable and always normalized:
	 * The denominator is positive
	 * The numerator is smaller than the denominator in magnitude and shares the whole part's sign
	 * The fraction is fully reduced
	 * A zero numerator has a denominator of one
	"""

	DEFAULT_PRECISION: typing.Final[float] = 1e-3
	__PATTERN__: typing.Final[re.Pattern] = re.compile(r'^(?:(-?\d+)(?=$|\s))?\s*(?:((?(1)|-?)\d+)/(\d+))?$', re.ASCII)

	@classmethod
	def from_int(cls, number: int) -> Rational:
		"""
		:param number: The integer
		:return: The integer as a rational number
		"""

		return cls(number, 0, 1)

	@classmethod
	def from_float(cls, number: float, precision: float = DEFAULT_PRECISION) -> Rational:
		"""
		Approximates a float by the fraction with the smallest denominator within the precision
		Denominators are searched up to the inverse of the precision; if none fits, only the whole part is kept
		:param number: The float to convert
		:param precision: The largest allowed deviation of the scaled fractional part from an integer
		:return: The approximating rational number
		"""

		whole: int = int(number)
		fraction: float = number - whole

		if Functions.is_zero(fraction, precision):
			return cls.from_int(whole)

		for denominator in range(2, round(1 / precision)):
			scaled: float = fraction * denominator

			if abs(scaled - round(scaled)) < precision:
				return cls(whole, round(scaled), denominator)

		return cls(whole, 0, 1)

	@classmethod
	def from_string(cls, string: str) -> Rational:
		"""
		Parses a rational number written as 'W', 'N/D' or 'W N/D'
		Only the leading part may carry a minus sign; a negative whole part makes the fraction negative too
		:param string: The string to parse
		:return: The parsed rational number
		:raises RationalException: If the string is not a rational number
		"""

		Misc.raise_ifn(isinstance(string, str), Exceptions.InvalidArgumentException(Rational.from_string, 'string', type(string), (str,)))
		trimmed: str = string.strip()
		match: typing.Optional[re.Match] = Rational.__PATTERN__.fullmatch(trimmed)

		if not trimmed or match is None or (match.group(1) is None and match.group(2) is None):
			raise Exceptions.RationalException(f'The string \'{string}\' is not a rational number.')

		whole: int = 0 if match.group(1) is None else int(match.group(1))

		if match.group(2) is None:
			return cls.from_int(whole)

		numerator: int = int(match.group(2))
		return cls(whole, -numerator if whole < 0 else numerator, int(match.group(3)))

	def __init__(self, whole: int = 0, numerator: int = 0, denominator: int = 1):
		"""
		Class representing an exact mixed fraction 'whole numerator/denominator'
		- Constructor -
		:param whole: The whole part
		:param numerator: The numerator of the fractional part
		:param denominator: The denominator of the fractional part
		:raises InvalidArgumentException: If a part is not an integer
		:raises RationalException: If the denominator is zero
		"""

		for name, value in (('whole', whole), ('numerator', numerator), ('denominator', denominator)):
			Misc.raise_ifn(isinstance(value, int) and not isinstance(value, bool), Exceptions.InvalidArgumentException(Rational.__init__, name, type(value), (int,)))

		Misc.raise_if(denominator == 0, Exceptions.RationalException('The denominator cannot be zero.'))

		if denominator < 0:
			numerator, denominator = -numerator, -denominator

		if abs(numerator) > denominator:
			quotient: int = abs(numerator) // denominator * Functions.sign(numerator)
			whole += quotient
			numerator -= quotient * denominator

		if whole > 0 and numerator < 0:
			whole -= 1
			numerator += denominator
		elif whole < 0 and numerator > 0:
			whole += 1
			numerator -= denominator

		divisor: int = Functions.gcd(abs(numerator), denominator)

		if divisor > 1:
			numerator //= divisor
			denominator //= divisor

		if denominator == 1 and numerator != 0:
			whole += numerator
			numerator = 0

		self.__whole__: int = whole
		self.__numerator__: int = numerator
		self.__denominator__: int = 1 if numerator == 0 else denominator

	def __eq__(self, other: typing.Any) -> bool:
		if isinstance(other, Rational):
			return self.__whole__ == other.__whole__ and self.__numerator__ == other.__numerator__ and self.__denominator__ == other.__denominator__

		return NotImplemented

	def __hash__(self) -> int:
		return hash((self.__whole__, self.__numerator__, self.__denominator__))

	def __float__(self) -> float:
		return self.to_float()

	def __str__(self) -> str:
		return self.to_string()

	def __repr__(self) -> str:
		return f'<{type(self).__name__} {self.to_string()} @ {hex(id(self))}>'

	def to_float(self) -> float:
		"""
		:return: The value of this number as a float
		"""

		return self.__whole__ + self.__numerator__ / self.__denominator__

	def to_string(self) -> str:
		"""
		:return: This number as 'W', 'N/D' or 'W N/D'
		"""

		if self.__numerator__ == 0:
			return str(self.__whole__)
		elif self.__whole__ == 0:
			return f'{self.__numerator__}/{self.__denominator__}'
		else:
			return f'{self.__whole__} {abs(self.__numerator__)}/{self.__denominator__}'

	@property
	def whole(self) -> int:
		return self.__whole__

	@property
	def numerator(self) -> int:
		"""
		:return: The numerator of the fractional part, signed like the whole part
		"""

		return self.__numerator__

	@property
	def denominator(self) -> int:
		return self.__denominator__
