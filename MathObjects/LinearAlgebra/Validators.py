from __future__ import annotations

import typing
import typeguard


T = typing.TypeVar('T')


class ElementValidator(typing.Generic[T]):
	"""
	Base class for the capability deciding which elements a matrix may store
	"""

	def is_valid(self, element: typing.Any) -> bool:
		"""
		:param element: The candidate element
		:return: Whether the element may be stored in a matrix
		"""

		raise NotImplementedError(f'{type(self).__name__}::is_valid')

	def describe(self, element: typing.Any) -> str:
		"""
		:param element: The rejected element
		:return: The type name reported in validation errors
		"""

		return type(element).__name__

	def first_invalid(self, row: typing.Sequence[typing.Any]) -> typing.Optional[int]:
		"""
		:param row: The row to scan
		:return: The column index of the first invalid element or None if every element is valid
		"""

		for column, element in enumerate(row):
			if not self.is_valid(element):
				return column

		return None


class NumericValidator(ElementValidator[int | float]):
	"""
	Validator accepting integer and floating point elements
	"""

	def is_valid(self, element: typing.Any) -> bool:
		if isinstance(element, bool):
			return False

		try:
			typeguard.check_type(element, int | float)
			return True
		except typeguard.TypeCheckError:
			return False
