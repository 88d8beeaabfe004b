import typing
import types


class InvalidArgumentException(TypeError):
	"""
	[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
	"""

	def __init__(self, caller: typing.Callable | types.FunctionType | types.MethodType = None, parameter_name: str = None, argument_type: type = None, parameter_types: typing.Iterable[type | str] = None):
		"""
		[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
		- Constructor -
		:param caller: The callable that raised this exception
		:param parameter_name: The name of the parameter
		:param argument_type: The type of the argument passed in
		:param parameter_types: The types this parameter accepts or the associated type annotations if None
		"""

		if caller is None or parameter_name is None or argument_type is None:
			super().__init__()
			return

		if parameter_types is None:
			annotation: typing.Any = caller.__annotations__.get(parameter_name, '<UNKNOWN>')
			accepted: tuple[str, ...] = (f"'{annotation}'",)
		else:
			accepted: tuple[str, ...] = tuple(f"'{x.__name__ if isinstance(x, type) else x}'" for x in parameter_types)

		type_list: str = f'either {", ".join(accepted[:-1])} or {accepted[-1]}' if len(accepted) > 1 else accepted[0]
		callable_type: str = 'Method' if '.' in caller.__qualname__ else 'Function'
		super().__init__(f'{callable_type} {caller.__qualname__.replace(".", "::")} - parameter \'{parameter_name}\' must be {type_list}; got \'{argument_type.__name__}\'')


class MathObjectsException(Exception):
	"""
	[MathObjectsException(Exception)] - Base exception for all errors raised by math objects
	"""

	def __init__(self, what: str = ''):
		"""
		[MathObjectsException(Exception)] - Base exception for all errors raised by math objects
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)


class MatrixException(MathObjectsException):
	"""
	[MatrixException(MathObjectsException)] - Exception representing an invalid matrix or an operation undefined for it
	"""


class OutOfBoundsException(MatrixException, IndexError):
	"""
	[OutOfBoundsException(MatrixException, IndexError)] - Exception representing an index or dimension outside the allowed range
	"""


class DimensionException(MatrixException, ValueError):
	"""
	[DimensionException(MatrixException, ValueError)] - Exception representing incompatible matrix dimensions
	"""


class DivisionByZeroException(MatrixException, ZeroDivisionError):
	"""
	[DivisionByZeroException(MatrixException, ZeroDivisionError)] - Exception representing a zero pivot met during elimination
	"""


class UnsupportedOperationException(MatrixException):
	"""
	[UnsupportedOperationException(MatrixException)] - Exception representing an operation a matrix cannot perform
	"""


class RationalException(MathObjectsException, ValueError):
	"""
	[RationalException(MathObjectsException, ValueError)] - Exception representing an invalid rational number
	"""
