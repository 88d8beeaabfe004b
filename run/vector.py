import sys

from MathObjects.LinearAlgebra.Matrix import Matrix
from MathObjects.LinearAlgebra.Vector import Vector, VectorType
from MathObjects.Logger import Logger
from MathObjects import Exceptions


if __name__ == '__main__':
	with Logger(sys.stdout) as logger:
		a: Vector = Vector.from_array([1, 2, 3])
		b: Vector = Vector.from_array([4, 5, 6], VectorType.ROW)
		logger.info(f'a = {a.to_plain_array()} ({a.vector_type.name})')
		logger.info(f'b = {b.to_plain_array()} ({b.vector_type.name})')
		logger.info(f'a . b = {a.dot_product(b)}')
		logger.info(f'a x b = {a.cross_product(b).to_plain_array()}')
		logger.info(f'a * b =\n{a.multiply(b)}')
		logger.info(f'b * a = {b.multiply(a)}')
		logger.info(f'M * a = {(Matrix.identity(3) * 2).multiply(a).to_plain_array()}')

		try:
			a.m_multiply(b)
		except Exceptions.MatrixException as err:
			logger.warn(f'{type(err).__name__}: {err}')
