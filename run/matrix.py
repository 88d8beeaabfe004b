import random
import sys

from MathObjects.LinearAlgebra.Matrix import Matrix
from MathObjects.Logger import Logger
from MathObjects import Exceptions


if __name__ == '__main__':
	logger: Logger = Logger(sys.stdout)
	generator: random.Random = random.Random(int(sys.argv[1]) if len(sys.argv) > 1 else None)

	try:
		matrix: Matrix = Matrix([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
		logger.info(f'Matrix {matrix!r}:\n{matrix}')
		logger.info(f'Trace: {matrix.trace()}')
		logger.info(f'Determinant: {matrix.determinant()}')
		echelon, swaps = matrix.row_echelon()
		logger.info(f'Row echelon form ({swaps} swaps):\n{echelon}')
		logger.info(f'Reduced row echelon form:\n{matrix.rref()}')
		logger.info(f'Transposed:\n{matrix.transpose()}')

		augmented: Matrix = matrix.join_right(Matrix([[8], [-11], [-3]]))
		logger.info(f'Solution of the augmented system:\n{augmented.rref().submatrix(0, 3, 2, 3)}')

		large: Matrix = Matrix.random_int(6, 6, -9, 9, generator)
		logger.info(f'Random matrix:\n{large}')
		logger.info(f'Determinant by elimination: {large.determinant()}')

		Matrix([[1, 2], [3]])
	except Exceptions.MatrixException as err:
		logger.error(f'{type(err).__name__}: {err}')
	finally:
		logger.detach()
